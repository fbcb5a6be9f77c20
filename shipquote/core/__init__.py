"""
Core domain models, mathematical primitives, and contracts.

This package contains the building blocks that are independent of the
outer systems (booking form, payment processor, notification dispatcher).
"""
