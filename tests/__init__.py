"""
Test suite for shipquote

Contains:
- tests/unit/          : Unit tests for individual modules and the pricing pipeline
"""
