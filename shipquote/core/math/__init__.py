"""
Core math modules.

Float guards, money rounding and currency conversion.
"""

# Numerical Safeguards
from shipquote.core.math.numerical_safeguards import (
    # Epsilon constants
    EPS_FLOAT_COMPARE_ABS,
    EPS_FLOAT_COMPARE_REL,
    MONEY_DECIMAL_PLACES,
    # Float checks
    is_close,
    is_valid_float,
    # Money rounding
    round_money,
    # Validation
    validate_in_range,
    validate_non_negative,
    validate_positive,
)

# Conversion
from shipquote.core.math.conversion import (
    convert,
    from_base,
    to_base,
)

__all__ = [
    # Numerical Safeguards — Epsilon constants
    "EPS_FLOAT_COMPARE_ABS",
    "EPS_FLOAT_COMPARE_REL",
    "MONEY_DECIMAL_PLACES",
    # Numerical Safeguards — Float checks
    "is_close",
    "is_valid_float",
    # Numerical Safeguards — Money rounding
    "round_money",
    # Numerical Safeguards — Validation
    "validate_in_range",
    "validate_non_negative",
    "validate_positive",
    # Conversion — Functions
    "convert",
    "from_base",
    "to_base",
]
