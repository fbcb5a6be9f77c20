"""
Numerical Safeguards — float checks for money computations

Guards used by the pricing pipeline and its tests:
- validity checks (NaN/Inf never enter a price)
- tolerant float comparison (currency round-trips are exact only up to
  machine precision)
- half-up money rounding for presentation and payment boundaries

CRITICAL INVARIANTS:
1. The pricing core never rounds; rounding happens only at the boundaries
   (display formatting, payment capture) through round_money().
2. NaN/Inf never propagate: validation raises instead of sanitising.
"""

import math
from decimal import ROUND_HALF_UP, Decimal, localcontext
from typing import Final

# =============================================================================
# EPSILON PARAMETERS
# =============================================================================

# Relative tolerance for float comparison (currency round-trips)
EPS_FLOAT_COMPARE_REL: Final[float] = 1e-9

# Absolute tolerance for float comparison (values near zero)
EPS_FLOAT_COMPARE_ABS: Final[float] = 1e-12

# Decimal places used for every presented or charged amount
MONEY_DECIMAL_PLACES: Final[int] = 2


# =============================================================================
# FLOAT VALIDITY
# =============================================================================


def is_valid_float(value: float) -> bool:
    """
    Check that a float is finite (not NaN, not Inf).

    Args:
        value: Value to check

    Returns:
        True if the value is finite
    """
    return math.isfinite(value)


def is_close(
    a: float,
    b: float,
    rel_tol: float = EPS_FLOAT_COMPARE_REL,
    abs_tol: float = EPS_FLOAT_COMPARE_ABS,
) -> bool:
    """
    Compare floats with machine-precision tolerance.

    Algorithm:
        abs(a - b) <= max(rel_tol * max(abs(a), abs(b)), abs_tol)

    Args:
        a: First value
        b: Second value
        rel_tol: Relative tolerance (default: 1e-9)
        abs_tol: Absolute tolerance (default: 1e-12)

    Returns:
        True if the values are close

    Examples:
        >>> is_close(1.0, 1.0 + 1e-10)
        True
        >>> is_close(1.0, 1.1)
        False
    """
    return math.isclose(a, b, rel_tol=rel_tol, abs_tol=abs_tol)


# =============================================================================
# VALIDATION
# =============================================================================


def validate_positive(value: float, name: str) -> None:
    """
    Validate that a value is finite and strictly positive.

    Args:
        value: Value to check
        name: Parameter name (for the error message)

    Raises:
        ValueError: If value <= 0 or NaN/Inf
    """
    if not is_valid_float(value):
        raise ValueError(f"{name} must be a valid float (not NaN/Inf), got {value}")

    if value <= 0:
        raise ValueError(f"{name} must be positive, got {value}")


def validate_non_negative(value: float, name: str) -> None:
    """
    Validate that a value is finite and non-negative.

    Args:
        value: Value to check
        name: Parameter name (for the error message)

    Raises:
        ValueError: If value < 0 or NaN/Inf
    """
    if not is_valid_float(value):
        raise ValueError(f"{name} must be a valid float (not NaN/Inf), got {value}")

    if value < 0:
        raise ValueError(f"{name} must be non-negative, got {value}")


def validate_in_range(
    value: float,
    name: str,
    min_value: float | None = None,
    max_value: float | None = None,
) -> None:
    """
    Validate that a value lies in [min_value, max_value].

    Args:
        value: Value to check
        name: Parameter name (for the error message)
        min_value: Lower bound (optional)
        max_value: Upper bound (optional)

    Raises:
        ValueError: If value is out of range or NaN/Inf
    """
    if not is_valid_float(value):
        raise ValueError(f"{name} must be a valid float (not NaN/Inf), got {value}")

    if min_value is not None and value < min_value:
        raise ValueError(f"{name} must be >= {min_value}, got {value}")

    if max_value is not None and value > max_value:
        raise ValueError(f"{name} must be <= {max_value}, got {value}")


# =============================================================================
# MONEY ROUNDING
# =============================================================================


def round_money(value: float, places: int = MONEY_DECIMAL_PLACES) -> Decimal:
    """
    Round an amount half-up to a fixed number of decimal places.

    The float is first taken at its shortest decimal representation
    (repr), so 2.675 rounds to 2.68 rather than to the binary neighbour.

    Args:
        value: Amount to round (finite)
        places: Number of decimal places (default: 2)

    Returns:
        Rounded Decimal, e.g. Decimal("62971.87")

    Raises:
        ValueError: If value is NaN/Inf or places is negative

    Examples:
        >>> round_money(62971.872)
        Decimal('62971.87')
        >>> round_money(0.125)
        Decimal('0.13')
    """
    if not is_valid_float(value):
        raise ValueError(f"amount must be a valid float (not NaN/Inf), got {value}")
    if places < 0:
        raise ValueError(f"places must be non-negative, got {places}")

    exact = Decimal(repr(float(value)))
    quantum = Decimal(1).scaleb(-places)

    # Integer digits + places must fit in the context precision
    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, max(exact.adjusted(), 0) + places + 2)
        return exact.quantize(quantum, rounding=ROUND_HALF_UP)
