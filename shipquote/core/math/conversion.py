"""
Conversion — Currency conversion through the base currency

Every conversion goes through the base currency in two steps:

    amount_in_base = amount / from_currency.rate_to_base
    result         = amount_in_base * to_currency.rate_to_base

CRITICAL INVARIANTS:
1. No direct cross-rate: convert(x, A, B) is bit-identical to
   convert(convert(x, A, base), base, B).
2. No rounding inside the conversion; the result is a raw float.
3. Non-negative amount + positive rates (table invariant) → non-negative result.

Conversion is a linear scalar multiply, so applying a percentage surcharge
before or after converting gives the same figure. A non-linear conversion
(e.g. tiered FX fees) would break that equivalence.
"""

from shipquote.core.domain.currency import Currency


def to_base(amount: float, from_currency: Currency) -> float:
    """
    Convert an amount into the base currency.

    Args:
        amount: Amount in from_currency
        from_currency: Currency of the amount

    Returns:
        Amount in the base currency
    """
    return amount / from_currency.rate_to_base


def from_base(amount_in_base: float, to_currency: Currency) -> float:
    """
    Convert a base-currency amount into to_currency.

    Args:
        amount_in_base: Amount in the base currency
        to_currency: Target currency

    Returns:
        Amount in to_currency
    """
    return amount_in_base * to_currency.rate_to_base


def convert(amount: float, from_currency: Currency, to_currency: Currency) -> float:
    """
    Convert an amount between two currencies via the base currency.

    The two-step path is taken even when from_currency == to_currency
    (a no-op up to floating-point identity).

    Args:
        amount: Amount in from_currency
        from_currency: Source currency
        to_currency: Target currency

    Returns:
        Unrounded amount in to_currency

    Examples:
        >>> eur = Currency(code="EUR", symbol="€", name="Euro", rate_to_base=1.0)
        >>> xof = Currency(code="XOF", symbol="CFA", name="CFA Franc", rate_to_base=655.957)
        >>> round(convert(80.0, eur, xof), 2)
        52476.56
    """
    return from_base(to_base(amount, from_currency), to_currency)
