"""
Formatting — Display strings for priced amounts

Presentation only: the formatted string is never fed back into pricing.
"""

from shipquote.core.domain.cost import CostBreakdown
from shipquote.core.domain.currency import Currency
from shipquote.core.math.numerical_safeguards import round_money


def format_amount(amount: float, currency: Currency) -> str:
    """
    Symbol followed by the amount rounded to 2 decimals.

    Rounding is half-up on the shortest decimal form of the float, so 1.005
    shows as 1.01. A binary-value rounding such as JavaScript toFixed(2)
    would show 1.00 for the same input.

    Examples:
        >>> eur = Currency(code="EUR", symbol="€", name="Euro", rate_to_base=1.0)
        >>> format_amount(50.0, eur)
        '€50.00'
    """
    return f"{currency.symbol}{round_money(amount)}"


def format_breakdown(breakdown: CostBreakdown, currency: Currency) -> dict[str, str]:
    """
    Display strings for every line of a breakdown.

    The insurance line is omitted when no surcharge applies.
    """
    lines = {"shipping": format_amount(breakdown.shipping_cost, currency)}
    if breakdown.insurance_cost > 0:
        lines["insurance"] = format_amount(breakdown.insurance_cost, currency)
    lines["total"] = format_amount(breakdown.total, currency)
    return lines
