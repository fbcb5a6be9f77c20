"""
Receipt — Confirmation data handed to the notification dispatcher

Collects what a shipping confirmation shows: who ships what to whom and the
formatted total. Rendering and delivery belong to the dispatcher.
"""

from pydantic import BaseModel, Field

from shipquote.core.domain.cost import CostBreakdown
from shipquote.core.domain.currency import Currency
from shipquote.core.domain.shipment import ShipmentRequest
from shipquote.pricing.formatting import format_amount


class ConfirmationSummary(BaseModel):
    """Shipping confirmation content (immutable)."""

    sender_name: str = Field(..., description="Sender full name")
    sender_email: str = Field(..., description="Confirmation recipient address")
    recipient_name: str = Field(..., description="Recipient full name")
    category: str | None = Field(None, description="Shipment category")
    country: str | None = Field(None, description="Destination country")
    weight_kg: float = Field(..., ge=0, description="Gross weight (kg)")
    total: float = Field(..., ge=0, description="Unrounded total")
    currency_code: str = Field(..., pattern=r"^[A-Z]{3}$", description="Display currency")
    formatted_total: str = Field(..., description="Total as displayed, e.g. '€50.00'")
    paid: bool = Field(False, description="Payment captured")

    model_config = {"frozen": True}


def build_confirmation_summary(
    request: ShipmentRequest,
    breakdown: CostBreakdown,
    currency: Currency,
    paid: bool = False,
) -> ConfirmationSummary:
    """
    Confirmation content for a priced shipment.

    Args:
        request: Shipment request
        breakdown: Its quote
        currency: Display currency of the quote
        paid: Whether the payment was captured

    Raises:
        ValueError: If the quote is not in currency
    """
    if breakdown.currency_code != currency.code:
        raise ValueError(
            f"Quote is in {breakdown.currency_code}, display currency is {currency.code}"
        )

    return ConfirmationSummary(
        sender_name=request.sender.full_name,
        sender_email=request.sender.email,
        recipient_name=request.recipient.full_name,
        category=request.category.value if request.category else None,
        country=request.country.value if request.country else None,
        weight_kg=request.weight_kg,
        total=breakdown.total,
        currency_code=currency.code,
        formatted_total=format_amount(breakdown.total, currency),
        paid=paid,
    )
