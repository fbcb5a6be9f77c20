"""
PaymentCharge — Amount handed to the external payment processor

Immutable Pydantic model. The charged amount is already rounded to the
processor's precision; the unrounded source total is kept alongside for
reconciliation.
"""

from decimal import Decimal

from pydantic import BaseModel, Field


class PaymentCharge(BaseModel):
    """
    Charge request for the payment capture flow.

    currency_code may differ from source_currency_code when the display
    currency is not accepted by the processor.
    """

    amount: Decimal = Field(..., gt=0, decimal_places=2, description="Amount to charge")
    currency_code: str = Field(..., pattern=r"^[A-Z]{3}$", description="Charged currency")
    description: str = Field(..., min_length=1, description="Purchase description")

    # Reconciliation
    source_total: float = Field(
        ..., gt=0, allow_inf_nan=False, description="Unrounded total in the display currency"
    )
    source_currency_code: str = Field(
        ..., pattern=r"^[A-Z]{3}$", description="Display currency of the quote"
    )

    model_config = {"frozen": True}

    @property
    def was_converted(self) -> bool:
        """True when the charge was moved to another currency."""
        return self.currency_code != self.source_currency_code
