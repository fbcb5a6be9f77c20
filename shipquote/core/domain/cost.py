"""
CostBreakdown — Result of a pricing computation

Immutable Pydantic model with the three priced amounts, all expressed in the
display currency. Amounts are unrounded floats; rounding is a presentation
concern.
"""

from typing import Any, Dict

from pydantic import BaseModel, Field, model_validator

from shipquote.core.contracts import validate_cost_breakdown
from shipquote.core.math.numerical_safeguards import is_close


class CostBreakdown(BaseModel):
    """
    Shipping cost, insurance surcharge and their total.

    Invariant: total == shipping_cost + insurance_cost.
    """

    shipping_cost: float = Field(..., ge=0, allow_inf_nan=False, description="Shipping cost")
    insurance_cost: float = Field(..., ge=0, allow_inf_nan=False, description="Insurance surcharge")
    total: float = Field(..., ge=0, allow_inf_nan=False, description="shipping_cost + insurance_cost")
    currency_code: str = Field(..., pattern=r"^[A-Z]{3}$", description="Display currency code")

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def validate_total(self) -> "CostBreakdown":
        """Total must equal the sum of its components."""
        expected = self.shipping_cost + self.insurance_cost
        if not is_close(self.total, expected):
            raise ValueError(
                f"total {self.total} != shipping_cost + insurance_cost ({expected})"
            )
        return self

    @property
    def is_chargeable(self) -> bool:
        """A zero total cannot be paid."""
        return self.total > 0

    def to_payload(self) -> Dict[str, Any]:
        """JSON payload for the booking form, checked against cost_breakdown."""
        payload = self.model_dump(mode="json")
        validate_cost_breakdown(payload)
        return payload
