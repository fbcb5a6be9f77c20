"""
Currency — Supported currency value model

Immutable Pydantic model for one entry of the currency table.

rate_to_base semantics: 1 unit of the base currency = rate_to_base units of
this currency. The base currency itself has rate_to_base == 1.
"""

from pydantic import BaseModel, Field


# =============================================================================
# CURRENCY MODEL
# =============================================================================


class Currency(BaseModel):
    """
    Supported currency with a fixed exchange rate relative to the base currency.

    Immutable model (frozen=True); the currency table is static configuration
    and never changes at runtime.
    """

    code: str = Field(..., pattern=r"^[A-Z]{3}$", description="ISO 4217 code (e.g. 'EUR')")
    symbol: str = Field(..., min_length=1, description="Display symbol (e.g. '€')")
    name: str = Field(..., min_length=1, description="Display name (e.g. 'Euro')")
    rate_to_base: float = Field(
        ...,
        gt=0,
        allow_inf_nan=False,
        description="Units of this currency per 1 unit of the base currency",
    )

    model_config = {"frozen": True}

    @property
    def is_base(self) -> bool:
        """True for the base currency (rate_to_base == 1)."""
        return self.rate_to_base == 1.0
