"""
Tariff — Tiered per-kilogram shipping rate and insurance surcharge

Pricing is defined once in the base currency and converted outward, so a new
supported currency only needs a currency table entry.

Shipping cost:
    weight_kg == 0                → 0 (no tier lookup, no conversion)
    0 < weight_kg < 7             → weight_kg * 10 (base currency)
    weight_kg >= 7                → weight_kg * 8  (base currency)
    shipping_cost                 = convert(base_cost, base, display)

The tier boundary is inclusive on the heavy tier: exactly 7 kg is billed at
the lower rate of 8.

Insurance:
    insurance_cost = shipping_cost * 0.20 if requested else 0

Insurance is computed on the already converted display-currency shipping
cost (convert first, surcharge second).

Negative weight policy: REJECT with InvalidWeight (no clamp to zero).
"""

from dataclasses import dataclass
from typing import Final

from shipquote.core.domain.currency import Currency
from shipquote.core.math.conversion import convert
from shipquote.core.math.numerical_safeguards import (
    is_valid_float,
    validate_in_range,
    validate_non_negative,
    validate_positive,
)
from shipquote.pricing.currency_table import CurrencyTable, get_currency_table


# =============================================================================
# CONSTANTS
# =============================================================================

# Per-kilogram rate below the heavy threshold (base currency units / kg)
LIGHT_RATE_PER_KG: Final[float] = 10.0

# Per-kilogram rate at or above the heavy threshold (base currency units / kg)
HEAVY_RATE_PER_KG: Final[float] = 8.0

# Weight from which the heavy rate applies (kg, inclusive)
HEAVY_THRESHOLD_KG: Final[float] = 7.0

# Insurance surcharge as a fraction of the shipping cost
INSURANCE_RATE: Final[float] = 0.20


# =============================================================================
# EXCEPTIONS
# =============================================================================


class InvalidWeight(ValueError):
    """Weight is negative, NaN or infinite."""

    def __init__(self, weight_kg: float):
        self.weight_kg = weight_kg
        super().__init__(f"weight_kg must be a finite non-negative number, got {weight_kg}")


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class TariffConfig:
    """Tariff parameters (base currency units)."""

    light_rate_per_kg: float = LIGHT_RATE_PER_KG
    heavy_rate_per_kg: float = HEAVY_RATE_PER_KG
    heavy_threshold_kg: float = HEAVY_THRESHOLD_KG
    insurance_rate: float = INSURANCE_RATE

    def __post_init__(self):
        validate_positive(self.light_rate_per_kg, "light_rate_per_kg")
        validate_positive(self.heavy_rate_per_kg, "heavy_rate_per_kg")
        validate_positive(self.heavy_threshold_kg, "heavy_threshold_kg")
        validate_in_range(self.insurance_rate, "insurance_rate", 0.0, 1.0)


_DEFAULT_TARIFF = TariffConfig()


# =============================================================================
# SHIPPING COST
# =============================================================================


def validate_weight(weight_kg: float) -> None:
    """
    Reject negative or non-finite weights.

    Raises:
        InvalidWeight: If weight_kg < 0 or NaN/Inf
    """
    if not is_valid_float(weight_kg) or weight_kg < 0:
        raise InvalidWeight(weight_kg)


def rate_per_kg(weight_kg: float, config: TariffConfig | None = None) -> float:
    """
    Per-kilogram rate for a (positive) weight.

    Args:
        weight_kg: Weight in kg
        config: Tariff parameters (default: TariffConfig())

    Returns:
        light rate if weight_kg < threshold, heavy rate otherwise
    """
    config = config or _DEFAULT_TARIFF
    if weight_kg < config.heavy_threshold_kg:
        return config.light_rate_per_kg
    return config.heavy_rate_per_kg


def compute_base_shipping_cost(weight_kg: float, config: TariffConfig | None = None) -> float:
    """
    Shipping cost in the base currency.

    Args:
        weight_kg: Weight in kg (>= 0)
        config: Tariff parameters (default: TariffConfig())

    Returns:
        weight_kg * rate_per_kg(weight_kg), or 0 for a zero weight

    Raises:
        InvalidWeight: If weight_kg is negative or NaN/Inf

    Examples:
        >>> compute_base_shipping_cost(5.0)
        50.0
        >>> compute_base_shipping_cost(7.0)
        56.0
    """
    validate_weight(weight_kg)
    if weight_kg <= 0:
        return 0.0
    return weight_kg * rate_per_kg(weight_kg, config)


def compute_shipping_cost(
    weight_kg: float,
    display_currency: Currency,
    table: CurrencyTable | None = None,
    config: TariffConfig | None = None,
) -> float:
    """
    Shipping cost in the display currency.

    Args:
        weight_kg: Weight in kg (>= 0)
        display_currency: Currency to quote in
        table: Currency table providing the base currency
            (default: process-wide table)
        config: Tariff parameters (default: TariffConfig())

    Returns:
        Unrounded shipping cost in display_currency

    Raises:
        InvalidWeight: If weight_kg is negative or NaN/Inf
    """
    base_cost = compute_base_shipping_cost(weight_kg, config)
    if base_cost == 0.0:
        return 0.0

    table = table or get_currency_table()
    return convert(base_cost, table.base, display_currency)


# =============================================================================
# INSURANCE
# =============================================================================


def compute_insurance_cost(
    shipping_cost: float,
    insurance_requested: bool,
    config: TariffConfig | None = None,
) -> float:
    """
    Insurance surcharge on an already converted shipping cost.

    Args:
        shipping_cost: Shipping cost in the display currency
        insurance_requested: Whether insurance was requested
        config: Tariff parameters (default: TariffConfig())

    Returns:
        shipping_cost * insurance_rate if requested, else 0

    Raises:
        ValueError: If shipping_cost is negative or NaN/Inf
    """
    validate_non_negative(shipping_cost, "shipping_cost")
    if not insurance_requested:
        return 0.0
    config = config or _DEFAULT_TARIFF
    return shipping_cost * config.insurance_rate
