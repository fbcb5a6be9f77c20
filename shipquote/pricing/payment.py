"""
Payment — Charge handed to the external payment processor

The total of a quote is charged in the display currency when the processor
accepts it. Otherwise the total is converted again, with the same convert()
used for pricing, into the base currency and charged there (e.g. XOF quotes
are charged in EUR).

The charged amount is rounded half-up to the processor precision; this is the
only rounding applied to a price outside display formatting.
"""

import logging
from dataclasses import dataclass
from typing import Final

from shipquote.core.contracts import validate_payment_charge
from shipquote.core.domain.cost import CostBreakdown
from shipquote.core.domain.currency import Currency
from shipquote.core.domain.payment import PaymentCharge
from shipquote.core.math.conversion import convert
from shipquote.core.math.numerical_safeguards import round_money
from shipquote.pricing.currency_table import CurrencyTable, get_currency_table

logger = logging.getLogger(__name__)


# =============================================================================
# CONSTANTS
# =============================================================================

# Currencies the payment processor settles directly
ACCEPTED_CURRENCY_CODES: Final[tuple[str, ...]] = ("EUR", "CNY")

# Purchase description shown by the processor
CHARGE_DESCRIPTION: Final[str] = "Axoxia Shipping Service"


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class PaymentConfig:
    """Payment processor parameters."""

    accepted_currency_codes: tuple[str, ...] = ACCEPTED_CURRENCY_CODES
    description: str = CHARGE_DESCRIPTION

    def __post_init__(self):
        if not self.accepted_currency_codes:
            raise ValueError("accepted_currency_codes must not be empty")

    def accepts(self, currency: Currency) -> bool:
        """True if the processor settles this currency directly."""
        return currency.code in self.accepted_currency_codes


# =============================================================================
# CHARGE
# =============================================================================


def charge_currency(
    currency: Currency,
    table: CurrencyTable | None = None,
    config: PaymentConfig | None = None,
) -> Currency:
    """
    Currency the processor will be charged in.

    Args:
        currency: Display currency of the quote
        table: Currency table (default: process-wide table)
        config: Payment parameters (default: PaymentConfig())

    Returns:
        currency if accepted, otherwise the base currency
    """
    config = config or PaymentConfig()
    if config.accepts(currency):
        return currency
    table = table or get_currency_table()
    return table.base


def build_payment_charge(
    breakdown: CostBreakdown,
    currency: Currency,
    table: CurrencyTable | None = None,
    config: PaymentConfig | None = None,
) -> PaymentCharge:
    """
    Build the charge for a quote.

    Args:
        breakdown: Quote to charge
        currency: Display currency of the quote
        table: Currency table (default: process-wide table)
        config: Payment parameters (default: PaymentConfig())

    Returns:
        PaymentCharge with the rounded amount in the charged currency

    Raises:
        ValueError: If the total is zero or rounds to zero in the charged currency
        ValueError: If currency does not match the quote
        jsonschema.ValidationError: If the charge breaks the payment_charge
            contract
    """
    config = config or PaymentConfig()
    table = table or get_currency_table()

    if breakdown.currency_code != currency.code:
        raise ValueError(
            f"Quote is in {breakdown.currency_code}, display currency is {currency.code}"
        )
    if not breakdown.is_chargeable:
        raise ValueError("Cannot charge a zero total")

    target = charge_currency(currency, table, config)
    amount = breakdown.total
    if target.code != currency.code:
        amount = convert(breakdown.total, currency, target)
        logger.info(
            "Display currency %s not accepted by the processor, charging in %s",
            currency.code,
            target.code,
        )

    # A positive total below half a cent still rounds to nothing
    rounded = round_money(amount)
    if rounded <= 0:
        raise ValueError(f"Cannot charge a zero total ({amount} {target.code} rounds to {rounded})")

    charge = PaymentCharge(
        amount=rounded,
        currency_code=target.code,
        description=config.description,
        source_total=breakdown.total,
        source_currency_code=currency.code,
    )
    validate_payment_charge(charge.model_dump(mode="json"))
    return charge
