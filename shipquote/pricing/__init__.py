"""
Pricing — currency table, tariff and quote pipeline.

- currency_table: static currency table, load/initialisation, lookup
- tariff: tiered per-kg shipping cost and insurance surcharge
- calculator: CostBreakdown aggregation and memoised recompute trigger
- payment: charge handed to the payment processor
- formatting / receipt: presentation and confirmation hand-off
"""

from .calculator import QuoteSession, ShippingCalculator
from .currency_table import (
    CurrencyTable,
    CurrencyTableIntegrityError,
    UnknownCurrency,
    get_currency_table,
    init_currency_table,
    load_currency_table,
)
from .formatting import format_amount, format_breakdown
from .payment import PaymentConfig, build_payment_charge, charge_currency
from .receipt import ConfirmationSummary, build_confirmation_summary
from .tariff import (
    InvalidWeight,
    TariffConfig,
    compute_base_shipping_cost,
    compute_insurance_cost,
    compute_shipping_cost,
    rate_per_kg,
)

__all__ = [
    # Currency table
    "CurrencyTable",
    "CurrencyTableIntegrityError",
    "UnknownCurrency",
    "get_currency_table",
    "init_currency_table",
    "load_currency_table",
    # Tariff
    "InvalidWeight",
    "TariffConfig",
    "compute_base_shipping_cost",
    "compute_insurance_cost",
    "compute_shipping_cost",
    "rate_per_kg",
    # Calculator
    "QuoteSession",
    "ShippingCalculator",
    # Payment
    "PaymentConfig",
    "build_payment_charge",
    "charge_currency",
    # Presentation
    "format_amount",
    "format_breakdown",
    "ConfirmationSummary",
    "build_confirmation_summary",
]
