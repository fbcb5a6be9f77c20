"""
shipquote — shipping price and currency conversion engine.

Computes the shipping cost, optional insurance surcharge and total of a
shipment in the selected display currency, from a static currency table.
"""

from shipquote.core.domain import (
    CostBreakdown,
    Currency,
    PaymentCharge,
    ShipmentRequest,
)
from shipquote.core.math.conversion import convert
from shipquote.pricing import (
    CurrencyTable,
    CurrencyTableIntegrityError,
    InvalidWeight,
    QuoteSession,
    ShippingCalculator,
    TariffConfig,
    UnknownCurrency,
    compute_insurance_cost,
    compute_shipping_cost,
    get_currency_table,
    init_currency_table,
)

__version__ = "0.1.0"

__all__ = [
    "CostBreakdown",
    "Currency",
    "PaymentCharge",
    "ShipmentRequest",
    "convert",
    "CurrencyTable",
    "CurrencyTableIntegrityError",
    "InvalidWeight",
    "QuoteSession",
    "ShippingCalculator",
    "TariffConfig",
    "UnknownCurrency",
    "compute_insurance_cost",
    "compute_shipping_cost",
    "get_currency_table",
    "init_currency_table",
]
