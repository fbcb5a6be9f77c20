"""
Contract Validation Module

Validates the JSON payloads exchanged with the booking form, the payment
processor and the currency table configuration.
"""

from .validators import (
    COST_BREAKDOWN,
    CURRENCY_TABLE,
    PAYMENT_CHARGE,
    SHIPMENT_REQUEST,
    ContractValidator,
    SchemaLoader,
    get_validator,
    validate_cost_breakdown,
    validate_currency_table,
    validate_payment_charge,
    validate_shipment_request,
)

__all__ = [
    # Contract names
    "CURRENCY_TABLE",
    "SHIPMENT_REQUEST",
    "COST_BREAKDOWN",
    "PAYMENT_CHARGE",
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "get_validator",
    # Functions
    "validate_currency_table",
    "validate_shipment_request",
    "validate_cost_breakdown",
    "validate_payment_charge",
]
