"""
Domain models and value objects.

Contains the pricing value types: Currency, ShipmentRequest, CostBreakdown,
PaymentCharge.
"""

from shipquote.core.domain.cost import CostBreakdown
from shipquote.core.domain.currency import Currency
from shipquote.core.domain.payment import PaymentCharge
from shipquote.core.domain.shipment import (
    DestinationCountry,
    Dimensions,
    PersonInfo,
    ShipmentCategory,
    ShipmentRequest,
)

__all__ = [
    # Currency model
    "Currency",
    # Shipment model
    "ShipmentRequest",
    "ShipmentCategory",
    "DestinationCountry",
    "Dimensions",
    "PersonInfo",
    # Cost model
    "CostBreakdown",
    # Payment model
    "PaymentCharge",
]
