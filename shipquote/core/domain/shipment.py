"""
ShipmentRequest — Shipment data produced by the booking form

Immutable Pydantic model of one pricing request coming from the UI layer.

Only weight_kg and insurance_requested take part in pricing. The remaining
fields (category, dimensions, sender, recipient, message) are carried for
display and for the confirmation hand-off, and must never trigger a
recomputation of the price.
"""

from enum import Enum
from typing import Any, Dict

from pydantic import BaseModel, Field, field_validator

from shipquote.core.contracts import validate_shipment_request


# =============================================================================
# ENUMS
# =============================================================================


class ShipmentCategory(str, Enum):
    """Shipment category offered by the booking form"""

    MAIL = "Mail"
    PARCEL = "Parcel"
    CONTAINER = "Container"


class DestinationCountry(str, Enum):
    """Destination countries served"""

    BENIN = "Benin"
    CHINA = "China"
    FRANCE = "France"


# =============================================================================
# NESTED MODELS
# =============================================================================


class Dimensions(BaseModel):
    """Package dimensions (carried only, not priced)."""

    length: float = Field(0.0, ge=0, allow_inf_nan=False, description="Length")
    width: float = Field(0.0, ge=0, allow_inf_nan=False, description="Width")
    height: float = Field(0.0, ge=0, allow_inf_nan=False, description="Height")

    model_config = {"frozen": True}


class PersonInfo(BaseModel):
    """
    Sender or recipient contact details.

    Fields may be blank while the form is being filled in.
    """

    address: str = Field("", description="Postal address")
    first_name: str = Field("", description="First name")
    last_name: str = Field("", description="Last name")
    contact: str = Field("", description="Phone or other contact")
    email: str = Field("", description="E-mail address")
    country: str = Field("", description="Country of residence")

    model_config = {"frozen": True}

    @property
    def full_name(self) -> str:
        """First and last name joined, blanks dropped."""
        return " ".join(part for part in (self.first_name, self.last_name) if part)


# =============================================================================
# SHIPMENT REQUEST MODEL
# =============================================================================


class ShipmentRequest(BaseModel):
    """
    Shipment request as entered in the booking form.

    Immutable model (frozen=True). Each edit of the form yields a new
    instance; pricing reads pricing_key() only.
    """

    # Priced fields
    weight_kg: float = Field(
        0.0, ge=0, allow_inf_nan=False, description="Gross weight (kg), absent means 0"
    )
    insurance_requested: bool = Field(False, description="Optional insurance surcharge")

    # Carried fields
    category: ShipmentCategory | None = Field(None, description="Shipment category")
    details: str = Field("", description="Free-text description of the contents")
    country: DestinationCountry | None = Field(None, description="Destination country")
    dimensions: Dimensions = Field(default_factory=Dimensions, description="Dimensions")
    sender: PersonInfo = Field(default_factory=PersonInfo, description="Sender")
    recipient: PersonInfo = Field(default_factory=PersonInfo, description="Recipient")
    message: str = Field("", description="Message to the courier")

    model_config = {"frozen": True}

    @field_validator("weight_kg", mode="before")
    @classmethod
    def absent_weight_is_zero(cls, v):
        """An empty weight input means 0 kg."""
        if v is None or v == "":
            return 0.0
        return v

    def pricing_key(self) -> tuple[float, bool]:
        """
        Fields that enter the price computation.

        Returns:
            (weight_kg, insurance_requested)
        """
        return self.weight_kg, self.insurance_requested

    @classmethod
    def from_payload(cls, data: Dict[str, Any]) -> "ShipmentRequest":
        """
        Build a request from the booking form's JSON payload.

        Args:
            data: Payload matching the shipment_request contract

        Returns:
            Validated ShipmentRequest

        Raises:
            jsonschema.ValidationError: If the payload breaks the contract
        """
        validate_shipment_request(data)
        return cls.model_validate(data)
