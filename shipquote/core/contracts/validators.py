"""
JSON Schema Contract Validators

Raw JSON payloads crossing a system boundary are checked against formal JSON
Schema contracts (jsonschema, Draft 2020-12) before they become models, or
after models are serialised for an outer system.

Contracts (shipped in shipquote/core/contracts/schema/):
- currency_table   configuration file → CurrencyTable.from_document
- shipment_request booking form → ShipmentRequest.from_payload
- cost_breakdown   CostBreakdown.to_payload → booking form
- payment_charge   build_payment_charge → payment processor
"""

import json
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, Final

import jsonschema
from jsonschema import Draft202012Validator


# =============================================================================
# CONTRACT NAMES
# =============================================================================

CURRENCY_TABLE: Final[str] = "currency_table"
SHIPMENT_REQUEST: Final[str] = "shipment_request"
COST_BREAKDOWN: Final[str] = "cost_breakdown"
PAYMENT_CHARGE: Final[str] = "payment_charge"


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """
    Reads and meta-validates contract files from a schema directory.

    Args:
        schema_dir: Directory of <name>.json files (default: schema/ next to
            this module)

    Raises:
        RuntimeError: If the directory does not exist
    """

    def __init__(self, schema_dir: Path | None = None):
        self._schema_dir = schema_dir or Path(__file__).parent / "schema"
        if not self._schema_dir.exists():
            raise RuntimeError(f"Schema directory not found: {self._schema_dir}")
        self._schemas: Dict[str, Dict[str, Any]] = {}

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Load a contract by name, once.

        Raises:
            FileNotFoundError: If <schema_name>.json does not exist
            ValueError: If the file is not a valid Draft 2020-12 schema
        """
        if schema_name not in self._schemas:
            schema_path = self._schema_dir / f"{schema_name}.json"
            if not schema_path.exists():
                raise FileNotFoundError(f"Schema not found: {schema_path}")

            with open(schema_path, "r", encoding="utf-8") as f:
                schema = json.load(f)
            try:
                Draft202012Validator.check_schema(schema)
            except jsonschema.SchemaError as e:
                raise ValueError(f"Invalid JSON Schema in {schema_name}.json: {e.message}") from e
            self._schemas[schema_name] = schema

        return self._schemas[schema_name]


_SCHEMA_LOADER = SchemaLoader()


# =============================================================================
# CONTRACT VALIDATOR
# =============================================================================


class ContractValidator:
    """Validates payloads against one packaged contract."""

    def __init__(self, schema_name: str, loader: SchemaLoader | None = None):
        self.schema_name = schema_name
        self.schema = (loader or _SCHEMA_LOADER).load_schema(schema_name)
        self.validator = Draft202012Validator(self.schema)

    def validate(self, data: Dict[str, Any]) -> None:
        """
        Raises:
            jsonschema.ValidationError: First violation found in data
        """
        self.validator.validate(data)

    def __repr__(self) -> str:
        return f"ContractValidator({self.schema_name!r})"


@lru_cache(maxsize=None)
def get_validator(schema_name: str) -> ContractValidator:
    """Shared validator for a packaged contract (compiled once per name)."""
    return ContractValidator(schema_name)


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def validate_currency_table(data: Dict[str, Any]) -> None:
    """Currency table document; raises jsonschema.ValidationError."""
    get_validator(CURRENCY_TABLE).validate(data)


def validate_shipment_request(data: Dict[str, Any]) -> None:
    """Booking form payload; raises jsonschema.ValidationError."""
    get_validator(SHIPMENT_REQUEST).validate(data)


def validate_cost_breakdown(data: Dict[str, Any]) -> None:
    """Serialised CostBreakdown; raises jsonschema.ValidationError."""
    get_validator(COST_BREAKDOWN).validate(data)


def validate_payment_charge(data: Dict[str, Any]) -> None:
    """Serialised PaymentCharge; raises jsonschema.ValidationError."""
    get_validator(PAYMENT_CHARGE).validate(data)
