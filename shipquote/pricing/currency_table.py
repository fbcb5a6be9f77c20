"""
CurrencyTable — Static table of supported currencies

Ordered, immutable collection of Currency entries with O(1) lookup by code.

The table is process-wide configuration: it is loaded and validated once
(init_currency_table) and only read afterwards. Rates are fixed
approximations, NOT live market rates; a deployment must refresh the
packaged table when they drift.

CRITICAL INVARIANTS (checked at load time, never per call):
1. Currency codes are unique.
2. Exactly one currency has rate_to_base == 1 (the base currency).
3. Every rate is finite and > 0.
4. Lookup of an unknown code raises UnknownCurrency; there is no default.
"""

import json
import logging
import threading
from pathlib import Path
from typing import Any, Dict, Final, Iterable, Iterator

from jsonschema import ValidationError as SchemaValidationError
from pydantic import ValidationError

from shipquote.core.contracts import validate_currency_table
from shipquote.core.domain.currency import Currency

logger = logging.getLogger(__name__)


# =============================================================================
# CONSTANTS
# =============================================================================

# Rate that identifies the base currency
BASE_RATE: Final[float] = 1.0

# Packaged default table (EUR base, XOF, CNY)
DEFAULT_TABLE_PATH: Final[Path] = Path(__file__).parent / "data" / "currencies.json"


# =============================================================================
# EXCEPTIONS
# =============================================================================


class UnknownCurrency(LookupError):
    """
    Lookup of a currency code that is not in the table.

    Fatal to the calling computation: falling back to another currency would
    misprice the shipment.
    """

    def __init__(self, code: str, known_codes: Iterable[str]):
        self.code = code
        self.known_codes = tuple(known_codes)
        super().__init__(
            f"Unknown currency '{code}' (supported: {', '.join(self.known_codes)})"
        )


class CurrencyTableIntegrityError(ValueError):
    """Currency table configuration violates a table invariant."""


# =============================================================================
# CURRENCY TABLE
# =============================================================================


class CurrencyTable:
    """
    Ordered currency table with lookup by code.

    Args:
        currencies: Currency entries, in display order
        base_code: Declared base currency code (optional). When given it must
            name the single currency with rate_to_base == 1.

    Raises:
        CurrencyTableIntegrityError: If a table invariant is violated
    """

    def __init__(self, currencies: Iterable[Currency], base_code: str | None = None):
        self._currencies = tuple(currencies)
        if not self._currencies:
            raise CurrencyTableIntegrityError("Currency table is empty")

        self._by_code: Dict[str, Currency] = {}
        for currency in self._currencies:
            if currency.code in self._by_code:
                raise CurrencyTableIntegrityError(f"Duplicate currency code '{currency.code}'")
            self._by_code[currency.code] = currency

        base_candidates = [c for c in self._currencies if c.rate_to_base == BASE_RATE]
        if len(base_candidates) != 1:
            found = ", ".join(c.code for c in base_candidates) or "none"
            raise CurrencyTableIntegrityError(
                f"Exactly one currency must have rate_to_base == 1, found: {found}"
            )
        self._base = base_candidates[0]

        if base_code is not None and base_code != self._base.code:
            raise CurrencyTableIntegrityError(
                f"Declared base currency '{base_code}' does not match "
                f"the rate-1 currency '{self._base.code}'"
            )

    @classmethod
    def from_document(cls, data: Dict[str, Any]) -> "CurrencyTable":
        """
        Build a table from a currency table document.

        Validation order: JSON Schema contract → Currency models → table
        invariants.

        Args:
            data: Document {"base_currency": ..., "currencies": [...]}

        Returns:
            Validated CurrencyTable

        Raises:
            CurrencyTableIntegrityError: On any validation failure
        """
        try:
            validate_currency_table(data)
        except SchemaValidationError as e:
            raise CurrencyTableIntegrityError(f"Invalid currency table: {e.message}") from e

        try:
            currencies = [Currency(**entry) for entry in data["currencies"]]
        except ValidationError as e:
            raise CurrencyTableIntegrityError(f"Invalid currency entry: {e}") from e

        return cls(currencies, base_code=data["base_currency"])

    @property
    def base(self) -> Currency:
        """The base currency (rate_to_base == 1)."""
        return self._base

    @property
    def currencies(self) -> tuple[Currency, ...]:
        """All currencies in display order."""
        return self._currencies

    @property
    def codes(self) -> tuple[str, ...]:
        """All currency codes in display order."""
        return tuple(c.code for c in self._currencies)

    def get(self, code: str) -> Currency:
        """
        Look up a currency by code (case-insensitive).

        Args:
            code: Currency code (e.g. 'XOF')

        Returns:
            Matching Currency

        Raises:
            UnknownCurrency: If the code is not a string or not in the table
        """
        if not isinstance(code, str):
            raise UnknownCurrency(str(code), self.codes)
        try:
            return self._by_code[code.upper()]
        except KeyError:
            raise UnknownCurrency(code, self.codes) from None

    def __contains__(self, code: object) -> bool:
        return isinstance(code, str) and code.upper() in self._by_code

    def __iter__(self) -> Iterator[Currency]:
        return iter(self._currencies)

    def __len__(self) -> int:
        return len(self._currencies)

    def __repr__(self) -> str:
        return f"CurrencyTable(base={self._base.code!r}, codes={self.codes!r})"


# =============================================================================
# LOADING
# =============================================================================


def load_currency_table(path: Path | str | None = None) -> CurrencyTable:
    """
    Load and validate a currency table from a JSON file.

    Args:
        path: JSON file path (default: packaged currencies.json)

    Returns:
        Validated CurrencyTable

    Raises:
        FileNotFoundError: If the file does not exist
        CurrencyTableIntegrityError: If the file is not a valid table
    """
    source = Path(path) if path is not None else DEFAULT_TABLE_PATH

    with open(source, "r", encoding="utf-8") as f:
        try:
            data = json.load(f)
        except json.JSONDecodeError as e:
            raise CurrencyTableIntegrityError(f"Currency table {source} is not valid JSON: {e}") from e

    table = CurrencyTable.from_document(data)
    logger.info(
        "Loaded currency table from %s: base=%s codes=%s",
        source,
        table.base.code,
        ",".join(table.codes),
    )
    return table


# Process-wide table, set by init_currency_table()
_CURRENCY_TABLE: CurrencyTable | None = None
_CURRENCY_TABLE_LOCK = threading.Lock()


def init_currency_table(path: Path | str | None = None) -> CurrencyTable:
    """
    Explicit startup step: load the process-wide currency table.

    Args:
        path: JSON file path (default: packaged currencies.json)

    Returns:
        The installed CurrencyTable
    """
    global _CURRENCY_TABLE
    table = load_currency_table(path)
    with _CURRENCY_TABLE_LOCK:
        _CURRENCY_TABLE = table
    return table


def get_currency_table() -> CurrencyTable:
    """
    Process-wide currency table.

    Loads the packaged default on first access if init_currency_table() has
    not been called. Concurrent first callers load it exactly once.
    """
    global _CURRENCY_TABLE
    table = _CURRENCY_TABLE
    if table is not None:
        return table

    with _CURRENCY_TABLE_LOCK:
        if _CURRENCY_TABLE is None:
            _CURRENCY_TABLE = load_currency_table()
        return _CURRENCY_TABLE
