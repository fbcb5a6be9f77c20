"""
ShippingCalculator — Total aggregation and recompute trigger

ShippingCalculator.quote() runs the full pricing pipeline:
1. Shipping cost in the base currency (tiered rate)
2. Conversion to the display currency
3. Insurance surcharge on the converted shipping cost
4. total = shipping_cost + insurance_cost

QuoteSession keeps the last CostBreakdown of one booking form and recomputes
it only when a trigger field changes. The trigger set is exactly
(weight_kg, insurance_requested, display currency code); edits of any other
shipment field return the previous breakdown unchanged.
"""

import logging
from typing import Any, Dict

from shipquote.core.domain.cost import CostBreakdown
from shipquote.core.domain.currency import Currency
from shipquote.core.domain.shipment import ShipmentRequest
from shipquote.pricing.currency_table import (
    CurrencyTable,
    UnknownCurrency,
    get_currency_table,
)
from shipquote.pricing.tariff import (
    TariffConfig,
    compute_insurance_cost,
    compute_shipping_cost,
)

logger = logging.getLogger(__name__)

TriggerKey = tuple[float, bool, str]


class ShippingCalculator:
    """
    Stateless pricing pipeline.

    Reads only the immutable currency table and tariff config; safe to call
    concurrently without coordination.
    """

    def __init__(
        self,
        table: CurrencyTable | None = None,
        config: TariffConfig | None = None,
    ):
        """
        Args:
            table: Currency table (default: process-wide table)
            config: Tariff parameters (default: TariffConfig())
        """
        self.table = table or get_currency_table()
        self.config = config or TariffConfig()

    def resolve_currency(self, currency: Currency | str) -> Currency:
        """
        Currency model for a code, or the model itself.

        A model is accepted only if it is the table entry for its code, so a
        quote never uses a rate the table does not hold.

        Raises:
            UnknownCurrency: If the code or model is not in the table
        """
        if isinstance(currency, Currency):
            if self.table.get(currency.code) != currency:
                raise UnknownCurrency(currency.code, self.table.codes)
            return currency
        return self.table.get(currency)

    def quote(self, request: ShipmentRequest, currency: Currency | str) -> CostBreakdown:
        """
        Price a shipment in the display currency.

        Args:
            request: Shipment request from the booking form
            currency: Display currency (model or code)

        Returns:
            CostBreakdown in the display currency, unrounded

        Raises:
            UnknownCurrency: If currency is not in the table
            InvalidWeight: If the weight is invalid
        """
        display_currency = self.resolve_currency(currency)
        weight_kg, insurance_requested = request.pricing_key()

        shipping_cost = compute_shipping_cost(
            weight_kg, display_currency, table=self.table, config=self.config
        )
        insurance_cost = compute_insurance_cost(
            shipping_cost, insurance_requested, config=self.config
        )

        return CostBreakdown(
            shipping_cost=shipping_cost,
            insurance_cost=insurance_cost,
            total=shipping_cost + insurance_cost,
            currency_code=display_currency.code,
        )

    def quote_payload(self, payload: Dict[str, Any], currency: Currency | str) -> Dict[str, Any]:
        """
        quote() at the booking form's JSON boundary.

        Args:
            payload: shipment_request payload
            currency: Display currency (model or code)

        Returns:
            cost_breakdown payload

        Raises:
            jsonschema.ValidationError: If the payload breaks the contract
            UnknownCurrency: If currency is not in the table
        """
        request = ShipmentRequest.from_payload(payload)
        return self.quote(request, currency).to_payload()


class QuoteSession:
    """
    Memoised quote for one booking form.

    The cached breakdown is keyed on trigger_key(); refresh() recomputes only
    when that key changes.
    """

    def __init__(self, calculator: ShippingCalculator | None = None):
        self.calculator = calculator or ShippingCalculator()
        self._key: TriggerKey | None = None
        self._breakdown: CostBreakdown | None = None
        self.recompute_count = 0

    @staticmethod
    def trigger_key(request: ShipmentRequest, currency: Currency) -> TriggerKey:
        """(weight_kg, insurance_requested, currency code)"""
        weight_kg, insurance_requested = request.pricing_key()
        return weight_kg, insurance_requested, currency.code

    @property
    def breakdown(self) -> CostBreakdown | None:
        """Last computed breakdown (None before the first refresh)."""
        return self._breakdown

    def refresh(self, request: ShipmentRequest, currency: Currency | str) -> CostBreakdown:
        """
        Breakdown for the current form state.

        Args:
            request: Current shipment request
            currency: Selected display currency (model or code)

        Returns:
            Cached breakdown if no trigger field changed, else a new one
        """
        display_currency = self.calculator.resolve_currency(currency)
        key = self.trigger_key(request, display_currency)

        if self._breakdown is not None and key == self._key:
            logger.debug("Quote unchanged for key=%s", key)
            return self._breakdown

        self._breakdown = self.calculator.quote(request, display_currency)
        self._key = key
        self.recompute_count += 1
        logger.debug("Quote recomputed for key=%s total=%s", key, self._breakdown.total)
        return self._breakdown

    def invalidate(self) -> None:
        """Drop the cached breakdown; the next refresh recomputes."""
        self._key = None
        self._breakdown = None
