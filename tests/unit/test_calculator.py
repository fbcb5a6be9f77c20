"""
Tests for ShippingCalculator and QuoteSession

Checks:
1. End-to-end scenarios (base currency without insurance, XOF with insurance)
2. total == shipping_cost + insurance_cost, idempotence
3. Zero-weight law regardless of insurance
4. Recompute trigger: only weight, insurance flag and display currency
   trigger a recomputation; other shipment fields leave the quote unchanged
"""

import logging

import pytest

from shipquote.core.domain import (
    CostBreakdown,
    Currency,
    DestinationCountry,
    Dimensions,
    PersonInfo,
    ShipmentCategory,
    ShipmentRequest,
)
from shipquote.pricing.calculator import QuoteSession, ShippingCalculator
from shipquote.pricing.currency_table import CurrencyTable, UnknownCurrency, load_currency_table
from shipquote.pricing.tariff import TariffConfig


# =============================================================================
# FIXTURES
# =============================================================================


@pytest.fixture
def table() -> CurrencyTable:
    return load_currency_table()


@pytest.fixture
def calculator(table: CurrencyTable) -> ShippingCalculator:
    return ShippingCalculator(table=table)


@pytest.fixture
def parcel_request() -> ShipmentRequest:
    """Fully filled booking form: 10 kg parcel to Benin, insured."""
    return ShipmentRequest(
        weight_kg=10.0,
        insurance_requested=True,
        category=ShipmentCategory.PARCEL,
        details="Clothes and books",
        country=DestinationCountry.BENIN,
        dimensions=Dimensions(length=40.0, width=30.0, height=20.0),
        sender=PersonInfo(
            address="12 rue de Lyon, Paris",
            first_name="Claire",
            last_name="Martin",
            contact="+33 6 00 00 00 00",
            email="claire@example.com",
            country="France",
        ),
        recipient=PersonInfo(
            address="Lot 45, Cotonou",
            first_name="Koffi",
            last_name="Agbo",
            contact="+229 00 00 00 00",
            email="koffi@example.com",
            country="Benin",
        ),
        message="Fragile",
    )


# =============================================================================
# SHIPPING CALCULATOR
# =============================================================================


class TestShippingCalculator:
    """ShippingCalculator.quote"""

    def test_scenario_base_currency_no_insurance(self, calculator: ShippingCalculator) -> None:
        """5 kg, no insurance, EUR → 50 / 0 / 50"""
        breakdown = calculator.quote(ShipmentRequest(weight_kg=5.0), "EUR")
        assert breakdown.shipping_cost == 50.0
        assert breakdown.insurance_cost == 0.0
        assert breakdown.total == 50.0
        assert breakdown.currency_code == "EUR"

    def test_scenario_xof_with_insurance(
        self, calculator: ShippingCalculator, parcel_request: ShipmentRequest
    ) -> None:
        """10 kg, insured, XOF (655.957) → 52476.56 / 10495.312 / 62971.872"""
        breakdown = calculator.quote(parcel_request, "XOF")
        assert breakdown.shipping_cost == pytest.approx(52476.56, rel=1e-12)
        assert breakdown.insurance_cost == pytest.approx(10495.312, rel=1e-12)
        assert breakdown.total == pytest.approx(62971.872, rel=1e-12)
        assert breakdown.currency_code == "XOF"

    def test_total_is_sum(self, calculator: ShippingCalculator, table: CurrencyTable) -> None:
        for currency in table:
            for weight_kg in (0.5, 6.999, 7.0, 7.001, 25.0):
                request = ShipmentRequest(weight_kg=weight_kg, insurance_requested=True)
                breakdown = calculator.quote(request, currency)
                assert breakdown.total == breakdown.shipping_cost + breakdown.insurance_cost

    def test_accepts_currency_model(self, calculator: ShippingCalculator, table: CurrencyTable) -> None:
        by_model = calculator.quote(ShipmentRequest(weight_kg=3.0), table.get("CNY"))
        by_code = calculator.quote(ShipmentRequest(weight_kg=3.0), "CNY")
        assert by_model == by_code

    def test_zero_weight_law(self, calculator: ShippingCalculator, table: CurrencyTable) -> None:
        for currency in table:
            for insured in (False, True):
                breakdown = calculator.quote(
                    ShipmentRequest(weight_kg=0.0, insurance_requested=insured), currency
                )
                assert breakdown.shipping_cost == 0.0
                assert breakdown.insurance_cost == 0.0
                assert breakdown.total == 0.0
                assert not breakdown.is_chargeable

    def test_absent_weight_is_zero(self, calculator: ShippingCalculator) -> None:
        breakdown = calculator.quote(ShipmentRequest(weight_kg=None, insurance_requested=True), "EUR")
        assert breakdown.total == 0.0

    def test_idempotent(self, calculator: ShippingCalculator, parcel_request: ShipmentRequest) -> None:
        first = calculator.quote(parcel_request, "XOF")
        second = calculator.quote(parcel_request, "XOF")
        assert first == second
        assert first.total == second.total

    def test_unknown_currency(self, calculator: ShippingCalculator) -> None:
        with pytest.raises(UnknownCurrency):
            calculator.quote(ShipmentRequest(weight_kg=5.0), "USD")

    @pytest.mark.parametrize("currency", [None, 978, ""])
    def test_missing_selection_is_unknown_currency(self, calculator: ShippingCalculator, currency) -> None:
        with pytest.raises(UnknownCurrency):
            calculator.quote(ShipmentRequest(weight_kg=5.0), currency)

    def test_currency_model_outside_table_rejected(self, calculator: ShippingCalculator) -> None:
        usd = Currency(code="USD", symbol="$", name="US Dollar", rate_to_base=1.08)
        with pytest.raises(UnknownCurrency, match="USD"):
            calculator.quote(ShipmentRequest(weight_kg=5.0), usd)

    def test_currency_model_with_other_rate_rejected(
        self, calculator: ShippingCalculator, table: CurrencyTable
    ) -> None:
        stale_xof = table.get("XOF").model_copy(update={"rate_to_base": 650.0})
        with pytest.raises(UnknownCurrency, match="XOF"):
            calculator.quote(ShipmentRequest(weight_kg=5.0), stale_xof)

    def test_custom_tariff(self, table: CurrencyTable) -> None:
        calculator = ShippingCalculator(table=table, config=TariffConfig(insurance_rate=0.1))
        breakdown = calculator.quote(ShipmentRequest(weight_kg=5.0, insurance_requested=True), "EUR")
        assert breakdown.insurance_cost == pytest.approx(5.0, rel=1e-12)

    def test_default_table(self) -> None:
        breakdown = ShippingCalculator().quote(ShipmentRequest(weight_kg=5.0), "EUR")
        assert isinstance(breakdown, CostBreakdown)
        assert breakdown.total == 50.0


# =============================================================================
# QUOTE SESSION (RECOMPUTE TRIGGER)
# =============================================================================


class TestQuoteSession:
    """QuoteSession recompute trigger"""

    @pytest.fixture
    def session(self, calculator: ShippingCalculator) -> QuoteSession:
        return QuoteSession(calculator)

    def test_initially_empty(self, session: QuoteSession) -> None:
        assert session.breakdown is None
        assert session.recompute_count == 0

    def test_first_refresh_computes(self, session: QuoteSession, parcel_request: ShipmentRequest) -> None:
        breakdown = session.refresh(parcel_request, "XOF")
        assert session.recompute_count == 1
        assert session.breakdown is breakdown

    def test_trigger_key(self, table: CurrencyTable, parcel_request: ShipmentRequest) -> None:
        key = QuoteSession.trigger_key(parcel_request, table.get("XOF"))
        assert key == (10.0, True, "XOF")

    @pytest.mark.parametrize(
        "update",
        [
            {"message": "Handle with care"},
            {"details": "Books only"},
            {"category": ShipmentCategory.CONTAINER},
            {"country": DestinationCountry.CHINA},
            {"dimensions": Dimensions(length=100.0, width=100.0, height=100.0)},
            {"sender": PersonInfo(first_name="Paul", email="paul@example.com")},
            {"recipient": PersonInfo(first_name="Li", country="China")},
        ],
    )
    def test_non_trigger_fields_do_not_recompute(
        self, session: QuoteSession, parcel_request: ShipmentRequest, update: dict
    ) -> None:
        before = session.refresh(parcel_request, "XOF")
        edited = parcel_request.model_copy(update=update)
        after = session.refresh(edited, "XOF")
        assert after is before
        assert session.recompute_count == 1

    def test_weight_change_recomputes(self, session: QuoteSession, parcel_request: ShipmentRequest) -> None:
        before = session.refresh(parcel_request, "EUR")
        after = session.refresh(parcel_request.model_copy(update={"weight_kg": 5.0}), "EUR")
        assert session.recompute_count == 2
        assert before.shipping_cost == 80.0
        assert after.shipping_cost == 50.0

    def test_insurance_change_recomputes(self, session: QuoteSession, parcel_request: ShipmentRequest) -> None:
        session.refresh(parcel_request, "EUR")
        after = session.refresh(parcel_request.model_copy(update={"insurance_requested": False}), "EUR")
        assert session.recompute_count == 2
        assert after.insurance_cost == 0.0

    def test_currency_change_recomputes(self, session: QuoteSession, parcel_request: ShipmentRequest) -> None:
        session.refresh(parcel_request, "EUR")
        after = session.refresh(parcel_request, "XOF")
        assert session.recompute_count == 2
        assert after.currency_code == "XOF"

    def test_same_currency_as_model_or_code(
        self, session: QuoteSession, parcel_request: ShipmentRequest, table: CurrencyTable
    ) -> None:
        session.refresh(parcel_request, "CNY")
        session.refresh(parcel_request, table.get("CNY"))
        assert session.recompute_count == 1

    def test_cached_result_matches_fresh_quote(
        self, session: QuoteSession, calculator: ShippingCalculator, parcel_request: ShipmentRequest
    ) -> None:
        session.refresh(parcel_request, "XOF")
        cached = session.refresh(parcel_request.model_copy(update={"message": "x"}), "XOF")
        assert cached == calculator.quote(parcel_request, "XOF")

    def test_invalidate_forces_recompute(self, session: QuoteSession, parcel_request: ShipmentRequest) -> None:
        session.refresh(parcel_request, "EUR")
        session.invalidate()
        assert session.breakdown is None
        session.refresh(parcel_request, "EUR")
        assert session.recompute_count == 2

    def test_unknown_currency_keeps_previous_quote(
        self, session: QuoteSession, parcel_request: ShipmentRequest
    ) -> None:
        before = session.refresh(parcel_request, "EUR")
        with pytest.raises(UnknownCurrency):
            session.refresh(parcel_request, "USD")
        assert session.breakdown is before

    def test_other_rate_does_not_reuse_cached_quote(
        self, session: QuoteSession, table: CurrencyTable, parcel_request: ShipmentRequest
    ) -> None:
        before = session.refresh(parcel_request, "XOF")
        stale_xof = table.get("XOF").model_copy(update={"rate_to_base": 650.0})
        with pytest.raises(UnknownCurrency):
            session.refresh(parcel_request, stale_xof)
        assert session.breakdown is before

    def test_recompute_logged(self, session: QuoteSession, parcel_request: ShipmentRequest, caplog) -> None:
        with caplog.at_level(logging.DEBUG, logger="shipquote.pricing.calculator"):
            session.refresh(parcel_request, "EUR")
            session.refresh(parcel_request, "EUR")
        assert "Quote recomputed" in caplog.text
        assert "Quote unchanged" in caplog.text
