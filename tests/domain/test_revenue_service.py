"""Tests for the revenue domain services."""

from datetime import date, datetime, timedelta
from decimal import Decimal
from unittest.mock import MagicMock

import pytest

from freelance_books.domain.errors import UnknownBillingType
from freelance_books.domain.models import (
    ContractRow,
    FixedPriceTerms,
    HourlyTerms,
    InvoiceRow,
    RetainerTerms,
    TrackingSessionRow,
    billing_terms_for,
)
from freelance_books.domain.services.revenue import (
    compute_monthly_revenue,
    compute_revenue_dashboard,
    fixed_price_revenue,
    hourly_revenue,
    normalize_contract_revenue,
    retainer_revenue,
)

NOW = datetime(2024, 6, 15, 12, 0)


def _contract(**overrides) -> ContractRow:
    values = {
        "id": 1,
        "name": "Website",
        "client_id": 10,
        "client_name": "Acme",
        "contract_type": "hourly",
        "hourly_rate": Decimal("100"),
        "fixed_price": None,
        "start_date": date(2024, 1, 1),
    }
    values.update(overrides)
    return ContractRow(**values)


def _session(
    hours: str | None,
    days_ago: float,
    billable: bool = True,
    contract_id: int = 1,
) -> TrackingSessionRow:
    return TrackingSessionRow(
        id=1,
        contract_id=contract_id,
        start_time=NOW - timedelta(days=days_ago),
        hours=Decimal(hours) if hours is not None else None,
        billable=billable,
    )


def test_billing_terms_for_builds_matching_variant():
    """Contract types should map onto their billing terms variant."""
    assert billing_terms_for(_contract()) == HourlyTerms(rate=Decimal("100"))
    retainer = _contract(contract_type="Retainer", fixed_price=Decimal("2000"))
    assert billing_terms_for(retainer) == RetainerTerms(
        monthly_fee=Decimal("2000")
    )
    fixed = _contract(
        contract_type="fixed_price",
        fixed_price=Decimal("6000"),
        end_date=date(2024, 7, 1),
    )
    assert billing_terms_for(fixed) == FixedPriceTerms(
        total=Decimal("6000"),
        start_date=date(2024, 1, 1),
        end_date=date(2024, 7, 1),
    )


def test_billing_terms_for_rejects_unknown_type():
    """Unknown contract types should raise UnknownBillingType."""
    with pytest.raises(UnknownBillingType) as excinfo:
        billing_terms_for(_contract(contract_type="barter"))
    assert excinfo.value.contract_type == "barter"


def test_hourly_revenue_counts_recent_billable_sessions():
    """Only billable sessions with hours inside the window should count."""
    sessions = [
        _session("4", days_ago=2),
        _session("6", days_ago=29),
        _session("3", days_ago=31),
        _session("5", days_ago=1, billable=False),
        _session(None, days_ago=1),
    ]

    revenue = hourly_revenue(
        HourlyTerms(rate=Decimal("100")),
        sessions,
        now=NOW,
    )

    assert revenue.hours == Decimal("10")
    assert revenue.amount == Decimal("1000")
    assert revenue.detail == "10.0h @ $100/hr"


def test_hourly_revenue_respects_custom_window():
    """A shorter window should exclude older sessions."""
    sessions = [_session("4", days_ago=2), _session("6", days_ago=10)]

    revenue = hourly_revenue(
        HourlyTerms(rate=Decimal("50")),
        sessions,
        now=NOW,
        window_days=7,
    )

    assert revenue.amount == Decimal("200")


def test_hourly_revenue_without_rate_is_zero():
    """A missing rate should give zero revenue and no detail."""
    revenue = hourly_revenue(
        HourlyTerms(rate=None),
        [_session("4", days_ago=1)],
        now=NOW,
    )

    assert revenue.amount == Decimal("0")
    assert revenue.detail == ""


def test_retainer_revenue_uses_monthly_fee():
    """Retainers should contribute their fee unchanged."""
    revenue = retainer_revenue(RetainerTerms(monthly_fee=Decimal("2000")))

    assert revenue.amount == Decimal("2000")
    assert revenue.detail == "Monthly retainer"


def test_fixed_price_revenue_prorates_over_thirty_day_months():
    """Fixed prices should be spread over days / 30 months."""
    terms = FixedPriceTerms(
        total=Decimal("3000"),
        start_date=date(2024, 1, 1),
        end_date=date(2024, 3, 31),
    )

    revenue = fixed_price_revenue(terms)

    assert revenue.amount == Decimal("1000")
    assert revenue.detail == "$3000 total"


@pytest.mark.parametrize(
    "end_date",
    [None, date(2024, 1, 1), date(2023, 12, 1)],
)
def test_fixed_price_revenue_falls_back_without_positive_duration(end_date):
    """Open-ended or inverted contracts should use the fallback divisor."""
    terms = FixedPriceTerms(
        total=Decimal("6000"),
        start_date=date(2024, 1, 1),
        end_date=end_date,
    )

    assert fixed_price_revenue(terms).amount == Decimal("2000")
    assert fixed_price_revenue(
        terms,
        fallback_months=Decimal("6"),
    ).amount == Decimal("1000")


def test_compute_monthly_revenue_dispatches_on_variant():
    """The dispatcher should route each variant to its computation."""
    revenue = compute_monthly_revenue(
        RetainerTerms(monthly_fee=Decimal("500")),
        [],
        now=NOW,
    )

    assert revenue.amount == Decimal("500")


def test_normalize_contract_revenue_warns_on_missing_amount():
    """Contracts without a price should be logged and valued at zero."""
    logger = MagicMock()
    contract = _contract(contract_type="retainer", fixed_price=None)

    revenue = normalize_contract_revenue(
        contract,
        [],
        now=NOW,
        logger=logger,
    )

    assert revenue.amount == Decimal("0")
    logger.warning.assert_called_once()
    assert "fixed price" in logger.warning.call_args[0][0]


def test_compute_revenue_dashboard_folds_contracts():
    """Mixed contracts should fold into category subtotals and totals."""
    contracts = [
        _contract(id=1, name="Support", client_name="Acme"),
        _contract(
            id=2,
            name="Care plan",
            client_name="Globex",
            contract_type="retainer",
            hourly_rate=None,
            fixed_price=Decimal("2000"),
        ),
        _contract(
            id=3,
            name="Redesign",
            client_name="Initech",
            contract_type="fixed_price",
            hourly_rate=None,
            fixed_price=Decimal("3000"),
            end_date=date(2024, 3, 31),
        ),
    ]
    sessions = {1: [_session("10", days_ago=3)]}
    invoices = {
        "pending": [InvoiceRow(id=1, amount=Decimal("500"), status="pending")],
        "overdue": [InvoiceRow(id=2, amount=Decimal("250"), status="overdue")],
    }

    dashboard = compute_revenue_dashboard(
        contracts,
        sessions,
        invoices,
        now=NOW,
        client_count=3,
        logger=MagicMock(),
    )

    assert dashboard.hourly_total == Decimal("1000")
    assert dashboard.retainer_total == Decimal("2000")
    assert dashboard.fixed_total == Decimal("1000")
    assert dashboard.total == Decimal("4000")
    assert dashboard.billable_hours == Decimal("10")
    assert dashboard.average_hourly_rate == Decimal("100")
    assert dashboard.contract_count == 3
    assert dashboard.client_count == 3
    assert dashboard.pending_invoice_count == 1
    assert dashboard.unpaid_amount == Decimal("750")
    assert dashboard.generated_at == NOW
    assert [line.contract_name for line in dashboard.lines] == [
        "Support",
        "Care plan",
        "Redesign",
    ]


def test_compute_revenue_dashboard_handles_empty_and_unknown():
    """Unknown types should add a zero line and no hours means no rate."""
    logger = MagicMock()
    contracts = [
        _contract(id=7, contract_type="barter"),
        _contract(id=8, active=False),
    ]

    dashboard = compute_revenue_dashboard(
        contracts,
        {},
        {},
        now=NOW,
        client_count=0,
        logger=logger,
    )

    assert dashboard.total == Decimal("0")
    assert dashboard.contract_count == 1
    assert dashboard.lines[0].monthly_amount == Decimal("0")
    assert dashboard.average_hourly_rate is None
    assert dashboard.pending_invoice_count == 0
    assert dashboard.unpaid_amount == Decimal("0")
    logger.warning.assert_called_once()


def test_compute_revenue_dashboard_is_deterministic():
    """Identical inputs should produce equal dashboards."""
    contracts = [
        _contract(id=1, name="Support"),
        _contract(
            id=2,
            name="Care plan",
            contract_type="retainer",
            hourly_rate=None,
            fixed_price=Decimal("1200"),
        ),
    ]
    sessions = {1: [_session("4.5", days_ago=2), _session("3", days_ago=40)]}
    invoices = {
        "pending": [InvoiceRow(id=1, amount=Decimal("300"), status="pending")],
    }

    def build():
        return compute_revenue_dashboard(
            contracts,
            sessions,
            invoices,
            now=NOW,
            client_count=2,
            logger=MagicMock(),
        )

    assert build() == build()
