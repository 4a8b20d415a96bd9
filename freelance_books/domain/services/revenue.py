"""Domain services for monthly revenue figures."""

from collections.abc import Mapping, Sequence
from datetime import datetime, timedelta
from decimal import Decimal
from logging import Logger
from typing import assert_never

from freelance_books.domain.constants import (
    CONTRACT_TYPE_FIXED_PRICE,
    CONTRACT_TYPE_HOURLY,
    CONTRACT_TYPE_RETAINER,
    DAYS_PER_MONTH,
    DEFAULT_FIXED_PRICE_FALLBACK_MONTHS,
    DEFAULT_HOURLY_WINDOW_DAYS,
    INVOICE_STATUS_OVERDUE,
    INVOICE_STATUS_PENDING,
)
from freelance_books.domain.errors import UnknownBillingType
from freelance_books.domain.models import (
    BillingTerms,
    ContractRow,
    FixedPriceTerms,
    HourlyTerms,
    InvoiceRow,
    MonthlyRevenue,
    RetainerTerms,
    RevenueDashboard,
    RevenueLine,
    TrackingSessionRow,
    billing_terms_for,
)
from freelance_books.utils.decimal_utils import coerce_decimal

_ZERO = Decimal("0")


def hourly_revenue(
    terms: HourlyTerms,
    sessions: Sequence[TrackingSessionRow],
    *,
    now: datetime,
    window_days: int = DEFAULT_HOURLY_WINDOW_DAYS,
) -> MonthlyRevenue:
    """Return revenue from billable hours tracked in the trailing window.

    Args:
        terms: Hourly billing terms.
        sessions: Tracking sessions recorded against the contract.
        now: Instant closing the trailing window.
        window_days: Length of the trailing window in days.

    Returns:
        MonthlyRevenue: hours * rate, or zero when the rate is missing.
    """
    if terms.rate is None:
        return MonthlyRevenue(amount=_ZERO, detail="")
    window_start = now - timedelta(days=window_days)
    hours = sum(
        (
            session.hours
            for session in sessions
            if session.counts_toward_revenue
            and window_start < session.start_time <= now
        ),
        _ZERO,
    )
    return MonthlyRevenue(
        amount=hours * terms.rate,
        detail=f"{hours:.1f}h @ ${terms.rate:.0f}/hr",
        hours=hours,
    )


def retainer_revenue(terms: RetainerTerms) -> MonthlyRevenue:
    """Return the monthly retainer fee."""
    if terms.monthly_fee is None:
        return MonthlyRevenue(amount=_ZERO, detail="")
    return MonthlyRevenue(amount=terms.monthly_fee, detail="Monthly retainer")


def fixed_price_revenue(
    terms: FixedPriceTerms,
    *,
    fallback_months: Decimal = DEFAULT_FIXED_PRICE_FALLBACK_MONTHS,
) -> MonthlyRevenue:
    """Return the fixed price prorated over the contract duration.

    The duration is measured in 30-day months between start and end date.
    Contracts without an end date, or whose end does not fall after the
    start, are spread over ``fallback_months`` instead.

    Args:
        terms: Fixed-price billing terms.
        fallback_months: Divisor used when no positive duration is known.

    Returns:
        MonthlyRevenue: Prorated monthly amount and the total as detail.
    """
    if terms.total is None:
        return MonthlyRevenue(amount=_ZERO, detail="")
    months = _ZERO
    if terms.end_date is not None:
        days = (terms.end_date - terms.start_date).days
        months = Decimal(days) / DAYS_PER_MONTH
    divisor = months if months > 0 else fallback_months
    return MonthlyRevenue(
        amount=terms.total / divisor,
        detail=f"${terms.total:.0f} total",
    )


def compute_monthly_revenue(
    terms: BillingTerms,
    sessions: Sequence[TrackingSessionRow],
    *,
    now: datetime,
    fallback_months: Decimal = DEFAULT_FIXED_PRICE_FALLBACK_MONTHS,
    window_days: int = DEFAULT_HOURLY_WINDOW_DAYS,
) -> MonthlyRevenue:
    """Dispatch billing terms to the matching revenue computation."""
    if isinstance(terms, HourlyTerms):
        return hourly_revenue(
            terms,
            sessions,
            now=now,
            window_days=window_days,
        )
    if isinstance(terms, RetainerTerms):
        return retainer_revenue(terms)
    if isinstance(terms, FixedPriceTerms):
        return fixed_price_revenue(terms, fallback_months=fallback_months)
    assert_never(terms)


def normalize_contract_revenue(
    contract: ContractRow,
    sessions: Sequence[TrackingSessionRow],
    *,
    now: datetime,
    fallback_months: Decimal = DEFAULT_FIXED_PRICE_FALLBACK_MONTHS,
    window_days: int = DEFAULT_HOURLY_WINDOW_DAYS,
    logger: Logger | None = None,
) -> MonthlyRevenue:
    """Compute the monthly revenue figure of a single contract.

    Args:
        contract: Contract row from the repository.
        sessions: Tracking sessions of the contract (used for hourly ones).
        now: Instant captured for the current report run.
        fallback_months: Proration divisor for fixed-price contracts.
        window_days: Trailing window for hourly sessions.
        logger: Optional logger used to report missing amounts.

    Returns:
        MonthlyRevenue: Amount, detail string and counted hours.

    Raises:
        UnknownBillingType: If the contract type is not recognized.
    """
    terms = billing_terms_for(contract)
    revenue = compute_monthly_revenue(
        terms,
        sessions,
        now=now,
        fallback_months=fallback_months,
        window_days=window_days,
    )
    if logger is not None and not revenue.detail:
        logger.warning(
            f"Contract {contract.id} ({contract.name}) has no "
            f"{_missing_field(terms)}; counted as zero revenue"
        )
    return revenue


def compute_revenue_dashboard(
    contracts: Sequence[ContractRow],
    sessions_by_contract: Mapping[int, Sequence[TrackingSessionRow]],
    invoices_by_status: Mapping[str, Sequence[InvoiceRow]],
    *,
    now: datetime,
    client_count: int,
    logger: Logger,
    fallback_months: Decimal = DEFAULT_FIXED_PRICE_FALLBACK_MONTHS,
    window_days: int = DEFAULT_HOURLY_WINDOW_DAYS,
) -> RevenueDashboard:
    """Fold per-contract revenue into a dashboard snapshot.

    Args:
        contracts: Contract rows; inactive contracts are ignored.
        sessions_by_contract: Tracking sessions keyed by contract id.
        invoices_by_status: Invoices keyed by status.
        now: Instant used for every time-dependent figure.
        client_count: Number of known clients.
        logger: Logger used for data-quality warnings.
        fallback_months: Proration divisor for fixed-price contracts.
        window_days: Trailing window for hourly sessions.

    Returns:
        RevenueDashboard: Category subtotals, totals and invoice exposure.
    """
    lines: list[RevenueLine] = []
    totals = {
        CONTRACT_TYPE_HOURLY: _ZERO,
        CONTRACT_TYPE_RETAINER: _ZERO,
        CONTRACT_TYPE_FIXED_PRICE: _ZERO,
    }
    billable_hours = _ZERO

    for contract in contracts:
        if not contract.active:
            continue
        try:
            revenue = normalize_contract_revenue(
                contract,
                sessions_by_contract.get(contract.id, ()),
                now=now,
                fallback_months=fallback_months,
                window_days=window_days,
                logger=logger,
            )
        except UnknownBillingType as exc:
            logger.warning(f"Contract {contract.id} ({contract.name}): {exc}")
            revenue = MonthlyRevenue(amount=_ZERO, detail="")
        contract_type = (contract.contract_type or "").strip().lower()
        if contract_type in totals:
            totals[contract_type] += revenue.amount
        if contract_type == CONTRACT_TYPE_HOURLY:
            billable_hours += revenue.hours
        lines.append(
            RevenueLine(
                contract_id=contract.id,
                contract_name=contract.name,
                client_name=contract.client_name,
                contract_type=contract.contract_type,
                monthly_amount=revenue.amount,
                detail=revenue.detail,
                hours=revenue.hours,
            )
        )

    hourly_total = totals[CONTRACT_TYPE_HOURLY]
    average_rate = hourly_total / billable_hours if billable_hours > 0 else None
    pending = invoices_by_status.get(INVOICE_STATUS_PENDING, ())
    overdue = invoices_by_status.get(INVOICE_STATUS_OVERDUE, ())
    unpaid_amount = sum(
        (coerce_decimal(invoice.amount) for invoice in (*pending, *overdue)),
        _ZERO,
    )

    return RevenueDashboard(
        lines=lines,
        hourly_total=hourly_total,
        retainer_total=totals[CONTRACT_TYPE_RETAINER],
        fixed_total=totals[CONTRACT_TYPE_FIXED_PRICE],
        total=sum((line.monthly_amount for line in lines), _ZERO),
        billable_hours=billable_hours,
        average_hourly_rate=average_rate,
        contract_count=len(lines),
        client_count=client_count,
        pending_invoice_count=len(pending),
        unpaid_amount=unpaid_amount,
        generated_at=now,
    )


def _missing_field(terms: BillingTerms) -> str:
    if isinstance(terms, HourlyTerms):
        return "hourly rate"
    return "fixed price"


__all__ = [
    "hourly_revenue",
    "retainer_revenue",
    "fixed_price_revenue",
    "compute_monthly_revenue",
    "normalize_contract_revenue",
    "compute_revenue_dashboard",
]
