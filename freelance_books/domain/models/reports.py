"""Domain models for derived report values."""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal

from freelance_books.domain.models.records import IncomeGoal


@dataclass(frozen=True)
class MonthlyRevenue:
    """Monthly revenue figure produced for one set of billing terms."""

    amount: Decimal
    detail: str
    hours: Decimal = Decimal("0")


@dataclass(frozen=True)
class RevenueLine:
    """Monthly revenue computed for a single contract."""

    contract_id: int
    contract_name: str
    client_name: str
    contract_type: str
    monthly_amount: Decimal
    detail: str
    hours: Decimal = Decimal("0")


@dataclass(frozen=True)
class RevenueDashboard:
    """Snapshot of monthly revenue across active contracts.

    Attributes:
        lines: Per-contract revenue lines in input order.
        hourly_total: Revenue from hourly contracts.
        retainer_total: Revenue from retainer contracts.
        fixed_total: Prorated revenue from fixed-price contracts.
        total: Sum of all revenue lines.
        billable_hours: Billable hours counted for hourly contracts.
        average_hourly_rate: hourly_total / billable_hours, None without hours.
        contract_count: Number of active contracts folded.
        client_count: Number of known clients.
        pending_invoice_count: Number of pending invoices.
        unpaid_amount: Sum of pending and overdue invoice amounts.
        generated_at: Instant used for every time-dependent figure.
    """

    lines: list[RevenueLine]
    hourly_total: Decimal
    retainer_total: Decimal
    fixed_total: Decimal
    total: Decimal
    billable_hours: Decimal
    average_hourly_rate: Decimal | None
    contract_count: int
    client_count: int
    pending_invoice_count: int
    unpaid_amount: Decimal
    generated_at: datetime


@dataclass(frozen=True)
class DateRange:
    """Half-open interval [start, end)."""

    start: datetime
    end: datetime

    def contains(self, moment: datetime) -> bool:
        """Return True when start <= moment < end."""
        return self.start <= moment < self.end


@dataclass(frozen=True)
class GoalStatus:
    """Progress of an income goal at a given instant."""

    goal: IncomeGoal
    label: str
    period: DateRange
    days_remaining: int
    actual: Decimal
    progress_percent: Decimal
    remaining: Decimal
    daily_needed: Decimal | None

    @property
    def achieved(self) -> bool:
        """Return True when actual income reached the target."""
        return self.remaining <= 0


__all__ = [
    "MonthlyRevenue",
    "RevenueLine",
    "RevenueDashboard",
    "DateRange",
    "GoalStatus",
]
