"""Domain models for bookkeeping row data."""

from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal


@dataclass(frozen=True)
class ContractRow:
    """Row representing a contract with its owning client."""

    id: int
    name: str
    client_id: int
    client_name: str
    contract_type: str
    hourly_rate: Decimal | None
    fixed_price: Decimal | None
    start_date: date
    end_date: date | None = None
    active: bool = True
    currency: str = "USD"


@dataclass(frozen=True)
class TrackingSessionRow:
    """Row representing a time-tracking session."""

    id: int
    contract_id: int | None
    start_time: datetime
    hours: Decimal | None
    billable: bool = True

    @property
    def counts_toward_revenue(self) -> bool:
        """Return True when the session is billable and has hours."""
        return self.billable and self.hours is not None


@dataclass(frozen=True)
class InvoiceRow:
    """Row representing an invoice amount and status."""

    id: int
    amount: Decimal
    status: str
    updated_at: datetime | None = None
    invoice_num: str = ""


@dataclass(frozen=True)
class IncomeGoal:
    """Income target for a monthly, quarterly, or yearly period.

    Attributes:
        amount: Target income for the period.
        period: Period kind (monthly, quarterly, or yearly).
        year: Calendar year of the period.
        month: Month number, only meaningful for monthly goals.
        quarter: Quarter number, only meaningful for quarterly goals.
        description: Free-text note shown next to the goal.
    """

    amount: Decimal
    period: str
    year: int
    month: int = 0
    quarter: int = 0
    description: str = ""
    id: int | None = None


__all__ = [
    "ContractRow",
    "TrackingSessionRow",
    "InvoiceRow",
    "IncomeGoal",
]
