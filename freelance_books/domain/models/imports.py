"""Domain models for imported records."""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from enum import Enum


class ExpenseCategory(str, Enum):
    """Closed set of expense categories."""

    SOFTWARE = "software"
    HARDWARE = "hardware"
    TRAVEL = "travel"
    MEALS = "meals"
    OFFICE_SUPPLIES = "office_supplies"
    UTILITIES = "utilities"
    MARKETING = "marketing"
    OTHER = "other"


@dataclass(frozen=True)
class ExpenseDraft:
    """Expense parsed from an import row, not yet stored."""

    date: date
    description: str
    amount: Decimal
    category: ExpenseCategory = ExpenseCategory.OTHER
    vendor: str = ""
    currency: str = "USD"


@dataclass(frozen=True)
class TimeEntryDraft:
    """Time-tracking entry parsed from an import row, not yet stored."""

    date: date
    client_name: str
    project_name: str
    hours: Decimal
    billable: bool = True
    notes: str = ""


@dataclass(frozen=True)
class ClientDraft:
    """Client parsed from an import row, not yet stored."""

    name: str
    email: str
    address: str = ""
    tax_id: str = ""


__all__ = ["ClientDraft", "ExpenseCategory", "ExpenseDraft", "TimeEntryDraft"]
