"""Domain models package."""

from .billing import (
    BillingTerms,
    FixedPriceTerms,
    HourlyTerms,
    RetainerTerms,
    billing_terms_for,
)
from .imports import ClientDraft, ExpenseCategory, ExpenseDraft, TimeEntryDraft
from .records import ContractRow, IncomeGoal, InvoiceRow, TrackingSessionRow
from .reports import (
    DateRange,
    GoalStatus,
    MonthlyRevenue,
    RevenueDashboard,
    RevenueLine,
)

__all__ = [
    "BillingTerms",
    "FixedPriceTerms",
    "HourlyTerms",
    "RetainerTerms",
    "billing_terms_for",
    "ClientDraft",
    "ExpenseCategory",
    "ExpenseDraft",
    "TimeEntryDraft",
    "ContractRow",
    "IncomeGoal",
    "InvoiceRow",
    "TrackingSessionRow",
    "DateRange",
    "GoalStatus",
    "MonthlyRevenue",
    "RevenueDashboard",
    "RevenueLine",
]
