"""Domain package for bookkeeping rules and report models."""

from .constants import (
    DEFAULT_FIXED_PRICE_FALLBACK_MONTHS,
    DEFAULT_HOURLY_WINDOW_DAYS,
    GOAL_PERIODS,
    UNPAID_INVOICE_STATUSES,
)
from .errors import (
    BookkeepingError,
    InvalidImportRow,
    InvalidPeriod,
    UnknownBillingType,
    UnparseableDate,
)
from .models import (
    ContractRow,
    DateRange,
    ExpenseCategory,
    GoalStatus,
    IncomeGoal,
    InvoiceRow,
    RevenueDashboard,
    RevenueLine,
    TrackingSessionRow,
)
from .services import (
    compute_goal_status,
    compute_revenue_dashboard,
    days_remaining,
    format_goal_period,
    normalize_contract_revenue,
    parse_expense_category,
    parse_import_date,
    resolve_period_range,
)

__all__ = [
    "DEFAULT_FIXED_PRICE_FALLBACK_MONTHS",
    "DEFAULT_HOURLY_WINDOW_DAYS",
    "GOAL_PERIODS",
    "UNPAID_INVOICE_STATUSES",
    "BookkeepingError",
    "InvalidImportRow",
    "InvalidPeriod",
    "UnknownBillingType",
    "UnparseableDate",
    "ContractRow",
    "DateRange",
    "ExpenseCategory",
    "GoalStatus",
    "IncomeGoal",
    "InvoiceRow",
    "RevenueDashboard",
    "RevenueLine",
    "TrackingSessionRow",
    "compute_goal_status",
    "compute_revenue_dashboard",
    "days_remaining",
    "format_goal_period",
    "normalize_contract_revenue",
    "parse_expense_category",
    "parse_import_date",
    "resolve_period_range",
]
