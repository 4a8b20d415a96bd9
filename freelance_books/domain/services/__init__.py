"""Domain services package."""

from .goals import compute_goal_status
from .normalization import (
    parse_client_row,
    parse_expense_category,
    parse_expense_row,
    parse_import_date,
    parse_time_entry_row,
)
from .periods import (
    days_remaining,
    format_goal_period,
    resolve_goal_range,
    resolve_period_range,
)
from .revenue import (
    compute_monthly_revenue,
    compute_revenue_dashboard,
    fixed_price_revenue,
    hourly_revenue,
    normalize_contract_revenue,
    retainer_revenue,
)

__all__ = [
    "compute_goal_status",
    "parse_client_row",
    "parse_expense_category",
    "parse_expense_row",
    "parse_import_date",
    "parse_time_entry_row",
    "days_remaining",
    "format_goal_period",
    "resolve_goal_range",
    "resolve_period_range",
    "compute_monthly_revenue",
    "compute_revenue_dashboard",
    "fixed_price_revenue",
    "hourly_revenue",
    "normalize_contract_revenue",
    "retainer_revenue",
]
