"""Domain constants for freelance bookkeeping reports."""

from decimal import Decimal

CONTRACT_TYPE_HOURLY = "hourly"
CONTRACT_TYPE_RETAINER = "retainer"
CONTRACT_TYPE_FIXED_PRICE = "fixed_price"

PERIOD_MONTHLY = "monthly"
PERIOD_QUARTERLY = "quarterly"
PERIOD_YEARLY = "yearly"

GOAL_PERIODS = (
    PERIOD_MONTHLY,
    PERIOD_QUARTERLY,
    PERIOD_YEARLY,
)

INVOICE_STATUS_PENDING = "pending"
INVOICE_STATUS_PAID = "paid"
INVOICE_STATUS_OVERDUE = "overdue"

UNPAID_INVOICE_STATUSES = (
    INVOICE_STATUS_PENDING,
    INVOICE_STATUS_OVERDUE,
)

# Fixed-price contracts have no monthly cadence; without a usable duration
# the total is spread over this many months.
DEFAULT_FIXED_PRICE_FALLBACK_MONTHS = Decimal("3")

DEFAULT_HOURLY_WINDOW_DAYS = 30

DAYS_PER_MONTH = Decimal("30")

# English month names, independent of the process locale.
MONTH_NAMES = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)


__all__ = [
    "CONTRACT_TYPE_HOURLY",
    "CONTRACT_TYPE_RETAINER",
    "CONTRACT_TYPE_FIXED_PRICE",
    "PERIOD_MONTHLY",
    "PERIOD_QUARTERLY",
    "PERIOD_YEARLY",
    "GOAL_PERIODS",
    "INVOICE_STATUS_PENDING",
    "INVOICE_STATUS_PAID",
    "INVOICE_STATUS_OVERDUE",
    "UNPAID_INVOICE_STATUSES",
    "DEFAULT_FIXED_PRICE_FALLBACK_MONTHS",
    "DEFAULT_HOURLY_WINDOW_DAYS",
    "DAYS_PER_MONTH",
    "MONTH_NAMES",
]
