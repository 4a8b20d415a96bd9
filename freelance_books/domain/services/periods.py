"""Calendar periods for income goals."""

from datetime import datetime

from freelance_books.domain.constants import (
    MONTH_NAMES,
    PERIOD_MONTHLY,
    PERIOD_QUARTERLY,
    PERIOD_YEARLY,
)
from freelance_books.domain.errors import InvalidPeriod
from freelance_books.domain.models import DateRange, IncomeGoal

_MONTH_ABBREVIATIONS = tuple(name[:3] for name in MONTH_NAMES)


def resolve_period_range(
    period: str,
    year: int,
    month: int = 0,
    quarter: int = 0,
) -> DateRange:
    """Return the half-open datetime range covered by a goal period.

    Args:
        period: Period kind (monthly, quarterly, or yearly).
        year: Calendar year of the period.
        month: Month number (1-12), used for monthly periods.
        quarter: Quarter number (1-4), used for quarterly periods.

    Returns:
        DateRange: Inclusive start and exclusive end of the period.

    Raises:
        InvalidPeriod: If the period kind or its selector is not valid.
    """
    if period == PERIOD_MONTHLY:
        if not 1 <= month <= 12:
            raise InvalidPeriod(period, f"month={month}")
        start = datetime(year, month, 1)
        return DateRange(start=start, end=_add_months(start, 1))
    if period == PERIOD_QUARTERLY:
        if not 1 <= quarter <= 4:
            raise InvalidPeriod(period, f"quarter={quarter}")
        start = datetime(year, (quarter - 1) * 3 + 1, 1)
        return DateRange(start=start, end=_add_months(start, 3))
    if period == PERIOD_YEARLY:
        return DateRange(
            start=datetime(year, 1, 1),
            end=datetime(year + 1, 1, 1),
        )
    raise InvalidPeriod(period)


def resolve_goal_range(goal: IncomeGoal) -> DateRange:
    """Return the date range of an income goal."""
    return resolve_period_range(
        goal.period,
        goal.year,
        month=goal.month,
        quarter=goal.quarter,
    )


def days_remaining(end: datetime, now: datetime) -> int:
    """Return whole days left until end, never negative.

    Args:
        end: Exclusive end of the period.
        now: Instant captured for the current evaluation.

    Returns:
        int: Number of whole days between now and end, 0 once end has passed.
    """
    if end <= now:
        return 0
    return (end - now).days


def format_goal_period(
    year: int,
    month: int,
    quarter: int,
    period: str,
) -> str:
    """Render a goal period as a short label.

    Monthly goals render as "Jun 2024", quarterly goals as "Q2 2024" and
    yearly goals as "2024". Any other period kind, or a monthly goal without
    a valid month, falls back to the yearly label.

    Args:
        year: Calendar year of the period.
        month: Month number for monthly goals.
        quarter: Quarter number for quarterly goals.
        period: Period kind.

    Returns:
        str: Human-readable period label.
    """
    if period == PERIOD_MONTHLY and 1 <= month <= 12:
        return f"{_MONTH_ABBREVIATIONS[month - 1]} {year}"
    if period == PERIOD_QUARTERLY:
        return f"Q{quarter} {year}"
    return f"{year}"


def _add_months(moment: datetime, months: int) -> datetime:
    # Only called with first-of-month instants, so the day is always valid.
    index = moment.month - 1 + months
    return moment.replace(year=moment.year + index // 12, month=index % 12 + 1)


__all__ = [
    "resolve_period_range",
    "resolve_goal_range",
    "days_remaining",
    "format_goal_period",
]
