"""Domain services for income goal progress."""

from collections.abc import Iterable
from datetime import datetime
from decimal import Decimal

from freelance_books.domain.constants import INVOICE_STATUS_PAID
from freelance_books.domain.models import GoalStatus, IncomeGoal, InvoiceRow
from freelance_books.domain.services.periods import (
    days_remaining,
    format_goal_period,
    resolve_goal_range,
)
from freelance_books.utils.decimal_utils import coerce_decimal


def compute_goal_status(
    goal: IncomeGoal,
    invoices: Iterable[InvoiceRow],
    *,
    now: datetime,
) -> GoalStatus:
    """Compute progress of a goal from paid invoices.

    Paid invoices count toward the goal when their last update falls inside
    the goal period.

    Args:
        goal: Income goal to evaluate.
        invoices: Invoices to consider; only paid ones are counted.
        now: Instant captured for the current evaluation.

    Returns:
        GoalStatus: Period bounds, income so far and what is left.

    Raises:
        InvalidPeriod: If the goal period cannot be resolved.
    """
    period = resolve_goal_range(goal)
    actual = sum(
        (
            coerce_decimal(invoice.amount)
            for invoice in invoices
            if invoice.status == INVOICE_STATUS_PAID
            and invoice.updated_at is not None
            and period.contains(invoice.updated_at)
        ),
        Decimal("0"),
    )
    target = coerce_decimal(goal.amount)
    progress = (actual / target) * Decimal("100") if target else Decimal("0")
    remaining = target - actual
    days_left = days_remaining(period.end, now)
    daily_needed = None
    if remaining > 0 and days_left > 0:
        daily_needed = remaining / days_left
    return GoalStatus(
        goal=goal,
        label=format_goal_period(goal.year, goal.month, goal.quarter, goal.period),
        period=period,
        days_remaining=days_left,
        actual=actual,
        progress_percent=progress,
        remaining=remaining,
        daily_needed=daily_needed,
    )


__all__ = ["compute_goal_status"]
