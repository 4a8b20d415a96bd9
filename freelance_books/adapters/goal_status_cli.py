"""CLI adapter printing progress toward income goals."""

import os

from freelance_books.domain.models import GoalStatus
from freelance_books.infrastructure.container import build_goal_status_use_case
from freelance_books.infrastructure.logging.logger import (
    get_app_logger,
    get_usage_logger,
)

BAR_WIDTH = 30


def _progress_bar(percent, width: int = BAR_WIDTH) -> str:
    filled = int(percent / 100 * width)
    filled = max(0, min(filled, width))
    return "[" + "█" * filled + "░" * (width - filled) + "]"


def render_goal_status(status: GoalStatus) -> list[str]:
    """Render one goal status as printable lines.

    Args:
        status: Computed goal progress.

    Returns:
        list[str]: Header, progress bar, amounts and time left.
    """
    goal = status.goal
    lines = [f"  {goal.period} - {status.label}"]
    if goal.description:
        lines.append(f"  {goal.description}")
    lines.append("  " + "-" * 37)
    lines.append(
        f"  {_progress_bar(status.progress_percent)} "
        f"{status.progress_percent:.1f}%"
    )
    lines.append(f"  ${status.actual:,.2f} / ${goal.amount:,.2f}")
    if status.achieved:
        lines.append(f"  Goal achieved! +${-status.remaining:,.0f} over target")
    elif status.daily_needed is not None:
        lines.append(
            f"  ${status.remaining:,.0f} remaining "
            f"({status.days_remaining} days left, "
            f"~${status.daily_needed:,.0f}/day needed)"
        )
    else:
        lines.append(f"  ${status.remaining:,.0f} remaining (period ended)")
    return lines


def main() -> None:
    """Compute and print the status of every income goal."""
    logger = get_app_logger()
    period = os.getenv("GOAL_PERIOD", "").strip().lower() or None
    use_case = build_goal_status_use_case()
    try:
        report = use_case.execute(period=period)
    except RuntimeError as exc:
        logger.error(str(exc))
        return
    get_usage_logger().info("goal status report generated")

    if not report.statuses and not report.skipped:
        print("No income goals set.")
        return

    print("INCOME GOAL STATUS")
    for status in report.statuses:
        print()
        for line in render_goal_status(status):
            print(line)
    for goal in report.skipped:
        print()
        print(f"  Skipped goal {goal.id}: invalid period {goal.period!r}")
    print()


if __name__ == "__main__":  # pragma: no cover
    main()
