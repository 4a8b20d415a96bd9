"""Use case to report progress toward income goals."""

from dataclasses import dataclass, field
from datetime import datetime

from freelance_books.application.ports.bookkeeping_repository import (
    BookkeepingRepositoryPort,
)
from freelance_books.domain.constants import INVOICE_STATUS_PAID
from freelance_books.domain.errors import InvalidPeriod
from freelance_books.domain.models import GoalStatus, IncomeGoal
from freelance_books.domain.services.goals import compute_goal_status
from freelance_books.infrastructure.logging.logger import get_app_logger


@dataclass(frozen=True)
class GoalStatusReport:
    """Result of a goal status run.

    Attributes:
        statuses: Progress of every goal that could be evaluated.
        skipped: Goals whose period could not be resolved.
    """

    statuses: list[GoalStatus]
    skipped: list[IncomeGoal] = field(default_factory=list)


class GetGoalStatusUseCase:
    """Compute progress toward income goals from paid invoices."""

    def __init__(
        self,
        repository: BookkeepingRepositoryPort,
        logger=None,
    ) -> None:
        """Initialize the use case.

        Args:
            repository: Port providing goals and invoices.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._repository = repository
        self._logger = logger or get_app_logger()

    def execute(
        self,
        now: datetime | None = None,
        period: str | None = None,
    ) -> GoalStatusReport:
        """Return progress for each income goal.

        A goal with an invalid period is logged and skipped; the other goals
        are still evaluated.

        Args:
            now: Instant used for the whole computation; defaults to the
                current local time captured once.
            period: Optional period kind filter.

        Returns:
            GoalStatusReport: Evaluated goals and the skipped ones.
        """
        now = now or datetime.now()
        goals = self._repository.fetch_income_goals(period)
        if not goals:
            self._logger.info("No income goals to evaluate")
            return GoalStatusReport(statuses=[])
        paid = self._repository.fetch_invoices_by_status(
            (INVOICE_STATUS_PAID,)
        ).get(INVOICE_STATUS_PAID, [])

        statuses: list[GoalStatus] = []
        skipped: list[IncomeGoal] = []
        for goal in goals:
            try:
                statuses.append(compute_goal_status(goal, paid, now=now))
            except InvalidPeriod as exc:
                self._logger.warning(f"Skipping goal {goal.id}: {exc}")
                skipped.append(goal)

        self._logger.info(
            f"Evaluated {len(statuses)} income goals "
            f"({len(skipped)} skipped)"
        )
        return GoalStatusReport(statuses=statuses, skipped=skipped)


__all__ = ["GetGoalStatusUseCase", "GoalStatusReport"]
