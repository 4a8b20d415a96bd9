"""Application use cases package."""

from .get_goal_status import GetGoalStatusUseCase, GoalStatusReport
from .get_revenue_dashboard import (
    GetRevenueDashboardUseCase,
    RevenueDashboard,
)
from .import_records import (
    ImportClientsUseCase,
    ImportExpensesUseCase,
    ImportResult,
    ImportTimeEntriesUseCase,
)

__all__ = [
    "GetGoalStatusUseCase",
    "GoalStatusReport",
    "GetRevenueDashboardUseCase",
    "RevenueDashboard",
    "ImportClientsUseCase",
    "ImportExpensesUseCase",
    "ImportResult",
    "ImportTimeEntriesUseCase",
]
