"""Composition root for wiring infrastructure adapters."""

from freelance_books.application.ports.bookkeeping_repository import (
    BookkeepingRepositoryPort,
)
from freelance_books.application.ports.database import DatabaseEnginePort
from freelance_books.application.ports.import_destinations import (
    ClientsDestinationPort,
    ExpensesDestinationPort,
    TimeEntriesDestinationPort,
)
from freelance_books.application.use_cases.get_goal_status import (
    GetGoalStatusUseCase,
)
from freelance_books.application.use_cases.get_revenue_dashboard import (
    GetRevenueDashboardUseCase,
)
from freelance_books.infrastructure.bookkeeping_repository import (
    SqlAlchemyBookkeepingRepository,
)
from freelance_books.infrastructure.db import SqlAlchemyDatabaseEngineAdapter
from freelance_books.infrastructure.import_destinations import (
    SqlAlchemyClientsDestination,
    SqlAlchemyExpensesDestination,
    SqlAlchemyTimeEntriesDestination,
)
from freelance_books.infrastructure.logging.logger import get_app_logger
from freelance_books.infrastructure.settings import ReportingSettings


def build_database_adapter() -> DatabaseEnginePort:
    """Return the database adapter instance."""
    return SqlAlchemyDatabaseEngineAdapter()


def build_bookkeeping_repository(
    db_port: DatabaseEnginePort | None = None,
) -> BookkeepingRepositoryPort:
    """Return the repository used for report reads."""
    resolved_db = db_port or build_database_adapter()
    return SqlAlchemyBookkeepingRepository(resolved_db)


def build_clients_destination(
    db_port: DatabaseEnginePort | None = None,
) -> ClientsDestinationPort:
    """Return the destination adapter for imported clients."""
    resolved_db = db_port or build_database_adapter()
    return SqlAlchemyClientsDestination(resolved_db)


def build_expenses_destination(
    db_port: DatabaseEnginePort | None = None,
) -> ExpensesDestinationPort:
    """Return the destination adapter for imported expenses."""
    resolved_db = db_port or build_database_adapter()
    return SqlAlchemyExpensesDestination(resolved_db)


def build_time_entries_destination(
    db_port: DatabaseEnginePort | None = None,
) -> TimeEntriesDestinationPort:
    """Return the destination adapter for imported time entries."""
    resolved_db = db_port or build_database_adapter()
    return SqlAlchemyTimeEntriesDestination(resolved_db)


def build_revenue_dashboard_use_case(
    db_port: DatabaseEnginePort | None = None,
) -> GetRevenueDashboardUseCase:
    """Return the dashboard use case configured from the environment."""
    settings = ReportingSettings.from_env()
    return GetRevenueDashboardUseCase(
        build_bookkeeping_repository(db_port),
        logger=get_app_logger(),
        fixed_price_fallback_months=settings.fixed_price_fallback_months,
        hourly_window_days=settings.hourly_window_days,
    )


def build_goal_status_use_case(
    db_port: DatabaseEnginePort | None = None,
) -> GetGoalStatusUseCase:
    """Return the goal status use case."""
    return GetGoalStatusUseCase(
        build_bookkeeping_repository(db_port),
        logger=get_app_logger(),
    )


__all__ = [
    "build_database_adapter",
    "build_bookkeeping_repository",
    "build_clients_destination",
    "build_expenses_destination",
    "build_time_entries_destination",
    "build_revenue_dashboard_use_case",
    "build_goal_status_use_case",
]
