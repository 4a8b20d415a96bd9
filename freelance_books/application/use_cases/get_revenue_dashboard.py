"""Use case to compute the monthly revenue dashboard."""

from datetime import datetime
from decimal import Decimal

from freelance_books.application.ports.bookkeeping_repository import (
    BookkeepingRepositoryPort,
)
from freelance_books.domain.constants import (
    CONTRACT_TYPE_HOURLY,
    DEFAULT_FIXED_PRICE_FALLBACK_MONTHS,
    DEFAULT_HOURLY_WINDOW_DAYS,
    UNPAID_INVOICE_STATUSES,
)
from freelance_books.domain.models import RevenueDashboard
from freelance_books.domain.services.revenue import compute_revenue_dashboard
from freelance_books.infrastructure.logging.logger import get_app_logger


class GetRevenueDashboardUseCase:
    """Compute monthly revenue projections from bookkeeping data."""

    def __init__(
        self,
        repository: BookkeepingRepositoryPort,
        logger=None,
        fixed_price_fallback_months: Decimal = (
            DEFAULT_FIXED_PRICE_FALLBACK_MONTHS
        ),
        hourly_window_days: int = DEFAULT_HOURLY_WINDOW_DAYS,
    ) -> None:
        """Initialize the use case.

        Args:
            repository: Port providing contracts, sessions and invoices.
            logger: Optional logger compatible with logging.Logger-like API.
            fixed_price_fallback_months: Proration divisor for fixed-price
                contracts without a usable duration.
            hourly_window_days: Trailing window for hourly revenue.
        """
        self._repository = repository
        self._logger = logger or get_app_logger()
        self._fallback_months = fixed_price_fallback_months
        self._window_days = hourly_window_days

    def execute(self, now: datetime | None = None) -> RevenueDashboard:
        """Return the revenue dashboard.

        Args:
            now: Instant used for the whole computation; defaults to the
                current local time captured once.

        Returns:
            RevenueDashboard: Per-contract lines, subtotals and invoice stats.
        """
        now = now or datetime.now()
        contracts = self._repository.fetch_active_contracts()
        hourly_ids = [
            contract.id
            for contract in contracts
            if (contract.contract_type or "").strip().lower()
            == CONTRACT_TYPE_HOURLY
        ]
        sessions = self._repository.fetch_sessions_by_contract(hourly_ids)
        invoices = self._repository.fetch_invoices_by_status(
            UNPAID_INVOICE_STATUSES
        )
        client_count = self._repository.fetch_client_count()
        self._logger.info(
            f"Fetched {len(contracts)} active contracts for the dashboard"
        )

        dashboard = compute_revenue_dashboard(
            contracts,
            sessions,
            invoices,
            now=now,
            client_count=client_count,
            logger=self._logger,
            fallback_months=self._fallback_months,
            window_days=self._window_days,
        )
        self._logger.info(
            f"Dashboard computed: total={dashboard.total}, "
            f"hourly={dashboard.hourly_total}, "
            f"retainer={dashboard.retainer_total}, "
            f"fixed={dashboard.fixed_total}, "
            f"unpaid={dashboard.unpaid_amount}"
        )
        return dashboard


__all__ = ["GetRevenueDashboardUseCase", "RevenueDashboard"]
