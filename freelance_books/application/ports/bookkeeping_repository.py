"""Port for bookkeeping reads needed by reports."""

from collections.abc import Iterable
from typing import Protocol

from freelance_books.domain.models import (
    ContractRow,
    IncomeGoal,
    InvoiceRow,
    TrackingSessionRow,
)


class BookkeepingRepositoryPort(Protocol):
    """Port exposing bookkeeping data needed for report computations."""

    def fetch_active_contracts(self) -> list[ContractRow]:
        """Return active contracts with their client names."""

    def fetch_sessions_by_contract(
        self,
        contract_ids: Iterable[int],
    ) -> dict[int, list[TrackingSessionRow]]:
        """Return tracking sessions grouped by contract id."""

    def fetch_invoices_by_status(
        self,
        statuses: Iterable[str],
    ) -> dict[str, list[InvoiceRow]]:
        """Return invoices grouped by status."""

    def fetch_client_count(self) -> int:
        """Return the number of known clients."""

    def fetch_income_goals(
        self,
        period: str | None = None,
    ) -> list[IncomeGoal]:
        """Return income goals, optionally filtered by period kind."""


__all__ = ["BookkeepingRepositoryPort"]
