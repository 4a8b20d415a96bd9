"""Ports for writing imported records into the bookkeeping store."""

from typing import Protocol

from freelance_books.domain.models import (
    ClientDraft,
    ExpenseDraft,
    TimeEntryDraft,
)


class ClientsDestinationPort(Protocol):
    """Port exposing write access to client storage."""

    def client_email_exists(self, email: str) -> bool:
        """Return True when a client with this email is already stored."""

    def insert_client(self, client: ClientDraft) -> None:
        """Store a single imported client."""


class ExpensesDestinationPort(Protocol):
    """Port exposing write access to expense storage."""

    def insert_expense(self, expense: ExpenseDraft) -> None:
        """Store a single imported expense."""


class TimeEntriesDestinationPort(Protocol):
    """Port exposing write access to tracking session storage."""

    def fetch_client_ids(self) -> dict[str, int]:
        """Return client ids keyed by lowercased client name."""

    def insert_time_entry(
        self,
        entry: TimeEntryDraft,
        client_id: int | None,
    ) -> None:
        """Store a single imported time entry."""


__all__ = [
    "ClientsDestinationPort",
    "ExpensesDestinationPort",
    "TimeEntriesDestinationPort",
]
