"""Use cases for importing clients, expenses and time entries from rows.

Rows are parsed one by one. A row that cannot be parsed is skipped, a row
that fails to be written is counted as an error, and the batch always runs
to the end.
"""

from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field

from sqlalchemy.exc import SQLAlchemyError

from freelance_books.application.ports.import_destinations import (
    ClientsDestinationPort,
    ExpensesDestinationPort,
    TimeEntriesDestinationPort,
)
from freelance_books.domain.errors import InvalidImportRow, UnparseableDate
from freelance_books.domain.services.normalization import (
    parse_client_row,
    parse_expense_row,
    parse_time_entry_row,
)
from freelance_books.infrastructure.logging.logger import get_app_logger


@dataclass
class ImportResult:
    """Counters and per-row messages of an import run.

    Attributes:
        imported: Rows stored (or previewed during a dry run).
        skipped: Rows that could not be parsed or were already stored.
        errors: Rows that failed to be written.
        dry_run: Whether the run only previewed rows.
        messages: One human-readable line per processed row.
    """

    imported: int = 0
    skipped: int = 0
    errors: int = 0
    dry_run: bool = False
    messages: list[str] = field(default_factory=list)


class ImportClientsUseCase:
    """Import client rows (name, email, address, tax id)."""

    def __init__(
        self,
        destination: ClientsDestinationPort,
        logger=None,
    ) -> None:
        """Initialize the use case.

        Args:
            destination: Port used to look up and store clients.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._destination = destination
        self._logger = logger or get_app_logger()

    def run(
        self,
        rows: Iterable[Sequence[str]],
        dry_run: bool = False,
    ) -> ImportResult:
        """Parse and store client rows.

        Clients whose email is already stored are skipped. Dry runs do not
        look up existing clients.

        Args:
            rows: CSV records without header rows.
            dry_run: Preview rows without writing them.

        Returns:
            ImportResult: Counters and per-row messages.
        """
        result = ImportResult(dry_run=dry_run)
        for record in rows:
            try:
                client = parse_client_row(record)
            except InvalidImportRow as exc:
                result.skipped += 1
                result.messages.append(f"[Skip] {exc}")
                continue

            if dry_run:
                result.imported += 1
                result.messages.append(
                    f"[Preview] {client.name} <{client.email}>"
                )
                continue

            try:
                if self._destination.client_email_exists(client.email):
                    result.skipped += 1
                    result.messages.append(
                        f"[Skip] {client.email} (already exists)"
                    )
                    continue
                self._destination.insert_client(client)
            except SQLAlchemyError as exc:
                result.errors += 1
                result.messages.append(f"[Error] {client.name}: {exc}")
                self._logger.error(
                    f"Failed to store client {client.name!r}: {exc}"
                )
                continue
            result.imported += 1
            result.messages.append(f"[OK] {client.name}")

        self._logger.info(
            f"Client import finished: imported={result.imported}, "
            f"skipped={result.skipped}, errors={result.errors}, "
            f"dry_run={dry_run}"
        )
        return result


class ImportExpensesUseCase:
    """Import expense rows (date, description, amount, category, ...)."""

    def __init__(
        self,
        destination: ExpensesDestinationPort,
        logger=None,
    ) -> None:
        """Initialize the use case.

        Args:
            destination: Port used to store parsed expenses.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._destination = destination
        self._logger = logger or get_app_logger()

    def run(
        self,
        rows: Iterable[Sequence[str]],
        dry_run: bool = False,
    ) -> ImportResult:
        """Parse and store expense rows.

        Args:
            rows: CSV records without header rows.
            dry_run: Preview rows without writing them.

        Returns:
            ImportResult: Counters and per-row messages.
        """
        result = ImportResult(dry_run=dry_run)
        for record in rows:
            try:
                expense = parse_expense_row(record)
            except (UnparseableDate, InvalidImportRow) as exc:
                result.skipped += 1
                result.messages.append(f"[Skip] {exc}")
                continue

            if dry_run:
                result.imported += 1
                result.messages.append(
                    f"[Preview] {expense.date.isoformat()}: "
                    f"{expense.amount:.2f} {expense.currency} - "
                    f"{expense.description}"
                )
                continue

            try:
                self._destination.insert_expense(expense)
            except SQLAlchemyError as exc:
                result.errors += 1
                result.messages.append(f"[Error] {expense.description}: {exc}")
                self._logger.error(
                    f"Failed to store expense {expense.description!r}: {exc}"
                )
                continue
            result.imported += 1
            result.messages.append(
                f"[OK] {expense.description}: {expense.amount:.2f}"
            )

        self._logger.info(
            f"Expense import finished: imported={result.imported}, "
            f"skipped={result.skipped}, errors={result.errors}, "
            f"dry_run={dry_run}"
        )
        return result


class ImportTimeEntriesUseCase:
    """Import time rows (date, client, project, hours, billable, notes)."""

    def __init__(
        self,
        destination: TimeEntriesDestinationPort,
        logger=None,
    ) -> None:
        """Initialize the use case.

        Args:
            destination: Port used to look up clients and store sessions.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._destination = destination
        self._logger = logger or get_app_logger()

    def run(
        self,
        rows: Iterable[Sequence[str]],
        dry_run: bool = False,
    ) -> ImportResult:
        """Parse and store time entry rows.

        Entries are linked to the client whose name matches
        case-insensitively; unknown clients leave the session unlinked.

        Args:
            rows: CSV records without header rows.
            dry_run: Preview rows without writing them.

        Returns:
            ImportResult: Counters and per-row messages.
        """
        result = ImportResult(dry_run=dry_run)
        client_ids = self._destination.fetch_client_ids()
        for record in rows:
            try:
                entry = parse_time_entry_row(record)
            except (UnparseableDate, InvalidImportRow) as exc:
                result.skipped += 1
                result.messages.append(f"[Skip] {exc}")
                continue

            if dry_run:
                result.imported += 1
                result.messages.append(
                    f"[Preview] {entry.date.isoformat()}: {entry.hours:.2f}h "
                    f"for {entry.client_name} - {entry.project_name}"
                )
                continue

            client_id = client_ids.get(entry.client_name.lower())
            try:
                self._destination.insert_time_entry(entry, client_id)
            except SQLAlchemyError as exc:
                result.errors += 1
                result.messages.append(f"[Error] {exc}")
                self._logger.error(
                    f"Failed to store time entry for "
                    f"{entry.project_name!r}: {exc}"
                )
                continue
            result.imported += 1
            result.messages.append(
                f"[OK] {entry.hours:.2f}h - {entry.project_name}"
            )

        self._logger.info(
            f"Time import finished: imported={result.imported}, "
            f"skipped={result.skipped}, errors={result.errors}, "
            f"dry_run={dry_run}"
        )
        return result


__all__ = [
    "ImportResult",
    "ImportClientsUseCase",
    "ImportExpensesUseCase",
    "ImportTimeEntriesUseCase",
]
