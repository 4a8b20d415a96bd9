"""Infrastructure adapters writing imported records via SQLAlchemy."""

from datetime import datetime, timedelta
from decimal import Decimal

from sqlalchemy import text

from freelance_books.application.ports.database import DatabaseEnginePort
from freelance_books.application.ports.import_destinations import (
    ClientsDestinationPort,
    ExpensesDestinationPort,
    TimeEntriesDestinationPort,
)
from freelance_books.domain.models import (
    ClientDraft,
    ExpenseDraft,
    TimeEntryDraft,
)


SELECT_CLIENT_BY_EMAIL_SQL = text("SELECT id FROM clients WHERE email = :email")

INSERT_CLIENT_SQL = text(
    """
    INSERT INTO clients (name, email, address, tax_id)
    VALUES (:name, :email, :address, :tax_id)
    """
)

INSERT_EXPENSE_SQL = text(
    """
    INSERT INTO expenses (
        description,
        amount,
        currency,
        category,
        date,
        vendor
    )
    VALUES (
        :description,
        :amount,
        :currency,
        :category,
        :date,
        :vendor
    )
    """
)

SELECT_CLIENTS_SQL = text("SELECT id, name FROM clients")

INSERT_TIME_ENTRY_SQL = text(
    """
    INSERT INTO tracking_sessions (
        client_id,
        project_name,
        start_time,
        end_time,
        duration,
        hours,
        billable,
        notes
    )
    VALUES (
        :client_id,
        :project_name,
        :start_time,
        :end_time,
        :duration,
        :hours,
        :billable,
        :notes
    )
    """
)


class SqlAlchemyClientsDestination(ClientsDestinationPort):
    """Client destination backed by the bookkeeping SQL database."""

    def __init__(self, db_port: DatabaseEnginePort) -> None:
        """Initialize the destination adapter.

        Args:
            db_port: Port providing access to the bookkeeping engine.
        """
        self._db_port = db_port

    def client_email_exists(self, email: str) -> bool:
        engine = self._db_port.get_books_engine()
        with engine.connect() as conn:
            found = conn.execute(
                SELECT_CLIENT_BY_EMAIL_SQL,
                {"email": email},
            ).first()
        return found is not None

    def insert_client(self, client: ClientDraft) -> None:
        """Insert one client row.

        Args:
            client: Parsed client to store.
        """
        payload = {
            "name": client.name,
            "email": client.email,
            "address": client.address,
            "tax_id": client.tax_id,
        }
        engine = self._db_port.get_books_engine()
        with engine.begin() as conn:
            conn.execute(INSERT_CLIENT_SQL, payload)


class SqlAlchemyExpensesDestination(ExpensesDestinationPort):
    """Expense destination backed by the bookkeeping SQL database."""

    def __init__(self, db_port: DatabaseEnginePort) -> None:
        """Initialize the destination adapter.

        Args:
            db_port: Port providing access to the bookkeeping engine.
        """
        self._db_port = db_port

    def insert_expense(self, expense: ExpenseDraft) -> None:
        """Insert one expense row.

        Args:
            expense: Parsed expense to store.
        """
        payload = {
            "description": expense.description,
            "amount": float(expense.amount),
            "currency": expense.currency,
            "category": expense.category.value,
            "date": datetime(
                expense.date.year,
                expense.date.month,
                expense.date.day,
            ),
            "vendor": expense.vendor,
        }
        engine = self._db_port.get_books_engine()
        with engine.begin() as conn:
            conn.execute(INSERT_EXPENSE_SQL, payload)


class SqlAlchemyTimeEntriesDestination(TimeEntriesDestinationPort):
    """Tracking session destination backed by the bookkeeping database."""

    def __init__(self, db_port: DatabaseEnginePort) -> None:
        """Initialize the destination adapter.

        Args:
            db_port: Port providing access to the bookkeeping engine.
        """
        self._db_port = db_port

    def fetch_client_ids(self) -> dict[str, int]:
        """Return client ids keyed by lowercased name.

        Returns:
            dict[str, int]: Client lookup used to link imported sessions.
        """
        engine = self._db_port.get_books_engine()
        with engine.connect() as conn:
            rows = conn.execute(SELECT_CLIENTS_SQL).all()
        return {row.name.strip().lower(): row.id for row in rows if row.name}

    def insert_time_entry(
        self,
        entry: TimeEntryDraft,
        client_id: int | None,
    ) -> None:
        """Insert one tracking session for an imported time entry.

        The session starts at midnight of the entry date and ends after the
        imported number of hours.

        Args:
            entry: Parsed time entry to store.
            client_id: Matching client id, None when the client is unknown.
        """
        start_time = datetime(entry.date.year, entry.date.month, entry.date.day)
        seconds = int(entry.hours * Decimal("3600"))
        payload = {
            "client_id": client_id,
            "project_name": entry.project_name,
            "start_time": start_time,
            "end_time": start_time + timedelta(seconds=seconds),
            "duration": seconds,
            "hours": float(entry.hours),
            "billable": entry.billable,
            "notes": entry.notes,
        }
        engine = self._db_port.get_books_engine()
        with engine.begin() as conn:
            conn.execute(INSERT_TIME_ENTRY_SQL, payload)


__all__ = [
    "SqlAlchemyClientsDestination",
    "SqlAlchemyExpensesDestination",
    "SqlAlchemyTimeEntriesDestination",
]
