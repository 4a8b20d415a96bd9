"""Tests for the SQLAlchemy bookkeeping repository."""

from datetime import date, datetime
from decimal import Decimal

import pytest
from sqlalchemy import create_engine, text
from sqlalchemy.pool import StaticPool

from freelance_books.infrastructure.bookkeeping_repository import (
    SqlAlchemyBookkeepingRepository,
)

SCHEMA = [
    "CREATE TABLE clients (id INTEGER PRIMARY KEY, name TEXT)",
    """
    CREATE TABLE contracts (
        id INTEGER PRIMARY KEY,
        client_id INTEGER,
        name TEXT,
        contract_type TEXT,
        hourly_rate NUMERIC,
        fixed_price NUMERIC,
        currency TEXT,
        start_date TEXT,
        end_date TEXT,
        active INTEGER
    )
    """,
    """
    CREATE TABLE tracking_sessions (
        id INTEGER PRIMARY KEY,
        contract_id INTEGER,
        start_time TEXT,
        hours NUMERIC,
        billable INTEGER,
        deleted_at TEXT
    )
    """,
    """
    CREATE TABLE invoices (
        id INTEGER PRIMARY KEY,
        invoice_num TEXT,
        amount NUMERIC,
        status TEXT,
        issued_date TEXT,
        updated_at TEXT
    )
    """,
    """
    CREATE TABLE income_goals (
        id INTEGER PRIMARY KEY,
        amount NUMERIC,
        period TEXT,
        year INTEGER,
        month INTEGER,
        quarter INTEGER,
        description TEXT
    )
    """,
]

SEED = [
    "INSERT INTO clients VALUES (1, 'Acme'), (2, 'Globex')",
    """
    INSERT INTO contracts VALUES
        (1, 1, 'Support', 'hourly', 95, NULL, 'USD',
         '2024-01-01', NULL, 1),
        (2, 2, 'Care plan', 'retainer', NULL, 2000, 'USD',
         '2024-01-01', NULL, 1),
        (3, 2, 'Old site', 'fixed_price', NULL, 5000, 'USD',
         '2023-01-01', '2023-06-30', 0)
    """,
    """
    INSERT INTO tracking_sessions VALUES
        (1, 1, '2024-06-10 09:00:00', 3.5, 1, NULL),
        (2, 1, '2024-06-11 09:00:00', 2, 1, '2024-06-12 00:00:00'),
        (3, 2, '2024-06-11 09:00:00', 1, 0, NULL)
    """,
    """
    INSERT INTO invoices VALUES
        (1, 'INV-1', 500, 'pending', '2024-06-01', '2024-06-01 10:00:00'),
        (2, 'INV-2', 750, 'paid', '2024-05-01', '2024-06-03 10:00:00'),
        (3, 'INV-3', 125, 'overdue', '2024-04-01', NULL)
    """,
    """
    INSERT INTO income_goals VALUES
        (1, 60000, 'yearly', 2024, 0, 0, 'Target'),
        (2, 5000, 'monthly', 2024, 5, 0, ''),
        (3, 5000, 'monthly', 2024, 6, 0, NULL),
        (4, 15000, 'quarterly', 2024, 0, 2, '')
    """,
]


class _FakeDbPort:
    def __init__(self, engine):
        self._engine = engine

    def get_books_engine(self):
        return self._engine


@pytest.fixture
def repository():
    engine = create_engine(
        "sqlite://",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    with engine.begin() as conn:
        for statement in SCHEMA + SEED:
            conn.execute(text(statement))
    return SqlAlchemyBookkeepingRepository(_FakeDbPort(engine))


def test_fetch_active_contracts_joins_clients(repository) -> None:
    """Only active contracts should be returned, newest id first."""
    contracts = repository.fetch_active_contracts()

    assert [contract.id for contract in contracts] == [2, 1]
    support = contracts[1]
    assert support.client_name == "Acme"
    assert support.hourly_rate == Decimal("95")
    assert support.fixed_price is None
    assert support.start_date == date(2024, 1, 1)
    assert support.end_date is None
    assert contracts[0].fixed_price == Decimal("2000")


def test_fetch_sessions_skips_deleted_rows(repository) -> None:
    """Soft-deleted sessions should not be returned."""
    sessions = repository.fetch_sessions_by_contract([1, 2, 9])

    assert set(sessions) == {1, 2, 9}
    assert [session.id for session in sessions[1]] == [1]
    assert sessions[1][0].hours == Decimal("3.5")
    assert sessions[1][0].start_time == datetime(2024, 6, 10, 9, 0)
    assert sessions[2][0].billable is False
    assert sessions[9] == []


def test_fetch_sessions_without_ids_skips_query() -> None:
    """An empty id list should not touch the database."""
    repo = SqlAlchemyBookkeepingRepository(_FakeDbPort(None))

    assert repo.fetch_sessions_by_contract([]) == {}


def test_fetch_invoices_by_status_groups_rows(repository) -> None:
    """Invoices should be grouped under each requested status."""
    invoices = repository.fetch_invoices_by_status(["pending", "overdue"])

    assert [invoice.invoice_num for invoice in invoices["pending"]] == ["INV-1"]
    assert invoices["overdue"][0].amount == Decimal("125")
    assert invoices["overdue"][0].updated_at is None
    assert "paid" not in invoices


def test_fetch_client_count(repository) -> None:
    """Client count should read every client row."""
    assert repository.fetch_client_count() == 2


def test_fetch_income_goals_orders_and_filters(repository) -> None:
    """Goals should be ordered by year, period and most recent slot."""
    goals = repository.fetch_income_goals()
    monthly = repository.fetch_income_goals("monthly")

    assert [goal.id for goal in goals] == [3, 2, 4, 1]
    assert goals[0].description == ""
    assert goals[-1].amount == Decimal("60000")
    assert [goal.id for goal in monthly] == [3, 2]
