"""SQLAlchemy-backed repository for bookkeeping report data."""

from collections.abc import Iterable

from sqlalchemy import bindparam, text

from freelance_books.application.ports.bookkeeping_repository import (
    BookkeepingRepositoryPort,
)
from freelance_books.application.ports.database import DatabaseEnginePort
from freelance_books.domain.models import (
    ContractRow,
    IncomeGoal,
    InvoiceRow,
    TrackingSessionRow,
)
from freelance_books.utils.date_utils import coerce_date, coerce_datetime
from freelance_books.utils.decimal_utils import (
    coerce_decimal,
    coerce_optional_decimal,
)


SELECT_ACTIVE_CONTRACTS_SQL = text(
    """
    SELECT c.id AS id,
           c.name AS name,
           c.client_id AS client_id,
           cl.name AS client_name,
           c.contract_type AS contract_type,
           c.hourly_rate AS hourly_rate,
           c.fixed_price AS fixed_price,
           c.currency AS currency,
           c.start_date AS start_date,
           c.end_date AS end_date,
           c.active AS active
    FROM contracts c
    JOIN clients cl ON cl.id = c.client_id
    WHERE c.active
    ORDER BY c.id DESC
    """
)

SELECT_SESSIONS_SQL = text(
    """
    SELECT id, contract_id, start_time, hours, billable
    FROM tracking_sessions
    WHERE contract_id IN :contract_ids
      AND deleted_at IS NULL
    ORDER BY start_time DESC
    """
).bindparams(bindparam("contract_ids", expanding=True))

SELECT_INVOICES_SQL = text(
    """
    SELECT id, invoice_num, amount, status, updated_at
    FROM invoices
    WHERE status IN :statuses
    ORDER BY issued_date DESC
    """
).bindparams(bindparam("statuses", expanding=True))

COUNT_CLIENTS_SQL = text("SELECT COUNT(*) FROM clients")

SELECT_GOALS_SQL = """
SELECT id, amount, period, year, month, quarter, description
FROM income_goals
"""

GOALS_ORDER_SQL = " ORDER BY year DESC, period, month DESC, quarter DESC"


class SqlAlchemyBookkeepingRepository(BookkeepingRepositoryPort):
    """Repository backed by the bookkeeping SQL database."""

    def __init__(self, db_port: DatabaseEnginePort) -> None:
        """Initialize the repository.

        Args:
            db_port: Port providing access to the bookkeeping engine.
        """
        self._db_port = db_port

    def fetch_active_contracts(self) -> list[ContractRow]:
        engine = self._db_port.get_books_engine()
        with engine.connect() as conn:
            rows = conn.execute(SELECT_ACTIVE_CONTRACTS_SQL).all()
        return [
            ContractRow(
                id=row.id,
                name=row.name,
                client_id=row.client_id,
                client_name=row.client_name or "",
                contract_type=row.contract_type,
                hourly_rate=coerce_optional_decimal(row.hourly_rate),
                fixed_price=coerce_optional_decimal(row.fixed_price),
                start_date=coerce_date(row.start_date),
                end_date=coerce_date(row.end_date),
                active=bool(row.active),
                currency=row.currency or "USD",
            )
            for row in rows
        ]

    def fetch_sessions_by_contract(
        self,
        contract_ids: Iterable[int],
    ) -> dict[int, list[TrackingSessionRow]]:
        ids = sorted(set(contract_ids))
        sessions: dict[int, list[TrackingSessionRow]] = {
            contract_id: [] for contract_id in ids
        }
        if not ids:
            return sessions
        engine = self._db_port.get_books_engine()
        with engine.connect() as conn:
            rows = conn.execute(
                SELECT_SESSIONS_SQL,
                {"contract_ids": ids},
            ).all()
        for row in rows:
            sessions.setdefault(row.contract_id, []).append(
                TrackingSessionRow(
                    id=row.id,
                    contract_id=row.contract_id,
                    start_time=coerce_datetime(row.start_time),
                    hours=coerce_optional_decimal(row.hours),
                    billable=bool(row.billable),
                )
            )
        return sessions

    def fetch_invoices_by_status(
        self,
        statuses: Iterable[str],
    ) -> dict[str, list[InvoiceRow]]:
        wanted = list(dict.fromkeys(statuses))
        invoices: dict[str, list[InvoiceRow]] = {
            status: [] for status in wanted
        }
        if not wanted:
            return invoices
        engine = self._db_port.get_books_engine()
        with engine.connect() as conn:
            rows = conn.execute(SELECT_INVOICES_SQL, {"statuses": wanted}).all()
        for row in rows:
            invoices.setdefault(row.status, []).append(
                InvoiceRow(
                    id=row.id,
                    amount=coerce_decimal(row.amount),
                    status=row.status,
                    updated_at=coerce_datetime(row.updated_at),
                    invoice_num=row.invoice_num or "",
                )
            )
        return invoices

    def fetch_client_count(self) -> int:
        engine = self._db_port.get_books_engine()
        with engine.connect() as conn:
            count = conn.execute(COUNT_CLIENTS_SQL).scalar()
        return int(count or 0)

    def fetch_income_goals(
        self,
        period: str | None = None,
    ) -> list[IncomeGoal]:
        query, params = self._build_goals_query(period)
        engine = self._db_port.get_books_engine()
        with engine.connect() as conn:
            rows = conn.execute(query, params).all()
        return [
            IncomeGoal(
                id=row.id,
                amount=coerce_decimal(row.amount),
                period=row.period,
                year=int(row.year),
                month=int(row.month or 0),
                quarter=int(row.quarter or 0),
                description=row.description or "",
            )
            for row in rows
        ]

    @staticmethod
    def _build_goals_query(period: str | None):
        base_sql = SELECT_GOALS_SQL
        params: dict[str, str] = {}
        if period:
            base_sql += " WHERE period = :period"
            params["period"] = period
        base_sql += GOALS_ORDER_SQL
        return text(base_sql), params


__all__ = ["SqlAlchemyBookkeepingRepository"]
