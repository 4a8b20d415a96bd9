"""Application ports package."""

from .bookkeeping_repository import BookkeepingRepositoryPort
from .database import DatabaseEnginePort
from .import_destinations import (
    ClientsDestinationPort,
    ExpensesDestinationPort,
    TimeEntriesDestinationPort,
)

__all__ = [
    "BookkeepingRepositoryPort",
    "DatabaseEnginePort",
    "ClientsDestinationPort",
    "ExpensesDestinationPort",
    "TimeEntriesDestinationPort",
]
