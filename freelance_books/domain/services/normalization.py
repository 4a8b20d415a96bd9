"""Normalization of free-form imported values."""

from collections.abc import Sequence
from datetime import date, datetime
from decimal import Decimal, InvalidOperation
import re

from freelance_books.domain.constants import MONTH_NAMES
from freelance_books.domain.errors import InvalidImportRow, UnparseableDate
from freelance_books.domain.models import (
    ClientDraft,
    ExpenseCategory,
    ExpenseDraft,
    TimeEntryDraft,
)

# Tried in order; the first format that parses wins. Slash dates with the
# month first follow the US convention, so "1/5/2024" is January 5.
IMPORT_DATE_FORMATS = (
    "%Y-%m-%d",
    "%m/%d/%Y",
    "%Y/%m/%d",
)

_FULL_MONTHS = {name.lower(): number for number, name in enumerate(MONTH_NAMES, 1)}
_SHORT_MONTHS = {name[:3]: number for name, number in _FULL_MONTHS.items()}

# Month words are looked up in English tables and replaced by their number
# before parsing, so the process locale never changes the result. Covers
# "Jan 5, 2024", "January 5, 2024" and "05-Jan-2024", tried in that order.
_NAMED_MONTH_FORMATS = (
    ("%m %d, %Y", _SHORT_MONTHS),
    ("%m %d, %Y", _FULL_MONTHS),
    ("%d-%m-%Y", _SHORT_MONTHS),
)

_MONTH_WORD = re.compile(r"[A-Za-z]+")

_CATEGORY_KEYWORDS = (
    (("software", "subscription"), ExpenseCategory.SOFTWARE),
    (("hardware", "equipment"), ExpenseCategory.HARDWARE),
    (("travel",), ExpenseCategory.TRAVEL),
    (("meal", "food"), ExpenseCategory.MEALS),
    (("office", "supplies"), ExpenseCategory.OFFICE_SUPPLIES),
    (("utilit",), ExpenseCategory.UTILITIES),
    (("marketing", "advertis"), ExpenseCategory.MARKETING),
)

_TRUTHY_FLAGS = ("true", "yes", "1")


def parse_import_date(text: str) -> date:
    """Parse an imported date string.

    Args:
        text: Raw date text (ISO, US slash or ISO slash forms, or English
            month names such as "Jan 5, 2024").

    Returns:
        date: Parsed calendar date.

    Raises:
        UnparseableDate: If no known format matches.
    """
    cleaned = (text or "").strip()
    for fmt in IMPORT_DATE_FORMATS:
        try:
            return datetime.strptime(cleaned, fmt).date()
        except ValueError:
            continue
    for fmt, months in _NAMED_MONTH_FORMATS:
        numeric = _replace_month_word(cleaned, months)
        if numeric is None:
            continue
        try:
            return datetime.strptime(numeric, fmt).date()
        except ValueError:
            continue
    raise UnparseableDate(text)


def _replace_month_word(text: str, months: dict[str, int]) -> str | None:
    match = _MONTH_WORD.search(text)
    if match is None:
        return None
    number = months.get(match.group().lower())
    if number is None:
        return None
    return f"{text[:match.start()]}{number}{text[match.end():]}"


def parse_expense_category(text: str | None) -> ExpenseCategory:
    """Map free-text category names to a known expense category.

    Args:
        text: Raw category text, matched by keyword and case-insensitively.

    Returns:
        ExpenseCategory: Matching category, OTHER when nothing matches.
    """
    cleaned = " ".join((text or "").lower().split())
    for keywords, category in _CATEGORY_KEYWORDS:
        if any(keyword in cleaned for keyword in keywords):
            return category
    return ExpenseCategory.OTHER


def parse_client_row(record: Sequence[str]) -> ClientDraft:
    """Build a client draft from a CSV record.

    Expected columns: name, email, then optional address and tax id.

    Raises:
        InvalidImportRow: If the record is too short or lacks a name or email.
    """
    if len(record) < 2:
        raise InvalidImportRow(f"Expected at least 2 columns, got {len(record)}")
    name = record[0].strip()
    email = record[1].strip()
    if not name or not email:
        raise InvalidImportRow("Client name and email are required")
    return ClientDraft(
        name=name,
        email=email,
        address=record[2].strip() if len(record) > 2 else "",
        tax_id=record[3].strip() if len(record) > 3 else "",
    )


def parse_expense_row(record: Sequence[str]) -> ExpenseDraft:
    """Build an expense draft from a CSV record.

    Expected columns: date, description, amount, then optional category,
    vendor and currency.

    Raises:
        InvalidImportRow: If the record is too short or the amount is invalid.
        UnparseableDate: If the date column cannot be parsed.
    """
    if len(record) < 3:
        raise InvalidImportRow(f"Expected at least 3 columns, got {len(record)}")
    expense_date = parse_import_date(record[0])
    amount = _parse_decimal(record[2], "amount")
    category = ExpenseCategory.OTHER
    if len(record) > 3:
        category = parse_expense_category(record[3])
    vendor = record[4].strip() if len(record) > 4 else ""
    currency = record[5].strip() if len(record) > 5 else ""
    return ExpenseDraft(
        date=expense_date,
        description=record[1].strip(),
        amount=amount,
        category=category,
        vendor=vendor,
        currency=currency or "USD",
    )


def parse_time_entry_row(record: Sequence[str]) -> TimeEntryDraft:
    """Build a time entry draft from a CSV record.

    Expected columns: date, client, project, hours, then optional billable
    flag and notes.

    Raises:
        InvalidImportRow: If the record is too short or the hours are invalid.
        UnparseableDate: If the date column cannot be parsed.
    """
    if len(record) < 4:
        raise InvalidImportRow(f"Expected at least 4 columns, got {len(record)}")
    entry_date = parse_import_date(record[0])
    hours = _parse_decimal(record[3], "hours")
    billable = True
    if len(record) > 4:
        billable = record[4].strip().lower() in _TRUTHY_FLAGS
    notes = record[5].strip() if len(record) > 5 else ""
    return TimeEntryDraft(
        date=entry_date,
        client_name=record[1].strip(),
        project_name=record[2].strip(),
        hours=hours,
        billable=billable,
        notes=notes,
    )


def _parse_decimal(raw: str, field: str) -> Decimal:
    try:
        value = Decimal(raw.strip())
    except InvalidOperation as exc:
        raise InvalidImportRow(f"Invalid {field}: {raw!r}") from exc
    if not value.is_finite():
        raise InvalidImportRow(f"Invalid {field}: {raw!r}")
    return value


__all__ = [
    "IMPORT_DATE_FORMATS",
    "parse_import_date",
    "parse_expense_category",
    "parse_client_row",
    "parse_expense_row",
    "parse_time_entry_row",
]
