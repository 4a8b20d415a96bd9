"""Helpers for date and datetime normalization."""

from datetime import date, datetime


def coerce_datetime(value) -> datetime | None:
    """Normalize SQL timestamp values to naive local datetimes.

    SQLite returns timestamps as ISO strings when read through text()
    queries; other drivers return datetime objects. Aware values are
    converted to local time so they compare with naive instants.

    Args:
        value: Raw timestamp value from SQL or adapters.

    Returns:
        datetime | None: Normalized datetime, None when the value is absent.
    """
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        moment = value
    elif isinstance(value, date):
        moment = datetime(value.year, value.month, value.day)
    else:
        moment = datetime.fromisoformat(str(value).strip())
    if moment.tzinfo is not None:
        moment = moment.astimezone().replace(tzinfo=None)
    return moment


def coerce_date(value) -> date | None:
    """Normalize SQL date or timestamp values to dates.

    Args:
        value: Raw date value from SQL or adapters.

    Returns:
        date | None: Calendar date, None when the value is absent.
    """
    moment = coerce_datetime(value)
    return moment.date() if moment is not None else None


__all__ = ["coerce_datetime", "coerce_date"]
