"""Domain errors raised by report and import computations."""


class BookkeepingError(Exception):
    """Base class for bookkeeping domain errors."""


class InvalidPeriod(BookkeepingError, ValueError):
    """Raised when a goal period selector does not name a calendar period."""

    def __init__(self, period: str, detail: str | None = None) -> None:
        self.period = period
        message = f"Invalid goal period: {period!r}"
        if detail:
            message = f"{message} ({detail})"
        super().__init__(message)


class UnparseableDate(BookkeepingError, ValueError):
    """Raised when imported date text matches none of the known formats."""

    def __init__(self, text: str) -> None:
        self.text = text
        super().__init__(f"Unable to parse date: {text!r}")


class UnknownBillingType(BookkeepingError, ValueError):
    """Raised when a contract carries an unrecognized billing type."""

    def __init__(self, contract_type: str) -> None:
        self.contract_type = contract_type
        super().__init__(f"Unknown contract type: {contract_type!r}")


class InvalidImportRow(BookkeepingError, ValueError):
    """Raised when an imported row cannot be turned into a record."""


__all__ = [
    "BookkeepingError",
    "InvalidPeriod",
    "UnparseableDate",
    "UnknownBillingType",
    "InvalidImportRow",
]
