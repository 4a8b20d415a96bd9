"""CLI adapter importing clients, expenses or time entries from a CSV file.

Configuration comes from IMPORT_FILE, IMPORT_TYPE (clients, expenses or
time), IMPORT_SKIP_ROWS and IMPORT_DRY_RUN.
"""

import csv
from itertools import islice
from pathlib import Path

from freelance_books.application.use_cases.import_records import (
    ImportClientsUseCase,
    ImportExpensesUseCase,
    ImportTimeEntriesUseCase,
)
from freelance_books.infrastructure.container import (
    build_clients_destination,
    build_expenses_destination,
    build_time_entries_destination,
)
from freelance_books.infrastructure.logging.logger import (
    get_app_logger,
    get_usage_logger,
)
from freelance_books.infrastructure.settings import ImportSettings

EXPECTED_FORMATS = {
    "clients": "name,email,address,tax_id",
    "expenses": "date,description,amount,category,vendor,currency",
    "time": "date,client,project,hours,billable,notes",
}


def _read_rows(path: Path, skip_rows: int) -> list[list[str]]:
    """Read CSV records, dropping header rows and blank lines."""
    with path.open(newline="", encoding="utf-8-sig") as handle:
        reader = csv.reader(handle)
        return [row for row in islice(reader, skip_rows, None) if row]


def _build_use_case(data_type: str, logger):
    if data_type == "clients":
        return ImportClientsUseCase(build_clients_destination(), logger=logger)
    if data_type == "expenses":
        return ImportExpensesUseCase(build_expenses_destination(), logger=logger)
    return ImportTimeEntriesUseCase(
        build_time_entries_destination(),
        logger=logger,
    )


def main() -> None:
    """Run the configured CSV import and print a summary."""
    logger = get_app_logger()
    settings = ImportSettings.from_env()
    if settings.file is None:
        logger.warning("IMPORT_FILE is required to run an import.")
        return
    if settings.data_type not in EXPECTED_FORMATS:
        logger.warning(
            f"Unknown IMPORT_TYPE {settings.data_type!r}; "
            "expected 'clients', 'expenses' or 'time'."
        )
        return

    try:
        rows = _read_rows(settings.file, settings.skip_rows)
    except OSError as exc:
        logger.error(f"Failed to read {settings.file}: {exc}")
        return

    print(f"Importing {settings.data_type}...")
    print(f"Expected format: {EXPECTED_FORMATS[settings.data_type]}")
    print()

    use_case = _build_use_case(settings.data_type, logger)
    result = use_case.run(rows, dry_run=settings.dry_run)
    get_usage_logger().info(
        f"{settings.data_type} import of {settings.file.name}"
    )

    for message in result.messages:
        print(f"  {message}")
    print()
    if result.dry_run:
        print("Dry run completed - no data was saved")
    print(
        f"Imported: {result.imported}, Skipped: {result.skipped}, "
        f"Errors: {result.errors}"
    )


if __name__ == "__main__":  # pragma: no cover
    main()
