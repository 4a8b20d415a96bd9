"""Settings helpers for infrastructure adapters."""

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
import os
from pathlib import Path
from typing import Optional

import dotenv

from freelance_books.domain.constants import (
    DEFAULT_FIXED_PRICE_FALLBACK_MONTHS,
    DEFAULT_HOURLY_WINDOW_DAYS,
)
from freelance_books.infrastructure.logging.logger import get_app_logger

_TRUTHY_VALUES = ("1", "true", "yes", "on")


@dataclass(frozen=True)
class ReportingSettings:
    """Settings for revenue and goal reports.

    Attributes:
        fixed_price_fallback_months: Months used to prorate fixed-price
            contracts without a usable duration.
        hourly_window_days: Trailing window for hourly revenue.
    """

    fixed_price_fallback_months: Decimal = DEFAULT_FIXED_PRICE_FALLBACK_MONTHS
    hourly_window_days: int = DEFAULT_HOURLY_WINDOW_DAYS

    @classmethod
    def from_env(cls) -> "ReportingSettings":
        """Build settings from environment variables.

        Returns:
            ReportingSettings: Settings sourced from environment variables.
        """
        dotenv.load_dotenv()
        logger = get_app_logger()
        fallback_months = cls._parse_positive_decimal(
            "FIXED_PRICE_FALLBACK_MONTHS",
            DEFAULT_FIXED_PRICE_FALLBACK_MONTHS,
            logger=logger,
        )
        window_days = cls._parse_positive_int(
            "HOURLY_WINDOW_DAYS",
            DEFAULT_HOURLY_WINDOW_DAYS,
            logger=logger,
        )
        return cls(
            fixed_price_fallback_months=fallback_months,
            hourly_window_days=window_days,
        )

    @staticmethod
    def _parse_positive_decimal(
        name: str,
        default: Decimal,
        logger,
    ) -> Decimal:
        """Read a positive decimal from the environment.

        Args:
            name: Environment variable name.
            default: Value used when the variable is unset or invalid.
            logger: Logger used for warnings.

        Returns:
            Decimal: Parsed value or the default.
        """
        raw = os.getenv(name)
        if not raw:
            return default
        try:
            value = Decimal(raw.strip())
        except InvalidOperation:
            value = None
        if value is None or not value.is_finite() or value <= 0:
            logger.warning(
                f"Ignoring {name}={raw!r}; expected a positive number"
            )
            return default
        return value

    @staticmethod
    def _parse_positive_int(name: str, default: int, logger) -> int:
        """Read a positive integer from the environment.

        Args:
            name: Environment variable name.
            default: Value used when the variable is unset or invalid.
            logger: Logger used for warnings.

        Returns:
            int: Parsed value or the default.
        """
        raw = os.getenv(name)
        if not raw:
            return default
        try:
            value = int(raw.strip())
        except ValueError:
            value = 0
        if value <= 0:
            logger.warning(
                f"Ignoring {name}={raw!r}; expected a positive integer"
            )
            return default
        return value


@dataclass(frozen=True)
class ImportSettings:
    """Settings for the CSV import adapter.

    Attributes:
        file: Path to the CSV file to import.
        data_type: Kind of records in the file (clients, expenses or time).
        skip_rows: Number of header rows to skip.
        dry_run: Preview rows without writing them.
    """

    file: Optional[Path] = None
    data_type: str = ""
    skip_rows: int = 1
    dry_run: bool = False

    @classmethod
    def from_env(cls) -> "ImportSettings":
        """Build settings from environment variables.

        Returns:
            ImportSettings: Settings sourced from environment variables.
        """
        dotenv.load_dotenv()
        logger = get_app_logger()
        raw_file = os.getenv("IMPORT_FILE")
        import_file = None
        if raw_file:
            import_file = Path(raw_file).expanduser().resolve()
            if not import_file.exists():
                logger.warning(f"Import file does not exist at {import_file}")
        data_type = os.getenv("IMPORT_TYPE", "").strip().lower()
        raw_skip = os.getenv("IMPORT_SKIP_ROWS", "1").strip()
        try:
            skip_rows = max(int(raw_skip), 0)
        except ValueError:
            logger.warning(
                f"Ignoring IMPORT_SKIP_ROWS={raw_skip!r}; expected an integer"
            )
            skip_rows = 1
        dry_run = (
            os.getenv("IMPORT_DRY_RUN", "").strip().lower() in _TRUTHY_VALUES
        )
        return cls(
            file=import_file,
            data_type=data_type,
            skip_rows=skip_rows,
            dry_run=dry_run,
        )


__all__ = ["ReportingSettings", "ImportSettings"]
