"""Settings helpers for infrastructure adapters."""

from dataclasses import dataclass
from datetime import date
import os
from pathlib import Path

import dotenv

from src.infrastructure.db import default_cache_db_url
from src.infrastructure.logging.logger import get_app_logger

DEFAULT_API_URL = "https://backend-tesouraria.onrender.com/api"
DEFAULT_API_TIMEOUT = 10.0
REPORT_FORMATS = ("csv", "html")


@dataclass(frozen=True)
class TreasurySettings:
    """Settings for the remote API client and the local cache.

    Attributes:
        api_url: REST base URL without trailing slash.
        api_timeout: Request timeout in seconds.
        cache_db_url: SQLAlchemy URL of the local cache database.
    """

    api_url: str = DEFAULT_API_URL
    api_timeout: float = DEFAULT_API_TIMEOUT
    cache_db_url: str = ""

    @classmethod
    def from_env(cls) -> "TreasurySettings":
        """Build settings from environment variables.

        Returns:
            TreasurySettings: Settings sourced from environment variables.
        """
        dotenv.load_dotenv()
        logger = get_app_logger()
        api_url = (os.getenv("TREASURY_API_URL") or DEFAULT_API_URL).strip()
        cache_db_url = (
            os.getenv("TREASURY_CACHE_DB_URL") or default_cache_db_url()
        ).strip()
        return cls(
            api_url=api_url.rstrip("/"),
            api_timeout=cls._parse_timeout(
                os.getenv("TREASURY_API_TIMEOUT"),
                logger=logger,
            ),
            cache_db_url=cache_db_url,
        )

    @staticmethod
    def _parse_timeout(raw_value: str | None, logger) -> float:
        """Parse the timeout, falling back to the default.

        Args:
            raw_value: Raw environment value.
            logger: Logger used for warnings.

        Returns:
            float: Positive timeout in seconds.
        """
        if not raw_value:
            return DEFAULT_API_TIMEOUT
        try:
            timeout = float(raw_value)
        except ValueError:
            logger.warning(
                f"Invalid TREASURY_API_TIMEOUT={raw_value!r}; "
                f"using {DEFAULT_API_TIMEOUT}"
            )
            return DEFAULT_API_TIMEOUT
        if timeout <= 0:
            logger.warning(
                f"Non-positive TREASURY_API_TIMEOUT={raw_value!r}; "
                f"using {DEFAULT_API_TIMEOUT}"
            )
            return DEFAULT_API_TIMEOUT
        return timeout


@dataclass(frozen=True)
class ReportSettings:
    """Settings for the monthly report CLI.

    Attributes:
        month: Calendar month of the statement.
        year: Calendar year of the statement.
        output_format: ``csv`` or ``html``.
        output_path: Destination file, or None for the default name.
    """

    month: int
    year: int
    output_format: str = "csv"
    output_path: Path | None = None

    @classmethod
    def from_env(cls, today: date | None = None) -> "ReportSettings":
        """Build report settings, defaulting to the current month.

        Raises:
            RuntimeError: If a value is not a valid month, year or format.
        """
        dotenv.load_dotenv()
        today = today or date.today()
        month = cls._parse_int("REPORT_MONTH", today.month)
        year = cls._parse_int("REPORT_YEAR", today.year)
        if not 1 <= month <= 12:
            raise RuntimeError(f"REPORT_MONTH must be between 1 and 12: {month}")
        output_format = (os.getenv("REPORT_FORMAT") or "csv").strip().lower()
        if output_format not in REPORT_FORMATS:
            raise RuntimeError(
                f"REPORT_FORMAT must be one of {REPORT_FORMATS}: {output_format}"
            )
        raw_output = os.getenv("REPORT_OUTPUT")
        output_path = Path(raw_output).expanduser() if raw_output else None
        return cls(
            month=month,
            year=year,
            output_format=output_format,
            output_path=output_path,
        )

    @staticmethod
    def _parse_int(name: str, default: int) -> int:
        raw_value = os.getenv(name)
        if not raw_value:
            return default
        try:
            return int(raw_value)
        except ValueError as exc:
            raise RuntimeError(
                f"Invalid integer for {name}: {raw_value!r}"
            ) from exc


__all__ = ["TreasurySettings", "ReportSettings"]
