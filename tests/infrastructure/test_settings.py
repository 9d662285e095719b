"""Tests for infrastructure settings."""

from datetime import date
from pathlib import Path

import pytest

from src.infrastructure import settings as settings_module
from src.infrastructure.settings import (
    DEFAULT_API_URL,
    ReportSettings,
    TreasurySettings,
)


@pytest.fixture(autouse=True)
def _no_dotenv(monkeypatch):
    monkeypatch.setattr(settings_module.dotenv, "load_dotenv", lambda: None)
    for name in (
        "TREASURY_API_URL",
        "TREASURY_API_TIMEOUT",
        "TREASURY_CACHE_DB_URL",
        "REPORT_MONTH",
        "REPORT_YEAR",
        "REPORT_FORMAT",
        "REPORT_OUTPUT",
    ):
        monkeypatch.delenv(name, raising=False)


def test_from_env_defaults() -> None:
    """Unset variables fall back to the hosted API and local SQLite."""
    settings = TreasurySettings.from_env()

    assert settings.api_url == DEFAULT_API_URL
    assert settings.api_timeout == 10.0
    assert settings.cache_db_url.startswith("sqlite:///")


def test_from_env_strips_trailing_slash(monkeypatch) -> None:
    """The API URL is stored without trailing slash."""
    monkeypatch.setenv("TREASURY_API_URL", "http://localhost:3000/api/")
    monkeypatch.setenv("TREASURY_API_TIMEOUT", "2.5")

    settings = TreasurySettings.from_env()

    assert settings.api_url == "http://localhost:3000/api"
    assert settings.api_timeout == 2.5


@pytest.mark.parametrize("raw", ["abc", "0", "-1"])
def test_invalid_timeout_falls_back(monkeypatch, raw) -> None:
    """Invalid timeouts use the default."""
    monkeypatch.setenv("TREASURY_API_TIMEOUT", raw)

    assert TreasurySettings.from_env().api_timeout == 10.0


def test_report_settings_default_to_current_month() -> None:
    """Without variables the report covers today's month as CSV."""
    settings = ReportSettings.from_env(today=date(2024, 7, 15))

    assert (settings.month, settings.year) == (7, 2024)
    assert settings.output_format == "csv"
    assert settings.output_path is None


def test_report_settings_read_environment(monkeypatch, tmp_path: Path) -> None:
    """Month, year, format and output path come from the environment."""
    monkeypatch.setenv("REPORT_MONTH", "2")
    monkeypatch.setenv("REPORT_YEAR", "2023")
    monkeypatch.setenv("REPORT_FORMAT", "HTML")
    monkeypatch.setenv("REPORT_OUTPUT", str(tmp_path / "out.html"))

    settings = ReportSettings.from_env()

    assert (settings.month, settings.year) == (2, 2023)
    assert settings.output_format == "html"
    assert settings.output_path == tmp_path / "out.html"


@pytest.mark.parametrize(
    ("name", "value"),
    [("REPORT_MONTH", "13"), ("REPORT_YEAR", "x"), ("REPORT_FORMAT", "pdf")],
)
def test_report_settings_reject_invalid_values(monkeypatch, name, value) -> None:
    """Invalid values raise RuntimeError."""
    monkeypatch.setenv(name, value)

    with pytest.raises(RuntimeError):
        ReportSettings.from_env()
