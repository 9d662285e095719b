"""CLI adapter to export the monthly statement to a file."""

from pathlib import Path

from src.adapters.report_export import (
    csv_filename,
    html_filename,
    render_statement_csv,
    render_statement_html,
)
from src.application.use_cases.get_monthly_report import GetMonthlyReportUseCase
from src.application.use_cases.sync_app_data import SyncAppDataUseCase
from src.infrastructure.container import build_app_context
from src.infrastructure.logging.logger import get_app_logger
from src.infrastructure.settings import ReportSettings


def _output_path(settings: ReportSettings) -> Path:
    if settings.output_path is not None:
        return settings.output_path
    if settings.output_format == "html":
        return Path(html_filename(settings.month, settings.year))
    return Path(csv_filename(settings.month, settings.year))


def main() -> None:
    """Sync, build the statement and write it as CSV or HTML."""
    logger = get_app_logger()
    try:
        settings = ReportSettings.from_env()
    except RuntimeError as exc:
        logger.error(str(exc))
        print(f"Invalid report settings: {exc}")
        return

    context = build_app_context()
    SyncAppDataUseCase(api=context.api, store=context.store, logger=logger).run()
    statement = GetMonthlyReportUseCase(store=context.store, logger=logger).execute(
        settings.month,
        settings.year,
    )

    output_path = _output_path(settings)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    if settings.output_format == "html":
        output_path.write_text(render_statement_html(statement), encoding="utf-8")
    else:
        output_path.write_bytes(render_statement_csv(statement))
    logger.info(f"Wrote {settings.output_format} statement to {output_path}")
    print(
        f"Wrote statement for {settings.year}-{settings.month:02d} "
        f"({statement.transaction_count} transactions) to {output_path}"
    )


if __name__ == "__main__":  # pragma: no cover
    main()
