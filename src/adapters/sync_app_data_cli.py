"""CLI adapter to refresh the local snapshot from the remote API.

This module wires the SyncAppDataUseCase to the concrete adapters and
provides a simple command-line entry point for running the sync.
"""

from src.application.use_cases.sync_app_data import SyncAppDataUseCase
from src.infrastructure.container import build_app_context
from src.infrastructure.logging.logger import get_app_logger


def main() -> None:
    """Run the snapshot synchronization use case."""
    logger = get_app_logger()
    context = build_app_context()
    use_case = SyncAppDataUseCase(
        api=context.api,
        store=context.store,
        logger=logger,
    )

    result = use_case.run()

    if not result.refreshed:
        print("Remote API unavailable; kept the cached snapshot.")
    counts = ", ".join(f"{name}={count}" for name, count in result.counts.items())
    print(f"Snapshot source: {result.source} ({counts})")


if __name__ == "__main__":  # pragma: no cover
    main()
