"""Use case for the missions view."""

from src.application.state import AppStateStore
from src.domain.models import CampaignOverview
from src.domain.services.campaigns import (
    active_campaign,
    campaign_incomes,
    campaign_progress,
    completed_campaigns,
    source_breakdown,
)
from src.infrastructure.logging.logger import get_app_logger


class GetCampaignOverviewUseCase:
    """Compute progress and source breakdown of the active campaign."""

    def __init__(self, store: AppStateStore, logger=None) -> None:
        self._store = store
        self._logger = logger or get_app_logger()

    def execute(self) -> CampaignOverview:
        """Return the campaign overview.

        Returns:
            CampaignOverview: Active campaign (or None), its progress and
            breakdown, plus completed campaigns newest first.
        """
        snapshot = self._store.snapshot
        active = active_campaign(snapshot.mission_campaigns)
        incomes = campaign_incomes(active, snapshot.mission_incomes)
        overview = CampaignOverview(
            active=active,
            progress=campaign_progress(active, snapshot.mission_incomes),
            breakdown=source_breakdown(incomes),
            completed=completed_campaigns(snapshot.mission_campaigns),
        )
        name = active.name if active else "none"
        self._logger.info(
            f"Campaign overview: active={name}, "
            f"progress={overview.progress.percentage}%"
        )
        return overview


__all__ = ["GetCampaignOverviewUseCase"]
