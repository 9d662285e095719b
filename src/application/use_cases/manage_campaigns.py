"""Use cases for mission campaigns and their incomes."""

from datetime import date, datetime, timezone
from decimal import Decimal

from src.application.ports.treasury_api import TreasuryApiPort
from src.application.state import AppStateStore
from src.application.use_cases.lookups import find_by_id
from src.application.use_cases.sync_app_data import SyncAppDataUseCase
from src.domain.errors import ValidationError
from src.domain.models import (
    CampaignStatus,
    MissionCampaign,
    MissionIncome,
)
from src.domain.services.campaigns import (
    active_campaign,
    complete_campaign,
    ensure_can_create_campaign,
)
from src.domain.services.validation import (
    validate_campaign,
    validate_mission_income,
)
from src.infrastructure.logging.logger import get_app_logger


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class _MissionUseCase:
    def __init__(
        self,
        api: TreasuryApiPort,
        store: AppStateStore,
        logger=None,
    ) -> None:
        """Initialize the use case.

        Args:
            api: Port for the remote treasury API.
            store: Application state container.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._api = api
        self._store = store
        self._logger = logger or get_app_logger()
        self._sync = SyncAppDataUseCase(api, store, logger=self._logger)


class CreateCampaignUseCase(_MissionUseCase):
    """Start a new campaign while none is active."""

    def execute(
        self,
        name: str,
        target: Decimal,
        now: datetime | None = None,
    ) -> MissionCampaign:
        """Create the campaign.

        Args:
            name: Campaign name.
            target: Amount to raise; must be positive.
            now: Start timestamp; defaults to the current UTC time.

        Returns:
            MissionCampaign: Record as returned by the API.

        Raises:
            ValidationError: On invalid input or when a campaign is active.
        """
        campaign = MissionCampaign(
            id="",
            name=name,
            target=target,
            start_date=now or _utc_now(),
            status=CampaignStatus.ACTIVE,
        )
        validate_campaign(campaign)
        ensure_can_create_campaign(self._store.snapshot.mission_campaigns)
        created = self._api.create_campaign(campaign)
        self._store.apply(lambda data: data.with_campaign_added(created))
        self._logger.info(
            f"Created campaign {created.id} ({created.name}) "
            f"with target {created.target}"
        )
        self._sync.run()
        return created


class CompleteCampaignUseCase(_MissionUseCase):
    """Close an active campaign."""

    def execute(
        self,
        campaign_id: str,
        now: datetime | None = None,
    ) -> MissionCampaign:
        campaign = find_by_id(
            self._store.snapshot.mission_campaigns,
            campaign_id,
            "Campaign",
        )
        completed = complete_campaign(campaign, now or _utc_now())
        saved = self._api.complete_campaign(completed)
        self._store.apply(lambda data: data.with_campaign_replaced(saved))
        self._logger.info(f"Completed campaign {campaign_id}")
        self._sync.run()
        return saved


class CreateMissionIncomeUseCase(_MissionUseCase):
    """Record a contribution against the active campaign."""

    def execute(
        self,
        source: str,
        value: Decimal,
        income_date: date,
        description: str | None = None,
    ) -> MissionIncome:
        """Create the income.

        Args:
            source: One of the fixed mission sources.
            value: Amount received; must be positive.
            income_date: Date of the contribution.
            description: Optional note.

        Returns:
            MissionIncome: Record as returned by the API.

        Raises:
            ValidationError: If no campaign is active or the input is invalid.
        """
        campaign = active_campaign(self._store.snapshot.mission_campaigns)
        if campaign is None:
            raise ValidationError(
                "An active campaign is required to record mission income"
            )
        income = MissionIncome(
            id="",
            campaign_id=campaign.id,
            source=source,
            value=value,
            date=income_date,
            description=description or None,
        )
        validate_mission_income(income)
        created = self._api.create_mission_income(income)
        self._store.apply(lambda data: data.with_income_added(created))
        self._logger.info(
            f"Recorded mission income {created.id} of {created.value} "
            f"from {created.source} for campaign {campaign.id}"
        )
        self._sync.run()
        return created


class DeleteMissionIncomeUseCase(_MissionUseCase):
    """Delete a mission income."""

    def execute(self, income_id: str) -> None:
        find_by_id(self._store.snapshot.mission_incomes, income_id, "Income")
        self._api.delete_mission_income(income_id)
        self._store.apply(lambda data: data.with_income_removed(income_id))
        self._logger.info(f"Deleted mission income {income_id}")
        self._sync.run()


__all__ = [
    "CreateCampaignUseCase",
    "CompleteCampaignUseCase",
    "CreateMissionIncomeUseCase",
    "DeleteMissionIncomeUseCase",
]
