"""Mission campaign progress and lifecycle."""

from dataclasses import replace
from datetime import datetime
from decimal import Decimal

from src.domain.constants import MISSION_SOURCES
from src.domain.errors import ValidationError
from src.domain.models import (
    CampaignProgress,
    CampaignStatus,
    MissionCampaign,
    MissionIncome,
    SourceShare,
)
from src.utils.decimal_utils import percentage_of


def active_campaign(campaigns: list[MissionCampaign]) -> MissionCampaign | None:
    """Return the first active campaign, or None."""
    for campaign in campaigns:
        if campaign.is_active:
            return campaign
    return None


def campaign_incomes(
    campaign: MissionCampaign | None,
    incomes: list[MissionIncome],
) -> list[MissionIncome]:
    """Return incomes recorded against the campaign."""
    if campaign is None:
        return []
    return [income for income in incomes if income.campaign_id == campaign.id]


def _raised(incomes: list[MissionIncome]) -> Decimal:
    return sum((income.value for income in incomes), Decimal("0"))


def campaign_progress(
    campaign: MissionCampaign | None,
    incomes: list[MissionIncome],
) -> CampaignProgress:
    """Compute how far a campaign is from its target.

    The percentage is not clamped; only the progress bar caps it at 100.

    Args:
        campaign: Campaign to evaluate, or None when none is active.
        incomes: Every known mission income.

    Returns:
        CampaignProgress: Raised amount, target, percentage and remainder.
    """
    if campaign is None:
        zero = Decimal("0")
        return CampaignProgress(
            raised=zero,
            target=zero,
            percentage="0.00",
            remaining=zero,
        )
    raised = _raised(campaign_incomes(campaign, incomes))
    return CampaignProgress(
        raised=raised,
        target=campaign.target,
        percentage=percentage_of(raised, campaign.target),
        remaining=max(Decimal("0"), campaign.target - raised),
    )


def source_breakdown(incomes: list[MissionIncome]) -> list[SourceShare]:
    """Split incomes across the fixed mission sources.

    Sources outside the fixed list still count towards the total raised
    but get no row of their own.

    Args:
        incomes: Incomes of one campaign.

    Returns:
        list[SourceShare]: One row per source, in fixed order.
    """
    raised = _raised(incomes)
    shares = []
    for source in MISSION_SOURCES:
        value = _raised([i for i in incomes if i.source == source])
        shares.append(
            SourceShare(
                source=source,
                value=value,
                percentage=percentage_of(value, raised),
            )
        )
    return shares


def ensure_can_create_campaign(campaigns: list[MissionCampaign]) -> None:
    """Raise when another campaign is still active.

    Raises:
        ValidationError: If an active campaign exists.
    """
    current = active_campaign(campaigns)
    if current is not None:
        raise ValidationError(
            f"Campaign '{current.name}' is still active; complete it first"
        )


def complete_campaign(
    campaign: MissionCampaign,
    now: datetime,
) -> MissionCampaign:
    """Return the campaign marked as completed at ``now``.

    Raises:
        ValidationError: If the campaign is already completed.
    """
    if not campaign.is_active:
        raise ValidationError(f"Campaign {campaign.id} is already completed")
    return replace(campaign, status=CampaignStatus.COMPLETED, end_date=now)


def completed_campaigns(
    campaigns: list[MissionCampaign],
) -> list[MissionCampaign]:
    """Return completed campaigns, most recently finished first."""
    completed = [c for c in campaigns if c.status == CampaignStatus.COMPLETED]
    return sorted(
        completed,
        key=lambda c: c.end_date.timestamp() if c.end_date else float("-inf"),
        reverse=True,
    )


__all__ = [
    "active_campaign",
    "campaign_incomes",
    "campaign_progress",
    "source_breakdown",
    "ensure_can_create_campaign",
    "complete_campaign",
    "completed_campaigns",
]
