"""Campaign configuration and the dashboard snapshot computed from it."""

from datetime import datetime
from decimal import Decimal

from pydantic import BaseModel

from tokenlaunch.domain.enums.status import CampaignStatus, FundraisingType
from tokenlaunch.domain.models.contribution import Participant, ParticipantStats, ParticipantTable
from tokenlaunch.domain.models.trade import ChartPoint, PriceStats, VisualMapPiece
from tokenlaunch.domain.models.vesting import VestingScheduleItem


class CampaignConfig(BaseModel):
    status: CampaignStatus | None = None
    fundraising_type: FundraisingType | None = None
    target_fundraise: Decimal | None = None
    unlock_at_tge: float = 0.0
    vesting_duration: int = 0  # months
    tge_date: datetime
    vesting_start_date: datetime
    total_supply: Decimal | None = None


class CampaignSnapshot(BaseModel):
    """Everything the world-detail page renders for one campaign."""

    price_series: list[ChartPoint] = []
    daily_price_series: list[tuple[str, float]] = []
    price_stats: PriceStats = PriceStats()
    graduation_threshold_usd: float = 0.0
    visual_map: list[VisualMapPiece] = []
    participants: ParticipantTable = ParticipantTable()
    participant_stats: ParticipantStats = ParticipantStats()
    recent_contributors: list[Participant] = []
    vesting_schedule: list[VestingScheduleItem] = []
    vesting_preview: list[VestingScheduleItem] = []
    vesting_errors: list[str] = []
    fee_percentage: str = ""
    is_graduated: bool = False
