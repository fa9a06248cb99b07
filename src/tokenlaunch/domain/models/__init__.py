from tokenlaunch.domain.models.amount import TOKEN_DECIMALS, WEI_PER_TOKEN, FixedAmount, sum_amounts
from tokenlaunch.domain.models.campaign import CampaignConfig, CampaignSnapshot
from tokenlaunch.domain.models.contribution import (
    ContributionEvent,
    Participant,
    ParticipantStats,
    ParticipantTable,
)
from tokenlaunch.domain.models.fee import FeeBreakdown, FeeBreakdownWei, FeeContext
from tokenlaunch.domain.models.pagination import Page, PaginationMeta, page_records
from tokenlaunch.domain.models.trade import ChartPoint, PriceStats, TradeEvent, TradeValidation, VisualMapPiece
from tokenlaunch.domain.models.vesting import VestingScheduleItem

__all__ = [
    "TOKEN_DECIMALS",
    "WEI_PER_TOKEN",
    "CampaignConfig",
    "CampaignSnapshot",
    "ChartPoint",
    "ContributionEvent",
    "FeeBreakdown",
    "FeeBreakdownWei",
    "FeeContext",
    "FixedAmount",
    "Page",
    "PaginationMeta",
    "Participant",
    "ParticipantStats",
    "ParticipantTable",
    "PriceStats",
    "TradeEvent",
    "TradeValidation",
    "VestingScheduleItem",
    "VisualMapPiece",
    "page_records",
    "sum_amounts",
]
