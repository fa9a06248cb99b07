from tokenlaunch.domain.enums.chart import DedupStrategy, TimeFilter
from tokenlaunch.domain.enums.contribution import ContributionType
from tokenlaunch.domain.enums.malformed import MalformedReason
from tokenlaunch.domain.enums.status import CampaignStatus, FundraisingType
from tokenlaunch.domain.enums.trade import TradeSide, TradingMode

__all__ = [
    "CampaignStatus",
    "ContributionType",
    "DedupStrategy",
    "FundraisingType",
    "MalformedReason",
    "TimeFilter",
    "TradeSide",
    "TradingMode",
]
