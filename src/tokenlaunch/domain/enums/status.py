from enum import Enum


class CampaignStatus(str, Enum):
    """Lifecycle status of a token launch campaign."""

    ON_GOING = "ON_GOING"
    LIVE = "LIVE"
    COMPLETED = "COMPLETED"
    CANCELLED = "CANCELLED"


class FundraisingType(str, Enum):
    """How a campaign raises: fixed-price DAO pool or bonding curve."""

    FIXED_PRICE = "FIXED_PRICE"
    BONDING_CURVE = "BONDING_CURVE"
