from enum import Enum


class ContributionType(str, Enum):
    """Indexer event kinds. Only CONTRIBUTION rows feed the participant ledger."""

    CONTRIBUTION = "CONTRIBUTION"
    REFUND = "REFUND"
    BONDING_CURVE_BUY = "BONDING_CURVE_BUY"
    BONDING_CURVE_SELL = "BONDING_CURVE_SELL"
    DAO_CLAIMED = "DAO_CLAIMED"
