from enum import Enum


class TradeSide(str, Enum):
    BUY = "BUY"
    SELL = "SELL"


class TradingMode(str, Enum):
    """Which side of a bonding-curve quote the user typed in."""

    EXACT_IN = "exactIn"
    EXACT_OUT = "exactOut"
