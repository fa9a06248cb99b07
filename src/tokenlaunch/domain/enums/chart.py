from enum import Enum


class DedupStrategy(str, Enum):
    """How values sharing one x-axis bucket collapse into a single point."""

    LATEST = "latest"
    EARLIEST = "earliest"
    AVERAGE = "average"
    SUM = "sum"
    MAX = "max"
    MIN = "min"


class TimeFilter(str, Enum):
    ONE_DAY = "1D"
    SEVEN_DAYS = "7D"
    ONE_MONTH = "1M"
    ONE_YEAR = "1Y"
    MAX = "Max"
