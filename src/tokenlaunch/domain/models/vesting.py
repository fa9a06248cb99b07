from datetime import datetime
from decimal import Decimal

from pydantic import BaseModel


class VestingScheduleItem(BaseModel):
    """One unlock step. order 0 is the TGE unlock, order N is Month N."""

    order: int
    time_label: str
    date: datetime
    percentage: float
    vesting_amount: Decimal
    cumulative_percentage: float
    cumulative_amount: Decimal
