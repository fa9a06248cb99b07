from decimal import Decimal

from pydantic import BaseModel

from tokenlaunch.domain.models.amount import FixedAmount


class FeeBreakdown(BaseModel):
    base_amount: Decimal
    fee_amount: Decimal
    total_amount: Decimal


class FeeBreakdownWei(BaseModel):
    base_amount: FixedAmount
    fee_amount: FixedAmount
    total_amount: FixedAmount


class FeeContext(BaseModel):
    """Fee figures shown next to a bonding-curve trade form."""

    fee_amount: Decimal = Decimal(0)
    fee_currency: str = ""
    base_amount: Decimal = Decimal(0)
    total_amount: Decimal = Decimal(0)
    should_show_fees: bool = False
