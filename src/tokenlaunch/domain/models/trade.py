"""Bonding-curve trade events and the chart types derived from them."""

from decimal import Decimal
from typing import NamedTuple

from pydantic import BaseModel, ConfigDict

from tokenlaunch.domain.enums.trade import TradeSide
from tokenlaunch.domain.models.amount import FixedAmount


class TradeEvent(BaseModel):
    """A validated bonding-curve buy or sell. ``side`` is the tagged variant."""

    model_config = ConfigDict(frozen=True)

    id: str
    trader_address: str
    side: TradeSide
    base_amount: FixedAmount  # token
    quote_amount: FixedAmount  # AWE
    block_timestamp: int  # unix seconds
    block_number: int | None = None
    tx_hash: str = ""

    @property
    def timestamp_ms(self) -> int:
        return self.block_timestamp * 1000

    @property
    def quote_per_base(self) -> Decimal:
        """Executed price in AWE per token."""
        return self.quote_amount.to_decimal() / self.base_amount.to_decimal()


class ChartPoint(NamedTuple):
    timestamp_ms: int
    price_usd: float


class PriceStats(BaseModel):
    current_price: float = 0.0
    previous_price: float = 0.0
    highest_price: float = 0.0
    lowest_price: float = 0.0
    price_change: float = 0.0
    price_change_percent: float = 0.0


class VisualMapPiece(BaseModel):
    """A colour band on the price chart, split at the graduation threshold."""

    gt: float
    lte: float | None = None
    color: str


class TradeValidation(BaseModel):
    is_valid: bool
    errors: list[str] = []
    trade_id: str = "unknown"
