"""Fundraise contribution events and the participant ledger built from them."""

from datetime import datetime
from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field, field_validator

from tokenlaunch.domain.enums.contribution import ContributionType
from tokenlaunch.domain.models.amount import FixedAmount
from tokenlaunch.utils.dates import MAX_UNIX_SECONDS, is_valid_unix_seconds


class ContributionEvent(BaseModel):
    """One indexer contribution-history row. Validates straight from the camelCase record."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: str
    contributor_address: str = Field(alias="contributorAddress")
    contribution_type: ContributionType = Field(alias="contributionType")
    amount: FixedAmount
    timestamp: int  # unix seconds
    block_number: int | None = Field(None, alias="blockNumber")
    tx_hash: str = Field("", alias="transactionHash")

    @field_validator("timestamp")
    @classmethod
    def _timestamp_in_range(cls, v: int) -> int:
        if not is_valid_unix_seconds(v):
            raise ValueError(f"timestamp must be unix seconds in 0..{MAX_UNIX_SECONDS}")
        return v


class Participant(BaseModel):
    """A ledger row. One per contribution event; a wallet may appear more than once."""

    id: str
    wallet_address: str
    amount: Decimal
    percentage: float  # share of total, 0..100
    timestamp: datetime
    tx_hash: str
    token_amount: Decimal | None = None
    is_pending: bool = False


class ParticipantTable(BaseModel):
    participants: list[Participant] = []
    total_amount: Decimal = Decimal(0)
    total_participants: int = 0
    currency: str = "AWE"


class ParticipantStats(BaseModel):
    total_contributions: int = 0
    total_refunds: int = 0
    unique_participants: int = 0
    total_amount_raised: Decimal = Decimal(0)
    average_contribution: Decimal = Decimal(0)
