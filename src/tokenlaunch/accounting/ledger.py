"""Fundraise participant ledger — pure functions, no I/O.

Only CONTRIBUTION events enter the ledger; refunds, DAO claims and bonding-
curve trades are separate accounting categories. Totals are summed as wei
before decoding so large raises stay exact.
"""

from __future__ import annotations

from datetime import datetime, timezone
from decimal import Decimal

from tokenlaunch.domain.enums.contribution import ContributionType
from tokenlaunch.domain.models.amount import sum_amounts
from tokenlaunch.domain.models.contribution import (
    ContributionEvent,
    Participant,
    ParticipantStats,
    ParticipantTable,
)
from tokenlaunch.domain.models.pagination import Page, page_records
from tokenlaunch.parser.contributions import parse_contribution_page

DEFAULT_CURRENCY = "AWE"
DEFAULT_RECENT_LIMIT = 10


def _events(page: Page | list | None) -> list[ContributionEvent]:
    return parse_contribution_page(page_records(page))


def _of_type(events: list[ContributionEvent], kind: ContributionType) -> list[ContributionEvent]:
    return [e for e in events if e.contribution_type == kind]


def _to_participant(event: ContributionEvent, row_id: str, percentage: float) -> Participant:
    return Participant(
        id=row_id,
        wallet_address=event.contributor_address,
        amount=event.amount.to_decimal(),
        percentage=percentage,
        timestamp=datetime.fromtimestamp(event.timestamp, tz=timezone.utc),
        tx_hash=event.tx_hash,
    )


def transform_contributions_to_participants(
    page: Page | list | None,
    currency: str = DEFAULT_CURRENCY,
) -> ParticipantTable:
    """One row per contribution, largest first, each with its share of the total."""
    contributions = _of_type(_events(page), ContributionType.CONTRIBUTION)
    if not contributions:
        return ParticipantTable(currency=currency)

    total = sum_amounts([c.amount for c in contributions])

    participants = []
    for index, contribution in enumerate(contributions, start=1):
        percentage = contribution.amount.wei / total.wei * 100 if total.wei > 0 else 0.0
        participants.append(_to_participant(contribution, f"participant-{index}", percentage))

    participants.sort(key=lambda p: p.amount, reverse=True)

    return ParticipantTable(
        participants=participants,
        total_amount=total.to_decimal(),
        total_participants=len(participants),
        currency=currency,
    )


def get_recent_contributors(
    page: Page | list | None,
    limit: int = DEFAULT_RECENT_LIMIT,
) -> list[Participant]:
    """Newest contributions first. No percentage: the running total is not known here."""
    contributions = _of_type(_events(page), ContributionType.CONTRIBUTION)
    contributions.sort(key=lambda c: c.timestamp, reverse=True)

    return [
        _to_participant(contribution, f"recent-{index}", 0.0)
        for index, contribution in enumerate(contributions[: max(limit, 0)], start=1)
    ]


def calculate_participant_stats(page: Page | list | None) -> ParticipantStats:
    events = _events(page)
    contributions = _of_type(events, ContributionType.CONTRIBUTION)
    refunds = _of_type(events, ContributionType.REFUND)

    if not contributions:
        return ParticipantStats(total_refunds=len(refunds))

    total_raised = sum_amounts([c.amount for c in contributions]).to_decimal()
    unique = {c.contributor_address.lower() for c in contributions}

    return ParticipantStats(
        total_contributions=len(contributions),
        total_refunds=len(refunds),
        unique_participants=len(unique),
        total_amount_raised=total_raised,
        average_contribution=total_raised / Decimal(len(contributions)),
    )
