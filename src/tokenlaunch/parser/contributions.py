"""Parse raw contribution-history records from the indexer into ContributionEvent."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from typing import Any

from pydantic import ValidationError

from tokenlaunch.domain.enums.contribution import ContributionType
from tokenlaunch.domain.enums.malformed import MalformedReason
from tokenlaunch.domain.errors import MalformedRecordError
from tokenlaunch.domain.models.contribution import ContributionEvent

logger = logging.getLogger(__name__)

# pydantic field name → why a failure on it makes the record unusable
_FIELD_REASONS: dict[str, MalformedReason] = {
    "amount": MalformedReason.INVALID_AMOUNT,
    "contributionType": MalformedReason.UNKNOWN_CONTRIBUTION_TYPE,
    "contribution_type": MalformedReason.UNKNOWN_CONTRIBUTION_TYPE,
    "timestamp": MalformedReason.INVALID_TIMESTAMP,
}


def _reason_for(exc: ValidationError) -> MalformedReason:
    first = exc.errors()[0]
    if first["type"] == "missing":
        return MalformedReason.MISSING_FIELD
    field = str(first["loc"][0]) if first["loc"] else ""
    return _FIELD_REASONS.get(field, MalformedReason.MISSING_FIELD)


def parse_contribution(record: Mapping[str, Any] | ContributionEvent) -> ContributionEvent:
    """Validate one raw record. Raises MalformedRecordError.

    Only CONTRIBUTION events must carry a positive amount; refunds and claims
    are counted, not summed.
    """
    if isinstance(record, ContributionEvent):
        return record
    try:
        event = ContributionEvent.model_validate(record)
    except ValidationError as exc:
        record_id = record.get("id") if isinstance(record, Mapping) else None
        raise MalformedRecordError(
            _reason_for(exc),
            f"Invalid contribution record: {exc.error_count()} error(s)",
            str(record_id) if record_id is not None else None,
        ) from exc

    if event.contribution_type == ContributionType.CONTRIBUTION and not event.amount.is_positive:
        raise MalformedRecordError(
            MalformedReason.NON_POSITIVE_AMOUNT,
            f"Non-positive amount: {event.amount.wei}",
            event.id,
        )
    return event


def parse_contribution_page(
    records: Iterable[Mapping[str, Any] | ContributionEvent],
) -> list[ContributionEvent]:
    """Parse every record, skipping (and logging) the malformed ones."""
    events: list[ContributionEvent] = []
    for record in records:
        try:
            events.append(parse_contribution(record))
        except MalformedRecordError as exc:
            logger.warning("Skipping contribution %s (%s): %s", exc.record_id, exc.reason.value, exc)
    return events
