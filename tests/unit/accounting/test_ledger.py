"""Tests for the fundraise participant ledger — pure functions."""

from datetime import datetime, timezone
from decimal import Decimal

import pytest

from tokenlaunch.accounting.ledger import (
    calculate_participant_stats,
    get_recent_contributors,
    transform_contributions_to_participants,
)
from tokenlaunch.domain.models.amount import FixedAmount
from tokenlaunch.domain.models.contribution import ParticipantStats
from tokenlaunch.domain.models.pagination import Page, PaginationMeta
from tokenlaunch.parser.contributions import parse_contribution_page


def _row(row_id: str, address: str, amount: str, ts: int, kind: str = "CONTRIBUTION") -> dict:
    return {
        "id": row_id,
        "contributorAddress": address,
        "transactionHash": f"0xtx{row_id}",
        "blockNumber": "1",
        "timestamp": str(ts),
        "amount": str(FixedAmount.from_decimal(Decimal(amount)).wei),
        "contributionType": kind,
    }


def _page(*rows: dict) -> Page:
    return Page(data=list(rows), meta=PaginationMeta(page=1, limit=50, total=len(rows), totalPages=1))


class TestParticipantTable:
    def test_percentages_and_order(self):
        table = transform_contributions_to_participants(_page(
            _row("1", "0xa", "10", 100),
            _row("2", "0xb", "20", 200),
            _row("3", "0xc", "30", 300),
        ))
        assert table.total_amount == Decimal(60)
        assert table.total_participants == 3
        assert table.currency == "AWE"
        assert [p.amount for p in table.participants] == [Decimal(30), Decimal(20), Decimal(10)]
        assert [round(p.percentage, 2) for p in table.participants] == [50.0, 33.33, 16.67]

    def test_ids_follow_input_order(self):
        table = transform_contributions_to_participants([
            _row("1", "0xa", "1", 100),
            _row("2", "0xb", "5", 200),
        ])
        assert [p.id for p in table.participants] == ["participant-2", "participant-1"]

    def test_row_fields(self):
        table = transform_contributions_to_participants([_row("1", "0xA", "1.5", 1700000000)])
        row = table.participants[0]
        assert row.wallet_address == "0xA"
        assert row.amount == Decimal("1.5")
        assert row.percentage == 100.0
        assert row.timestamp == datetime(2023, 11, 14, 22, 13, 20, tzinfo=timezone.utc)
        assert row.tx_hash == "0xtx1"
        assert row.is_pending is False

    def test_same_wallet_keeps_one_row_per_contribution(self):
        table = transform_contributions_to_participants([
            _row("1", "0xa", "1", 100),
            _row("2", "0xa", "2", 200),
        ])
        assert table.total_participants == 2

    def test_only_contributions_count(self):
        table = transform_contributions_to_participants([
            _row("1", "0xa", "10", 100),
            _row("2", "0xa", "10", 150, kind="REFUND"),
            _row("3", "0xb", "99", 200, kind="BONDING_CURVE_BUY"),
            _row("4", "0xc", "99", 250, kind="BONDING_CURVE_SELL"),
            _row("5", "0xd", "99", 300, kind="DAO_CLAIMED"),
        ])
        assert table.total_amount == Decimal(10)
        assert table.total_participants == 1

    def test_malformed_rows_skipped(self):
        bad = _row("2", "0xb", "5", 200)
        bad["amount"] = "5.0"
        table = transform_contributions_to_participants([_row("1", "0xa", "5", 100), bad])
        assert table.total_participants == 1
        assert table.participants[0].percentage == 100.0

    def test_millisecond_timestamp_row_skipped(self):
        table = transform_contributions_to_participants(_page(
            _row("1", "0xa", "5", 1700000000),
            _row("2", "0xb", "5", 1700000000000000),
        ))
        assert [p.wallet_address for p in table.participants] == ["0xa"]
        assert table.participants[0].timestamp == datetime(2023, 11, 14, 22, 13, 20, tzinfo=timezone.utc)

    def test_total_is_exact_for_large_amounts(self):
        table = transform_contributions_to_participants([
            _row("1", "0xa", "123456789012.000000000000000001", 100),
            _row("2", "0xb", "876543210988", 200),
        ])
        assert table.total_amount == Decimal("1000000000000.000000000000000001")

    @pytest.mark.parametrize("page", [None, [], Page()])
    def test_empty(self, page):
        table = transform_contributions_to_participants(page)
        assert table.participants == []
        assert table.total_amount == Decimal(0)
        assert table.total_participants == 0

    def test_custom_currency(self):
        assert transform_contributions_to_participants([], currency="ETH").currency == "ETH"


class TestRecentContributors:
    def test_newest_first_with_limit(self):
        recent = get_recent_contributors([
            _row("1", "0xa", "10", 100),
            _row("2", "0xb", "20", 300),
            _row("3", "0xc", "30", 200),
            _row("4", "0xd", "40", 400, kind="REFUND"),
        ], limit=2)
        assert [p.wallet_address for p in recent] == ["0xb", "0xc"]
        assert [p.id for p in recent] == ["recent-1", "recent-2"]
        assert all(p.percentage == 0.0 for p in recent)

    def test_default_limit(self):
        rows = [_row(str(i), f"0x{i}", "1", i) for i in range(15)]
        assert len(get_recent_contributors(rows)) == 10

    def test_empty(self):
        assert get_recent_contributors(None) == []


class TestParticipantStats:
    def test_stats(self):
        stats = calculate_participant_stats([
            _row("1", "0xA", "10", 100),
            _row("2", "0xa", "20", 200),
            _row("3", "0xb", "30", 300),
            _row("4", "0xb", "5", 400, kind="REFUND"),
            _row("5", "0xc", "5", 500, kind="DAO_CLAIMED"),
        ])
        assert stats.total_contributions == 3
        assert stats.total_refunds == 1
        assert stats.unique_participants == 2
        assert stats.total_amount_raised == Decimal(60)
        assert stats.average_contribution == Decimal(20)

    def test_no_contributions(self):
        assert calculate_participant_stats([]) == ParticipantStats()

    def test_refunds_only(self):
        stats = calculate_participant_stats([_row("1", "0xa", "1", 1, kind="REFUND")])
        assert stats.total_refunds == 1
        assert stats.average_contribution == Decimal(0)

    def test_zero_amount_refund_is_counted(self):
        stats = calculate_participant_stats([
            _row("1", "0xa", "10", 100),
            _row("2", "0xa", "0", 200, kind="REFUND"),
        ])
        assert stats.total_contributions == 1
        assert stats.total_refunds == 1

    def test_already_parsed_events(self):
        events = parse_contribution_page([_row("1", "0xa", "10", 100), _row("2", "0xb", "30", 200)])
        stats = calculate_participant_stats(events)
        assert stats.unique_participants == 2
        assert stats.total_amount_raised == Decimal(40)
