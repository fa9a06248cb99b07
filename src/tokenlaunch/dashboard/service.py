"""DashboardService — composes the engine outputs for one campaign page."""

import logging
from decimal import Decimal

from tokenlaunch.accounting.fees import format_fee_percentage, get_fee_context
from tokenlaunch.accounting.graduation import determine_dao_graduation
from tokenlaunch.accounting.ledger import (
    calculate_participant_stats,
    get_recent_contributors,
    transform_contributions_to_participants,
)
from tokenlaunch.accounting.vesting import (
    generate_vesting_schedule,
    get_vesting_schedule_preview,
    validate_vesting_params,
)
from tokenlaunch.chart.buckets import bucket_by_day, deduplicate_chart_data
from tokenlaunch.chart.series import (
    calculate_graduation_price_threshold,
    calculate_price_stats,
    calculate_visual_map_pieces,
    transform_trades_to_chart,
)
from tokenlaunch.config import Settings
from tokenlaunch.domain.enums.chart import DedupStrategy
from tokenlaunch.domain.enums.trade import TradeSide, TradingMode
from tokenlaunch.domain.models.campaign import CampaignConfig, CampaignSnapshot
from tokenlaunch.domain.models.fee import FeeContext
from tokenlaunch.domain.models.pagination import Page, page_records
from tokenlaunch.parser.contributions import parse_contribution_page

logger = logging.getLogger(__name__)


class DashboardService:
    """Pure orchestration: trade page + contribution page + config → CampaignSnapshot."""

    def __init__(self, settings: Settings) -> None:
        self._settings = settings

    def snapshot(
        self,
        campaign: CampaignConfig,
        trades: Page | list | None,
        contributions: Page | list | None,
        awe_price_usd: Decimal | float,
    ) -> CampaignSnapshot:
        s = self._settings

        # 1. Price chart
        series = transform_trades_to_chart(trades, awe_price_usd)
        daily = deduplicate_chart_data(bucket_by_day(series), DedupStrategy.LATEST)
        total_supply = campaign.total_supply if campaign.total_supply is not None else s.default_total_supply
        threshold = calculate_graduation_price_threshold(
            total_supply,
            awe_price_usd,
            graduation_threshold_awe=s.graduation_threshold_awe,
        )

        # 2. Participant ledger, parsed once so each bad record is reported once
        events = parse_contribution_page(page_records(contributions))
        table = transform_contributions_to_participants(events, currency=s.quote_symbol)

        # 3. Vesting
        target = campaign.target_fundraise if campaign.target_fundraise is not None else s.default_target_fundraise
        vesting_errors = validate_vesting_params(
            unlock_at_tge=campaign.unlock_at_tge,
            vesting_duration=campaign.vesting_duration,
            target_fundraise=target,
            tge_date=campaign.tge_date,
            vesting_start_date=campaign.vesting_start_date,
        )
        schedule = []
        preview = []
        if vesting_errors:
            logger.warning("Invalid vesting config: %s", "; ".join(vesting_errors))
        else:
            schedule = generate_vesting_schedule(
                unlock_at_tge=campaign.unlock_at_tge,
                vesting_duration=campaign.vesting_duration,
                tge_date=campaign.tge_date,
                vesting_start_date=campaign.vesting_start_date,
                target_fundraise=target,
            )
            preview = get_vesting_schedule_preview(
                unlock_at_tge=campaign.unlock_at_tge,
                vesting_duration=campaign.vesting_duration,
                tge_date=campaign.tge_date,
                vesting_start_date=campaign.vesting_start_date,
                target_fundraise=target,
                preview_months=s.vesting_preview_months,
            )

        logger.info(
            "Snapshot: %d price points, %d participants, %d vesting entries",
            len(series),
            table.total_participants,
            len(schedule),
        )

        return CampaignSnapshot(
            price_series=series,
            daily_price_series=daily,
            price_stats=calculate_price_stats(series),
            graduation_threshold_usd=threshold,
            visual_map=calculate_visual_map_pieces(threshold),
            participants=table,
            participant_stats=calculate_participant_stats(events),
            recent_contributors=get_recent_contributors(events, s.recent_contributors_limit),
            vesting_schedule=schedule,
            vesting_preview=preview,
            vesting_errors=vesting_errors,
            fee_percentage=format_fee_percentage(s.platform_fee_bps),
            is_graduated=determine_dao_graduation(campaign.fundraising_type, campaign.status),
        )

    def fee_context(
        self,
        input_amount: Decimal | int | float | None,
        calculated_amount: str | None,
        side: TradeSide,
        mode: TradingMode,
    ) -> FeeContext:
        """Fee preview for the trade form at the configured platform fee."""
        return get_fee_context(
            input_amount,
            calculated_amount,
            side,
            mode,
            fee_bps=self._settings.platform_fee_bps,
            quote_currency=self._settings.quote_symbol,
        )
