"""Month-based vesting schedule — pure functions, no I/O.

A TGE unlock followed by ``vesting_duration`` equal monthly tranches of the
remaining percentage. Monthly dates are ``vesting_start_date`` plus N calendar
months, clamped to month end (see ``add_months``).
"""

from datetime import datetime
from decimal import Decimal

from tokenlaunch.domain.models.vesting import VestingScheduleItem
from tokenlaunch.utils.dates import add_months

DEFAULT_TARGET_FUNDRAISE = Decimal(100_000_000)
DEFAULT_PREVIEW_MONTHS = 6
TGE_LABEL = "TGE"


def _amount_for(target: Decimal, percentage: float) -> Decimal:
    return target * Decimal(str(percentage)) / 100


def generate_vesting_schedule(
    *,
    unlock_at_tge: float,
    vesting_duration: int,
    tge_date: datetime,
    vesting_start_date: datetime,
    target_fundraise: Decimal | int | float = DEFAULT_TARGET_FUNDRAISE,
) -> list[VestingScheduleItem]:
    """Build the full schedule: TGE entry plus one entry per vesting month.

    Does not validate; run ``validate_vesting_params`` first.
    """
    target = Decimal(str(target_fundraise))
    monthly_percentage = (100 - unlock_at_tge) / vesting_duration if vesting_duration > 0 else 0.0

    tge_amount = _amount_for(target, unlock_at_tge)
    schedule = [
        VestingScheduleItem(
            order=0,
            time_label=TGE_LABEL,
            date=tge_date,
            percentage=unlock_at_tge,
            vesting_amount=tge_amount,
            cumulative_percentage=unlock_at_tge,
            cumulative_amount=tge_amount,
        )
    ]

    monthly_amount = _amount_for(target, monthly_percentage)
    for month in range(1, vesting_duration + 1):
        # Derived from the month index, not a running sum, so rounding cannot drift.
        cumulative_percentage = unlock_at_tge + monthly_percentage * month
        if month == vesting_duration:
            cumulative_percentage = min(cumulative_percentage, 100.0)
        schedule.append(
            VestingScheduleItem(
                order=month,
                time_label=f"Month {month}",
                date=add_months(vesting_start_date, month),
                percentage=monthly_percentage,
                vesting_amount=monthly_amount,
                cumulative_percentage=cumulative_percentage,
                cumulative_amount=_amount_for(target, cumulative_percentage),
            )
        )

    return schedule


def get_vesting_schedule_preview(
    *,
    unlock_at_tge: float,
    vesting_duration: int,
    tge_date: datetime,
    vesting_start_date: datetime,
    target_fundraise: Decimal | int | float = DEFAULT_TARGET_FUNDRAISE,
    preview_months: int = DEFAULT_PREVIEW_MONTHS,
) -> list[VestingScheduleItem]:
    """TGE entry plus the first ``preview_months`` monthly entries."""
    schedule = generate_vesting_schedule(
        unlock_at_tge=unlock_at_tge,
        vesting_duration=vesting_duration,
        tge_date=tge_date,
        vesting_start_date=vesting_start_date,
        target_fundraise=target_fundraise,
    )
    return schedule[: max(preview_months, 0) + 1]


def validate_vesting_params(
    *,
    unlock_at_tge: float | None = None,
    vesting_duration: int | None = None,
    target_fundraise: Decimal | int | float | None = None,
    tge_date: datetime | None = None,
    vesting_start_date: datetime | None = None,
) -> list[str]:
    """Check a (possibly partial) vesting config. Returns messages; empty means valid."""
    errors: list[str] = []

    if unlock_at_tge is not None and not 0 <= unlock_at_tge <= 100:
        errors.append("Unlock at TGE must be between 0 and 100 percent")

    if vesting_duration is not None and vesting_duration < 0:
        errors.append("Vesting duration must be non-negative")

    if target_fundraise is not None and Decimal(str(target_fundraise)) <= 0:
        errors.append("Target fundraise must be greater than 0")

    if tge_date is not None and vesting_start_date is not None and vesting_start_date < tge_date:
        errors.append("Vesting start date cannot be before TGE date")

    return errors
