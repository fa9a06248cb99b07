"""Graduation decision for a campaign."""

from tokenlaunch.domain.enums.status import CampaignStatus, FundraisingType

GRADUATING_TYPES = (FundraisingType.FIXED_PRICE, FundraisingType.BONDING_CURVE)


def determine_dao_graduation(
    fundraising_type: FundraisingType | str | None = None,
    status: CampaignStatus | str | None = None,
) -> bool:
    """A campaign counts as graduated once it is LIVE.

    Every known fundraising type graduates when LIVE; a LIVE campaign without
    a type also counts. Unknown type strings do not graduate.
    """
    if not status or status != CampaignStatus.LIVE:
        return False

    if not fundraising_type:
        return True

    return fundraising_type in GRADUATING_TYPES
