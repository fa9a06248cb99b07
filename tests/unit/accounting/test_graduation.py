import pytest

from tokenlaunch.accounting.graduation import determine_dao_graduation
from tokenlaunch.domain.enums.status import CampaignStatus, FundraisingType


class TestDetermineDaoGraduation:
    def test_live_without_type(self):
        assert determine_dao_graduation(None, CampaignStatus.LIVE) is True

    @pytest.mark.parametrize("fundraising_type", list(FundraisingType))
    def test_live_every_known_type(self, fundraising_type):
        assert determine_dao_graduation(fundraising_type, CampaignStatus.LIVE) is True

    @pytest.mark.parametrize(
        "status",
        [None, CampaignStatus.ON_GOING, CampaignStatus.COMPLETED, CampaignStatus.CANCELLED],
    )
    def test_not_live(self, status):
        for fundraising_type in (None, FundraisingType.FIXED_PRICE, FundraisingType.BONDING_CURVE):
            assert determine_dao_graduation(fundraising_type, status) is False

    def test_string_values(self):
        assert determine_dao_graduation("BONDING_CURVE", "LIVE") is True
        assert determine_dao_graduation("FIXED_PRICE", "ON_GOING") is False

    def test_unknown_type_string(self):
        assert determine_dao_graduation("LOTTERY", "LIVE") is False

    def test_defaults(self):
        assert determine_dao_graduation() is False
