from decimal import Decimal

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    platform_fee_bps: int = 50
    graduation_threshold_awe: Decimal = Decimal(100000)
    default_total_supply: Decimal = Decimal(100_000_000_000)  # 100B tokens
    default_target_fundraise: Decimal = Decimal(100_000_000)
    vesting_preview_months: int = 6
    recent_contributors_limit: int = 10
    quote_symbol: str = "AWE"
    debug: bool = False

    class Config:
        env_file = ".env"


settings = Settings()
