from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    SHOP_NAME: str = "Cut & Order Manager"
    LOG_LEVEL: str = "INFO"

    # Pricing defaults: per-request overrides are allowed on /pricing/quote
    LABOR_RATE_PER_CUT: float = 0.25
    WASTE_ALLOWANCE_PERCENT: float = 15.0
    MARKUP_PERCENT: float = 25.0

    # 'imperial' (feet) | 'metric' (meters)
    DEFAULT_MEASUREMENT_UNIT: str = "imperial"

    class Config:
        env_file = ".env"


settings = Settings()
