from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    APP_NAME: str = "Voice Search Middleware API"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"

    # MongoDB settings (search analytics is disabled when MONGO_URL is unset)
    MONGO_URL: str | None = None
    MONGO_DB_NAME: str = "voice_search"
    SEARCH_LOGS_COLLECTION: str = "search_logs"

    # Catalog settings
    CATALOG_BACKEND: str = "woocommerce"  # "woocommerce" or "memory"
    WOOCOMMERCE_URL: str = "https://kataraa.com"
    WOOCOMMERCE_CONSUMER_KEY: str = ""
    WOOCOMMERCE_CONSUMER_SECRET: str = ""
    CATALOG_TIMEOUT: float = 15.0  # Seconds before the catalog call is abandoned
    CATALOG_PER_PAGE: int = 20

    # Price tiers (currency-agnostic)
    LOW_PRICE_MAX: float = 10.0  # low: price < LOW_PRICE_MAX
    HIGH_PRICE_MIN: float = 25.0  # high: price > HIGH_PRICE_MIN

    # Ranking weights
    PRODUCT_TYPE_WEIGHT: float = 10.0
    CONCERN_WEIGHT: float = 5.0
    SKIN_TYPE_WEIGHT: float = 3.0
    SALES_DIVISOR: float = 10.0
    SALES_BOOST_CAP: float = 5.0

    # Spoken reply settings
    RESPONSE_MAX_PARTS: int = 3
    CURRENCY_LABEL: str = "درهم"


@lru_cache
def get_settings() -> Settings:
    return Settings()


settings = get_settings()
