from functools import lru_cache

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    log_level: str = "INFO"
    currency_symbol: str = "R$"
    support_ticket_cost: float = 50.0
    cors_origins: list[str] = ["http://localhost:3000"]

    class Config:
        env_file = ".env"
        env_prefix = "INDICATOR_METRICS_"


@lru_cache
def get_settings() -> Settings:
    return Settings()
