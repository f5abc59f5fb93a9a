import logging
from functools import lru_cache

from pydantic_settings import BaseSettings

DEFAULT_BASE_URL = "https://www.googleapis.com/tasks/v1"


class Settings(BaseSettings):
    base_url: str = DEFAULT_BASE_URL
    timeout: float | None = None
    pool_maxsize: int = 10
    user_agent: str = "gtasks-python/0.1.0"
    log_level: str = "WARNING"

    model_config = {"env_prefix": "GTASKS_"}


@lru_cache
def get_settings() -> Settings:
    return Settings()


def configure_logging(level: str | None = None) -> None:
    """Set the level of the `gtasks` logger. Handlers are left to the application."""
    logging.getLogger("gtasks").setLevel((level or get_settings().log_level).upper())
