"""
Runtime settings loaded from ``CATS_*`` environment variables.

Uses pydantic-settings for type coercion and validation; empty
variables fall back to the defaults below.
"""

from functools import lru_cache
from pathlib import Path
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict
from typing_extensions import Literal


# Default location of the JSON document store, next to the package
DATA_FILE = Path(__file__).resolve().parents[1] / "data" / "cats.json"

StoreBackend = Literal["json", "memory"]


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="CATS_",
        env_ignore_empty=True,
        extra="ignore",
    )

    host: str = "127.0.0.1"
    port: int = 8000
    store_backend: StoreBackend = "json"
    data_file: Path = DATA_FILE
    cataas_url: str = "https://cataas.com"
    # None keeps the transport default
    cataas_timeout: Optional[float] = None
    log_level: str = "INFO"


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
