import os

from dotenv import load_dotenv
from pydantic import BaseModel, Field

from .constants import DEFAULT_WALLETS_LIST_SOURCE, DEFAULT_WALLETS_LIST_TIMEOUT

load_dotenv(override=False)


class Settings(BaseModel):
    wallets_list_source: str = Field(default=os.getenv("WALLETS_LIST_SOURCE") or DEFAULT_WALLETS_LIST_SOURCE)
    wallets_list_timeout: float = Field(default=float(os.getenv("WALLETS_LIST_TIMEOUT", DEFAULT_WALLETS_LIST_TIMEOUT)))
    log_level: str = Field(default=os.getenv("LOG_LEVEL", "INFO"))


def load_settings() -> Settings:
    return Settings()


settings = load_settings()
