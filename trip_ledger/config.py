from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        extra="ignore",
        case_sensitive=False,
    )

    default_currency: str = Field("USD", alias="DEFAULT_CURRENCY")
    log_level: str = Field("INFO", alias="LOG_LEVEL")

    render_max_balances: int = Field(12, alias="RENDER_MAX_BALANCES")
    render_max_transfers: int = Field(8, alias="RENDER_MAX_TRANSFERS")


settings = Settings()
