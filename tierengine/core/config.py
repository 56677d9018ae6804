from __future__ import annotations

import logging
from decimal import Decimal

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # --- Reward stacking ---
    # 360LOCK bonus: applied to merch earnings committed to a lock
    LOCK_BONUS_MULTIPLIER: Decimal = Decimal("3")
    BONUS_LABEL: str = "bonus"
    STATUS_LABEL: str = "status"

    # --- Tier pricing ---
    DEFAULT_PRICING_PATTERN: str = "linear"  # none | linear | steep | gentle

    LOG_LEVEL: str = "INFO"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="TIER_ENGINE_",
        extra="ignore",
    )


settings = Settings()


def configure_logging(level: str | None = None) -> None:
    """Install a basic stream handler for applications embedding the engine."""
    name = (level or settings.LOG_LEVEL or "INFO").upper()
    logging.basicConfig(
        level=getattr(logging, name, logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
