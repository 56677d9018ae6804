import logging
from decimal import Decimal

from tierengine.core.config import Settings, configure_logging


def test_defaults():
    cfg = Settings()
    assert cfg.LOCK_BONUS_MULTIPLIER == Decimal("3")
    assert cfg.BONUS_LABEL == "bonus"
    assert cfg.DEFAULT_PRICING_PATTERN == "linear"


def test_env_prefix(monkeypatch):
    monkeypatch.setenv("TIER_ENGINE_LOCK_BONUS_MULTIPLIER", "2.5")
    monkeypatch.setenv("TIER_ENGINE_STATUS_LABEL", "tier")
    cfg = Settings()
    assert cfg.LOCK_BONUS_MULTIPLIER == Decimal("2.5")
    assert cfg.STATUS_LABEL == "tier"


def test_configure_logging(monkeypatch):
    calls = {}
    monkeypatch.setattr(logging, "basicConfig", lambda **kw: calls.update(kw))
    configure_logging("debug")
    assert calls["level"] == logging.DEBUG
