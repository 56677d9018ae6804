from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum


class StatusTier(str, Enum):
    BRONZE = "bronze"
    SILVER = "silver"
    GOLD = "gold"
    PLATINUM = "platinum"
    DIAMOND = "diamond"

    @property
    def label(self) -> str:
        return self.value.capitalize()


# ascending, lowest first
TIER_ORDER: tuple[StatusTier, ...] = (
    StatusTier.BRONZE,
    StatusTier.SILVER,
    StatusTier.GOLD,
    StatusTier.PLATINUM,
    StatusTier.DIAMOND,
)


@dataclass(frozen=True)
class TierRules:
    # Thresholds on the 360LOCK committed balance
    bronze_from: Decimal = Decimal("100")
    silver_from: Decimal = Decimal("500")
    gold_from: Decimal = Decimal("1000")
    platinum_from: Decimal = Decimal("2000")
    diamond_from: Decimal = Decimal("10000")  # unbounded top tier

    def threshold(self, tier: StatusTier) -> Decimal:
        return getattr(self, f"{tier.value}_from")


RULES = TierRules()


@dataclass(frozen=True)
class TierBadge:
    glyph: str
    color: str


TIER_BADGES: dict[StatusTier, TierBadge] = {
    StatusTier.BRONZE: TierBadge("🥉", "#CD7F32"),
    StatusTier.SILVER: TierBadge("🥈", "#C0C0C0"),
    StatusTier.GOLD: TierBadge("🥇", "#FFD700"),
    StatusTier.PLATINUM: TierBadge("💎", "#E5E4E2"),
    StatusTier.DIAMOND: TierBadge("👑", "#00BFFF"),
}

DEFAULT_EARNING_MULTIPLIERS: dict[StatusTier, Decimal] = {
    StatusTier.BRONZE: Decimal("1.0"),
    StatusTier.SILVER: Decimal("1.25"),
    StatusTier.GOLD: Decimal("1.5"),
    StatusTier.PLATINUM: Decimal("1.75"),
    StatusTier.DIAMOND: Decimal("2.0"),
}

DEFAULT_DISCOUNT_PERCENT: dict[StatusTier, Decimal] = {
    StatusTier.BRONZE: Decimal("0"),
    StatusTier.SILVER: Decimal("5"),
    StatusTier.GOLD: Decimal("10"),
    StatusTier.PLATINUM: Decimal("15"),
    StatusTier.DIAMOND: Decimal("20"),
}


def parse_tier_key(raw: str | None) -> StatusTier | None:
    """'Gold', ' gold ' -> StatusTier.GOLD; anything unknown -> None."""
    key = (raw or "").strip().lower()
    try:
        return StatusTier(key)
    except ValueError:
        return None


def status_multiplier_for(raw: str | None) -> Decimal:
    tier = parse_tier_key(raw)
    if tier is None:
        return Decimal("1.0")
    return DEFAULT_EARNING_MULTIPLIERS[tier]


# ── Tier benefits ────────────────────────────────────────

# partner benefit slots per tier
TIER_BENEFIT_SLOTS: dict[StatusTier, int] = {
    StatusTier.BRONZE: 1,
    StatusTier.SILVER: 2,
    StatusTier.GOLD: 3,
    StatusTier.PLATINUM: 4,
    StatusTier.DIAMOND: 6,
}


def tier_index(raw: str | StatusTier | None) -> int:
    """0-based position in TIER_ORDER; unknown tiers count as bronze."""
    tier = raw if isinstance(raw, StatusTier) else parse_tier_key(raw)
    if tier is None:
        return 0
    return TIER_ORDER.index(tier)


def can_access_partner(user_tier: str | StatusTier | None, required_tier: str | StatusTier | None) -> bool:
    return tier_index(user_tier) >= tier_index(required_tier)


def available_slots(raw: str | StatusTier | None) -> int:
    tier = raw if isinstance(raw, StatusTier) else parse_tier_key(raw)
    if tier is None:
        return 1
    return TIER_BENEFIT_SLOTS[tier]


def tiers_until_unlock(user_tier: str | StatusTier | None, required_tier: str | StatusTier | None) -> int:
    return max(0, tier_index(required_tier) - tier_index(user_tier))
