from __future__ import annotations

from decimal import Decimal
from enum import Enum


class EarningSource(str, Enum):
    PURCHASE = "purchase"
    MERCH_PURCHASE = "merch_purchase"
    BOUNTY = "bounty"
    MERCH_BOUNTY = "merch_bounty"
    REFERRAL = "referral"
    CHECK_IN_STREAK = "check_in_streak"
    OTHER = "other"

    @property
    def label(self) -> str:
        return SOURCE_LABELS.get(self, "Other")

    @property
    def is_merch(self) -> bool:
        # 360LOCK bonus only ever applies to merch earnings
        return self in (EarningSource.MERCH_PURCHASE, EarningSource.MERCH_BOUNTY)


SOURCE_LABELS: dict[EarningSource, str] = {
    EarningSource.PURCHASE: "Purchase",
    EarningSource.MERCH_PURCHASE: "Merch purchase",
    EarningSource.BOUNTY: "Bounty",
    EarningSource.MERCH_BOUNTY: "Merch bounty",
    EarningSource.REFERRAL: "Referral",
    EarningSource.CHECK_IN_STREAK: "Check-in streak",
}


class PricingPattern(str, Enum):
    NONE = "none"
    LINEAR = "linear"
    STEEP = "steep"
    GENTLE = "gentle"

    @classmethod
    def parse(cls, raw: str | None) -> "PricingPattern":
        try:
            return cls((raw or "").strip().lower())
        except ValueError:
            return cls.NONE


# discount percent per tier, bronze -> diamond
PRICING_DISCOUNTS: dict[PricingPattern, tuple[Decimal, ...]] = {
    PricingPattern.NONE: (Decimal(0), Decimal(0), Decimal(0), Decimal(0), Decimal(0)),
    PricingPattern.LINEAR: (Decimal(0), Decimal(20), Decimal(40), Decimal(60), Decimal(80)),
    PricingPattern.STEEP: (Decimal(0), Decimal(25), Decimal(50), Decimal(75), Decimal(100)),
    PricingPattern.GENTLE: (Decimal(0), Decimal(10), Decimal(20), Decimal(30), Decimal(40)),
}
