from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from tierengine.core.tier_rules import StatusTier


class TierPricing(BaseModel):
    """Claim cost of one reward per status tier. None = not filled in yet."""
    model_config = ConfigDict(frozen=True, extra="forbid")

    bronze: int | None = None
    silver: int | None = None
    gold: int | None = None
    platinum: int | None = None
    diamond: int | None = None

    def price_for(self, tier: StatusTier) -> int | None:
        return getattr(self, tier.value)


class RewardOffer(BaseModel):
    """A claimable reward as far as tier pricing and eligibility go."""
    model_config = ConfigDict(frozen=True, extra="ignore")

    id: str
    cost: int = Field(..., ge=0)
    is_sponsored: bool = False
    # per-tier claim cost, sponsored rewards only
    tier_pricing: TierPricing | None = None
    min_status_tier: str | None = None
    stock_quantity: int | None = None  # None = unlimited
    is_active: bool = True


class PriceResult(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    price: int
    is_free: bool
    discount: int  # whole percent against the bronze price
    original_price: int


class ClaimEligibility(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    can_claim: bool
    reason: str | None = None
