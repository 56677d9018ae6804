# tierengine/services/tier_pricing.py
"""
Per-tier claim pricing of a reward, and whether a participant can claim it.

Higher tiers never pay more: Diamond <= Platinum <= Gold <= Silver <= Bronze.
"""
from __future__ import annotations

import logging
from decimal import Decimal

from tierengine.core.config import Settings, settings as default_settings
from tierengine.core.errors import InvalidInputError
from tierengine.core.loyalty_rules import PRICING_DISCOUNTS, PricingPattern
from tierengine.core.money import round_half_up
from tierengine.core.tier_rules import TIER_ORDER, StatusTier, parse_tier_key, tier_index
from tierengine.schemas.pricing import ClaimEligibility, PriceResult, RewardOffer, TierPricing
from tierengine.schemas.validation import IssueCode, Severity, ValidationIssue, ValidationReport

logger = logging.getLogger(__name__)


def _issue(severity: Severity, code: IssueCode, message: str, *tiers: StatusTier) -> ValidationIssue:
    return ValidationIssue(
        severity=severity, code=code, message=message, tier_ids=tuple(t.value for t in tiers)
    )


def validate_tier_pricing(
    pricing: TierPricing,
    base_cost: int,
    require_all_filled: bool = True,
) -> ValidationReport:
    issues: list[ValidationIssue] = []

    if require_all_filled:
        for t in TIER_ORDER:
            if pricing.price_for(t) is None:
                issues.append(_issue(Severity.ERROR, IssueCode.PRICE_MISSING, f"{t.label} price is required", t))

    for t in TIER_ORDER:
        price = pricing.price_for(t)
        if price is not None and price < 0:
            issues.append(_issue(Severity.ERROR, IssueCode.PRICE_NEGATIVE, f"{t.label} price cannot be negative", t))

    for lower, higher in zip(TIER_ORDER, TIER_ORDER[1:]):
        lo_price, hi_price = pricing.price_for(lower), pricing.price_for(higher)
        if lo_price is None or hi_price is None:
            continue
        if hi_price > lo_price:
            issues.append(_issue(
                Severity.ERROR,
                IssueCode.PRICE_ORDER,
                f"{higher.label} ({hi_price}) should not cost more than {lower.label} ({lo_price})",
                lower, higher,
            ))

    bronze = pricing.bronze
    if bronze is not None and bronze > base_cost:
        issues.append(_issue(
            Severity.WARNING,
            IssueCode.PRICE_ABOVE_BASE,
            f"Bronze price ({bronze}) exceeds base cost ({base_cost})",
            StatusTier.BRONZE,
        ))

    if bronze is not None and bronze > 0 and all(pricing.price_for(t) == bronze for t in TIER_ORDER):
        issues.append(_issue(
            Severity.WARNING,
            IssueCode.PRICE_FLAT,
            "All tiers have the same price. Consider adding tier-based discounts.",
        ))

    return ValidationReport.from_issues(issues)


def generate_default_tier_pricing(
    base_cost: int,
    pattern: PricingPattern | str | None = None,
    settings: Settings | None = None,
) -> TierPricing:
    cfg = settings or default_settings
    if not isinstance(pattern, PricingPattern):
        pattern = PricingPattern.parse(pattern or cfg.DEFAULT_PRICING_PATTERN)

    discounts = PRICING_DISCOUNTS[pattern]
    base = Decimal(base_cost)
    prices = {
        t.value: round_half_up(base * (1 - d / 100))
        for t, d in zip(TIER_ORDER, discounts)
    }
    logger.debug("generate_default_tier_pricing base=%s pattern=%s -> %s", base_cost, pattern.value, prices)
    return TierPricing(**prices)


def get_max_discount(pricing: TierPricing, base_cost: int) -> int:
    """Largest discount in the structure, whole percent."""
    if base_cost == 0:
        return 0
    filled = [p for p in (pricing.price_for(t) for t in TIER_ORDER) if p is not None]
    if not filled:
        return 0
    return round_half_up((1 - Decimal(min(filled)) / Decimal(base_cost)) * 100)


def _require_tier(tier: StatusTier | str) -> StatusTier:
    key = tier if isinstance(tier, StatusTier) else parse_tier_key(tier)
    if key is None:
        raise InvalidInputError(f"unknown status tier: {tier!r}")
    return key


def is_tier_free(pricing: TierPricing, tier: StatusTier | str) -> bool:
    return pricing.price_for(_require_tier(tier)) == 0


# ── Claiming ─────────────────────────────────────────────

def get_reward_price_for_user(reward: RewardOffer, user_tier: StatusTier | str | None) -> PriceResult:
    """
    Claim price a participant of user_tier pays. Only sponsored rewards with
    per-tier pricing are discounted; an unknown tier or an unfilled price
    falls back to the base cost.
    """
    pricing = reward.tier_pricing
    if not reward.is_sponsored or pricing is None:
        return PriceResult(price=reward.cost, is_free=False, discount=0, original_price=reward.cost)

    tier = user_tier if isinstance(user_tier, StatusTier) else parse_tier_key(user_tier)
    price = pricing.price_for(tier) if tier is not None else None
    if price is None:
        price = reward.cost
    original = pricing.bronze if pricing.bronze is not None else reward.cost

    discount = 0
    if original > 0:
        discount = round_half_up((1 - Decimal(price) / Decimal(original)) * 100)
    return PriceResult(price=price, is_free=price == 0, discount=discount, original_price=original)


def can_user_claim_reward(
    reward: RewardOffer,
    user_tier: StatusTier | str | None,
    user_balance: int,
) -> ClaimEligibility:
    if not reward.is_active:
        return ClaimEligibility(can_claim=False, reason="This reward is no longer available")

    if reward.stock_quantity is not None and reward.stock_quantity <= 0:
        return ClaimEligibility(can_claim=False, reason="Out of stock")

    if reward.min_status_tier:
        required = parse_tier_key(reward.min_status_tier)
        tier = user_tier if isinstance(user_tier, StatusTier) else parse_tier_key(user_tier)
        if required is None or tier is None:
            # bad tier data never blocks a claim
            logger.warning(
                "invalid tier comparison reward=%s user_tier=%s min_tier=%s",
                reward.id, user_tier, reward.min_status_tier,
            )
        elif tier_index(tier) < tier_index(required):
            return ClaimEligibility(can_claim=False, reason=f"Requires {required.label} status or higher")

    price = get_reward_price_for_user(reward, user_tier).price
    if price > user_balance:
        needed = price - user_balance
        plural = "" if needed == 1 else "s"
        return ClaimEligibility(can_claim=False, reason=f"Need {needed} more claim{plural}")

    return ClaimEligibility(can_claim=True)
