import pytest

from tierengine.core.config import Settings
from tierengine.core.errors import InvalidInputError
from tierengine.core.loyalty_rules import PricingPattern
from tierengine.core.tier_rules import StatusTier
from tierengine.schemas import IssueCode, PriceResult, RewardOffer, TierPricing
from tierengine.services.tier_pricing import (
    can_user_claim_reward,
    get_reward_price_for_user,
    generate_default_tier_pricing,
    get_max_discount,
    is_tier_free,
    validate_tier_pricing,
)


def test_linear_pattern():
    p = generate_default_tier_pricing(100, PricingPattern.LINEAR)
    assert (p.bronze, p.silver, p.gold, p.platinum, p.diamond) == (100, 80, 60, 40, 20)


def test_steep_pattern_makes_diamond_free():
    p = generate_default_tier_pricing(50, "steep")
    assert p.diamond == 0
    assert is_tier_free(p, StatusTier.DIAMOND)
    assert is_tier_free(p, "Diamond")
    assert not is_tier_free(p, "bronze")


def test_unknown_pattern_falls_back_to_flat():
    p = generate_default_tier_pricing(10, "wild")
    assert {p.bronze, p.silver, p.gold, p.platinum, p.diamond} == {10}


def test_pattern_from_settings():
    p = generate_default_tier_pricing(10, settings=Settings(DEFAULT_PRICING_PATTERN="gentle"))
    assert p.diamond == 6


def test_prices_round_half_up():
    p = generate_default_tier_pricing(5, PricingPattern.GENTLE)
    # 4.5 -> 5, 4.0, 3.5 -> 4, 3.0
    assert (p.silver, p.gold, p.platinum, p.diamond) == (5, 4, 4, 3)


@pytest.mark.parametrize("pattern", list(PricingPattern))
def test_generated_pricing_has_no_errors(pattern):
    report = validate_tier_pricing(generate_default_tier_pricing(37, pattern), 37)
    assert report.errors == ()


def test_higher_tier_costing_more_is_error():
    p = TierPricing(bronze=100, silver=80, gold=90, platinum=40, diamond=20)
    report = validate_tier_pricing(p, 100)
    assert [i.code for i in report.errors] == [IssueCode.PRICE_ORDER]
    assert report.errors[0].message == "Gold (90) should not cost more than Silver (80)"


def test_missing_and_negative():
    p = TierPricing(bronze=10, silver=None, gold=0, platinum=0, diamond=-1)
    report = validate_tier_pricing(p, 10)
    assert [i.code for i in report.errors] == [IssueCode.PRICE_MISSING, IssueCode.PRICE_NEGATIVE]
    assert validate_tier_pricing(p, 10, require_all_filled=False).errors[0].code == IssueCode.PRICE_NEGATIVE


def test_warnings():
    flat = TierPricing(bronze=120, silver=120, gold=120, platinum=120, diamond=120)
    report = validate_tier_pricing(flat, 100)
    assert report.is_valid
    assert [i.code for i in report.warnings] == [IssueCode.PRICE_ABOVE_BASE, IssueCode.PRICE_FLAT]


def test_max_discount():
    assert get_max_discount(generate_default_tier_pricing(100, "linear"), 100) == 80
    assert get_max_discount(TierPricing(bronze=3, silver=3, gold=2, platinum=2, diamond=2), 3) == 33
    assert get_max_discount(TierPricing(), 0) == 0


def test_unknown_tier_is_invalid_input():
    p = generate_default_tier_pricing(10, "steep")
    with pytest.raises(InvalidInputError):
        is_tier_free(p, "unknown")


SPONSORED = RewardOffer(
    id="r1",
    cost=100,
    is_sponsored=True,
    tier_pricing=TierPricing(bronze=80, silver=60, gold=40, platinum=20, diamond=0),
)


def test_price_for_tier():
    res = get_reward_price_for_user(SPONSORED, "Gold")
    assert res.price == 40
    assert res.original_price == 80
    assert res.discount == 50
    assert not res.is_free
    assert get_reward_price_for_user(SPONSORED, StatusTier.DIAMOND).is_free


def test_unsponsored_and_unknown_tier_pay_base_cost():
    plain = RewardOffer(id="r2", cost=25)
    assert get_reward_price_for_user(plain, "diamond") == PriceResult(
        price=25, is_free=False, discount=0, original_price=25
    )
    res = get_reward_price_for_user(SPONSORED, "mystery")
    assert res.price == 100
    assert res.discount == -25


def test_claim_eligibility_order():
    inactive = SPONSORED.model_copy(update={"is_active": False, "stock_quantity": 0})
    assert can_user_claim_reward(inactive, "gold", 500).reason == "This reward is no longer available"

    sold_out = SPONSORED.model_copy(update={"stock_quantity": 0})
    assert can_user_claim_reward(sold_out, "gold", 500).reason == "Out of stock"

    gated = SPONSORED.model_copy(update={"min_status_tier": "platinum"})
    res = can_user_claim_reward(gated, "gold", 500)
    assert not res.can_claim
    assert res.reason == "Requires Platinum status or higher"
    assert can_user_claim_reward(gated, "diamond", 0).can_claim


def test_claim_needs_balance():
    assert can_user_claim_reward(SPONSORED, "gold", 39).reason == "Need 1 more claim"
    assert can_user_claim_reward(SPONSORED, "gold", 30).reason == "Need 10 more claims"
    ok = can_user_claim_reward(SPONSORED, "gold", 40)
    assert ok.can_claim
    assert ok.reason is None


def test_bad_min_tier_does_not_block_claim():
    odd = SPONSORED.model_copy(update={"min_status_tier": "legendary"})
    assert can_user_claim_reward(odd, "bronze", 80).can_claim
