import pytest

from tierengine.schemas import MilestoneDefinition, TierDefinition


def make_tier(tid, lo, hi, mult=1.0, discount=0, sort_index=None, name=None):
    return TierDefinition(
        id=tid,
        display_name=name or tid.capitalize(),
        min_threshold=lo,
        max_threshold=hi,
        sort_index=sort_index if sort_index is not None else int(lo),
        reward_multiplier=mult,
        discount_percent=discount,
    )


@pytest.fixture
def two_tiers():
    return [make_tier("base", 0, 99, 1.0), make_tier("plus", 100, None, 1.1)]


@pytest.fixture
def ladder():
    return [
        make_tier("bronze", 0, 999, 1.0, 0, 1),
        make_tier("silver", 1000, 4999, 1.25, 5, 2),
        make_tier("gold", 5000, 9999, 1.5, 10, 3),
        make_tier("diamond", 10000, None, 2.0, 20, 4),
    ]


@pytest.fixture
def referral_schedule():
    return [MilestoneDefinition(threshold=t) for t in (1, 3, 5, 10)]
