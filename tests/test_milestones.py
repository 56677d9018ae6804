import pytest

from tierengine.core.errors import ConfigurationError, InvalidInputError
from tierengine.schemas import MilestoneDefinition
from tierengine.services.milestones import REFERRAL_MILESTONES, get_progression, milestones_crossed


def test_between_milestones(referral_schedule):
    state = get_progression(referral_schedule, 4)
    assert state.next_milestone.threshold == 5
    assert state.previous_milestone.threshold == 3
    assert state.percent_to_next == 50
    assert state.remaining_to_next == 1


def test_zero_count(referral_schedule):
    state = get_progression(referral_schedule, 0)
    assert state.next_milestone.threshold == 1
    assert state.previous_milestone is None
    assert state.percent_to_next == 0
    assert state.remaining_to_next == 1


def test_boundaries_reset_to_zero(referral_schedule):
    for i, m in enumerate(referral_schedule):
        state = get_progression(referral_schedule, m.threshold)
        if i + 1 < len(referral_schedule):
            assert state.next_milestone == referral_schedule[i + 1]
            assert state.percent_to_next == 0
        else:
            assert state.next_milestone is None
            assert state.percent_to_next == 100


def test_percent_always_in_range(referral_schedule):
    for count in range(0, 15):
        assert 0 <= get_progression(referral_schedule, count).percent_to_next <= 100


def test_rounds_half_up():
    schedule = [MilestoneDefinition(threshold=8)]
    assert get_progression(schedule, 1).percent_to_next == 13  # 12.5
    assert get_progression([MilestoneDefinition(threshold=3)], 1).percent_to_next == 33


def test_fully_progressed(referral_schedule):
    state = get_progression(referral_schedule, 40)
    assert state.is_complete
    assert state.percent_to_next == 100
    assert state.remaining_to_next == 0
    assert state.previous_milestone.threshold == 10


def test_empty_schedule_is_complete():
    state = get_progression([], 0)
    assert state.is_complete
    assert state.next_milestone is None
    assert state.percent_to_next == 100


def test_unsorted_schedule(referral_schedule):
    assert get_progression(list(reversed(referral_schedule)), 4).next_milestone.threshold == 5


def test_duplicate_thresholds_rejected():
    with pytest.raises(ConfigurationError):
        get_progression([MilestoneDefinition(threshold=2), MilestoneDefinition(threshold=2)], 1)


def test_negative_count_rejected(referral_schedule):
    with pytest.raises(InvalidInputError):
        get_progression(referral_schedule, -1)


def test_milestones_crossed(referral_schedule):
    assert [m.threshold for m in milestones_crossed(referral_schedule, 0, 1)] == [1]
    assert [m.threshold for m in milestones_crossed(referral_schedule, 2, 10)] == [3, 5, 10]
    assert milestones_crossed(referral_schedule, 5, 5) == []
    assert milestones_crossed(referral_schedule, 6, 2) == []
    assert milestones_crossed(referral_schedule, 10, 50) == []


def test_default_referral_schedule():
    assert [m.threshold for m in REFERRAL_MILESTONES] == [1, 3, 5, 10, 25]
    state = get_progression(REFERRAL_MILESTONES, 7)
    assert state.next_milestone.label == "Networker"
    assert state.next_milestone.aux_reward == 10
    assert state.percent_to_next == 40
