# tierengine/services/milestones.py
from __future__ import annotations

import logging
from decimal import Decimal
from typing import Sequence

from tierengine.core.errors import ConfigurationError, InvalidInputError
from tierengine.core.money import round_half_up
from tierengine.schemas.milestone import MilestoneDefinition, ProgressionState

logger = logging.getLogger(__name__)


# Default referral schedule (reward_amount in NCTR, aux_reward in claims)
REFERRAL_MILESTONES: tuple[MilestoneDefinition, ...] = (
    MilestoneDefinition(threshold=1, reward_amount=Decimal("500"), label="First referral reward"),
    MilestoneDefinition(threshold=3, aux_reward=Decimal("5"), label="Social Butterfly"),
    MilestoneDefinition(threshold=5, reward_amount=Decimal("1000"), label="Connector"),
    MilestoneDefinition(
        threshold=10, reward_amount=Decimal("2000"), aux_reward=Decimal("10"), label="Networker"
    ),
    MilestoneDefinition(
        threshold=25, reward_amount=Decimal("5000"), aux_reward=Decimal("25"), label="Ambassador"
    ),
)


def _ordered(milestones: Sequence[MilestoneDefinition]) -> list[MilestoneDefinition]:
    ordered = sorted(milestones, key=lambda m: m.threshold)
    for a, b in zip(ordered, ordered[1:]):
        if a.threshold == b.threshold:
            raise ConfigurationError(f"duplicate milestone threshold: {a.threshold}")
    return ordered


def _check_count(name: str, value: int) -> None:
    if value < 0:
        raise InvalidInputError(f"{name} must be >= 0, got {value}")


def get_progression(milestones: Sequence[MilestoneDefinition], current_count: int) -> ProgressionState:
    """
    Next unmet milestone and percent progress towards it.

    The zero point is the last milestone already reached (or 0 when none is).
    No milestones at all is a fully progressed state, not an error.
    """
    _check_count("current_count", current_count)
    ordered = _ordered(milestones)

    prev: MilestoneDefinition | None = None
    nxt: MilestoneDefinition | None = None
    for m in ordered:
        if m.threshold > current_count:
            nxt = m
            break
        prev = m

    if nxt is None:
        return ProgressionState(
            current_count=current_count,
            next_milestone=None,
            previous_milestone=prev,
            percent_to_next=100,
            remaining_to_next=0,
        )

    start = prev.threshold if prev else 0
    span = nxt.threshold - start
    pct = round_half_up(Decimal(current_count - start) / Decimal(span) * 100)

    state = ProgressionState(
        current_count=current_count,
        next_milestone=nxt,
        previous_milestone=prev,
        percent_to_next=max(0, min(100, pct)),
        remaining_to_next=nxt.threshold - current_count,
    )
    logger.debug(
        "get_progression count=%s next=%s pct=%s", current_count, nxt.threshold, state.percent_to_next
    )
    return state


def milestones_crossed(
    milestones: Sequence[MilestoneDefinition],
    previous_count: int,
    current_count: int,
) -> list[MilestoneDefinition]:
    """Milestones unlocked by going from previous_count to current_count."""
    _check_count("previous_count", previous_count)
    _check_count("current_count", current_count)
    if current_count <= previous_count:
        return []
    return [m for m in _ordered(milestones) if previous_count < m.threshold <= current_count]
