# tierengine/services/reward.py
"""
Reward stacking.

FORMULA: final = round_half_up(base × categorical_bonus × status_multiplier)

Multipliers are multiplicative, and rounding happens once, after every
factor has been applied. Every earning-event producer goes through
compute_reward; build_reward_input is where a producer turns its event
(source, tier, lock commitment) into structured input.
"""
from __future__ import annotations

import logging
from decimal import Decimal

from tierengine.core.config import Settings, settings as default_settings
from tierengine.core.errors import InvalidInputError
from tierengine.core.loyalty_rules import EarningSource
from tierengine.core.money import fmt_num, round_half_up, to_decimal
from tierengine.schemas.reward import RewardComputationInput, RewardComputationResult
from tierengine.schemas.tier import TierDefinition

logger = logging.getLogger(__name__)

ONE = Decimal("1")


def _check(data: RewardComputationInput) -> None:
    if data.base_amount < 0:
        raise InvalidInputError(f"base_amount must be >= 0, got {data.base_amount}")
    if data.status_multiplier < ONE:
        raise InvalidInputError(f"status_multiplier must be >= 1, got {data.status_multiplier}")
    if data.categorical_bonus_multiplier < ONE:
        raise InvalidInputError(
            f"categorical_bonus_multiplier must be >= 1, got {data.categorical_bonus_multiplier}"
        )


def format_breakdown(
    base_amount: Decimal,
    bonus: Decimal,
    status: Decimal,
    final_amount: int,
    *,
    bonus_label: str = "bonus",
    status_label: str = "status",
) -> str:
    """'1000 × 3x bonus × 1.5x Gold = 4500'; factors equal to 1 are left out."""
    parts = [fmt_num(base_amount)]
    if bonus != ONE:
        parts.append(f"{fmt_num(bonus)}x {bonus_label}")
    if status != ONE:
        parts.append(f"{fmt_num(status)}x {status_label}")
    return " × ".join(parts) + f" = {final_amount}"


def compute_reward(data: RewardComputationInput) -> RewardComputationResult:
    _check(data)

    bonus = data.categorical_bonus_multiplier if data.categorical_bonus_active else ONE
    status = data.status_multiplier

    final_amount = round_half_up(data.base_amount * bonus * status)

    label = format_breakdown(
        data.base_amount,
        bonus,
        status,
        final_amount,
        bonus_label=data.bonus_label,
        status_label=data.status_label,
    )
    logger.debug("compute_reward %s", label)

    return RewardComputationResult(
        base_amount=data.base_amount,
        applied_bonus_multiplier=bonus,
        applied_status_multiplier=status,
        final_amount=final_amount,
        breakdown_label=label,
    )


def build_reward_input(
    base_amount: Decimal | int | float,
    source: EarningSource | str = EarningSource.OTHER,
    tier: TierDefinition | None = None,
    lock_committed: bool = False,
    settings: Settings | None = None,
) -> RewardComputationInput:
    """
    Assemble the input for one earning event.

    Status multiplier comes from the participant's tier (1x without one).
    The 360LOCK bonus is active only for merch sources committed to a lock.
    """
    cfg = settings or default_settings
    src = source if isinstance(source, EarningSource) else _parse_source(source)

    return RewardComputationInput(
        base_amount=to_decimal(base_amount),
        status_multiplier=tier.reward_multiplier if tier is not None else ONE,
        categorical_bonus_active=bool(lock_committed and src.is_merch),
        categorical_bonus_multiplier=cfg.LOCK_BONUS_MULTIPLIER,
        status_label=tier.display_name if tier is not None else cfg.STATUS_LABEL,
        bonus_label=cfg.BONUS_LABEL,
    )


def _parse_source(raw: str | None) -> EarningSource:
    try:
        return EarningSource((raw or "").strip().lower())
    except ValueError:
        return EarningSource.OTHER


def reward_for_event(
    base_amount: Decimal | int | float,
    source: EarningSource | str = EarningSource.OTHER,
    tier: TierDefinition | None = None,
    lock_committed: bool = False,
    settings: Settings | None = None,
) -> RewardComputationResult:
    return compute_reward(
        build_reward_input(base_amount, source, tier, lock_committed, settings=settings)
    )
