# tierengine/services/tier.py
from __future__ import annotations

import logging
from decimal import Decimal
from typing import Iterable, Sequence

from tierengine.core.errors import ConfigurationError
from tierengine.core.tier_rules import (
    DEFAULT_DISCOUNT_PERCENT,
    DEFAULT_EARNING_MULTIPLIERS,
    RULES,
    TIER_BADGES,
    TIER_ORDER,
)
from tierengine.schemas.tier import TierDefinition, TierResolution

logger = logging.getLogger(__name__)


def _sort_key(t: TierDefinition) -> tuple:
    # total order, duplicate rows included
    return (
        t.min_threshold,
        t.sort_index,
        t.id,
        t.max_threshold is None,
        t.max_threshold or 0,
        t.reward_multiplier,
        t.discount_percent,
        t.display_name,
    )


def sort_tiers(tiers: Iterable[TierDefinition]) -> list[TierDefinition]:
    """Ascending by min_threshold; ties broken by sort_index, then id."""
    return sorted(tiers, key=_sort_key)


def _progress(balance: Decimal, current: TierDefinition, nxt: TierDefinition | None) -> float:
    if nxt is None:
        return 100.0
    span = nxt.min_threshold - current.min_threshold
    if span <= 0:
        return 0.0
    pct = float((balance - current.min_threshold) / span * 100)
    return max(0.0, min(100.0, pct))


def resolve_tier(tiers: Sequence[TierDefinition], balance: Decimal | int | float) -> TierResolution:
    """
    Tier for a committed balance plus the next tier and distance to it.

    A balance below every threshold still gets the lowest tier (baseline
    tier policy). An empty table raises ConfigurationError.
    """
    if not tiers:
        raise ConfigurationError("tier table is empty")

    bal = Decimal(str(balance)) if isinstance(balance, float) else Decimal(balance)
    ordered = sort_tiers(tiers)

    idx = 0
    for i, t in enumerate(ordered):
        if t.min_threshold <= bal:
            idx = i
        else:
            break

    current = ordered[idx]
    nxt = ordered[idx + 1] if idx + 1 < len(ordered) else None
    amount_to_next = max(Decimal("0"), nxt.min_threshold - bal) if nxt else Decimal("0")

    res = TierResolution(
        current_tier=current,
        next_tier=nxt,
        amount_to_next=amount_to_next,
        progress_percent=_progress(bal, current, nxt),
    )
    logger.debug(
        "resolve_tier balance=%s current=%s next=%s to_next=%s",
        bal, current.id, nxt.id if nxt else None, amount_to_next,
    )
    return res


# ── Convenience wrappers ──────────────────────────────────

def tier_by_balance(tiers: Sequence[TierDefinition], balance) -> TierDefinition:
    return resolve_tier(tiers, balance).current_tier


def next_tier(tiers: Sequence[TierDefinition], balance) -> TierDefinition | None:
    return resolve_tier(tiers, balance).next_tier


def progress_to_next_tier(tiers: Sequence[TierDefinition], balance) -> float:
    return resolve_tier(tiers, balance).progress_percent


# ── Table construction ───────────────────────────────────

def default_tiers() -> list[TierDefinition]:
    """Fallback ladder used when the tier table cannot be read from storage."""
    out: list[TierDefinition] = []
    for i, key in enumerate(TIER_ORDER):
        upper = None
        if i + 1 < len(TIER_ORDER):
            upper = RULES.threshold(TIER_ORDER[i + 1]) - 1
        badge = TIER_BADGES[key]
        out.append(
            TierDefinition(
                id=key.value,
                display_name=key.label,
                min_threshold=RULES.threshold(key),
                max_threshold=upper,
                sort_index=i + 1,
                reward_multiplier=DEFAULT_EARNING_MULTIPLIERS[key],
                discount_percent=DEFAULT_DISCOUNT_PERCENT[key],
                badge_glyph=badge.glyph,
                badge_color=badge.color,
            )
        )
    return out


def build_linear_tier_table(
    names: Sequence[str],
    band_width: Decimal | int,
    *,
    start: Decimal | int = 0,
    multiplier_step: Decimal | str = "0.25",
    discount_step: Decimal | str = "5",
) -> list[TierDefinition]:
    """
    Contiguous ladder: tier i covers [start + i*w, start + (i+1)*w - 1],
    the last one is unbounded. Multiplier and discount grow by a fixed step.
    """
    if not names:
        raise ConfigurationError("at least one tier name is required")
    width = Decimal(band_width)
    if width <= 1:
        # width 1 gives the degenerate range min == max
        raise ConfigurationError(f"band_width must be > 1, got {band_width}")

    base = Decimal(start)
    m_step = Decimal(multiplier_step)
    d_step = Decimal(discount_step)

    out: list[TierDefinition] = []
    for i, name in enumerate(names):
        lo = base + width * i
        last = i == len(names) - 1
        out.append(
            TierDefinition(
                id=name.strip().lower().replace(" ", "_"),
                display_name=name,
                min_threshold=lo,
                max_threshold=None if last else lo + width - 1,
                sort_index=i + 1,
                reward_multiplier=Decimal("1") + m_step * i,
                discount_percent=min(Decimal("100"), d_step * i),
            )
        )
    return out
