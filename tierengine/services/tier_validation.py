# tierengine/services/tier_validation.py
"""
Tier table validation for the admin editor.

Runs on every edit, over the whole table, and reports every defect in one
pass:
  1) range     — non-terminal tier with min >= max            (error)
  2) overlap   — next.min <= prev.max                         (error)
  3) gap       — next.min != prev.max + 1, without overlap    (warning)
  4) monotonic — multiplier / discount lower than tier below  (error, each)
  5) order     — sort_index lower than the tier below         (error)
plus the top-tier shape: exactly one unbounded tier, and it is the highest.

Output is a pure function of the table contents: input order does not
matter, issues come out in ascending tier order.
"""
from __future__ import annotations

import logging
from typing import Sequence

from tierengine.core.money import fmt_num
from tierengine.schemas.tier import TierDefinition
from tierengine.schemas.validation import IssueCode, Severity, ValidationIssue, ValidationReport
from tierengine.services.tier import sort_tiers

logger = logging.getLogger(__name__)


def _err(code: IssueCode, message: str, *tiers: TierDefinition) -> ValidationIssue:
    return ValidationIssue(
        severity=Severity.ERROR, code=code, message=message, tier_ids=tuple(t.id for t in tiers)
    )


def _warn(code: IssueCode, message: str, *tiers: TierDefinition) -> ValidationIssue:
    return ValidationIssue(
        severity=Severity.WARNING, code=code, message=message, tier_ids=tuple(t.id for t in tiers)
    )


def _range_issues(ordered: list[TierDefinition]) -> list[ValidationIssue]:
    out: list[ValidationIssue] = []
    for t in ordered:
        if t.max_threshold is None:
            continue
        if t.min_threshold >= t.max_threshold:
            out.append(_err(
                IssueCode.INVALID_RANGE,
                f"{t.display_name} has an invalid range: min ({fmt_num(t.min_threshold)}) "
                f"must be lower than max ({fmt_num(t.max_threshold)})",
                t,
            ))
    return out


def _pair_issues(prev: TierDefinition, curr: TierDefinition) -> list[ValidationIssue]:
    out: list[ValidationIssue] = []

    if curr.sort_index < prev.sort_index:
        out.append(_err(
            IssueCode.SORT_ORDER,
            f"{curr.display_name} (sort index {curr.sort_index}) has a higher threshold than "
            f"{prev.display_name} (sort index {prev.sort_index}) but sorts before it",
            prev, curr,
        ))

    if prev.max_threshold is not None:
        if curr.min_threshold <= prev.max_threshold:
            out.append(_err(
                IssueCode.OVERLAP,
                f"Threshold overlap: {prev.display_name} max ({fmt_num(prev.max_threshold)}) "
                f"overlaps with {curr.display_name} min ({fmt_num(curr.min_threshold)})",
                prev, curr,
            ))
        elif curr.min_threshold != prev.max_threshold + 1:
            out.append(_warn(
                IssueCode.GAP,
                f"Threshold gap between {prev.display_name} and {curr.display_name}: "
                f"{curr.display_name} min is {fmt_num(curr.min_threshold)}, "
                f"expected {fmt_num(prev.max_threshold + 1)}",
                prev, curr,
            ))

    if curr.reward_multiplier < prev.reward_multiplier:
        out.append(_err(
            IssueCode.MULTIPLIER_DECREASE,
            f"{curr.display_name} has lower multiplier ({fmt_num(curr.reward_multiplier)}x) "
            f"than {prev.display_name} ({fmt_num(prev.reward_multiplier)}x)",
            prev, curr,
        ))
    if curr.discount_percent < prev.discount_percent:
        out.append(_err(
            IssueCode.DISCOUNT_DECREASE,
            f"{curr.display_name} has lower discount ({fmt_num(curr.discount_percent)}%) "
            f"than {prev.display_name} ({fmt_num(prev.discount_percent)}%)",
            prev, curr,
        ))
    return out


def _top_tier_issues(ordered: list[TierDefinition]) -> list[ValidationIssue]:
    out: list[ValidationIssue] = []
    top = ordered[-1]
    if top.max_threshold is not None:
        out.append(_err(
            IssueCode.MISSING_TOP_TIER,
            f"Highest tier {top.display_name} must have no max threshold (unbounded)",
            top,
        ))
    for t in ordered[:-1]:
        if t.max_threshold is None:
            out.append(_err(
                IssueCode.UNBOUNDED_NOT_TOP,
                f"{t.display_name} has no max threshold but is not the highest tier",
                t,
            ))
    return out


def validate_tier_table(tiers: Sequence[TierDefinition]) -> ValidationReport:
    if not tiers:
        return ValidationReport.from_issues([
            ValidationIssue(
                severity=Severity.ERROR,
                code=IssueCode.EMPTY_TABLE,
                message="Tier table is empty: at least one tier is required",
            )
        ])

    ordered = sort_tiers(tiers)

    issues = _range_issues(ordered)
    for prev, curr in zip(ordered, ordered[1:]):
        issues.extend(_pair_issues(prev, curr))
    issues.extend(_top_tier_issues(ordered))

    report = ValidationReport.from_issues(issues)
    logger.debug(
        "validate_tier_table tiers=%d errors=%d warnings=%d",
        len(ordered), len(report.errors), len(report.warnings),
    )
    return report


def is_valid_to_save(tiers: Sequence[TierDefinition]) -> bool:
    return validate_tier_table(tiers).is_valid
