from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict


class Severity(str, Enum):
    ERROR = "error"
    WARNING = "warning"


class IssueCode(str, Enum):
    EMPTY_TABLE = "empty_table"
    INVALID_RANGE = "invalid_range"
    OVERLAP = "overlap"
    GAP = "gap"
    MULTIPLIER_DECREASE = "multiplier_decrease"
    DISCOUNT_DECREASE = "discount_decrease"
    MISSING_TOP_TIER = "missing_top_tier"
    UNBOUNDED_NOT_TOP = "unbounded_not_top"
    SORT_ORDER = "sort_order"
    # tier pricing
    PRICE_MISSING = "price_missing"
    PRICE_NEGATIVE = "price_negative"
    PRICE_ORDER = "price_order"
    PRICE_ABOVE_BASE = "price_above_base"
    PRICE_FLAT = "price_flat"


class ValidationIssue(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    severity: Severity
    code: IssueCode
    message: str
    # tiers the issue is attributed to, lower tier first
    tier_ids: tuple[str, ...] = ()


class ValidationReport(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    errors: tuple[ValidationIssue, ...] = ()
    warnings: tuple[ValidationIssue, ...] = ()

    @property
    def is_valid(self) -> bool:
        # warnings never block a save
        return len(self.errors) == 0

    @classmethod
    def from_issues(cls, issues: list[ValidationIssue]) -> "ValidationReport":
        return cls(
            errors=tuple(i for i in issues if i.severity == Severity.ERROR),
            warnings=tuple(i for i in issues if i.severity == Severity.WARNING),
        )
