from __future__ import annotations

from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field, field_validator

from tierengine.core.money import to_decimal


class RewardComputationInput(BaseModel):
    # Domain checks (negative amounts, multipliers < 1) live in compute_reward
    # so they surface as InvalidInputError, not as a pydantic ValidationError.
    model_config = ConfigDict(frozen=True, extra="forbid")

    base_amount: Decimal
    status_multiplier: Decimal = Decimal("1")
    categorical_bonus_active: bool = False
    categorical_bonus_multiplier: Decimal = Decimal("1")

    # breakdown wording only, never affects the arithmetic
    status_label: str = Field(default="status", max_length=60)
    bonus_label: str = Field(default="bonus", max_length=60)

    @field_validator("base_amount", "status_multiplier", "categorical_bonus_multiplier", mode="before")
    @classmethod
    def _floats_as_decimal(cls, v):
        return to_decimal(v)


class RewardComputationResult(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    base_amount: Decimal
    applied_bonus_multiplier: Decimal
    applied_status_multiplier: Decimal
    final_amount: int
    breakdown_label: str
