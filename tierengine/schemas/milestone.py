from __future__ import annotations

from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field, field_validator

from tierengine.core.money import to_decimal


class MilestoneDefinition(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    threshold: int = Field(..., gt=0, description="Count that unlocks the milestone (e.g. referrals)")
    reward_amount: Decimal = Field(default=Decimal("0"), ge=0)
    aux_reward: Decimal = Field(default=Decimal("0"), ge=0, description="Secondary reward, e.g. claims")
    label: str = ""

    @field_validator("reward_amount", "aux_reward", mode="before")
    @classmethod
    def _floats_as_decimal(cls, v):
        return to_decimal(v)


class ProgressionState(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    current_count: int
    next_milestone: MilestoneDefinition | None = None
    previous_milestone: MilestoneDefinition | None = None
    percent_to_next: int = 100
    remaining_to_next: int = 0

    @property
    def is_complete(self) -> bool:
        return self.next_milestone is None
