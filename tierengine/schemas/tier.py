from __future__ import annotations

from decimal import Decimal

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator

from tierengine.core.money import to_decimal


class TierDefinition(BaseModel):
    """
    One row of the status tier table.

    Accepts both engine field names and the storage column names
    (min_nctr_360_locked, earning_multiplier, sort_order, ...), so a raw
    storage row can go straight into model_validate().
    """
    model_config = ConfigDict(frozen=True, extra="ignore", populate_by_name=True)

    id: str
    display_name: str = Field(validation_alias=AliasChoices("display_name", "tier_name"))
    min_threshold: Decimal = Field(
        ge=0,
        validation_alias=AliasChoices("min_threshold", "min_nctr_360_locked"),
    )
    # None = unbounded top tier
    max_threshold: Decimal | None = Field(
        default=None,
        validation_alias=AliasChoices("max_threshold", "max_nctr_360_locked"),
    )
    sort_index: int = Field(default=0, validation_alias=AliasChoices("sort_index", "sort_order"))
    reward_multiplier: Decimal = Field(
        default=Decimal("1.0"),
        ge=1,
        validation_alias=AliasChoices("reward_multiplier", "earning_multiplier"),
    )
    discount_percent: Decimal = Field(default=Decimal("0"), ge=0, le=100)
    badge_glyph: str = Field(default="", validation_alias=AliasChoices("badge_glyph", "badge_emoji"))
    badge_color: str = ""

    @field_validator(
        "min_threshold", "max_threshold", "reward_multiplier", "discount_percent", mode="before"
    )
    @classmethod
    def _floats_as_decimal(cls, v):
        return to_decimal(v)

    @field_validator("id", mode="before")
    @classmethod
    def _id_as_str(cls, v):
        return str(v) if isinstance(v, int) else v

    @property
    def is_unbounded(self) -> bool:
        return self.max_threshold is None


class TierResolution(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    current_tier: TierDefinition
    next_tier: TierDefinition | None = None
    amount_to_next: Decimal = Decimal("0")
    progress_percent: float = 100.0
