from tierengine.core.errors import ConfigurationError, InvalidInputError, TierEngineError
from tierengine.schemas import (
    MilestoneDefinition,
    ProgressionState,
    RewardComputationInput,
    RewardComputationResult,
    TierDefinition,
    TierResolution,
    ValidationIssue,
    ValidationReport,
)
from tierengine.services.milestones import get_progression, milestones_crossed
from tierengine.services.reward import build_reward_input, compute_reward
from tierengine.services.tier import resolve_tier
from tierengine.services.tier_validation import validate_tier_table

__version__ = "0.1.0"

__all__ = [
    "TierEngineError",
    "ConfigurationError",
    "InvalidInputError",
    "TierDefinition",
    "TierResolution",
    "RewardComputationInput",
    "RewardComputationResult",
    "ValidationIssue",
    "ValidationReport",
    "MilestoneDefinition",
    "ProgressionState",
    "resolve_tier",
    "compute_reward",
    "build_reward_input",
    "validate_tier_table",
    "get_progression",
    "milestones_crossed",
]
