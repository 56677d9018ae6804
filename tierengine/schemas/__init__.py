from tierengine.schemas.tier import TierDefinition, TierResolution
from tierengine.schemas.reward import RewardComputationInput, RewardComputationResult
from tierengine.schemas.validation import IssueCode, Severity, ValidationIssue, ValidationReport
from tierengine.schemas.milestone import MilestoneDefinition, ProgressionState
from tierengine.schemas.pricing import ClaimEligibility, PriceResult, RewardOffer, TierPricing

__all__ = [
    "TierDefinition",
    "TierResolution",
    "RewardComputationInput",
    "RewardComputationResult",
    "IssueCode",
    "Severity",
    "ValidationIssue",
    "ValidationReport",
    "MilestoneDefinition",
    "ProgressionState",
    "TierPricing",
    "RewardOffer",
    "PriceResult",
    "ClaimEligibility",
]
