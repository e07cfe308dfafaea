"""
Pydantic models for the founder assessment.

Defines the 7-dimension profile and the dimension tables shared by
scoring, compatibility and matching.
"""

from typing import Dict, List, Literal

from pydantic import BaseModel, ConfigDict, Field


MotivationType = Literal["intrinsic", "extrinsic", "mixed"]

# Canonical order of the numeric dimensions. Every per-dimension loop in
# the scoring, compatibility and matching code walks this tuple.
NUMERIC_DIMENSIONS = (
    "imposterSyndrome",
    "founderDoubt",
    "identityFusion",
    "fearOfRejection",
    "riskTolerance",
    "isolationLevel",
)

# Dimensions where a higher value means more strain. riskTolerance is not one.
BURDEN_DIMENSIONS = (
    "imposterSyndrome",
    "founderDoubt",
    "identityFusion",
    "fearOfRejection",
    "isolationLevel",
)

DIMENSION_LABELS: Dict[str, str] = {
    "imposterSyndrome": "Imposter Syndrome",
    "founderDoubt": "Founder Doubt",
    "identityFusion": "Identity Fusion",
    "fearOfRejection": "Fear of Rejection",
    "riskTolerance": "Risk Tolerance",
    "isolationLevel": "Isolation Level",
}


class ScoreVector(BaseModel):
    """Psychological profile: six 0-100 scores plus motivation type."""
    model_config = ConfigDict(frozen=True)

    imposterSyndrome: int = Field(..., ge=0, le=100)
    founderDoubt: int = Field(..., ge=0, le=100)
    identityFusion: int = Field(..., ge=0, le=100)
    fearOfRejection: int = Field(..., ge=0, le=100)
    riskTolerance: int = Field(..., ge=0, le=100)
    isolationLevel: int = Field(..., ge=0, le=100)
    motivationType: MotivationType

    def value(self, dimension: str) -> int:
        """Numeric value for one of NUMERIC_DIMENSIONS."""
        return getattr(self, dimension)

    def numeric_values(self) -> List[int]:
        """Numeric values in canonical dimension order."""
        return [getattr(self, dimension) for dimension in NUMERIC_DIMENSIONS]

