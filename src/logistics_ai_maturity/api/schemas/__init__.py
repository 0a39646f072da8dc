"""API schemas package for the logistics AI maturity service."""

from logistics_ai_maturity.api.schemas.assessment import (
    AssessmentDataSchema,
    AssessmentEnvelope,
    AssessRequest,
    BenchmarkDataSchema,
    CategoryScoreSchema,
    DemoAssessmentDataSchema,
    DemoAssessmentEnvelope,
    DemoAssessRequest,
    LevelBandSchema,
    MaturityAssessmentSchema,
    MilestoneSchema,
)

__all__ = [
    "AssessRequest",
    "AssessmentDataSchema",
    "AssessmentEnvelope",
    "BenchmarkDataSchema",
    "CategoryScoreSchema",
    "DemoAssessmentDataSchema",
    "DemoAssessmentEnvelope",
    "DemoAssessRequest",
    "LevelBandSchema",
    "MaturityAssessmentSchema",
    "MilestoneSchema",
]
