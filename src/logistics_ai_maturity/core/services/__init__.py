"""Services package for the logistics AI maturity service."""

from logistics_ai_maturity.core.services.assessment_service import (
    SOURCE_ENRICHED,
    SOURCE_FALLBACK,
    MaturityAssessmentService,
)

__all__ = [
    "MaturityAssessmentService",
    "SOURCE_ENRICHED",
    "SOURCE_FALLBACK",
]
