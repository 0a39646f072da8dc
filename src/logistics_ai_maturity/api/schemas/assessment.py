"""Pydantic request/response schemas for the AI maturity assessment API.

All API inputs and outputs are strictly typed Pydantic v2 models.
No raw dicts are returned from any endpoint. JSON field names are camelCase;
Python attribute names are snake_case.
"""

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from logistics_ai_maturity.core.models import CompanyMetrics, MaturityLevel, Rating


class CamelModel(BaseModel):
    """Base model serialising to camelCase and accepting either casing."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# ---------------------------------------------------------------------------
# Requests
# ---------------------------------------------------------------------------


class CompanyMetricsFields(CamelModel):
    """The four operational metrics; each optional, defaulted when absent.

    Attributes:
        quoting_time_hours: Hours needed to produce a freight quote.
        processing_cost_per_quote: Cost of processing one quote.
        error_rate_percent: Error rate 0-100.
        client_satisfaction_percent: Client satisfaction rate 0-100.
    """

    quoting_time_hours: float | None = Field(
        default=None,
        ge=0,
        description="Hours to produce a quote (default 12)",
    )
    processing_cost_per_quote: float | None = Field(
        default=None,
        ge=0,
        description="Processing cost per quote in currency units (default 65)",
    )
    error_rate_percent: float | None = Field(
        default=None,
        ge=0,
        le=100,
        description="Error rate percentage 0-100 (default 15)",
    )
    client_satisfaction_percent: float | None = Field(
        default=None,
        ge=0,
        le=100,
        description="Client satisfaction percentage 0-100 (default 70)",
    )

    def to_metrics(self) -> CompanyMetrics:
        """Convert to the core CompanyMetrics value object."""
        return CompanyMetrics(
            quoting_time_hours=self.quoting_time_hours,
            processing_cost_per_quote=self.processing_cost_per_quote,
            error_rate_percent=self.error_rate_percent,
            client_satisfaction_percent=self.client_satisfaction_percent,
        )


class AssessRequest(CompanyMetricsFields):
    """Request body for a full assessment. ``company_name`` is required."""

    company_name: str = Field(..., min_length=1, max_length=255)


class DemoAssessRequest(CompanyMetricsFields):
    """Request body for the demo assessment. Every field is optional."""

    company_name: str | None = Field(default=None, min_length=1, max_length=255)


# ---------------------------------------------------------------------------
# Assessment payload
# ---------------------------------------------------------------------------


class CategoryScoreSchema(CamelModel):
    """Score and diagnostic text for one category."""

    score: float
    level: MaturityLevel
    strengths: list[str]
    weaknesses: list[str]
    next_steps: list[str]
    benchmark_position: str
    improvement_potential: float


class CategoriesSchema(CamelModel):
    """The six category scores keyed by category name."""

    data_infrastructure: CategoryScoreSchema
    process_digitalization: CategoryScoreSchema
    team_readiness: CategoryScoreSchema
    technology_adoption: CategoryScoreSchema
    business_alignment: CategoryScoreSchema
    change_management: CategoryScoreSchema


class ActionItemSchema(CamelModel):
    """A recommended action."""

    action: str
    priority: Rating
    effort: Rating
    impact: Rating
    timeline: str
    resources: list[str]
    ai_assistance: str


class SkillGapSchema(CamelModel):
    """A skill gap with current and target levels (0-10)."""

    skill: str
    current_level: int
    target_level: int
    training_path: list[str]
    ai_tools: list[str]


class RecommendationPlanSchema(CamelModel):
    """Recommendations grouped by time horizon."""

    immediate: list[ActionItemSchema]
    short_term: list[ActionItemSchema]
    long_term: list[ActionItemSchema]
    ai_implementation_order: list[str]
    skill_development: list[SkillGapSchema]


class PhaseSchema(CamelModel):
    """One transformation phase."""

    name: str
    duration: str
    objectives: list[str]
    ai_capabilities: list[str]
    prerequisites: list[str]
    deliverables: list[str]


class MilestoneSchema(CamelModel):
    """A generated transformation milestone."""

    week: int
    achievement: str
    ai_deployment: str
    business_value: str
    success_criteria: list[str]


class TransformationPathSchema(CamelModel):
    """Transformation path from current to target state."""

    current_state: str
    target_state: str
    phases: list[PhaseSchema]
    milestones: list[MilestoneSchema]
    success_metrics: list[str]


class RiskFactorSchema(CamelModel):
    """A transformation risk."""

    risk: str
    probability: Rating
    impact: Rating
    mitigation: str
    ai_solution: str
    monitoring_metric: str


class QuickWinSchema(CamelModel):
    """A short-horizon AI opportunity."""

    opportunity: str
    ai_technology: str
    implementation_time: str
    expected_roi: int = Field(..., alias="expectedROI")
    complexity: Rating
    prerequisites: list[str]


class InvestmentPrioritySchema(CamelModel):
    """An investment area."""

    area: str
    investment_range: str
    expected_return: str
    time_to_value: str
    ai_technologies: list[str]
    business_impact: str


class MaturityAssessmentSchema(CamelModel):
    """Complete AI maturity assessment.

    Attributes:
        overall_score: Rounded mean of the six category scores.
        maturity_level: Level of the overall score.
        categories: Per-category scores.
        recommendations: Recommendation plan.
        transformation_path: Phases and generated milestones.
        risk_factors: Risk factors.
        quick_wins: Quick wins.
        investment_priorities: Investment priorities.
    """

    overall_score: int
    maturity_level: MaturityLevel
    categories: CategoriesSchema
    recommendations: RecommendationPlanSchema
    transformation_path: TransformationPathSchema
    risk_factors: list[RiskFactorSchema]
    quick_wins: list[QuickWinSchema]
    investment_priorities: list[InvestmentPrioritySchema]


# ---------------------------------------------------------------------------
# Response envelope
# ---------------------------------------------------------------------------


class BenchmarkDataSchema(CamelModel):
    """Position of the overall score against the logistics industry benchmark."""

    industry_average: int
    top_quartile: int
    your_position: Literal["Top Quartile", "Above Average", "Below Average"]


class AssessmentDataSchema(CamelModel):
    """Assessment result with company context.

    Attributes:
        assessment: The assessment payload.
        company_name: Assessed company.
        assessment_date: When the assessment was produced (UTC).
        benchmark_data: Industry benchmark positioning.
        source: 'enriched' when generated sections were merged, else 'fallback'.
    """

    assessment: MaturityAssessmentSchema
    company_name: str
    assessment_date: datetime
    benchmark_data: BenchmarkDataSchema
    source: Literal["fallback", "enriched"]


class AssessmentEnvelope(CamelModel):
    """Top-level response for the assessment endpoints."""

    success: bool = True
    message: str
    data: AssessmentDataSchema
    timestamp: datetime
    processing_time: str


class DemoAssessmentDataSchema(AssessmentDataSchema):
    """Demo assessment result with summary copy.

    Attributes:
        is_demo: Always True.
        note: Fixed disclaimer for demonstration results.
        key_insights: Five summary lines built from the assessment.
        next_steps: Fixed suggested next steps.
    """

    is_demo: bool = True
    note: str
    key_insights: list[str]
    next_steps: list[str]


class DemoAssessmentEnvelope(AssessmentEnvelope):
    """Top-level response for the demo endpoint."""

    data: DemoAssessmentDataSchema


class LevelBandSchema(CamelModel):
    """One maturity level band; ``max_score`` is None for the open top band."""

    level: MaturityLevel
    min_score: int
    max_score: int | None
