"""Value objects for the AI maturity assessment.

All types here are frozen dataclasses so that an assessment can be built once
and shared without copying. ``to_dict()`` methods produce the camelCase JSON
shape exposed by the HTTP API and consumed by the enrichment merge.

This module has no framework imports and no I/O.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Literal

# Defaults applied when a metric is absent from the request.
DEFAULT_QUOTING_TIME_HOURS: float = 12.0
DEFAULT_PROCESSING_COST_PER_QUOTE: float = 65.0
DEFAULT_ERROR_RATE_PERCENT: float = 15.0
DEFAULT_CLIENT_SATISFACTION_PERCENT: float = 70.0

Rating = Literal["Low", "Medium", "High"]


class MaturityLevel(str, Enum):
    """Discrete maturity label derived from a 0-100 score."""

    BEGINNER = "Beginner"
    INTERMEDIATE = "Intermediate"
    ADVANCED = "Advanced"
    EXPERT = "Expert"
    AI_LEADER = "AILeader"


class CategoryName(str, Enum):
    """The six organisational dimensions assessed independently.

    Values are the JSON keys used in ``MaturityAssessment.categories``.
    Declaration order is the canonical category order.
    """

    DATA_INFRASTRUCTURE = "dataInfrastructure"
    PROCESS_DIGITALIZATION = "processDigitalization"
    TEAM_READINESS = "teamReadiness"
    TECHNOLOGY_ADOPTION = "technologyAdoption"
    BUSINESS_ALIGNMENT = "businessAlignment"
    CHANGE_MANAGEMENT = "changeManagement"


ALL_CATEGORIES: list[CategoryName] = list(CategoryName)


@dataclass(frozen=True)
class CompanyMetrics:
    """Raw operational metrics of the assessed company.

    Every field is optional. ``None`` means "not provided" and is replaced by
    the matching ``DEFAULT_*`` constant in :meth:`resolved`. Zero is a real
    value. No range validation happens here; the HTTP schema validates ranges.

    Attributes:
        quoting_time_hours: Hours needed to produce a freight quote.
        processing_cost_per_quote: Cost of processing one quote, in currency units.
        error_rate_percent: Share of quotes/documents with errors (0-100).
        client_satisfaction_percent: Client satisfaction rate (0-100).
    """

    quoting_time_hours: float | None = None
    processing_cost_per_quote: float | None = None
    error_rate_percent: float | None = None
    client_satisfaction_percent: float | None = None

    def resolved(self) -> "CompanyMetrics":
        """Return a copy with every absent metric replaced by its default."""
        return CompanyMetrics(
            quoting_time_hours=_default(self.quoting_time_hours, DEFAULT_QUOTING_TIME_HOURS),
            processing_cost_per_quote=_default(
                self.processing_cost_per_quote, DEFAULT_PROCESSING_COST_PER_QUOTE
            ),
            error_rate_percent=_default(self.error_rate_percent, DEFAULT_ERROR_RATE_PERCENT),
            client_satisfaction_percent=_default(
                self.client_satisfaction_percent, DEFAULT_CLIENT_SATISFACTION_PERCENT
            ),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "quotingTimeHours": self.quoting_time_hours,
            "processingCostPerQuote": self.processing_cost_per_quote,
            "errorRatePercent": self.error_rate_percent,
            "clientSatisfactionPercent": self.client_satisfaction_percent,
        }


def _default(value: float | None, default: float) -> float:
    return default if value is None else float(value)


@dataclass(frozen=True)
class CategoryProfile:
    """Static copy text describing one category, independent of its score."""

    strengths: tuple[str, ...]
    weaknesses: tuple[str, ...]
    next_steps: tuple[str, ...]
    benchmark_position: str


@dataclass(frozen=True)
class CategoryScore:
    """Score and diagnostic text for one category.

    Attributes:
        score: Category score (floor-clamped, may be fractional).
        level: Maturity level of this category's score.
        strengths: Three fixed strengths for the category.
        weaknesses: Three fixed weaknesses for the category.
        next_steps: Three fixed next steps for the category.
        benchmark_position: Fixed industry positioning statement.
        improvement_potential: Category ceiling constant minus ``score``.
    """

    score: float
    level: MaturityLevel
    strengths: tuple[str, ...]
    weaknesses: tuple[str, ...]
    next_steps: tuple[str, ...]
    benchmark_position: str
    improvement_potential: float

    def to_dict(self) -> dict[str, Any]:
        return {
            "score": self.score,
            "level": self.level.value,
            "strengths": list(self.strengths),
            "weaknesses": list(self.weaknesses),
            "nextSteps": list(self.next_steps),
            "benchmarkPosition": self.benchmark_position,
            "improvementPotential": self.improvement_potential,
        }


@dataclass(frozen=True)
class ActionItem:
    """A recommended action within a time horizon."""

    action: str
    priority: Rating
    effort: Rating
    impact: Rating
    timeline: str
    resources: tuple[str, ...]
    ai_assistance: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "action": self.action,
            "priority": self.priority,
            "effort": self.effort,
            "impact": self.impact,
            "timeline": self.timeline,
            "resources": list(self.resources),
            "aiAssistance": self.ai_assistance,
        }


@dataclass(frozen=True)
class SkillGap:
    """A skill to develop, with current and target levels on a 0-10 scale."""

    skill: str
    current_level: int
    target_level: int
    training_path: tuple[str, ...]
    ai_tools: tuple[str, ...]

    def to_dict(self) -> dict[str, Any]:
        return {
            "skill": self.skill,
            "currentLevel": self.current_level,
            "targetLevel": self.target_level,
            "trainingPath": list(self.training_path),
            "aiTools": list(self.ai_tools),
        }


@dataclass(frozen=True)
class Phase:
    """One phase of the transformation path."""

    name: str
    duration: str
    objectives: tuple[str, ...]
    ai_capabilities: tuple[str, ...]
    prerequisites: tuple[str, ...]
    deliverables: tuple[str, ...]

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "duration": self.duration,
            "objectives": list(self.objectives),
            "aiCapabilities": list(self.ai_capabilities),
            "prerequisites": list(self.prerequisites),
            "deliverables": list(self.deliverables),
        }


@dataclass(frozen=True)
class Milestone:
    """A dated checkpoint in the generated transformation timeline."""

    week: int
    achievement: str
    ai_deployment: str
    business_value: str
    success_criteria: tuple[str, ...]

    def to_dict(self) -> dict[str, Any]:
        return {
            "week": self.week,
            "achievement": self.achievement,
            "aiDeployment": self.ai_deployment,
            "businessValue": self.business_value,
            "successCriteria": list(self.success_criteria),
        }


@dataclass(frozen=True)
class RiskFactor:
    """A transformation risk with its mitigation and monitoring metric."""

    risk: str
    probability: Rating
    impact: Rating
    mitigation: str
    ai_solution: str
    monitoring_metric: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "risk": self.risk,
            "probability": self.probability,
            "impact": self.impact,
            "mitigation": self.mitigation,
            "aiSolution": self.ai_solution,
            "monitoringMetric": self.monitoring_metric,
        }


@dataclass(frozen=True)
class QuickWin:
    """A short-horizon AI opportunity. ``expected_roi`` is a percentage."""

    opportunity: str
    ai_technology: str
    implementation_time: str
    expected_roi: int
    complexity: Rating
    prerequisites: tuple[str, ...]

    def to_dict(self) -> dict[str, Any]:
        return {
            "opportunity": self.opportunity,
            "aiTechnology": self.ai_technology,
            "implementationTime": self.implementation_time,
            "expectedROI": self.expected_roi,
            "complexity": self.complexity,
            "prerequisites": list(self.prerequisites),
        }


@dataclass(frozen=True)
class InvestmentPriority:
    """An investment area with its expected return."""

    area: str
    investment_range: str
    expected_return: str
    time_to_value: str
    ai_technologies: tuple[str, ...]
    business_impact: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "area": self.area,
            "investmentRange": self.investment_range,
            "expectedReturn": self.expected_return,
            "timeToValue": self.time_to_value,
            "aiTechnologies": list(self.ai_technologies),
            "businessImpact": self.business_impact,
        }


@dataclass(frozen=True)
class RecommendationPlan:
    """Recommendations grouped by time horizon."""

    immediate: tuple[ActionItem, ...]
    short_term: tuple[ActionItem, ...]
    long_term: tuple[ActionItem, ...]
    ai_implementation_order: tuple[str, ...]
    skill_development: tuple[SkillGap, ...]

    def to_dict(self) -> dict[str, Any]:
        return {
            "immediate": [item.to_dict() for item in self.immediate],
            "shortTerm": [item.to_dict() for item in self.short_term],
            "longTerm": [item.to_dict() for item in self.long_term],
            "aiImplementationOrder": list(self.ai_implementation_order),
            "skillDevelopment": [gap.to_dict() for gap in self.skill_development],
        }


@dataclass(frozen=True)
class TransformationPath:
    """Current/target state, phases, generated milestones and success metrics."""

    current_state: str
    target_state: str
    phases: tuple[Phase, ...]
    milestones: tuple[Milestone, ...]
    success_metrics: tuple[str, ...]

    def to_dict(self) -> dict[str, Any]:
        return {
            "currentState": self.current_state,
            "targetState": self.target_state,
            "phases": [phase.to_dict() for phase in self.phases],
            "milestones": [milestone.to_dict() for milestone in self.milestones],
            "successMetrics": list(self.success_metrics),
        }


@dataclass(frozen=True)
class MaturityAssessment:
    """Complete deterministic AI maturity assessment.

    Attributes:
        overall_score: Rounded mean of the six category scores.
        maturity_level: Level of ``overall_score``.
        categories: Per-category scores keyed by category, in canonical order.
        recommendations: Fixed recommendation plan.
        transformation_path: Transformation path with generated milestones.
        risk_factors: Three fixed risk factors.
        quick_wins: Three fixed quick wins.
        investment_priorities: Three fixed investment priorities.
    """

    overall_score: int
    maturity_level: MaturityLevel
    categories: dict[CategoryName, CategoryScore]
    recommendations: RecommendationPlan
    transformation_path: TransformationPath
    risk_factors: tuple[RiskFactor, ...]
    quick_wins: tuple[QuickWin, ...]
    investment_priorities: tuple[InvestmentPriority, ...]

    def to_dict(self) -> dict[str, Any]:
        """Serialise to the camelCase JSON shape returned by the API."""
        return {
            "overallScore": self.overall_score,
            "maturityLevel": self.maturity_level.value,
            "categories": {
                category.value: score.to_dict()
                for category, score in self.categories.items()
            },
            "recommendations": self.recommendations.to_dict(),
            "transformationPath": self.transformation_path.to_dict(),
            "riskFactors": [risk.to_dict() for risk in self.risk_factors],
            "quickWins": [win.to_dict() for win in self.quick_wins],
            "investmentPriorities": [
                priority.to_dict() for priority in self.investment_priorities
            ],
        }
