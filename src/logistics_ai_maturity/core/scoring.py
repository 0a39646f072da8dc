"""Deterministic AI maturity scoring and transformation-plan generation.

Derives six category scores from four operational metrics, each with its own
affine formula and floor. The overall score is the rounded mean of the six.
Maturity levels map score ranges to five labels; the same mapping is applied
to the overall score and to every category score.

The scores are then expanded into a full ``MaturityAssessment`` using the
static tables in ``core/templates.py``. The only algorithmic part of that
expansion is the milestone generator, which walks two week counters and
picks labels by bracket tests on the raw counter.

This module is intentionally independent of the HTTP and enrichment layers so
that the scoring logic can be unit-tested without any infrastructure. It never
raises for well-typed input and performs no I/O.
"""

import math

from logistics_ai_maturity.core.models import (
    ALL_CATEGORIES,
    CategoryName,
    CategoryScore,
    CompanyMetrics,
    MaturityAssessment,
    MaturityLevel,
    Milestone,
    TransformationPath,
)
from logistics_ai_maturity.core.templates import (
    ACCELERATION_BUSINESS_VALUES,
    ACCELERATION_MILESTONE_LABELS,
    ACCELERATION_SUCCESS_CRITERIA,
    BENCHMARK_INDUSTRY_AVERAGE,
    BENCHMARK_TOP_QUARTILE,
    CATEGORY_CEILINGS,
    CATEGORY_PROFILES,
    CURRENT_STATE_TEMPLATE,
    FOUNDATION_BUSINESS_VALUES,
    FOUNDATION_MILESTONE_LABELS,
    FOUNDATION_SUCCESS_CRITERIA,
    INVESTMENT_PRIORITIES,
    QUICK_WINS,
    RECOMMENDATION_PLAN,
    RISK_FACTORS,
    SUCCESS_METRICS,
    TARGET_STATE,
    TRANSFORMATION_PHASES,
)
from logistics_ai_maturity.observability import get_logger

logger = get_logger(__name__)

# Lowest value each category score can take.
CATEGORY_FLOORS: dict[CategoryName, float] = {
    CategoryName.DATA_INFRASTRUCTURE: 20.0,
    CategoryName.PROCESS_DIGITALIZATION: 15.0,
    CategoryName.TEAM_READINESS: 25.0,
    CategoryName.TECHNOLOGY_ADOPTION: 20.0,
    CategoryName.BUSINESS_ALIGNMENT: 30.0,
    CategoryName.CHANGE_MANAGEMENT: 35.0,
}

# Inclusive upper bound of each level band; scores above the last bound are
# AI leaders.
#   0-20   -> Beginner
#   21-40  -> Intermediate
#   41-60  -> Advanced
#   61-80  -> Expert
#   81+    -> AILeader
_LEVEL_UPPER_BOUNDS: list[tuple[float, MaturityLevel]] = [
    (20.0, MaturityLevel.BEGINNER),
    (40.0, MaturityLevel.INTERMEDIATE),
    (60.0, MaturityLevel.ADVANCED),
    (80.0, MaturityLevel.EXPERT),
]

# Milestone generation: (first week, last week, step, bracket bounds).
_FOUNDATION_WEEKS: tuple[int, int, int] = (1, 12, 3)
_FOUNDATION_BRACKETS: tuple[int, int, int] = (3, 6, 9)
_FOUNDATION_VALUE_SPLIT: int = 6

_ACCELERATION_WEEKS: tuple[int, int, int] = (13, 36, 6)
_ACCELERATION_BRACKETS: tuple[int, int, int] = (18, 24, 30)
_ACCELERATION_VALUE_SPLIT: int = 24


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves going up (42.5 -> 43, -0.5 -> 0)."""
    return math.floor(value + 0.5)


def maturity_level_for(score: float) -> MaturityLevel:
    """Map a score to its maturity level.

    Used for the overall score and for every category score.

    Args:
        score: Score on the 0-100 scale (values outside the range are accepted).

    Returns:
        The matching MaturityLevel.
    """
    for upper_bound, level in _LEVEL_UPPER_BOUNDS:
        if score <= upper_bound:
            return level
    return MaturityLevel.AI_LEADER


def benchmark_position(
    overall_score: float,
    industry_average: float = BENCHMARK_INDUSTRY_AVERAGE,
    top_quartile: float = BENCHMARK_TOP_QUARTILE,
) -> str:
    """Place an overall score relative to the logistics industry benchmark."""
    if overall_score >= top_quartile:
        return "Top Quartile"
    if overall_score >= industry_average:
        return "Above Average"
    return "Below Average"


class MaturityScorer:
    """Fallback maturity scorer and transformation-plan generator.

    Stateless: one instance can serve any number of concurrent callers.

    Category formulas (q = quoting hours, c = cost per quote,
    e = error rate %, s = client satisfaction %):
        dataInfrastructure     max(20, 80 - 2q)
        processDigitalization  max(15, 75 - 0.5c)
        teamReadiness          max(25, s - 10)
        technologyAdoption     max(20, 70 - 2e)
        businessAlignment      max(30, 80 - 1.5q)
        changeManagement       max(35, 85 - 0.3c)
    """

    CATEGORY_FLOORS: dict[CategoryName, float] = CATEGORY_FLOORS
    CATEGORY_CEILINGS: dict[CategoryName, float] = CATEGORY_CEILINGS

    def compute_category_scores(
        self,
        metrics: CompanyMetrics,
    ) -> dict[CategoryName, float]:
        """Compute the six category scores from the company metrics.

        Absent metrics take their documented defaults.

        Args:
            metrics: Company metrics, possibly with missing fields.

        Returns:
            Mapping of category to score, in canonical category order.
        """
        resolved = metrics.resolved()
        quoting_time = resolved.quoting_time_hours
        processing_cost = resolved.processing_cost_per_quote
        error_rate = resolved.error_rate_percent
        client_satisfaction = resolved.client_satisfaction_percent

        floors = self.CATEGORY_FLOORS
        return {
            CategoryName.DATA_INFRASTRUCTURE: max(
                floors[CategoryName.DATA_INFRASTRUCTURE], 80 - quoting_time * 2
            ),
            CategoryName.PROCESS_DIGITALIZATION: max(
                floors[CategoryName.PROCESS_DIGITALIZATION], 75 - processing_cost * 0.5
            ),
            CategoryName.TEAM_READINESS: max(
                floors[CategoryName.TEAM_READINESS], client_satisfaction - 10
            ),
            CategoryName.TECHNOLOGY_ADOPTION: max(
                floors[CategoryName.TECHNOLOGY_ADOPTION], 70 - error_rate * 2
            ),
            CategoryName.BUSINESS_ALIGNMENT: max(
                floors[CategoryName.BUSINESS_ALIGNMENT], 80 - quoting_time * 1.5
            ),
            CategoryName.CHANGE_MANAGEMENT: max(
                floors[CategoryName.CHANGE_MANAGEMENT], 85 - processing_cost * 0.3
            ),
        }

    def compute_overall_score(self, category_scores: dict[CategoryName, float]) -> int:
        """Return the rounded arithmetic mean of the category scores.

        Args:
            category_scores: Mapping of category to score; all six expected.

        Returns:
            Overall score as an integer.
        """
        total = sum(category_scores[category] for category in ALL_CATEGORIES)
        return round_half_up(total / len(ALL_CATEGORIES))

    def improvement_potential(self, category: CategoryName, score: float) -> float:
        """Return the category's fixed ceiling constant minus its score."""
        return self.CATEGORY_CEILINGS[category] - score

    def generate_milestones(self) -> list[Milestone]:
        """Generate the eight transformation milestones in ascending week order.

        Foundations: weeks 1, 4, 7, 10, labels chosen by brackets <=3, <=6, <=9,
        else. Acceleration: weeks 13, 19, 25, 31, brackets <=18, <=24, <=30,
        else. Brackets are tested against the raw week counter, so week 10
        lands in the final foundations bracket.

        Returns:
            List of Milestone objects.
        """
        milestones: list[Milestone] = []
        milestones.extend(
            _milestone_block(
                weeks=_FOUNDATION_WEEKS,
                brackets=_FOUNDATION_BRACKETS,
                labels=FOUNDATION_MILESTONE_LABELS,
                value_split=_FOUNDATION_VALUE_SPLIT,
                business_values=FOUNDATION_BUSINESS_VALUES,
                success_criteria=FOUNDATION_SUCCESS_CRITERIA,
            )
        )
        milestones.extend(
            _milestone_block(
                weeks=_ACCELERATION_WEEKS,
                brackets=_ACCELERATION_BRACKETS,
                labels=ACCELERATION_MILESTONE_LABELS,
                value_split=_ACCELERATION_VALUE_SPLIT,
                business_values=ACCELERATION_BUSINESS_VALUES,
                success_criteria=ACCELERATION_SUCCESS_CRITERIA,
            )
        )
        return milestones

    def build_assessment(
        self,
        category_scores: dict[CategoryName, float],
        overall_score: int,
        maturity_level: MaturityLevel,
    ) -> MaturityAssessment:
        """Assemble the full assessment from computed scores and static templates.

        Args:
            category_scores: The six category scores.
            overall_score: Rounded mean of the category scores.
            maturity_level: Level of the overall score.

        Returns:
            A fully populated MaturityAssessment.
        """
        categories: dict[CategoryName, CategoryScore] = {}
        for category in ALL_CATEGORIES:
            score = category_scores[category]
            profile = CATEGORY_PROFILES[category]
            categories[category] = CategoryScore(
                score=score,
                level=maturity_level_for(score),
                strengths=profile.strengths,
                weaknesses=profile.weaknesses,
                next_steps=profile.next_steps,
                benchmark_position=profile.benchmark_position,
                improvement_potential=self.improvement_potential(category, score),
            )

        transformation_path = TransformationPath(
            current_state=CURRENT_STATE_TEMPLATE.format(overall_score=overall_score),
            target_state=TARGET_STATE,
            phases=TRANSFORMATION_PHASES,
            milestones=tuple(self.generate_milestones()),
            success_metrics=SUCCESS_METRICS,
        )

        return MaturityAssessment(
            overall_score=overall_score,
            maturity_level=maturity_level,
            categories=categories,
            recommendations=RECOMMENDATION_PLAN,
            transformation_path=transformation_path,
            risk_factors=RISK_FACTORS,
            quick_wins=QUICK_WINS,
            investment_priorities=INVESTMENT_PRIORITIES,
        )

    def assess(self, metrics: CompanyMetrics | None = None) -> MaturityAssessment:
        """Run the full scoring pipeline for one company.

        Args:
            metrics: Company metrics; None behaves like all metrics absent.

        Returns:
            The complete deterministic MaturityAssessment.
        """
        metrics = metrics or CompanyMetrics()
        category_scores = self.compute_category_scores(metrics)
        overall_score = self.compute_overall_score(category_scores)
        maturity_level = maturity_level_for(overall_score)

        logger.info(
            "Assessment scoring complete",
            overall_score=overall_score,
            maturity_level=maturity_level.value,
            category_scores={
                category.value: score for category, score in category_scores.items()
            },
        )

        return self.build_assessment(category_scores, overall_score, maturity_level)


def _milestone_block(
    weeks: tuple[int, int, int],
    brackets: tuple[int, int, int],
    labels: tuple[tuple[str, str], ...],
    value_split: int,
    business_values: tuple[str, str],
    success_criteria: tuple[str, ...],
) -> list[Milestone]:
    """Walk one week counter and emit a milestone per step.

    Args:
        weeks: (first week, last week inclusive, step).
        brackets: Three inclusive upper bounds selecting labels[0..2];
            counters above the last bound select labels[3].
        labels: Four (achievement, ai_deployment) pairs.
        value_split: Counters up to this week get business_values[0],
            later ones business_values[1].
        business_values: The two business value strings.
        success_criteria: Criteria shared by every milestone of the block.

    Returns:
        Milestones in ascending week order.
    """
    first_week, last_week, step = weeks
    milestones: list[Milestone] = []

    week = first_week
    while week <= last_week:
        bracket_index = len(brackets)
        for index, upper_bound in enumerate(brackets):
            if week <= upper_bound:
                bracket_index = index
                break

        achievement, ai_deployment = labels[bracket_index]
        milestones.append(
            Milestone(
                week=week,
                achievement=achievement,
                ai_deployment=ai_deployment,
                business_value=(
                    business_values[0] if week <= value_split else business_values[1]
                ),
                success_criteria=success_criteria,
            )
        )
        week += step

    return milestones
