"""Tests for the static assessment tables and the camelCase serialisation."""

import pytest

from logistics_ai_maturity.core.models import (
    ALL_CATEGORIES,
    CompanyMetrics,
    MaturityLevel,
)
from logistics_ai_maturity.core.scoring import MaturityScorer
from logistics_ai_maturity.core.templates import (
    CATEGORY_CEILINGS,
    CATEGORY_PROFILES,
    INVESTMENT_PRIORITIES,
    QUICK_WINS,
    RECOMMENDATION_PLAN,
    RISK_FACTORS,
    SUCCESS_METRICS,
    TRANSFORMATION_PHASES,
)

_RATINGS = {"Low", "Medium", "High"}


class TestStaticTables:
    """Shape checks on the fixed copy tables."""

    def test_every_category_has_profile_and_ceiling(self) -> None:
        assert list(CATEGORY_PROFILES) == ALL_CATEGORIES
        assert list(CATEGORY_CEILINGS) == ALL_CATEGORIES

    @pytest.mark.parametrize("category", ALL_CATEGORIES)
    def test_profile_has_three_items_per_list(self, category) -> None:
        profile = CATEGORY_PROFILES[category]
        assert len(profile.strengths) == 3
        assert len(profile.weaknesses) == 3
        assert len(profile.next_steps) == 3
        assert profile.benchmark_position

    def test_recommendation_plan_sizes(self) -> None:
        assert len(RECOMMENDATION_PLAN.immediate) == 2
        assert len(RECOMMENDATION_PLAN.short_term) == 2
        assert len(RECOMMENDATION_PLAN.long_term) == 1
        assert len(RECOMMENDATION_PLAN.ai_implementation_order) == 5
        assert len(RECOMMENDATION_PLAN.skill_development) == 2

    def test_action_item_ratings_are_valid(self) -> None:
        items = (
            RECOMMENDATION_PLAN.immediate
            + RECOMMENDATION_PLAN.short_term
            + RECOMMENDATION_PLAN.long_term
        )
        for item in items:
            assert {item.priority, item.effort, item.impact} <= _RATINGS

    def test_skill_gaps_progress_upwards(self) -> None:
        for gap in RECOMMENDATION_PLAN.skill_development:
            assert 0 <= gap.current_level < gap.target_level <= 10

    def test_three_phases(self) -> None:
        assert [phase.name for phase in TRANSFORMATION_PHASES] == [
            "AI Foundations",
            "AI Acceleration",
            "AI Excellence",
        ]
        assert [phase.duration for phase in TRANSFORMATION_PHASES] == [
            "3 months",
            "6 months",
            "9 months",
        ]

    def test_fixed_list_sizes(self) -> None:
        assert len(SUCCESS_METRICS) == 5
        assert len(RISK_FACTORS) == 3
        assert len(QUICK_WINS) == 3
        assert len(INVESTMENT_PRIORITIES) == 3

    def test_quick_win_returns(self) -> None:
        assert [win.expected_roi for win in QUICK_WINS] == [250, 180, 320]

    def test_risk_ratings_are_valid(self) -> None:
        for risk in RISK_FACTORS:
            assert {risk.probability, risk.impact} <= _RATINGS


class TestAssessmentSerialisation:
    """Tests for MaturityAssessment.to_dict key naming."""

    @pytest.fixture()
    def payload(self, scorer: MaturityScorer) -> dict:
        return scorer.assess(CompanyMetrics()).to_dict()

    def test_top_level_keys(self, payload: dict) -> None:
        assert list(payload) == [
            "overallScore",
            "maturityLevel",
            "categories",
            "recommendations",
            "transformationPath",
            "riskFactors",
            "quickWins",
            "investmentPriorities",
        ]

    def test_category_keys_are_camel_case(self, payload: dict) -> None:
        assert list(payload["categories"]) == [
            "dataInfrastructure",
            "processDigitalization",
            "teamReadiness",
            "technologyAdoption",
            "businessAlignment",
            "changeManagement",
        ]

    def test_category_entry_keys(self, payload: dict) -> None:
        entry = payload["categories"]["dataInfrastructure"]
        assert set(entry) == {
            "score",
            "level",
            "strengths",
            "weaknesses",
            "nextSteps",
            "benchmarkPosition",
            "improvementPotential",
        }
        assert entry["score"] == 56.0
        assert entry["level"] == MaturityLevel.ADVANCED.value

    def test_quick_win_uses_expected_roi_key(self, payload: dict) -> None:
        quick_win = payload["quickWins"][0]
        assert quick_win["expectedROI"] == 250
        assert quick_win["opportunity"] == "Automated quoting with Claude Sonnet-4"

    def test_recommendation_keys(self, payload: dict) -> None:
        recommendations = payload["recommendations"]
        assert set(recommendations) == {
            "immediate",
            "shortTerm",
            "longTerm",
            "aiImplementationOrder",
            "skillDevelopment",
        }
        assert recommendations["immediate"][0]["action"] == "Detailed AI maturity audit"
        assert recommendations["skillDevelopment"][0] == {
            "skill": "AI fundamentals",
            "currentLevel": 2,
            "targetLevel": 7,
            "trainingPath": ["Business AI training", "Hands-on workshops", "Mentoring"],
            "aiTools": ["AI training assistant", "AI simulators"],
        }

    def test_transformation_path_keys(self, payload: dict) -> None:
        path = payload["transformationPath"]
        assert set(path) == {
            "currentState",
            "targetState",
            "phases",
            "milestones",
            "successMetrics",
        }
        assert len(path["milestones"]) == 8
        assert set(path["phases"][0]) == {
            "name",
            "duration",
            "objectives",
            "aiCapabilities",
            "prerequisites",
            "deliverables",
        }

    def test_serialised_payload_uses_only_json_types(self, payload: dict) -> None:
        """Tuples and enums are converted to lists and strings."""

        def walk(node: object) -> None:
            assert not isinstance(node, tuple)
            if isinstance(node, dict):
                for key, value in node.items():
                    assert type(key) is str
                    walk(value)
            elif isinstance(node, list):
                for item in node:
                    walk(item)
            else:
                assert type(node) in (str, int, float)

        walk(payload)
