"""Unit tests for generated-reply parsing and shape-checked merging."""

import json

import pytest

from logistics_ai_maturity.core.enrichment import extract_json_object, merge_enrichment
from logistics_ai_maturity.core.models import CompanyMetrics
from logistics_ai_maturity.core.scoring import MaturityScorer


@pytest.fixture()
def fallback(scorer: MaturityScorer) -> dict:
    return scorer.assess(CompanyMetrics()).to_dict()


class TestExtractJsonObject:
    """Tests for extract_json_object."""

    def test_plain_json(self) -> None:
        assert extract_json_object('{"overallScore": 60}') == {"overallScore": 60}

    def test_fenced_json_block(self) -> None:
        text = 'Here is the assessment:\n```json\n{"overallScore": 61}\n```\nThanks.'
        assert extract_json_object(text) == {"overallScore": 61}

    def test_fenced_block_without_language(self) -> None:
        text = '```\n{"maturityLevel": "Expert"}\n```'
        assert extract_json_object(text) == {"maturityLevel": "Expert"}

    def test_json_surrounded_by_prose(self) -> None:
        text = 'Sure! {"overallScore": 70, "nested": {"a": 1}} Hope this helps.'
        assert extract_json_object(text) == {"overallScore": 70, "nested": {"a": 1}}

    @pytest.mark.parametrize(
        "text",
        [
            None,
            "",
            "no json here",
            "{not valid json}",
            "[1, 2, 3]",
            '"just a string"',
        ],
    )
    def test_unusable_replies_return_none(self, text: str | None) -> None:
        assert extract_json_object(text) is None


class TestMergeEnrichment:
    """Tests for merge_enrichment."""

    def test_accepts_matching_scalars(self, fallback: dict) -> None:
        merged, accepted = merge_enrichment(
            fallback, {"overallScore": 77, "maturityLevel": "Expert"}
        )
        assert accepted == ["overallScore", "maturityLevel"]
        assert merged["overallScore"] == 77
        assert merged["maturityLevel"] == "Expert"
        assert merged["categories"] == fallback["categories"]

    def test_fallback_not_mutated(self, fallback: dict) -> None:
        original = json.loads(json.dumps(fallback))
        merge_enrichment(fallback, {"overallScore": 77})
        assert fallback == original

    def test_unknown_keys_ignored(self, fallback: dict) -> None:
        merged, accepted = merge_enrichment(fallback, {"extraSection": {"x": 1}})
        assert accepted == []
        assert "extraSection" not in merged
        assert merged == fallback

    def test_rejects_float_overall_score(self, fallback: dict) -> None:
        merged, accepted = merge_enrichment(fallback, {"overallScore": 77.5})
        assert accepted == []
        assert merged["overallScore"] == fallback["overallScore"]

    def test_rejects_bool_as_number(self, fallback: dict) -> None:
        _, accepted = merge_enrichment(fallback, {"overallScore": True})
        assert accepted == []

    def test_rejects_unknown_maturity_level(self, fallback: dict) -> None:
        _, accepted = merge_enrichment(fallback, {"maturityLevel": "Guru"})
        assert accepted == []

    def test_accepts_int_category_scores(self, fallback: dict) -> None:
        """Float fields accept integer values."""
        categories = json.loads(json.dumps(fallback["categories"]))
        categories["dataInfrastructure"]["score"] = 60
        categories["dataInfrastructure"]["improvementPotential"] = 25
        merged, accepted = merge_enrichment(fallback, {"categories": categories})
        assert accepted == ["categories"]
        assert merged["categories"]["dataInfrastructure"]["score"] == 60

    def test_rejects_categories_missing_a_category(self, fallback: dict) -> None:
        categories = json.loads(json.dumps(fallback["categories"]))
        del categories["changeManagement"]
        _, accepted = merge_enrichment(fallback, {"categories": categories})
        assert accepted == []

    def test_rejects_category_with_bad_level(self, fallback: dict) -> None:
        categories = json.loads(json.dumps(fallback["categories"]))
        categories["teamReadiness"]["level"] = "Unknown"
        _, accepted = merge_enrichment(fallback, {"categories": categories})
        assert accepted == []

    def test_list_items_must_match_template_item(self, fallback: dict) -> None:
        wins = json.loads(json.dumps(fallback["quickWins"]))
        wins[0]["expectedROI"] = 400
        merged, accepted = merge_enrichment(fallback, {"quickWins": wins})
        assert accepted == ["quickWins"]
        assert merged["quickWins"][0]["expectedROI"] == 400

        wins[2]["expectedROI"] = "high"
        _, accepted = merge_enrichment(fallback, {"quickWins": wins})
        assert accepted == []

    def test_rejects_unknown_rating(self, fallback: dict) -> None:
        risks = json.loads(json.dumps(fallback["riskFactors"]))
        risks[0]["probability"] = "Critical"
        _, accepted = merge_enrichment(fallback, {"riskFactors": risks})
        assert accepted == []

        risks[0]["probability"] = "Low"
        _, accepted = merge_enrichment(fallback, {"riskFactors": risks})
        assert accepted == ["riskFactors"]

    def test_list_of_strings_must_be_strings(self, fallback: dict) -> None:
        recommendations = json.loads(json.dumps(fallback["recommendations"]))
        recommendations["aiImplementationOrder"][1] = 2
        _, accepted = merge_enrichment(fallback, {"recommendations": recommendations})
        assert accepted == []

    @pytest.mark.parametrize("section", ["riskFactors", "quickWins", "investmentPriorities"])
    def test_rejects_empty_fixed_size_list(self, fallback: dict, section: str) -> None:
        merged, accepted = merge_enrichment(fallback, {section: []})
        assert accepted == []
        assert merged[section] == fallback[section]

    def test_rejects_list_with_extra_item(self, fallback: dict) -> None:
        wins = fallback["quickWins"] + [fallback["quickWins"][0]]
        _, accepted = merge_enrichment(fallback, {"quickWins": wins})
        assert accepted == []

    def test_rejects_empty_milestones(self, fallback: dict) -> None:
        path = json.loads(json.dumps(fallback["transformationPath"]))
        path["milestones"] = []
        _, accepted = merge_enrichment(fallback, {"transformationPath": path})
        assert accepted == []

    def test_rejects_short_category_strengths(self, fallback: dict) -> None:
        categories = json.loads(json.dumps(fallback["categories"]))
        categories["teamReadiness"]["strengths"] = ["Only one"]
        _, accepted = merge_enrichment(fallback, {"categories": categories})
        assert accepted == []

    @pytest.mark.parametrize("bad_score", ["NaN", "Infinity", "-Infinity"])
    def test_rejects_non_finite_scores(self, fallback: dict, bad_score: str) -> None:
        """json.loads accepts NaN and Infinity literals; they are not valid scores."""
        categories = json.dumps(fallback["categories"]).replace(
            '"score": 56.0', f'"score": {bad_score}', 1
        )
        parsed = extract_json_object('{"categories": ' + categories + "}")
        assert parsed is not None

        merged, accepted = merge_enrichment(fallback, parsed)
        assert accepted == []
        assert merged["categories"] == fallback["categories"]

    @pytest.mark.parametrize("bad_value", [float("nan"), float("inf"), float("-inf")])
    def test_rejects_non_finite_improvement_potential(
        self, fallback: dict, bad_value: float
    ) -> None:
        categories = json.loads(json.dumps(fallback["categories"]))
        categories["changeManagement"]["improvementPotential"] = bad_value
        _, accepted = merge_enrichment(fallback, {"categories": categories})
        assert accepted == []

    def test_mixed_reply_keeps_valid_sections(self, fallback: dict) -> None:
        merged, accepted = merge_enrichment(
            fallback,
            {"overallScore": 66, "riskFactors": "none", "maturityLevel": "AILeader"},
        )
        assert accepted == ["overallScore", "maturityLevel"]
        assert merged["riskFactors"] == fallback["riskFactors"]
