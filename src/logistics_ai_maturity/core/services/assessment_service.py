"""Service layer orchestrating the AI maturity assessment workflow.

Implements the assessment flow used by the HTTP routes:
    1. assess()            deterministic scoring, optional generated
                            enrichment, benchmark positioning
    2. assess_demo()       assess() plus demo note, key insights, next steps
    3. milestones()        the generated transformation timeline
    4. level_bands()       the maturity level thresholds

The deterministic scorer is the guaranteed backstop: whatever happens in the
enrichment step (exception, timeout, unparseable or mis-shaped reply), the
caller receives a complete assessment. No FastAPI imports belong here; those
live in the routes layer.
"""

import asyncio
from datetime import datetime, timezone
from typing import Any

from logistics_ai_maturity.core.enrichment import extract_json_object, merge_enrichment
from logistics_ai_maturity.core.interfaces import IAssessmentEnricher
from logistics_ai_maturity.core.models import CompanyMetrics, MaturityLevel
from logistics_ai_maturity.core.scoring import MaturityScorer, benchmark_position
from logistics_ai_maturity.core.templates import (
    DEMO_DEFAULT_QUICK_WIN_ROI,
    DEMO_NEXT_STEPS,
    DEMO_NOTE,
    DEMO_TRANSFORMATION_MONTHS,
)
from logistics_ai_maturity.observability import get_logger

logger = get_logger(__name__)

SOURCE_FALLBACK = "fallback"
SOURCE_ENRICHED = "enriched"

_LEVEL_BANDS: list[tuple[MaturityLevel, int, int | None]] = [
    (MaturityLevel.BEGINNER, 0, 20),
    (MaturityLevel.INTERMEDIATE, 21, 40),
    (MaturityLevel.ADVANCED, 41, 60),
    (MaturityLevel.EXPERT, 61, 80),
    (MaturityLevel.AI_LEADER, 81, None),
]


class MaturityAssessmentService:
    """Orchestrates scoring, optional enrichment and benchmark positioning.

    Depends on a scorer and an optional enricher injected at construction
    time. Contains no framework-specific code.
    """

    def __init__(
        self,
        scorer: MaturityScorer,
        enricher: IAssessmentEnricher | None = None,
        enrichment_timeout_seconds: float = 30.0,
        industry_average: int = 45,
        top_quartile: int = 72,
    ) -> None:
        """Initialise the service.

        Args:
            scorer: Deterministic scorer producing the fallback assessment.
            enricher: Optional generated-assessment source. When None the
                deterministic assessment is always returned.
            enrichment_timeout_seconds: Upper bound on the enricher call.
            industry_average: Benchmark industry average overall score.
            top_quartile: Benchmark top-quartile overall score.
        """
        self._scorer = scorer
        self._enricher = enricher
        self._enrichment_timeout_seconds = enrichment_timeout_seconds
        self._industry_average = industry_average
        self._top_quartile = top_quartile

    async def assess(
        self,
        metrics: CompanyMetrics,
        company_name: str,
    ) -> dict[str, object]:
        """Produce the assessment for one company.

        Args:
            metrics: Company metrics; absent fields take their defaults.
            company_name: Name of the assessed company.

        Returns:
            Dict with assessment (camelCase payload), source, company_name,
            assessment_date, and benchmark_data.
        """
        fallback = self._scorer.assess(metrics).to_dict()
        assessment, source = await self._enrich(fallback, metrics, company_name)

        overall_score = assessment["overallScore"]
        benchmark_data = {
            "industryAverage": self._industry_average,
            "topQuartile": self._top_quartile,
            "yourPosition": benchmark_position(
                overall_score,
                industry_average=self._industry_average,
                top_quartile=self._top_quartile,
            ),
        }

        logger.info(
            "Assessment completed",
            company_name=company_name,
            overall_score=overall_score,
            maturity_level=assessment["maturityLevel"],
            source=source,
            benchmark_position=benchmark_data["yourPosition"],
        )

        return {
            "assessment": assessment,
            "source": source,
            "company_name": company_name,
            "assessment_date": datetime.now(tz=timezone.utc),
            "benchmark_data": benchmark_data,
        }

    async def assess_demo(
        self,
        metrics: CompanyMetrics,
        company_name: str,
    ) -> dict[str, object]:
        """Produce a demo assessment: the regular result plus demo copy.

        Key insights are built from the final assessment, so they follow any
        enriched sections.

        Args:
            metrics: Company metrics; absent fields take their defaults.
            company_name: Name of the assessed company.

        Returns:
            The ``assess()`` dict extended with is_demo, note, key_insights
            and next_steps.
        """
        result = await self.assess(metrics, company_name=company_name)
        result.update(
            {
                "is_demo": True,
                "note": DEMO_NOTE,
                "key_insights": key_insights(result["assessment"]),
                "next_steps": list(DEMO_NEXT_STEPS),
            }
        )
        return result

    def milestones(self) -> list[dict[str, Any]]:
        """Return the generated transformation milestones as camelCase dicts."""
        return [milestone.to_dict() for milestone in self._scorer.generate_milestones()]

    def level_bands(self) -> list[dict[str, object]]:
        """Return the maturity level bands (inclusive bounds, open top)."""
        return [
            {"level": level.value, "min_score": min_score, "max_score": max_score}
            for level, min_score, max_score in _LEVEL_BANDS
        ]

    async def _enrich(
        self,
        fallback: dict[str, Any],
        metrics: CompanyMetrics,
        company_name: str,
    ) -> tuple[dict[str, Any], str]:
        """Try the enricher and merge its reply, falling back on any failure.

        Args:
            fallback: Deterministic assessment payload.
            metrics: Company metrics passed to the enricher.
            company_name: Company name passed to the enricher.

        Returns:
            Tuple of (assessment payload, source label).
        """
        if self._enricher is None:
            return fallback, SOURCE_FALLBACK

        logger.debug(
            "Requesting assessment enrichment",
            company_name=company_name,
            metrics=metrics.to_dict(),
        )
        try:
            reply = await asyncio.wait_for(
                self._enricher.generate(metrics, company_name),
                timeout=self._enrichment_timeout_seconds,
            )
        except asyncio.TimeoutError:
            logger.warning(
                "Assessment enrichment timed out, using fallback",
                company_name=company_name,
                timeout_seconds=self._enrichment_timeout_seconds,
            )
            return fallback, SOURCE_FALLBACK
        except Exception:
            # Any enricher failure yields the deterministic result.
            logger.warning(
                "Assessment enrichment failed, using fallback",
                company_name=company_name,
                exc_info=True,
            )
            return fallback, SOURCE_FALLBACK

        parsed = extract_json_object(reply)
        if parsed is None:
            logger.warning(
                "Assessment enrichment reply had no JSON object, using fallback",
                company_name=company_name,
            )
            return fallback, SOURCE_FALLBACK

        merged, accepted = merge_enrichment(fallback, parsed)
        if not accepted:
            return fallback, SOURCE_FALLBACK

        logger.debug(
            "Assessment enriched",
            company_name=company_name,
            enriched_sections=accepted,
        )
        return merged, SOURCE_ENRICHED


def key_insights(assessment: dict[str, Any]) -> list[str]:
    """Summarise an assessment payload in five short lines for the demo."""
    quick_wins = assessment["quickWins"]
    first_roi = (
        quick_wins[0]["expectedROI"] if quick_wins else DEMO_DEFAULT_QUICK_WIN_ROI
    )
    phase_count = len(assessment["transformationPath"]["phases"])
    return [
        f"Your AI maturity score: {assessment['overallScore']}/100",
        f"Level: {assessment['maturityLevel']}",
        f"{len(quick_wins)} quick-win opportunities identified",
        f"Potential ROI: {first_roi}% on the first projects",
        f"Transformation path: {phase_count} phases over "
        f"{DEMO_TRANSFORMATION_MONTHS} months",
    ]
