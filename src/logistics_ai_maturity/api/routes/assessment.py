"""FastAPI routes for the AI maturity assessment.

All routes are thin: they parse inputs, build dependencies, delegate to
MaturityAssessmentService, and serialise responses. No business logic lives
here.

API prefix: /api/v1/ai-maturity
"""

import time
from datetime import datetime, timezone
from typing import Callable

from fastapi import APIRouter, Depends, HTTPException, Request, status

from logistics_ai_maturity.api.schemas.assessment import (
    AssessmentDataSchema,
    AssessmentEnvelope,
    AssessRequest,
    DemoAssessmentDataSchema,
    DemoAssessmentEnvelope,
    DemoAssessRequest,
    LevelBandSchema,
    MilestoneSchema,
)
from logistics_ai_maturity.core.services.assessment_service import (
    MaturityAssessmentService,
)
from logistics_ai_maturity.observability import get_logger
from logistics_ai_maturity.settings import Settings

logger = get_logger(__name__)

router = APIRouter(prefix="/ai-maturity", tags=["AI Maturity Assessment"])


# ---------------------------------------------------------------------------
# In-memory token bucket rate limiter
# ---------------------------------------------------------------------------


class TokenBucket:
    """Per-key token bucket for rate limiting.

    Each key (IP address) gets a refilling bucket of tokens. A request
    consumes one token; when the bucket is empty the request is rejected.
    Tokens refill continuously at ``rate_per_minute / 60`` tokens per second.

    Buckets live in process memory, so limits apply per worker process. A key
    idle for ``burst / rate`` seconds is back at full capacity, so its entry
    is dropped; a sweep runs at most once per that interval.

    Args:
        rate_per_minute: Maximum number of requests allowed per minute per key.
        burst: Maximum bucket capacity. Defaults to ``rate_per_minute``.
        clock: Monotonic time source in seconds.
    """

    def __init__(
        self,
        rate_per_minute: int,
        burst: int | None = None,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self._rate_per_second: float = rate_per_minute / 60.0
        self._burst: float = float(burst if burst is not None else rate_per_minute)
        self._clock = clock
        self._idle_seconds: float = self._burst / self._rate_per_second
        self._last_sweep: float = clock()
        # key -> (tokens, last_refill_timestamp)
        self._buckets: dict[str, tuple[float, float]] = {}

    def __len__(self) -> int:
        return len(self._buckets)

    def allow(self, key: str) -> bool:
        """Attempt to consume one token for the given key.

        Args:
            key: Rate limit key (typically a client IP address).

        Returns:
            True if the request is allowed; False if the rate limit is exceeded.
        """
        now = self._clock()
        self._sweep(now)

        tokens, last_refill = self._buckets.get(key, (self._burst, now))
        elapsed = now - last_refill
        tokens = min(self._burst, tokens + elapsed * self._rate_per_second)

        if tokens < 1.0:
            self._buckets[key] = (tokens, now)
            return False

        self._buckets[key] = (tokens - 1.0, now)
        return True

    def _sweep(self, now: float) -> None:
        """Drop buckets that have refilled completely since their last use."""
        if now - self._last_sweep < self._idle_seconds:
            return
        self._last_sweep = now
        idle_keys = [
            key
            for key, (_, last_refill) in self._buckets.items()
            if now - last_refill >= self._idle_seconds
        ]
        for key in idle_keys:
            del self._buckets[key]
        if idle_keys:
            logger.debug("Rate limit buckets pruned", pruned=len(idle_keys))


def build_rate_limiters(settings: Settings) -> dict[str, TokenBucket]:
    """Create one token bucket per rate-limited endpoint from settings."""
    return {
        "assess": TokenBucket(rate_per_minute=settings.assess_rate_limit_per_minute),
        "demo": TokenBucket(rate_per_minute=settings.demo_rate_limit_per_minute),
    }


def _make_rate_limit_dependency(bucket_name: str) -> Callable[[Request], None]:
    """Return a FastAPI dependency that enforces the named token bucket.

    Args:
        bucket_name: Key of the bucket in ``app.state.rate_limiters``.

    Returns:
        A synchronous dependency callable that raises HTTP 429 when the
        rate limit for the requesting IP is exceeded.
    """

    def _check_rate_limit(request: Request) -> None:
        bucket: TokenBucket = request.app.state.rate_limiters[bucket_name]
        client_ip: str = (request.client.host if request.client else "") or "unknown"
        if not bucket.allow(client_ip):
            logger.warning(
                "Rate limit exceeded",
                bucket=bucket_name,
                client_ip=client_ip,
            )
            raise HTTPException(
                status_code=status.HTTP_429_TOO_MANY_REQUESTS,
                detail="Rate limit exceeded. Please slow down and try again.",
            )

    return _check_rate_limit


# ---------------------------------------------------------------------------
# Dependency factory
# ---------------------------------------------------------------------------


def get_assessment_service(request: Request) -> MaturityAssessmentService:
    """Build MaturityAssessmentService from the application state.

    The scorer and enricher come from ``app.state``; the enricher is used only when
    enrichment is enabled in settings.

    Args:
        request: Incoming request, used to reach the application state.

    Returns:
        Configured MaturityAssessmentService instance.
    """
    settings: Settings = request.app.state.settings
    enricher = request.app.state.enricher if settings.enrichment_enabled else None
    return MaturityAssessmentService(
        scorer=request.app.state.scorer,
        enricher=enricher,
        enrichment_timeout_seconds=settings.enrichment_timeout_seconds,
        industry_average=settings.benchmark_industry_average,
        top_quartile=settings.benchmark_top_quartile,
    )


def _to_envelope(
    result: dict[str, object],
    message: str,
    started_at: float,
    data_schema: type[AssessmentDataSchema] = AssessmentDataSchema,
    envelope_schema: type[AssessmentEnvelope] = AssessmentEnvelope,
) -> AssessmentEnvelope:
    """Wrap a service result (snake_case keys) in the response envelope."""
    data = data_schema.model_validate(result)
    elapsed_ms = round((time.perf_counter() - started_at) * 1000)
    return envelope_schema(
        success=True,
        message=message,
        data=data,
        timestamp=datetime.now(tz=timezone.utc),
        processing_time=f"{elapsed_ms}ms",
    )


# ---------------------------------------------------------------------------
# Endpoints
# ---------------------------------------------------------------------------


@router.post(
    "/assess",
    response_model=AssessmentEnvelope,
    status_code=status.HTTP_200_OK,
    summary="Run a full AI maturity assessment",
    dependencies=[Depends(_make_rate_limit_dependency("assess"))],
)
async def assess(
    body: AssessRequest,
    service: MaturityAssessmentService = Depends(get_assessment_service),
) -> AssessmentEnvelope:
    """Score a company's AI maturity from its operational metrics.

    Returns the overall score and maturity level, six category diagnostics,
    recommendations, a phased transformation path with milestones, risk
    factors, quick wins, investment priorities, and industry benchmark
    positioning. Missing metrics take their documented defaults.
    """
    started_at = time.perf_counter()
    result = await service.assess(body.to_metrics(), company_name=body.company_name)
    return _to_envelope(
        result,
        message="AI maturity assessment completed successfully",
        started_at=started_at,
    )


@router.post(
    "/demo",
    response_model=DemoAssessmentEnvelope,
    status_code=status.HTTP_200_OK,
    summary="Run a demo AI maturity assessment",
    dependencies=[Depends(_make_rate_limit_dependency("demo"))],
)
async def assess_demo(
    request: Request,
    body: DemoAssessRequest | None = None,
    service: MaturityAssessmentService = Depends(get_assessment_service),
) -> DemoAssessmentEnvelope:
    """Demo assessment: every field optional, company name defaulted.

    The response adds a demo note, key insights and suggested next steps.
    """
    started_at = time.perf_counter()
    body = body or DemoAssessRequest()
    settings: Settings = request.app.state.settings
    company_name = body.company_name or settings.demo_company_name

    result = await service.assess_demo(body.to_metrics(), company_name=company_name)
    return _to_envelope(
        result,
        message="Demo AI maturity assessment completed successfully",
        started_at=started_at,
        data_schema=DemoAssessmentDataSchema,
        envelope_schema=DemoAssessmentEnvelope,
    )


@router.get(
    "/milestones",
    response_model=list[MilestoneSchema],
    status_code=status.HTTP_200_OK,
    summary="List the generated transformation milestones",
)
async def list_milestones(
    service: MaturityAssessmentService = Depends(get_assessment_service),
) -> list[MilestoneSchema]:
    """Return the eight transformation milestones in ascending week order."""
    return [MilestoneSchema.model_validate(item) for item in service.milestones()]


@router.get(
    "/levels",
    response_model=list[LevelBandSchema],
    status_code=status.HTTP_200_OK,
    summary="List the maturity level bands",
)
async def list_levels(
    service: MaturityAssessmentService = Depends(get_assessment_service),
) -> list[LevelBandSchema]:
    """Return the five maturity level bands with inclusive score bounds."""
    return [LevelBandSchema.model_validate(band) for band in service.level_bands()]
