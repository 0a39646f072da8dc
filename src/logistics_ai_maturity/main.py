"""Logistics AI maturity service entry point."""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from logistics_ai_maturity.api.router import router
from logistics_ai_maturity.api.routes.assessment import build_rate_limiters
from logistics_ai_maturity.core.interfaces import IAssessmentEnricher
from logistics_ai_maturity.core.scoring import MaturityScorer
from logistics_ai_maturity.observability import configure_logging, get_logger
from logistics_ai_maturity.settings import Settings

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Manage application startup and shutdown lifecycle.

    Args:
        app: The FastAPI application instance.

    Yields:
        None
    """
    settings: Settings = app.state.settings
    configure_logging(level=settings.log_level, json_logs=settings.log_json)
    logger.info(
        "Service starting",
        service_name=settings.service_name,
        version=settings.version,
        enrichment_enabled=settings.enrichment_enabled,
        enricher_configured=app.state.enricher is not None,
    )
    yield
    logger.info("Service stopped", service_name=settings.service_name)


def create_app(
    settings: Settings | None = None,
    enricher: IAssessmentEnricher | None = None,
) -> FastAPI:
    """Build the FastAPI application.

    Args:
        settings: Service settings; loaded from the environment when None.
        enricher: Optional generated-assessment source, used when
            ``settings.enrichment_enabled`` is True.

    Returns:
        The configured FastAPI application.
    """
    settings = settings or Settings()

    application = FastAPI(
        title=settings.service_name,
        version=settings.version,
        lifespan=lifespan,
    )
    application.state.settings = settings
    application.state.scorer = MaturityScorer()
    application.state.enricher = enricher
    application.state.rate_limiters = build_rate_limiters(settings)

    application.include_router(router, prefix="/api/v1")
    return application


app: FastAPI = create_app()
