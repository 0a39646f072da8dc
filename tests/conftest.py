"""Test fixtures for logistics-ai-maturity.

Builds a fresh application per test from explicit settings so that rate
limiter state and enrichment configuration never leak between tests.
"""

from collections.abc import AsyncGenerator

import pytest
import pytest_asyncio
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

from logistics_ai_maturity.core.models import CompanyMetrics
from logistics_ai_maturity.core.scoring import MaturityScorer
from logistics_ai_maturity.main import create_app
from logistics_ai_maturity.settings import Settings


@pytest.fixture()
def scorer() -> MaturityScorer:
    """Provide a fresh MaturityScorer instance."""
    return MaturityScorer()


@pytest.fixture()
def default_metrics() -> CompanyMetrics:
    """Metrics equal to the documented defaults."""
    return CompanyMetrics(
        quoting_time_hours=12,
        processing_cost_per_quote=65,
        error_rate_percent=15,
        client_satisfaction_percent=70,
    )


@pytest.fixture()
def settings() -> Settings:
    """Settings with generous rate limits and enrichment disabled."""
    return Settings(
        log_json=False,
        enrichment_enabled=False,
        assess_rate_limit_per_minute=1000,
        demo_rate_limit_per_minute=1000,
    )


@pytest.fixture()
def app(settings: Settings) -> FastAPI:
    """Application built from the test settings."""
    return create_app(settings=settings)


@pytest_asyncio.fixture()
async def client(app: FastAPI) -> AsyncGenerator[AsyncClient, None]:
    """Async test client bound to the test application."""
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://testserver",
    ) as test_client:
        yield test_client
