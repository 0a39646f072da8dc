"""Service settings loaded from the environment.

All settings use the LOGISTICS_MATURITY_ env prefix, e.g.
``LOGISTICS_MATURITY_LOG_LEVEL=DEBUG``.
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from logistics_ai_maturity import __version__


class Settings(BaseSettings):
    """Settings for the logistics AI maturity service.

    Environment variable prefix: LOGISTICS_MATURITY_
    """

    service_name: str = "logistics-ai-maturity"
    version: str = __version__

    # Logging
    log_level: str = "INFO"
    log_json: bool = True

    # Generated enrichment (falls back to the deterministic assessment)
    enrichment_enabled: bool = False
    enrichment_timeout_seconds: float = 30.0

    # Rate limits per client IP
    assess_rate_limit_per_minute: int = Field(default=30, gt=0)
    demo_rate_limit_per_minute: int = Field(default=10, gt=0)

    # Industry benchmark attached to every assessment
    benchmark_industry_average: int = 45
    benchmark_top_quartile: int = 72

    # Company used by the demo endpoint when none is given
    demo_company_name: str = "LogiTech Traditional"

    model_config = SettingsConfigDict(env_prefix="LOGISTICS_MATURITY_")
