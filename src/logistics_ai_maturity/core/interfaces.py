"""Abstract interfaces (Protocol classes) for the maturity assessment service.

The service depends on these interfaces, not on concrete implementations,
so that the generative enrichment source can be injected and tested in
isolation.
"""

from typing import Protocol, runtime_checkable

from logistics_ai_maturity.core.models import CompanyMetrics


@runtime_checkable
class IAssessmentEnricher(Protocol):
    """Source of a generated assessment (typically an LLM call).

    Implementations return the raw reply text. The service extracts the JSON
    object from it and merges it over the deterministic assessment; any
    exception raised here makes the service fall back to the deterministic
    result.
    """

    async def generate(self, metrics: CompanyMetrics, company_name: str) -> str:
        """Generate an assessment reply for the given company."""
        ...
