"""Top-level API router for the logistics AI maturity service.

API prefix: /api/v1
"""

from fastapi import APIRouter, Request

from logistics_ai_maturity.api.routes.assessment import router as assessment_router

router = APIRouter()
router.include_router(assessment_router)


@router.get("/health", tags=["Health"], summary="Liveness probe")
async def health(request: Request) -> dict[str, str]:
    """Report service liveness with its name and version."""
    settings = request.app.state.settings
    return {
        "status": "ok",
        "service": settings.service_name,
        "version": settings.version,
    }
