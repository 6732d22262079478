"""
Health check router.

Provides a simple health endpoint for liveness/readiness probes.
Does not call the upstream. Returns application status and version.
"""

from fastapi import APIRouter, Request

from problem_proxy.interfaces.problems.schemas import HealthResponse

router = APIRouter(tags=["health"])


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Health check",
    description="Returns application health status and version.",
)
def health_check(request: Request) -> HealthResponse:
    """Return current application health status."""
    return HealthResponse(status="ok", version=request.app.state.settings.version)
