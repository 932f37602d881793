"""Health endpoint router composition."""

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse


def api_create_health_router() -> APIRouter:
    """Create health-check router.

    Returns:
        APIRouter: Router exposing `/health` endpoint.
    """

    router = APIRouter(tags=["health"])

    @router.get("/health")
    def api_health_status() -> JSONResponse:
        """Return application health state.

        Returns:
            JSONResponse: Deterministic health payload for operational checks.
        """

        return JSONResponse(content={"status": "ok", "app": "up"}, status_code=status.HTTP_200_OK)

    return router
