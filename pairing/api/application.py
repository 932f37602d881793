"""FastAPI application factory exposing the local identity record."""

from fastapi import FastAPI

from pairing.config import AppSettings
from pairing.domain import AppMetadata

from .routers import api_create_health_router, api_create_metadata_router


def create_api_application(settings: AppSettings, local_metadata: AppMetadata) -> FastAPI:
    """Create the FastAPI application instance for the service.

    Args:
        settings: Validated application settings used for runtime metadata.
        local_metadata: Identity record this application presents to peers.

    Returns:
        FastAPI: Framework application instance with health and metadata routes.

    Raises:
        ValueError: Raised when dependencies are invalid.
    """

    application = FastAPI(title=local_metadata.name)

    @application.get("/", tags=["foundation"])
    def foundation_index() -> dict[str, str]:
        """Return a minimal response for bootstrap verification."""

        return {
            "service": "pairing-metadata",
            "status": "ready",
            "environment": settings.environment_name,
        }

    application.include_router(api_create_health_router())
    application.include_router(api_create_metadata_router(local_metadata=local_metadata))

    return application
