"""Metadata API router composition for identity disclosure and peer record validation."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Query, Request, status
from fastapi.responses import JSONResponse

from pairing.domain import (
    AppMetadata,
    InvalidLinkModeUniversalLinkError,
    MalformedRecordError,
    domain_app_metadata_from_json,
)

logger = logging.getLogger(__name__)


def api_create_metadata_router(local_metadata: AppMetadata) -> APIRouter:
    """Create metadata router with local record and validation endpoints.

    Args:
        local_metadata: Identity record this application presents to peers.

    Returns:
        APIRouter: Router exposing metadata APIs.

    Raises:
        ValueError: Raised when dependencies are invalid.
    """

    if local_metadata is None:
        raise ValueError("local_metadata must not be None")

    router = APIRouter(prefix="/metadata", tags=["metadata"])

    @router.get("")
    def api_metadata_local(include_none: bool = Query(default=False)) -> JSONResponse:
        """Return the local identity record in wire form.

        Returns:
            JSONResponse: Encoded local metadata.
        """

        return JSONResponse(content=local_metadata.encode(include_none=include_none), status_code=status.HTTP_200_OK)

    @router.post("/validate")
    async def api_metadata_validate(
        request: Request,
        include_none: bool = Query(default=False),
    ) -> JSONResponse:
        """Validate a peer metadata record and return its normalized wire form.

        Returns:
            JSONResponse: Validation result payload.
        """

        body = await request.body()
        try:
            metadata = domain_app_metadata_from_json(body)
        except InvalidLinkModeUniversalLinkError as error:
            logger.info("Rejected peer metadata: %s", error)
            payload = {
                "status": "error",
                "error": "invalid_link_mode_universal_link",
                "message": str(error),
                "field": "redirect.universal",
            }
            return JSONResponse(content=payload, status_code=status.HTTP_422_UNPROCESSABLE_ENTITY)
        except MalformedRecordError as error:
            logger.info("Rejected peer metadata: %s", error)
            payload = {
                "status": "error",
                "error": "malformed_record",
                "message": str(error),
                "field": error.field_name,
            }
            return JSONResponse(content=payload, status_code=status.HTTP_422_UNPROCESSABLE_ENTITY)

        payload = {
            "status": "valid",
            "metadata": metadata.encode(include_none=include_none),
        }
        return JSONResponse(content=payload, status_code=status.HTTP_200_OK)

    return router
