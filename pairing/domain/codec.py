"""JSON text helpers for application metadata wire payloads."""

from __future__ import annotations

import json

from .errors import MalformedRecordError
from .models import AppMetadata


def domain_app_metadata_to_json(metadata: AppMetadata, include_none: bool = False) -> str:
    """Serialize metadata into compact JSON text.

    Args:
        metadata: Metadata record to serialize.
        include_none: Emit absent optional fields as explicit nulls.

    Returns:
        str: Compact JSON text with wire keys in declaration order.

    Raises:
        RuntimeError: This helper does not raise runtime errors.
    """

    return json.dumps(metadata.encode(include_none=include_none), separators=(",", ":"), ensure_ascii=False)


def domain_app_metadata_from_json(payload: str | bytes) -> AppMetadata:
    """Parse JSON text and decode it into a validated metadata record.

    Args:
        payload: JSON text or UTF-8 encoded JSON bytes.

    Returns:
        AppMetadata: Validated metadata record.

    Raises:
        MalformedRecordError: Raised when the payload is not valid JSON or has the wrong shape.
        InvalidLinkModeUniversalLinkError: Raised when the nested redirect violates link mode rules.
    """

    try:
        data = json.loads(payload)
    except (json.JSONDecodeError, UnicodeDecodeError, RecursionError) as error:
        raise MalformedRecordError("payload must contain valid JSON") from error
    return AppMetadata.decode(data)


__all__ = ["domain_app_metadata_from_json", "domain_app_metadata_to_json"]
