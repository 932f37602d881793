"""Domain models used across application layer boundaries."""

from .codec import domain_app_metadata_from_json, domain_app_metadata_to_json
from .errors import AppMetadataError, InvalidLinkModeUniversalLinkError, MalformedRecordError
from .fixtures import domain_app_metadata_stub
from .models import AppMetadata, Redirect

__all__ = [
    "AppMetadata",
    "AppMetadataError",
    "InvalidLinkModeUniversalLinkError",
    "MalformedRecordError",
    "Redirect",
    "domain_app_metadata_from_json",
    "domain_app_metadata_stub",
    "domain_app_metadata_to_json",
]
