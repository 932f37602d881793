"""Project-native typed exceptions for application metadata validation failures."""

from __future__ import annotations


class AppMetadataError(ValueError):
    """Base exception for application metadata construction and decoding failures."""


class InvalidLinkModeUniversalLinkError(AppMetadataError):
    """Link mode was requested without a universal link to redirect through."""

    def __init__(self, message: str = "link mode requires a universal link"):
        super().__init__(message)


class MalformedRecordError(AppMetadataError):
    """Structured input is missing a required field or carries a field of the wrong shape.

    Attributes:
        field_name: Dotted wire path of the offending field, or None for whole-record failures.
    """

    def __init__(self, message: str, field_name: str | None = None):
        super().__init__(message)
        self.field_name = field_name


__all__ = ["AppMetadataError", "InvalidLinkModeUniversalLinkError", "MalformedRecordError"]
