"""Typed identity records exchanged between peers during session negotiation.

`AppMetadata` is the record a peer presents about itself, and `Redirect` tells the
receiving peer how to route the user back to the presenting application. Both are
immutable value objects with structural equality and a JSON-compatible wire form.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, NoReturn

from .errors import InvalidLinkModeUniversalLinkError, MalformedRecordError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Redirect:
    """Redirect links which a receiving peer can use to return to the presenting app.

    Attributes:
        native: Native deep-link URL string.
        universal: Universal link URL string.
        link_mode: Whether redirection must go through the universal link.

    Raises:
        InvalidLinkModeUniversalLinkError: Raised when link mode is on and no universal link is set.
    """

    native: str | None = None
    universal: str | None = None
    link_mode: bool = False

    def __post_init__(self) -> None:
        if self.link_mode and self.universal is None:
            raise InvalidLinkModeUniversalLinkError()

    def encode(self, include_none: bool = False) -> dict[str, object]:
        """Encode redirect links into wire key/value form.

        Args:
            include_none: Emit absent optional fields as explicit nulls instead of omitting them.

        Returns:
            dict[str, object]: Mapping with `native`, `universal` and `linkMode` keys.
        """

        payload: dict[str, object] = {}
        if self.native is not None or include_none:
            payload["native"] = self.native
        if self.universal is not None or include_none:
            payload["universal"] = self.universal
        payload["linkMode"] = self.link_mode
        return payload

    @classmethod
    def decode(cls, data: Any, path: str = "") -> Redirect:
        """Rebuild redirect links from wire key/value form.

        Args:
            data: Decoded JSON object.
            path: Dotted prefix used when reporting offending fields.

        Returns:
            Redirect: Validated redirect links.

        Raises:
            MalformedRecordError: Raised when the input or one of its fields has the wrong shape.
            InvalidLinkModeUniversalLinkError: Raised when link mode is on and no universal link is set.
        """

        record = _domain_require_mapping(data, path or None)
        link_mode = record.get("linkMode")
        if link_mode is None:
            link_mode = False
        elif not isinstance(link_mode, bool):
            _domain_raise_malformed("must be a boolean", _domain_join_path(path, "linkMode"))

        return cls(
            native=_domain_optional_text(record, "native", path),
            universal=_domain_optional_text(record, "universal", path),
            link_mode=link_mode,
        )


@dataclass(frozen=True)
class AppMetadata:
    """Human-readable identity of an application shared with a connected peer.

    Attributes:
        name: Name of the app.
        description: Brief description that can be displayed to peers.
        url: URL string identifying the official domain of the app.
        icons: URL strings pointing to icon assets on the web.
        redirect: Redirect links the receiving peer can use to return to the app.
    """

    name: str
    description: str
    url: str
    icons: tuple[str, ...]
    redirect: Redirect | None = None

    def __post_init__(self) -> None:
        if isinstance(self.icons, list):
            object.__setattr__(self, "icons", tuple(self.icons))
        elif not isinstance(self.icons, tuple):
            raise TypeError("icons must be a list or tuple of strings")

    def encode(self, include_none: bool = False) -> dict[str, object]:
        """Encode the record into wire key/value form.

        Args:
            include_none: Emit absent optional fields as explicit nulls instead of omitting them.

        Returns:
            dict[str, object]: JSON-compatible mapping.
        """

        payload: dict[str, object] = {
            "name": self.name,
            "description": self.description,
            "url": self.url,
            "icons": list(self.icons),
        }
        if self.redirect is not None:
            payload["redirect"] = self.redirect.encode(include_none=include_none)
        elif include_none:
            payload["redirect"] = None
        return payload

    @classmethod
    def decode(cls, data: Any) -> AppMetadata:
        """Rebuild the record from wire key/value form.

        Absent optional fields and explicit nulls both decode to None. Unknown keys are ignored.

        Args:
            data: Decoded JSON object.

        Returns:
            AppMetadata: Validated metadata record.

        Raises:
            MalformedRecordError: Raised when a required field is missing or has the wrong shape.
            InvalidLinkModeUniversalLinkError: Raised when the nested redirect violates link mode rules.
        """

        record = _domain_require_mapping(data, None)
        name = _domain_required_text(record, "name", "")
        description = _domain_required_text(record, "description", "")
        url = _domain_required_text(record, "url", "")
        raw_icons = _domain_require_field(record, "icons", "")
        if not isinstance(raw_icons, list):
            _domain_raise_malformed("must be a list of strings", "icons")
        for index, icon in enumerate(raw_icons):
            if not isinstance(icon, str):
                _domain_raise_malformed("must be a string", f"icons[{index}]")

        raw_redirect = record.get("redirect")
        redirect = None if raw_redirect is None else Redirect.decode(raw_redirect, path="redirect")

        return cls(
            name=name,
            description=description,
            url=url,
            icons=tuple(raw_icons),
            redirect=redirect,
        )


def _domain_join_path(path: str, key: str) -> str:
    return f"{path}.{key}" if path else key


def _domain_raise_malformed(reason: str, field_name: str | None) -> NoReturn:
    message = f"{field_name} {reason}" if field_name else f"record {reason}"
    logger.debug("Rejected malformed metadata record: %s", message)
    raise MalformedRecordError(message, field_name=field_name)


def _domain_require_mapping(data: Any, field_name: str | None) -> Mapping[str, Any]:
    if not isinstance(data, Mapping):
        _domain_raise_malformed("must be an object", field_name)
    return data


def _domain_require_field(record: Mapping[str, Any], key: str, path: str) -> Any:
    if key not in record or record[key] is None:
        _domain_raise_malformed("is required", _domain_join_path(path, key))
    return record[key]


def _domain_required_text(record: Mapping[str, Any], key: str, path: str) -> str:
    value = _domain_require_field(record, key, path)
    if not isinstance(value, str):
        _domain_raise_malformed("must be a string", _domain_join_path(path, key))
    return value


def _domain_optional_text(record: Mapping[str, Any], key: str, path: str) -> str | None:
    value = record.get(key)
    if value is not None and not isinstance(value, str):
        _domain_raise_malformed("must be a string", _domain_join_path(path, key))
    return value
