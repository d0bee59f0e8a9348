"""
=============================================================================
MEDIA TYPE (Content-Type)
=============================================================================

RFC 7231 section 3.1.1.1:

    media-type = type "/" subtype *( OWS ";" OWS parameter )
    parameter  = token "=" ( token / quoted-string )

    application/json; charset=utf-8
    ──────┬─── ──┬─   ──────┬──────
        type  subtype   parameter

Comparison rules:
- type and subtype are case-insensitive
- parameter names are case-insensitive, parameter values are not
- parameter order does not matter

So these are all the same media type:

    text/html; charset=UTF-8; level=1
    TEXT/HTML;level=1;CHARSET=UTF-8

but differs from "text/html; charset=utf-8" (different value case).

=============================================================================
"""

import logging
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple

from ..common.strings import is_token, split_quoted, unquote
from .base import HttpHeaderParser, HttpHeaderValue

logger = logging.getLogger(__name__)


@dataclass(frozen=True, eq=False)
class MediaType(HttpHeaderValue):
    """A parsed media type."""

    type: str
    subtype: str
    parameters: Tuple[Tuple[str, str], ...] = field(default=())

    @staticmethod
    def parser() -> "MediaTypeParser":
        return MEDIA_TYPE_PARSER

    @classmethod
    def of(cls, type: str, subtype: str, **parameters: str) -> "MediaType":
        """
        Build a media type from its parts.

        Examples:
            >>> str(MediaType.of("text", "html", charset="utf-8"))
            'text/html; charset=utf-8'
        """
        params = tuple((name.lower(), value) for name, value in parameters.items())
        return cls(type.lower(), subtype.lower(), params)

    @property
    def mime_type(self) -> str:
        """The bare "type/subtype" part."""
        return f"{self.type}/{self.subtype}"

    @property
    def parameter_map(self) -> Dict[str, str]:
        return dict(self.parameters)

    @property
    def charset(self) -> Optional[str]:
        return self.parameter_map.get("charset")

    def without_parameters(self) -> "MediaType":
        return MediaType(self.type, self.subtype)

    def matches(self, other: "MediaType") -> bool:
        """True if both have the same type and subtype, ignoring parameters."""
        return self.mime_type == other.mime_type

    def serialize_value(self) -> str:
        parts = [self.mime_type]
        for name, value in self.parameters:
            rendered = value if is_token(value) else '"' + value.replace('"', '\\"') + '"'
            parts.append(f"{name}={rendered}")
        return "; ".join(parts)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, MediaType):
            return NotImplemented
        return (
            self.type == other.type
            and self.subtype == other.subtype
            and frozenset(self.parameters) == frozenset(other.parameters)
        )

    def __hash__(self) -> int:
        return hash((self.type, self.subtype, frozenset(self.parameters)))


class MediaTypeParser(HttpHeaderParser[MediaType]):
    """Parser for Content-Type style values."""

    header_name = "Content-Type"

    def do_parse(self, value: str) -> MediaType:
        parts = split_quoted(value, ";")
        mime_type = parts[0].strip()

        if "/" not in mime_type:
            raise self.invalid(value, "missing '/' between type and subtype")

        type_, subtype = (p.strip() for p in mime_type.split("/", 1))
        if not (type_ == "*" or is_token(type_)) or not (subtype == "*" or is_token(subtype)):
            raise self.invalid(value, f"invalid type or subtype: {mime_type!r}")

        parameters: List[Tuple[str, str]] = []
        seen = set()
        for part in parts[1:]:
            part = part.strip()
            if not part:
                continue
            if "=" not in part:
                raise self.invalid(value, f"parameter without value: {part!r}")

            name, raw_value = (p.strip() for p in part.split("=", 1))
            if not is_token(name):
                raise self.invalid(value, f"invalid parameter name: {name!r}")

            name = name.lower()
            if name in seen:
                logger.debug(f"Ignoring duplicate media type parameter: {name!r}")
                continue

            seen.add(name)
            parameters.append((name, unquote(raw_value).replace('\\"', '"')))

        return MediaType(type_.lower(), subtype.lower(), tuple(parameters))


MEDIA_TYPE_PARSER = MediaTypeParser()


# =============================================================================
# WELL-KNOWN MEDIA TYPES
# =============================================================================

APPLICATION_JSON = MediaType("application", "json")
APPLICATION_XML = MediaType("application", "xml")
APPLICATION_XHTML = MediaType("application", "xhtml+xml")
APPLICATION_JAVASCRIPT = MediaType("application", "javascript")
APPLICATION_PDF = MediaType("application", "pdf")
APPLICATION_OCTET_STREAM = MediaType("application", "octet-stream")
TEXT_PLAIN = MediaType("text", "plain")
TEXT_HTML = MediaType("text", "html")
TEXT_XML = MediaType("text", "xml")
TEXT_CSS = MediaType("text", "css")
TEXT_CSV = MediaType("text", "csv")
TEXT_JAVASCRIPT = MediaType("text", "javascript")
