"""
X-Frame-Options (RFC 7034).

    X-Frame-Options: DENY
    X-Frame-Options: SAMEORIGIN
    X-Frame-Options: ALLOW-FROM https://example.com/

Keywords are case-insensitive, the ALLOW-FROM origin is compared as
written. "same-origin" is NOT a keyword of this header.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from .base import HttpHeaderParser, HttpHeaderValue


class FrameOptionsDirective(Enum):
    DENY = "DENY"
    SAMEORIGIN = "SAMEORIGIN"
    ALLOW_FROM = "ALLOW-FROM"


@dataclass(frozen=True)
class FrameOptions(HttpHeaderValue):
    """A parsed X-Frame-Options value."""

    directive: FrameOptionsDirective
    uri: Optional[str] = None

    @staticmethod
    def parser() -> "FrameOptionsParser":
        return FRAME_OPTIONS_PARSER

    @classmethod
    def deny(cls) -> "FrameOptions":
        return cls(FrameOptionsDirective.DENY)

    @classmethod
    def same_origin(cls) -> "FrameOptions":
        return cls(FrameOptionsDirective.SAMEORIGIN)

    @classmethod
    def allow_from(cls, uri: str) -> "FrameOptions":
        return cls(FrameOptionsDirective.ALLOW_FROM, uri)

    def serialize_value(self) -> str:
        if self.uri is None:
            return self.directive.value
        return f"{self.directive.value} {self.uri}"


class FrameOptionsParser(HttpHeaderParser[FrameOptions]):
    header_name = "X-Frame-Options"

    def do_parse(self, value: str) -> FrameOptions:
        keyword, _, uri = value.partition(" ")
        keyword = keyword.upper()
        uri = uri.strip()

        if keyword == "DENY" and not uri:
            return FrameOptions.deny()
        if keyword == "SAMEORIGIN" and not uri:
            return FrameOptions.same_origin()
        if keyword == "ALLOW-FROM" and uri and " " not in uri:
            return FrameOptions.allow_from(uri)

        raise self.invalid(value, "expected DENY, SAMEORIGIN or ALLOW-FROM <uri>")


FRAME_OPTIONS_PARSER = FrameOptionsParser()
