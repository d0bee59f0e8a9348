"""
=============================================================================
STRICT-TRANSPORT-SECURITY (RFC 6797)
=============================================================================

    Strict-Transport-Security: max-age=31536000; includeSubDomains; preload
                               ───────┬───────  ────────┬────────  ───┬───
                                  required           optional     optional

- directives may appear in any order
- directive names are case-insensitive
- max-age is required and its value may be quoted (max-age="3600")
- a directive seen twice is ignored after its first occurrence

Any other directive makes the value invalid.

=============================================================================
"""

import logging
from dataclasses import dataclass
from typing import Optional

from ..common.preconditions import is_positive
from ..common.strings import unquote
from .base import HttpHeaderParser, HttpHeaderValue

logger = logging.getLogger(__name__)

MAX_AGE = "max-age"
INCLUDE_SUB_DOMAINS = "includesubdomains"
PRELOAD = "preload"


@dataclass(frozen=True)
class StrictTransportSecurity(HttpHeaderValue):
    """A parsed Strict-Transport-Security value."""

    max_age: int
    include_sub_domains: bool = False
    preload: bool = False

    @staticmethod
    def parser() -> "StrictTransportSecurityParser":
        return STRICT_TRANSPORT_SECURITY_PARSER

    @staticmethod
    def builder(max_age: int) -> "StrictTransportSecurityBuilder":
        return StrictTransportSecurityBuilder(max_age)

    def serialize_value(self) -> str:
        parts = [f"max-age={self.max_age}"]
        if self.include_sub_domains:
            parts.append("includeSubDomains")
        if self.preload:
            parts.append("preload")
        return "; ".join(parts)


class StrictTransportSecurityParser(HttpHeaderParser[StrictTransportSecurity]):
    header_name = "Strict-Transport-Security"

    def do_parse(self, value: str) -> StrictTransportSecurity:
        max_age: Optional[int] = None
        include_sub_domains = False
        preload = False
        seen = set()

        for directive in value.split(";"):
            directive = directive.strip()
            if not directive:
                continue

            name, sep, directive_value = directive.partition("=")
            name = name.strip().lower()
            directive_value = unquote(directive_value.strip())

            if name in seen:
                logger.warning(f"Directive {name} has already been parsed, ignoring duplicate")
                continue
            seen.add(name)

            if name == MAX_AGE:
                if not sep or not directive_value.isdigit():
                    raise self.invalid(value, "max-age must be a number of seconds")
                max_age = int(directive_value)
            elif name == INCLUDE_SUB_DOMAINS and not sep:
                include_sub_domains = True
            elif name == PRELOAD and not sep:
                preload = True
            else:
                raise self.invalid(value, f"unknown directive: {directive!r}")

        if max_age is None:
            raise self.invalid(value, "max-age directive is required")

        return StrictTransportSecurity(max_age, include_sub_domains, preload)


STRICT_TRANSPORT_SECURITY_PARSER = StrictTransportSecurityParser()


class StrictTransportSecurityBuilder:
    """Fluent builder for StrictTransportSecurity."""

    def __init__(self, max_age: int):
        self._max_age = is_positive(max_age, "max-age must be positive")
        self._include_sub_domains = False
        self._preload = False

    def include_sub_domains(self) -> "StrictTransportSecurityBuilder":
        self._include_sub_domains = True
        return self

    def preload(self) -> "StrictTransportSecurityBuilder":
        self._preload = True
        return self

    def build(self) -> StrictTransportSecurity:
        return StrictTransportSecurity(self._max_age, self._include_sub_domains, self._preload)
