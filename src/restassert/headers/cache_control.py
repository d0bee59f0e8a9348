"""
=============================================================================
CACHE-CONTROL (RFC 7234 section 5.2)
=============================================================================

    Cache-Control = 1#cache-directive
    cache-directive = token [ "=" ( token / quoted-string ) ]

    Cache-Control: public, max-age=3600, must-revalidate
                   ──┬───  ──────┬─────  ───────┬───────
                   flag    name=value         flag

=============================================================================
EQUALITY
=============================================================================

A Cache-Control value is a SET of directives:

    "public, no-transform, no-store"  ==  "public, no-store, no-transform"
    "Max-Age=60"                      ==  "max-age=60"
    "max-age=60"                      !=  "max-age=060"

Directive names are case-insensitive, directive values are compared
exactly as written.

=============================================================================
DIRECTIVES WITH A DELTA-SECONDS VALUE
=============================================================================

    max-age, s-maxage, min-fresh, stale-while-revalidate, stale-if-error

Their value must be a non-negative integer; "max-age=soon" is rejected.

=============================================================================
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Tuple

from ..common.strings import is_token, split_list, unquote
from .base import HttpHeaderParser, HttpHeaderValue

logger = logging.getLogger(__name__)

Directive = Tuple[str, Optional[str]]

DELTA_SECONDS_DIRECTIVES = frozenset({
    "max-age",
    "s-maxage",
    "min-fresh",
    "stale-while-revalidate",
    "stale-if-error",
})


class Visibility(Enum):
    PUBLIC = "public"
    PRIVATE = "private"


@dataclass(frozen=True, eq=False)
class CacheControl(HttpHeaderValue):
    """A parsed Cache-Control value."""

    directives: Tuple[Directive, ...] = field(default=())

    @staticmethod
    def parser() -> "CacheControlParser":
        return CACHE_CONTROL_PARSER

    @staticmethod
    def builder() -> "CacheControlBuilder":
        return CacheControlBuilder()

    # =========================================================================
    # ACCESSORS
    # =========================================================================

    def has(self, name: str) -> bool:
        lower = name.lower()
        return any(directive == lower for directive, _ in self.directives)

    def get(self, name: str) -> Optional[str]:
        """Value of the first directive with that name, None if absent or valueless."""
        lower = name.lower()
        for directive, value in self.directives:
            if directive == lower:
                return value
        return None

    @property
    def visibility(self) -> Optional[Visibility]:
        if self.has("public"):
            return Visibility.PUBLIC
        if self.has("private"):
            return Visibility.PRIVATE
        return None

    @property
    def max_age(self) -> Optional[int]:
        return self._seconds("max-age")

    @property
    def s_maxage(self) -> Optional[int]:
        return self._seconds("s-maxage")

    @property
    def no_cache(self) -> bool:
        return self.has("no-cache")

    @property
    def no_store(self) -> bool:
        return self.has("no-store")

    @property
    def no_transform(self) -> bool:
        return self.has("no-transform")

    @property
    def must_revalidate(self) -> bool:
        return self.has("must-revalidate")

    @property
    def proxy_revalidate(self) -> bool:
        return self.has("proxy-revalidate")

    @property
    def immutable(self) -> bool:
        return self.has("immutable")

    def _seconds(self, name: str) -> Optional[int]:
        value = self.get(name)
        return int(unquote(value)) if value is not None else None

    # =========================================================================
    # SERIALIZATION AND EQUALITY
    # =========================================================================

    def serialize_value(self) -> str:
        return ", ".join(
            name if value is None else f"{name}={value}"
            for name, value in self.directives
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CacheControl):
            return NotImplemented
        return frozenset(self.directives) == frozenset(other.directives)

    def __hash__(self) -> int:
        return hash(frozenset(self.directives))


class CacheControlParser(HttpHeaderParser[CacheControl]):
    """Parser for Cache-Control values."""

    header_name = "Cache-Control"

    def do_parse(self, value: str) -> CacheControl:
        directives: List[Directive] = []

        for member in split_list(value, ","):
            name, sep, directive_value = member.partition("=")
            name = name.strip()
            if not is_token(name):
                raise self.invalid(value, f"invalid directive name: {name!r}")

            name = name.lower()
            argument: Optional[str] = None
            if sep:
                argument = directive_value.strip()
                if not argument:
                    raise self.invalid(value, f"directive {name!r} has an empty value")
                if name in DELTA_SECONDS_DIRECTIVES and not unquote(argument).isdigit():
                    raise self.invalid(value, f"directive {name!r} must be a number of seconds")

            directive = (name, argument)
            if directive in directives:
                logger.debug(f"Ignoring duplicate Cache-Control directive: {member!r}")
                continue
            directives.append(directive)

        if not directives:
            raise self.invalid(value, "no directive found")

        return CacheControl(tuple(directives))


CACHE_CONTROL_PARSER = CacheControlParser()


class CacheControlBuilder:
    """
    Fluent builder for CacheControl.

        cache_control = (CacheControl.builder()
            .visibility(Visibility.PUBLIC)
            .max_age(3600)
            .must_revalidate()
            .build())
    """

    def __init__(self):
        self._directives: List[Directive] = []

    def visibility(self, visibility: Visibility) -> "CacheControlBuilder":
        return self.directive(visibility.value)

    def max_age(self, seconds: int) -> "CacheControlBuilder":
        return self.directive("max-age", str(seconds))

    def s_maxage(self, seconds: int) -> "CacheControlBuilder":
        return self.directive("s-maxage", str(seconds))

    def no_cache(self) -> "CacheControlBuilder":
        return self.directive("no-cache")

    def no_store(self) -> "CacheControlBuilder":
        return self.directive("no-store")

    def no_transform(self) -> "CacheControlBuilder":
        return self.directive("no-transform")

    def must_revalidate(self) -> "CacheControlBuilder":
        return self.directive("must-revalidate")

    def proxy_revalidate(self) -> "CacheControlBuilder":
        return self.directive("proxy-revalidate")

    def immutable(self) -> "CacheControlBuilder":
        return self.directive("immutable")

    def directive(self, name: str, value: Optional[str] = None) -> "CacheControlBuilder":
        """Add any directive, including extensions."""
        directive = (name.lower(), value)
        if directive not in self._directives:
            self._directives.append(directive)
        return self

    def build(self) -> CacheControl:
        return CacheControl(tuple(self._directives))
