"""
=============================================================================
CONTENT-SECURITY-POLICY (CSP Level 2/3)
=============================================================================

    Content-Security-Policy: default-src 'self'; script-src 'self' cdn.com
                             ──────┬──── ──┬───  ────┬───── ───────┬──────
                               directive  source  directive    sources

A policy is a ";" separated list of directives, each one a name followed
by whitespace separated sources. Equality ignores:
- the order of directives
- the order of sources inside a directive
- the case of directive names

Sources are compared as written: 'self' and 'SELF' are different.

When a directive appears twice, browsers apply the first one and ignore
the other (CSP3 section 2.2.1); so does the parser.

=============================================================================
"""

import logging
from dataclasses import dataclass, field
from typing import Dict, FrozenSet, Iterable, List, Tuple

from .base import HttpHeaderParser, HttpHeaderValue

logger = logging.getLogger(__name__)

KNOWN_DIRECTIVES = (
    "default-src",
    "script-src",
    "style-src",
    "img-src",
    "connect-src",
    "font-src",
    "object-src",
    "media-src",
    "frame-src",
    "child-src",
    "worker-src",
    "manifest-src",
    "prefetch-src",
    "base-uri",
    "form-action",
    "frame-ancestors",
    "plugin-types",
    "sandbox",
    "report-uri",
    "report-to",
    "upgrade-insecure-requests",
    "block-all-mixed-content",
    "require-sri-for",
)

# Keyword sources must be single-quoted on the wire
SELF = "'self'"
NONE = "'none'"
UNSAFE_INLINE = "'unsafe-inline'"
UNSAFE_EVAL = "'unsafe-eval'"
STRICT_DYNAMIC = "'strict-dynamic'"


@dataclass(frozen=True, eq=False)
class ContentSecurityPolicy(HttpHeaderValue):
    """A parsed policy: ordered (directive, sources) pairs."""

    directives: Tuple[Tuple[str, Tuple[str, ...]], ...] = field(default=())

    @staticmethod
    def parser() -> "ContentSecurityPolicyParser":
        return CONTENT_SECURITY_POLICY_PARSER

    @staticmethod
    def builder() -> "ContentSecurityPolicyBuilder":
        return ContentSecurityPolicyBuilder()

    def sources(self, directive: str) -> Tuple[str, ...]:
        """Sources of a directive, empty if the directive is absent."""
        return dict(self.directives).get(directive.lower(), ())

    def _canonical(self) -> Dict[str, FrozenSet[str]]:
        return {name: frozenset(sources) for name, sources in self.directives}

    def serialize_value(self) -> str:
        return "; ".join(
            " ".join((name,) + sources) for name, sources in self.directives
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ContentSecurityPolicy):
            return NotImplemented
        return self._canonical() == other._canonical()

    def __hash__(self) -> int:
        return hash(frozenset(self._canonical().items()))


class ContentSecurityPolicyParser(HttpHeaderParser[ContentSecurityPolicy]):
    """Parser for Content-Security-Policy values."""

    header_name = "Content-Security-Policy"

    def do_parse(self, value: str) -> ContentSecurityPolicy:
        directives: List[Tuple[str, Tuple[str, ...]]] = []
        seen = set()

        for member in value.split(";"):
            tokens = member.split()
            if not tokens:
                continue

            name = tokens[0].lower()
            if name not in KNOWN_DIRECTIVES:
                raise self.invalid(value, f"unknown directive: {tokens[0]!r}")

            if name in seen:
                logger.warning(f"Directive {name} has already been parsed, ignoring duplicate")
                continue

            seen.add(name)
            directives.append((name, _unique(tokens[1:])))

        if not directives:
            raise self.invalid(value, "no directive found")

        return ContentSecurityPolicy(tuple(directives))


CONTENT_SECURITY_POLICY_PARSER = ContentSecurityPolicyParser()


def _unique(values: Iterable[str]) -> Tuple[str, ...]:
    result: List[str] = []
    for value in values:
        if value not in result:
            result.append(value)
    return tuple(result)


class ContentSecurityPolicyBuilder:
    """
    Fluent builder for ContentSecurityPolicy.

        csp = (ContentSecurityPolicy.builder()
            .default_src(SELF)
            .script_src(SELF, "https://cdn.example.com")
            .build())
    """

    def __init__(self):
        self._directives: Dict[str, List[str]] = {}

    def directive(self, name: str, *sources: str) -> "ContentSecurityPolicyBuilder":
        """Add sources to any directive, creating it if needed."""
        name = name.lower()
        if name not in KNOWN_DIRECTIVES:
            raise ValueError(f"Unknown Content-Security-Policy directive: {name}")
        current = self._directives.setdefault(name, [])
        current.extend(s for s in sources if s not in current)
        return self

    def default_src(self, *sources: str) -> "ContentSecurityPolicyBuilder":
        return self.directive("default-src", *sources)

    def script_src(self, *sources: str) -> "ContentSecurityPolicyBuilder":
        return self.directive("script-src", *sources)

    def style_src(self, *sources: str) -> "ContentSecurityPolicyBuilder":
        return self.directive("style-src", *sources)

    def img_src(self, *sources: str) -> "ContentSecurityPolicyBuilder":
        return self.directive("img-src", *sources)

    def connect_src(self, *sources: str) -> "ContentSecurityPolicyBuilder":
        return self.directive("connect-src", *sources)

    def font_src(self, *sources: str) -> "ContentSecurityPolicyBuilder":
        return self.directive("font-src", *sources)

    def object_src(self, *sources: str) -> "ContentSecurityPolicyBuilder":
        return self.directive("object-src", *sources)

    def frame_ancestors(self, *sources: str) -> "ContentSecurityPolicyBuilder":
        return self.directive("frame-ancestors", *sources)

    def report_uri(self, uri: str) -> "ContentSecurityPolicyBuilder":
        return self.directive("report-uri", uri)

    def upgrade_insecure_requests(self) -> "ContentSecurityPolicyBuilder":
        return self.directive("upgrade-insecure-requests")

    def build(self) -> ContentSecurityPolicy:
        return ContentSecurityPolicy(tuple(
            (name, tuple(sources)) for name, sources in self._directives.items()
        ))
