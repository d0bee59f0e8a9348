"""
=============================================================================
CORS TOKEN LISTS
=============================================================================

    Access-Control-Allow-Headers: X-Requested-With, Content-Type
    Access-Control-Expose-Headers: ETag, X-Total-Count
    Access-Control-Allow-Methods: GET, POST, OPTIONS

These headers carry a comma-separated list of tokens compared as a SET:

    "X-Foo, X-Bar" == "X-Bar, X-Foo"

Header names are case-insensitive ("x-foo" == "X-Foo"). Method names
are case-sensitive per RFC 7231 section 4.1 ("get" != "GET").

=============================================================================
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import FrozenSet, Iterable, Tuple

from ..common.strings import is_token, split_list
from .base import HttpHeaderParser, HttpHeaderValue


class RequestMethod(Enum):
    GET = "GET"
    HEAD = "HEAD"
    POST = "POST"
    PUT = "PUT"
    PATCH = "PATCH"
    DELETE = "DELETE"
    OPTIONS = "OPTIONS"
    CONNECT = "CONNECT"
    TRACE = "TRACE"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True, eq=False)
class TokenList(HttpHeaderValue):
    """Unordered list of tokens."""

    tokens: Tuple[str, ...] = field(default=())
    case_sensitive: bool = False

    @classmethod
    def of(cls, tokens: Iterable[object], case_sensitive: bool = False) -> "TokenList":
        """Build a list from strings or RequestMethod values."""
        return cls(tuple(str(t).strip() for t in tokens), case_sensitive)

    def _canonical(self) -> FrozenSet[str]:
        if self.case_sensitive:
            return frozenset(self.tokens)
        return frozenset(t.lower() for t in self.tokens)

    def contains(self, token: str) -> bool:
        return (token if self.case_sensitive else token.lower()) in self._canonical()

    def serialize_value(self) -> str:
        return ", ".join(self.tokens)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TokenList):
            return NotImplemented
        return self._canonical() == other._canonical()

    def __hash__(self) -> int:
        return hash(self._canonical())


class TokenListParser(HttpHeaderParser[TokenList]):
    """Parser for a comma-separated token list."""

    def __init__(self, header_name: str, case_sensitive: bool):
        self.header_name = header_name
        self.case_sensitive = case_sensitive

    def do_parse(self, value: str) -> TokenList:
        tokens = split_list(value, ",")
        for token in tokens:
            if not is_token(token):
                raise self.invalid(value, f"invalid token: {token!r}")
        if not tokens:
            raise self.invalid(value, "no token found")
        return TokenList(tuple(tokens), self.case_sensitive)


ALLOW_HEADERS_PARSER = TokenListParser("Access-Control-Allow-Headers", case_sensitive=False)
EXPOSE_HEADERS_PARSER = TokenListParser("Access-Control-Expose-Headers", case_sensitive=False)
ALLOW_METHODS_PARSER = TokenListParser("Access-Control-Allow-Methods", case_sensitive=True)
