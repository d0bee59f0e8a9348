"""
=============================================================================
HTTP RESPONSE
=============================================================================

The assertions never talk to an HTTP client directly. They only need a
small read-only view of a response:

    ┌─────────────────────────────────────────────────────────────────────┐
    │                      HttpResponse CAPABILITY                        │
    ├─────────────────────────────────────────────────────────────────────┤
    │                                                                      │
    │   status()        -> int           200                              │
    │   header(name)    -> List[str]     ["no-cache", "no-store"]         │
    │   has_header(name)-> bool          True                             │
    │   cookies()       -> List[Cookie]  parsed from Set-Cookie           │
    │   body()          -> str           '{"id": 1}'                      │
    │                                                                      │
    └─────────────────────────────────────────────────────────────────────┘

header() keeps the wire order and every duplicate occurrence, since the
single-value check needs to see them. Header names are matched without
regard to case, as RFC 7230 section 3.2 requires.

Wrapping a real client (requests, urllib, a framework test client) is a
matter of subclassing HttpResponse and implementing three methods.
InMemoryHttpResponse is the implementation used by tests and by callers
that already have the status, headers and body at hand.

=============================================================================
BUILDER PATTERN
=============================================================================

    response = (ResponseBuilder()
        .status(HTTPStatus.OK)
        .json({"id": 1})
        .header("Cache-Control", "no-cache")
        .header("Cache-Control", "no-store")    # second occurrence
        .build())

=============================================================================
"""

import json
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Dict, List, Tuple, Union

from .cookies import Cookie, parse_cookies
from .header_names import HttpHeader
from .status_codes import HTTPStatus


class HttpResponse(ABC):
    """Read-only view of an HTTP response."""

    @abstractmethod
    def status(self) -> int:
        """Status code."""

    @abstractmethod
    def header(self, name: str) -> List[str]:
        """
        All values of a header, in wire order.

        Args:
            name: Header name, matched case-insensitively.

        Returns:
            One entry per occurrence, empty if the header is absent.
        """

    @abstractmethod
    def body(self) -> str:
        """Response body, decoded."""

    def has_header(self, name: str) -> bool:
        return len(self.header(name)) > 0

    def cookies(self) -> List[Cookie]:
        """
        Cookies set by the response.

        Raises:
            InvalidCookieError: If a Set-Cookie value is malformed.
        """
        return parse_cookies(self.header(HttpHeader.SET_COOKIE.header_name))


@dataclass
class InMemoryHttpResponse(HttpResponse):
    """
    HttpResponse holding its data in memory.

    Headers are a list of (name, value) pairs rather than a dict because
    the same header may legitimately appear more than once.
    """

    status_code: int = HTTPStatus.OK
    headers: List[Tuple[str, str]] = field(default_factory=list)
    content: str = ""

    def status(self) -> int:
        return int(self.status_code)

    def header(self, name: str) -> List[str]:
        lower = name.lower()
        return [value for header_name, value in self.headers if header_name.lower() == lower]

    def body(self) -> str:
        return self.content


class ResponseBuilder:
    """
    Fluent builder for InMemoryHttpResponse.

    header() appends: calling it twice with the same name produces two
    occurrences of the header, exactly like a server would send them.
    """

    def __init__(self):
        self._status: int = HTTPStatus.OK
        self._headers: List[Tuple[str, str]] = []
        self._body = ""

    # =========================================================================
    # STATUS
    # =========================================================================

    def status(self, status: int) -> "ResponseBuilder":
        self._status = status
        return self

    # =========================================================================
    # HEADERS
    # =========================================================================

    def header(self, name: str, value: str) -> "ResponseBuilder":
        """
        Add one occurrence of a header.

        Args:
            name: Header name (e.g., "Cache-Control")
            value: Raw header value

        Returns:
            Self for method chaining
        """
        self._headers.append((name, value))
        return self

    def headers(self, headers: Dict[str, str]) -> "ResponseBuilder":
        """Add one occurrence of each header of a dictionary."""
        for name, value in headers.items():
            self.header(name, value)
        return self

    def content_type(self, content_type: str) -> "ResponseBuilder":
        return self.header(HttpHeader.CONTENT_TYPE.header_name, content_type)

    def cookie(self, cookie: Union[Cookie, str]) -> "ResponseBuilder":
        """Add a Set-Cookie header from a Cookie or a raw value."""
        value = cookie.to_header() if isinstance(cookie, Cookie) else cookie
        return self.header(HttpHeader.SET_COOKIE.header_name, value)

    # =========================================================================
    # BODY
    # =========================================================================

    def body(self, body: Union[str, bytes]) -> "ResponseBuilder":
        """Set the body, decoding bytes as UTF-8."""
        self._body = body.decode("utf-8") if isinstance(body, bytes) else body
        return self

    def text(self, text: str, content_type: str = "text/plain; charset=utf-8") -> "ResponseBuilder":
        self._body = text
        return self.content_type(content_type)

    def html(self, html: str) -> "ResponseBuilder":
        self._body = html
        return self.content_type("text/html; charset=utf-8")

    def json(self, data: Any, pretty: bool = False) -> "ResponseBuilder":
        """
        Set a JSON body and its Content-Type.

        Args:
            data: Any JSON-serializable data
            pretty: If True, indent the document

        Returns:
            Self for method chaining
        """
        indent = 2 if pretty else None
        self._body = json.dumps(data, indent=indent, ensure_ascii=False)
        return self.content_type("application/json; charset=utf-8")

    def build(self) -> InMemoryHttpResponse:
        return InMemoryHttpResponse(
            status_code=self._status,
            headers=list(self._headers),
            content=self._body,
        )


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================

def ok(body: Union[str, dict, list] = "") -> InMemoryHttpResponse:
    """200 OK, with a JSON body for dict/list and a text body otherwise."""
    return _with_body(ResponseBuilder().status(HTTPStatus.OK), body).build()


def created(location: str, body: Union[str, dict, list] = "") -> InMemoryHttpResponse:
    """201 Created pointing at the new resource."""
    builder = ResponseBuilder().status(HTTPStatus.CREATED).header("Location", location)
    return _with_body(builder, body).build()


def no_content() -> InMemoryHttpResponse:
    return ResponseBuilder().status(HTTPStatus.NO_CONTENT).build()


def not_found(message: str = "Not Found") -> InMemoryHttpResponse:
    return ResponseBuilder().status(HTTPStatus.NOT_FOUND).text(message).build()


def _with_body(builder: ResponseBuilder, body: Union[str, dict, list]) -> ResponseBuilder:
    if isinstance(body, (dict, list)):
        return builder.json(body)
    if body:
        return builder.text(body)
    return builder
