"""
=============================================================================
RESTASSERT - Semantic Assertions for HTTP Responses
=============================================================================

This package checks that an HTTP response has the status, headers and
cookies a test expects, comparing header values by what they MEAN rather
than by how a particular server happened to write them.

=============================================================================
PROJECT OVERVIEW
=============================================================================

    ┌─────────────────────────────────────────────────────────────────────┐
    │                      RESTASSERT ARCHITECTURE                        │
    ├─────────────────────────────────────────────────────────────────────┤
    │                                                                      │
    │   1. PRIMITIVES (common/)                                           │
    │      - Argument checks, string helpers                              │
    │      - HTTP-date parsing (RFC 1123 / RFC 1036 / asctime)           │
    │                                                                      │
    │   2. HTTP MODEL (http/)                                             │
    │      - HttpResponse view over any client                            │
    │      - Set-Cookie parsing (RFC 6265)                                │
    │      - Table of single-valued headers                               │
    │                                                                      │
    │   3. HEADER GRAMMARS (headers/)                                     │
    │      - Media type, Cache-Control, CSP, HSTS, X-Frame-Options, ...  │
    │      - Each one: parse, compare, serialize                         │
    │                                                                      │
    │   4. ASSERTIONS (assertions/)                                       │
    │      - Presence → single value → parse → compare                   │
    │      - AssertionResult with a typed, renderable error              │
    │      - JSON document comparison                                     │
    │                                                                      │
    └─────────────────────────────────────────────────────────────────────┘

=============================================================================
PACKAGE STRUCTURE
=============================================================================

    restassert/
    ├── __init__.py              # This file - package exports
    ├── config.py                # AssertConfig dataclass, logging setup
    ├── exceptions.py            # Parse exceptions
    ├── common/
    │   ├── preconditions.py     # Argument checks
    │   ├── strings.py           # Token and list helpers
    │   └── dates.py             # HTTP-date parsing and formatting
    ├── http/
    │   ├── response.py          # HttpResponse, builder
    │   ├── cookies.py           # Cookie, Set-Cookie parser
    │   ├── header_names.py      # Well-known headers
    │   └── status_codes.py      # HTTP status enum
    ├── headers/                 # One module per header grammar
    └── assertions/
        ├── result.py            # AssertionResult, Message
        ├── errors.py            # Typed assertion errors
        ├── impl.py              # Assertion pipeline
        ├── http_response.py     # Status and header assertions
        ├── cookies.py           # Cookie assertions
        ├── json_comparator.py   # JSON diff
        └── json_assertions.py   # JSON assertions

=============================================================================
QUICK START
=============================================================================

    from restassert.assertions import http_response as r
    from restassert.http import ResponseBuilder

    response = (ResponseBuilder()
        .status(200)
        .json({"id": 1})
        .header("Cache-Control", "no-store, PUBLIC")
        .build())

    r.is_ok(response).check()
    r.is_json(response).check()
    r.is_cache_control_equal_to(response, "public, no-store").check()

=============================================================================
"""

__version__ = "1.0.0"

from .assertions import AssertionResult
from .config import AssertConfig, setup_logging
from .exceptions import (
    IllegalHeaderDateError,
    InvalidCookieError,
    InvalidHeaderValueError,
    RestAssertException,
)
from .http import Cookie, HttpResponse, InMemoryHttpResponse, ResponseBuilder

__all__ = [
    "AssertionResult",
    "AssertConfig",
    "setup_logging",
    "IllegalHeaderDateError",
    "InvalidCookieError",
    "InvalidHeaderValueError",
    "RestAssertException",
    "Cookie",
    "HttpResponse",
    "InMemoryHttpResponse",
    "ResponseBuilder",
    "__version__",
]
