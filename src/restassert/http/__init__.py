"""
HTTP building blocks: response view, cookies, status codes and the
table of well-known headers.
"""

from .cookies import Cookie, CookieBuilder, SameSite, parse_cookie, parse_cookie_date, parse_cookies
from .header_names import HttpHeader, is_single_valued
from .response import (
    HttpResponse,
    InMemoryHttpResponse,
    ResponseBuilder,
    created,
    no_content,
    not_found,
    ok,
)
from .status_codes import HTTPStatus, StatusRange

__all__ = [
    "Cookie",
    "CookieBuilder",
    "SameSite",
    "parse_cookie",
    "parse_cookie_date",
    "parse_cookies",
    "HttpHeader",
    "is_single_valued",
    "HttpResponse",
    "InMemoryHttpResponse",
    "ResponseBuilder",
    "created",
    "no_content",
    "not_found",
    "ok",
    "HTTPStatus",
    "StatusRange",
]
