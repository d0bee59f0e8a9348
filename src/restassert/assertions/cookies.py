"""
Cookie assertions.

Response-level checks look for a cookie among every Set-Cookie header of
a response. Cookie-level checks inspect a single Cookie.

    from restassert.assertions import cookies as c

    c.has_cookie(response, "session").check()
    c.is_http_only(session_cookie).check()
"""

from typing import Optional

from ..http.cookies import Cookie
from ..http.response import HttpResponse
from .errors import CookieAttributeMismatch, CookieFlagMismatch
from .impl import DoesNotHaveCookieAssertion, HasCookieAssertion
from .result import AssertionResult


# =============================================================================
# RESPONSE COOKIES
# =============================================================================

def has_cookie(response: HttpResponse, name: str, value: Optional[str] = None) -> AssertionResult:
    """
    The response sets a cookie with that name (and value, if given).

    Names are matched case-sensitively.
    """
    return HasCookieAssertion(name=name, value=value).handle(response)


def has_cookie_matching(response: HttpResponse, cookie: Cookie) -> AssertionResult:
    """The response sets a cookie equal to the given one, every attribute included."""
    return HasCookieAssertion(cookie=cookie).handle(response)


def does_not_have_cookie(response: HttpResponse, name: Optional[str] = None) -> AssertionResult:
    """No cookie with that name; without a name, no cookie at all."""
    return DoesNotHaveCookieAssertion(name).handle(response)


# =============================================================================
# SINGLE COOKIE
# =============================================================================

def is_secured(cookie: Cookie) -> AssertionResult:
    return _flag(cookie, "secured", cookie.secure, True)


def is_not_secured(cookie: Cookie) -> AssertionResult:
    return _flag(cookie, "secured", cookie.secure, False)


def is_http_only(cookie: Cookie) -> AssertionResult:
    return _flag(cookie, "http only", cookie.http_only, True)


def is_not_http_only(cookie: Cookie) -> AssertionResult:
    return _flag(cookie, "http only", cookie.http_only, False)


def has_value(cookie: Cookie, value: str) -> AssertionResult:
    return _attribute(cookie, "value", value, cookie.value)


def has_domain(cookie: Cookie, domain: str) -> AssertionResult:
    return _attribute(cookie, "domain", domain, cookie.domain)


def has_path(cookie: Cookie, path: str) -> AssertionResult:
    return _attribute(cookie, "path", path, cookie.path)


def has_max_age(cookie: Cookie, max_age: int) -> AssertionResult:
    return _attribute(cookie, "max age", max_age, cookie.max_age)


def _flag(cookie: Cookie, flag: str, actual: bool, expected: bool) -> AssertionResult:
    if actual == expected:
        return AssertionResult.success()
    return AssertionResult.failure(CookieFlagMismatch(cookie.name, flag, expected))


def _attribute(cookie: Cookie, attribute: str, expected, actual) -> AssertionResult:
    if actual == expected:
        return AssertionResult.success()
    return AssertionResult.failure(CookieAttributeMismatch(cookie.name, attribute, expected, actual))
