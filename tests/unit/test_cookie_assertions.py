"""
Unit tests for cookie assertions.
"""

import pytest

from restassert.assertions import cookies as c
from restassert.assertions.errors import (
    CookieAttributeMismatch,
    CookieFlagMismatch,
    InvalidHeaderValue,
    MissingCookie,
    UnexpectedCookie,
)
from restassert.http import Cookie, ResponseBuilder
from restassert.http.cookies import parse_cookie


class TestResponseCookies:
    """Tests for cookie checks on a response."""

    def test_has_cookie(self, cookie_response):
        """Test lookup by name and by name and value."""
        assert c.has_cookie(cookie_response, "id").is_success
        assert c.has_cookie(cookie_response, "theme", "dark").is_success

    def test_name_case_sensitive(self, cookie_response):
        """Test that cookie names keep their case."""
        result = c.has_cookie(cookie_response, "ID")

        assert result.error == MissingCookie("ID")
        assert result.message == 'Expecting http response to contains cookie with name "ID"'

    def test_wrong_value(self, cookie_response):
        """Test a cookie with another value."""
        result = c.has_cookie(cookie_response, "theme", "light")
        assert result.message == 'Expecting http response to contains cookie with name "theme" and value "light"'

    def test_has_cookie_matching(self, cookie_response):
        """Test comparing whole cookies."""
        expected = (Cookie.builder("id", "42")
            .domain("example.com")
            .path("/")
            .secure()
            .http_only()
            .max_age(3600)
            .build())

        assert c.has_cookie_matching(cookie_response, expected).is_success
        assert c.has_cookie_matching(cookie_response, Cookie("id", "42")).is_failure

    def test_does_not_have_cookie(self, cookie_response, empty_response):
        """Test absence by name and absence of any cookie."""
        assert c.does_not_have_cookie(cookie_response, "session").is_success
        assert c.does_not_have_cookie(empty_response).is_success

        assert c.does_not_have_cookie(cookie_response, "id").error == UnexpectedCookie("id")
        assert c.does_not_have_cookie(cookie_response).error == UnexpectedCookie()

    def test_missing_in_empty_response(self, empty_response):
        """Test lookup without any Set-Cookie header."""
        assert c.has_cookie(empty_response, "id").is_failure

    def test_malformed_set_cookie(self):
        """Test that a malformed Set-Cookie is a failure."""
        response = ResponseBuilder().cookie("=42").build()

        result = c.has_cookie(response, "id")

        assert result.error == InvalidHeaderValue("Set-Cookie", "=42")

    def test_requires_name_or_cookie(self, empty_response):
        """Test that has_cookie_matching needs a cookie."""
        with pytest.raises(ValueError):
            c.has_cookie_matching(empty_response, None)


class TestSingleCookie:
    """Tests for checks on one cookie."""

    @pytest.fixture
    def cookie(self) -> Cookie:
        return parse_cookie("id=42; Domain=example.com; Path=/api; Secure; Max-Age=60")

    def test_flags(self, cookie):
        """Test secure and http only flags."""
        assert c.is_secured(cookie).is_success
        assert c.is_not_http_only(cookie).is_success

        assert c.is_not_secured(cookie).error == CookieFlagMismatch("id", "secured", False)
        assert c.is_http_only(cookie).message == 'Expecting cookie "id" to be http only'

    def test_attributes(self, cookie):
        """Test value, domain, path and max age."""
        assert c.has_value(cookie, "42").is_success
        assert c.has_domain(cookie, "example.com").is_success
        assert c.has_path(cookie, "/api").is_success
        assert c.has_max_age(cookie, 60).is_success

    def test_attribute_mismatch(self, cookie):
        """Test the error of a different attribute."""
        result = c.has_path(cookie, "/")

        assert result.error == CookieAttributeMismatch("id", "path", "/", "/api")
        assert result.message == 'Expecting cookie "id" to have path "/" but was "/api"'
