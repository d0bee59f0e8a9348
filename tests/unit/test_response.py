"""
Unit tests for the in-memory HTTP response and its builder.
"""

import json

import pytest

from restassert.exceptions import InvalidCookieError
from restassert.http import (
    Cookie,
    HttpHeader,
    HTTPStatus,
    InMemoryHttpResponse,
    ResponseBuilder,
    created,
    is_single_valued,
    no_content,
    not_found,
    ok,
)


class TestInMemoryHttpResponse:
    """Tests for InMemoryHttpResponse."""

    def test_header_lookup_case_insensitive(self):
        """Test that header names match in any case."""
        response = InMemoryHttpResponse(headers=[("Content-Type", "text/plain")])

        assert response.header("content-type") == ["text/plain"]
        assert response.has_header("CONTENT-TYPE")

    def test_duplicates_kept_in_order(self):
        """Test that every occurrence is returned."""
        response = InMemoryHttpResponse(headers=[
            ("Cache-Control", "no-cache"),
            ("X-Other", "1"),
            ("cache-control", "no-store"),
        ])

        assert response.header("Cache-Control") == ["no-cache", "no-store"]

    def test_absent_header(self):
        """Test an absent header."""
        response = InMemoryHttpResponse()

        assert response.header("ETag") == []
        assert not response.has_header("ETag")

    def test_status_is_int(self):
        """Test that an enum status reads as an int."""
        assert InMemoryHttpResponse(status_code=HTTPStatus.CREATED).status() == 201

    def test_cookies(self):
        """Test that Set-Cookie headers are parsed."""
        response = InMemoryHttpResponse(headers=[("Set-Cookie", "a=1"), ("Set-Cookie", "b=2; Secure")])

        assert response.cookies() == [Cookie("a", "1"), Cookie("b", "2", secure=True)]

    def test_invalid_cookie_raises(self):
        """Test that a malformed Set-Cookie raises from cookies()."""
        response = InMemoryHttpResponse(headers=[("Set-Cookie", "nope")])

        with pytest.raises(InvalidCookieError):
            response.cookies()


class TestResponseBuilder:
    """Tests for ResponseBuilder."""

    def test_status(self):
        """Test setting status code."""
        assert ResponseBuilder().status(HTTPStatus.NOT_FOUND).build().status() == 404

    def test_header_appends(self):
        """Test that the same header can be added twice."""
        response = (ResponseBuilder()
            .header("Cache-Control", "no-cache")
            .header("Cache-Control", "no-store")
            .build())

        assert response.header("Cache-Control") == ["no-cache", "no-store"]

    def test_headers_dict(self):
        """Test adding several headers at once."""
        response = ResponseBuilder().headers({"ETag": "abc", "Pragma": "no-cache"}).build()
        assert response.header("ETag") == ["abc"]
        assert response.header("Pragma") == ["no-cache"]

    def test_json_body(self):
        """Test JSON body encoding."""
        data = {"name": "John", "age": 30}
        response = ResponseBuilder().json(data).build()

        assert response.header("Content-Type") == ["application/json; charset=utf-8"]
        assert json.loads(response.body()) == data

    def test_pretty_json(self):
        """Test indented JSON."""
        response = ResponseBuilder().json({"a": 1}, pretty=True).build()
        assert response.body() == '{\n  "a": 1\n}'

    def test_text_and_html(self):
        """Test text bodies and their Content-Type."""
        text = ResponseBuilder().text("hello").build()
        html = ResponseBuilder().html("<p>hi</p>").build()

        assert text.body() == "hello"
        assert text.header("Content-Type") == ["text/plain; charset=utf-8"]
        assert html.header("Content-Type") == ["text/html; charset=utf-8"]

    def test_bytes_body(self):
        """Test that bytes are decoded."""
        assert ResponseBuilder().body("é".encode("utf-8")).build().body() == "é"

    def test_cookie(self):
        """Test adding cookies from a Cookie or a raw value."""
        response = (ResponseBuilder()
            .cookie(Cookie("a", "1"))
            .cookie("b=2")
            .build())

        assert response.header("Set-Cookie") == ["a=1; SameSite=Lax", "b=2"]

    def test_builds_independent_responses(self):
        """Test that later changes do not leak into built responses."""
        builder = ResponseBuilder().header("X-A", "1")
        first = builder.build()
        builder.header("X-B", "2")

        assert not first.has_header("X-B")


class TestConvenienceFunctions:
    """Tests for convenience response functions."""

    def test_ok(self):
        """Test 200 responses."""
        assert ok().status() == 200
        assert json.loads(ok({"a": 1}).body()) == {"a": 1}
        assert ok("hi").header("Content-Type") == ["text/plain; charset=utf-8"]

    def test_created(self):
        """Test 201 with Location."""
        response = created("/users/1", {"id": 1})

        assert response.status() == 201
        assert response.header("Location") == ["/users/1"]

    def test_no_content(self):
        """Test 204."""
        response = no_content()
        assert response.status() == 204
        assert response.body() == ""

    def test_not_found(self):
        """Test 404."""
        response = not_found()
        assert response.status() == 404
        assert response.body() == "Not Found"


class TestHeaderTable:
    """Tests for the table of well-known headers."""

    def test_find(self):
        """Test case-insensitive lookup."""
        assert HttpHeader.find("content-type") is HttpHeader.CONTENT_TYPE
        assert HttpHeader.find("X-Custom") is None

    def test_single_valued(self):
        """Test the single-value flags."""
        assert is_single_valued("ETag")
        assert is_single_valued("content-type")
        assert not is_single_valued("Cache-Control")
        assert not is_single_valued("Set-Cookie")
        assert not is_single_valued("X-Custom")
        assert is_single_valued("X-Custom", extra=("x-custom",))
