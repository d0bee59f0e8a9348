"""
Unit tests for status code assertions.
"""

import pytest

from restassert.assertions import http_response as r
from restassert.assertions.errors import StatusInRange, StatusMismatch, StatusNotInRange
from restassert.http import HTTPStatus, ResponseBuilder, StatusRange


def response(status):
    return ResponseBuilder().status(status).build()


class TestStatusEqual:
    """Tests for exact status checks."""

    @pytest.mark.parametrize("check,status", [
        (r.is_ok, 200),
        (r.is_created, 201),
        (r.is_accepted, 202),
        (r.is_no_content, 204),
        (r.is_reset_content, 205),
        (r.is_partial_content, 206),
        (r.is_moved_permanently, 301),
        (r.is_moved_temporarily, 302),
        (r.is_not_modified, 304),
        (r.is_bad_request, 400),
        (r.is_unauthorized, 401),
        (r.is_forbidden, 403),
        (r.is_not_found, 404),
        (r.is_method_not_allowed, 405),
        (r.is_not_acceptable, 406),
        (r.is_conflict, 409),
        (r.is_pre_condition_failed, 412),
        (r.is_unsupported_media_type, 415),
        (r.is_internal_server_error, 500),
        (r.is_not_implemented, 501),
    ])
    def test_shortcuts(self, check, status):
        """Test each shortcut against its own code and another one."""
        assert check(response(status)).is_success
        assert check(response(599)).is_failure

    def test_mismatch(self):
        """Test the error of a different code."""
        result = r.is_ok(response(404))

        assert result.error == StatusMismatch(200, 404)
        assert result.message == "Expecting status code to be 200 but was 404"

    def test_is_status_equal(self):
        """Test any code, including an enum member."""
        assert r.is_status_equal(response(418), 418).is_success
        assert r.is_status_equal(response(HTTPStatus.GONE), 410).is_success


class TestStatusRanges:
    """Tests for status class checks."""

    @pytest.mark.parametrize("check,inside,outside", [
        (r.is_success, 299, 300),
        (r.is_redirection, 300, 299),
        (r.is_client_error, 499, 500),
        (r.is_server_error, 500, 499),
    ])
    def test_in_range(self, check, inside, outside):
        """Test inclusive bounds."""
        assert check(response(inside)).is_success
        assert check(response(outside)).is_failure

    @pytest.mark.parametrize("check,inside,outside", [
        (r.is_not_success, 200, 300),
        (r.is_not_redirection, 399, 400),
        (r.is_not_client_error, 400, 500),
        (r.is_not_server_error, 599, 200),
    ])
    def test_out_of_range(self, check, inside, outside):
        """Test negated ranges."""
        assert check(response(outside)).is_success
        assert check(response(inside)).is_failure

    def test_range_errors(self):
        """Test the errors of range checks."""
        assert r.is_success(response(404)).error == StatusNotInRange(200, 299, 404)
        assert r.is_not_success(response(204)).error == StatusInRange(200, 299, 204)

    def test_between(self):
        """Test custom bounds."""
        assert r.is_status_between(response(201), 200, 201).is_success
        assert r.is_status_out_of(response(202), 200, 201).is_success

    def test_invalid_bounds(self):
        """Test that reversed bounds raise."""
        with pytest.raises(ValueError):
            r.is_status_between(response(200), 299, 200)

    def test_status_range_membership(self):
        """Test StatusRange containment."""
        assert 404 in StatusRange.CLIENT_ERROR
        assert 500 not in StatusRange.CLIENT_ERROR
        assert HTTPStatus.NOT_FOUND.phrase == "Not Found"
