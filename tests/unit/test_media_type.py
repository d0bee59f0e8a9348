"""
Unit tests for media type parsing and comparison.
"""

import pytest

from restassert.exceptions import InvalidHeaderValueError
from restassert.headers.media_type import (
    APPLICATION_JSON,
    MEDIA_TYPE_PARSER,
    MediaType,
)


def parse(raw):
    return MEDIA_TYPE_PARSER.parse(raw)


class TestMediaTypeParser:
    """Tests for MediaTypeParser."""

    def test_parse_with_charset(self):
        """Test a media type with a parameter."""
        media_type = parse("application/json; charset=utf-8")

        assert media_type.type == "application"
        assert media_type.subtype == "json"
        assert media_type.mime_type == "application/json"
        assert media_type.charset == "utf-8"

    def test_parse_without_parameters(self):
        """Test a bare type/subtype."""
        media_type = parse("text/html")
        assert media_type.parameters == ()
        assert media_type.charset is None

    def test_wildcards(self):
        """Test that wildcards are accepted."""
        assert parse("*/*").mime_type == "*/*"
        assert parse("text/*").subtype == "*"

    def test_quoted_value(self):
        """Test that quotes around a parameter value are removed."""
        assert parse('text/plain; charset="utf-8"').charset == "utf-8"

    def test_semicolon_inside_quotes(self):
        """Test that a quoted ';' does not split parameters."""
        media_type = parse('text/plain; title="a;b"; charset=utf-8')
        assert media_type.parameter_map == {"title": "a;b", "charset": "utf-8"}

    def test_duplicate_parameter_first_wins(self):
        """Test that a repeated parameter keeps its first value."""
        assert parse("text/plain; charset=utf-8; charset=ascii").charset == "utf-8"

    def test_empty_parameter_skipped(self):
        """Test a trailing ';'."""
        assert parse("text/plain;").parameters == ()

    @pytest.mark.parametrize("raw", [
        "json",
        "application/",
        "/json",
        "app lication/json",
        "application/json; charset",
        "application/json; =utf-8",
    ])
    def test_invalid(self, raw):
        """Test values breaking the grammar."""
        with pytest.raises(InvalidHeaderValueError) as exc_info:
            parse(raw)

        assert exc_info.value.header_name == "Content-Type"

    @pytest.mark.parametrize("raw", [None, "", "   "])
    def test_blank(self, raw):
        """Test that blank values are rejected."""
        with pytest.raises(InvalidHeaderValueError):
            parse(raw)


class TestMediaTypeEquality:
    """Tests for MediaType comparison."""

    def test_case_and_order_insensitive(self):
        """Test that names are case-insensitive and parameter order is ignored."""
        assert parse("text/html; charset=UTF-8; level=1") == parse("TEXT/HTML;level=1;CHARSET=UTF-8")

    def test_parameter_values_case_sensitive(self):
        """Test that parameter values keep their case."""
        assert parse("text/html; charset=UTF-8") != parse("text/html; charset=utf-8")

    def test_quoted_and_token_values_equal(self):
        """Test that quoting does not change the value."""
        assert parse('text/plain; charset="utf-8"') == parse("text/plain; charset=utf-8")

    def test_parameters_matter(self):
        """Test that a missing parameter makes values differ."""
        assert parse("application/json") != parse("application/json; charset=utf-8")

    def test_hash_consistent_with_equality(self):
        """Test that equal values hash alike."""
        assert hash(parse("a/b; x=1; y=2")) == hash(parse("A/B; Y=2; X=1"))

    def test_matches_ignores_parameters(self):
        """Test matches()."""
        assert parse("application/json; charset=utf-8").matches(APPLICATION_JSON)
        assert not parse("text/json").matches(APPLICATION_JSON)

    def test_without_parameters(self):
        """Test removing parameters."""
        assert parse("application/json; charset=utf-8").without_parameters() == APPLICATION_JSON


class TestMediaTypeSerialization:
    """Tests for MediaType serialization."""

    def test_of(self):
        """Test building from parts."""
        media_type = MediaType.of("Text", "HTML", charset="utf-8")
        assert str(media_type) == "text/html; charset=utf-8"

    def test_non_token_value_quoted(self):
        """Test that values with spaces are written quoted."""
        media_type = parse('multipart/form-data; boundary="a b"')
        assert media_type.serialize_value() == 'multipart/form-data; boundary="a b"'

    def test_serialized_value_parses_back(self):
        """Test that serialization is stable."""
        media_type = parse('TEXT/Plain ;  Charset=utf-8;title="x;y"')
        assert parse(media_type.serialize_value()) == media_type
