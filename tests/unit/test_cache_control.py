"""
Unit tests for Cache-Control parsing and comparison.
"""

import pytest

from restassert.exceptions import InvalidHeaderValueError
from restassert.headers.cache_control import CACHE_CONTROL_PARSER, CacheControl, Visibility


def parse(raw):
    return CACHE_CONTROL_PARSER.parse(raw)


class TestCacheControlParser:
    """Tests for CacheControlParser."""

    def test_directives(self):
        """Test flags and valued directives."""
        cache_control = parse("public, max-age=3600, must-revalidate")

        assert cache_control.visibility == Visibility.PUBLIC
        assert cache_control.max_age == 3600
        assert cache_control.must_revalidate is True
        assert cache_control.no_store is False

    def test_accessors(self):
        """Test the remaining accessors."""
        cache_control = parse("private, s-maxage=10, no-cache, no-store, no-transform, proxy-revalidate, immutable")

        assert cache_control.visibility == Visibility.PRIVATE
        assert cache_control.s_maxage == 10
        assert cache_control.max_age is None
        assert cache_control.no_cache
        assert cache_control.no_store
        assert cache_control.no_transform
        assert cache_control.proxy_revalidate
        assert cache_control.immutable

    def test_names_lowercased(self):
        """Test that directive names are normalized."""
        cache_control = parse("No-Store, Max-Age=60")
        assert cache_control.has("no-store")
        assert cache_control.get("MAX-AGE") == "60"

    def test_quoted_delta_seconds(self):
        """Test a quoted number of seconds."""
        assert parse('max-age="60"').max_age == 60

    def test_extension_directive(self):
        """Test that unknown directives are kept."""
        assert parse("stale-while-revalidate=30, community=UCI").get("community") == "UCI"

    def test_quoted_list_value(self):
        """Test that commas inside a quoted value do not split it."""
        cache_control = parse('private="Set-Cookie, X-Foo", max-age=0')

        assert cache_control.get("private") == '"Set-Cookie, X-Foo"'
        assert cache_control.max_age == 0
        assert cache_control == parse('max-age=0,private="Set-Cookie, X-Foo"')
        assert cache_control != parse('private="Set-Cookie", max-age=0')
        assert parse(cache_control.serialize_value()) == cache_control

    def test_empty_members_skipped(self):
        """Test list members left empty."""
        assert parse("no-cache, , no-store,") == parse("no-cache, no-store")

    def test_duplicates_dropped(self):
        """Test a directive repeated with the same value."""
        assert parse("no-cache, no-cache").directives == (("no-cache", None),)

    @pytest.mark.parametrize("raw", [
        "max-age=soon",
        "max-age=-1",
        "s-maxage=1.5",
        "max-age=",
        "no cache",
        "=60",
        ", ,",
    ])
    def test_invalid(self, raw):
        """Test values breaking the grammar."""
        with pytest.raises(InvalidHeaderValueError) as exc_info:
            parse(raw)

        assert exc_info.value.header_name == "Cache-Control"


class TestCacheControlEquality:
    """Tests for CacheControl comparison."""

    def test_order_insensitive(self):
        """Test that directive order is ignored."""
        assert parse("public, no-transform, no-store") == parse("public, no-store, no-transform")

    def test_name_case_insensitive(self):
        """Test that directive names are compared case-insensitively."""
        assert parse("Max-Age=60") == parse("max-age=60")

    def test_value_compared_as_written(self):
        """Test that values are compared exactly."""
        assert parse("max-age=60") != parse("max-age=060")

    def test_missing_directive(self):
        """Test that a missing directive makes values differ."""
        assert parse("no-cache") != parse("no-cache, no-store")


class TestCacheControlBuilder:
    """Tests for CacheControlBuilder."""

    def test_build(self):
        """Test building a value."""
        cache_control = (CacheControl.builder()
            .visibility(Visibility.PUBLIC)
            .max_age(3600)
            .must_revalidate()
            .build())

        assert cache_control == parse("must-revalidate, PUBLIC, max-age=3600")
        assert str(cache_control) == "public, max-age=3600, must-revalidate"

    def test_serialized_value_parses_back(self):
        """Test that serialization is stable."""
        cache_control = CacheControl.builder().no_cache().no_store().s_maxage(0).build()
        assert parse(cache_control.serialize_value()) == cache_control
