"""
Unit tests for the security header grammars.
"""

import logging

import pytest

from restassert.exceptions import InvalidHeaderValueError
from restassert.headers.content_security_policy import (
    CONTENT_SECURITY_POLICY_PARSER,
    SELF,
    ContentSecurityPolicy,
)
from restassert.headers.content_type_options import CONTENT_TYPE_OPTIONS_PARSER, ContentTypeOptions
from restassert.headers.frame_options import FRAME_OPTIONS_PARSER, FrameOptions, FrameOptionsDirective
from restassert.headers.strict_transport_security import (
    STRICT_TRANSPORT_SECURITY_PARSER,
    StrictTransportSecurity,
)
from restassert.headers.xss_protection import XSS_PROTECTION_PARSER, XssProtection


class TestContentSecurityPolicy:
    """Tests for Content-Security-Policy."""

    def parse(self, raw):
        return CONTENT_SECURITY_POLICY_PARSER.parse(raw)

    def test_sources(self):
        """Test reading the sources of a directive."""
        csp = self.parse("default-src 'self'; script-src 'self' https://cdn.example.com")

        assert csp.sources("default-src") == ("'self'",)
        assert csp.sources("SCRIPT-SRC") == ("'self'", "https://cdn.example.com")
        assert csp.sources("img-src") == ()

    def test_order_insensitive(self):
        """Test that directive and source order are ignored."""
        first = self.parse("default-src 'self'; script-src 'self' cdn.com")
        second = self.parse("script-src cdn.com 'self'; DEFAULT-SRC 'self'")
        assert first == second

    def test_sources_case_sensitive(self):
        """Test that sources are compared as written."""
        assert self.parse("default-src 'self'") != self.parse("default-src 'SELF'")

    def test_directive_without_source(self):
        """Test a valueless directive."""
        csp = self.parse("upgrade-insecure-requests; default-src https:")
        assert csp.sources("upgrade-insecure-requests") == ()

    def test_empty_members_skipped(self):
        """Test stray separators."""
        assert self.parse("; default-src 'self';;") == self.parse("default-src 'self'")

    def test_duplicate_directive_first_wins(self, caplog):
        """Test that a repeated directive is ignored with a warning."""
        with caplog.at_level(logging.WARNING, logger="restassert"):
            csp = self.parse("default-src 'self'; default-src 'none'")

        assert csp == self.parse("default-src 'self'")
        assert "default-src has already been parsed" in caplog.text

    @pytest.mark.parametrize("raw", [
        "foo-src 'self'",
        "default-src 'self'; scripts-src 'self'",
        ";",
    ])
    def test_invalid(self, raw):
        """Test unknown directives and empty policies."""
        with pytest.raises(InvalidHeaderValueError):
            self.parse(raw)

    def test_builder(self):
        """Test building a policy."""
        csp = (ContentSecurityPolicy.builder()
            .default_src(SELF)
            .script_src(SELF, "https://cdn.example.com")
            .upgrade_insecure_requests()
            .build())

        assert str(csp) == "default-src 'self'; script-src 'self' https://cdn.example.com; upgrade-insecure-requests"
        assert self.parse(csp.serialize_value()) == csp

    def test_builder_unknown_directive(self):
        """Test that the builder rejects unknown directives."""
        with pytest.raises(ValueError):
            ContentSecurityPolicy.builder().directive("foo-src", SELF)


class TestFrameOptions:
    """Tests for X-Frame-Options."""

    def parse(self, raw):
        return FRAME_OPTIONS_PARSER.parse(raw)

    def test_keywords(self):
        """Test every keyword, case-insensitive."""
        assert self.parse("DENY") == FrameOptions.deny()
        assert self.parse("sameorigin") == FrameOptions.same_origin()
        assert self.parse("SameOrigin").directive == FrameOptionsDirective.SAMEORIGIN

    def test_allow_from(self):
        """Test ALLOW-FROM and its origin."""
        frame_options = self.parse("allow-from https://example.com/")

        assert frame_options == FrameOptions.allow_from("https://example.com/")
        assert str(frame_options) == "ALLOW-FROM https://example.com/"

    def test_allow_from_uri_compared_as_written(self):
        """Test that the origin keeps its case."""
        assert self.parse("ALLOW-FROM https://A.com/") != self.parse("ALLOW-FROM https://a.com/")

    @pytest.mark.parametrize("raw", [
        "same-origin",
        "ALLOWALL",
        "DENY https://example.com/",
        "ALLOW-FROM",
        "ALLOW-FROM https://a.com/ https://b.com/",
    ])
    def test_invalid(self, raw):
        """Test values that are not keywords of the header."""
        with pytest.raises(InvalidHeaderValueError) as exc_info:
            self.parse(raw)

        assert exc_info.value.header_name == "X-Frame-Options"


class TestXssProtection:
    """Tests for X-XSS-Protection."""

    def parse(self, raw):
        return XSS_PROTECTION_PARSER.parse(raw)

    def test_disabled(self):
        """Test 0."""
        assert self.parse("0") == XssProtection.disable()

    def test_enabled(self):
        """Test 1 with and without mode."""
        assert self.parse("1") == XssProtection.enable()
        assert self.parse("1; mode=block") == XssProtection.enable_block()

    def test_whitespace_and_case(self):
        """Test that spacing and keyword case are ignored."""
        assert self.parse("1 ;MODE = Block") == XssProtection.enable_block()

    def test_report(self):
        """Test the report option."""
        xss = self.parse("1; mode=block; report=https://example.com/xss")

        assert xss.mode_block is True
        assert xss.report == "https://example.com/xss"
        assert str(xss) == "1; mode=block; report=https://example.com/xss"

    def test_serialize(self):
        """Test the canonical forms."""
        assert str(XssProtection.disable()) == "0"
        assert str(XssProtection.enable_block()) == "1; mode=block"

    @pytest.mark.parametrize("raw", [
        "2",
        "yes",
        "0; mode=block",
        "1; mode",
        "1; mode=allow",
        "1; mode=block; mode=block",
        "1; level=high",
    ])
    def test_invalid(self, raw):
        """Test values breaking the grammar."""
        with pytest.raises(InvalidHeaderValueError):
            self.parse(raw)


class TestStrictTransportSecurity:
    """Tests for Strict-Transport-Security."""

    def parse(self, raw):
        return STRICT_TRANSPORT_SECURITY_PARSER.parse(raw)

    def test_all_directives(self):
        """Test max-age with both flags."""
        hsts = self.parse("max-age=31536000; includeSubDomains; preload")
        assert hsts == StrictTransportSecurity(31536000, include_sub_domains=True, preload=True)

    def test_order_case_and_quotes(self):
        """Test that order, case and quoting do not matter."""
        assert self.parse('preload; INCLUDESUBDOMAINS; Max-Age="31536000"') == \
            self.parse("max-age=31536000; includeSubDomains; preload")

    def test_duplicate_directive_first_wins(self, caplog):
        """Test that a repeated directive is ignored with a warning."""
        with caplog.at_level(logging.WARNING, logger="restassert"):
            hsts = self.parse("max-age=10; max-age=20")

        assert hsts.max_age == 10
        assert "max-age has already been parsed" in caplog.text

    @pytest.mark.parametrize("raw", [
        "includeSubDomains",
        "max-age",
        "max-age=soon",
        "max-age=-1",
        "max-age=10; foo",
        "max-age=10; preload=yes",
    ])
    def test_invalid(self, raw):
        """Test values breaking the grammar."""
        with pytest.raises(InvalidHeaderValueError):
            self.parse(raw)

    def test_builder(self):
        """Test building a value."""
        hsts = StrictTransportSecurity.builder(3600).include_sub_domains().build()

        assert hsts == self.parse("includeSubDomains; max-age=3600")
        assert str(hsts) == "max-age=3600; includeSubDomains"

    def test_builder_negative_max_age(self):
        """Test that max-age cannot be negative."""
        with pytest.raises(ValueError):
            StrictTransportSecurity.builder(-1)


class TestContentTypeOptions:
    """Tests for X-Content-Type-Options."""

    def test_nosniff(self):
        """Test the only defined value, any case."""
        assert CONTENT_TYPE_OPTIONS_PARSER.parse("nosniff") == ContentTypeOptions.nosniff()
        assert CONTENT_TYPE_OPTIONS_PARSER.parse("NoSniff") == ContentTypeOptions.nosniff()

    def test_other_value(self):
        """Test that anything else is rejected."""
        with pytest.raises(InvalidHeaderValueError):
            CONTENT_TYPE_OPTIONS_PARSER.parse("sniff")
