"""
Canonical forms: every parsed value serializes to a string that parses
back into an equal value.
"""

import pytest

from restassert.common.dates import format_http_date, parse_http_date
from restassert.headers.cache_control import CACHE_CONTROL_PARSER
from restassert.headers.content_encoding import CONTENT_ENCODING_PARSER
from restassert.headers.content_security_policy import CONTENT_SECURITY_POLICY_PARSER
from restassert.headers.content_type_options import CONTENT_TYPE_OPTIONS_PARSER
from restassert.headers.frame_options import FRAME_OPTIONS_PARSER
from restassert.headers.media_type import MEDIA_TYPE_PARSER
from restassert.headers.strict_transport_security import STRICT_TRANSPORT_SECURITY_PARSER
from restassert.headers.token_list import ALLOW_HEADERS_PARSER, ALLOW_METHODS_PARSER
from restassert.headers.xss_protection import XSS_PROTECTION_PARSER


SAMPLES = [
    (MEDIA_TYPE_PARSER, 'Text/HTML ; Charset=UTF-8; title="a b"'),
    (CACHE_CONTROL_PARSER, 'Public, Max-Age=60, no-store, private="set-cookie"'),
    (CONTENT_SECURITY_POLICY_PARSER, "script-src 'self' cdn.com; DEFAULT-SRC 'none';"),
    (FRAME_OPTIONS_PARSER, "allow-from https://example.com/"),
    (FRAME_OPTIONS_PARSER, "deny"),
    (XSS_PROTECTION_PARSER, "1 ; mode=BLOCK ; report=https://example.com/r"),
    (XSS_PROTECTION_PARSER, "0"),
    (STRICT_TRANSPORT_SECURITY_PARSER, 'preload; Max-Age="60"'),
    (CONTENT_ENCODING_PARSER, "GZIP, , br"),
    (CONTENT_TYPE_OPTIONS_PARSER, "NOSNIFF"),
    (ALLOW_HEADERS_PARSER, "X-Foo ,x-bar"),
    (ALLOW_METHODS_PARSER, "GET,POST"),
]


class TestCanonicalForms:
    """Tests for parse(serialize(parse(x))) == parse(x)."""

    @pytest.mark.parametrize("parser,raw", SAMPLES)
    def test_idempotent(self, parser, raw):
        """Test that the canonical form parses back to the same value."""
        value = parser.parse(raw)
        assert parser.parse(value.serialize_value()) == value

    @pytest.mark.parametrize("parser,raw", SAMPLES)
    def test_canonical_form_stable(self, parser, raw):
        """Test that serializing twice gives the same text."""
        canonical = parser.parse(raw).serialize_value()
        assert parser.parse(canonical).serialize_value() == canonical

    @pytest.mark.parametrize("raw", [
        "Wednesday, 15-Nov-95 12:45:26 GMT",
        "Wed Nov 15 12:45:26 1995",
        "Wed, 15 Nov 1995 12:45:26 GMT",
    ])
    def test_dates(self, raw):
        """Test that dates share one canonical form."""
        canonical = format_http_date(parse_http_date(raw))

        assert canonical == "Wed, 15 Nov 1995 12:45:26 GMT"
        assert format_http_date(parse_http_date(canonical)) == canonical
