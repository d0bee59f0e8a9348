"""
=============================================================================
STRUCTURED HEADER VALUES
=============================================================================

One module per header grammar. Each provides a value class (parsed,
comparable, serializable) and a parser instance:

    ┌──────────────────────────────┬──────────────────────────┬──────────┐
    │  Module                      │  Value                   │  Order   │
    ├──────────────────────────────┼──────────────────────────┼──────────┤
    │  media_type                  │  MediaType               │  no      │
    │  cache_control               │  CacheControl            │  no      │
    │  content_security_policy     │  ContentSecurityPolicy   │  no      │
    │  frame_options               │  FrameOptions            │  -       │
    │  xss_protection              │  XssProtection           │  no      │
    │  strict_transport_security   │  StrictTransportSecurity │  no      │
    │  content_encoding            │  ContentEncoding         │  YES     │
    │  content_type_options        │  ContentTypeOptions      │  -       │
    │  token_list                  │  TokenList               │  no      │
    └──────────────────────────────┴──────────────────────────┴──────────┘

    value = CacheControl.parser().parse("public, max-age=60")
    assert value == CacheControl.parser().parse("max-age=60, PUBLIC")

=============================================================================
"""

from .base import HttpHeaderParser, HttpHeaderValue
from .cache_control import CacheControl, CacheControlBuilder, CacheControlParser, Visibility
from .content_encoding import ContentEncoding, ContentEncodingParser
from .content_security_policy import (
    ContentSecurityPolicy,
    ContentSecurityPolicyBuilder,
    ContentSecurityPolicyParser,
)
from .content_type_options import ContentTypeOptions, ContentTypeOptionsParser
from .frame_options import FrameOptions, FrameOptionsDirective, FrameOptionsParser
from .media_type import MediaType, MediaTypeParser
from .strict_transport_security import (
    StrictTransportSecurity,
    StrictTransportSecurityBuilder,
    StrictTransportSecurityParser,
)
from .token_list import (
    ALLOW_HEADERS_PARSER,
    ALLOW_METHODS_PARSER,
    EXPOSE_HEADERS_PARSER,
    RequestMethod,
    TokenList,
    TokenListParser,
)
from .xss_protection import XssProtection, XssProtectionParser

__all__ = [
    "HttpHeaderParser",
    "HttpHeaderValue",
    "CacheControl",
    "CacheControlBuilder",
    "CacheControlParser",
    "Visibility",
    "ContentEncoding",
    "ContentEncodingParser",
    "ContentSecurityPolicy",
    "ContentSecurityPolicyBuilder",
    "ContentSecurityPolicyParser",
    "ContentTypeOptions",
    "ContentTypeOptionsParser",
    "FrameOptions",
    "FrameOptionsDirective",
    "FrameOptionsParser",
    "MediaType",
    "MediaTypeParser",
    "StrictTransportSecurity",
    "StrictTransportSecurityBuilder",
    "StrictTransportSecurityParser",
    "ALLOW_HEADERS_PARSER",
    "ALLOW_METHODS_PARSER",
    "EXPOSE_HEADERS_PARSER",
    "RequestMethod",
    "TokenList",
    "TokenListParser",
    "XssProtection",
    "XssProtectionParser",
]
