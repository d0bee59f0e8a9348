"""
=============================================================================
WELL-KNOWN HEADERS
=============================================================================

RFC 7230 section 3.2.2 allows a header to appear several times only when
its value is a comma-separated list; the occurrences are then equivalent
to a single header whose values are joined with commas.

    Cache-Control: no-cache              Cache-Control: no-cache, no-store
    Cache-Control: no-store       ==

Headers whose value is NOT a list (Content-Type, ETag, Location, ...)
must appear at most once. Seeing two of them means the server is broken,
so the assertions report that before even looking at the values.

    ┌──────────────────────────────────┬───────────────┐
    │  Header                          │ Single value  │
    ├──────────────────────────────────┼───────────────┤
    │  Content-Type, ETag, Location    │      yes      │
    │  Last-Modified, Expires          │      yes      │
    │  Access-Control-*                │      yes      │
    │  Cache-Control, Set-Cookie, ...  │      no       │
    └──────────────────────────────────┴───────────────┘

=============================================================================
"""

from enum import Enum
from typing import Iterable, Optional


class HttpHeader(Enum):
    """Well-known response headers and whether they must be single-valued."""

    CONTENT_TYPE = ("Content-Type", True)
    CONTENT_ENCODING = ("Content-Encoding", True)
    CONTENT_LENGTH = ("Content-Length", False)
    CONTENT_DISPOSITION = ("Content-Disposition", True)
    LAST_MODIFIED = ("Last-Modified", True)
    EXPIRES = ("Expires", True)
    ETAG = ("ETag", True)
    LOCATION = ("Location", True)
    CACHE_CONTROL = ("Cache-Control", False)
    PRAGMA = ("Pragma", False)
    CONTENT_SECURITY_POLICY = ("Content-Security-Policy", False)
    X_XSS_PROTECTION = ("X-XSS-Protection", False)
    X_CONTENT_TYPE_OPTIONS = ("X-Content-Type-Options", False)
    X_FRAME_OPTIONS = ("X-Frame-Options", False)
    SET_COOKIE = ("Set-Cookie", False)
    ACCESS_CONTROL_ALLOW_ORIGIN = ("Access-Control-Allow-Origin", True)
    ACCESS_CONTROL_ALLOW_HEADERS = ("Access-Control-Allow-Headers", True)
    ACCESS_CONTROL_EXPOSE_HEADERS = ("Access-Control-Expose-Headers", True)
    ACCESS_CONTROL_ALLOW_METHODS = ("Access-Control-Allow-Methods", True)
    ACCESS_CONTROL_ALLOW_CREDENTIALS = ("Access-Control-Allow-Credentials", True)
    ACCESS_CONTROL_MAX_AGE = ("Access-Control-Max-Age", True)
    STRICT_TRANSPORT_SECURITY = ("Strict-Transport-Security", True)

    def __init__(self, header_name: str, single_valued: bool):
        self.header_name = header_name
        self.single_valued = single_valued

    def __str__(self) -> str:
        return self.header_name

    @classmethod
    def find(cls, name: str) -> Optional["HttpHeader"]:
        """
        Case-insensitive lookup by header name.

        Examples:
            >>> HttpHeader.find("content-type")
            <HttpHeader.CONTENT_TYPE: ('Content-Type', True)>
            >>> HttpHeader.find("X-Custom") is None
            True
        """
        return _BY_NAME.get(name.lower())


_BY_NAME = {header.header_name.lower(): header for header in HttpHeader}


def is_single_valued(name: str, extra: Iterable[str] = ()) -> bool:
    """
    Check whether a header must appear at most once.

    Args:
        name: Header name, any case.
        extra: Additional header names to treat as single-valued.

    Returns:
        True for single-valued headers of the table or of extra. Unknown
        headers are considered multi-valued.
    """
    lower = name.lower()
    if any(lower == e.lower() for e in extra):
        return True
    header = HttpHeader.find(name)
    return header is not None and header.single_valued
