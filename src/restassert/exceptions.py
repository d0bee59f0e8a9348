"""
=============================================================================
EXCEPTIONS
=============================================================================

Exceptions raised by the parsing layer.

=============================================================================
TWO KINDS OF FAILURE
=============================================================================

An assertion can go wrong in two very different ways:

    ┌─────────────────────────────────────────────────────────────────────┐
    │                        FAILURE TAXONOMY                             │
    ├─────────────────────────────────────────────────────────────────────┤
    │                                                                      │
    │   1. THE RESPONSE IS WRONG                                          │
    │      └── Header missing, duplicated, malformed, or different       │
    │      └── Reported as AssertionResult.failure(error)                │
    │      └── Never raised                                               │
    │                                                                      │
    │   2. THE TEST IS WRONG                                              │
    │      └── Expected literal is not a valid header value              │
    │      └── Raised immediately at the call site                       │
    │      └── One of the exceptions below                                │
    │                                                                      │
    └─────────────────────────────────────────────────────────────────────┘

Parsers always raise. The assertion layer catches the exception when it
parses an ACTUAL value and turns it into a failure, but lets it through
when it parses an EXPECTED value.

    RestAssertException (ValueError)
    ├── InvalidHeaderValueError
    │   └── IllegalHeaderDateError
    └── InvalidCookieError

=============================================================================
"""

from typing import Optional


class RestAssertException(ValueError):
    """Base class for every exception raised by restassert."""


class InvalidHeaderValueError(RestAssertException):
    """
    Raised when a raw header value does not follow its grammar.

    Carries the header name and the raw value so callers can build a
    precise failure message without re-parsing anything.
    """

    def __init__(self, header_name: str, raw_value: Optional[str], reason: Optional[str] = None):
        message = f'Header "{header_name}" has an invalid value: "{raw_value}"'
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)
        self.header_name = header_name
        self.raw_value = raw_value
        self.reason = reason


class IllegalHeaderDateError(InvalidHeaderValueError):
    """Raised when a value matches none of the supported HTTP-date formats."""

    def __init__(self, raw_value: Optional[str], header_name: str = "Date"):
        super().__init__(header_name, raw_value, "not a valid HTTP-date")


class InvalidCookieError(RestAssertException):
    """Raised when a Set-Cookie value cannot be turned into a cookie."""

    def __init__(self, reason: str, raw_value: Optional[str] = None):
        super().__init__(reason)
        self.reason = reason
        self.raw_value = raw_value
