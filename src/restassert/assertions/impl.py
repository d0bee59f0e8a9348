"""
=============================================================================
ASSERTION PIPELINE
=============================================================================

Each assertion is a small object with a handle(response) method that
returns an AssertionResult. Header assertions share one pipeline:

    ┌─────────────────────────────────────────────────────────────────────┐
    │                                                                      │
    │   response.header(name)                                              │
    │          │                                                           │
    │          ▼                                                           │
    │   ┌──────────────┐   no values    ┌──────────────────────────────┐  │
    │   │  PRESENCE    │ ─────────────► │ failure(MissingHeader)       │  │
    │   └──────┬───────┘                └──────────────────────────────┘  │
    │          ▼                                                           │
    │   ┌──────────────┐   single-valued header seen twice                │
    │   │ SINGLE VALUE │ ─────────────► failure(MultiValuedHeader...)     │
    │   └──────┬───────┘                                                   │
    │          ▼                                                           │
    │   ┌──────────────┐   actual value breaks the grammar                │
    │   │ PARSE ACTUAL │ ─────────────► failure(InvalidHeaderValue)       │
    │   └──────┬───────┘                                                   │
    │          ▼                                                           │
    │   ┌──────────────┐   values differ                                   │
    │   │   COMPARE    │ ─────────────► failure(ValueMismatch)            │
    │   └──────┬───────┘                                                   │
    │          ▼                                                           │
    │      success()                                                       │
    │                                                                      │
    └─────────────────────────────────────────────────────────────────────┘

The single-value check runs BEFORE any parsing: two Content-Type headers
are a defect of the response whatever their content.

The EXPECTED value is parsed by the caller, before the assertion object
is even built. An invalid expected literal therefore raises right away
instead of being reported as a failure of the response.

=============================================================================
"""

import logging
from abc import ABC, abstractmethod
from datetime import datetime
from typing import Iterable, List, Optional, Sequence

from ..common.dates import format_http_date, parse_http_date
from ..exceptions import InvalidCookieError, InvalidHeaderValueError
from ..headers.base import HttpHeaderParser, HttpHeaderValue
from ..headers.media_type import MediaType
from ..http.cookies import Cookie
from ..http.header_names import HttpHeader, is_single_valued
from ..http.response import HttpResponse
from .errors import (
    CharsetMismatch,
    InvalidHeaderValue,
    MimeTypeMismatch,
    MissingCharset,
    MissingCookie,
    MissingHeader,
    MultiValuedHeaderViolation,
    StatusInRange,
    StatusMismatch,
    StatusNotInRange,
    UnexpectedCookie,
    UnexpectedHeader,
    ValueMismatch,
)
from .result import AssertionResult

logger = logging.getLogger(__name__)

CONTENT_TYPE = HttpHeader.CONTENT_TYPE.header_name
SET_COOKIE = HttpHeader.SET_COOKIE.header_name


class HttpResponseAssertion(ABC):
    """An assertion that can be run against an HttpResponse."""

    @abstractmethod
    def handle(self, response: HttpResponse) -> AssertionResult:
        """Run the assertion."""


# =============================================================================
# STATUS CODE
# =============================================================================

class StatusEqualAssertion(HttpResponseAssertion):
    def __init__(self, expected: int):
        self.expected = int(expected)

    def handle(self, response: HttpResponse) -> AssertionResult:
        actual = response.status()
        if actual == self.expected:
            return AssertionResult.success()
        return AssertionResult.failure(StatusMismatch(self.expected, actual))


class StatusBetweenAssertion(HttpResponseAssertion):
    """Status within [start, end], both inclusive."""

    def __init__(self, start: int, end: int):
        if start > end:
            raise ValueError(f"Lower bound {start} must be lower than upper bound {end}")
        self.start = start
        self.end = end

    def handle(self, response: HttpResponse) -> AssertionResult:
        actual = response.status()
        if self.start <= actual <= self.end:
            return AssertionResult.success()
        return AssertionResult.failure(StatusNotInRange(self.start, self.end, actual))


class StatusOutOfAssertion(StatusBetweenAssertion):
    """Status outside [start, end]."""

    def handle(self, response: HttpResponse) -> AssertionResult:
        actual = response.status()
        if self.start <= actual <= self.end:
            return AssertionResult.failure(StatusInRange(self.start, self.end, actual))
        return AssertionResult.success()


# =============================================================================
# HEADER PRESENCE
# =============================================================================

class HasHeaderAssertion(HttpResponseAssertion):
    def __init__(self, name: str):
        self.name = name

    def handle(self, response: HttpResponse) -> AssertionResult:
        if response.has_header(self.name):
            return AssertionResult.success()
        return AssertionResult.failure(MissingHeader(self.name))


class DoesNotHaveHeaderAssertion(HttpResponseAssertion):
    def __init__(self, name: str):
        self.name = name

    def handle(self, response: HttpResponse) -> AssertionResult:
        if response.has_header(self.name):
            return AssertionResult.failure(UnexpectedHeader(self.name))
        return AssertionResult.success()


# =============================================================================
# HEADER VALUES
# =============================================================================

class AbstractHeaderEqualToAssertion(HttpResponseAssertion):
    """
    Presence and single-value checks shared by every header comparison.

    Subclasses implement do_assertion(), which receives the non-empty
    list of raw values of the header.
    """

    def __init__(self, name: str, single_value_headers: Iterable[str] = ()):
        self.name = name
        self.single_value_headers = tuple(single_value_headers)

    def handle(self, response: HttpResponse) -> AssertionResult:
        values = response.header(self.name)
        logger.debug(f"Checking header {self.name}, found: {values}")

        if not values:
            return AssertionResult.failure(MissingHeader(self.name))

        if len(values) > 1 and is_single_valued(self.name, self.single_value_headers):
            logger.debug(f"Header {self.name} must be single-valued, found {len(values)} values")
            return AssertionResult.failure(MultiValuedHeaderViolation(self.name, tuple(values)))

        return self.do_assertion(values)

    @abstractmethod
    def do_assertion(self, values: List[str]) -> AssertionResult:
        """Compare the raw values of the header."""


class IsHeaderEqualToAssertion(AbstractHeaderEqualToAssertion):
    """
    Literal comparison, optionally ignoring case.

    For a multi-valued header, one matching occurrence is enough.
    """

    def __init__(
        self,
        name: str,
        value: str,
        case_insensitive: bool = False,
        single_value_headers: Iterable[str] = (),
    ):
        super().__init__(name, single_value_headers)
        self.value = value
        self.case_insensitive = case_insensitive

    def do_assertion(self, values: List[str]) -> AssertionResult:
        for actual in values:
            if self._matches(actual):
                return AssertionResult.success()
        return AssertionResult.failure(ValueMismatch(self.name, self.value, tuple(values)))

    def _matches(self, actual: str) -> bool:
        if self.case_insensitive:
            return actual.strip().lower() == self.value.strip().lower()
        return actual.strip() == self.value.strip()


class IsHeaderMatchingAssertion(AbstractHeaderEqualToAssertion):
    """
    Semantic comparison through a header grammar.

    When fold is True, several occurrences are joined with ", " and
    parsed as one value (RFC 7230 section 3.2.2). Otherwise each
    occurrence is parsed on its own and one match is enough.
    """

    def __init__(
        self,
        name: str,
        expected: HttpHeaderValue,
        parser: HttpHeaderParser,
        fold: bool = False,
        single_value_headers: Iterable[str] = (),
    ):
        super().__init__(name, single_value_headers)
        self.expected = expected
        self.parser = parser
        self.fold = fold

    def do_assertion(self, values: List[str]) -> AssertionResult:
        candidates = [", ".join(values)] if self.fold and len(values) > 1 else values
        expected = self.expected.serialize_value()
        invalid: Optional[str] = None

        for raw in candidates:
            try:
                actual = self.parser.parse(raw)
            except InvalidHeaderValueError:
                logger.debug(f"Header {self.name} has an invalid value: {raw!r}")
                if invalid is None:
                    invalid = raw
                continue

            if actual == self.expected:
                return AssertionResult.success()

        if invalid is not None:
            return AssertionResult.failure(InvalidHeaderValue(self.name, invalid, expected))

        return AssertionResult.failure(ValueMismatch(self.name, expected, tuple(values)))


class IsDateHeaderEqualToAssertion(AbstractHeaderEqualToAssertion):
    """Compare an HTTP-date header with an instant, ignoring its layout."""

    def __init__(self, name: str, expected: datetime, single_value_headers: Iterable[str] = ()):
        super().__init__(name, single_value_headers)
        self.expected = format_http_date(expected)

    def do_assertion(self, values: List[str]) -> AssertionResult:
        invalid: Optional[str] = None

        for raw in values:
            try:
                actual = format_http_date(parse_http_date(raw, self.name))
            except InvalidHeaderValueError:
                if invalid is None:
                    invalid = raw
                continue

            if actual == self.expected:
                return AssertionResult.success()

        if invalid is not None:
            return AssertionResult.failure(InvalidHeaderValue(self.name, invalid, self.expected))

        return AssertionResult.failure(ValueMismatch(self.name, self.expected, tuple(values)))


# =============================================================================
# CONTENT TYPE
# =============================================================================

class HasMimeTypeAssertion(AbstractHeaderEqualToAssertion):
    """Content-Type is one of the given mime types, parameters ignored."""

    def __init__(self, mime_types: Sequence[str]):
        super().__init__(CONTENT_TYPE)
        if not mime_types:
            raise ValueError("At least one mime type is required")
        self.mime_types = tuple(mime_types)

    def do_assertion(self, values: List[str]) -> AssertionResult:
        actual = values[0].split(";", 1)[0].strip()
        if any(actual.lower() == m.lower() for m in self.mime_types):
            return AssertionResult.success()
        return AssertionResult.failure(MimeTypeMismatch(self.mime_types, actual))


class HasCharsetAssertion(AbstractHeaderEqualToAssertion):
    """
    Content-Type has a charset parameter.

    With an expected charset, the parameter must also match it, ignoring
    case ("UTF-8" == "utf-8").
    """

    def __init__(self, charset: Optional[str] = None):
        super().__init__(CONTENT_TYPE)
        self.charset = charset

    def do_assertion(self, values: List[str]) -> AssertionResult:
        raw = values[0]
        try:
            media_type = MediaType.parser().parse(raw)
        except InvalidHeaderValueError:
            return AssertionResult.failure(InvalidHeaderValue(self.name, raw))

        actual = media_type.charset
        if actual is None:
            return AssertionResult.failure(MissingCharset())
        if self.charset is None or actual.lower() == self.charset.lower():
            return AssertionResult.success()
        return AssertionResult.failure(CharsetMismatch(self.charset, actual))


# =============================================================================
# COOKIES
# =============================================================================

class AbstractCookieAssertion(HttpResponseAssertion):
    """Parses the response cookies, reporting a malformed Set-Cookie."""

    def handle(self, response: HttpResponse) -> AssertionResult:
        try:
            cookies = response.cookies()
        except InvalidCookieError as e:
            logger.debug(f"Invalid Set-Cookie value {e.raw_value!r}: {e.reason}")
            return AssertionResult.failure(InvalidHeaderValue(SET_COOKIE, e.raw_value or ""))
        return self.do_assertion(cookies)

    @abstractmethod
    def do_assertion(self, cookies: List[Cookie]) -> AssertionResult:
        """Check the parsed cookies."""


class HasCookieAssertion(AbstractCookieAssertion):
    """
    A cookie matches by name, by name and value, or entirely.

    Names are compared case-sensitively.
    """

    def __init__(self, name: Optional[str] = None, value: Optional[str] = None, cookie: Optional[Cookie] = None):
        if name is None and cookie is None:
            raise ValueError("Either a cookie name or a cookie is required")
        self.name = name
        self.value = value
        self.cookie = cookie

    def do_assertion(self, cookies: List[Cookie]) -> AssertionResult:
        for actual in cookies:
            if self._matches(actual):
                return AssertionResult.success()
        return AssertionResult.failure(MissingCookie(self.name, self.value, self.cookie))

    def _matches(self, actual: Cookie) -> bool:
        if self.cookie is not None:
            return actual == self.cookie
        if actual.name != self.name:
            return False
        return self.value is None or actual.value == self.value


class DoesNotHaveCookieAssertion(AbstractCookieAssertion):
    """No cookie with that name, or no cookie at all when name is None."""

    def __init__(self, name: Optional[str] = None):
        self.name = name

    def do_assertion(self, cookies: List[Cookie]) -> AssertionResult:
        if self.name is None:
            if cookies:
                return AssertionResult.failure(UnexpectedCookie())
            return AssertionResult.success()

        if any(c.name == self.name for c in cookies):
            return AssertionResult.failure(UnexpectedCookie(self.name))
        return AssertionResult.success()
