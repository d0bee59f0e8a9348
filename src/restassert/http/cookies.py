"""
=============================================================================
COOKIES (RFC 6265)
=============================================================================

A server sets cookies with one Set-Cookie header per cookie:

    Set-Cookie: id=42; Domain=example.com; Path=/; Secure; HttpOnly;
                Max-Age=3600; Expires=Wed, 09 Jun 2021 10:18:14 GMT

=============================================================================
SET-COOKIE ANATOMY
=============================================================================

    ┌─────────────────────────────────────────────────────────────────────┐
    │                                                                      │
    │   id=42 ; Domain=example.com ; Path=/ ; Secure ; Max-Age=3600       │
    │   ──┬──   ───────────────────────┬───────────────────────────       │
    │     │                            │                                   │
    │  name-value-pair          unparsed-attributes                       │
    │  (split at first "=")     (split at ";", then at first "=")         │
    │                                                                      │
    └─────────────────────────────────────────────────────────────────────┘

Attribute names are case-insensitive. Unknown attributes are skipped so
that new attributes introduced by browsers never break a test.

=============================================================================
THE EXPIRES ATTRIBUTE
=============================================================================

Real servers write Expires in a zoo of formats:

    Wed, 09 Jun 2021 10:18:14 GMT
    Wed, 09-Jun-21 10:18:14 GMT
    Wed Jun 09 2021 10:18:14 GMT+0000
    09 Jun 2021 10:18:14

Instead of a list of fixed layouts, RFC 6265 section 5.1.1 defines a
token scan: the value is cut into runs of letters, digits and ":", and
each token is offered, in order, to the time, day-of-month, month and
year recognizers. Each recognizer accepts at most one token; the first
one that accepts a token keeps it.

    "Wed, 09 Jun 2021 10:18:14 GMT"

     token       time?   day?   month?   year?
     ─────────   ─────   ────   ──────   ─────
     Wed          no      no     no       no
     09           no      9
     Jun          no      -      6
     2021         no      -      -        2021
     10:18:14    10:18:14
     GMT          -       -      -        -

=============================================================================
"""

import logging
import re
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import List, Optional, Union

from ..common.dates import format_http_date, to_utc
from ..common.preconditions import not_blank, not_none
from ..common.strings import is_blank, split_once
from ..exceptions import InvalidCookieError

logger = logging.getLogger(__name__)


class SameSite(Enum):
    """Value of the SameSite cookie attribute."""

    LAX = "Lax"
    STRICT = "Strict"
    NONE = "None"

    @classmethod
    def parse(cls, value: str) -> Optional["SameSite"]:
        """Case-insensitive lookup, None for an unknown value."""
        for member in cls:
            if member.value.lower() == value.strip().lower():
                return member
        return None


@dataclass(frozen=True)
class Cookie:
    """
    An immutable cookie as set by a server.

    Equality covers every attribute. Finding a cookie in a response by
    name is a separate, case-sensitive lookup done by the assertions.
    """

    name: str
    value: str
    domain: Optional[str] = None
    path: Optional[str] = None
    secure: bool = False
    http_only: bool = False
    same_site: SameSite = SameSite.LAX
    max_age: Optional[int] = None
    expires: Optional[datetime] = None

    def __post_init__(self):
        not_blank(self.name, "Cookie name must not be blank")
        not_none(self.value, "Cookie value must not be None")
        if self.expires is not None:
            # Frozen dataclass: bypass __setattr__ to store the normalized value
            object.__setattr__(self, "expires", to_utc(self.expires))

    @staticmethod
    def builder(name: str, value: str) -> "CookieBuilder":
        return CookieBuilder(name, value)

    def to_header(self) -> str:
        """Serialize as a Set-Cookie header value."""
        parts = [f"{self.name}={self.value}"]
        if self.domain is not None:
            parts.append(f"Domain={self.domain}")
        if self.path is not None:
            parts.append(f"Path={self.path}")
        if self.expires is not None:
            parts.append(f"Expires={format_http_date(self.expires)}")
        if self.max_age is not None:
            parts.append(f"Max-Age={self.max_age}")
        if self.secure:
            parts.append("Secure")
        if self.http_only:
            parts.append("HttpOnly")
        parts.append(f"SameSite={self.same_site.value}")
        return "; ".join(parts)

    def __str__(self) -> str:
        return self.to_header()


class CookieBuilder:
    """
    Fluent builder for Cookie.

        cookie = (Cookie.builder("id", "42")
            .domain("example.com")
            .path("/")
            .secure()
            .http_only()
            .max_age(3600)
            .build())
    """

    def __init__(self, name: str, value: str):
        self._name = name
        self._value = value
        self._domain: Optional[str] = None
        self._path: Optional[str] = None
        self._secure = False
        self._http_only = False
        self._same_site = SameSite.LAX
        self._max_age: Optional[int] = None
        self._expires: Optional[datetime] = None

    def domain(self, domain: str) -> "CookieBuilder":
        self._domain = domain
        return self

    def path(self, path: str) -> "CookieBuilder":
        self._path = path
        return self

    def secure(self, secure: bool = True) -> "CookieBuilder":
        self._secure = secure
        return self

    def http_only(self, http_only: bool = True) -> "CookieBuilder":
        self._http_only = http_only
        return self

    def same_site(self, same_site: SameSite) -> "CookieBuilder":
        self._same_site = same_site
        return self

    def max_age(self, max_age: int) -> "CookieBuilder":
        self._max_age = max_age
        return self

    def expires(self, expires: Union[datetime, int, float]) -> "CookieBuilder":
        """Set the expiry as a datetime or a POSIX timestamp (seconds)."""
        self._expires = to_utc(expires)
        return self

    def build(self) -> Cookie:
        return Cookie(
            name=self._name,
            value=self._value,
            domain=self._domain,
            path=self._path,
            secure=self._secure,
            http_only=self._http_only,
            same_site=self._same_site,
            max_age=self._max_age,
            expires=self._expires,
        )


# =============================================================================
# SET-COOKIE PARSING
# =============================================================================

MAX_AGE_PATTERN = re.compile(r"^-?\d+$")


def parse_cookie(raw: Optional[str]) -> Cookie:
    """
    Parse a single Set-Cookie header value.

    Args:
        raw: The header value, e.g. "id=42; Path=/; HttpOnly".

    Returns:
        The parsed Cookie.

    Raises:
        InvalidCookieError: If the value is blank, has no "=" in its
            name-value pair, has an empty name, a non-integer Max-Age
            or an Expires date that cannot be understood.
    """
    if is_blank(raw):
        raise InvalidCookieError("Header Set-Cookie must be defined", raw)

    logger.debug(f"Parsing Set-Cookie value: {raw!r}")

    name_value_pair, _, unparsed_attributes = raw.partition(";")
    if "=" not in name_value_pair:
        raise InvalidCookieError("Set-Cookie header must have a value", raw)

    name, value = split_once(name_value_pair, "=")
    if not name:
        raise InvalidCookieError("Set-Cookie header must have a name", raw)

    builder = Cookie.builder(name, value)

    for attribute in unparsed_attributes.split(";") if unparsed_attributes else []:
        attribute_name, _, attribute_value = attribute.partition("=")
        attribute_name = attribute_name.strip().lower()
        attribute_value = attribute_value.strip()

        if attribute_name == "domain":
            builder.domain(attribute_value)
        elif attribute_name == "path":
            builder.path(attribute_value)
        elif attribute_name == "secure":
            builder.secure()
        elif attribute_name == "httponly":
            builder.http_only()
        elif attribute_name == "max-age":
            if not MAX_AGE_PATTERN.match(attribute_value):
                raise InvalidCookieError("Max-Age is not a valid number", raw)
            builder.max_age(int(attribute_value))
        elif attribute_name == "expires":
            try:
                builder.expires(parse_cookie_date(attribute_value))
            except InvalidCookieError as e:
                # Report the whole header, not only the attribute
                raise InvalidCookieError(e.reason, raw) from e
        elif attribute_name == "samesite":
            same_site = SameSite.parse(attribute_value)
            if same_site is None:
                logger.debug(f"Ignoring unknown SameSite value: {attribute_value!r}")
            else:
                builder.same_site(same_site)
        elif attribute_name:
            logger.debug(f"Ignoring unknown cookie attribute: {attribute_name!r}")

    return builder.build()


def parse_cookies(values: List[str]) -> List[Cookie]:
    """Parse every Set-Cookie value of a response, keeping their order."""
    return [parse_cookie(value) for value in values]


# =============================================================================
# EXPIRES TOKEN SCAN (RFC 6265 section 5.1.1)
# =============================================================================

# Anything that is not a letter, a digit or ":" separates two tokens.
DELIMITER_PATTERN = re.compile(r"[^A-Za-z0-9:]+")

TIME_PATTERN = re.compile(r"(\d{1,2}):(\d{1,2}):(\d{1,2})[^\d]*")
DAY_OF_MONTH_PATTERN = re.compile(r"(\d{1,2})[^\d]*")
MONTH_PATTERN = re.compile(r"(jan|feb|mar|apr|may|jun|jul|aug|sep|oct|nov|dec).*", re.IGNORECASE)
YEAR_PATTERN = re.compile(r"(\d{2,4})[^\d]*")

_MONTHS = ["jan", "feb", "mar", "apr", "may", "jun",
           "jul", "aug", "sep", "oct", "nov", "dec"]


def parse_cookie_date(raw: str) -> datetime:
    """
    Parse the value of an Expires attribute.

    Returns:
        An aware UTC datetime with no sub-second part.

    Raises:
        InvalidCookieError: If a component is missing or out of range.
    """
    time = day = month = year = None

    for token in DELIMITER_PATTERN.split(raw):
        if not token:
            continue

        if time is None:
            match = TIME_PATTERN.fullmatch(token)
            if match:
                time = tuple(int(g) for g in match.groups())
                continue

        if day is None:
            match = DAY_OF_MONTH_PATTERN.fullmatch(token)
            if match:
                day = int(match.group(1))
                continue

        if month is None:
            match = MONTH_PATTERN.fullmatch(token)
            if match:
                month = _MONTHS.index(match.group(1).lower()) + 1
                continue

        if year is None:
            match = YEAR_PATTERN.fullmatch(token)
            if match:
                year = int(match.group(1))
                continue

    if year is not None:
        if 70 <= year <= 99:
            year += 1900
        elif 0 <= year <= 69:
            year += 2000

    if year is None or year <= 1601:
        raise InvalidCookieError("Expires year must be greater than 1601", raw)
    if month is None:
        raise InvalidCookieError("Expires month must be defined", raw)
    if day is None or not 1 <= day <= 31:
        raise InvalidCookieError("Expires day cannot be less than 1 or greater than 31", raw)
    if time is None:
        raise InvalidCookieError("Expires time must be defined", raw)

    hour, minute, second = time
    if hour > 23:
        raise InvalidCookieError("Expires hour cannot be less than 0 or greater than 23", raw)
    if minute > 59:
        raise InvalidCookieError("Expires minutes cannot be less than 0 or greater than 59", raw)
    if second > 59:
        raise InvalidCookieError("Expires second cannot be less than 0 or greater than 59", raw)

    try:
        return datetime(year, month, day, hour, minute, second, tzinfo=timezone.utc)
    except ValueError as e:
        # Day 31 of a 30-day month, Feb 29 outside a leap year, ...
        raise InvalidCookieError(f"Expires is not a valid date: {e}", raw) from e
