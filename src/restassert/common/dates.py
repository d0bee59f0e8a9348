"""
=============================================================================
HTTP-DATE PARSING AND FORMATTING
=============================================================================

Date-valued headers (Last-Modified, Expires, Date, ...) use the HTTP-date
format. RFC 7231 section 7.1.1.1 requires recipients to accept three
historical layouts:

    ┌──────────────┬──────────────────────────────────────────────────────┐
    │  Format      │  Example                                             │
    ├──────────────┼──────────────────────────────────────────────────────┤
    │  RFC 1123    │  Wed, 15 Nov 1995 12:45:26 GMT     (preferred)       │
    │  RFC 1036    │  Wednesday, 15-Nov-95 12:45:26 GMT (obsolete)        │
    │  asctime     │  Wed Nov 15 12:45:26 1995          (ANSI C)          │
    └──────────────┴──────────────────────────────────────────────────────┘

parse_http_date() tries them in that order and returns an aware UTC
datetime. format_http_date() always writes the RFC 1123 form, so two
dates written differently compare equal once both are normalized.

Month and weekday names are the US English ones regardless of the
process locale, which is why the parsing is done with regexes instead
of time.strptime().

=============================================================================
"""

import logging
import re
from datetime import datetime, timedelta, timezone
from typing import Optional, Union

from ..exceptions import IllegalHeaderDateError

logger = logging.getLogger(__name__)

DAYS = ["Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun"]
LONG_DAYS = ["Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday"]
MONTHS = ["Jan", "Feb", "Mar", "Apr", "May", "Jun",
          "Jul", "Aug", "Sep", "Oct", "Nov", "Dec"]

_DAY_NAMES = {d.lower() for d in DAYS} | {d.lower() for d in LONG_DAYS}
_MONTH_INDEX = {m.lower(): i + 1 for i, m in enumerate(MONTHS)}

# RFC 822 section 5.1 named zones
_NAMED_ZONES = {
    "GMT": 0, "UTC": 0, "UT": 0, "Z": 0,
    "EST": -5, "EDT": -4,
    "CST": -6, "CDT": -5,
    "MST": -7, "MDT": -6,
    "PST": -8, "PDT": -7,
}

_ZONE = r"(GMT|UTC|UT|Z|[ECMP][SD]T|[+-]\d{2}:?\d{2})"
_TIME = r"(\d{1,2}):(\d{2}):(\d{2})"

# Wed, 15 Nov 1995 12:45:26 GMT
RFC_1123_PATTERN = re.compile(
    rf"^([A-Za-z]+),\s+(\d{{1,2}})\s+([A-Za-z]{{3}})\s+(\d{{4}})\s+{_TIME}\s+{_ZONE}$",
    re.IGNORECASE,
)

# Wednesday, 15-Nov-95 12:45:26 GMT
RFC_1036_PATTERN = re.compile(
    rf"^([A-Za-z]+),\s+(\d{{1,2}})-([A-Za-z]{{3}})-(\d{{2}}|\d{{4}})\s+{_TIME}\s+{_ZONE}$",
    re.IGNORECASE,
)

# Wed Nov 15 12:45:26 1995 (day of month may be space padded)
ASCTIME_PATTERN = re.compile(
    rf"^([A-Za-z]+)\s+([A-Za-z]{{3}})\s+(\d{{1,2}})\s+{_TIME}\s+(\d{{4}})$",
    re.IGNORECASE,
)


def parse_http_date(raw: Optional[str], header_name: str = "Date") -> datetime:
    """
    Parse an HTTP-date into an aware UTC datetime.

    A pair of single quotes around the value is tolerated and removed
    before matching.

    Args:
        raw: The raw header value.
        header_name: Reported in the exception when parsing fails.

    Returns:
        The instant, in UTC, with microseconds set to zero.

    Raises:
        IllegalHeaderDateError: If no supported format matches.

    Examples:
        >>> parse_http_date("Wed, 15 Nov 1995 12:45:26 GMT")
        datetime.datetime(1995, 11, 15, 12, 45, 26, tzinfo=datetime.timezone.utc)
    """
    if raw is None:
        raise IllegalHeaderDateError(raw, header_name)

    value = raw.strip()
    if len(value) >= 2 and value[0] == "'" and value[-1] == "'":
        value = value[1:-1].strip()

    for parse in (_parse_rfc_1123, _parse_rfc_1036, _parse_asctime):
        try:
            result = parse(value)
        except ValueError:
            # Matched the layout but the fields do not form a real date
            result = None
        if result is not None:
            logger.debug(f"Parsed HTTP-date {raw!r} with {parse.__name__}")
            return result

    logger.debug(f"Rejected HTTP-date {raw!r}")
    raise IllegalHeaderDateError(raw, header_name)


def _parse_rfc_1123(value: str) -> Optional[datetime]:
    match = RFC_1123_PATTERN.match(value)
    if not match or not _is_day_name(match.group(1)):
        return None
    day, month, year, hh, mm, ss, zone = match.groups()[1:]
    return _build(int(year), _month(month), int(day), hh, mm, ss, zone)


def _parse_rfc_1036(value: str) -> Optional[datetime]:
    match = RFC_1036_PATTERN.match(value)
    if not match or not _is_day_name(match.group(1)):
        return None
    day, month, year, hh, mm, ss, zone = match.groups()[1:]
    full_year = int(year) if len(year) == 4 else _expand_two_digit_year(int(year))
    return _build(full_year, _month(month), int(day), hh, mm, ss, zone)


def _parse_asctime(value: str) -> Optional[datetime]:
    match = ASCTIME_PATTERN.match(value)
    if not match or not _is_day_name(match.group(1)):
        return None
    month, day, hh, mm, ss, year = match.groups()[1:]
    return _build(int(year), _month(month), int(day), hh, mm, ss, "GMT")


def _is_day_name(name: str) -> bool:
    return name.lower() in _DAY_NAMES


def _month(name: str) -> int:
    try:
        return _MONTH_INDEX[name.lower()]
    except KeyError:
        raise ValueError(f"Unknown month: {name}") from None


def _expand_two_digit_year(year: int, now: Optional[datetime] = None) -> int:
    """
    Expand a two-digit year.

    The result lies within 80 years before and 20 years after the
    current year.
    """
    current = (now or datetime.now(timezone.utc)).year
    candidate = (current // 100) * 100 + year
    if candidate > current + 20:
        candidate -= 100
    elif candidate < current - 80:
        candidate += 100
    return candidate


def _zone_offset(zone: str) -> timedelta:
    if zone.upper() in _NAMED_ZONES:
        return timedelta(hours=_NAMED_ZONES[zone.upper()])
    sign = -1 if zone[0] == "-" else 1
    digits = zone[1:].replace(":", "")
    return sign * timedelta(hours=int(digits[:2]), minutes=int(digits[2:]))


def _build(year: int, month: int, day: int, hh: str, mm: str, ss: str, zone: str) -> datetime:
    tz = timezone(_zone_offset(zone))
    local = datetime(year, month, day, int(hh), int(mm), int(ss), tzinfo=tz)
    return local.astimezone(timezone.utc)


# =============================================================================
# FORMATTING
# =============================================================================

def format_http_date(dt: datetime) -> str:
    """
    Format a datetime as an RFC 1123 HTTP-date.

    Format: Day, DD Mon YYYY HH:MM:SS GMT
    Example: Wed, 15 Nov 1995 12:45:26 GMT

    Naive datetimes are taken to be UTC already; aware ones are
    converted first.

    Args:
        dt: Datetime to format.

    Returns:
        Formatted date string.
    """
    dt = to_utc(dt)
    return (
        f"{DAYS[dt.weekday()]}, "
        f"{dt.day:02d} {MONTHS[dt.month - 1]} {dt.year} "
        f"{dt.hour:02d}:{dt.minute:02d}:{dt.second:02d} GMT"
    )


def to_utc(value: Union[datetime, int, float]) -> datetime:
    """
    Normalize a datetime or POSIX timestamp to an aware UTC datetime.

    Sub-second precision is dropped since neither HTTP-dates nor cookie
    dates can carry it.
    """
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        dt = datetime.fromtimestamp(value, tz=timezone.utc)
    elif isinstance(value, datetime):
        if value.tzinfo is None:
            dt = value.replace(tzinfo=timezone.utc)
        else:
            dt = value.astimezone(timezone.utc)
    else:
        raise TypeError(f"Expected a datetime or a timestamp, got {type(value).__name__}")
    return dt.replace(microsecond=0)
