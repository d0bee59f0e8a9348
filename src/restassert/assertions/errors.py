"""
=============================================================================
ASSERTION ERRORS
=============================================================================

Typed descriptions of why an assertion failed. They are data, not
exceptions: they travel inside AssertionResult.failure(...) and render
to a message on str().

    ┌────────────────────────────────┬───────────────────────────────────┐
    │  Error                         │  Raised when                      │
    ├────────────────────────────────┼───────────────────────────────────┤
    │  MissingHeader                 │  header absent                    │
    │  UnexpectedHeader              │  header present but forbidden     │
    │  MultiValuedHeaderViolation    │  single-valued header repeated    │
    │  InvalidHeaderValue            │  actual value fails its grammar   │
    │  ValueMismatch                 │  parsed values differ             │
    │  Status*                       │  status code checks               │
    │  MimeTypeMismatch, Charset*    │  Content-Type checks              │
    │  MissingCookie, ...            │  cookie checks                    │
    │  Json*                         │  JSON document comparison         │
    └────────────────────────────────┴───────────────────────────────────┘

Keeping the arguments structured (header name, expected, actual values)
lets tests compare errors without parsing message text, while the
rendered text stays stable for people reading test reports.

=============================================================================
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Optional, Tuple

from .result import Message


class RestAssertError(ABC):
    """Base class of assertion errors."""

    @abstractmethod
    def message(self) -> Message:
        """The message template and its arguments."""

    def __str__(self) -> str:
        return self.message().format()


# =============================================================================
# HEADERS
# =============================================================================

@dataclass(frozen=True)
class MissingHeader(RestAssertError):
    name: str

    def message(self) -> Message:
        return Message("Expecting response to have header %s", self.name)


@dataclass(frozen=True)
class UnexpectedHeader(RestAssertError):
    name: str

    def message(self) -> Message:
        return Message("Expecting response not to have header %s", self.name)


@dataclass(frozen=True)
class MultiValuedHeaderViolation(RestAssertError):
    """A single-valued header was found more than once."""

    name: str
    values: Tuple[str, ...]

    def message(self) -> Message:
        return Message(
            "Expecting response to contains header %s with a single value but found: %s",
            self.name,
            list(self.values),
        )


@dataclass(frozen=True)
class InvalidHeaderValue(RestAssertError):
    """The response carries a value that does not follow the header grammar."""

    name: str
    raw_value: str
    expected: Optional[str] = None

    def message(self) -> Message:
        if self.expected is None:
            return Message(
                "Expecting response to have header %s with a valid value but was %s",
                self.name,
                self.raw_value,
            )
        return Message(
            "Expecting response to have header %s equal to %s but was %s, which is not a valid header value",
            self.name,
            self.expected,
            self.raw_value,
        )


@dataclass(frozen=True)
class ValueMismatch(RestAssertError):
    """Header present and valid, but not equal to the expected value."""

    name: str
    expected: Any
    actual_values: Tuple[str, ...]

    def message(self) -> Message:
        if len(self.actual_values) == 1:
            return Message(
                "Expecting response to have header %s equal to %s but was %s",
                self.name,
                self.expected,
                self.actual_values[0],
            )
        return Message(
            "Expecting response to have header %s equal to %s but contains only %s",
            self.name,
            self.expected,
            list(self.actual_values),
        )


# =============================================================================
# STATUS CODE
# =============================================================================

@dataclass(frozen=True)
class StatusMismatch(RestAssertError):
    expected: int
    actual: int

    def message(self) -> Message:
        return Message("Expecting status code to be %s but was %s", self.expected, self.actual)


@dataclass(frozen=True)
class StatusNotInRange(RestAssertError):
    start: int
    end: int
    actual: int

    def message(self) -> Message:
        return Message(
            "Expecting status code to be between %s and %s but was %s",
            self.start,
            self.end,
            self.actual,
        )


@dataclass(frozen=True)
class StatusInRange(RestAssertError):
    start: int
    end: int
    actual: int

    def message(self) -> Message:
        return Message(
            "Expecting status code to be out of %s and %s but was %s",
            self.start,
            self.end,
            self.actual,
        )


# =============================================================================
# CONTENT TYPE
# =============================================================================

@dataclass(frozen=True)
class MimeTypeMismatch(RestAssertError):
    expected: Tuple[str, ...]
    actual: str

    def message(self) -> Message:
        if len(self.expected) == 1:
            return Message(
                "Expecting response to have mime type %s but was %s",
                self.expected[0],
                self.actual,
            )
        return Message(
            "Expecting response to have mime type in %s but was %s",
            list(self.expected),
            self.actual,
        )


@dataclass(frozen=True)
class CharsetMismatch(RestAssertError):
    expected: str
    actual: str

    def message(self) -> Message:
        return Message("Expecting response to have charset %s but was %s", self.expected, self.actual)


@dataclass(frozen=True)
class MissingCharset(RestAssertError):
    def message(self) -> Message:
        return Message("Expecting response to have defined charset")


# =============================================================================
# COOKIES
# =============================================================================

@dataclass(frozen=True)
class MissingCookie(RestAssertError):
    """No cookie matched: by name, by name and value, or a whole cookie."""

    name: Optional[str] = None
    value: Optional[str] = None
    cookie: Optional[Any] = None

    def message(self) -> Message:
        if self.cookie is not None:
            return Message("Expecting http response to contains cookie %s", str(self.cookie))
        if self.value is not None:
            return Message(
                "Expecting http response to contains cookie with name %s and value %s",
                self.name,
                self.value,
            )
        return Message("Expecting http response to contains cookie with name %s", self.name)


@dataclass(frozen=True)
class UnexpectedCookie(RestAssertError):
    name: Optional[str] = None

    def message(self) -> Message:
        if self.name is None:
            return Message("Expecting http response not to contains cookies")
        return Message("Expecting http response not to contains cookie with name %s", self.name)


@dataclass(frozen=True)
class CookieFlagMismatch(RestAssertError):
    """A cookie flag (secured, http only) has the wrong state."""

    name: str
    flag: str
    expected: bool

    def message(self) -> Message:
        template = "Expecting cookie %s to be " if self.expected else "Expecting cookie %s not to be "
        return Message(template + self.flag, self.name)


@dataclass(frozen=True)
class CookieAttributeMismatch(RestAssertError):
    name: str
    attribute: str
    expected: Any
    actual: Any

    def message(self) -> Message:
        return Message(
            "Expecting cookie %s to have " + self.attribute + " %s but was %s",
            self.name,
            self.expected,
            self.actual,
        )


# =============================================================================
# JSON
# =============================================================================

@dataclass(frozen=True)
class InvalidJson(RestAssertError):
    raw_value: str

    def message(self) -> Message:
        return Message("Expecting json to be a valid json document but was %s", self.raw_value)


@dataclass(frozen=True)
class JsonRootMismatch(RestAssertError):
    expected_type: str

    def message(self) -> Message:
        return Message("Expecting json to be " + self.expected_type)


@dataclass(frozen=True)
class JsonMissingEntry(RestAssertError):
    path: str

    def message(self) -> Message:
        return Message("Expecting json to contain entry %s", self.path)


@dataclass(frozen=True)
class JsonUnexpectedEntry(RestAssertError):
    path: str

    def message(self) -> Message:
        return Message("Expecting json not to contain entry %s", self.path)


@dataclass(frozen=True)
class JsonTypeMismatch(RestAssertError):
    path: str
    expected_type: str
    actual_type: str

    def message(self) -> Message:
        return Message(
            "Expecting json entry %s to be " + self.expected_type + " but was " + self.actual_type,
            self.path,
        )


@dataclass(frozen=True)
class JsonSizeMismatch(RestAssertError):
    path: str
    expected: int
    actual: int

    def message(self) -> Message:
        return Message(
            "Expecting json array %s to have size %s but was %s",
            self.path,
            self.expected,
            self.actual,
        )


@dataclass(frozen=True)
class JsonValueMismatch(RestAssertError):
    path: str
    expected: Any
    actual: Any

    def message(self) -> Message:
        return Message(
            "Expecting json entry %s to be equal to %s but was %s",
            self.path,
            self.expected,
            self.actual,
        )


@dataclass(frozen=True)
class CompositeError(RestAssertError):
    """Several errors reported together."""

    errors: Tuple[RestAssertError, ...]

    def message(self) -> Message:
        return Message.concat(e.message() for e in self.errors)
