"""
Assertions over HTTP responses, cookies and JSON documents.

Every function returns an AssertionResult; nothing here raises because a
response is wrong.
"""

from . import cookies, http_response, json_assertions
from .errors import (
    CharsetMismatch,
    CompositeError,
    CookieAttributeMismatch,
    CookieFlagMismatch,
    InvalidHeaderValue,
    InvalidJson,
    JsonMissingEntry,
    JsonRootMismatch,
    JsonSizeMismatch,
    JsonTypeMismatch,
    JsonUnexpectedEntry,
    JsonValueMismatch,
    MimeTypeMismatch,
    MissingCharset,
    MissingCookie,
    MissingHeader,
    MultiValuedHeaderViolation,
    RestAssertError,
    StatusInRange,
    StatusMismatch,
    StatusNotInRange,
    UnexpectedCookie,
    UnexpectedHeader,
    ValueMismatch,
)
from .json_comparator import JsonComparator, JsonType
from .result import AssertionResult, Message

__all__ = [
    "cookies",
    "http_response",
    "json_assertions",
    "AssertionResult",
    "Message",
    "JsonComparator",
    "JsonType",
    "RestAssertError",
    "CharsetMismatch",
    "CompositeError",
    "CookieAttributeMismatch",
    "CookieFlagMismatch",
    "InvalidHeaderValue",
    "InvalidJson",
    "JsonMissingEntry",
    "JsonRootMismatch",
    "JsonSizeMismatch",
    "JsonTypeMismatch",
    "JsonUnexpectedEntry",
    "JsonValueMismatch",
    "MimeTypeMismatch",
    "MissingCharset",
    "MissingCookie",
    "MissingHeader",
    "MultiValuedHeaderViolation",
    "StatusInRange",
    "StatusMismatch",
    "StatusNotInRange",
    "UnexpectedCookie",
    "UnexpectedHeader",
    "ValueMismatch",
]
