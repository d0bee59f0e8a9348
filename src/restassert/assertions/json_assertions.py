"""
JSON document assertions.

    from restassert.assertions import json_assertions as j

    j.is_json_equal_to(response.body(), '{"id": 1, "name": "john"}').check()
    j.contains_entries(body, {"user.name": "john", "roles[0]": "admin"}).check()

The actual document is the one under test: if it is not valid JSON the
assertion fails. The expected document is written by the test author: if
it is not valid JSON, json.JSONDecodeError is raised immediately.
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, Iterable, List, Union

from ..http.response import HttpResponse
from .errors import CompositeError, InvalidJson, JsonMissingEntry, JsonValueMismatch, RestAssertError
from .json_comparator import JsonComparator, get_entry, is_missing, remove_entries
from .result import AssertionResult

logger = logging.getLogger(__name__)

_COMPARATOR = JsonComparator()
_INVALID = object()


def is_json_equal_to(actual: str, expected: str) -> AssertionResult:
    """Both documents are semantically equal."""
    return is_json_equal_to_ignoring(actual, expected, ())


def is_json_equal_to_ignoring(actual: str, expected: str, entries: Iterable[str]) -> AssertionResult:
    """
    Both documents are equal once the given entries are removed.

    Args:
        actual: Document under test.
        expected: Reference document.
        entries: Paths to drop from both sides ("id", "items[0].createdAt").
    """
    expected_document = json.loads(expected)
    actual_document = _load_actual(actual)
    if actual_document is _INVALID:
        return AssertionResult.failure(InvalidJson(actual))

    entries = list(entries)
    if entries:
        remove_entries(actual_document, entries)
        remove_entries(expected_document, entries)

    return _result(_COMPARATOR.compare_values(actual_document, expected_document))


def is_json_equal_to_file(actual: str, path: Union[str, Path], encoding: str = "utf-8") -> AssertionResult:
    """Compare with a reference document stored on disk."""
    return is_json_equal_to(actual, Path(path).read_text(encoding=encoding))


def is_body_json_equal_to(response: HttpResponse, expected: str) -> AssertionResult:
    return is_json_equal_to(response.body(), expected)


def contains(actual: str, *paths: str) -> AssertionResult:
    """Every path exists in the document."""
    document = _load_actual(actual)
    if document is _INVALID:
        return AssertionResult.failure(InvalidJson(actual))

    errors: List[RestAssertError] = [
        JsonMissingEntry(path) for path in paths if is_missing(get_entry(document, path))
    ]
    return _result(errors)


def contains_entries(actual: str, entries: Dict[str, Any]) -> AssertionResult:
    """Every path exists and holds the given value."""
    document = _load_actual(actual)
    if document is _INVALID:
        return AssertionResult.failure(InvalidJson(actual))

    errors: List[RestAssertError] = []
    for path, expected in entries.items():
        value = get_entry(document, path)
        if is_missing(value):
            errors.append(JsonMissingEntry(path))
        elif _COMPARATOR.compare_values(value, expected):
            errors.append(JsonValueMismatch(path, expected, value))
    return _result(errors)


def _load_actual(text: str) -> Any:
    try:
        return json.loads(text)
    except (TypeError, json.JSONDecodeError) as e:
        logger.debug(f"Actual document is not valid json: {e}")
        return _INVALID


def _result(errors: List[RestAssertError]) -> AssertionResult:
    if not errors:
        return AssertionResult.success()
    if len(errors) == 1:
        return AssertionResult.failure(errors[0])
    return AssertionResult.failure(CompositeError(tuple(errors)))
