"""
=============================================================================
JSON COMPARISON
=============================================================================

Compares two JSON documents semantically and lists every difference with
the path where it occurs:

    actual   = {"id": 1, "user": {"name": "john", "roles": ["admin"]}}
    expected = {"id": 1, "user": {"name": "jane", "roles": ["admin", "dev"]},
                "active": true}

    Expecting json to contain entry "active",
    Expecting json entry "user.name" to be equal to "jane" but was "john",
    Expecting json array "user.roles" to have size 2 but was 1

=============================================================================
RULES
=============================================================================

    ┌─────────────┬───────────────────────────────────────────────────────┐
    │  objects    │  key order ignored; missing and extra keys reported  │
    │  arrays     │  order matters; size checked, then each element      │
    │  types      │  "1" is not 1, true is not 1                         │
    │  numbers    │  compared by value: 1 == 1.0                         │
    └─────────────┴───────────────────────────────────────────────────────┘

Paths use dots for keys and brackets for indexes ("users[0].name"); the
document root is "$".

=============================================================================
"""

import json
import logging
import re
from enum import Enum
from typing import Any, Iterable, List, Union

from .errors import (
    JsonMissingEntry,
    JsonRootMismatch,
    JsonSizeMismatch,
    JsonTypeMismatch,
    JsonUnexpectedEntry,
    JsonValueMismatch,
    RestAssertError,
)

logger = logging.getLogger(__name__)

ROOT = "$"


class JsonType(Enum):
    """JSON value kinds, with the wording used in messages."""

    OBJECT = "an object"
    ARRAY = "an array"
    STRING = "a string"
    NUMBER = "a number"
    BOOLEAN = "a boolean"
    NULL = "null"

    @classmethod
    def of(cls, value: Any) -> "JsonType":
        if value is None:
            return cls.NULL
        # bool before number: True is an int in Python
        if isinstance(value, bool):
            return cls.BOOLEAN
        if isinstance(value, (int, float)):
            return cls.NUMBER
        if isinstance(value, str):
            return cls.STRING
        if isinstance(value, list):
            return cls.ARRAY
        if isinstance(value, dict):
            return cls.OBJECT
        raise TypeError(f"Not a JSON value: {type(value).__name__}")


class JsonComparator:
    """Deep comparison of two JSON documents."""

    def compare(self, actual: str, expected: str) -> List[RestAssertError]:
        """
        Compare two JSON texts.

        Args:
            actual: The document under test.
            expected: The reference document.

        Returns:
            Every difference found, empty when the documents are equal.

        Raises:
            json.JSONDecodeError: If either text is not valid JSON.
        """
        return self.compare_values(json.loads(actual), json.loads(expected))

    def compare_values(self, actual: Any, expected: Any) -> List[RestAssertError]:
        """Compare two already decoded documents."""
        actual_type = JsonType.of(actual)
        expected_type = JsonType.of(expected)

        if actual_type != expected_type and expected_type in (JsonType.OBJECT, JsonType.ARRAY):
            return [JsonRootMismatch(expected_type.value)]

        errors: List[RestAssertError] = []
        self._compare(ROOT, actual, expected, errors)
        logger.debug(f"JSON comparison found {len(errors)} difference(s)")
        return errors

    def _compare(self, path: str, actual: Any, expected: Any, errors: List[RestAssertError]) -> None:
        actual_type = JsonType.of(actual)
        expected_type = JsonType.of(expected)

        if actual_type != expected_type:
            errors.append(JsonTypeMismatch(path, expected_type.value, actual_type.value))
        elif expected_type == JsonType.OBJECT:
            self._compare_objects(path, actual, expected, errors)
        elif expected_type == JsonType.ARRAY:
            self._compare_arrays(path, actual, expected, errors)
        elif actual != expected:
            errors.append(JsonValueMismatch(path, expected, actual))

    def _compare_objects(self, path: str, actual: dict, expected: dict, errors: List[RestAssertError]) -> None:
        for key in expected:
            if key not in actual:
                errors.append(JsonMissingEntry(child_path(path, key)))

        for key in actual:
            if key not in expected:
                errors.append(JsonUnexpectedEntry(child_path(path, key)))

        for key, value in expected.items():
            if key in actual:
                self._compare(child_path(path, key), actual[key], value, errors)

    def _compare_arrays(self, path: str, actual: list, expected: list, errors: List[RestAssertError]) -> None:
        if len(actual) != len(expected):
            errors.append(JsonSizeMismatch(path, len(expected), len(actual)))

        # Elements present on both sides are still compared
        for i, (actual_item, expected_item) in enumerate(zip(actual, expected)):
            self._compare(index_path(path, i), actual_item, expected_item, errors)


# =============================================================================
# PATHS
# =============================================================================

_PATH_STEP = re.compile(r"([^.\[\]]+)|\[(\d+)\]")


def child_path(path: str, key: str) -> str:
    return key if path == ROOT else f"{path}.{key}"


def index_path(path: str, index: int) -> str:
    return f"[{index}]" if path == ROOT else f"{path}[{index}]"


def parse_path(path: str) -> List[Union[str, int]]:
    """
    Split a path into keys and indexes.

    Examples:
        >>> parse_path("users[0].name")
        ['users', 0, 'name']
    """
    if path in ("", ROOT):
        return []

    steps: List[Union[str, int]] = []
    position = 0
    for match in _PATH_STEP.finditer(path):
        gap = path[position:match.start()]
        if gap not in ("", "."):
            raise ValueError(f"Invalid json path: {path}")
        key, index = match.groups()
        steps.append(int(index) if index is not None else key)
        position = match.end()

    if position != len(path):
        raise ValueError(f"Invalid json path: {path}")
    return steps


_MISSING = object()


def get_entry(document: Any, path: str) -> Any:
    """
    Value at path, or a sentinel that is_missing() recognizes.

    Examples:
        >>> get_entry({"a": [1, 2]}, "a[1]")
        2
    """
    current = document
    for step in parse_path(path):
        if isinstance(step, int):
            if not isinstance(current, list) or step >= len(current):
                return _MISSING
        elif not isinstance(current, dict) or step not in current:
            return _MISSING
        current = current[step]
    return current


def is_missing(value: Any) -> bool:
    return value is _MISSING


def remove_entries(document: Any, paths: Iterable[str]) -> Any:
    """
    Drop entries from a decoded document, in place. Missing paths are ignored.

    Every path is resolved against the document as given: removing "[0]"
    does not change which element "[1]" designates.
    """
    keys = []
    indexes = {}
    for path in paths:
        steps = parse_path(path)
        if not steps:
            continue

        parent = get_entry(document, _render(steps[:-1]))
        last = steps[-1]
        if isinstance(last, int) and isinstance(parent, list) and last < len(parent):
            indexes.setdefault(id(parent), (parent, set()))[1].add(last)
        elif isinstance(last, str) and isinstance(parent, dict):
            keys.append((parent, last))

    for parent, key in keys:
        parent.pop(key, None)
    # Highest index first so the remaining ones stay valid
    for parent, positions in indexes.values():
        for index in sorted(positions, reverse=True):
            del parent[index]
    return document


def _render(steps: List[Union[str, int]]) -> str:
    path = ROOT
    for step in steps:
        path = index_path(path, step) if isinstance(step, int) else child_path(path, step)
    return path
