"""
=============================================================================
ASSERTION RESULTS
=============================================================================

Every assertion returns an AssertionResult instead of raising:

    ┌──────────────────────┐        ┌───────────────────────────────────┐
    │  AssertionResult     │        │  error (only on failure)          │
    ├──────────────────────┤        ├───────────────────────────────────┤
    │  is_success          │───────►│  Message template + arguments     │
    │  is_failure          │        │  str(error) -> rendered message   │
    │  error               │        └───────────────────────────────────┘
    │  message             │
    │  check()             │   raises AssertionError(message) on failure
    └──────────────────────┘

Returning a value keeps the engine usable from any test framework: a
pytest user calls check(), a custom matcher reads is_failure and
message, and tests of the engine itself compare the error structurally.

=============================================================================
MESSAGE RENDERING
=============================================================================

Arguments are formatted so that the message is unambiguous:

    "ETag"             strings are double-quoted
    ["abc", "abc"]     lists show each member formatted
    true, null         booleans and None in JSON spelling
    200                numbers and other objects use str()

Several messages are joined with ",\\n".

=============================================================================
"""

from typing import Any, Iterable, Optional, Sequence, Tuple


def format_arg(value: Any) -> str:
    """
    Format a message argument.

    Examples:
        >>> format_arg("ETag")
        '"ETag"'
        >>> format_arg(["abc", "abc"])
        '["abc", "abc"]'
        >>> format_arg(200)
        '200'
    """
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, str):
        return f'"{value}"'
    if isinstance(value, (list, tuple)):
        return "[" + ", ".join(format_arg(v) for v in value) + "]"
    return str(value)


class Message:
    """A printf-style template and the arguments to render in it."""

    SEPARATOR = ",\n"

    def __init__(self, template: str, *args: Any):
        self.template = template
        self.args: Tuple[Any, ...] = args

    def format(self) -> str:
        return self.template % tuple(format_arg(a) for a in self.args)

    @classmethod
    def concat(cls, messages: Iterable["Message"]) -> "Message":
        """Combine messages into one, each rendered on its own line."""
        rendered = [m.format() for m in messages]
        # Pre-rendered text: escape "%" so format() leaves it untouched
        return cls(cls.SEPARATOR.join(rendered).replace("%", "%%"))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Message):
            return NotImplemented
        return self.template == other.template and self.args == other.args

    def __hash__(self) -> int:
        return hash((self.template, self.args))

    def __str__(self) -> str:
        return self.format()

    def __repr__(self) -> str:
        return f"Message({self.template!r}, args={self.args!r})"


class AssertionResult:
    """Outcome of one assertion: success, or failure carrying an error."""

    __slots__ = ("_error",)

    def __init__(self, error: Optional[Any] = None):
        self._error = error

    @classmethod
    def success(cls) -> "AssertionResult":
        return _SUCCESS

    @classmethod
    def failure(cls, error: Any) -> "AssertionResult":
        if error is None:
            raise TypeError("A failure must carry an error")
        return cls(error)

    @classmethod
    def all_of(cls, results: Sequence["AssertionResult"]) -> "AssertionResult":
        """Success if every result succeeded, else the first failure."""
        for result in results:
            if result.is_failure:
                return result
        return _SUCCESS

    @property
    def is_success(self) -> bool:
        return self._error is None

    @property
    def is_failure(self) -> bool:
        return self._error is not None

    @property
    def error(self) -> Optional[Any]:
        return self._error

    @property
    def message(self) -> Optional[str]:
        return None if self._error is None else str(self._error)

    def check(self) -> None:
        """Raise AssertionError with the rendered message on failure."""
        if self.is_failure:
            raise AssertionError(self.message)

    def __bool__(self) -> bool:
        return self.is_success

    def __repr__(self) -> str:
        if self.is_success:
            return "AssertionResult.success()"
        return f"AssertionResult.failure({self.message!r})"


_SUCCESS = AssertionResult()
