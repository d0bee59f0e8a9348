"""
Small string helpers used by the header grammars.
"""

from typing import List, Optional

# RFC 7230 section 3.2.6:
#   tchar = "!" / "#" / "$" / "%" / "&" / "'" / "*" / "+" / "-" / "." /
#           "^" / "_" / "`" / "|" / "~" / DIGIT / ALPHA
_TCHARS = frozenset(
    "!#$%&'*+-.^_`|~"
    "0123456789"
    "abcdefghijklmnopqrstuvwxyz"
    "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
)


def is_blank(value: Optional[str]) -> bool:
    """True for None, "" and whitespace-only strings."""
    return value is None or not value.strip()


def is_token(value: str) -> bool:
    """
    Check that value is a non-empty RFC 7230 token.

    Examples:
        >>> is_token("no-cache")
        True
        >>> is_token("max age")
        False
    """
    return bool(value) and all(c in _TCHARS for c in value)


def is_quoted(value: str, quote: str = '"') -> bool:
    """True if value is wrapped in a matching pair of quote characters."""
    return len(value) >= 2 and value[0] == quote and value[-1] == quote


def unquote(value: str, quote: str = '"') -> str:
    """
    Remove one pair of surrounding quotes, if present.

    Examples:
        >>> unquote('"utf-8"')
        'utf-8'
        >>> unquote("utf-8")
        'utf-8'
    """
    if is_quoted(value, quote):
        return value[1:-1]
    return value


def split_quoted(value: str, separator: str) -> List[str]:
    """
    Split at separator outside of quoted strings.

    Backslash escapes inside quotes are kept as they are. Parts are not
    trimmed.

    Examples:
        >>> split_quoted('private="a, b", no-store', ",")
        ['private="a, b"', ' no-store']
    """
    parts = []
    current = []
    in_quotes = False
    escaped = False
    for char in value:
        if escaped:
            escaped = False
        elif char == "\\" and in_quotes:
            escaped = True
        elif char == '"':
            in_quotes = not in_quotes
        elif char == separator and not in_quotes:
            parts.append("".join(current))
            current = []
            continue
        current.append(char)
    parts.append("".join(current))
    return parts


def split_list(raw: str, separator: str = ",") -> List[str]:
    """
    Split a header list, trimming members and dropping empty ones.

    HTTP allows empty list elements ("a, , b") for compatibility with
    old senders, so they are skipped instead of rejected. Separators
    inside quoted strings do not split.

    Examples:
        >>> split_list("gzip, , br")
        ['gzip', 'br']
    """
    return [part.strip() for part in split_quoted(raw, separator) if part.strip()]


def split_once(value: str, separator: str) -> List[str]:
    """
    Split at the first separator, trimming both halves.

    Returns a single-element list when the separator is absent.
    """
    if separator not in value:
        return [value.strip()]
    left, right = value.split(separator, 1)
    return [left.strip(), right.strip()]
