"""
Low-level helpers: argument checks, string handling and HTTP-dates.
"""

from .dates import format_http_date, parse_http_date, to_utc
from .preconditions import is_positive, not_blank, not_none
from .strings import is_blank, is_quoted, is_token, split_list, split_once, split_quoted, unquote

__all__ = [
    "format_http_date",
    "parse_http_date",
    "to_utc",
    "is_positive",
    "not_blank",
    "not_none",
    "is_blank",
    "is_quoted",
    "is_token",
    "split_list",
    "split_once",
    "split_quoted",
    "unquote",
]
