"""
=============================================================================
HEADER VALUES AND PARSERS
=============================================================================

Every structured header follows the same two-step shape:

    raw string ──► HttpHeaderParser.parse() ──► HttpHeaderValue
                        │
                        ├── None / blank?  → InvalidHeaderValueError
                        ├── strip()
                        └── do_parse()     → grammar-specific work

parse() owns the checks common to all grammars, so a do_parse()
implementation always receives a trimmed, non-empty string and only
has to deal with its own syntax.

A parsed value knows how to compare itself with another value of the
same grammar (order, case and whitespace rules are grammar specific)
and how to write itself back in a canonical form:

    parse("no-store,  PUBLIC")  ──►  CacheControl  ──►  "no-store, public"
                                         ║
    parse("public, no-store")   ──►  CacheControl  (equal)

=============================================================================
"""

import logging
from abc import ABC, abstractmethod
from typing import Generic, Optional, TypeVar

from ..common.strings import is_blank
from ..exceptions import InvalidHeaderValueError

logger = logging.getLogger(__name__)


class HttpHeaderValue(ABC):
    """A parsed header value with grammar-aware equality."""

    @abstractmethod
    def serialize_value(self) -> str:
        """Canonical string form, parseable back into an equal value."""

    def __str__(self) -> str:
        return self.serialize_value()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.serialize_value()!r})"


V = TypeVar("V", bound=HttpHeaderValue)


class HttpHeaderParser(ABC, Generic[V]):
    """
    Turns a raw header string into an HttpHeaderValue.

    Subclasses set header_name and implement do_parse().
    """

    header_name: str = ""

    def parse(self, raw: Optional[str]) -> V:
        """
        Parse a raw header value.

        Args:
            raw: The value as received, may have surrounding whitespace.

        Returns:
            The parsed value.

        Raises:
            InvalidHeaderValueError: If raw is None, blank, or does not
                follow the grammar of the header.
        """
        if is_blank(raw):
            raise InvalidHeaderValueError(self.header_name, raw, "value must not be blank")

        value = raw.strip()
        logger.debug(f"Parsing {self.header_name} value: {value!r}")

        try:
            return self.do_parse(value)
        except InvalidHeaderValueError:
            raise
        except ValueError as e:
            raise InvalidHeaderValueError(self.header_name, raw, str(e)) from e

    @abstractmethod
    def do_parse(self, value: str) -> V:
        """Parse a trimmed, non-blank value."""

    def invalid(self, value: str, reason: Optional[str] = None) -> InvalidHeaderValueError:
        """Build the exception to raise for a grammar violation."""
        logger.debug(f"Rejected {self.header_name} value {value!r}: {reason}")
        return InvalidHeaderValueError(self.header_name, value, reason)
