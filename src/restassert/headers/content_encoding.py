"""
Content-Encoding (RFC 7231 section 3.1.2.2).

    Content-Encoding: gzip
    Content-Encoding: deflate, gzip

Codings are listed in the order they were applied, so the ORDER MATTERS:
"compress, identity" and "identity, compress" are different values.
Coding names are case-insensitive. Empty members and repeated codings
are dropped while parsing.
"""

import logging
from dataclasses import dataclass, field
from typing import List, Tuple

from ..common.strings import is_token, split_list
from .base import HttpHeaderParser, HttpHeaderValue

logger = logging.getLogger(__name__)

GZIP = "gzip"
DEFLATE = "deflate"
BR = "br"
COMPRESS = "compress"
IDENTITY = "identity"


@dataclass(frozen=True)
class ContentEncoding(HttpHeaderValue):
    """Ordered list of content codings."""

    codings: Tuple[str, ...] = field(default=())

    @staticmethod
    def parser() -> "ContentEncodingParser":
        return CONTENT_ENCODING_PARSER

    @classmethod
    def of(cls, *codings: str) -> "ContentEncoding":
        return cls(_normalize(codings))

    @classmethod
    def gzip(cls) -> "ContentEncoding":
        return cls.of(GZIP)

    @classmethod
    def deflate(cls) -> "ContentEncoding":
        return cls.of(DEFLATE)

    @classmethod
    def br(cls) -> "ContentEncoding":
        return cls.of(BR)

    @classmethod
    def compress(cls) -> "ContentEncoding":
        return cls.of(COMPRESS)

    @classmethod
    def identity(cls) -> "ContentEncoding":
        return cls.of(IDENTITY)

    def serialize_value(self) -> str:
        return ", ".join(self.codings)


class ContentEncodingParser(HttpHeaderParser[ContentEncoding]):
    header_name = "Content-Encoding"

    def do_parse(self, value: str) -> ContentEncoding:
        codings = split_list(value, ",")
        for coding in codings:
            if not is_token(coding):
                raise self.invalid(value, f"invalid content coding: {coding!r}")
        if not codings:
            raise self.invalid(value, "no content coding found")
        return ContentEncoding(_normalize(codings))


CONTENT_ENCODING_PARSER = ContentEncodingParser()


def _normalize(codings) -> Tuple[str, ...]:
    result: List[str] = []
    for coding in codings:
        lower = coding.strip().lower()
        if not lower:
            continue
        if lower in result:
            logger.debug(f"Ignoring duplicate content coding: {coding!r}")
            continue
        result.append(lower)
    return tuple(result)
