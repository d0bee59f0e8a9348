"""
X-Content-Type-Options: the only defined value is "nosniff".
"""

from dataclasses import dataclass

from .base import HttpHeaderParser, HttpHeaderValue

NOSNIFF = "nosniff"


@dataclass(frozen=True)
class ContentTypeOptions(HttpHeaderValue):
    value: str = NOSNIFF

    @staticmethod
    def parser() -> "ContentTypeOptionsParser":
        return CONTENT_TYPE_OPTIONS_PARSER

    @classmethod
    def nosniff(cls) -> "ContentTypeOptions":
        return cls(NOSNIFF)

    def serialize_value(self) -> str:
        return self.value


class ContentTypeOptionsParser(HttpHeaderParser[ContentTypeOptions]):
    header_name = "X-Content-Type-Options"

    def do_parse(self, value: str) -> ContentTypeOptions:
        if value.lower() != NOSNIFF:
            raise self.invalid(value, "expected nosniff")
        return ContentTypeOptions.nosniff()


CONTENT_TYPE_OPTIONS_PARSER = ContentTypeOptionsParser()
