"""
X-XSS-Protection.

    X-XSS-Protection: 0
    X-XSS-Protection: 1
    X-XSS-Protection: 1; mode=block
    X-XSS-Protection: 1; report=https://example.com/xss

Parameters only make sense when the filter is enabled. Whitespace around
";" and "=" is ignored, "mode" and "block" are case-insensitive and the
report URI is kept as written.
"""

from dataclasses import dataclass
from typing import Optional

from .base import HttpHeaderParser, HttpHeaderValue


@dataclass(frozen=True)
class XssProtection(HttpHeaderValue):
    """A parsed X-XSS-Protection value."""

    enabled: bool
    mode_block: bool = False
    report: Optional[str] = None

    @staticmethod
    def parser() -> "XssProtectionParser":
        return XSS_PROTECTION_PARSER

    @classmethod
    def disable(cls) -> "XssProtection":
        return cls(enabled=False)

    @classmethod
    def enable(cls) -> "XssProtection":
        return cls(enabled=True)

    @classmethod
    def enable_block(cls) -> "XssProtection":
        return cls(enabled=True, mode_block=True)

    def serialize_value(self) -> str:
        if not self.enabled:
            return "0"
        parts = ["1"]
        if self.mode_block:
            parts.append("mode=block")
        if self.report is not None:
            parts.append(f"report={self.report}")
        return "; ".join(parts)


class XssProtectionParser(HttpHeaderParser[XssProtection]):
    header_name = "X-XSS-Protection"

    def do_parse(self, value: str) -> XssProtection:
        flag, *options = [part.strip() for part in value.split(";")]

        if flag == "0":
            if any(options):
                raise self.invalid(value, "options are not allowed when protection is disabled")
            return XssProtection.disable()

        if flag != "1":
            raise self.invalid(value, "first token must be 0 or 1")

        mode_block = False
        report: Optional[str] = None
        seen = set()

        for option in options:
            if not option:
                continue

            name, sep, option_value = option.partition("=")
            name = name.strip().lower()
            option_value = option_value.strip()

            if not sep or not option_value or name in seen:
                raise self.invalid(value, f"invalid option: {option!r}")
            seen.add(name)

            if name == "mode" and option_value.lower() == "block":
                mode_block = True
            elif name == "report":
                report = option_value
            else:
                raise self.invalid(value, f"unknown option: {option!r}")

        return XssProtection(enabled=True, mode_block=mode_block, report=report)


XSS_PROTECTION_PARSER = XssProtectionParser()
