"""
Hardware identifier parsing.

Turns a raw platform hardware string such as "iPhone8,1" into a
(family, major, minor) triple.
"""

import re
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Pattern, Tuple


class DeviceFamily(Enum):
    """Hardware families recognized from the identifier prefix."""
    PHONE = "iPhone"
    POD = "iPod"
    PAD = "iPad"
    UNKNOWN = "unknown"


# Checked in order, first match wins.
PATTERNS: Tuple[Tuple[DeviceFamily, Pattern], ...] = (
    (DeviceFamily.PHONE, re.compile(r"iPhone([0-9]+),([0-9]+)")),
    (DeviceFamily.POD, re.compile(r"iPod([0-9]+),([0-9]+)")),
    (DeviceFamily.PAD, re.compile(r"iPad([0-9]+),([0-9]+)")),
)


@dataclass(frozen=True)
class ParsedIdentifier:
    """Structured hardware identifier."""
    family: DeviceFamily = DeviceFamily.UNKNOWN
    major: Optional[int] = None
    minor: Optional[int] = None
    raw: str = ""

    @property
    def is_known(self) -> bool:
        return self.family != DeviceFamily.UNKNOWN


def parse(raw: Optional[str]) -> ParsedIdentifier:
    """
    Parse a raw hardware identifier.

    The whole string must match "<keyword><major>,<minor>". Anything else,
    including None, yields an UNKNOWN identifier. Never raises.
    """
    if not isinstance(raw, str):
        return ParsedIdentifier()

    for family, pattern in PATTERNS:
        match = pattern.fullmatch(raw)
        if match:
            try:
                major, minor = int(match.group(1)), int(match.group(2))
            except ValueError:
                # Digit runs beyond the interpreter's int conversion limit
                return ParsedIdentifier(raw=raw)
            return ParsedIdentifier(family=family, major=major, minor=minor, raw=raw)

    return ParsedIdentifier(raw=raw)


def format_identifier(identifier: ParsedIdentifier) -> str:
    """Canonical raw form of a parsed identifier ("iPad2,1" or "Unknown")."""
    if not identifier.is_known:
        return "Unknown"
    return f"{identifier.family.value}{identifier.major},{identifier.minor}"
