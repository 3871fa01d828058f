"""
Parser for the shorthand scorers use to call darts.

Supported forms (case insensitive):
- ``20``, ``S20``: single 20
- ``D16``, ``T19``: double and treble
- ``20x3``: sector with an explicit multiplier
- ``25``, ``SB``, ``OB``: outer bull
- ``BULL``, ``DB``, ``D25``: double bull, written as 25x2
- ``50``: inner bull recorded as a single dart
- ``MISS``, ``M``, ``0``: a dart outside the scoring area
"""

import re
from typing import List

from oche.darts_core.exceptions import InvalidThrowInputException
from oche.darts_core.throws import BULL_OUTER, MISS, ThrowInput


_PREFIX_MULTIPLIERS = {"": 1, "S": 1, "D": 2, "T": 3}

_NAMED_THROWS = {
    "MISS": (MISS, 1),
    "M": (MISS, 1),
    "BULL": (BULL_OUTER, 2),
    "DB": (BULL_OUTER, 2),
    "SB": (BULL_OUTER, 1),
    "OB": (BULL_OUTER, 1),
}

_PREFIXED_RE = re.compile(r"^(?P<prefix>[SDT]?)(?P<sector>\d{1,2})$")
_EXPLICIT_RE = re.compile(r"^(?P<sector>\d{1,2})\s*[X*]\s*(?P<multiplier>[123])$")
_SEPARATOR_RE = re.compile(r"[\s,;]+")


def parse_throw(text: str) -> ThrowInput:
    """Parse one dart call such as 'T20' into a ThrowInput."""
    token = text.strip().upper()
    if not token:
        raise InvalidThrowInputException("Empty dart notation")

    if token in _NAMED_THROWS:
        sector, multiplier = _NAMED_THROWS[token]
        return ThrowInput(sector, multiplier)

    match = _EXPLICIT_RE.match(token)
    if match:
        return ThrowInput(int(match.group("sector")), int(match.group("multiplier")))

    match = _PREFIXED_RE.match(token)
    if match:
        multiplier = _PREFIX_MULTIPLIERS[match.group("prefix")]
        return ThrowInput(int(match.group("sector")), multiplier)

    raise InvalidThrowInputException(f"Unrecognised dart notation: {text!r}")


def parse_throws(text: str) -> List[ThrowInput]:
    """Parse a whitespace or comma separated list of dart calls."""
    return [parse_throw(token) for token in _SEPARATOR_RE.split(text.strip()) if token]


def format_throw(throw: ThrowInput) -> str:
    if throw.sector == MISS:
        return "MISS"
    if throw.multiplier == 1:
        return str(throw.sector)
    prefix = "D" if throw.multiplier == 2 else "T"
    return f"{prefix}{throw.sector}"
