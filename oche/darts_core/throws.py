"""
Value object describing a single dart.

A throw is only the declared sector and multiplier; where the dart actually
landed is not part of the rules engine.
"""

from dataclasses import dataclass

from oche.darts_core.exceptions import InvalidThrowInputException


MISS = 0
BULL_OUTER = 25
BULL_INNER = 50

NUMBERED_SECTORS = range(1, 21)
VALID_MULTIPLIERS = (1, 2, 3)


def validate_throw(sector: int, multiplier: int) -> None:
    """Raise InvalidThrowInputException if the sector/multiplier pair is not on the board."""
    if isinstance(sector, bool) or not isinstance(sector, int):
        raise InvalidThrowInputException(f"Sector must be an int, got {sector!r}")
    if isinstance(multiplier, bool) or not isinstance(multiplier, int):
        raise InvalidThrowInputException(
            f"Multiplier must be an int, got {multiplier!r}"
        )
    if multiplier not in VALID_MULTIPLIERS:
        raise InvalidThrowInputException(f"Invalid multiplier: {multiplier}")

    if sector in NUMBERED_SECTORS:
        return
    if sector == MISS:
        if multiplier != 1:
            raise InvalidThrowInputException("A miss cannot carry a multiplier")
    elif sector == BULL_OUTER:
        if multiplier == 3:
            raise InvalidThrowInputException("There is no treble bull")
    elif sector == BULL_INNER:
        if multiplier != 1:
            raise InvalidThrowInputException(
                "Record 50 with multiplier 1, or the double bull as 25x2"
            )
    else:
        raise InvalidThrowInputException(f"Invalid sector: {sector}")


@dataclass(frozen=True)
class ThrowInput:
    """One dart: the sector value hit and its multiplier (1, 2 or 3)."""

    sector: int
    multiplier: int = 1

    def __post_init__(self):
        validate_throw(self.sector, self.multiplier)

    @property
    def points(self) -> int:
        return self.sector * self.multiplier

    @property
    def is_double(self) -> bool:
        """True for the darts that can finish a double-out leg.

        The double bull is written 25x2. A 50 recorded with multiplier 1 is a
        single-multiplier dart and does not count as a double.
        """
        return self.multiplier == 2

    @property
    def is_bull(self) -> bool:
        return self.sector in (BULL_OUTER, BULL_INNER)

    @property
    def is_miss(self) -> bool:
        return self.sector == MISS

    def __str__(self) -> str:
        from oche.darts_core.notation import format_throw

        return format_throw(self)
