"""
Per-player score snapshots, one class per game mode family.

Score states are frozen: a committed throw replaces a player's state with a
new instance (``dataclasses.replace``) rather than editing it.
"""

from dataclasses import dataclass, replace
from typing import Dict, Tuple

from oche.darts_core.throws import BULL_INNER, BULL_OUTER


@dataclass(frozen=True)
class ScoreState:
    """Base class for all score snapshots."""


@dataclass(frozen=True)
class ClassicLegsScore(ScoreState):
    """Countdown score for leg-based modes (ClassicLegs and FreeForAll)."""

    remaining_in_leg: int
    legs_won_in_match: int = 0

    def __post_init__(self):
        if self.remaining_in_leg < 0 or self.legs_won_in_match < 0:
            raise ValueError(f"Score values cannot be negative: {self}")


@dataclass(frozen=True)
class ClassicSetsScore(ScoreState):
    """Countdown score with a set layer on top of legs."""

    remaining_in_leg: int
    legs_won_in_set: int = 0
    sets_won_in_match: int = 0

    def __post_init__(self):
        if min(self.remaining_in_leg, self.legs_won_in_set, self.sets_won_in_match) < 0:
            raise ValueError(f"Score values cannot be negative: {self}")


# Sectors tracked by cricket, in board-reading order
CRICKET_SECTORS: Tuple[int, ...] = (20, 19, 18, 17, 16, 15, BULL_OUTER)

_HIT_FIELDS: Dict[int, str] = {
    20: "hits_on_20",
    19: "hits_on_19",
    18: "hits_on_18",
    17: "hits_on_17",
    16: "hits_on_16",
    15: "hits_on_15",
    BULL_OUTER: "hits_on_bull",
    BULL_INNER: "hits_on_bull",
}


@dataclass(frozen=True)
class CricketScore(ScoreState):
    """Accumulated points plus the hit counter for every cricket sector."""

    score: int = 0
    hits_on_20: int = 0
    hits_on_19: int = 0
    hits_on_18: int = 0
    hits_on_17: int = 0
    hits_on_16: int = 0
    hits_on_15: int = 0
    hits_on_bull: int = 0

    def __post_init__(self):
        if self.score < 0 or min(self.hits_for(s) for s in CRICKET_SECTORS) < 0:
            raise ValueError(f"Score values cannot be negative: {self}")

    def hits_for(self, sector: int) -> int:
        """Hits on a cricket sector. Either bull value addresses the bull."""
        return getattr(self, _HIT_FIELDS[sector])

    def with_hits(self, sector: int, hits: int) -> "CricketScore":
        return replace(self, **{_HIT_FIELDS[sector]: hits})

    def is_closed(self, sector: int, hits_to_close: int) -> bool:
        return self.hits_for(sector) >= hits_to_close

    def all_closed(self, hits_to_close: int) -> bool:
        return all(self.is_closed(s, hits_to_close) for s in CRICKET_SECTORS)
