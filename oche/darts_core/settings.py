"""
Configurable rule settings for each game mode.

Settings are immutable and chosen once, before the match starts. A handful of
commonly played configurations are predefined at the bottom of the module.
"""

from dataclasses import dataclass


# Classic modes always play three darts per visit
CLASSIC_DARTS_PER_TURN = 3


def _require_positive(**values: int) -> None:
    for name, value in values.items():
        if value < 1:
            raise ValueError(f"{name} must be at least 1, got {value}")


@dataclass(frozen=True)
class ClassicLegsSettings:
    """First player to win a number of legs takes the match."""

    score_per_leg: int = 501
    double_out_enabled: bool = False

    # With advantages enabled a player must lead by two legs, unless they
    # reach the sudden death leg first
    advantages_enabled: bool = False
    legs_to_win_match: int = 3
    sudden_death_winning_leg: int = 6

    def __post_init__(self):
        _require_positive(
            legs_to_win_match=self.legs_to_win_match,
            sudden_death_winning_leg=self.sudden_death_winning_leg,
        )
        if self.score_per_leg < 2:
            raise ValueError(f"score_per_leg must be at least 2, got {self.score_per_leg}")
        if self.sudden_death_winning_leg < self.legs_to_win_match:
            raise ValueError("sudden_death_winning_leg cannot be below legs_to_win_match")

    @property
    def darts_per_turn(self) -> int:
        return CLASSIC_DARTS_PER_TURN


@dataclass(frozen=True)
class ClassicSetsSettings:
    """Legs are grouped into sets; the first player to win enough sets wins."""

    score_per_leg: int = 501
    double_out_enabled: bool = False
    advantages_enabled: bool = False
    sets_to_win_match: int = 3
    legs_to_win_set: int = 3

    # Measured against legs won in the current set
    sudden_death_winning_leg: int = 6

    def __post_init__(self):
        _require_positive(
            sets_to_win_match=self.sets_to_win_match,
            legs_to_win_set=self.legs_to_win_set,
            sudden_death_winning_leg=self.sudden_death_winning_leg,
        )
        if self.score_per_leg < 2:
            raise ValueError(f"score_per_leg must be at least 2, got {self.score_per_leg}")
        if self.sudden_death_winning_leg < self.legs_to_win_set:
            raise ValueError("sudden_death_winning_leg cannot be below legs_to_win_set")

    @property
    def darts_per_turn(self) -> int:
        return CLASSIC_DARTS_PER_TURN


@dataclass(frozen=True)
class FreeForAllSettings:
    """Leg race for two to four players, usually one dart per visit."""

    darts_per_turn: int = 1
    score_per_leg: int = 501
    legs_to_win_match: int = 3
    double_out_enabled: bool = False

    def __post_init__(self):
        _require_positive(
            darts_per_turn=self.darts_per_turn,
            legs_to_win_match=self.legs_to_win_match,
        )
        if self.score_per_leg < 2:
            raise ValueError(f"score_per_leg must be at least 2, got {self.score_per_leg}")


@dataclass(frozen=True)
class ClassicCricketSettings:
    darts_per_turn: int = 3
    hits_to_close_sector: int = 3

    # When disabled every dart counts as a single hit, trebles included
    count_multipliers: bool = True

    def __post_init__(self):
        _require_positive(
            darts_per_turn=self.darts_per_turn,
            hits_to_close_sector=self.hits_to_close_sector,
        )


# Pre-defined settings
STANDARD_501 = ClassicLegsSettings(score_per_leg=501, double_out_enabled=True)

QUICK_301 = ClassicLegsSettings(
    score_per_leg=301, double_out_enabled=False, legs_to_win_match=1
)

STANDARD_SETS = ClassicSetsSettings(
    score_per_leg=501, double_out_enabled=True, advantages_enabled=True
)

PUB_FREE_FOR_ALL = FreeForAllSettings(darts_per_turn=3, score_per_leg=301)

STANDARD_CRICKET = ClassicCricketSettings()
