"""
Shared contract for game modes, plus the countdown rules every leg-based mode uses.

A game mode is pure: it reads the scores it is given and describes every
change in the returned EvaluationResult. Only the match ever writes scores.
"""

from typing import Dict, Mapping, Sequence, Type

from oche.darts_core.exceptions import (
    InvalidPlayerCountException,
    MissingScoreStateException,
)
from oche.darts_core.results import EvaluationResult
from oche.darts_core.scores import ScoreState
from oche.darts_core.throws import ThrowInput


# Lead required to win a leg or set race when advantages are enabled
ADVANTAGE_MARGIN = 2


class GameMode:
    """Base class for the rules of one darts game variant."""

    name = "GameMode"
    min_players = 2
    max_players = 2
    score_type: Type[ScoreState] = ScoreState

    def __init__(self, settings):
        self.settings = settings

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.settings!r})"

    @property
    def darts_per_turn(self) -> int:
        return self.settings.darts_per_turn

    def validate_players(self, players: Sequence) -> None:
        """Raise InvalidPlayerCountException if the player count is not allowed."""
        count = len(players)
        if not self.min_players <= count <= self.max_players:
            raise InvalidPlayerCountException(
                self.name, count, self.min_players, self.max_players
            )

    def create_initial_score(self, player_id: str) -> ScoreState:
        raise NotImplementedError

    def evaluate_throw(
        self,
        player_id: str,
        throw: ThrowInput,
        all_scores: Mapping[str, ScoreState],
    ) -> EvaluationResult:
        raise NotImplementedError

    def _score_of(self, player_id: str, all_scores: Mapping[str, ScoreState]):
        try:
            score = all_scores[player_id]
        except KeyError:
            raise MissingScoreStateException(player_id) from None
        if not isinstance(score, self.score_type):
            raise TypeError(
                f"{self.name} expects {self.score_type.__name__} for player "
                f"{player_id}, got {type(score).__name__}"
            )
        return score

    def _opponent_scores(
        self, player_id: str, all_scores: Mapping[str, ScoreState]
    ) -> Dict[str, ScoreState]:
        return {
            pid: self._score_of(pid, all_scores)
            for pid in all_scores
            if pid != player_id
        }


def is_bust(remaining: int, throw: ThrowInput, double_out: bool) -> bool:
    """Check whether a dart breaks the countdown rules.

    A dart busts when it takes the player below zero. Under double out it
    also busts when it reaches zero without a double, or when it leaves a
    single point, which can no longer be checked out.
    """
    candidate = remaining - throw.points
    if candidate < 0:
        return True
    if double_out and candidate == 0 and throw.multiplier != 2:
        return True
    if double_out and candidate == 1:
        return True
    return False


def has_won_race(
    won: int,
    best_opponent: int,
    target: int,
    advantages_enabled: bool,
    sudden_death_at: int,
) -> bool:
    """
    Decide whether a leg or set race has been won.

    Args:
        won: Legs (or sets) the player has won, including the one just won
        best_opponent: Highest count among the opponents
        target: Count needed to win the race
        advantages_enabled: Whether a two leg lead is required
        sudden_death_at: Count that wins outright when advantages are enabled

    Returns:
        True if the race is won
    """
    if not advantages_enabled:
        return won >= target
    if won >= sudden_death_at:
        return True
    return won >= target and won - best_opponent >= ADVANTAGE_MARGIN
