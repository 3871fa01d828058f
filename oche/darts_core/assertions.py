"""
Fluent assertion interface for testing match state.

Works on any Match, regardless of the game mode, and raises AssertionError
with a readable message when a check fails:

    assert_match(match).player("Alice").remaining(21).legs_won(1)
    assert_match(match).winner("Bob").history_length(14)
"""

from dataclasses import dataclass
from typing import Optional

from oche.darts_core.match import Match
from oche.darts_core.scores import ScoreState


# Use the built-in AssertionError for proper test framework integration


@dataclass
class MatchAssertion:
    """Assertions about the match as a whole."""

    match: Match

    def player(self, name: str) -> "PlayerAssertion":
        """Select a player by name for score assertions."""
        try:
            player = self.match.player_by_name(name)
        except KeyError:
            raise AssertionError(f"Player '{name}' not found in match") from None
        return PlayerAssertion(match=self.match, player_name=name, player_id=player.player_id)

    def finished(self) -> "MatchAssertion":
        if not self.match.is_finished:
            raise AssertionError("Expected the match to be finished")
        return self

    def in_progress(self) -> "MatchAssertion":
        if self.match.is_finished:
            raise AssertionError(
                f"Expected the match to be in progress, won by {self._winner_name()}"
            )
        return self

    def winner(self, name: str) -> "MatchAssertion":
        self.finished()
        if self._winner_name() != name:
            raise AssertionError(f"Expected {name} to win, got {self._winner_name()}")
        return self

    def current_player(self, name: str) -> "MatchAssertion":
        actual = self.match.current_player.name
        if actual != name:
            raise AssertionError(f"Expected {name} to be throwing, got {actual}")
        return self

    def darts_thrown_in_turn(self, expected: int) -> "MatchAssertion":
        actual = self.match.darts_thrown_in_turn
        if actual != expected:
            raise AssertionError(f"Expected {expected} darts thrown in turn, got {actual}")
        return self

    def history_length(self, expected: int) -> "MatchAssertion":
        actual = len(self.match.history)
        if actual != expected:
            raise AssertionError(f"Expected {expected} throws in history, got {actual}")
        return self

    def _winner_name(self) -> Optional[str]:
        winner = self.match.winner
        return winner.name if winner else None


@dataclass
class PlayerAssertion(MatchAssertion):
    """Assertions about one player's score."""

    player_name: str = ""
    player_id: str = ""

    def _score(self) -> ScoreState:
        return self.match.score_for(self.player_id)

    def _field(self, field_name: str, expected: int, label: str) -> "PlayerAssertion":
        score = self._score()
        if not hasattr(score, field_name):
            raise AssertionError(
                f"{type(score).__name__} for {self.player_name} has no {label}"
            )
        actual = getattr(score, field_name)
        if actual != expected:
            raise AssertionError(
                f"{self.player_name} expected {label} {expected}, got {actual}"
            )
        return self

    def remaining(self, expected: int) -> "PlayerAssertion":
        return self._field("remaining_in_leg", expected, "remaining")

    def legs_won(self, expected: int) -> "PlayerAssertion":
        """Legs won in the match, or in the current set for set play."""
        if hasattr(self._score(), "legs_won_in_set"):
            return self._field("legs_won_in_set", expected, "legs won in set")
        return self._field("legs_won_in_match", expected, "legs won")

    def sets_won(self, expected: int) -> "PlayerAssertion":
        return self._field("sets_won_in_match", expected, "sets won")

    def points(self, expected: int) -> "PlayerAssertion":
        """Cricket points."""
        return self._field("score", expected, "points")

    def hits(self, sector: int, expected: int) -> "PlayerAssertion":
        score = self._score()
        if not hasattr(score, "hits_for"):
            raise AssertionError(
                f"{type(score).__name__} for {self.player_name} has no sector hits"
            )
        actual = score.hits_for(sector)
        if actual != expected:
            raise AssertionError(
                f"{self.player_name} expected {expected} hits on {sector}, got {actual}"
            )
        return self

    def score_is(self, expected: ScoreState) -> "PlayerAssertion":
        actual = self._score()
        if actual != expected:
            raise AssertionError(f"{self.player_name} expected {expected}, got {actual}")
        return self


def assert_match(match: Match) -> MatchAssertion:
    """Start a chain of assertions about a match."""
    return MatchAssertion(match)
