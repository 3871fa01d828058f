"""
Match orchestration: who throws next, which darts count, and who has won.

The match owns every player's score. Each dart is handed to the game mode
for evaluation and the result is then committed, or rolled back to the start
of the turn on a bust. Nothing is written until the game mode has finished
evaluating, so a failed call never leaves a half-applied throw behind.
"""

import logging
import uuid
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Dict, List, Mapping, Optional, Sequence, Tuple

from oche.darts_core.exceptions import (
    GameFinishedException,
    InvalidThrowInputException,
    MissingScoreStateException,
    WrongTurnException,
)
from oche.darts_core.mode import GameMode
from oche.darts_core.results import EvaluationResult, Progress, ThrowOutcome
from oche.darts_core.scores import ScoreState
from oche.darts_core.throws import ThrowInput

logger = logging.getLogger(__name__)


def _new_id() -> str:
    return uuid.uuid4().hex


@dataclass(frozen=True)
class Player:
    """A player's identity. Registration lives outside the rules engine."""

    name: str
    player_id: str = field(default_factory=_new_id)


@dataclass(frozen=True)
class ThrowRecord:
    """A dart as it entered the match history, busted darts included."""

    sequence: int
    player_id: str
    throw: ThrowInput
    outcome: ThrowOutcome
    progress: Progress = Progress.NONE


class Match:
    """A single match between players under one game mode."""

    def __init__(
        self,
        players: Sequence[Player],
        mode: GameMode,
        match_id: Optional[str] = None,
    ):
        players = tuple(players)
        mode.validate_players(players)

        player_ids = [p.player_id for p in players]
        if len(set(player_ids)) != len(player_ids):
            raise ValueError("Players must have unique ids")

        self.id = match_id or _new_id()
        self.mode = mode
        self._players: Tuple[Player, ...] = players
        self._scores: Dict[str, ScoreState] = {
            pid: mode.create_initial_score(pid) for pid in player_ids
        }
        self._history: List[ThrowRecord] = []
        self._current_player_index = 0
        self._darts_thrown_in_turn = 0
        # Score of the current player at their first dart, restored on a bust
        self._turn_start_snapshot: Optional[ScoreState] = None
        self._winner_id: Optional[str] = None

        logger.info(
            "Created match %s: %s with %s",
            self.id,
            mode.name,
            ", ".join(p.name for p in players),
        )

    # Read accessors

    @property
    def players(self) -> Tuple[Player, ...]:
        return self._players

    @property
    def score_states(self) -> Mapping[str, ScoreState]:
        """Read-only view of every player's current score."""
        return MappingProxyType(self._scores)

    @property
    def history(self) -> Tuple[ThrowRecord, ...]:
        return tuple(self._history)

    @property
    def is_finished(self) -> bool:
        return self._winner_id is not None

    @property
    def winner_id(self) -> Optional[str]:
        return self._winner_id

    @property
    def winner(self) -> Optional[Player]:
        if self._winner_id is None:
            return None
        return self.player_by_id(self._winner_id)

    @property
    def current_player(self) -> Player:
        return self._players[self._current_player_index]

    @property
    def current_player_index(self) -> int:
        return self._current_player_index

    @property
    def darts_thrown_in_turn(self) -> int:
        return self._darts_thrown_in_turn

    @property
    def turn_start_snapshot(self) -> Optional[ScoreState]:
        """Score of the current player when their turn began, None between turns."""
        return self._turn_start_snapshot

    def score_for(self, player_id: str) -> ScoreState:
        try:
            return self._scores[player_id]
        except KeyError:
            raise MissingScoreStateException(player_id) from None

    def player_by_id(self, player_id: str) -> Player:
        for player in self._players:
            if player.player_id == player_id:
                return player
        raise KeyError(f"Player {player_id} is not in match {self.id}")

    def player_by_name(self, name: str) -> Player:
        for player in self._players:
            if player.name == name:
                return player
        raise KeyError(f"Player '{name}' is not in match {self.id}")

    # Throw handling

    def register_throw(self, player_id: str, throw: ThrowInput) -> EvaluationResult:
        """
        Apply one dart thrown by ``player_id``.

        Returns:
            The game mode's evaluation of the dart

        Raises:
            GameFinishedException: The match already has a winner
            WrongTurnException: It is not this player's turn
            InvalidThrowInputException: ``throw`` is not a ThrowInput
            MissingScoreStateException: A player has no score entry
        """
        if self.is_finished:
            raise GameFinishedException(self._winner_id)

        current = self.current_player
        if player_id != current.player_id:
            raise WrongTurnException(player_id, current.player_id)

        if not isinstance(throw, ThrowInput):
            raise InvalidThrowInputException(f"Expected a ThrowInput, got {throw!r}")

        for player in self._players:
            if player.player_id not in self._scores:
                raise MissingScoreStateException(player.player_id)

        if self._darts_thrown_in_turn == 0:
            snapshot = self._scores[player_id]
        else:
            snapshot = self._turn_start_snapshot

        result = self.mode.evaluate_throw(
            player_id, throw, MappingProxyType(self._scores)
        )
        for other_id in result.other_updated_scores or {}:
            if other_id not in self._scores:
                raise MissingScoreStateException(other_id)

        # Commit
        self._turn_start_snapshot = snapshot
        self._history.append(
            ThrowRecord(
                sequence=len(self._history) + 1,
                player_id=player_id,
                throw=throw,
                outcome=result.outcome,
                progress=result.progress,
            )
        )
        self._scores[player_id] = result.updated_score
        if result.other_updated_scores:
            self._scores.update(result.other_updated_scores)

        logger.debug(
            "Match %s: %s threw %s -> %s", self.id, current.name, throw, result.outcome.value
        )

        if result.outcome == ThrowOutcome.BUST:
            self._scores[player_id] = self._turn_start_snapshot
            logger.info("Match %s: %s busted", self.id, current.name)
            self._end_turn()
        elif result.outcome == ThrowOutcome.WIN:
            self._winner_id = result.winner_id or player_id
            self._darts_thrown_in_turn = 0
            self._turn_start_snapshot = None
            logger.info("Match %s won by %s", self.id, current.name)
        else:
            if result.progress == Progress.SET_WON:
                logger.info("Match %s: %s won the set", self.id, current.name)
            elif result.progress == Progress.LEG_WON:
                logger.info("Match %s: %s won the leg", self.id, current.name)
            if result.progress != Progress.NONE:
                # Not a literal turn-start rollback: a bust later in this turn
                # rewinds to the start of the new leg and keeps the leg or set won
                self._turn_start_snapshot = result.updated_score

            self._darts_thrown_in_turn += 1
            if self._darts_thrown_in_turn >= self.mode.darts_per_turn:
                self._end_turn()

        return result

    def _end_turn(self):
        self._darts_thrown_in_turn = 0
        self._turn_start_snapshot = None
        self._current_player_index = (self._current_player_index + 1) % len(
            self._players
        )


def create_match(players: Sequence[Player], mode: GameMode) -> Match:
    """Create a match, raising InvalidPlayerCountException for a bad player count."""
    return Match(players, mode)
