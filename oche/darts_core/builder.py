"""
Builder for scripting matches with a fluent API.

Players are referred to by name and darts by their scorer's notation, which
keeps test scenarios and simulations short:

    match = (
        MatchBuilder()
        .classic_legs(score_per_leg=201, double_out_enabled=True)
        .players("Alice", "Bob")
        .turn("Alice", "T20", "T20", "T20")
        .build()
    )
"""

from typing import Dict, List, Optional, Union

from oche.darts_core.classic_legs import ClassicLegs
from oche.darts_core.classic_sets import ClassicSets
from oche.darts_core.cricket import ClassicCricket
from oche.darts_core.free_for_all import FreeForAll
from oche.darts_core.match import Match, Player
from oche.darts_core.mode import GameMode
from oche.darts_core.notation import parse_throw
from oche.darts_core.results import EvaluationResult
from oche.darts_core.settings import (
    ClassicCricketSettings,
    ClassicLegsSettings,
    ClassicSetsSettings,
    FreeForAllSettings,
)
from oche.darts_core.throws import ThrowInput


DartCall = Union[str, ThrowInput]


class MatchBuilder:
    """Builder for creating and playing matches easily."""

    def __init__(self, mode: Optional[GameMode] = None):
        self.mode = mode
        self._players: Dict[str, Player] = {}
        self._match: Optional[Match] = None
        self.results: List[EvaluationResult] = []

    # Mode selection

    def with_mode(self, mode: GameMode) -> "MatchBuilder":
        if self._match is not None:
            raise ValueError("Cannot change the game mode once the match has started")
        self.mode = mode
        return self

    def classic_legs(self, **settings) -> "MatchBuilder":
        return self.with_mode(ClassicLegs(ClassicLegsSettings(**settings)))

    def classic_sets(self, **settings) -> "MatchBuilder":
        return self.with_mode(ClassicSets(ClassicSetsSettings(**settings)))

    def free_for_all(self, **settings) -> "MatchBuilder":
        return self.with_mode(FreeForAll(FreeForAllSettings(**settings)))

    def cricket(self, **settings) -> "MatchBuilder":
        return self.with_mode(ClassicCricket(ClassicCricketSettings(**settings)))

    # Players

    def player(self, name: str, player_id: Optional[str] = None) -> "MatchBuilder":
        """Add a player, in throwing order."""
        if self._match is not None:
            raise ValueError("Cannot add players once the match has started")
        if name in self._players:
            raise ValueError(f"Player '{name}' already added")
        if player_id is None:
            self._players[name] = Player(name)
        else:
            self._players[name] = Player(name, player_id)
        return self

    def players(self, *names: str) -> "MatchBuilder":
        for name in names:
            self.player(name)
        return self

    # Playing

    @property
    def match(self) -> Match:
        """The match being built, created on first access."""
        if self._match is None:
            if self.mode is None:
                raise ValueError("Must choose a game mode before starting the match")
            self._match = Match(list(self._players.values()), self.mode)
        return self._match

    def player_id(self, name: str) -> str:
        if name not in self._players:
            raise ValueError(f"Unknown player: {name}")
        return self._players[name].player_id

    def throw(self, name: str, dart: DartCall) -> "MatchBuilder":
        """Register a single dart for the named player."""
        throw = parse_throw(dart) if isinstance(dart, str) else dart
        self.results.append(self.match.register_throw(self.player_id(name), throw))
        return self

    def turn(self, name: str, *darts: DartCall) -> "MatchBuilder":
        """Register several darts for the named player, in order."""
        for dart in darts:
            self.throw(name, dart)
        return self

    @property
    def last_result(self) -> Optional[EvaluationResult]:
        return self.results[-1] if self.results else None

    def build(self) -> Match:
        return self.match
