"""
In-memory registry of running matches, addressed by match id.

Each match gets its own lock so that registering a throw stays a single
critical section when the service is shared between threads.
"""

import logging
import threading
from typing import Dict, List, Sequence, Tuple

from oche.darts_core.exceptions import MatchNotFoundException
from oche.darts_core.match import Match, Player
from oche.darts_core.mode import GameMode
from oche.darts_core.results import EvaluationResult
from oche.darts_core.throws import ThrowInput

logger = logging.getLogger(__name__)


class MatchService:
    def __init__(self):
        self._matches: Dict[str, Match] = {}
        self._locks: Dict[str, threading.Lock] = {}
        self._registry_lock = threading.Lock()

    def create_match(self, players: Sequence[Player], mode: GameMode) -> Match:
        match = Match(players, mode)
        with self._registry_lock:
            self._matches[match.id] = match
            self._locks[match.id] = threading.Lock()
        return match

    def get_match(self, match_id: str) -> Match:
        return self._lookup(match_id)[0]

    def register_throw(
        self, match_id: str, player_id: str, throw: ThrowInput
    ) -> EvaluationResult:
        match, lock = self._lookup(match_id)
        with lock:
            return match.register_throw(player_id, throw)

    def active_matches(self) -> List[Match]:
        with self._registry_lock:
            matches = list(self._matches.values())
        return [m for m in matches if not m.is_finished]

    def discard_match(self, match_id: str) -> Match:
        """Forget a match, returning it so the caller can persist it."""
        with self._registry_lock:
            try:
                match = self._matches.pop(match_id)
            except KeyError:
                raise MatchNotFoundException(f"No match with id {match_id}") from None
            del self._locks[match_id]
        logger.info("Discarded match %s", match_id)
        return match

    def _lookup(self, match_id: str) -> Tuple[Match, threading.Lock]:
        """The match and its lock, read together under the registry lock."""
        with self._registry_lock:
            try:
                return self._matches[match_id], self._locks[match_id]
            except KeyError:
                raise MatchNotFoundException(f"No match with id {match_id}") from None
