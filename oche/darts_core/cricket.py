"""
Classic cricket: close 20 down to 15 and the bull, scoring on sectors the
opponents have not closed yet.
"""

from dataclasses import replace
from typing import Mapping

from oche.darts_core.mode import GameMode
from oche.darts_core.results import EvaluationResult
from oche.darts_core.scores import CRICKET_SECTORS, CricketScore, ScoreState
from oche.darts_core.settings import ClassicCricketSettings
from oche.darts_core.throws import BULL_OUTER, ThrowInput


class ClassicCricket(GameMode):
    name = "ClassicCricket"
    min_players = 2
    max_players = 4
    score_type = CricketScore

    def __init__(self, settings: ClassicCricketSettings = ClassicCricketSettings()):
        super().__init__(settings)

    def create_initial_score(self, player_id: str) -> CricketScore:
        return CricketScore()

    def hit_count(self, throw: ThrowInput) -> int:
        """Number of hits a dart is worth on its sector."""
        if not self.settings.count_multipliers:
            return 1
        return throw.multiplier

    def evaluate_throw(
        self,
        player_id: str,
        throw: ThrowInput,
        all_scores: Mapping[str, ScoreState]
    ) -> EvaluationResult:
        hits_to_close = self.settings.hits_to_close_sector
        score = self._score_of(player_id, all_scores)
        opponents = self._opponent_scores(player_id, all_scores)

        sector = BULL_OUTER if throw.is_bull else throw.sector
        if sector not in CRICKET_SECTORS:
            return EvaluationResult.continue_(score)

        hits = self.hit_count(throw)
        current = score.hits_for(sector)
        needed = max(hits_to_close - current, 0)
        applied = min(hits, needed)
        extra = hits - applied

        updated = score.with_hits(sector, min(current + applied, hits_to_close))

        # Hits beyond closing score only while some opponent is still open
        if extra and any(
            not o.is_closed(sector, hits_to_close) for o in opponents.values()
        ):
            updated = replace(updated, score=updated.score + extra * sector)

        if updated.all_closed(hits_to_close) and all(
            updated.score >= o.score for o in opponents.values()
        ):
            return EvaluationResult.win(player_id, updated)

        return EvaluationResult.continue_(updated)
