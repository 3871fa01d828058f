"""
Classic leg race: count down from the leg score to exactly zero, first to
win the configured number of legs takes the match.
"""

from dataclasses import replace
from typing import Mapping

from oche.darts_core.mode import GameMode, has_won_race, is_bust
from oche.darts_core.results import EvaluationResult, Progress
from oche.darts_core.scores import ClassicLegsScore, ScoreState
from oche.darts_core.settings import ClassicLegsSettings
from oche.darts_core.throws import ThrowInput


class ClassicLegs(GameMode):
    name = "ClassicLegs"
    min_players = 2
    max_players = 2
    score_type = ClassicLegsScore

    def __init__(self, settings: ClassicLegsSettings = ClassicLegsSettings()):
        super().__init__(settings)

    @property
    def advantages_enabled(self) -> bool:
        return self.settings.advantages_enabled

    @property
    def sudden_death_winning_leg(self) -> int:
        return self.settings.sudden_death_winning_leg

    def create_initial_score(self, player_id: str) -> ClassicLegsScore:
        return ClassicLegsScore(remaining_in_leg=self.settings.score_per_leg)

    def evaluate_throw(
        self,
        player_id: str,
        throw: ThrowInput,
        all_scores: Mapping[str, ScoreState],
    ) -> EvaluationResult:
        score = self._score_of(player_id, all_scores)
        opponents = self._opponent_scores(player_id, all_scores)

        if is_bust(score.remaining_in_leg, throw, self.settings.double_out_enabled):
            return EvaluationResult.bust(score)

        candidate = score.remaining_in_leg - throw.points
        if candidate > 0:
            return EvaluationResult.continue_(
                replace(score, remaining_in_leg=candidate)
            )

        # Leg checked out
        score_per_leg = self.settings.score_per_leg
        winner_score = ClassicLegsScore(
            remaining_in_leg=score_per_leg,
            legs_won_in_match=score.legs_won_in_match + 1,
        )
        best_opponent = max(
            (o.legs_won_in_match for o in opponents.values()), default=0
        )
        if has_won_race(
            winner_score.legs_won_in_match,
            best_opponent,
            self.settings.legs_to_win_match,
            self.advantages_enabled,
            self.sudden_death_winning_leg,
        ):
            return EvaluationResult.win(player_id, winner_score, opponents)

        # Everybody starts the next leg from scratch
        reset = {
            pid: replace(o, remaining_in_leg=score_per_leg)
            for pid, o in opponents.items()
        }
        return EvaluationResult.continue_(winner_score, reset, Progress.LEG_WON)
