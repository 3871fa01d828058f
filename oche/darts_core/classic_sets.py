"""
Classic set play: legs are won inside sets and sets win the match.
"""

from dataclasses import replace
from typing import Mapping

from oche.darts_core.mode import GameMode, has_won_race, is_bust
from oche.darts_core.results import EvaluationResult, Progress
from oche.darts_core.scores import ClassicSetsScore, ScoreState
from oche.darts_core.settings import ClassicSetsSettings
from oche.darts_core.throws import ThrowInput


class ClassicSets(GameMode):
    """Two player set play.

    The advantage and sudden death rules decide the leg race inside each set.
    The match itself is a plain race to ``sets_to_win_match``.
    """

    name = "ClassicSets"
    min_players = 2
    max_players = 2
    score_type = ClassicSetsScore

    def __init__(self, settings: ClassicSetsSettings = ClassicSetsSettings()):
        super().__init__(settings)

    def create_initial_score(self, player_id: str) -> ClassicSetsScore:
        return ClassicSetsScore(remaining_in_leg=self.settings.score_per_leg)

    def evaluate_throw(
        self,
        player_id: str,
        throw: ThrowInput,
        all_scores: Mapping[str, ScoreState],
    ) -> EvaluationResult:
        settings = self.settings
        score = self._score_of(player_id, all_scores)
        opponents = self._opponent_scores(player_id, all_scores)

        if is_bust(score.remaining_in_leg, throw, settings.double_out_enabled):
            return EvaluationResult.bust(score)

        candidate = score.remaining_in_leg - throw.points
        if candidate > 0:
            return EvaluationResult.continue_(
                replace(score, remaining_in_leg=candidate)
            )

        score_per_leg = settings.score_per_leg
        legs_won = score.legs_won_in_set + 1
        best_opponent = max((o.legs_won_in_set for o in opponents.values()), default=0)

        set_won = has_won_race(
            legs_won,
            best_opponent,
            settings.legs_to_win_set,
            settings.advantages_enabled,
            settings.sudden_death_winning_leg,
        )
        if not set_won:
            winner_score = replace(
                score, remaining_in_leg=score_per_leg, legs_won_in_set=legs_won
            )
            reset = {
                pid: replace(o, remaining_in_leg=score_per_leg)
                for pid, o in opponents.items()
            }
            return EvaluationResult.continue_(winner_score, reset, Progress.LEG_WON)

        winner_score = ClassicSetsScore(
            remaining_in_leg=score_per_leg,
            legs_won_in_set=0,
            sets_won_in_match=score.sets_won_in_match + 1,
        )
        if winner_score.sets_won_in_match >= settings.sets_to_win_match:
            return EvaluationResult.win(player_id, winner_score, opponents)

        # New set: leg counts start over for everybody
        reset = {
            pid: replace(o, remaining_in_leg=score_per_leg, legs_won_in_set=0)
            for pid, o in opponents.items()
        }
        return EvaluationResult.continue_(winner_score, reset, Progress.SET_WON)
