"""
Outcome of evaluating one dart against the current scores.
"""

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Mapping, Optional

from oche.darts_core.scores import ScoreState


class ThrowOutcome(Enum):
    """Classification of a single dart."""

    CONTINUE = "continue"
    BUST = "bust"
    WIN = "win"


class Progress(Enum):
    """Structural milestone reached by a dart, for display purposes."""

    NONE = "none"
    LEG_WON = "leg_won"
    SET_WON = "set_won"


@dataclass(frozen=True)
class EvaluationResult:
    """What a game mode decided about one dart.

    ``other_updated_scores`` is only set when the dart changes the state of
    players other than the thrower (a new leg or set resets everyone).
    """

    outcome: ThrowOutcome
    updated_score: ScoreState
    other_updated_scores: Optional[Mapping[str, ScoreState]] = None
    progress: Progress = Progress.NONE
    winner_id: Optional[str] = None

    def __post_init__(self):
        if self.other_updated_scores is not None:
            object.__setattr__(
                self,
                "other_updated_scores",
                MappingProxyType(dict(self.other_updated_scores)),
            )

    @classmethod
    def continue_(
        cls,
        updated_score: ScoreState,
        other_updated_scores: Optional[Mapping[str, ScoreState]] = None,
        progress: Progress = Progress.NONE,
    ) -> "EvaluationResult":
        return cls(ThrowOutcome.CONTINUE, updated_score, other_updated_scores, progress)

    @classmethod
    def bust(cls, restored_score: ScoreState) -> "EvaluationResult":
        return cls(ThrowOutcome.BUST, restored_score)

    @classmethod
    def win(
        cls,
        winner_id: str,
        final_score: ScoreState,
        other_updated_scores: Optional[Mapping[str, ScoreState]] = None,
    ) -> "EvaluationResult":
        return cls(
            ThrowOutcome.WIN,
            final_score,
            other_updated_scores,
            Progress.NONE,
            winner_id,
        )

    @property
    def is_bust(self) -> bool:
        return self.outcome == ThrowOutcome.BUST

    @property
    def is_win(self) -> bool:
        return self.outcome == ThrowOutcome.WIN
