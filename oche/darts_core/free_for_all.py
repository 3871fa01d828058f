"""
Free for all: the classic leg race opened up to four players.
"""

from oche.darts_core.classic_legs import ClassicLegs
from oche.darts_core.settings import FreeForAllSettings


class FreeForAll(ClassicLegs):
    """Leg race for two to four players without the advantage rule.

    Darts per visit come from the settings; everything else follows ClassicLegs,
    including the reset of every other player's leg score on a leg win.
    """

    name = "FreeForAll"
    min_players = 2
    max_players = 4

    def __init__(self, settings: FreeForAllSettings = FreeForAllSettings()):
        super().__init__(settings)

    @property
    def advantages_enabled(self) -> bool:
        return False

    @property
    def sudden_death_winning_leg(self) -> int:
        return self.settings.legs_to_win_match
