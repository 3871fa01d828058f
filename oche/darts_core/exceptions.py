"""
Exceptions raised by the darts rules engine.

Every exception is raised before any match state is touched, so a caller
that catches one can keep using the match as if the call never happened.
"""


class DartsRuleException(Exception):
    pass


class InvalidPlayerCountException(DartsRuleException):
    """The number of players is outside the range a game mode allows."""

    def __init__(self, mode_name: str, count: int, min_players: int, max_players: int):
        self.mode_name = mode_name
        self.count = count
        self.min_players = min_players
        self.max_players = max_players
        if min_players == max_players:
            allowed = f"exactly {min_players}"
        else:
            allowed = f"{min_players} to {max_players}"
        super().__init__(f"{mode_name} requires {allowed} players, got {count}")


class WrongTurnException(DartsRuleException):
    def __init__(self, player_id: str, current_player_id: str):
        self.player_id = player_id
        self.current_player_id = current_player_id
        super().__init__(
            f"Player {player_id} threw out of turn, it is {current_player_id}'s turn"
        )


class GameFinishedException(DartsRuleException):
    def __init__(self, winner_id: str):
        self.winner_id = winner_id
        super().__init__(f"Match already finished, won by {winner_id}")


class InvalidThrowInputException(DartsRuleException):
    pass


class MissingScoreStateException(DartsRuleException):
    """A player has no score entry. Indicates a bug in match construction."""

    def __init__(self, player_id: str):
        self.player_id = player_id
        super().__init__(f"No score state for player {player_id}")


class MatchNotFoundException(DartsRuleException):
    pass
