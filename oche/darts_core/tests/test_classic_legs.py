"""
Tests for the classic leg race rules.
"""

import unittest

from oche.darts_core.builder import MatchBuilder
from oche.darts_core.assertions import assert_match
from oche.darts_core.classic_legs import ClassicLegs
from oche.darts_core.exceptions import InvalidPlayerCountException, WrongTurnException
from oche.darts_core.mode import has_won_race, is_bust
from oche.darts_core.results import Progress, ThrowOutcome
from oche.darts_core.scores import ClassicLegsScore
from oche.darts_core.settings import ClassicLegsSettings
from oche.darts_core.tests.test_utils import make_players, setup_mode
from oche.darts_core.throws import ThrowInput


def legs_mode(**settings) -> ClassicLegs:
    settings.setdefault("score_per_leg", 201)
    return ClassicLegs(ClassicLegsSettings(**settings))


class CountdownRuleTests(unittest.TestCase):
    def test_is_bust(self):
        self.assertTrue(is_bust(50, ThrowInput(17, 3), double_out=False))
        self.assertFalse(is_bust(51, ThrowInput(17, 3), double_out=False))
        self.assertFalse(is_bust(20, ThrowInput(20, 1), double_out=False))
        self.assertTrue(is_bust(20, ThrowInput(20, 1), double_out=True))
        self.assertFalse(is_bust(20, ThrowInput(10, 2), double_out=True))
        self.assertTrue(is_bust(50, ThrowInput(50), double_out=True))
        self.assertFalse(is_bust(50, ThrowInput(25, 2), double_out=True))
        self.assertTrue(is_bust(52, ThrowInput(17, 3), double_out=True))
        self.assertFalse(is_bust(52, ThrowInput(17, 3), double_out=False))

    def test_has_won_race_without_advantages(self):
        self.assertTrue(has_won_race(3, 2, 3, False, 6))
        self.assertFalse(has_won_race(2, 0, 3, False, 6))

    def test_has_won_race_with_advantages(self):
        self.assertFalse(has_won_race(3, 2, 3, True, 6))
        self.assertTrue(has_won_race(4, 2, 3, True, 6))
        # A two leg lead is not enough before the target
        self.assertFalse(has_won_race(2, 0, 3, True, 6))
        # Sudden death wins regardless of margin
        self.assertTrue(has_won_race(6, 5, 3, True, 6))


class ClassicLegsTests(unittest.TestCase):
    def test_validate_players_requires_exactly_two(self):
        mode = legs_mode()
        for count in (0, 1, 3, 4):
            with self.assertRaises(InvalidPlayerCountException):
                mode.validate_players(make_players(count))
        mode.validate_players(make_players(2))

    def test_validate_players_is_repeatable(self):
        mode = legs_mode()
        players = make_players(3)
        for _ in range(3):
            with self.assertRaises(InvalidPlayerCountException) as ctx:
                mode.validate_players(players)
            self.assertEqual(ctx.exception.count, 3)
        for _ in range(3):
            self.assertIsNone(mode.validate_players(players[:2]))

    def test_initial_score(self):
        self.assertEqual(
            legs_mode().create_initial_score("p1"),
            ClassicLegsScore(remaining_in_leg=201, legs_won_in_match=0),
        )

    def test_bust_when_negative_score(self):
        mode = legs_mode()
        (p1, _), scores = setup_mode(mode)
        scores[p1.player_id] = ClassicLegsScore(50, 0)

        result = mode.evaluate_throw(p1.player_id, ThrowInput(17, 3), scores)

        self.assertEqual(result.outcome, ThrowOutcome.BUST)
        self.assertEqual(result.progress, Progress.NONE)
        self.assertEqual(result.updated_score, ClassicLegsScore(50, 0))
        self.assertIsNone(result.other_updated_scores)

    def test_bust_when_leaving_one_in_double_out_mode(self):
        mode = legs_mode(double_out_enabled=True)
        (p1, _), scores = setup_mode(mode)
        scores[p1.player_id] = ClassicLegsScore(52, 0)

        result = mode.evaluate_throw(p1.player_id, ThrowInput(17, 3), scores)

        self.assertEqual(result.outcome, ThrowOutcome.BUST)

    def test_bust_when_zero_but_not_double_in_double_out_mode(self):
        mode = legs_mode(double_out_enabled=True)
        (p1, _), scores = setup_mode(mode)
        scores[p1.player_id] = ClassicLegsScore(20, 0)

        result = mode.evaluate_throw(p1.player_id, ThrowInput(20, 1), scores)

        self.assertEqual(result.outcome, ThrowOutcome.BUST)
        self.assertEqual(result.progress, Progress.NONE)

    def test_normal_subtraction_decreases_remaining(self):
        mode = legs_mode()
        (p1, _), scores = setup_mode(mode)

        result = mode.evaluate_throw(p1.player_id, ThrowInput(20, 3), scores)

        self.assertEqual(result.outcome, ThrowOutcome.CONTINUE)
        self.assertEqual(result.progress, Progress.NONE)
        self.assertEqual(result.updated_score.remaining_in_leg, 141)
        self.assertIsNone(result.other_updated_scores)

    def test_evaluation_does_not_touch_scores(self):
        mode = legs_mode()
        (p1, p2), scores = setup_mode(mode)
        scores[p1.player_id] = ClassicLegsScore(20, 0)
        before = dict(scores)

        mode.evaluate_throw(p1.player_id, ThrowInput(20, 1), scores)
        mode.evaluate_throw(p1.player_id, ThrowInput(20, 1), scores)

        self.assertEqual(scores, before)

    def test_win_leg_single_when_double_out_disabled(self):
        mode = legs_mode()
        (p1, _), scores = setup_mode(mode)
        scores[p1.player_id] = ClassicLegsScore(20, 0)

        result = mode.evaluate_throw(p1.player_id, ThrowInput(20, 1), scores)

        self.assertEqual(result.outcome, ThrowOutcome.CONTINUE)
        self.assertEqual(result.progress, Progress.LEG_WON)
        self.assertEqual(result.updated_score, ClassicLegsScore(201, 1))

    def test_win_leg_double_when_double_out_enabled(self):
        mode = legs_mode(double_out_enabled=True)
        (p1, _), scores = setup_mode(mode)
        scores[p1.player_id] = ClassicLegsScore(20, 0)

        result = mode.evaluate_throw(p1.player_id, ThrowInput(10, 2), scores)

        self.assertEqual(result.progress, Progress.LEG_WON)
        self.assertEqual(result.updated_score, ClassicLegsScore(201, 1))

    def test_win_leg_on_double_bull_in_double_out_mode(self):
        mode = legs_mode(double_out_enabled=True)
        (p1, _), scores = setup_mode(mode)
        scores[p1.player_id] = ClassicLegsScore(50, 0)

        result = mode.evaluate_throw(p1.player_id, ThrowInput(25, 2), scores)

        self.assertEqual(result.progress, Progress.LEG_WON)

    def test_bust_on_single_multiplier_50_in_double_out_mode(self):
        mode = legs_mode(double_out_enabled=True)
        (p1, _), scores = setup_mode(mode)
        scores[p1.player_id] = ClassicLegsScore(50, 0)

        result = mode.evaluate_throw(p1.player_id, ThrowInput(50, 1), scores)

        self.assertEqual(result.outcome, ThrowOutcome.BUST)
        self.assertEqual(result.updated_score, ClassicLegsScore(50, 0))

    def test_single_multiplier_50_still_wins_without_double_out(self):
        mode = legs_mode()
        (p1, _), scores = setup_mode(mode)
        scores[p1.player_id] = ClassicLegsScore(50, 0)

        result = mode.evaluate_throw(p1.player_id, ThrowInput(50, 1), scores)

        self.assertEqual(result.progress, Progress.LEG_WON)

    def test_win_leg_resets_opponent_remaining_score(self):
        mode = legs_mode()
        (p1, p2), scores = setup_mode(mode)
        scores[p1.player_id] = ClassicLegsScore(20, 0)
        scores[p2.player_id] = ClassicLegsScore(100, 0)

        result = mode.evaluate_throw(p1.player_id, ThrowInput(20, 1), scores)

        self.assertEqual(
            dict(result.other_updated_scores), {p2.player_id: ClassicLegsScore(201, 0)}
        )
        self.assertEqual(result.progress, Progress.LEG_WON)
        self.assertEqual(result.outcome, ThrowOutcome.CONTINUE)

    def test_win_match_normal_flow(self):
        mode = legs_mode()
        (p1, p2), scores = setup_mode(mode)
        scores[p1.player_id] = ClassicLegsScore(20, 2)
        scores[p2.player_id] = ClassicLegsScore(10, 1)

        result = mode.evaluate_throw(p1.player_id, ThrowInput(20, 1), scores)

        self.assertEqual(result.outcome, ThrowOutcome.WIN)
        self.assertEqual(result.progress, Progress.NONE)
        self.assertEqual(result.winner_id, p1.player_id)
        self.assertEqual(result.updated_score, ClassicLegsScore(201, 3))
        # Opponent is reported unchanged
        self.assertEqual(
            dict(result.other_updated_scores), {p2.player_id: ClassicLegsScore(10, 1)}
        )

    def test_continues_because_required_advantage_not_reached(self):
        mode = legs_mode(advantages_enabled=True)
        (p1, p2), scores = setup_mode(mode)
        scores[p1.player_id] = ClassicLegsScore(20, 2)
        scores[p2.player_id] = ClassicLegsScore(30, 2)

        result = mode.evaluate_throw(p1.player_id, ThrowInput(20, 1), scores)

        self.assertEqual(result.outcome, ThrowOutcome.CONTINUE)
        self.assertEqual(result.progress, Progress.LEG_WON)
        self.assertEqual(result.updated_score, ClassicLegsScore(201, 3))
        self.assertEqual(
            result.other_updated_scores[p2.player_id], ClassicLegsScore(201, 2)
        )

    def test_match_win_by_two_legs_on_advantages_enabled(self):
        mode = legs_mode(advantages_enabled=True)
        (p1, p2), scores = setup_mode(mode)
        scores[p1.player_id] = ClassicLegsScore(20, 3)
        scores[p2.player_id] = ClassicLegsScore(30, 2)

        result = mode.evaluate_throw(p1.player_id, ThrowInput(20, 1), scores)

        self.assertEqual(result.outcome, ThrowOutcome.WIN)
        self.assertEqual(result.updated_score, ClassicLegsScore(201, 4))
        self.assertEqual(
            result.other_updated_scores[p2.player_id], ClassicLegsScore(30, 2)
        )

    def test_match_win_by_sudden_death(self):
        mode = legs_mode(advantages_enabled=True)
        (p1, p2), scores = setup_mode(mode)
        scores[p1.player_id] = ClassicLegsScore(20, 5)
        scores[p2.player_id] = ClassicLegsScore(30, 5)

        result = mode.evaluate_throw(p1.player_id, ThrowInput(20, 1), scores)

        self.assertEqual(result.outcome, ThrowOutcome.WIN)
        self.assertEqual(result.progress, Progress.NONE)
        self.assertEqual(result.updated_score, ClassicLegsScore(201, 6))
        self.assertEqual(
            result.other_updated_scores[p2.player_id], ClassicLegsScore(30, 5)
        )

    def test_workflow(self):
        """Play a leg with a bust and a checkout through the match."""
        builder = (
            MatchBuilder()
            .classic_legs(score_per_leg=201, double_out_enabled=True)
            .players("Alice", "Bob")
        )

        builder.turn("Alice", "T20", "T20", "T20")
        assert_match(builder.match).player("Alice").remaining(21)

        with self.assertRaises(WrongTurnException):
            builder.throw("Alice", "1")

        builder.turn("Bob", "T20", "T20", "T20")

        # Leaving 1 under double out busts and hands over the turn
        builder.throw("Alice", "20")
        self.assertEqual(builder.last_result.outcome, ThrowOutcome.BUST)
        assert_match(builder.match).player("Alice").remaining(21)
        assert_match(builder.match).current_player("Bob")

        builder.turn("Bob", "1", "D10")
        self.assertEqual(builder.last_result.progress, Progress.LEG_WON)
        assert_match(builder.match).player("Alice").remaining(201).legs_won(0)
        assert_match(builder.match).player("Bob").remaining(201).legs_won(1)

        # Bob still has a dart left in his visit, thrown into the new leg
        assert_match(builder.match).current_player("Bob").darts_thrown_in_turn(2)
        builder.throw("Bob", "T20")
        assert_match(builder.match).player("Bob").remaining(141)
        assert_match(builder.match).current_player("Alice").in_progress().history_length(10)

    def test_play_to_match_win(self):
        builder = (
            MatchBuilder()
            .classic_legs(score_per_leg=101, legs_to_win_match=2)
            .players("Alice", "Bob")
        )
        # Leg 1: Alice checks out with her third dart
        builder.turn("Alice", "T20", "T7", "20")
        self.assertEqual(builder.last_result.progress, Progress.LEG_WON)
        builder.turn("Bob", "T20", "20", "MISS")
        assert_match(builder.match).player("Bob").remaining(21)
        # Leg 2
        builder.turn("Alice", "T20", "T7", "D10")

        self.assertEqual(builder.last_result.outcome, ThrowOutcome.WIN)
        assert_match(builder.match).winner("Alice").darts_thrown_in_turn(0)
        assert_match(builder.match).player("Alice").legs_won(2).remaining(101)
        assert_match(builder.match).player("Bob").legs_won(0).remaining(21)
        self.assertIsNone(builder.match.turn_start_snapshot)


if __name__ == "__main__":
    unittest.main()
