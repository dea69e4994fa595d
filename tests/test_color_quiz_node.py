"""
Tests for Color Quiz Node.

Tests cover:
- Round drawing and the highest-count answer
- Game session scoring, streaks and shape unlocks
- Surprise shape resolution
- Executor behaviour
"""

import random

import pytest

from SA_Libs.constants import SHAPE_UNLOCK_ORDER
from SA_Libs.NodesLib.color_quiz_node import (
    GameSession,
    InsufficientColorsError,
    QuizRound,
    ShapeLockedError,
    create_color_quiz_node,
    execute_color_quiz_node,
    start_round,
    unlocked_shapes_for_score,
)
from SA_Libs.SpectrumLib.spectrum_pipeline import analyze_pixel_buffer

from conftest import make_buffer


@pytest.fixture
def six_color_report():
    colors = (
        [(255, 0, 0)] * 1
        + [(0, 255, 0)] * 2
        + [(0, 0, 255)] * 3
        + [(255, 255, 0)] * 4
        + [(0, 255, 255)] * 5
        + [(255, 0, 255)] * 6
    )
    return analyze_pixel_buffer(make_buffer(colors, width=7))


class TestStartRound:
    """Tests for start_round function."""

    def test_at_most_four_options(self, six_color_report):
        quiz_round = start_round(six_color_report.records, random.Random(1))

        assert len(quiz_round.options) == 4
        assert len(set(quiz_round.options)) == 4

    def test_correct_answer_is_highest_count_option(self, six_color_report):
        for seed in range(20):
            quiz_round = start_round(six_color_report.records, random.Random(seed))

            assert quiz_round.correct in quiz_round.options
            assert quiz_round.correct.count == max(o.count for o in quiz_round.options)

    def test_two_colors_gives_two_options(self):
        report = analyze_pixel_buffer(make_buffer([(255, 0, 0), (0, 0, 255), (0, 0, 255)]))

        quiz_round = start_round(report.records, random.Random(0))

        assert len(quiz_round.options) == 2
        assert quiz_round.correct.rgb == (0, 0, 255)

    def test_needs_two_colors(self):
        report = analyze_pixel_buffer(make_buffer([(1, 2, 3)]))

        with pytest.raises(InsufficientColorsError):
            start_round(report.records)

    def test_same_seed_same_round(self, six_color_report):
        first = start_round(six_color_report.records, random.Random(9))
        second = start_round(six_color_report.records, random.Random(9))

        assert first == second


class TestGameSession:
    """Tests for GameSession state transitions."""

    @pytest.fixture
    def quiz_round(self, six_color_report):
        return start_round(six_color_report.records, random.Random(3))

    def wrong_option(self, quiz_round: QuizRound):
        return next(o for o in quiz_round.options if o != quiz_round.correct)

    def test_initial_state(self):
        session = GameSession()

        assert session.score == 0
        assert session.streak == 0
        assert session.selected_shape == "circle"
        assert session.unlocked_shapes == ["circle"]

    def test_correct_guess_scores_and_unlocks(self, quiz_round):
        session = GameSession()

        assert session.submit_guess(quiz_round, quiz_round.correct) is True
        assert session.score == 1
        assert session.streak == 1
        assert session.unlocked_shapes == ["circle", "rectangle"]

    def test_wrong_guess_resets_streak_only(self, quiz_round):
        session = GameSession()
        session.submit_guess(quiz_round, quiz_round.correct)
        session.submit_guess(quiz_round, quiz_round.correct)

        assert session.submit_guess(quiz_round, self.wrong_option(quiz_round)) is False
        assert session.score == 2
        assert session.streak == 0
        assert len(session.unlocked_shapes) == 3

    def test_unlocks_cap_at_all_shapes(self):
        assert unlocked_shapes_for_score(100) == list(SHAPE_UNLOCK_ORDER)

    def test_select_locked_shape(self):
        session = GameSession()

        with pytest.raises(ShapeLockedError):
            session.select_shape("star")
        assert session.selected_shape == "circle"

    def test_select_unlocked_shape(self):
        session = GameSession(score=2, unlocked_shapes=unlocked_shapes_for_score(2))

        session.select_shape("spiral")

        assert session.resolve_shape() == "spiral"

    def test_surprise_resolves_to_unlocked_shape(self):
        session = GameSession(score=7, unlocked_shapes=unlocked_shapes_for_score(7))
        session.select_shape("surprise")

        for seed in range(10):
            shape = session.resolve_shape(random.Random(seed))
            assert shape in session.unlocked_shapes
            assert shape != "surprise"

    def test_surprise_without_other_shapes_falls_back(self):
        session = GameSession(selected_shape="surprise", unlocked_shapes=["surprise"])

        assert session.resolve_shape() == "circle"

    def test_sessions_are_independent(self, quiz_round):
        first = GameSession()
        second = GameSession()

        first.submit_guess(quiz_round, quiz_round.correct)

        assert second.score == 0
        assert second.unlocked_shapes == ["circle"]


class TestColorQuizExecutor:
    """Tests for execute_color_quiz_node function."""

    def test_executor_draws_round(self, six_color_report):
        node = create_color_quiz_node("quiz", "analysis", seed=5)

        quiz_round = execute_color_quiz_node(node, [six_color_report])

        assert quiz_round == start_round(six_color_report.records, random.Random(5))

    def test_executor_validates_inputs(self):
        with pytest.raises(ValueError):
            execute_color_quiz_node({}, [])
        with pytest.raises(TypeError):
            execute_color_quiz_node({}, ["report"])
