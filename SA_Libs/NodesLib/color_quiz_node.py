"""
Color Quiz Node for the Color Spectrum Analyzer.

A round shows up to four colors from the analysed image and asks which one
covers the most pixels. Correct guesses raise the score, and the score
unlocks visualization shapes. Session state is an explicit GameSession
object owned by the host, never module-level state.

Classes:
    QuizRound: The options shown in one round and the correct answer
    GameSession: Score, streak and shape unlocks for one player session

Functions:
    start_round: Draw a new round from a record sequence
    unlocked_shapes_for_score: Shapes available at a given score
    execute_color_quiz_node: Pipeline executor for color quiz nodes
    create_color_quiz_node: Helper to build a node dictionary
"""

import logging
import random
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Sequence, Tuple

from SA_Libs.constants import (
    DEFAULT_SHAPE,
    NODE_TYPE_COLOR_QUIZ,
    QUIZ_MAX_OPTIONS,
    QUIZ_MIN_COLORS,
    SHAPE_UNLOCK_ORDER,
    SURPRISE_SHAPE,
)
from SA_Libs.SpectrumLib.color_models import ColorRecord
from SA_Libs.SpectrumLib.distribution_reporter import SpectrumReport, highest_count_record

logger = logging.getLogger(__name__)


class InsufficientColorsError(ValueError):
    """Raised when a quiz round is requested for fewer than two colors."""


class ShapeLockedError(ValueError):
    """Raised when selecting a shape the session has not unlocked."""


@dataclass(frozen=True)
class QuizRound:
    options: Tuple[ColorRecord, ...]
    correct: ColorRecord

    def is_correct(self, guess: ColorRecord) -> bool:
        return guess == self.correct


def start_round(records: Sequence[ColorRecord], rng: Optional[random.Random] = None) -> QuizRound:
    """
    Draw a quiz round.

    The records are shuffled and up to four become the options. The correct
    answer is the option with the highest pixel count (not the longest
    wavelength).

    Args:
        records: Records from a SpectrumReport
        rng: Random source; a fresh random.Random() when omitted

    Returns:
        A QuizRound

    Raises:
        InsufficientColorsError: If fewer than two records are available
    """
    if len(records) < QUIZ_MIN_COLORS:
        raise InsufficientColorsError(
            f"Color quiz needs at least {QUIZ_MIN_COLORS} colors, got {len(records)}"
        )

    rng = rng or random.Random()
    shuffled = list(records)
    rng.shuffle(shuffled)
    options = tuple(shuffled[:QUIZ_MAX_OPTIONS])
    return QuizRound(options=options, correct=highest_count_record(options))


def unlocked_shapes_for_score(score: int) -> List[str]:
    return list(SHAPE_UNLOCK_ORDER[:min(max(score, 0) + 1, len(SHAPE_UNLOCK_ORDER))])


@dataclass
class GameSession:
    """State of one player's quiz session.

    Attributes:
        score: Number of correct guesses
        streak: Consecutive correct guesses
        selected_shape: Shape chosen for the visualization
        unlocked_shapes: Shapes available at the current score
    """

    score: int = 0
    streak: int = 0
    selected_shape: str = DEFAULT_SHAPE
    unlocked_shapes: List[str] = field(default_factory=lambda: unlocked_shapes_for_score(0))

    def submit_guess(self, quiz_round: QuizRound, guess: ColorRecord) -> bool:
        if quiz_round.is_correct(guess):
            self.score += 1
            self.streak += 1
            self.unlocked_shapes = unlocked_shapes_for_score(self.score)
            logger.debug(f"Correct guess, score={self.score} streak={self.streak}")
            return True

        self.streak = 0
        return False

    def select_shape(self, shape: str) -> None:
        if shape not in self.unlocked_shapes:
            raise ShapeLockedError(f"Shape '{shape}' is not unlocked yet")
        self.selected_shape = shape

    def resolve_shape(self, rng: Optional[random.Random] = None) -> str:
        """
        Return the shape to draw.

        'surprise' resolves to a random unlocked shape other than itself,
        falling back to the default shape when none is available.
        """
        if self.selected_shape != SURPRISE_SHAPE:
            return self.selected_shape

        available = [shape for shape in self.unlocked_shapes if shape != SURPRISE_SHAPE]
        if not available:
            return DEFAULT_SHAPE
        return (rng or random.Random()).choice(available)


def execute_color_quiz_node(node: Dict[str, Any], inputs: List[Any]) -> QuizRound:
    """
    Pipeline executor for color quiz nodes.

    Args:
        node: Node dictionary, optional 'seed' to make the draw repeatable
        inputs: Should contain exactly one element: a SpectrumReport

    Returns:
        A QuizRound drawn from the report's records

    Raises:
        ValueError: If inputs list is empty
        TypeError: If input is not a SpectrumReport
        InsufficientColorsError: If the report has fewer than two colors
    """
    if not inputs:
        raise ValueError("Color quiz node requires 1 spectrum report input")

    report = inputs[0]
    if not isinstance(report, SpectrumReport):
        raise TypeError(f"Expected SpectrumReport, got {type(report)}")

    seed = node.get("seed")
    rng = random.Random(seed) if seed is not None else None
    return start_round(report.records, rng)


def create_color_quiz_node(node_id: str, source_id: str, seed: Optional[int] = None) -> Dict[str, Any]:
    return {
        "id": node_id,
        "type": NODE_TYPE_COLOR_QUIZ,
        "inputs": [source_id],
        "seed": seed,
    }
