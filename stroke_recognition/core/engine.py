"""
Stroke engine that coordinates preprocessing, analysis, classification
and validation behind one object.
"""

import logging
from typing import Any, Iterable, Optional, Sequence, Tuple, Union

from ..config.settings import StrokeConfig
from ..strokes.analyzer import CurvatureMode, StrokeAnalyzer
from ..strokes.order_scorer import StrokeOrderScorer
from ..strokes.patterns import ReferenceStroke, StrokeData, StrokeType, ValidationResult
from ..strokes.validator import StrokeValidator

logger = logging.getLogger(__name__)

Expected = Optional[Union[StrokeType, str, ReferenceStroke]]


class StrokeEngine:
    """
    Main entry point for recognizing and validating strokes.

    The engine holds configuration only; every call works on its own
    inputs and returns new records, so one engine can serve any number of
    drawing surfaces.
    """

    def __init__(self, config: StrokeConfig = None, unit_length: float = None):
        """
        Initialize the engine.

        Args:
            config: Configuration constants, defaults to StrokeConfig
            unit_length: Canvas length that counts as 1.0 when comparing
                stroke lengths with the patterns; None keeps raw lengths
        """
        if unit_length is not None and unit_length <= 0:
            raise ValueError("unit_length must be positive")

        self.config = config or StrokeConfig()
        self.unit_length = unit_length
        self.analyzer = StrokeAnalyzer(self.config)
        self.validator = StrokeValidator(self.config)
        self.order_scorer = StrokeOrderScorer(self.config, self.validator)

    def analyze(self, points: Iterable[Any], mode: CurvatureMode = CurvatureMode.BASIC) -> StrokeData:
        """
        Preprocess, analyze and classify one stroke.

        Raises:
            InsufficientPointsError: If fewer than 2 points remain
        """
        stroke = self.analyzer.analyze(points, mode=mode)
        if self.unit_length:
            stroke = stroke.scaled(self.unit_length)
        return stroke

    def validate(self, stroke: StrokeData, expected: Expected) -> ValidationResult:
        """Validate a stroke against a stroke type, a ReferenceStroke or None."""
        if isinstance(expected, ReferenceStroke):
            return self.validator.validate(stroke, expected.type, expected.pattern)
        return self.validator.validate(stroke, expected)

    def evaluate(self, points: Iterable[Any], expected: Expected,
                 mode: CurvatureMode = CurvatureMode.BASIC) -> Tuple[StrokeData, ValidationResult]:
        """
        Analyze and validate one stroke.

        Returns:
            (stroke, result) tuple

        Raises:
            InsufficientPointsError: If the stroke is too short to analyze
        """
        stroke = self.analyze(points, mode)
        return stroke, self.validate(stroke, expected)

    def evaluate_live(self, points: Iterable[Any], expected: Expected) -> Tuple[StrokeData, ValidationResult]:
        """Low-latency evaluation while drawing (basic curvature)."""
        return self.evaluate(points, expected, CurvatureMode.BASIC)

    def evaluate_scored(self, points: Iterable[Any], expected: Expected) -> Tuple[StrokeData, ValidationResult]:
        """Evaluation of a scored attempt (segmented curvature)."""
        return self.evaluate(points, expected, CurvatureMode.SEGMENTED)

    def score_order(self, strokes: Sequence[StrokeData], expected: Sequence[Expected]) -> float:
        """Mean confidence of a whole attempt, 0 on a stroke count mismatch."""
        return self.order_scorer.score_order(strokes, expected)
