"""
Stroke-order scoring for a whole character attempt.
"""

import logging
from typing import List, Optional, Sequence, Union

from ..config.settings import StrokeConfig
from .patterns import ReferenceStroke, StrokeData, StrokeType, ValidationResult
from .validator import StrokeValidator

logger = logging.getLogger(__name__)

Expected = Optional[Union[StrokeType, str, ReferenceStroke]]


class StrokeOrderScorer:
    """Aligns drawn strokes with the expected sequence by position."""

    def __init__(self, config: StrokeConfig = None, validator: StrokeValidator = None):
        self.config = config or StrokeConfig()
        self.validator = validator or StrokeValidator(self.config)

    def validate_all(self, strokes: Sequence[StrokeData],
                     expected: Sequence[Expected]) -> List[ValidationResult]:
        """Validate strokes pairwise by index; both sequences must have the same length."""
        if len(strokes) != len(expected):
            raise ValueError(
                f"Expected {len(expected)} strokes, got {len(strokes)}"
            )
        return [self._validate_one(s, e) for s, e in zip(strokes, expected)]

    def score_order(self, strokes: Sequence[StrokeData], expected: Sequence[Expected]) -> float:
        """
        Score a character attempt.

        Args:
            strokes: Drawn strokes in drawing order
            expected: Expected stroke types (or ReferenceStroke entries, or
                None where the reference has no data) in stroke order

        Returns:
            Mean validation confidence in [0, 1]; exactly 0 when the number
            of strokes differs from the expected count or nothing was drawn
        """
        if len(strokes) != len(expected):
            logger.debug("Stroke count mismatch: drew %d, expected %d", len(strokes), len(expected))
            return 0.0
        if not strokes:
            return 0.0

        results = self.validate_all(strokes, expected)
        return sum(r.confidence for r in results) / len(results)

    def _validate_one(self, stroke: StrokeData, expected: Expected) -> ValidationResult:
        if isinstance(expected, ReferenceStroke):
            return self.validator.validate(stroke, expected.type, expected.pattern)
        return self.validator.validate(stroke, expected)


def score_order(strokes: Sequence[StrokeData], expected: Sequence[Expected]) -> float:
    """
    Simple interface to score stroke order.

    Returns:
        Mean confidence, or 0 on a stroke count mismatch
    """
    return StrokeOrderScorer().score_order(strokes, expected)
