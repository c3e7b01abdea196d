"""
Stroke Classification

Maps geometric features of a stroke to one of the four stroke types using
the curvature threshold and the direction tables of the stroke patterns.
"""

import logging
import math
from typing import Dict, Optional, Sequence

from ..config.settings import StrokeConfig
from ..utils.geometry import AngleUtils
from .patterns import StrokePattern, StrokeType, build_patterns

logger = logging.getLogger(__name__)


class StrokeClassifier:
    """
    Classifies a stroke as horizontal, vertical, diagonal or curve.

    Decision order (first match wins):
      1. enough points and curvature above the curve threshold -> curve
      2. direction within tolerance of a horizontal, vertical or diagonal
         pattern direction, checked in that order
      3. anything else -> curve
    """

    def __init__(self, config: StrokeConfig = None,
                 patterns: Optional[Dict[StrokeType, StrokePattern]] = None):
        self.config = config or StrokeConfig()
        self.patterns = patterns if patterns is not None else build_patterns(self.config)
        self.curve_threshold = self.config.CURVE_THRESHOLD
        self.min_points_for_curve = self.config.MIN_POINTS_FOR_CURVE
        self.type_order = [StrokeType.parse(t) for t in self.config.STROKE_TYPE_ORDER]

    def classify(self, direction: float, length: float, curvature: float,
                 points: Sequence) -> StrokeType:
        """
        Classify a stroke from its features.

        Args:
            direction: Net direction in degrees
            length: Chord length (unused by the rules, kept for callers)
            curvature: Curvature estimate from the analyzer
            points: The stroke's points

        Returns:
            One of the StrokeType members, never None

        Raises:
            ValueError: If direction or curvature is not a finite number
        """
        if not math.isfinite(direction) or not math.isfinite(curvature):
            raise ValueError("Direction and curvature must be finite numbers")

        if len(points) >= self.min_points_for_curve and curvature > self.curve_threshold:
            return StrokeType.CURVE

        normalized = AngleUtils.normalize_degrees(direction)
        for stroke_type in self.type_order:
            if self.matches_direction(normalized, self.patterns[stroke_type]):
                return stroke_type

        logger.debug("No direction pattern matched %.1f degrees, falling back to curve", normalized)
        return StrokeType.CURVE

    @staticmethod
    def matches_direction(direction: float, pattern: StrokePattern) -> bool:
        """True when direction is within tolerance of any of the pattern's directions."""
        return any(
            AngleUtils.circular_distance(direction, expected) <= pattern.tolerance_direction
            for expected in pattern.expected_direction
        )

    @staticmethod
    def nearest_direction(direction: float, pattern: StrokePattern) -> float:
        """The pattern direction closest to direction."""
        return min(
            pattern.expected_direction,
            key=lambda expected: AngleUtils.circular_distance(direction, expected)
        )


# Convenience function for simple usage
def classify(direction: float, length: float, curvature: float,
             points: Sequence) -> StrokeType:
    """
    Simple interface to classify stroke features.

    Returns:
        'horizontal', 'vertical', 'diagonal' or 'curve' as a StrokeType
    """
    return StrokeClassifier().classify(direction, length, curvature, points)
