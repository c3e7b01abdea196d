"""
Stroke validation and feedback.

Compares a classified stroke with the pattern of the stroke type expected
at the current position and turns the outcome of four independent checks
into a confidence score, a message and concrete suggestions.

Confidence is the weighted sum of the checks that passed:

    type       0.4
    direction  0.3
    length     0.2
    curvature  0.1   (only checked against curve patterns, passes otherwise)

A stroke is correct when its confidence exceeds 0.8. A correct stroke
always gets the "Correct stroke!" message; suggestions for any check it
still failed are kept as refinements.
"""

import logging
import math
from dataclasses import dataclass
from typing import Dict, List, Optional, Union

from ..config.settings import StrokeConfig
from ..utils.geometry import AngleUtils
from .classifier import StrokeClassifier
from .patterns import StrokeData, StrokePattern, StrokeType, ValidationResult, build_patterns, get_pattern

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class StrokeChecks:
    """Outcome of the individual checks behind one validation."""
    type_match: bool
    direction_match: bool
    length_match: bool
    curvature_match: bool
    direction_offset: float
    length_ratio: float
    curvature_offset: float


class StrokeValidator:
    """Validates strokes against expected stroke patterns."""

    def __init__(self, config: StrokeConfig = None,
                 patterns: Optional[Dict[StrokeType, StrokePattern]] = None):
        self.config = config or StrokeConfig()
        self.patterns = patterns if patterns is not None else build_patterns(self.config)
        self.weights = {
            'type': self.config.TYPE_WEIGHT,
            'direction': self.config.DIRECTION_WEIGHT,
            'length': self.config.LENGTH_WEIGHT,
            'curvature': self.config.CURVATURE_WEIGHT,
        }
        self.threshold = self.config.CORRECTNESS_THRESHOLD

    def validate(self, stroke: StrokeData,
                 expected_type: Optional[Union[StrokeType, str]],
                 pattern: Optional[StrokePattern] = None) -> ValidationResult:
        """
        Validate a stroke.

        Args:
            stroke: Classified stroke from the analyzer
            expected_type: Stroke type expected at this position, or None
                when the reference data has nothing for it
            pattern: Pattern overriding the canonical one for expected_type

        Returns:
            ValidationResult; the "cannot validate" result when
            expected_type is None
        """
        if expected_type is None:
            logger.debug("No reference stroke, returning unvalidated result")
            return ValidationResult.unavailable(stroke.type)

        expected = StrokeType.parse(expected_type)
        pattern = pattern or get_pattern(expected, self.patterns)

        if self._is_degenerate(stroke, pattern):
            logger.debug("Degenerate stroke (length %.3f) against %s", stroke.length, expected.value)
            return ValidationResult(
                is_correct=False,
                confidence=self.config.DEGENERATE_CONFIDENCE,
                message="The stroke is too short to evaluate",
                suggestions=["Draw a longer, continuous stroke"],
                expected_type=expected,
                actual_type=stroke.type,
            )

        checks = self.run_checks(stroke, expected, pattern)
        confidence = self.score(checks)
        is_correct = confidence > self.threshold

        logger.debug(
            "Validated %s against %s: confidence=%.2f correct=%s",
            stroke.type.value, expected.value, confidence, is_correct
        )

        return ValidationResult(
            is_correct=is_correct,
            confidence=confidence,
            message="Correct stroke!" if is_correct else self._build_message(stroke, expected, checks),
            suggestions=self._build_suggestions(stroke, expected, checks),
            expected_type=expected,
            actual_type=stroke.type,
        )

    def run_checks(self, stroke: StrokeData, expected: StrokeType,
                   pattern: StrokePattern) -> StrokeChecks:
        """Run the type, direction, length and curvature checks."""
        direction = AngleUtils.normalize_degrees(stroke.direction)
        nearest = StrokeClassifier.nearest_direction(direction, pattern)
        direction_offset = AngleUtils.signed_difference(direction, nearest)

        length_ratio = stroke.length / pattern.expected_length
        curvature_offset = stroke.curvature - pattern.expected_curvature

        if expected == StrokeType.CURVE:
            curvature_match = abs(curvature_offset) <= pattern.tolerance_curvature
        else:
            curvature_match = True

        return StrokeChecks(
            type_match=stroke.type == expected,
            direction_match=abs(direction_offset) <= pattern.tolerance_direction,
            length_match=abs(length_ratio - 1) <= pattern.tolerance_length,
            curvature_match=curvature_match,
            direction_offset=direction_offset,
            length_ratio=length_ratio,
            curvature_offset=curvature_offset,
        )

    def score(self, checks: StrokeChecks) -> float:
        """Weighted sum of the passed checks, in [0, 1]."""
        parts = [
            self.weights['type'] if checks.type_match else 0.0,
            self.weights['direction'] if checks.direction_match else 0.0,
            self.weights['length'] if checks.length_match else 0.0,
            self.weights['curvature'] if checks.curvature_match else 0.0,
        ]
        return round(math.fsum(parts), 10)

    def _is_degenerate(self, stroke: StrokeData, pattern: StrokePattern) -> bool:
        return stroke.length < pattern.expected_length * self.config.DEGENERATE_LENGTH_RATIO

    def _build_message(self, stroke: StrokeData, expected: StrokeType,
                       checks: StrokeChecks) -> str:
        messages = []

        if not checks.type_match:
            messages.append(
                f"Expected a {expected.value} stroke, but drew a {stroke.type.value} stroke"
            )
        if not checks.direction_match:
            messages.append("The stroke direction is incorrect")
        if not checks.length_match:
            messages.append("The stroke length is incorrect")
        if not checks.curvature_match:
            messages.append("The curve shape is incorrect")

        if not messages:
            return "Correct stroke!"
        return '. '.join(messages)

    def _build_suggestions(self, stroke: StrokeData, expected: StrokeType,
                           checks: StrokeChecks) -> List[str]:
        suggestions = []

        if not checks.type_match:
            suggestions.append(
                f"Try to draw a {expected.value} stroke instead of a {stroke.type.value} stroke"
            )

        if not checks.direction_match:
            angle = 'less' if checks.direction_offset > 0 else 'more'
            suggestions.append(f"Adjust the angle to be {angle} horizontal")

        if not checks.length_match:
            size = 'shorter' if checks.length_ratio > 1 else 'longer'
            suggestions.append(f"Make the stroke {size}")

        if not checks.curvature_match:
            curve = 'less' if checks.curvature_offset > 0 else 'more'
            suggestions.append(f"Make the curve {curve} pronounced")

        return suggestions


def validate(stroke: StrokeData, expected_type: Optional[Union[StrokeType, str]],
             pattern: Optional[StrokePattern] = None) -> ValidationResult:
    """
    Simple interface to validate a stroke against the canonical patterns.

    Returns:
        ValidationResult with confidence, message and suggestions
    """
    return StrokeValidator().validate(stroke, expected_type, pattern)
