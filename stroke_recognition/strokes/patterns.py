"""
Stroke types, reference patterns and the value records passed between
the analyzer, the classifier and the validator.
"""

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Any, Dict, List, Optional, Tuple, Union

from ..config.settings import StrokeConfig
from ..utils.geometry import Point, PathUtils


class StrokeType(str, Enum):
    """Geometric category of a stroke."""
    HORIZONTAL = 'horizontal'
    VERTICAL = 'vertical'
    DIAGONAL = 'diagonal'
    CURVE = 'curve'

    def __str__(self):
        return self.value

    @classmethod
    def parse(cls, value: Union['StrokeType', str]) -> 'StrokeType':
        """
        Convert a stroke type name to a StrokeType.

        Raises:
            ValueError: If the name is not one of the four stroke types
        """
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).lower())
        except ValueError:
            raise ValueError(f"Unknown stroke type: {value!r}")


@dataclass(frozen=True)
class StrokePattern:
    """Reference definition a drawn stroke is judged against."""
    expected_direction: Tuple[float, ...]
    expected_length: float
    expected_curvature: float
    tolerance_direction: float
    tolerance_length: float
    tolerance_curvature: float

    def __post_init__(self):
        directions = self.expected_direction
        if isinstance(directions, (int, float)):
            directions = (directions,)
        directions = tuple(float(d) for d in directions)
        if not directions:
            raise ValueError("A stroke pattern needs at least one expected direction")
        if self.expected_length <= 0:
            raise ValueError("Expected length must be positive")
        object.__setattr__(self, 'expected_direction', directions)


@dataclass(frozen=True)
class ReferenceStroke:
    """One expected stroke of a character, optionally with its own pattern."""
    type: StrokeType
    pattern: Optional[StrokePattern] = None

    def __post_init__(self):
        object.__setattr__(self, 'type', StrokeType.parse(self.type))


@dataclass(frozen=True)
class StrokeData:
    """Geometric features of one classified stroke."""
    type: StrokeType
    direction: float
    length: float
    curvature: float
    points: List[Point] = field(default_factory=list)

    def __post_init__(self):
        object.__setattr__(self, 'type', StrokeType.parse(self.type))

    def scaled(self, unit_length: float) -> 'StrokeData':
        """Copy of this stroke with its length expressed in multiples of unit_length."""
        if unit_length <= 0:
            raise ValueError("unit_length must be positive")
        return replace(self, length=self.length / unit_length)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'type': self.type.value,
            'direction': self.direction,
            'length': self.length,
            'curvature': self.curvature,
            'points': PathUtils.convert_points_to_dict(self.points),
        }


@dataclass(frozen=True)
class ValidationResult:
    """
    Outcome of validating one stroke against its expected type.

    ``validated`` is False only for the "cannot validate" result returned
    when no reference stroke is available; ``expected_type`` is then None.
    """
    is_correct: bool
    confidence: float
    message: str
    suggestions: List[str]
    expected_type: Optional[StrokeType]
    actual_type: StrokeType
    validated: bool = True

    @classmethod
    def unavailable(cls, actual_type: StrokeType) -> 'ValidationResult':
        """Result used when the reference data has no stroke for this position."""
        return cls(
            is_correct=False,
            confidence=0.0,
            message="No reference stroke available",
            suggestions=[],
            expected_type=None,
            actual_type=actual_type,
            validated=False,
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            'is_correct': self.is_correct,
            'confidence': self.confidence,
            'message': self.message,
            'suggestions': list(self.suggestions),
            'expected_type': self.expected_type.value if self.expected_type else None,
            'actual_type': self.actual_type.value,
            'validated': self.validated,
        }


def build_patterns(config: StrokeConfig = None) -> Dict[StrokeType, StrokePattern]:
    """Build the canonical pattern for each stroke type from a config."""
    config = config or StrokeConfig()
    tol_dir = config.DIRECTION_TOLERANCE
    tol_len = config.LENGTH_TOLERANCE
    tol_curve = config.CURVATURE_TOLERANCE

    return {
        StrokeType.HORIZONTAL: StrokePattern((0, 180), 1.0, 0.0, tol_dir, tol_len, tol_curve),
        StrokeType.VERTICAL: StrokePattern((90, 270), 1.0, 0.0, tol_dir, tol_len, tol_curve),
        StrokeType.DIAGONAL: StrokePattern((45, 135, 225, 315), 1.414, 0.0, tol_dir, tol_len, tol_curve),
        # A curve may end in any direction
        StrokeType.CURVE: StrokePattern((0,), 1.5, 0.5, 180, tol_len, tol_curve),
    }


STROKE_PATTERNS = build_patterns()


def get_pattern(stroke_type: Union[StrokeType, str],
                patterns: Optional[Dict[StrokeType, StrokePattern]] = None) -> StrokePattern:
    """Look up the pattern for a stroke type."""
    patterns = patterns if patterns is not None else STROKE_PATTERNS
    return patterns[StrokeType.parse(stroke_type)]
