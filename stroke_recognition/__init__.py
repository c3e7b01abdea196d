"""
Stroke Recognition Package
Rule-based recognition and validation of brush strokes for character
writing practice.
"""

from .core.engine import StrokeEngine
from .core.session import PracticeSession
from .core.cache import ValidationCache
from .core.sampling import PointThrottle, ValidationDebouncer
from .config.settings import StrokeConfig
from .utils.geometry import Point
from .strokes import (
    StrokeRecognitionError,
    InsufficientPointsError,
    StrokeType,
    StrokePattern,
    StrokeData,
    ReferenceStroke,
    ValidationResult,
    STROKE_PATTERNS,
    CurvatureMode,
    RawPathKind,
    ReferenceSequence,
    preprocess,
    analyze,
    analyze_segmented,
    classify,
    validate,
    score_order,
    read_reference_paths
)

__version__ = "1.0.0"
__all__ = [
    "StrokeEngine",
    "PracticeSession",
    "ValidationCache",
    "PointThrottle",
    "ValidationDebouncer",
    "StrokeConfig",
    "Point",
    "StrokeRecognitionError",
    "InsufficientPointsError",
    "StrokeType",
    "StrokePattern",
    "StrokeData",
    "ReferenceStroke",
    "ValidationResult",
    "STROKE_PATTERNS",
    "CurvatureMode",
    "RawPathKind",
    "ReferenceSequence",
    "preprocess",
    "analyze",
    "analyze_segmented",
    "classify",
    "validate",
    "score_order",
    "read_reference_paths"
]
