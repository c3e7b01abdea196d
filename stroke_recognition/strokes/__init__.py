"""
Stroke recognition and validation.

This package provides preprocessing, geometric analysis, classification
and validation of single brush strokes, and stroke-order scoring for a
whole character attempt.
"""

from .errors import StrokeRecognitionError, InsufficientPointsError
from .patterns import (
    StrokeType,
    StrokePattern,
    StrokeData,
    ReferenceStroke,
    ValidationResult,
    STROKE_PATTERNS,
    get_pattern
)
from .preprocessor import PointPreprocessor, preprocess
from .classifier import StrokeClassifier, classify
from .analyzer import CurvatureMode, StrokeAnalyzer, analyze, analyze_segmented
from .validator import StrokeValidator, validate
from .order_scorer import StrokeOrderScorer, score_order
from .reference import RawPathKind, ReferenceSequence, ReferencePathReader, read_reference_paths

__all__ = [
    'StrokeRecognitionError',
    'InsufficientPointsError',
    'StrokeType',
    'StrokePattern',
    'StrokeData',
    'ReferenceStroke',
    'ValidationResult',
    'STROKE_PATTERNS',
    'get_pattern',
    'PointPreprocessor',
    'preprocess',
    'StrokeClassifier',
    'classify',
    'CurvatureMode',
    'StrokeAnalyzer',
    'analyze',
    'analyze_segmented',
    'StrokeValidator',
    'validate',
    'StrokeOrderScorer',
    'score_order',
    'RawPathKind',
    'ReferenceSequence',
    'ReferencePathReader',
    'read_reference_paths'
]
