"""
Utilities package for stroke recognition.

This package provides the point type and shared geometry helpers used
across the preprocessor, analyzer, classifier and reference ingestion.
"""

from .geometry import (
    Point,
    GeometryUtils,
    AngleUtils,
    PathUtils
)

__all__ = [
    'Point',
    'GeometryUtils',
    'AngleUtils',
    'PathUtils'
]
