"""
Geometric analysis of a single stroke.

Computes net direction, chord length and curvature of a point sequence and
hands the features to the classifier to produce a StrokeData record.

Two curvature strategies are available:

* ``CurvatureMode.BASIC`` averages the absolute turning angle over every
  consecutive point triple. It is cheap and suited to live feedback while
  the stroke is being drawn.
* ``CurvatureMode.SEGMENTED`` splits the stroke into roughly n/3 segments,
  approximates each by its start, middle and end point and averages the
  turning angle of those approximations. It is less sensitive to jitter
  and is used for scored attempts.
"""

import logging
from enum import Enum
from typing import Any, Dict, Iterable, List

import numpy as np

from ..config.settings import StrokeConfig
from ..utils.geometry import Point, GeometryUtils, PathUtils
from .classifier import StrokeClassifier
from .errors import InsufficientPointsError
from .patterns import StrokeData
from .preprocessor import PointPreprocessor

logger = logging.getLogger(__name__)


class CurvatureMode(str, Enum):
    """Curvature estimation strategy."""
    BASIC = 'basic'
    SEGMENTED = 'segmented'


class StrokeAnalyzer:
    """Extracts direction, length and curvature and classifies the stroke."""

    def __init__(self, config: StrokeConfig = None, mode: CurvatureMode = CurvatureMode.BASIC):
        self.config = config or StrokeConfig()
        self.mode = CurvatureMode(mode)
        self.preprocessor = PointPreprocessor(self.config)
        self.classifier = StrokeClassifier(self.config)

    def analyze(self, points: Iterable[Any], mode: CurvatureMode = None,
                preprocess: bool = True) -> StrokeData:
        """
        Analyze one stroke.

        Args:
            points: Raw stroke points (Point objects, tuples or dicts)
            mode: Curvature strategy, defaults to the analyzer's mode
            preprocess: Run the point preprocessor first

        Returns:
            StrokeData with the classified type

        Raises:
            InsufficientPointsError: If fewer than 2 points remain
            ValueError: If a point is malformed
        """
        if preprocess:
            processed = self.preprocessor.preprocess(points)
        else:
            processed = PathUtils.convert_to_points(points)

        if len(processed) < 2:
            raise InsufficientPointsError(len(processed))

        start, end = processed[0], processed[-1]
        direction = GeometryUtils.calculate_direction(start, end)
        length = GeometryUtils.calculate_distance(start, end)
        curvature = self.calculate_curvature(processed, mode or self.mode)

        stroke_type = self.classifier.classify(direction, length, curvature, processed)
        logger.debug(
            "Analyzed stroke: %d points, direction=%.1f, length=%.1f, curvature=%.3f -> %s",
            len(processed), direction, length, curvature, stroke_type.value
        )

        return StrokeData(
            type=stroke_type,
            direction=direction,
            length=length,
            curvature=curvature,
            points=processed
        )

    def calculate_curvature(self, points: List[Point], mode: CurvatureMode = CurvatureMode.BASIC) -> float:
        """
        Curvature of the stroke; 0 when there are too few points to tell.

        Strokes with more than CURVATURE_SAMPLE_POINTS points are resampled
        to that count first, so the mean turning angle of an arc does not
        shrink as the input gets denser.
        """
        if len(points) < self.config.MIN_POINTS_FOR_CURVE:
            return 0.0

        if len(points) > self.config.CURVATURE_SAMPLE_POINTS:
            points = self.resample(points, self.config.CURVATURE_SAMPLE_POINTS)

        if CurvatureMode(mode) == CurvatureMode.SEGMENTED:
            return self._segmented_curvature(points)
        return self._basic_curvature(points)

    def resample(self, points: List[Point], num_points: int) -> List[Point]:
        """
        Resample points to num_points, equally spaced along the path.

        Returns:
            New list of points; the first and last points are kept
        """
        coords = np.array([(p.x, p.y) for p in points], dtype=float)
        legs = np.hypot(*np.diff(coords, axis=0).T)
        distances = np.concatenate(([0.0], np.cumsum(legs)))

        total_length = distances[-1]
        if total_length == 0:
            return [points[0]] * num_points

        targets = np.linspace(0.0, total_length, num_points)
        xs = np.interp(targets, distances, coords[:, 0])
        ys = np.interp(targets, distances, coords[:, 1])
        return [Point(float(x), float(y)) for x, y in zip(xs, ys)]

    def _basic_curvature(self, points: List[Point]) -> float:
        """Mean absolute turning angle over consecutive point triples."""
        coords = np.array([(p.x, p.y) for p in points], dtype=float)
        deltas = np.diff(coords, axis=0)
        headings = np.arctan2(deltas[:, 1], deltas[:, 0])

        turns = np.diff(headings)
        turns = np.abs(np.arctan2(np.sin(turns), np.cos(turns)))

        # A zero-length leg has no heading
        moving = np.hypot(deltas[:, 0], deltas[:, 1]) > 0
        turns = np.where(moving[:-1] & moving[1:], turns, 0.0)

        return float(turns.sum() / (len(points) - 2))

    def _segmented_curvature(self, points: List[Point]) -> float:
        """Mean turning angle of three-point segment approximations."""
        n = len(points)
        segments = max(1, n // 3)

        total = 0.0
        for i in range(segments):
            start = (i * n) // segments
            end = ((i + 1) * n) // segments
            segment = points[start:end]

            if len(segment) < 3:
                continue

            p0 = segment[0]
            p1 = segment[len(segment) // 2]
            p2 = segment[-1]
            total += GeometryUtils.turning_angle(p0, p1, p2)

        return total / segments

    def get_stroke_stats(self, points: Iterable[Any]) -> Dict[str, Any]:
        """
        Get detailed statistics about a stroke for debugging/analysis.

        Returns:
            Dictionary with point_count, duration, chord_length, path_length,
            direction, both curvature estimates and the bounding box. Empty
            when fewer than 2 points remain after preprocessing.
        """
        processed = self.preprocessor.preprocess(points)
        if len(processed) < 2:
            return {}

        start, end = processed[0], processed[-1]
        if start.timestamp is not None and end.timestamp is not None:
            duration = end.timestamp - start.timestamp
        else:
            duration = 0.0

        min_x, max_x, min_y, max_y = PathUtils.get_path_bounds(processed)

        return {
            'point_count': len(processed),
            'duration': duration,
            'chord_length': GeometryUtils.calculate_distance(start, end),
            'path_length': GeometryUtils.calculate_path_length(processed),
            'direction': GeometryUtils.calculate_direction(start, end),
            'curvature_basic': self.calculate_curvature(processed, CurvatureMode.BASIC),
            'curvature_segmented': self.calculate_curvature(processed, CurvatureMode.SEGMENTED),
            'bounding_box': (min_x, min_y, max_x, max_y),
            'width': max_x - min_x,
            'height': max_y - min_y
        }


def analyze(points: Iterable[Any], mode: CurvatureMode = CurvatureMode.BASIC,
            preprocess: bool = True, config: StrokeConfig = None) -> StrokeData:
    """
    Simple interface to analyze a stroke.

    Args:
        points: Raw stroke points
        mode: Curvature strategy

    Returns:
        Classified StrokeData
    """
    return StrokeAnalyzer(config, mode).analyze(points, preprocess=preprocess)


def analyze_segmented(points: Iterable[Any], config: StrokeConfig = None) -> StrokeData:
    """Analyze a stroke with segmented curvature (scored attempts)."""
    return analyze(points, CurvatureMode.SEGMENTED, config=config)
