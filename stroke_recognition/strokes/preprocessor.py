"""
Point preprocessing for freehand strokes.

Removes repeated coordinates and caps the number of points with windowed
averaging so that later analysis runs on a bounded, less noisy sequence.
"""

import logging
import math
from typing import Any, Iterable, List

import numpy as np

from ..config.settings import StrokeConfig
from ..utils.geometry import Point, PathUtils

logger = logging.getLogger(__name__)


class PointPreprocessor:
    """Deduplicates and smooths a raw point sequence."""

    def __init__(self, config: StrokeConfig = None):
        self.config = config or StrokeConfig()
        self.max_points = self.config.MAX_POINTS

    def preprocess(self, points: Iterable[Any]) -> List[Point]:
        """
        Preprocess one stroke.

        Args:
            points: Points as Point objects, (x, y) tuples or dicts

        Returns:
            New list of Point objects; the input is left untouched. Short
            input is returned as-is (after deduplication).
        """
        unique = self.remove_duplicates(PathUtils.convert_to_points(points))

        if len(unique) > self.max_points:
            smoothed = self.smooth(unique)
            logger.debug("Smoothed %d points down to %d", len(unique), len(smoothed))
            return smoothed

        return unique

    def remove_duplicates(self, points: List[Point]) -> List[Point]:
        """Drop every point whose (x, y) pair was already seen, keeping order."""
        seen = set()
        unique = []
        for point in points:
            key = (point.x, point.y)
            if key in seen:
                continue
            seen.add(key)
            unique.append(point)
        return unique

    def smooth(self, points: List[Point]) -> List[Point]:
        """
        Replace each window of ceil(n / max_points) points by its centroid.

        Each centroid keeps the timestamp of the first point of its window.
        """
        window_size = math.ceil(len(points) / self.max_points)
        coords = np.array([(p.x, p.y) for p in points], dtype=float)

        smoothed = []
        for start in range(0, len(points), window_size):
            cx, cy = coords[start:start + window_size].mean(axis=0)
            smoothed.append(Point(float(cx), float(cy), points[start].timestamp))

        return smoothed


def preprocess(points: Iterable[Any], config: StrokeConfig = None) -> List[Point]:
    """
    Simple interface to preprocess a stroke.

    Args:
        points: Raw stroke points

    Returns:
        Deduplicated and, if needed, smoothed points
    """
    return PointPreprocessor(config).preprocess(points)
