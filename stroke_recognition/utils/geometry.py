"""
Shared geometry utilities for stroke recognition.

This module provides the point type and the common calculations used by
the preprocessor, the analyzer and the reference-path ingestion code.
"""

import math
from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Optional, Tuple


@dataclass(frozen=True)
class Point:
    """Represents a 2D point with optional timestamp (milliseconds)."""
    x: float
    y: float
    timestamp: Optional[float] = None

    def __repr__(self):
        return f"Point({self.x:.1f}, {self.y:.1f})"

    @property
    def t(self) -> Optional[float]:
        return self.timestamp


class GeometryUtils:
    """Utility class for geometric calculations."""

    @staticmethod
    def calculate_distance(p1: Point, p2: Point) -> float:
        """Calculate Euclidean distance between two points."""
        return math.hypot(p1.x - p2.x, p1.y - p2.y)

    @staticmethod
    def calculate_path_length(points: List[Point]) -> float:
        """Calculate total path length (pen travel)."""
        if len(points) < 2:
            return 0.0

        length = 0.0
        for i in range(1, len(points)):
            length += GeometryUtils.calculate_distance(points[i-1], points[i])
        return length

    @staticmethod
    def calculate_direction(start: Point, end: Point) -> float:
        """
        Direction from start to end in degrees, in the range (-180, 180].

        Screen coordinates are used as given, so with y growing downwards
        a stroke drawn top to bottom points at +90.
        """
        direction = math.degrees(math.atan2(end.y - start.y, end.x - start.x))
        if direction <= -180.0:
            direction = 180.0
        return direction

    @staticmethod
    def calculate_perpendicular_distance(point: Point, line_start: Point, line_end: Point) -> float:
        """Calculate perpendicular distance from point to the line through start and end."""
        # Handle case where start and end are the same point
        if abs(line_start.x - line_end.x) < 1e-10 and abs(line_start.y - line_end.y) < 1e-10:
            return GeometryUtils.calculate_distance(point, line_start)

        # Line equation: Ax + By + C = 0
        A = line_end.y - line_start.y
        B = line_start.x - line_end.x
        C = line_end.x * line_start.y - line_start.x * line_end.y

        denominator = math.sqrt(A * A + B * B)
        if denominator < 1e-10:
            return GeometryUtils.calculate_distance(point, line_start)

        return abs(A * point.x + B * point.y + C) / denominator

    @staticmethod
    def turning_angle(prev: Point, curr: Point, nxt: Point) -> float:
        """
        Absolute change of heading at curr, in radians within [0, pi].

        Returns 0 when either leg has zero length.
        """
        if (prev.x == curr.x and prev.y == curr.y) or (curr.x == nxt.x and curr.y == nxt.y):
            return 0.0
        heading_in = math.atan2(curr.y - prev.y, curr.x - prev.x)
        heading_out = math.atan2(nxt.y - curr.y, nxt.x - curr.x)
        return abs(AngleUtils.wrap_radians(heading_out - heading_in))


class AngleUtils:
    """Utility class for angle arithmetic."""

    @staticmethod
    def wrap_radians(angle: float) -> float:
        """Wrap an angle to [-pi, pi]."""
        return math.atan2(math.sin(angle), math.cos(angle))

    @staticmethod
    def normalize_degrees(angle: float) -> float:
        """Normalize an angle to [0, 360)."""
        normalized = angle % 360.0
        # -1e-17 % 360 rounds up to 360.0
        return 0.0 if normalized >= 360.0 else normalized

    @staticmethod
    def signed_difference(observed: float, expected: float) -> float:
        """Signed circular difference observed - expected in degrees, within (-180, 180]."""
        diff = (observed - expected) % 360.0
        if diff > 180.0:
            diff -= 360.0
        return diff

    @staticmethod
    def circular_distance(a: float, b: float) -> float:
        """Unsigned circular distance between two angles in degrees, within [0, 180]."""
        return abs(AngleUtils.signed_difference(a, b))


class PathUtils:
    """Utility class for converting between point representations."""

    @staticmethod
    def to_point(raw: Any) -> Point:
        """
        Coerce one raw point into a Point.

        Accepts Point instances, (x, y) or (x, y, t) sequences, and dicts
        with 'x', 'y' and an optional 't' or 'timestamp' key.

        Raises:
            ValueError: If the point is malformed
        """
        if isinstance(raw, Point):
            return raw

        if isinstance(raw, dict):
            if 'x' not in raw or 'y' not in raw:
                raise ValueError("Each point must contain 'x' and 'y'")
            x, y = raw['x'], raw['y']
            timestamp = raw.get('timestamp', raw.get('t'))
        elif isinstance(raw, (tuple, list)) and len(raw) in (2, 3):
            x, y = raw[0], raw[1]
            timestamp = raw[2] if len(raw) == 3 else None
        else:
            raise ValueError(f"Unsupported point format: {raw!r}")

        try:
            return Point(float(x), float(y), None if timestamp is None else float(timestamp))
        except (TypeError, ValueError):
            raise ValueError(f"Point coordinates must be numeric: {raw!r}")

    @staticmethod
    def convert_to_points(path: Iterable[Any]) -> List[Point]:
        """Convert a path in any supported format to Point objects."""
        return [PathUtils.to_point(p) for p in path]

    @staticmethod
    def convert_points_to_dict(points: List[Point]) -> List[Dict[str, float]]:
        """Convert Point objects to dict format."""
        result = []
        for p in points:
            item = {'x': p.x, 'y': p.y}
            if p.timestamp is not None:
                item['t'] = p.timestamp
            result.append(item)
        return result

    @staticmethod
    def get_path_bounds(points: List[Point]) -> Tuple[float, float, float, float]:
        """Get bounding box of a path as (min_x, max_x, min_y, max_y)."""
        if not points:
            return 0.0, 0.0, 0.0, 0.0

        min_x = min(p.x for p in points)
        max_x = max(p.x for p in points)
        min_y = min(p.y for p in points)
        max_y = max(p.y for p in points)

        return min_x, max_x, min_y, max_y
