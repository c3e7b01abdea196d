"""
Reference stroke data for characters.

A ReferenceSequence is the read-only, ordered list of strokes expected for
one character. Sequences can be built directly from stroke type names or
from vector stroke paths (SVG ``d`` strings such as the ones shipped with
KanjiVG).

Vector paths are first sorted into a raw path kind (point, dot, line or
curve). Raw kinds describe the source geometry only; they are converted to
a StrokeType before anything reaches the validator, and a path that is a
single point becomes a missing entry (None) in the sequence.
"""

import logging
from dataclasses import dataclass, replace
from enum import Enum
from typing import List, Optional, Sequence, Tuple, Union

from svg.path import parse_path

from ..config.settings import StrokeConfig
from ..utils.geometry import Point, GeometryUtils, PathUtils
from .classifier import StrokeClassifier
from .patterns import ReferenceStroke, StrokeType, build_patterns

logger = logging.getLogger(__name__)


class RawPathKind(str, Enum):
    """Geometry of a reference vector path before stroke classification."""
    POINT = 'point'
    DOT = 'dot'
    LINE = 'line'
    CURVE = 'curve'


@dataclass(frozen=True)
class ReferenceSequence:
    """Expected strokes of one character, in stroke order."""
    character: str
    strokes: Tuple[Optional[ReferenceStroke], ...]

    def __post_init__(self):
        object.__setattr__(self, 'strokes', tuple(self.strokes))

    def __len__(self):
        return len(self.strokes)

    def expected_at(self, index: int) -> Optional[ReferenceStroke]:
        """Expected stroke at a position, or None when there is no data for it."""
        if 0 <= index < len(self.strokes):
            return self.strokes[index]
        return None

    @property
    def types(self) -> List[Optional[StrokeType]]:
        return [s.type if s is not None else None for s in self.strokes]

    @classmethod
    def from_types(cls, character: str,
                   types: Sequence[Optional[Union[StrokeType, str]]]) -> 'ReferenceSequence':
        """Build a sequence from stroke type names (None marks a missing entry)."""
        return cls(character, tuple(
            ReferenceStroke(t) if t is not None else None for t in types
        ))


class ReferencePathReader:
    """Turns vector stroke paths into reference strokes."""

    def __init__(self, config: StrokeConfig = None):
        self.config = config or StrokeConfig()
        self.classifier = StrokeClassifier(self.config)
        self.patterns = build_patterns(self.config)
        self.sample_count = self.config.PATH_SAMPLE_POINTS

    def sample_path(self, path_data: str) -> List[Point]:
        """
        Sample an SVG path into evenly spaced points.

        Args:
            path_data: SVG path ``d`` attribute

        Returns:
            Sampled points; a single point for a zero-length path

        Raises:
            ValueError: If the path data is empty or cannot be parsed
        """
        if not path_data or not path_data.strip():
            raise ValueError("Path data cannot be empty")

        try:
            path = parse_path(path_data)
        except Exception as e:
            raise ValueError(f"Could not parse path data {path_data!r}: {e}") from e

        if len(path) == 0:
            raise ValueError(f"Path data has no segments: {path_data!r}")

        if sum(segment.length() for segment in path) == 0:
            start = path[0].start
            return [Point(start.real, start.imag)]

        points = []
        last_step = self.sample_count - 1
        for i in range(self.sample_count):
            pos = path.point(i / last_step)
            points.append(Point(pos.real, pos.imag))
        return points

    def classify_raw(self, points: List[Point]) -> RawPathKind:
        """Sort sampled path points into a raw path kind."""
        unique = {(p.x, p.y) for p in points}
        if len(unique) < 2:
            return RawPathKind.POINT

        min_x, max_x, min_y, max_y = PathUtils.get_path_bounds(points)
        if max(max_x - min_x, max_y - min_y) <= self.config.DOT_MAX_EXTENT:
            return RawPathKind.DOT

        start, end = points[0], points[-1]
        chord = GeometryUtils.calculate_distance(start, end)
        max_deviation = max(
            GeometryUtils.calculate_perpendicular_distance(p, start, end) for p in points
        )
        line_threshold = max(
            self.config.LINE_MIN_DEVIATION,
            chord * self.config.LINE_MAX_DEVIATION_PERCENT / 100
        )
        if max_deviation <= line_threshold:
            return RawPathKind.LINE

        return RawPathKind.CURVE

    def to_stroke_type(self, kind: RawPathKind, points: List[Point]) -> Optional[StrokeType]:
        """
        Convert a raw path kind to the stroke type a learner should draw.

        Lines and dots are classified by direction alone. Returns None for a
        single point.
        """
        if kind == RawPathKind.POINT:
            return None
        if kind == RawPathKind.CURVE:
            return StrokeType.CURVE

        start, end = points[0], points[-1]
        direction = GeometryUtils.calculate_direction(start, end)
        length = GeometryUtils.calculate_distance(start, end)
        return self.classifier.classify(direction, length, 0.0, points)

    def read_stroke(self, path_data: str, unit_length: float = None) -> Optional[ReferenceStroke]:
        """
        Read one vector path as a reference stroke.

        Args:
            path_data: SVG path ``d`` attribute
            unit_length: If given, the stroke's pattern expects its chord
                length measured in this unit (e.g. the viewBox size)

        Returns:
            ReferenceStroke, or None when the path is a single point
        """
        points = self.sample_path(path_data)
        kind = self.classify_raw(points)
        stroke_type = self.to_stroke_type(kind, points)

        logger.debug("Reference path %r: %s -> %s", path_data[:40], kind.value,
                     stroke_type.value if stroke_type else None)

        if stroke_type is None:
            return None

        pattern = None
        if unit_length:
            chord = GeometryUtils.calculate_distance(points[0], points[-1])
            if chord > 0:
                pattern = replace(self.patterns[stroke_type], expected_length=chord / unit_length)

        return ReferenceStroke(stroke_type, pattern)

    def read_sequence(self, character: str, paths: Sequence[str],
                      unit_length: float = None) -> ReferenceSequence:
        """Read the ordered stroke paths of a character."""
        return ReferenceSequence(character, tuple(
            self.read_stroke(d, unit_length) for d in paths
        ))


def read_reference_paths(character: str, paths: Sequence[str],
                         unit_length: float = None) -> ReferenceSequence:
    """Simple interface to build a ReferenceSequence from SVG path strings."""
    return ReferencePathReader().read_sequence(character, paths, unit_length)
