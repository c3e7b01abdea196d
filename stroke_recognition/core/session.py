"""
Practice session for one character attempt.
"""

import logging
from typing import Any, Iterable, List, Optional

from ..strokes.analyzer import CurvatureMode
from ..strokes.errors import InsufficientPointsError
from ..strokes.patterns import StrokeData, ValidationResult
from ..strokes.reference import ReferenceSequence
from .cache import ValidationCache
from .engine import StrokeEngine

logger = logging.getLogger(__name__)


class PracticeSession:
    """
    Tracks which stroke of a character the learner is on.

    Every analyzable stroke is validated against the reference stroke at
    the current position and moves the session forward. Micro-strokes
    (fewer than 2 points after preprocessing) are ignored.
    """

    def __init__(self, reference: ReferenceSequence, engine: StrokeEngine = None,
                 mode: CurvatureMode = CurvatureMode.BASIC, cache: ValidationCache = None):
        self.reference = reference
        self.engine = engine or StrokeEngine()
        self.mode = CurvatureMode(mode)
        self.cache = cache if cache is not None else ValidationCache()

        self.strokes: List[StrokeData] = []
        self.results: List[ValidationResult] = []

    @property
    def current_index(self) -> int:
        return len(self.strokes)

    @property
    def is_complete(self) -> bool:
        return len(self.strokes) >= len(self.reference)

    @property
    def correct_count(self) -> int:
        return sum(1 for r in self.results if r.is_correct)

    def submit(self, points: Iterable[Any]) -> Optional[ValidationResult]:
        """
        Validate the next stroke of the attempt.

        Returns:
            The ValidationResult, or None when the stroke was ignored as a
            micro-stroke
        """
        try:
            stroke = self.engine.analyze(points, self.mode)
        except InsufficientPointsError as e:
            logger.debug("Ignoring micro-stroke: %s", e)
            return None

        index = self.current_index
        result = self.engine.validate(stroke, self.reference.expected_at(index))
        self.cache.put(self.reference.character, index, result)

        self.strokes.append(stroke)
        self.results.append(result)
        return result

    def result_at(self, index: int) -> Optional[ValidationResult]:
        """Result of a submitted stroke, re-validated only when not cached."""
        if not 0 <= index < len(self.strokes):
            return None

        cached = self.cache.get(self.reference.character, index)
        if cached is not None:
            return cached

        result = self.engine.validate(self.strokes[index], self.reference.expected_at(index))
        self.cache.put(self.reference.character, index, result)
        return result

    def undo(self) -> Optional[StrokeData]:
        """Remove the last stroke and its cached result."""
        if not self.strokes:
            return None
        index = len(self.strokes) - 1
        self.cache.invalidate(self.reference.character, index)
        self.results.pop()
        return self.strokes.pop()

    def reset(self) -> None:
        """Start the character over."""
        self.cache.invalidate(self.reference.character)
        self.strokes = []
        self.results = []

    def score(self) -> float:
        """Stroke-order score of the attempt so far (0 until it is complete)."""
        return self.engine.score_order(self.strokes, self.reference.strokes)
