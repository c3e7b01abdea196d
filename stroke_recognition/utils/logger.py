"""
Console reporting of analyzed strokes and validation results.
"""

import datetime
import logging
from typing import Optional

from ..strokes.patterns import StrokeData, ValidationResult

logger = logging.getLogger(__name__)


class StrokeLogger:
    """Prints strokes and feedback, optionally mirroring them to a debug file."""

    def __init__(self, debug_file: Optional[str] = None):
        self.debug_file = None
        if debug_file:
            try:
                self.debug_file = open(debug_file, 'w', encoding='utf-8')
                self.debug_file.write(f"Debug logging started at {datetime.datetime.now()}\n")
                self.debug_file.flush()
            except OSError as e:
                logger.warning("Could not open debug file %s: %s", debug_file, e)

    def _timestamp(self) -> str:
        return datetime.datetime.now().strftime("%H:%M:%S.%f")[:-3]

    def _write_debug(self, line: str):
        if not self.debug_file:
            return
        try:
            self.debug_file.write(line + "\n")
            self.debug_file.flush()
        except OSError as e:
            logger.warning("Could not write debug file: %s", e)

    def log_stroke(self, stroke: StrokeData, index: Optional[int] = None):
        """Log an analyzed stroke."""
        timestamp = self._timestamp()
        label = f"STROKE {index + 1}" if index is not None else "STROKE"

        print(f"[{timestamp}] ✏️ {label}: {stroke.type.value}")
        print(f"   Direction: {stroke.direction:.1f}°  Length: {stroke.length:.2f}  "
              f"Curvature: {stroke.curvature:.3f}  Points: {len(stroke.points)}")

        self._write_debug(f"[{timestamp}] {stroke.to_dict()}")

    def log_validation(self, result: ValidationResult, index: Optional[int] = None):
        """Log the feedback for one stroke."""
        timestamp = self._timestamp()
        label = f"stroke {index + 1}" if index is not None else "stroke"

        if not result.validated:
            print(f"[{timestamp}] ❔ NO REFERENCE for {label}: {result.message}")
        elif result.is_correct:
            print(f"[{timestamp}] ✅ CORRECT {label} [{result.confidence:.0%}]")
        else:
            print(f"[{timestamp}] ❌ INCORRECT {label} [{result.confidence:.0%}]")
            print(f"   {result.message}")
            for suggestion in result.suggestions:
                print(f"   • {suggestion}")

        self._write_debug(f"[{timestamp}] {result.to_dict()}")

    def log_order_score(self, character: str, score: float, correct: int, total: int):
        """Log the final score of a character attempt."""
        timestamp = self._timestamp()
        print(f"[{timestamp}] 🏁 {character}: {correct}/{total} strokes correct, "
              f"order score {score:.2f}")
        self._write_debug(f"[{timestamp}] order score {character} {score:.4f}")

    def close(self):
        """Close the debug file."""
        if self.debug_file:
            self.debug_file.close()
            self.debug_file = None
