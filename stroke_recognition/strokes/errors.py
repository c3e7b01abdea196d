"""
Errors raised by the stroke recognition engine.
"""


class StrokeRecognitionError(ValueError):
    """Base class for stroke recognition errors."""


class InsufficientPointsError(StrokeRecognitionError):
    """Raised when a stroke has fewer than 2 points after preprocessing."""

    def __init__(self, point_count: int, minimum: int = 2):
        self.point_count = point_count
        self.minimum = minimum
        super().__init__(
            f"Stroke must have at least {minimum} points, got {point_count}"
        )
