"""
Pacing helpers for callers feeding the engine from a drawing surface.

Both helpers work on event timestamps in milliseconds rather than on
timers, so they stay synchronous and can be driven from any event loop.
"""

from typing import Any, Iterable, List, Optional

from ..config.settings import StrokeConfig
from ..utils.geometry import Point, PathUtils


class PointThrottle:
    """
    Drops pointer samples that arrive sooner than ``interval_ms`` after the
    last accepted one (about 60 Hz by default).
    """

    def __init__(self, interval_ms: float = None):
        self.interval_ms = interval_ms if interval_ms is not None else StrokeConfig.POINT_THROTTLE_MS
        self._last_accepted: Optional[float] = None

    def accept(self, point: Any) -> bool:
        """
        Decide whether to keep a sample.

        Samples without a timestamp are always kept.
        """
        point = PathUtils.to_point(point)
        if point.timestamp is None:
            return True

        if self._last_accepted is not None and point.timestamp - self._last_accepted < self.interval_ms:
            return False

        self._last_accepted = point.timestamp
        return True

    def filter(self, points: Iterable[Any]) -> List[Point]:
        """Throttle a whole recorded stroke, always keeping its last sample."""
        raw = PathUtils.convert_to_points(points)
        kept = [p for p in raw if self.accept(p)]
        if raw and (not kept or kept[-1] is not raw[-1]):
            kept.append(raw[-1])
        return kept

    def reset(self) -> None:
        """Forget the last accepted sample (call on pen down)."""
        self._last_accepted = None


class ValidationDebouncer:
    """
    Trailing-edge debounce for live validation.

    Call ``notify`` whenever the stroke changes and ``should_run`` on each
    tick; ``should_run`` returns True once, after ``delay_ms`` without new
    input.
    """

    def __init__(self, delay_ms: float = None):
        self.delay_ms = delay_ms if delay_ms is not None else StrokeConfig.VALIDATION_DEBOUNCE_MS
        self._last_input: Optional[float] = None

    @property
    def pending(self) -> bool:
        return self._last_input is not None

    def notify(self, now_ms: float) -> None:
        """Record new input at now_ms."""
        self._last_input = now_ms

    def should_run(self, now_ms: float) -> bool:
        """True when a validation is pending and the input has been quiet long enough."""
        if self._last_input is None:
            return False
        if now_ms - self._last_input < self.delay_ms:
            return False
        self._last_input = None
        return True

    def cancel(self) -> None:
        """Drop a pending validation."""
        self._last_input = None
