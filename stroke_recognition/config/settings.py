"""
Configuration settings for stroke recognition and validation.
"""

class StrokeConfig:
    """Configuration constants for stroke recognition and validation."""

    # Preprocessing
    MAX_POINTS = 100

    # Curvature / classification
    MIN_POINTS_FOR_CURVE = 5
    CURVE_THRESHOLD = 0.3  # radians of mean turning
    CURVATURE_SAMPLE_POINTS = 9  # longer strokes are resampled to this count first

    # Tolerance bands
    DIRECTION_TOLERANCE = 15  # degrees
    LENGTH_TOLERANCE = 0.2  # ratio, +/-20%
    CURVATURE_TOLERANCE = 0.3

    # Confidence weights (must sum to 1.0)
    TYPE_WEIGHT = 0.4
    DIRECTION_WEIGHT = 0.3
    LENGTH_WEIGHT = 0.2
    CURVATURE_WEIGHT = 0.1

    CORRECTNESS_THRESHOLD = 0.8

    # Strokes shorter than this fraction of the expected length are degenerate
    DEGENERATE_LENGTH_RATIO = 0.05
    DEGENERATE_CONFIDENCE = 0.0

    # Caller pacing (in milliseconds)
    POINT_THROTTLE_MS = 16
    VALIDATION_DEBOUNCE_MS = 100

    # Caller-owned validation cache
    CACHE_MAX_SIZE = 1000
    CACHE_TTL_SECONDS = 60 * 60

    # Reference path ingestion
    PATH_SAMPLE_POINTS = 20
    DOT_MAX_EXTENT = 12.0  # in path units (KanjiVG uses a 109x109 box)
    LINE_MAX_DEVIATION_PERCENT = 5.0
    LINE_MIN_DEVIATION = 2.0

    # Canonical stroke type order for direction matching
    STROKE_TYPE_ORDER = ['horizontal', 'vertical', 'diagonal']
