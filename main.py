#!/usr/bin/env python3
"""
Stroke Inspector - Main Entry Point
Validates a recorded character attempt stored as JSON.

Input format:
    {
      "character": "十",
      "expected": ["horizontal", "vertical"],
      "unit_length": 100,
      "strokes": [[{"x": 10, "y": 50, "t": 0}, ...], ...]
    }
"""

import argparse
import json
import logging
import sys

from stroke_recognition import (
    CurvatureMode,
    InsufficientPointsError,
    ReferenceSequence,
    StrokeEngine,
)
from stroke_recognition.utils.logger import StrokeLogger


def inspect_attempt(data: dict, mode: CurvatureMode, stroke_logger: StrokeLogger) -> float:
    """Validate every stroke of an attempt and return its order score."""
    reference = ReferenceSequence.from_types(data.get('character', '?'), data.get('expected', []))
    engine = StrokeEngine(unit_length=data.get('unit_length'))

    strokes = []
    results = []
    for index, points in enumerate(data.get('strokes', [])):
        try:
            stroke, result = engine.evaluate(points, reference.expected_at(index), mode)
        except InsufficientPointsError as e:
            print(f"   Skipping stroke {index + 1}: {e}")
            continue
        stroke_logger.log_stroke(stroke, index)
        stroke_logger.log_validation(result, index)
        strokes.append(stroke)
        results.append(result)

    score = engine.score_order(strokes, reference.strokes)
    correct = sum(1 for r in results if r.is_correct)
    stroke_logger.log_order_score(reference.character, score, correct, len(reference))
    return score


def main():
    """Main entry point for the stroke inspector."""
    parser = argparse.ArgumentParser(description="Validate a recorded character attempt")
    parser.add_argument('attempt', help="JSON file with the recorded strokes")
    parser.add_argument('--scored', action='store_true',
                        help="use segmented curvature (scored attempts)")
    parser.add_argument('--debug-file', default=None, help="mirror results to this file")
    parser.add_argument('-v', '--verbose', action='store_true')
    args = parser.parse_args()

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    try:
        with open(args.attempt, 'r', encoding='utf-8') as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        print(f"❌ Could not read {args.attempt}: {e}")
        return 1

    mode = CurvatureMode.SEGMENTED if args.scored else CurvatureMode.BASIC
    stroke_logger = StrokeLogger(args.debug_file)
    try:
        inspect_attempt(data, mode, stroke_logger)
    except ValueError as e:
        print(f"❌ Invalid attempt data: {e}")
        return 1
    finally:
        stroke_logger.close()
    return 0


if __name__ == "__main__":
    sys.exit(main())
