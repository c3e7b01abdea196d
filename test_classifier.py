#!/usr/bin/env python3
"""Tests for rule-based stroke classification."""

import math

import pytest

from stroke_recognition import STROKE_PATTERNS, StrokeType, classify
from stroke_recognition.strokes.classifier import StrokeClassifier

FIVE_POINTS = [(i, 0) for i in range(5)]
TWO_POINTS = [(0, 0), (1, 0)]


@pytest.mark.parametrize("direction,expected", [
    (0, StrokeType.HORIZONTAL),
    (14, StrokeType.HORIZONTAL),
    (-15, StrokeType.HORIZONTAL),
    (180, StrokeType.HORIZONTAL),
    (-170, StrokeType.HORIZONTAL),
    (90, StrokeType.VERTICAL),
    (-90, StrokeType.VERTICAL),
    (100, StrokeType.VERTICAL),
    (45, StrokeType.DIAGONAL),
    (135, StrokeType.DIAGONAL),
    (-45, StrokeType.DIAGONAL),
    (-135, StrokeType.DIAGONAL),
])
def test_direction_rules(direction, expected):
    assert classify(direction, 1.0, 0.0, TWO_POINTS) == expected


def test_unmatched_direction_falls_back_to_curve():
    # 22.5 degrees is outside every direction band
    assert classify(22.5, 1.0, 0.0, TWO_POINTS) == StrokeType.CURVE
    assert classify(67.5, 1.0, 0.0, FIVE_POINTS) == StrokeType.CURVE


def test_curvature_wins_over_direction():
    assert classify(0, 1.0, 0.31, FIVE_POINTS) == StrokeType.CURVE


def test_curvature_at_threshold_is_not_a_curve():
    assert classify(0, 1.0, 0.3, FIVE_POINTS) == StrokeType.HORIZONTAL


def test_curvature_needs_enough_points():
    four_points = FIVE_POINTS[:4]
    assert classify(90, 1.0, 2.0, four_points) == StrokeType.VERTICAL


def test_classification_is_total():
    for direction in range(-180, 181, 5):
        for curvature in (0.0, 0.2, 0.5, math.pi):
            result = classify(direction, 1.0, curvature, FIVE_POINTS)
            assert result in StrokeType


@pytest.mark.parametrize("direction,curvature", [
    (float('nan'), 0.0),
    (0.0, float('inf')),
])
def test_non_finite_input_raises(direction, curvature):
    with pytest.raises(ValueError):
        classify(direction, 1.0, curvature, FIVE_POINTS)


def test_nearest_direction():
    pattern = STROKE_PATTERNS[StrokeType.DIAGONAL]
    assert StrokeClassifier.nearest_direction(300, pattern) == 315
    assert StrokeClassifier.nearest_direction(10, pattern) == 45


def test_result_is_a_string_value():
    assert classify(0, 1.0, 0.0, TWO_POINTS) == 'horizontal'
    assert str(StrokeType.CURVE) == 'curve'
