#!/usr/bin/env python3
"""Tests for point preprocessing and the geometry helpers."""

import math

import pytest

from stroke_recognition import Point, preprocess
from stroke_recognition.strokes.preprocessor import PointPreprocessor
from stroke_recognition.utils.geometry import AngleUtils, GeometryUtils, PathUtils


def test_short_input_is_kept():
    points = preprocess([(0, 0), (10, 0), (20, 0)])
    assert [(p.x, p.y) for p in points] == [(0, 0), (10, 0), (20, 0)]


def test_duplicates_removed_keeping_first_occurrence():
    raw = [(0, 0, 1), (0, 0, 2), (5, 5, 3), (0, 0, 4), (9, 9, 5)]
    points = preprocess(raw)

    assert [(p.x, p.y) for p in points] == [(0, 0), (5, 5), (9, 9)]
    assert points[0].timestamp == 1


def test_long_strokes_are_smoothed_to_max_points():
    raw = [{'x': i, 'y': 0, 't': i * 10} for i in range(250)]
    points = preprocess(raw)

    # ceil(250 / 100) = 3 points per window
    assert len(points) == math.ceil(250 / 3)
    assert len(points) <= 100
    assert points[0].x == pytest.approx(1.0)
    assert points[0].timestamp == 0
    assert points[1].timestamp == 30


def test_preprocess_is_idempotent_on_its_output():
    raw = [(i, (i * 7) % 13) for i in range(300)]
    once = preprocess(raw)
    twice = preprocess(once)
    assert [(p.x, p.y) for p in twice] == [(p.x, p.y) for p in once]


def test_input_is_not_modified():
    raw = [{'x': 1, 'y': 1}, {'x': 1, 'y': 1}, {'x': 2, 'y': 2}]
    preprocess(raw)
    assert len(raw) == 3


def test_custom_max_points():
    class SmallConfig:
        MAX_POINTS = 10

    points = PointPreprocessor(SmallConfig()).preprocess([(i, i) for i in range(35)])
    assert len(points) == 9


@pytest.mark.parametrize("raw", [
    {'x': 1},
    (1,),
    "1,2",
    {'x': 'a', 'y': 2},
])
def test_malformed_points_raise(raw):
    with pytest.raises(ValueError):
        PathUtils.to_point(raw)


def test_point_formats():
    assert PathUtils.to_point((1, 2)) == Point(1.0, 2.0)
    assert PathUtils.to_point((1, 2, 3)).timestamp == 3.0
    assert PathUtils.to_point({'x': 1, 'y': 2, 't': 5}).t == 5.0
    assert PathUtils.to_point({'x': 1, 'y': 2, 'timestamp': 6}).timestamp == 6.0


def test_direction_range():
    origin = Point(0, 0)
    assert GeometryUtils.calculate_direction(origin, Point(10, 0)) == 0
    assert GeometryUtils.calculate_direction(origin, Point(0, 10)) == 90
    assert GeometryUtils.calculate_direction(origin, Point(-10, 0)) == 180
    assert GeometryUtils.calculate_direction(origin, Point(-10, -0.0)) == 180
    assert GeometryUtils.calculate_direction(origin, Point(0, -10)) == -90


def test_turning_angle():
    a, b = Point(0, 0), Point(1, 0)
    assert GeometryUtils.turning_angle(a, b, Point(2, 0)) == 0
    assert GeometryUtils.turning_angle(a, b, Point(1, 1)) == pytest.approx(math.pi / 2)
    assert GeometryUtils.turning_angle(a, b, Point(0, 0)) == pytest.approx(math.pi)
    assert GeometryUtils.turning_angle(a, a, Point(2, 0)) == 0


def test_angle_helpers():
    assert AngleUtils.normalize_degrees(-90) == 270
    assert AngleUtils.normalize_degrees(360) == 0
    assert AngleUtils.signed_difference(340, 0) == -20
    assert AngleUtils.signed_difference(10, 350) == 20
    assert AngleUtils.circular_distance(179, -179) == pytest.approx(2)
