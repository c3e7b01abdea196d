#!/usr/bin/env python3
"""Tests for the stroke engine, practice sessions and caller-side helpers."""

import math

import pytest

from stroke_recognition import (
    CurvatureMode,
    InsufficientPointsError,
    PointThrottle,
    PracticeSession,
    ReferenceSequence,
    ReferenceStroke,
    StrokeEngine,
    StrokeType,
    ValidationCache,
    ValidationDebouncer,
    ValidationResult,
)

HORIZONTAL = [(0, 0), (50, 0), (100, 0)]
VERTICAL = [(0, 0), (0, 50), (0, 100)]


class FakeClock:
    def __init__(self):
        self.now = 1000.0

    def __call__(self):
        return self.now


def arc(n=9, radius=75.0):
    return [
        (radius * math.cos(math.pi - i * math.pi / (n - 1)),
         -radius * math.sin(math.pi - i * math.pi / (n - 1)))
        for i in range(n)
    ]


def result(confidence=1.0):
    return ValidationResult(confidence > 0.8, confidence, "msg", [], StrokeType.HORIZONTAL,
                            StrokeType.HORIZONTAL)


# Engine

def test_engine_scales_lengths():
    engine = StrokeEngine(unit_length=100)
    stroke, validation = engine.evaluate(HORIZONTAL, 'horizontal')

    assert stroke.length == pytest.approx(1.0)
    assert validation.is_correct
    assert validation.confidence == 1.0


def test_engine_without_unit_length_keeps_raw_lengths():
    stroke = StrokeEngine().analyze(HORIZONTAL)
    assert stroke.length == 100


def test_engine_rejects_bad_unit_length():
    with pytest.raises(ValueError):
        StrokeEngine(unit_length=0)


def test_engine_accepts_reference_strokes():
    engine = StrokeEngine(unit_length=100)
    _, validation = engine.evaluate(VERTICAL, ReferenceStroke('vertical'))
    assert validation.is_correct

    _, missing = engine.evaluate(VERTICAL, None)
    assert not missing.validated


def test_scored_evaluation_of_a_curve():
    engine = StrokeEngine(unit_length=100)
    stroke, validation = engine.evaluate_scored(arc(), 'curve')

    assert stroke.type == StrokeType.CURVE
    assert stroke.length == pytest.approx(1.5)
    assert validation.is_correct


def test_live_evaluation_matches_basic_mode():
    engine = StrokeEngine(unit_length=100)
    live, _ = engine.evaluate_live(arc(), 'curve')
    basic = engine.analyze(arc(), CurvatureMode.BASIC)
    assert live.curvature == basic.curvature


def test_engine_is_stateless_between_calls():
    engine = StrokeEngine(unit_length=100)
    first = engine.evaluate(HORIZONTAL, 'horizontal')
    engine.evaluate(VERTICAL, 'horizontal')
    assert engine.evaluate(HORIZONTAL, 'horizontal') == first


def test_engine_score_order():
    engine = StrokeEngine(unit_length=100)
    strokes = [engine.analyze(HORIZONTAL), engine.analyze(VERTICAL)]

    assert engine.score_order(strokes, ['horizontal', 'vertical']) == pytest.approx(1.0)
    assert engine.score_order(strokes, ['horizontal']) == 0.0


def test_engine_propagates_insufficient_points():
    with pytest.raises(InsufficientPointsError):
        StrokeEngine().evaluate([(1, 1), (1, 1)], 'horizontal')


# Practice session

@pytest.fixture
def session():
    reference = ReferenceSequence.from_types('十', ['horizontal', 'vertical'])
    return PracticeSession(reference, StrokeEngine(unit_length=100))


def test_session_walks_through_strokes(session):
    first = session.submit(HORIZONTAL)
    assert first.is_correct
    assert session.current_index == 1
    assert not session.is_complete

    second = session.submit(VERTICAL)
    assert second.is_correct
    assert session.is_complete
    assert session.correct_count == 2
    assert session.score() == pytest.approx(1.0)


def test_session_ignores_micro_strokes(session):
    assert session.submit([(3, 3)]) is None
    assert session.current_index == 0


def test_session_wrong_stroke(session):
    validation = session.submit(VERTICAL)
    assert not validation.is_correct
    assert validation.expected_type == StrokeType.HORIZONTAL
    assert session.correct_count == 0


def test_session_extra_stroke_is_not_validated(session):
    session.submit(HORIZONTAL)
    session.submit(VERTICAL)
    extra = session.submit(HORIZONTAL)

    assert not extra.validated
    assert session.score() == 0.0


def test_session_results_are_cached(session):
    first = session.submit(HORIZONTAL)
    assert ('十', 0) in session.cache
    assert session.result_at(0) is first
    assert session.result_at(5) is None


def test_session_undo_and_reset(session):
    session.submit(HORIZONTAL)
    session.submit(HORIZONTAL)

    undone = session.undo()
    assert undone.type == StrokeType.HORIZONTAL
    assert session.current_index == 1
    assert ('十', 1) not in session.cache

    session.reset()
    assert session.current_index == 0
    assert len(session.cache) == 0
    assert session.undo() is None


# Validation cache

def test_cache_get_and_put():
    cache = ValidationCache()
    stored = result()
    cache.put('一', 0, stored)

    assert cache.get('一', 0) is stored
    assert cache.get('一', 1) is None
    assert len(cache) == 1


def test_cache_expiry():
    clock = FakeClock()
    cache = ValidationCache(ttl_seconds=10, clock=clock)
    cache.put('一', 0, result())
    cache.put('一', 1, result())

    clock.now += 11
    assert cache.get('一', 0) is None
    assert cache.cleanup() == 1
    assert len(cache) == 0


def test_cache_evicts_oldest_entry():
    clock = FakeClock()
    cache = ValidationCache(max_size=2, clock=clock)
    cache.put('a', 0, result())
    clock.now += 1
    cache.put('b', 0, result())
    clock.now += 1
    cache.put('c', 0, result())

    assert ('a', 0) not in cache
    assert ('b', 0) in cache
    assert ('c', 0) in cache


def test_cache_invalidate_character():
    cache = ValidationCache()
    cache.put('二', 0, result())
    cache.put('二', 1, result())
    cache.put('三', 0, result())

    cache.invalidate('二', 1)
    assert ('二', 0) in cache
    cache.invalidate('二')
    assert len(cache) == 1

    cache.clear()
    assert len(cache) == 0


def test_caches_are_independent():
    first, second = ValidationCache(), ValidationCache()
    first.put('一', 0, result())
    assert len(second) == 0


# Pacing helpers

def test_point_throttle():
    throttle = PointThrottle(16)
    accepted = [throttle.accept({'x': t, 'y': 0, 't': t}) for t in (0, 5, 16, 20, 40)]
    assert accepted == [True, False, True, False, True]

    throttle.reset()
    assert throttle.accept((0, 0, 41))


def test_point_throttle_keeps_untimed_points():
    throttle = PointThrottle(16)
    assert throttle.accept((1, 1))
    assert throttle.accept((2, 2))


def test_point_throttle_filter_keeps_last_sample():
    points = PointThrottle(16).filter([(0, 0, 0), (1, 0, 5), (2, 0, 10)])
    assert [p.timestamp for p in points] == [0, 10]
    assert PointThrottle(16).filter([]) == []


def test_debouncer_runs_once_after_quiet_period():
    debouncer = ValidationDebouncer(100)
    assert not debouncer.should_run(0)

    debouncer.notify(0)
    debouncer.notify(50)
    assert debouncer.pending
    assert not debouncer.should_run(120)
    assert debouncer.should_run(150)
    assert not debouncer.should_run(300)


def test_debouncer_cancel():
    debouncer = ValidationDebouncer(100)
    debouncer.notify(0)
    debouncer.cancel()
    assert not debouncer.pending
    assert not debouncer.should_run(500)
