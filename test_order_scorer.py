#!/usr/bin/env python3
"""Tests for stroke-order scoring of whole character attempts."""

import pytest

from stroke_recognition import ReferenceStroke, StrokeData, StrokePattern, score_order
from stroke_recognition.strokes.order_scorer import StrokeOrderScorer

HORIZONTAL = StrokeData('horizontal', 0, 1.0, 0.0, [])
VERTICAL = StrokeData('vertical', 90, 1.0, 0.0, [])


def test_correct_order_scores_one():
    assert score_order([HORIZONTAL, VERTICAL], ['horizontal', 'vertical']) == pytest.approx(1.0)


def test_swapped_order_scores_mean_confidence():
    # Each swapped stroke only passes length and curvature: 0.3
    assert score_order([VERTICAL, HORIZONTAL], ['horizontal', 'vertical']) == pytest.approx(0.3)


def test_partially_correct_attempt():
    score = score_order([HORIZONTAL, HORIZONTAL], ['horizontal', 'vertical'])
    assert score == pytest.approx((1.0 + 0.3) / 2)


@pytest.mark.parametrize("strokes,expected", [
    ([HORIZONTAL], ['horizontal', 'vertical']),
    ([HORIZONTAL, VERTICAL, HORIZONTAL], ['horizontal', 'vertical']),
    ([], ['horizontal']),
    ([], []),
])
def test_count_mismatch_or_empty_scores_zero(strokes, expected):
    assert score_order(strokes, expected) == 0.0


def test_score_is_bounded():
    attempts = [
        [HORIZONTAL, VERTICAL],
        [VERTICAL, VERTICAL],
        [StrokeData('curve', 30, 9.0, 2.0, []), VERTICAL],
    ]
    for strokes in attempts:
        assert 0.0 <= score_order(strokes, ['horizontal', 'vertical']) <= 1.0


def test_reference_strokes_and_missing_entries():
    short = StrokePattern((0, 180), 0.5, 0.0, 15, 0.2, 0.3)
    expected = [ReferenceStroke('horizontal', short), None]
    strokes = [StrokeData('horizontal', 0, 0.5, 0.0, []), VERTICAL]

    # The missing entry contributes an unvalidated 0
    assert score_order(strokes, expected) == pytest.approx(0.5)


def test_validate_all_requires_matching_lengths():
    scorer = StrokeOrderScorer()
    with pytest.raises(ValueError):
        scorer.validate_all([HORIZONTAL], [])

    results = scorer.validate_all([HORIZONTAL, VERTICAL], ['horizontal', 'horizontal'])
    assert [r.is_correct for r in results] == [True, False]
