"""Intersection detector strategies."""

import logging

import numpy as np
import pytest

from sweepline.detectors import (
    BruteForceDetector,
    IntersectionDetector,
    SweepDetector,
    SweepStatus,
    VectorizedDetector,
    get_detector,
)
from sweepline.models import IntersectionPair, LineSegment, SweepState, compare_segments
from sweepline.utils import segments_from_array

EXPECTED_INDICES = [(0, 1), (0, 2), (1, 2), (4, 5)]


def _random_segments(seed, n):
    rng = np.random.default_rng(seed)
    return segments_from_array(rng.uniform(-50.0, 50.0, size=(n, 2, 2)))


def test_brute_force_fixture(fixture_segments):
    pairs = BruteForceDetector().detect(fixture_segments)

    assert len(pairs) == 4
    for pair, (i, j) in zip(pairs, EXPECTED_INDICES):
        assert pair.segment1 == fixture_segments[i]
        assert pair.segment2 == fixture_segments[j]


def test_detector_is_callable(fixture_segments):
    detector = BruteForceDetector()
    assert detector(fixture_segments) == detector.detect(fixture_segments)


@pytest.mark.parametrize("segments", [[], [LineSegment(0.0, 0.0, 1.0, 1.0)]])
@pytest.mark.parametrize("detector", [BruteForceDetector(), VectorizedDetector(), SweepDetector()])
def test_fewer_than_two_segments(detector, segments):
    assert detector.detect(segments) == []


def test_brute_force_reports_each_index_pair():
    seg = LineSegment(0.0, 0.0, 2.0, 2.0)
    cross = LineSegment(0.0, 2.0, 2.0, 0.0)
    pairs = BruteForceDetector().detect([seg, seg, cross])
    # (0, 1) (0, 2) (1, 2): equal segments still give distinct index pairs
    assert len(pairs) == 3


@pytest.mark.parametrize("block_size", [1, 2, 4, 512])
def test_vectorized_matches_brute_force_fixture(fixture_segments, block_size):
    expected = BruteForceDetector().detect(fixture_segments)
    found = VectorizedDetector(block_size=block_size).detect(fixture_segments)

    assert [(p.segment1, p.segment2) for p in found] == [
        (p.segment1, p.segment2) for p in expected
    ]


def test_vectorized_matches_brute_force_random():
    segments = _random_segments(seed=3, n=60)
    expected = BruteForceDetector().detect(segments)
    found = VectorizedDetector(block_size=7).detect(segments)

    assert expected
    assert [(p.segment1, p.segment2) for p in found] == [
        (p.segment1, p.segment2) for p in expected
    ]


def test_vectorized_rejects_bad_block_size():
    with pytest.raises(ValueError):
        VectorizedDetector(block_size=0)


def test_sweep_matches_brute_force_fixture(fixture_segments):
    expected = set(BruteForceDetector().detect(fixture_segments))
    found = SweepDetector().detect(fixture_segments)

    assert len(found) == 4
    assert set(found) == expected


def test_sweep_matches_brute_force_random():
    segments = _random_segments(seed=11, n=80)
    expected = BruteForceDetector().detect(segments)
    found = SweepDetector().detect(segments)

    assert len(found) == len(expected)
    assert set(found) == set(expected)


def test_sweep_finds_pairs_from_either_side():
    # found as (active, entering), i.e. reversed relative to the input order
    late = LineSegment(0.0, 0.0, 2.0, 2.0)
    early = LineSegment(0.0, 2.0, 2.0, -5.0)
    found = SweepDetector().detect([late, early])

    assert found == [IntersectionPair(late, early)]
    assert found[0].segment1 == early


def test_sweep_contacts_on_the_same_row():
    ending = LineSegment(0.0, 0.0, 0.0, 2.0)
    horizontal = LineSegment(-1.0, 2.0, 1.0, 2.0)
    overlapping = LineSegment(-0.5, 2.0, 4.0, 2.0)
    found = set(SweepDetector().detect([ending, horizontal, overlapping]))

    assert found == {
        IntersectionPair(ending, horizontal),
        IntersectionPair(ending, overlapping),
        IntersectionPair(horizontal, overlapping),
    }
    assert found == set(BruteForceDetector().detect([ending, horizontal, overlapping]))


def test_sweep_skips_disjoint_collinear_segments():
    a = LineSegment(0.0, 0.0, 1.0, 1.0)
    b = LineSegment(5.0, 5.0, 6.0, 6.0)

    assert len(BruteForceDetector().detect([a, b])) == 1
    assert SweepDetector().detect([a, b]) == []


def test_sweep_reports_duplicates_once():
    seg = LineSegment(0.0, 0.0, 2.0, 2.0)
    cross = LineSegment(0.0, 2.0, 2.0, 0.0)
    found = SweepDetector().detect([seg, seg, cross])
    assert len(found) == 2


def test_sweep_ignores_nan_segments(fixture_segments):
    broken = LineSegment(float("nan"), 0.0, 1.0, 1.0)
    found = SweepDetector().detect(fixture_segments + [broken])
    assert set(found) == set(BruteForceDetector().detect(fixture_segments))


def test_intersection_points(fixture_segments):
    results = list(BruteForceDetector().intersection_points(fixture_segments))
    # the collinear pair (4, 5) has no single point
    assert len(results) == 3
    points = [(p.x, p.y) for _, p in results]
    assert points[2] == (6.0, 1.0)
    assert points[0] == pytest.approx((3.6, 2.8))
    assert points[1] == pytest.approx((3.0, 2.5))


@pytest.mark.parametrize(
    "name, cls",
    [
        ("brute_force", BruteForceDetector),
        ("vectorized", VectorizedDetector),
        ("sweep", SweepDetector),
    ],
)
def test_get_detector(name, cls):
    detector = get_detector(name)
    assert isinstance(detector, cls)
    assert isinstance(detector, IntersectionDetector)


def test_get_detector_default():
    assert isinstance(get_detector(), BruteForceDetector)


def test_get_detector_unknown():
    with pytest.raises(ValueError):
        get_detector("quadtree")


def test_detector_interface_is_abstract():
    with pytest.raises(TypeError):
        IntersectionDetector()


def test_detectors_log_at_debug(fixture_segments, caplog):
    with caplog.at_level(logging.DEBUG, logger="sweepline"):
        BruteForceDetector().detect(fixture_segments)
        SweepDetector().detect(fixture_segments)

    messages = [r.getMessage() for r in caplog.records]
    assert "Brute force: 6 segments, 4 intersecting pairs" in messages
    assert "Sweep: 6 segments, 12 events, 4 intersecting pairs" in messages


def _is_ordered(status, state):
    ordered = list(status)
    return all(compare_segments(a, b, state) <= 0 for a, b in zip(ordered, ordered[1:]))


def test_sweep_status_insert_keeps_order():
    diagonal = LineSegment(0.0, 0.0, 10.0, 10.0)
    vertical = LineSegment(5.0, 0.0, 5.0, 10.0)
    horizontal = LineSegment(3.0, 2.0, 9.0, 2.0)
    state = SweepState(2.0)
    status = SweepStatus(state)

    assert status.insert(vertical) == 0
    assert status.insert(diagonal) == 0
    assert status.insert(horizontal) == 1
    assert list(status) == [diagonal, horizontal, vertical]
    assert status.neighbor(1, -1) == diagonal
    assert status.neighbor(1, 1) == vertical
    assert status.neighbor(0, -1) is None

    # the diagonal crosses the vertical at y = 5
    state.set_position(8.0)
    status.reorder()
    assert list(status) == [horizontal, vertical, diagonal]

    assert status.remove(vertical) == 1
    assert list(status) == [horizontal, diagonal]
    assert len(status) == 2


def test_sweep_status_order_invariant_random():
    state = SweepState(0.0)
    status = SweepStatus(state)
    for seg in _random_segments(seed=5, n=40):
        status.insert(seg)
        assert _is_ordered(status, state)

    state.set_position(25.0)
    status.reorder()
    assert _is_ordered(status, state)
    assert len(status) == 40


def test_sweep_result_is_subset_of_brute_force(fixture_segments):
    segments = fixture_segments + [
        LineSegment(0.0, 0.0, 1.0, 1.0),
        LineSegment(5.0, 5.0, 6.0, 6.0),
        LineSegment(2.0, 2.0, 2.0, 2.0),
    ]
    brute = BruteForceDetector().detect(segments)
    vectorized = VectorizedDetector().detect(segments)
    swept = get_detector("sweep").detect(segments)

    assert vectorized == brute
    assert set(swept) < set(brute)
    assert IntersectionPair(segments[6], segments[7]) not in set(swept)
