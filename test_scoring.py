#!/usr/bin/env python3
"""
Test Scoring
============
Per-request reward and the scaled total.
"""

import pytest

from models import Request, Advertisement
from scoring import score_one, round_half_up, calc_score, score_breakdown


def test_zero_when_point_not_covered():
    req = Request(10, 10, 4)
    ad = Advertisement(0, 0, 2, 2)

    assert score_one(req, ad) == 0.0


def test_one_when_area_matches():
    req = Request(10, 10, 4)
    ad = Advertisement(9, 9, 11, 11)

    assert score_one(req, ad) == 1.0


def test_partial_score_value():
    req = Request(0, 0, 4)
    ad = Advertisement(0, 0, 1, 2)

    # gap = 1 - 2/4 = 0.5
    assert score_one(req, ad) == pytest.approx(0.75)


def test_score_decreases_as_area_gap_grows():
    req = Request(0, 0, 16)
    smaller = [score_one(req, Advertisement(0, 0, 1, w)) for w in (16, 12, 8, 4, 1)]
    larger = [score_one(req, Advertisement(0, 0, 1, w)) for w in (16, 20, 32, 64)]

    assert smaller == sorted(smaller, reverse=True)
    assert larger == sorted(larger, reverse=True)
    assert all(0.0 <= s <= 1.0 for s in smaller + larger)


def test_round_half_up():
    assert round_half_up(0.0) == 0
    assert round_half_up(0.4) == 0
    assert round_half_up(0.5) == 1
    assert round_half_up(2.5) == 3
    assert round_half_up(2.49) == 2


def test_calc_score_perfect_solution():
    reqs = [Request(0, 0, 1), Request(5, 5, 2)]
    ads = [Advertisement(0, 0, 1, 1), Advertisement(5, 5, 6, 7)]

    assert calc_score(reqs, ads) == 1_000_000_000


def test_calc_score_half_satisfied():
    reqs = [Request(0, 0, 1), Request(5, 5, 1)]
    ads = [Advertisement(0, 0, 1, 1), Advertisement(0, 1, 1, 2)]

    assert calc_score(reqs, ads) == 500_000_000


def test_calc_score_empty():
    assert calc_score([], []) == 0


def test_breakdown_aligned_with_requests():
    reqs = [Request(0, 0, 1), Request(5, 5, 1)]
    ads = [Advertisement(0, 0, 1, 1), Advertisement(0, 1, 1, 2)]

    scores = score_breakdown(reqs, ads)

    assert scores.tolist() == [1.0, 0.0]
