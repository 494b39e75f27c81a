#!/usr/bin/env python3
"""
Test Models
===========
Geometry of requests and advertisements.
"""

from models import MAP_SIZE, Request, Advertisement, AnnealingResult


def test_seed_covers_request_point():
    req = Request(12, 34, 9)
    ad = Advertisement.seed_for(req)

    assert ad.to_tuple() == (12, 34, 13, 35)
    assert ad.area == 1
    assert ad.contains(*req.point)


def test_dimensions_and_area():
    ad = Advertisement(2, 3, 5, 7)

    assert ad.width == 3
    assert ad.height == 4
    assert ad.area == 12


def test_contains_is_half_open():
    ad = Advertisement(2, 3, 5, 7)

    assert ad.contains(2, 3)
    assert ad.contains(4, 6)
    assert not ad.contains(5, 3)
    assert not ad.contains(2, 7)
    assert not ad.contains(1, 4)


def test_intersects_overlapping_boxes():
    a = Advertisement(0, 0, 4, 4)
    b = Advertisement(3, 3, 6, 6)

    assert a.intersects(b)
    assert b.intersects(a)


def test_shared_edge_or_corner_is_not_intersection():
    a = Advertisement(0, 0, 4, 4)
    edge = Advertisement(4, 0, 8, 4)
    corner = Advertisement(4, 4, 5, 5)

    for other in (edge, corner):
        assert not a.intersects(other)
        assert not other.intersects(a)


def test_intersects_is_symmetric_on_a_grid_of_boxes():
    boxes = [Advertisement(r, c, r + h, c + w)
             for r in (0, 2, 3) for c in (0, 1, 4) for h in (1, 3) for w in (1, 2)]

    for a in boxes:
        for b in boxes:
            assert a.intersects(b) == b.intersects(a)


def test_containment_nested_box_intersects():
    outer = Advertisement(0, 0, 10, 10)
    inner = Advertisement(4, 4, 5, 5)

    assert outer.intersects(inner)
    assert inner.intersects(outer)


def test_within_map_excludes_map_size():
    assert Advertisement(0, 0, MAP_SIZE - 1, MAP_SIZE - 1).is_within_map()
    assert not Advertisement(0, 0, MAP_SIZE, 1).is_within_map()
    assert not Advertisement(-1, 0, 1, 1).is_within_map()


def test_well_formed():
    assert Advertisement(0, 0, 1, 1).is_well_formed()
    assert not Advertisement(1, 0, 1, 1).is_well_formed()
    assert not Advertisement(0, 2, 1, 1).is_well_formed()


def test_str_is_output_line():
    assert str(Advertisement(1, 2, 3, 4)) == "1 2 3 4"


def test_result_summary_and_dict():
    result = AnnealingResult(
        advertisements=[Advertisement(0, 0, 1, 1)],
        iterations=10,
        accepted_moves=3,
        final_temperature=90.0,
        elapsed_time=0.01,
        score=123,
        seed=42,
    )

    assert "Iterations: 10" in result.get_summary()
    data = result.to_dict()
    assert data['advertisements'] == [[0, 0, 1, 1]]
    assert data['score'] == 123
    assert data['count'] == 1
