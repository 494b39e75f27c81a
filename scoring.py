"""
scoring.py - Request Satisfaction Scoring
=========================================
Per-request reward and the scaled total reported after a run.
"""

from typing import Sequence

import numpy as np

from models import Request, Advertisement


# Total score is reported on a 0..SCORE_SCALE integer range.
SCORE_SCALE = 1e9


def score_one(request: Request, ad: Advertisement) -> float:
    """
    Reward in [0, 1] for answering `request` with `ad`.

    Zero when the box misses the requested point. Otherwise 1 minus the
    squared relative area gap, so an exact area match scores 1 and the
    reward falls off faster the further the areas drift apart.
    """
    if not ad.contains(request.row, request.col):
        return 0.0

    area = ad.area
    x = 1.0 - min(request.area, area) / max(request.area, area)
    return 1.0 - x * x


def round_half_up(x: float) -> int:
    """Round by doubling, truncating, adding one and halving."""
    return (int(x * 2.0) + 1) >> 1


def calc_score(requests: Sequence[Request], ads: Sequence[Advertisement]) -> int:
    """Mean per-request score scaled to an integer in [0, 1e9]."""
    if not requests:
        return 0

    total = 0.0
    for req, ad in zip(requests, ads):
        total += score_one(req, ad)

    return round_half_up(SCORE_SCALE * total / len(requests))


def score_breakdown(requests: Sequence[Request],
                    ads: Sequence[Advertisement]) -> np.ndarray:
    """Per-request scores, index-aligned with `requests`."""
    return np.array([score_one(req, ad) for req, ad in zip(requests, ads)],
                    dtype=np.float64)
