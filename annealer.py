#!/usr/bin/env python3
"""
annealer.py - Simulated Annealing Placement Optimizer
=====================================================
Grows one rectangle per request by random single-cell boundary moves,
keeping all rectangles pairwise disjoint, until the time budget runs out.
"""

import logging
import math
import time
from collections import defaultdict
from enum import Enum
from typing import List, Optional, Sequence, Tuple

import numpy as np

from config import Config
from models import Request, Advertisement, AnnealingResult
from scoring import score_one, calc_score
from time_management import Clock, TimeBudget, SampledDeadline

logger = logging.getLogger(__name__)


# (d_row0, d_col0, d_row1, d_col1) for each move index:
# 0-3 push one edge outward (top, left, bottom, right),
# 4-7 shift the whole box (up, left, down, right).
MOVES: Tuple[Tuple[int, int, int, int], ...] = (
    (-1, 0, 0, 0),
    (0, -1, 0, 0),
    (0, 0, 1, 0),
    (0, 0, 0, 1),
    (-1, 0, -1, 0),
    (0, -1, 0, -1),
    (1, 0, 1, 0),
    (0, 1, 0, 1),
)


class Outcome(Enum):
    """What happened to the candidate proposed in one iteration."""
    OUT_OF_BOUNDS = "out_of_bounds"
    OVERLAP = "overlap"
    REJECTED = "rejected"
    ACCEPTED = "accepted"


def propose_move(ad: Advertisement, move: int) -> Advertisement:
    """Apply move `move` to `ad`, returning a new box; legality is not checked."""
    d_row0, d_col0, d_row1, d_col1 = MOVES[move]
    return Advertisement(ad.row0 + d_row0, ad.col0 + d_col0,
                         ad.row1 + d_row1, ad.col1 + d_col1)


def acceptance_probability(delta: float, temperature: float) -> float:
    """Metropolis criterion: always take improvements, worse moves with exp(delta/T)."""
    if delta > 0.0:
        return 1.0
    return math.exp(delta / temperature)


class AcceptanceEngine:
    """
    Performs single annealing iterations over a shared solution.

    The solution list is mutated in place and stays index-aligned with the
    requests. Random draws happen in a fixed order per iteration: request
    index, move, then the acceptance trial, so a given seed always yields the
    same decision sequence.
    """

    def __init__(self,
                 requests: Sequence[Request],
                 advertisements: List[Advertisement],
                 rng: np.random.Generator,
                 temperature: float,
                 cooling_rate: float,
                 map_size: int):
        if len(requests) != len(advertisements):
            raise ValueError(
                f"{len(requests)} requests but {len(advertisements)} advertisements")

        self.requests = requests
        self.advertisements = advertisements
        self.rng = rng
        self.temperature = temperature
        self.cooling_rate = cooling_rate
        self.map_size = map_size
        self.accepted = 0

    def overlaps_others(self, index: int, candidate: Advertisement) -> bool:
        """Check `candidate` against every rectangle except the one at `index`."""
        for i, ad in enumerate(self.advertisements):
            if i != index and ad.intersects(candidate):
                return True
        return False

    def step(self) -> Outcome:
        """Run one propose/evaluate/accept iteration."""
        index = int(self.rng.integers(len(self.requests)))
        move = int(self.rng.integers(len(MOVES)))
        current = self.advertisements[index]
        candidate = propose_move(current, move)

        if not candidate.is_within_map(self.map_size) or not candidate.is_well_formed():
            return Outcome.OUT_OF_BOUNDS

        if self.overlaps_others(index, candidate):
            return Outcome.OVERLAP

        request = self.requests[index]
        delta = score_one(request, candidate) - score_one(request, current)
        probability = acceptance_probability(delta, self.temperature)

        # Trial is always drawn, even when the gate below fails.
        accepted = (self.rng.random() < probability
                    and candidate.area <= request.area
                    and candidate.contains(request.row, request.col))
        if accepted:
            self.advertisements[index] = candidate
            self.accepted += 1

        self.temperature *= self.cooling_rate
        return Outcome.ACCEPTED if accepted else Outcome.REJECTED


class Annealer:
    """Time-bounded driver for the acceptance engine."""

    def __init__(self,
                 requests: Sequence[Request],
                 seed: Optional[int] = None,
                 rng: Optional[np.random.Generator] = None,
                 initial_temp: Optional[float] = None,
                 cooling_rate: Optional[float] = None,
                 time_limit: Optional[float] = None,
                 time_check_interval: Optional[int] = None,
                 map_size: Optional[int] = None,
                 clock: Clock = time.perf_counter):
        params = Config.ANNEALING
        self.requests = list(requests)
        self.seed = params['seed'] if seed is None else seed
        self.rng = rng if rng is not None else np.random.default_rng(self.seed)
        self.initial_temp = params['initial_temp'] if initial_temp is None else initial_temp
        self.cooling_rate = params['cooling_rate'] if cooling_rate is None else cooling_rate
        self.time_limit = params['time_limit'] if time_limit is None else time_limit
        self.time_check_interval = (params['time_check_interval']
                                    if time_check_interval is None else time_check_interval)
        self.map_size = Config.GRID['map_size'] if map_size is None else map_size
        self.progress_interval = params.get('progress_interval', 0)
        self.clock = clock

        if self.initial_temp <= 0:
            raise ValueError(f"Initial temperature must be positive, got {self.initial_temp}")
        if not 0 < self.cooling_rate <= 1:
            raise ValueError(f"Cooling rate must be in (0, 1], got {self.cooling_rate}")
        if self.time_limit <= 0:
            raise ValueError(f"Time limit must be positive, got {self.time_limit}")

    def initial_solution(self) -> List[Advertisement]:
        """One 1x1 box on each requested point."""
        return [Advertisement.seed_for(req) for req in self.requests]

    def run(self,
            started_at: Optional[float] = None,
            max_iterations: Optional[int] = None) -> AnnealingResult:
        """
        Anneal until the deadline and return the final placement.

        Args:
            started_at: Clock reading when the input was received; the budget
                counts from here. Defaults to now.
            max_iterations: Optional hard cap, making the run independent of
                the clock.

        Returns:
            AnnealingResult with rectangles in request order
        """
        budget = TimeBudget(self.time_limit, started_at, self.clock)
        advertisements = self.initial_solution()

        logger.info(f"Annealing {len(self.requests)} requests "
                    f"(seed={self.seed}, time limit={self.time_limit:.2f}s)")

        if not self.requests:
            return self._build_result(advertisements, 0, 0, self.initial_temp,
                                      budget.elapsed(), {})

        engine = AcceptanceEngine(self.requests, advertisements, self.rng,
                                  self.initial_temp, self.cooling_rate, self.map_size)
        deadline = SampledDeadline(budget, self.time_check_interval)
        outcomes = defaultdict(int)

        iteration = 0
        while not deadline.expired:
            if max_iterations is not None and iteration >= max_iterations:
                break

            iteration += 1
            deadline.tick(iteration)

            outcomes[engine.step().value] += 1

            if self.progress_interval and iteration % self.progress_interval == 0:
                logger.debug(f"iter {iteration}: temp={engine.temperature:.3e}, "
                             f"accepted={engine.accepted}, elapsed={deadline.elapsed:.2f}s")

        return self._build_result(advertisements, iteration, engine.accepted,
                                  engine.temperature, budget.elapsed(), dict(outcomes))

    def _build_result(self, advertisements, iterations, accepted, temperature,
                      elapsed, outcomes) -> AnnealingResult:
        score = calc_score(self.requests, advertisements)

        logger.info(f"iter: {iterations}")
        logger.info(f"score: {score}")

        return AnnealingResult(
            advertisements=advertisements,
            iterations=iterations,
            accepted_moves=accepted,
            final_temperature=temperature,
            elapsed_time=elapsed,
            score=score,
            seed=self.seed,
            metrics={'outcomes': outcomes}
        )


def random_expand(requests: Sequence[Request],
                  seed: Optional[int] = None,
                  time_limit: Optional[float] = None,
                  started_at: Optional[float] = None) -> List[Advertisement]:
    """Run a default-configured annealer and return just the rectangles."""
    annealer = Annealer(requests, seed=seed, time_limit=time_limit)
    return annealer.run(started_at=started_at).advertisements
