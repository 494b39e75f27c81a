#!/usr/bin/env python3
"""
time_management.py - Time Management System
===========================================
Wall-clock budget and an amortized deadline check for the search loop.
"""

from dataclasses import dataclass, field
from typing import Callable, Optional
import time


Clock = Callable[[], float]


@dataclass
class TimeBudget:
    """Time budget measured from the moment the input was received."""
    total_budget: float  # Total time in seconds
    start_time: Optional[float] = None
    clock: Clock = field(default=time.perf_counter, repr=False)

    def __post_init__(self):
        if self.total_budget <= 0:
            raise ValueError(f"Time budget must be positive, got {self.total_budget}")
        if self.start_time is None:
            self.start_time = self.clock()

    def elapsed(self, now: Optional[float] = None) -> float:
        """Seconds since start, at `now` or at the current clock reading."""
        if now is None:
            now = self.clock()
        return now - self.start_time

    def fraction_used(self, now: Optional[float] = None) -> float:
        return self.elapsed(now) / self.total_budget

    def remaining_time(self, now: Optional[float] = None) -> float:
        """Get remaining time."""
        return max(0.0, self.total_budget - self.elapsed(now))

    def is_expired(self, now: Optional[float] = None) -> bool:
        """Check if budget is expired."""
        return self.fraction_used(now) >= 1.0


class SampledDeadline:
    """
    Soft deadline that reads the clock only every `interval` iterations.

    Between samples the last reading is reused, so the loop may overrun the
    budget by at most `interval - 1` iterations. It never interrupts an
    iteration in progress.
    """

    def __init__(self, budget: TimeBudget, interval: int = 100, now: Optional[float] = None):
        if interval < 1:
            raise ValueError(f"Check interval must be at least 1, got {interval}")
        self.budget = budget
        self.interval = interval
        self.last_sample = budget.clock() if now is None else now
        self.samples = 1

    def tick(self, iteration: int) -> None:
        """Refresh the cached clock reading on every `interval`-th iteration."""
        if iteration % self.interval == 0:
            self.last_sample = self.budget.clock()
            self.samples += 1

    @property
    def expired(self) -> bool:
        return self.budget.is_expired(self.last_sample)

    @property
    def elapsed(self) -> float:
        return self.budget.elapsed(self.last_sample)
