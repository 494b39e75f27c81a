#!/usr/bin/env python3
"""
Test Time Management
====================
"""

import pytest

from time_management import TimeBudget, SampledDeadline


class ManualClock:
    def __init__(self, now=0.0):
        self.now = now
        self.reads = 0

    def __call__(self):
        self.reads += 1
        return self.now


def test_budget_measures_from_start():
    clock = ManualClock(now=12.0)
    budget = TimeBudget(5.0, start_time=10.0, clock=clock)

    assert budget.elapsed() == pytest.approx(2.0)
    assert budget.remaining_time() == pytest.approx(3.0)
    assert budget.fraction_used() == pytest.approx(0.4)
    assert not budget.is_expired()

    clock.now = 15.0
    assert budget.is_expired()
    assert budget.remaining_time() == 0.0


def test_budget_defaults_start_to_now():
    clock = ManualClock(now=7.0)
    budget = TimeBudget(1.0, clock=clock)

    assert budget.start_time == 7.0


def test_budget_must_be_positive():
    with pytest.raises(ValueError):
        TimeBudget(0.0, start_time=0.0)


def test_deadline_reads_clock_only_on_interval():
    clock = ManualClock(now=0.0)
    deadline = SampledDeadline(TimeBudget(1.0, start_time=0.0, clock=clock), interval=100)
    assert clock.reads == 1

    clock.now = 5.0
    for iteration in range(1, 100):
        deadline.tick(iteration)
    assert not deadline.expired
    assert clock.reads == 1

    deadline.tick(100)
    assert deadline.expired
    assert clock.reads == 2
    assert deadline.elapsed == pytest.approx(5.0)


def test_deadline_interval_must_be_positive():
    with pytest.raises(ValueError):
        SampledDeadline(TimeBudget(1.0, start_time=0.0), interval=0)
