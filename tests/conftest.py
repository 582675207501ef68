from datetime import datetime, timedelta, timezone

import pytest

from src.scoreboard.registry import MatchRegistry
from src.services.scoreboard_service import ScoreboardService


class FixedClock:
    """Clock that only moves when told to."""

    def __init__(self, start=datetime(2026, 6, 11, 18, 0, tzinfo=timezone.utc)):
        self.now = start

    def __call__(self):
        return self.now

    def advance(self, seconds=1):
        self.now += timedelta(seconds=seconds)


@pytest.fixture()
def registry():
    return MatchRegistry()


@pytest.fixture()
def fixed_clock():
    return FixedClock()


@pytest.fixture()
def service(registry):
    return ScoreboardService(registry=registry)


@pytest.fixture()
def frozen_service(registry, fixed_clock):
    # every match starts at the same instant
    return ScoreboardService(registry=registry, clock=fixed_clock)


def score_n_times(service, home, away, side, times):
    for _ in range(times):
        service.update_score(home, away, side)
