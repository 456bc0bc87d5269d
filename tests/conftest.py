"""Shared fixtures."""

import random

import pytest
from fastapi.testclient import TestClient

from acquisition.challenges import (
    Challenge,
    ChallengeGenerator,
    Grader,
    PLAYER_POSITION,
    Point,
    TargetAcquisitionChallenge,
)
from acquisition.main import app
from acquisition.store import ChallengeStore


class FakeClock:
    """Manually advanced stand-in for time.monotonic."""

    def __init__(self, start: float = 1000.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


def _make_challenge(challenge_id="TARG-42", **coords):
    """Challenge with the player at the origin and targets placed on the x axis."""
    coords = coords or {"T1": 10.0, "T2": 3.0}
    targets = tuple(Point(id=tid, x=x, y=0.0, z=0.0) for tid, x in coords.items())
    return Challenge(
        challenge_id=challenge_id,
        player_position=PLAYER_POSITION,
        targets=targets,
        timestamp=1700000000,
    )


@pytest.fixture
def make_challenge():
    return _make_challenge


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def store(clock):
    return ChallengeStore(clock=clock)


@pytest.fixture
def generator(clock):
    return ChallengeGenerator(rng=random.Random(1234), clock=clock)


@pytest.fixture
def grader():
    return Grader(deadline_seconds=1.0)


@pytest.fixture
def targeting(store, generator, grader, clock):
    return TargetAcquisitionChallenge(store=store, generator=generator, grader=grader, clock=clock)


@pytest.fixture
def client():
    with TestClient(app) as test_client:
        yield test_client
