"""FastAPI dependencies exposing the objects built at startup."""

from fastapi import Request

from ..challenges import TargetAcquisitionChallenge
from ..store import ChallengeStore, ExpirySweeper


def get_store(request: Request) -> ChallengeStore:
    return request.app.state.store


def get_challenge(request: Request) -> TargetAcquisitionChallenge:
    return request.app.state.challenge


def get_sweeper(request: Request) -> ExpirySweeper:
    return request.app.state.sweeper
