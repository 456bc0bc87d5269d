"""Mission API - fetch a target challenge, answer it before the deadline."""

from fastapi import APIRouter, HTTPException, Depends
from fastapi.responses import JSONResponse

from ..challenges import (
    AnswerSubmission,
    Expired,
    Failure,
    NotFound,
    TargetAcquisitionChallenge,
)
from .dependencies import get_challenge
from .schemas import AnswerAccepted, AnswerCreate, AnswerMissed, ChallengeOut

router = APIRouter(prefix="/mission", tags=["mission"])


# ============ Helper Functions ============

def format_elapsed(seconds: float) -> str:
    return f"{seconds:.3f} seconds"


def format_distance(value: float) -> str:
    return f"{value:.2f}"


# ============ Endpoints ============

# Plain `def` handlers run on the framework's thread pool, so answers are
# graded concurrently; the store lock is what keeps them consistent.

@router.get("/coordinates", response_model=ChallengeOut)
def issue_coordinates(challenge: TargetAcquisitionChallenge = Depends(get_challenge)):
    """Get a fresh target identification challenge. The clock starts now."""
    return challenge.issue()


@router.post(
    "/coordinates",
    response_model=AnswerAccepted,
    responses={
        400: {"model": AnswerMissed, "description": "Wrong target or malformed submission"},
        404: {"description": "Challenge not found or expired"},
        408: {"description": "Answer arrived after the deadline"},
    },
)
def submit_coordinates(
    answer: AnswerCreate,
    challenge: TargetAcquisitionChallenge = Depends(get_challenge),
):
    """
    Submit the id of the target closest to the player.

    The challenge is consumed by this call whatever the outcome, so a second
    submission for the same id gets a 404.
    """
    verdict = challenge.evaluate(
        AnswerSubmission(
            challenge_id=answer.challenge_id,
            closest_target_id=answer.closest_target_id,
        )
    )

    if isinstance(verdict, NotFound):
        raise HTTPException(
            status_code=404,
            detail={"error_code": "NOT_FOUND", "message": "Challenge not found or expired"},
        )

    if isinstance(verdict, Expired):
        raise HTTPException(
            status_code=408,
            detail={
                "error_code": "TIME_EXPIRED",
                "message": "TIME EXPIRED! Target lost, soldier!",
                "challenge_id": verdict.challenge_id,
                "elapsed": format_elapsed(verdict.elapsed),
            },
        )

    if isinstance(verdict, Failure):
        missed = AnswerMissed(
            correct_target=verdict.expected_target,
            chosen_target=verdict.chosen_target,
            correct_distance=format_distance(verdict.correct_distance),
            chosen_distance=(
                format_distance(verdict.chosen_distance)
                if verdict.chosen_distance is not None else None
            ),
            challenge_id=verdict.challenge_id,
        )
        return JSONResponse(status_code=400, content=missed.model_dump())

    # Success
    return AnswerAccepted(
        response_time=format_elapsed(verdict.elapsed),
        challenge_id=verdict.challenge_id,
        target_id=verdict.target_id,
    )
