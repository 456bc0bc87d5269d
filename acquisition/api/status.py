"""Server status endpoint."""

from fastapi import APIRouter, Depends

from ..challenges import PLAYER_POSITION, TargetAcquisitionChallenge
from ..challenges.targeting import seconds_label
from ..store import ChallengeStore, ExpirySweeper
from .dependencies import get_challenge, get_store, get_sweeper
from .schemas import ServerStatus

router = APIRouter(tags=["status"])


@router.get("/status", response_model=ServerStatus)
async def get_status(
    store: ChallengeStore = Depends(get_store),
    challenge: TargetAcquisitionChallenge = Depends(get_challenge),
    sweeper: ExpirySweeper = Depends(get_sweeper),
):
    """Active challenge count and timing configuration."""
    p = PLAYER_POSITION
    return ServerStatus(
        active_challenges=store.size(),
        challenge_timeout=seconds_label(challenge.grader.deadline_seconds),
        cleanup_interval=seconds_label(sweeper.interval),
        player_position=f"({p.x:g}, {p.y:g}, {p.z:g})",
    )
