"""Challenge implementations."""

from .base import AnswerSubmission, BaseChallenge, Challenge, ChallengeRecord, Point
from .generator import PLAYER_POSITION, ChallengeGenerator
from .grader import Expired, Failure, Grader, NotFound, Success, Verdict
from .targeting import TargetAcquisitionChallenge

__all__ = [
    "AnswerSubmission",
    "BaseChallenge",
    "Challenge",
    "ChallengeRecord",
    "Point",
    "PLAYER_POSITION",
    "ChallengeGenerator",
    "Grader",
    "Success",
    "Failure",
    "Expired",
    "NotFound",
    "Verdict",
    "TargetAcquisitionChallenge",
]
