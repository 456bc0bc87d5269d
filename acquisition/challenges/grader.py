"""Grading of answers against stored challenge records."""

from dataclasses import dataclass
from typing import Optional, Union

from .base import AnswerSubmission, ChallengeRecord
from .geometry import distance
from ..config import ANSWER_DEADLINE_SECONDS


@dataclass(frozen=True)
class Success:
    """Correct target named within the deadline."""
    challenge_id: str
    target_id: str
    elapsed: float


@dataclass(frozen=True)
class Failure:
    """Wrong target named within the deadline."""
    challenge_id: str
    expected_target: str
    chosen_target: str
    correct_distance: float
    chosen_distance: Optional[float]  # None if the chosen id is not a target


@dataclass(frozen=True)
class Expired:
    """Answer arrived after the deadline; correctness is not checked."""
    challenge_id: str
    elapsed: float


@dataclass(frozen=True)
class NotFound:
    """No outstanding challenge with this id (unknown, answered, or swept)."""
    challenge_id: str


Verdict = Union[Success, Failure, Expired, NotFound]


class Grader:
    """Decides the verdict for a consumed challenge record."""

    def __init__(self, deadline_seconds: float = ANSWER_DEADLINE_SECONDS):
        if deadline_seconds <= 0:
            raise ValueError(f"Deadline must be positive, got {deadline_seconds}")
        self.deadline_seconds = deadline_seconds

    def grade(self, submission: AnswerSubmission, record: ChallengeRecord, now: float) -> Verdict:
        """
        Grade a submission whose record has already been taken out of the store.

        Args:
            submission: The client's answer
            record: The consumed record for submission.challenge_id
            now: Current reading of the clock that stamped record.created_at

        Returns:
            Expired, Success or Failure
        """
        challenge = record.challenge
        elapsed = now - record.created_at

        if elapsed > self.deadline_seconds:
            return Expired(challenge_id=challenge.challenge_id, elapsed=elapsed)

        chosen_id = submission.closest_target_id
        if chosen_id == record.expected_answer:
            return Success(
                challenge_id=challenge.challenge_id,
                target_id=chosen_id,
                elapsed=elapsed,
            )

        player = challenge.player_position
        expected = challenge.find_target(record.expected_answer)
        chosen = challenge.find_target(chosen_id)

        return Failure(
            challenge_id=challenge.challenge_id,
            expected_target=record.expected_answer,
            chosen_target=chosen_id,
            correct_distance=distance(player, expected),
            chosen_distance=distance(player, chosen) if chosen is not None else None,
        )
