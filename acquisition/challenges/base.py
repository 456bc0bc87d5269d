"""Base challenge interface and the challenge data model."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional, Tuple


@dataclass(frozen=True)
class Point:
    """A named position in 3D space."""
    id: str
    x: float
    y: float
    z: float


@dataclass(frozen=True)
class Challenge:
    """A single target identification task as served to clients."""
    challenge_id: str
    player_position: Point
    targets: Tuple[Point, ...]
    timestamp: int  # seconds since epoch, coarse

    def __post_init__(self):
        if not self.targets:
            raise ValueError("Challenge needs at least one target")
        ids = [target.id for target in self.targets]
        if len(set(ids)) != len(ids):
            raise ValueError(f"Duplicate target ids in challenge {self.challenge_id}")

    def find_target(self, target_id: str) -> Optional[Point]:
        """Look up a target by id, None if the challenge has no such target."""
        for target in self.targets:
            if target.id == target_id:
                return target
        return None


@dataclass(frozen=True)
class ChallengeRecord:
    """Server-side bookkeeping for an outstanding challenge."""
    challenge: Challenge
    expected_answer: Optional[str]  # frozen when the record is built
    created_at: float  # monotonic clock, used for deadline arithmetic


@dataclass(frozen=True)
class AnswerSubmission:
    """A client's answer: which target it thinks is closest."""
    challenge_id: str
    closest_target_id: str


class BaseChallenge(ABC):
    """Base class for all challenges."""

    @property
    @abstractmethod
    def id(self) -> str:
        """Unique identifier for this challenge type."""
        pass

    @property
    @abstractmethod
    def title(self) -> str:
        """Human-readable title."""
        pass

    @property
    @abstractmethod
    def description(self) -> str:
        """Full briefing shown to players."""
        pass

    @abstractmethod
    def issue(self) -> Challenge:
        """Create a new challenge instance and start its clock."""
        pass

    @abstractmethod
    def evaluate(self, submission: AnswerSubmission):
        """
        Evaluate a submission.

        Args:
            submission: The client's answer

        Returns:
            A verdict (Success, Failure, Expired or NotFound)
        """
        pass
