"""
Target Acquisition Challenge

Goal: given the player's position and a batch of targets, name the closest
target within the answer deadline.

Each issued challenge is stored with its precomputed answer. An answer
consumes the stored record, so every challenge is graded at most once.
"""

import logging
import time
from typing import TYPE_CHECKING, Callable, Optional

from .base import AnswerSubmission, BaseChallenge, Challenge
from .generator import ChallengeGenerator
from .geometry import distance
from .grader import Expired, Failure, Grader, NotFound, Success, Verdict

if TYPE_CHECKING:
    from ..store import ChallengeStore

logger = logging.getLogger(__name__)


class TargetAcquisitionChallenge(BaseChallenge):
    """
    Nearest-target challenge: issue coordinates, grade the answer against the clock.
    """

    VERSION = "v1"

    def __init__(
        self,
        store: "ChallengeStore",
        generator: Optional[ChallengeGenerator] = None,
        grader: Optional[Grader] = None,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.store = store
        self.generator = generator or ChallengeGenerator(clock=clock)
        self.grader = grader or Grader()
        self._clock = clock

    @property
    def id(self) -> str:
        return f"target-acquisition-{self.VERSION}"

    @property
    def title(self) -> str:
        return "Tactical Target Acquisition"

    @property
    def description(self) -> str:
        low, high = self.generator.target_count
        deadline = seconds_label(self.grader.deadline_seconds)
        return f"""
{self.title.upper()} CHALLENGE SERVER [{self.id}]
==========================================

Mission: Identify the closest target to your position (0,0,0)

Endpoints:
  GET  /mission/coordinates  - Get target identification challenge
  POST /mission/coordinates  - Submit closest target ID (< {deadline}!)
  GET  /status              - Server status

Challenge Format:
  GET returns: {{
    "challenge_id": "TARG-123456",
    "player_position": {{"id": "PLAYER", "x": 0, "y": 0, "z": 0}},
    "targets": [
      {{"id": "T1", "x": 45.2, "y": -23.1, "z": 12.5}},
      {{"id": "T2", "x": -12.7, "y": 8.9, "z": -5.3}},
      ...
    ],
    "timestamp": 1234567890
  }}
  Each challenge carries {low}-{high} targets.

  POST expects: {{
    "challenge_id": "TARG-123456",
    "closest_target_id": "T1"
  }}
  A wrong answer reports correct_distance and chosen_distance; chosen_distance
  is null when the chosen id is not one of the targets.

Algorithm: Calculate 3D distance using sqrt((x1-x2)^2 + (y1-y2)^2 + (z1-z2)^2)
Time limit: {deadline} from challenge issue to response!
""".strip() + "\n"

    def issue(self) -> Challenge:
        """Generate a challenge, store its record and return it for the client."""
        challenge = self.generator.generate()
        record = self.generator.build_record(challenge)
        self.store.insert(challenge.challenge_id, record)

        logger.info("Challenge issued: %s", challenge.challenge_id)
        if logger.isEnabledFor(logging.DEBUG):
            for target in challenge.targets:
                marker = " * CLOSEST" if target.id == record.expected_answer else ""
                logger.debug(
                    "  %s: (%.2f, %.2f, %.2f) - Distance: %.2f%s",
                    target.id, target.x, target.y, target.z,
                    distance(challenge.player_position, target), marker,
                )

        return challenge

    def evaluate(self, submission: AnswerSubmission) -> Verdict:
        """
        Consume the record for the submission and grade it.

        Returns NotFound when the id is unknown, already answered, or swept.
        """
        record = self.store.consume_if_present(submission.challenge_id)
        if record is None:
            logger.info("NOT FOUND: %s (unknown or expired)", submission.challenge_id)
            return NotFound(challenge_id=submission.challenge_id)

        verdict = self.grader.grade(submission, record, self._clock())

        if isinstance(verdict, Expired):
            logger.info("TIMEOUT: %s took %.2f seconds", verdict.challenge_id, verdict.elapsed)
        elif isinstance(verdict, Success):
            logger.info(
                "SUCCESS: %s identified %s in %.3f seconds",
                verdict.challenge_id, verdict.target_id, verdict.elapsed,
            )
        elif isinstance(verdict, Failure):
            logger.info(
                "FAILED: %s chose %s (dist: %s) instead of %s (dist: %.2f)",
                verdict.challenge_id, verdict.chosen_target,
                "n/a" if verdict.chosen_distance is None else f"{verdict.chosen_distance:.2f}",
                verdict.expected_target, verdict.correct_distance,
            )

        return verdict


def seconds_label(value: float) -> str:
    return f"{value:g} second" + ("" if value == 1 else "s")
