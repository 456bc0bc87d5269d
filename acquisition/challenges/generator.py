"""Random challenge generation."""

import random
import threading
import time
from typing import Callable, Optional, Tuple

from .base import Challenge, ChallengeRecord, Point
from .geometry import nearest
from ..config import (
    TARGET_COUNT_MIN,
    TARGET_COUNT_MAX,
    TARGET_EXTENT_X,
    TARGET_EXTENT_Y,
    TARGET_EXTENT_Z,
)

# Player always stands at the origin
PLAYER_POSITION = Point(id="PLAYER", x=0.0, y=0.0, z=0.0)

CHALLENGE_ID_PREFIX = "TARG"
CHALLENGE_ID_SPACE = 999999


class ChallengeGenerator:
    """
    Produces randomized target challenges.

    Identifiers are drawn from a small non-cryptographic space. Collisions
    are possible but rare; the store overwrites on collision.
    """

    def __init__(
        self,
        target_count: Tuple[int, int] = (TARGET_COUNT_MIN, TARGET_COUNT_MAX),
        extents: Tuple[float, float, float] = (TARGET_EXTENT_X, TARGET_EXTENT_Y, TARGET_EXTENT_Z),
        rng: Optional[random.Random] = None,
        clock: Callable[[], float] = time.monotonic,
    ):
        low, high = target_count
        if low < 1 or low > high:
            raise ValueError(f"Invalid target count range: {low}-{high}")
        if any(extent < 0 for extent in extents):
            raise ValueError(f"Axis extents must be non-negative, got {extents}")

        self.target_count = (low, high)
        self.extents = tuple(extents)
        self._rng = rng or random.Random()
        self._rng_lock = threading.Lock()
        self._clock = clock

    def generate(self) -> Challenge:
        """Draw a fresh challenge with a random batch of targets."""
        ex, ey, ez = self.extents
        low, high = self.target_count

        with self._rng_lock:
            challenge_id = f"{CHALLENGE_ID_PREFIX}-{self._rng.randrange(CHALLENGE_ID_SPACE)}"
            count = self._rng.randint(low, high)
            targets = tuple(
                Point(
                    id=f"T{i + 1}",
                    x=self._rng.uniform(-ex, ex),
                    y=self._rng.uniform(-ey, ey),
                    z=self._rng.uniform(-ez, ez),
                )
                for i in range(count)
            )

        return Challenge(
            challenge_id=challenge_id,
            player_position=PLAYER_POSITION,
            targets=targets,
            timestamp=int(time.time()),
        )

    def build_record(self, challenge: Challenge) -> ChallengeRecord:
        """Freeze the expected answer and start the challenge clock."""
        expected = nearest(challenge.player_position, challenge.targets)
        return ChallengeRecord(
            challenge=challenge,
            expected_answer=expected,
            created_at=self._clock(),
        )
