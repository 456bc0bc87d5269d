"""Challenge record storage."""

from .registry import ChallengeStore
from .sweeper import ExpirySweeper

__all__ = ["ChallengeStore", "ExpirySweeper"]
