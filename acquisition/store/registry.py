"""In-memory registry of outstanding challenge records."""

import logging
import threading
import time
from typing import Callable, Dict, Optional

from ..challenges.base import ChallengeRecord

logger = logging.getLogger(__name__)


class ChallengeStore:
    """
    Thread-safe mapping of challenge id -> ChallengeRecord.

    Every operation runs under a single lock, so consuming a record and
    sweeping it can never both see it: a record is handed out at most once.
    """

    def __init__(self, clock: Callable[[], float] = time.monotonic):
        self._records: Dict[str, ChallengeRecord] = {}
        self._lock = threading.Lock()
        self._clock = clock

    def insert(self, challenge_id: str, record: ChallengeRecord) -> None:
        """Store a record, replacing any existing one with the same id."""
        with self._lock:
            replaced = challenge_id in self._records
            self._records[challenge_id] = record
        if replaced:
            logger.debug("Challenge id %s reissued, previous record replaced", challenge_id)

    def consume_if_present(self, challenge_id: str) -> Optional[ChallengeRecord]:
        """Remove and return the record for challenge_id, or None if absent."""
        with self._lock:
            return self._records.pop(challenge_id, None)

    def sweep_expired(self, max_age: float, now: Optional[float] = None) -> int:
        """
        Drop every record created more than max_age seconds ago.

        Returns the number of records removed.
        """
        if now is None:
            now = self._clock()
        cutoff = now - max_age

        with self._lock:
            stale = [cid for cid, record in self._records.items() if record.created_at < cutoff]
            for cid in stale:
                del self._records[cid]

        return len(stale)

    def size(self) -> int:
        """Number of outstanding records. Advisory only."""
        with self._lock:
            return len(self._records)

    def __len__(self) -> int:
        return self.size()
