"""Background removal of challenges nobody answered."""

import asyncio
import logging
from typing import Optional

from .registry import ChallengeStore
from ..config import SWEEP_INTERVAL_SECONDS, SWEEP_MAX_AGE_SECONDS

logger = logging.getLogger(__name__)


class ExpirySweeper:
    """Periodically sweeps stale records out of a ChallengeStore.

    Runs as an asyncio task between start() and stop(). Submissions racing
    a sweep just see the record as missing.
    """

    def __init__(
        self,
        store: ChallengeStore,
        interval: float = SWEEP_INTERVAL_SECONDS,
        max_age: float = SWEEP_MAX_AGE_SECONDS,
    ) -> None:
        if interval <= 0:
            raise ValueError(f"Sweep interval must be positive, got {interval}")
        if max_age < 0:
            raise ValueError(f"Sweep max age must be non-negative, got {max_age}")
        self.store = store
        self.interval = interval
        self.max_age = max_age
        self._task: Optional[asyncio.Task] = None
        self._stopping = asyncio.Event()

    @property
    def running(self) -> bool:
        return self._task is not None and not self._task.done()

    async def start(self) -> None:
        """Start the sweep loop. No-op if already running."""
        if self.running:
            return
        self._stopping.clear()
        self._task = asyncio.create_task(self._run())
        logger.info("Expiry sweeper started (every %.1fs, max age %.1fs)", self.interval, self.max_age)

    async def stop(self) -> None:
        """Signal the loop to finish and wait for it."""
        if self._task is None:
            return
        self._stopping.set()
        await self._task
        self._task = None
        logger.info("Expiry sweeper stopped")

    def sweep_once(self) -> int:
        """Run a single sweep pass and return how many records were removed."""
        removed = self.store.sweep_expired(self.max_age)
        if removed:
            logger.debug("Swept %d expired challenge(s), %d active", removed, self.store.size())
        return removed

    async def _run(self) -> None:
        while not self._stopping.is_set():
            try:
                await asyncio.wait_for(self._stopping.wait(), timeout=self.interval)
            except asyncio.TimeoutError:
                try:
                    self.sweep_once()
                except Exception:
                    logger.exception("Expiry sweep failed, retrying next interval")
