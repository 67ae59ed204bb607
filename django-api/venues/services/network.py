"""Simulated network round trip shared by every service call.

There is no real backend. Each service coroutine awaits ``round_trip`` first,
which sleeps for the configured latency and, when a failure rate is set,
fails with ``TransientFailureError``.
"""

import asyncio
import logging
import random
from collections.abc import Callable

from venues.domain.errors import TransientFailureError

logger = logging.getLogger(__name__)


class SimulatedNetwork:
    def __init__(
        self,
        latency: float = 0.0,
        failure_rate: float = 0.0,
        rng: Callable[[], float] = random.random,
    ) -> None:
        if latency < 0:
            raise ValueError("latency cannot be negative")
        if not 0.0 <= failure_rate <= 1.0:
            raise ValueError("failure_rate must be between 0 and 1")
        self.latency = latency
        self.failure_rate = failure_rate
        self._rng = rng

    async def round_trip(self, operation: str) -> None:
        logger.debug("Simulated call %s (%.3fs)", operation, self.latency)
        await asyncio.sleep(self.latency)
        if self.failure_rate and self._rng() < self.failure_rate:
            logger.warning("Simulated transient failure in %s", operation)
            raise TransientFailureError(operation)
