"""Parameter injection.

``DataService`` keeps no dependencies. The queue that should run the work is
passed to ``perform_task`` together with the data, used for that one call,
and forgotten.
"""

from __future__ import annotations

import hashlib

from loguru import logger

from di_flavours.exceptions import SchedulingError
from di_flavours.protocols import TaskQueue


class DataService:
    """Performs work with data on whichever queue the caller supplies."""

    def perform_task(self, data: bytes, queue: TaskQueue) -> None:
        """Submit processing of *data* to *queue* and return immediately.

        Fire-and-forget: the handle returned by the queue is discarded and
        nothing waits for the work to finish.

        Raises:
            SchedulingError: If *queue* has been shut down.
        """
        try:
            queue.submit(self.process, data)
        except SchedulingError:
            raise
        except RuntimeError as exc:
            logger.warning("Queue {!r} rejected task: {}", queue, exc)
            raise SchedulingError(f"cannot schedule task on {queue!r}: {exc}") from exc
        logger.debug("Submitted {} bytes to {!r}", len(data), queue)

    @staticmethod
    def process(data: bytes) -> None:
        """Perform some task with *data*. Runs on the supplied queue."""
        digest = hashlib.sha256(data).hexdigest()
        logger.debug("Processed {} bytes (sha256={})", len(data), digest[:12])
