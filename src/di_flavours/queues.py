"""Thread-backed task queues.

``DispatchQueue`` is a small named wrapper around ``ThreadPoolExecutor``.
With one worker it is serial and runs tasks in submission order; with more
it is concurrent and gives no ordering guarantee.
"""

from __future__ import annotations

from collections.abc import Callable
from concurrent.futures import Future, ThreadPoolExecutor
from typing import Any

from loguru import logger

from di_flavours.exceptions import SchedulingError


class DispatchQueue:
    """A labelled task queue that runs submitted callables on worker threads.

    Parameters
    ----------
    label:
        Name of the queue; also used as the worker thread name prefix.
    max_workers:
        Number of worker threads. ``1`` gives a serial queue.
    """

    def __init__(self, label: str, max_workers: int = 1) -> None:
        if max_workers < 1:
            raise ValueError("max_workers must be at least 1")
        self.label = label
        self.max_workers = max_workers
        self._executor = ThreadPoolExecutor(max_workers=max_workers, thread_name_prefix=label)
        self._shut_down = False

    def __repr__(self) -> str:
        return f"DispatchQueue(label={self.label!r}, max_workers={self.max_workers})"

    def __enter__(self) -> DispatchQueue:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.shutdown(wait=True)

    @property
    def is_serial(self) -> bool:
        return self.max_workers == 1

    @property
    def is_shut_down(self) -> bool:
        return self._shut_down

    def submit(self, fn: Callable[..., Any], /, *args: Any, **kwargs: Any) -> Future:
        """Schedule ``fn(*args, **kwargs)`` and return its future.

        Raises:
            SchedulingError: If the queue has been shut down.
        """
        if self._shut_down:
            raise SchedulingError(f"queue {self.label!r} has been shut down")
        try:
            return self._executor.submit(fn, *args, **kwargs)
        except RuntimeError as exc:
            raise SchedulingError(f"queue {self.label!r} rejected task: {exc}") from exc

    def shutdown(self, wait: bool = True) -> None:
        """Stop accepting work. With *wait*, block until queued tasks finish."""
        if self._shut_down:
            return
        self._shut_down = True
        logger.debug("Shutting down queue {!r}", self.label)
        self._executor.shutdown(wait=wait)
