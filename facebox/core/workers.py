import asyncio
import logging
import threading
from concurrent.futures import Future, ThreadPoolExecutor
from typing import Any, Callable, TypeVar

from .exceptions import WorkerPoolSaturated

logger = logging.getLogger(__name__)

T = TypeVar("T")


class WorkerPool:
    """
    Bounded thread pool for CPU-bound request stages.

    Decode, inference, rendering and encoding run here so the event loop
    only ever waits on them. At most ``max_workers`` jobs run at once and at
    most ``max_queue`` more wait for a slot; anything beyond that is refused
    with WorkerPoolSaturated instead of piling up.

    A job counts against the limit until it actually finishes, even if the
    request that submitted it has gone away. Native inference calls cannot
    be interrupted, so an abandoned job runs to completion and its result is
    dropped.
    """

    def __init__(self, max_workers: int = 4, max_queue: int = 64):
        if max_workers < 1:
            raise ValueError("max_workers must be at least 1")
        if max_queue < 0:
            raise ValueError("max_queue must not be negative")

        self.max_workers = max_workers
        self.max_queue = max_queue
        self.capacity = max_workers + max_queue

        self._executor = ThreadPoolExecutor(
            max_workers=max_workers, thread_name_prefix="facebox-worker"
        )
        self._lock = threading.Lock()
        self._pending = 0

    @property
    def pending(self) -> int:
        """Jobs admitted and not yet finished (queued or running)"""
        with self._lock:
            return self._pending

    async def offload(self, fn: Callable[..., T], *args: Any) -> T:
        """Run ``fn(*args)`` on the pool and await its result."""
        with self._lock:
            if self._pending >= self.capacity:
                raise WorkerPoolSaturated(
                    f"Worker pool is full ({self.capacity} jobs in flight)"
                )
            self._pending += 1

        try:
            future = self._executor.submit(fn, *args)
        except Exception:
            self._release()
            raise

        future.add_done_callback(self._on_done)
        return await asyncio.wrap_future(future)

    def _on_done(self, future: Future) -> None:
        self._release()

    def _release(self) -> None:
        with self._lock:
            self._pending -= 1

    def shutdown(self, wait: bool = True) -> None:
        logger.info("Shutting down worker pool...")
        self._executor.shutdown(wait=wait, cancel_futures=True)
