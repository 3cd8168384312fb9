"""Process-wide bounded scheduler for recursive directory walks.

One ``WalkScheduler`` serves every level of a walk. It caps the number of
concurrently active walkers across the whole tree at ``max_workers``, counting
the calling thread. Tasks are dispatched in order; a task that cannot get a
worker permit runs inline on the thread that dispatched it. A parent that
blocks waiting on its children therefore never holds a pool thread that a
child needs, and a fixed pool cannot deadlock on deep trees.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable, Sequence
from concurrent.futures import Future, ThreadPoolExecutor
from typing import TypeVar

logger = logging.getLogger(__name__)

DEFAULT_MAX_WORKERS = 4

TaskT = TypeVar("TaskT")


class WalkScheduler:
    """Bounded executor for walk tasks with caller-runs overflow.

    ``max_workers == 1`` never starts a thread: every task runs inline.
    """

    def __init__(self, max_workers: int = DEFAULT_MAX_WORKERS) -> None:
        if max_workers < 1:
            raise ValueError("max_workers must be >= 1")
        self.max_workers = max_workers
        self._thread_count = max_workers - 1
        self._permits = threading.BoundedSemaphore(self._thread_count) if self._thread_count else None
        self._executor: ThreadPoolExecutor | None = None
        if self._thread_count:
            self._executor = ThreadPoolExecutor(
                max_workers=self._thread_count,
                thread_name_prefix="sizetree-walk",
            )

    def __enter__(self) -> "WalkScheduler":
        return self

    def __exit__(self, *_exc_info: object) -> None:
        self.shutdown()

    def shutdown(self) -> None:
        """Wait for running tasks and release the worker threads."""
        if self._executor is not None:
            self._executor.shutdown(wait=True)
            self._executor = None

    def _try_acquire(self) -> bool:
        if self._permits is None or self._executor is None:
            return False
        return self._permits.acquire(blocking=False)

    def _run_with_permit(self, run_one: Callable[[TaskT], None], task: TaskT) -> None:
        try:
            run_one(task)
        finally:
            assert self._permits is not None
            self._permits.release()

    def run(self, tasks: Sequence[TaskT], run_one: Callable[[TaskT], None]) -> None:
        """Execute every task once and return when all of them finished.

        The first failure is re-raised only after all in-flight tasks have
        completed; their results are left for the caller to discard. After an
        inline failure no further tasks are dispatched.
        """
        futures: list[Future[None]] = []
        first_error: BaseException | None = None

        try:
            for task in tasks:
                if self._try_acquire():
                    assert self._executor is not None
                    try:
                        futures.append(self._executor.submit(self._run_with_permit, run_one, task))
                    except BaseException:
                        assert self._permits is not None
                        self._permits.release()
                        raise
                    logger.debug("walk task dispatched to worker: %s", task)
                    continue

                logger.debug("walk task running inline: %s", task)
                try:
                    run_one(task)
                except Exception as exc:
                    first_error = exc
                    break
        finally:
            # Submitted tasks are joined even when dispatch is interrupted.
            joined_errors = [future.exception() for future in futures]

        if first_error is None:
            first_error = next((exc for exc in joined_errors if exc is not None), None)

        if first_error is not None:
            raise first_error


__all__ = [
    "DEFAULT_MAX_WORKERS",
    "WalkScheduler",
]
