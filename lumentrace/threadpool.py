"""A fixed-size pool of worker threads fed through a bounded queue."""

from __future__ import annotations

import queue
import sys
import threading
import traceback
from collections.abc import Callable

_STOP = object()


class PoolCreationError(ValueError):
    """Raised when a pool cannot be created, e.g. with zero workers."""


class _Worker:
    def __init__(self, worker_id: int, jobs: queue.Queue) -> None:
        self.id = worker_id
        self.thread = threading.Thread(target=self._run, args=(jobs,), daemon=True)
        self.thread.start()

    def _run(self, jobs: queue.Queue) -> None:
        while True:
            job = jobs.get()
            if job is _STOP:
                print(f"Worker {self.id} disconnected; shutting down.", file=sys.stderr)
                return
            try:
                job()
            except Exception:
                traceback.print_exc()


class ThreadPool:
    """Runs submitted jobs on ``size`` worker threads."""

    def __init__(self, size: int) -> None:
        if size < 1:
            raise PoolCreationError("Pool size must be at least one")
        # A bounded queue keeps few jobs waiting if the pool is shut down.
        self._jobs: queue.Queue = queue.Queue(maxsize=size)
        self._workers = [_Worker(worker_id, self._jobs) for worker_id in range(size)]
        self._shutting_down = False

    def __enter__(self) -> ThreadPool:
        return self

    def __exit__(self, *exc_info) -> None:
        self.shutdown()

    def execute(self, fn: Callable[[], object]) -> None:
        """Queue ``fn`` to run on a worker; ignored once shut down."""
        if not self._shutting_down:
            self._jobs.put(fn)

    def shutdown(self) -> None:
        """Let queued jobs finish, then stop and join every worker."""
        if self._shutting_down:
            return
        print("Shutting down thread pool. Please wait.", file=sys.stderr)
        self._shutting_down = True
        for _ in self._workers:
            self._jobs.put(_STOP)
        for worker in self._workers:
            print(f"Waiting for worker {worker.id} to shutdown.")
            worker.thread.join()