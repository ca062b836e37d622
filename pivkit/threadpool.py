"""A fixed-size pool of worker threads fed from a task queue."""

from __future__ import annotations

import logging
import threading
from collections import deque
from collections.abc import Callable

_log = logging.getLogger(__name__)


class ThreadPool:
    """Runs queued callables on a fixed number of threads.

    On shutdown every queued task is run before the workers exit. The first
    exception raised by a task is re-raised from :meth:`shutdown`.
    """

    def __init__(self, threads: int) -> None:
        self._tasks: deque[Callable[[], object]] = deque()
        self._condition = threading.Condition()
        self._stop = False
        self._errors: list[BaseException] = []
        _log.debug("starting pool")
        self._workers = [
            threading.Thread(target=self._work, daemon=True) for _ in range(threads)
        ]
        for worker in self._workers:
            worker.start()

    def _work(self) -> None:
        while True:
            with self._condition:
                self._condition.wait_for(lambda: self._stop or bool(self._tasks))
                if not self._tasks and self._stop:
                    _log.debug("pool thread finishing")
                    return
                task = self._tasks.popleft()
            try:
                task()
            except Exception as exc:  # noqa: BLE001
                with self._condition:
                    self._errors.append(exc)

    def enqueue(self, task: Callable[[], object]) -> None:
        """Queue a callable taking no arguments."""
        if not callable(task):
            raise TypeError("task must be callable")
        with self._condition:
            if self._stop:
                raise RuntimeError("enqueue on stopped ThreadPool")
            self._tasks.append(task)
            self._condition.notify()

    def is_idle(self) -> bool:
        """True if no tasks are waiting in the queue."""
        with self._condition:
            return not self._tasks

    def shutdown(self) -> None:
        """Finish the queued tasks, stop the workers and raise any task error."""
        with self._condition:
            self._stop = True
            self._condition.notify_all()
        for worker in self._workers:
            worker.join()
        with self._condition:
            errors, self._errors = self._errors, []
        if errors:
            raise errors[0]

    def __enter__(self) -> ThreadPool:
        return self

    def __exit__(self, *args) -> None:
        self.shutdown()