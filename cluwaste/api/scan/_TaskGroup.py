"""Fork-join bookkeeping on top of an executor (private)."""

import threading
from collections.abc import Callable
from concurrent.futures import Executor, Future
from typing import Any


class _TaskGroup:
    """Track every task submitted to an executor, including tasks submitted by tasks.

    Tasks never wait on each other; they submit children and return. The
    single join happens in wait(), once the outstanding count reaches zero,
    so a pool of any size (one included) cannot deadlock on a deep tree.
    """

    def __init__(self, executor: Executor):
        self._executor = executor
        self._condition = threading.Condition()
        self._pending = 0
        self._errors: list[BaseException] = []

    def submit(self, fn: Callable[..., Any], *args: Any) -> None:
        with self._condition:
            self._pending += 1
        try:
            future = self._executor.submit(fn, *args)
        except BaseException:
            self._finish(None)
            raise
        future.add_done_callback(self._on_done)

    def _on_done(self, future: Future) -> None:
        error = None if future.cancelled() else future.exception()
        self._finish(error)

    def _finish(self, error: BaseException | None) -> None:
        with self._condition:
            if error is not None:
                self._errors.append(error)
            self._pending -= 1
            if self._pending == 0:
                self._condition.notify_all()

    def wait(self) -> None:
        """Block until all tasks are done, then re-raise the first task failure."""
        with self._condition:
            while self._pending:
                self._condition.wait()
        if self._errors:
            raise self._errors[0]
