"""
Wall-clock timing for backend results.

The inversion backend wraps its elimination and normalization passes in
Timer sections; Timer.result() becomes Result.timing.
"""

import time
from contextlib import contextmanager
from typing import Iterator


class Timer:
    """
    Overall timer plus named, accumulating sections.

        timer = Timer()
        timer.start()
        with timer.section('elimination'):
            ...
        timer.stop()
        timer.result()  # {'total_seconds': ..., 'elimination': ...}
    """

    def __init__(self):
        self._sections: dict[str, float] = {}
        self._start_time: float | None = None
        self._total: float | None = None

    def start(self) -> None:
        self._start_time = time.perf_counter()

    def stop(self) -> None:
        if self._start_time is None:
            raise RuntimeError("Timer.stop() called before start()")
        self._total = time.perf_counter() - self._start_time

    @contextmanager
    def section(self, name: str) -> Iterator[None]:
        """Add the elapsed time of the block to section `name`."""
        begin = time.perf_counter()
        try:
            yield
        finally:
            self._sections[name] = (
                self._sections.get(name, 0.0) + time.perf_counter() - begin
            )

    def result(self) -> dict[str, float]:
        """
        Seconds spent overall ('total_seconds') and in each section.

        Raises:
            RuntimeError: If the timer has not been stopped
        """
        if self._total is None:
            raise RuntimeError("Timer.result() called before stop()")
        return {'total_seconds': self._total, **self._sections}
