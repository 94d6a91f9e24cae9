import logging
import sys
import time
from typing import Callable

from bench.core.config import settings
from bench.schema.bench_schema import BenchDump, BenchStats, Mark

logger = logging.getLogger(__name__)


class Bench:
    """Wall-clock timer with named marks.

    Misuse never raises: the offending call returns None and the reason is
    appended to the error list (see get_errors()) and logged at ERROR.
    """

    def __init__(self, clock: Callable[[], float] = time.time):
        self._clock = clock
        self._start: float | None = None
        self._stop: float | None = None
        self._marks: list[Mark] = []
        self._errors: list[str] = []

    def __enter__(self) -> "Bench":
        self.start()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.stop()

    @property
    def start_time(self) -> float | None:
        return self._start

    @property
    def stop_time(self) -> float | None:
        return self._stop

    @property
    def is_running(self) -> bool:
        return self._start is not None and self._stop is None

    def start(self) -> None:
        if self._start is not None:
            self._log_error(f"Please call {self._name}.reset() before calling {self._name}.start() again.")
            return
        self._start = self._clock()
        logger.debug("Started at %f", self._start)

    def stop(self) -> float | None:
        """Stop the timer and return the total elapsed seconds."""
        if self._stop is not None:
            self._log_error(f"Please call {self._name}.reset() before calling {self._name}.stop() again.")
            return None
        if self._start is None:
            self._log_error(f"Please call {self._name}.start() before calling {self._name}.stop().")
            return None
        self._stop = self._clock()
        elapsed = self.get_elapsed()
        logger.debug("Stopped after %.6fs", elapsed)
        return elapsed

    def reset(self) -> None:
        # errors survive a reset
        self._marks = []
        self._start = None
        self._stop = None
        logger.debug("Reset")

    def mark(self, mark_id: str) -> float | None:
        """Record a checkpoint; returns seconds since the previous mark (or since start)."""
        if self._start is None:
            self._log_error(f'Please call {self._name}.start() before calling {self._name}.mark("{mark_id}").')
            return None
        now = self._clock()
        since_start = now - self._start
        since_last_mark = now - self._marks[-1].timestamp if self._marks else since_start
        self._marks.append(Mark(id=mark_id, timestamp=now, since_start=since_start, since_last_mark=since_last_mark))
        return since_last_mark

    def get_marks(self) -> tuple[Mark, ...]:
        return tuple(self._marks)

    def get_mark_by_id(self, mark_id: str) -> Mark | None:
        for mark in self._marks:
            if mark.id == mark_id:
                return mark
        return None

    def get_mark_average(self) -> float | None:
        if not self._marks:
            return None
        return sum(mark.since_last_mark for mark in self._marks) / len(self._marks)

    def get_longest_mark(self) -> Mark | None:
        longest = None
        for mark in self._marks:
            if longest is None or mark.since_last_mark > longest.since_last_mark:
                longest = mark
        return longest

    def get_shortest_mark(self) -> Mark | None:
        shortest = None
        for mark in self._marks:
            if shortest is None or mark.since_last_mark < shortest.since_last_mark:
                shortest = mark
        return shortest

    def get_last_mark(self) -> Mark | None:
        return self._marks[-1] if self._marks else None

    def get_elapsed_since_mark(self, mark_id: str) -> float | None:
        mark = self.get_mark_by_id(mark_id)
        if mark is None:
            return None
        return self._clock() - mark.timestamp

    def get_elapsed_since_last_mark(self) -> float | None:
        mark = self.get_last_mark()
        if mark is None:
            return None
        return self._clock() - mark.timestamp

    def get_elapsed(self, from_id: str | None = None, to_id: str | None = None) -> float | None:
        """Seconds elapsed.

        Without ids: from start() to stop(), or to now while still running.
        With ids: the absolute time between the two marks, in either order.
        """
        now = self._clock()
        if self._start is None:
            self._log_error(f"Please call {self._name}.start() before calling {self._name}.get_elapsed().")
            return None
        if from_id is None and to_id is None:
            end = self._stop if self._stop is not None else now
            return end - self._start

        mark_from = self.get_mark_by_id(from_id)
        mark_to = self.get_mark_by_id(to_id)
        if mark_from is None:
            self._log_error(f'{self._name}.get_elapsed(): A mark with the id of "{from_id}" does not exist.')
        if mark_to is None:
            self._log_error(f'{self._name}.get_elapsed(): A mark with the id of "{to_id}" does not exist.')
        if mark_from is None or mark_to is None:
            return None
        return abs(mark_to.timestamp - mark_from.timestamp)

    def get_stats(self) -> BenchStats | None:
        if self._start is None:
            self._log_error(f"Please call {self._name}.start() before calling {self._name}.get_stats().")
            return None
        stats = {"start": self._start, "stop": self._stop, "elapsed": self.get_elapsed()}
        if self._marks:
            stats["mark_average"] = self.get_mark_average()
            stats["mark_shortest"] = self.get_shortest_mark()
            stats["mark_longest"] = self.get_longest_mark()
        return BenchStats(**stats)

    def snapshot(self) -> BenchDump:
        return BenchDump(statistics=self.get_stats(), marks=list(self._marks), errors=list(self._errors))

    def dump(self, kill: bool | None = None) -> None:
        """Print statistics, marks and errors as JSON, then exit unless kill is False."""
        snapshot = self.snapshot()
        print(snapshot.model_dump_json(indent=settings.dump_indent, by_alias=True, exclude_unset=True))
        if kill is None:
            kill = settings.dump_kill
        if kill:
            sys.exit(0)

    def has_errors(self) -> bool:
        return bool(self._errors)

    def get_errors(self) -> tuple[str, ...]:
        return tuple(self._errors)

    @property
    def _name(self) -> str:
        return type(self).__name__

    def _log_error(self, error: str) -> None:
        self._errors.append(error)
        logger.error("%s: %s", self._name, error)


bench = Bench()
