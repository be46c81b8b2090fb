from __future__ import annotations

import logging
import threading
from typing import Callable, Generic, Protocol, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")


class _Timer(Protocol):
    def start(self) -> None: ...

    def cancel(self) -> None: ...


class DebouncedSearch(Generic[T]):
    """Run ``fetch`` once typing pauses; deliver only the newest result.

    Every ``submit`` bumps a sequence number. A fetch whose sequence is no
    longer the latest when it finishes is dropped, so a slow response to an
    old term never overwrites a newer one.

    ``on_result`` runs under the internal lock, so a ``submit`` from another
    thread waits until the delivery in progress has finished.
    """

    def __init__(
        self,
        fetch: Callable[[str], T],
        on_result: Callable[[str, T], None],
        wait_ms: int = 500,
        timer_factory: Callable[[float, Callable[[], None]], _Timer] = threading.Timer,
    ) -> None:
        self.fetch = fetch
        self.on_result = on_result
        self.wait_ms = wait_ms
        self.timer_factory = timer_factory
        self._lock = threading.RLock()
        self._sequence = 0
        self._timer: _Timer | None = None

    @property
    def sequence(self) -> int:
        with self._lock:
            return self._sequence

    def submit(self, term: str) -> int:
        with self._lock:
            self._sequence += 1
            sequence = self._sequence
            if self._timer is not None:
                self._timer.cancel()
            timer = self.timer_factory(self.wait_ms / 1000, lambda: self._run(term, sequence))
            if isinstance(timer, threading.Thread):
                timer.daemon = True
            self._timer = timer
        timer.start()
        return sequence

    def run_now(self, term: str) -> int:
        with self._lock:
            self._sequence += 1
            sequence = self._sequence
            if self._timer is not None:
                self._timer.cancel()
                self._timer = None
        self._run(term, sequence)
        return sequence

    def cancel(self) -> None:
        with self._lock:
            self._sequence += 1
            if self._timer is not None:
                self._timer.cancel()
                self._timer = None

    def _run(self, term: str, sequence: int) -> None:
        if not self._is_current(sequence):
            return
        try:
            result = self.fetch(term)
        except Exception:
            logger.exception("search_fetch_failed", extra={"term_length": len(term), "sequence": sequence})
            return
        # Held through delivery so a concurrent submit cannot slip in after the check.
        with self._lock:
            if sequence != self._sequence:
                logger.debug("search_result_stale", extra={"sequence": sequence})
                return
            self.on_result(term, result)

    def _is_current(self, sequence: int) -> bool:
        with self._lock:
            return sequence == self._sequence
