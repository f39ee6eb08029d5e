from threading import Lock
from collections import Counter
from contextlib import contextmanager
from loguru import logger


class PendingTransactions:

    """
    STANs of the requests currently sent to the host and not answered yet. Safe to share between threads
    """

    def __init__(self):
        self._lock = Lock()
        self._pending: Counter[int] = Counter()

    def __contains__(self, stan: int) -> bool:
        with self._lock:
            return self._pending[stan] > 0

    def __len__(self) -> int:
        with self._lock:
            return len(+self._pending)

    def snapshot(self) -> frozenset[int]:
        with self._lock:
            return frozenset(+self._pending)

    def add(self, stan: int):
        with self._lock:
            if self._pending[stan]:
                logger.warning(f"STAN {stan:06d} is already pending")

            self._pending[stan] += 1

    def discard(self, stan: int):
        with self._lock:
            if self._pending[stan] <= 1:
                self._pending.pop(stan, None)
                return

            self._pending[stan] -= 1

    @contextmanager
    def track(self, stan: int | None):
        if stan is None:
            yield
            return

        self.add(stan)

        try:
            yield

        finally:
            self.discard(stan)
