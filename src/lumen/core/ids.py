"""
Element id generation for compiled LUMEN output.
"""

import threading

DEFAULT_ID_PREFIX = "lm"


class IdGenerator:
    """
    Hands out ``lm1``, ``lm2``, ... for surfaces and text nodes.

    One generator is shared by everything compiled into the same page so
    ids never collide across source units. ``reset`` puts it back to a
    known state, which makes output reproducible.
    """

    def __init__(self, prefix: str = DEFAULT_ID_PREFIX, seed: int = 0):
        self.prefix = prefix
        self._count = seed
        self._lock = threading.Lock()

    @property
    def count(self) -> int:
        """Number of the last id handed out (0 before the first)."""
        return self._count

    def next_id(self) -> str:
        with self._lock:
            self._count += 1
            return f"{self.prefix}{self._count}"

    def reset(self, seed: int = 0) -> None:
        with self._lock:
            self._count = seed
