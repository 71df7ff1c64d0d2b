from __future__ import annotations

import threading


class LedgerClock:
    """Logical block height supplied by the host.

    Heights never go backwards. Registries do not read this directly; callers pass
    `current_height()` into each operation so every call is replayable.
    """

    def __init__(self, start_height: int = 0) -> None:
        if int(start_height) < 0:
            raise ValueError("start_height must be >= 0")
        self._lock = threading.RLock()
        self._start_height = int(start_height)
        self._height = int(start_height)

    def current_height(self) -> int:
        with self._lock:
            return self._height

    def advance(self, blocks: int = 1) -> int:
        if int(blocks) < 0:
            raise ValueError("blocks must be >= 0")
        with self._lock:
            self._height += int(blocks)
            return self._height

    def set_height(self, height: int) -> int:
        with self._lock:
            if int(height) < self._height:
                raise ValueError(f"height cannot decrease ({int(height)} < {self._height})")
            self._height = int(height)
            return self._height

    def reset(self) -> None:
        with self._lock:
            self._height = self._start_height
