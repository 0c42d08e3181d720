"""An integer guarded by a lock."""

import threading


class SafeInt:
    """An integer that can be read and incremented from several threads."""

    def __init__(self, value: int = 0) -> None:
        self._lock = threading.Lock()
        self._value = value

    def value(self) -> int:
        """Return the current value."""
        with self._lock:
            return self._value

    def increment(self, step: int) -> int:
        """Add ``step`` and return the new value."""
        with self._lock:
            self._value += step
            return self._value

    def __repr__(self) -> str:
        return f"SafeInt({self.value()})"