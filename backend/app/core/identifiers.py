"""
Identifier and timestamp sources for stored records.

Every record gets a UUID4 string id and a nanosecond ``created_at`` taken
once at creation.
"""

import threading
import time
import uuid


def new_id() -> str:
    """Return a new globally unique record identifier."""
    return str(uuid.uuid4())


class Clock:
    """
    Nanosecond wall clock whose readings never repeat or go backwards.

    If the system clock stalls or steps back, the previous reading plus one
    nanosecond is returned instead.
    """

    def __init__(self, source=time.time_ns):
        self._source = source
        self._last = 0
        self._lock = threading.Lock()

    def now_ns(self) -> int:
        with self._lock:
            current = self._source()
            if current <= self._last:
                current = self._last + 1
            self._last = current
            return current


# Process-wide default clock
clock = Clock()
