"""ID generators for CARETRACK."""

import threading

from ulid import monotonic

from caretrack.interfaces.id_generator import IdGenerator

# pylint: disable=too-few-public-methods


class ULIDGenerator(IdGenerator):
    """Thread-safe monotonic ULID generator.

    ULIDs are 26-character, lexicographically sortable identifiers made of a
    timestamp and a random component. Monotonic generation keeps IDs created
    within the same millisecond in creation order, which is the order patients
    are listed in.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()

    def new_id(self) -> str:
        """Generate a new ULID (serialized across threads)."""
        with self._lock:
            return str(monotonic.new())


class SequentialIdGenerator(IdGenerator):
    """Produces zero-padded sequential IDs (``00...01``, ``00...02``, ...).

    Note:
        Not suitable for production use; primarily for tests and demos.
    """

    def __init__(self, length: int = 26) -> None:
        self._counter = 0
        self._length = length
        self._lock = threading.Lock()

    def new_id(self) -> str:
        """Generate the next ID in sequence."""
        with self._lock:
            self._counter += 1
            return f"{self._counter:0{self._length}d}"
