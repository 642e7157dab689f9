"""Thread-safe registry assigning collision-free identifiers.

The registry counts how often each base id has been requested and reserves
every identifier it hands out. The first request for a base id returns it
unchanged; later requests append the delimiter and the request count. When a
numbered form has already been reserved (for example because a caller asked
for that literal string), the number keeps growing until a free form is
found, so numbering can skip values but never repeats.

``reset()`` clears the counter map and the reserved set one after the other.
It is not atomic with respect to concurrent ``ensure_unique()`` calls: a
counter increment or reservation racing with a reset may land on either side
of it. Serialize resets against generation when that matters.
"""

from __future__ import annotations

import logging
import threading
from typing import Dict, Set

logger = logging.getLogger(__name__)


class UniquenessRegistry:
    """Counter map plus reserved-id set shared by all callers of a generator."""

    def __init__(self, delimiter: str = "_"):
        self.delimiter = delimiter
        self._counts: Dict[str, int] = {}
        self._counts_lock = threading.Lock()
        self._issued: Set[str] = set()
        self._issued_lock = threading.Lock()

    def _next_count(self, base_id: str) -> int:
        with self._counts_lock:
            count = self._counts.get(base_id, 0) + 1
            self._counts[base_id] = count
            return count

    def _reserve(self, candidate: str) -> bool:
        with self._issued_lock:
            if candidate in self._issued:
                return False
            self._issued.add(candidate)
            return True

    def _numbered(self, base_id: str, count: int) -> str:
        return f"{base_id}{self.delimiter}{count}"

    def ensure_unique(self, base_id: str) -> str:
        """Return ``base_id`` or a numbered variant never returned before."""
        count = self._next_count(base_id)
        candidate = base_id if count == 1 else self._numbered(base_id, count)

        while not self._reserve(candidate):
            logger.debug("Identifier %r already reserved, trying next number", candidate)
            count += 1
            candidate = self._numbered(base_id, count)

        return candidate

    def contains(self, identifier: str) -> bool:
        """Return True if ``identifier`` has been issued since the last reset."""
        with self._issued_lock:
            return identifier in self._issued

    def __contains__(self, identifier: object) -> bool:
        return isinstance(identifier, str) and self.contains(identifier)

    def usage(self, base_id: str) -> int:
        """Return how many times ``base_id`` has been requested."""
        with self._counts_lock:
            return self._counts.get(base_id, 0)

    def __len__(self) -> int:
        with self._issued_lock:
            return len(self._issued)

    def reset(self) -> None:
        """Forget all counters and issued identifiers."""
        with self._counts_lock:
            self._counts.clear()
        with self._issued_lock:
            self._issued.clear()
