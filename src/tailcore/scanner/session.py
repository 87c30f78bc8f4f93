"""Supersession of in-flight scans.

When a new change event arrives while a scan is still running, the
running scan is not interrupted.  Instead every scan takes a ticket
before it starts and offers its result back with that ticket; only the
result of the newest ticket is accepted.  A stale result is dropped
whole, so it is never mixed into a newer candidate set.

Usage
-----
::

    session = ScanSession()
    ticket = session.begin()
    result = scanner.scan(roots)
    if session.commit(ticket, result):
        generator.emit(session.latest)
"""
from __future__ import annotations

import logging
import threading
from typing import Generic, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")


class ScanSession(Generic[T]):
    """Keeps the result of the most recently started scan."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._generation = 0
        self._latest: T | None = None
        self._latest_generation = 0

    def begin(self) -> int:
        """Start a scan and return its ticket; older tickets become stale."""
        with self._lock:
            self._generation += 1
            return self._generation

    def is_current(self, ticket: int) -> bool:
        """Return True if no scan was started after ``ticket``."""
        with self._lock:
            return ticket == self._generation

    def commit(self, ticket: int, result: T) -> bool:
        """Store ``result`` if ``ticket`` is still the newest one.

        Returns
        -------
        bool
            ``False`` when the result was stale and discarded.
        """
        with self._lock:
            if ticket != self._generation:
                logger.debug(
                    "Discarding result of scan %d; scan %d superseded it.",
                    ticket,
                    self._generation,
                )
                return False
            self._latest = result
            self._latest_generation = ticket
            return True

    @property
    def latest(self) -> T | None:
        """The last accepted result, or ``None`` before the first commit."""
        with self._lock:
            return self._latest

    @property
    def generation(self) -> int:
        """Ticket of the last accepted result (0 when none)."""
        with self._lock:
            return self._latest_generation
