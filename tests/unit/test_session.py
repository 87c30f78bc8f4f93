"""Unit tests for tailcore.scanner.session.ScanSession."""
from __future__ import annotations

import threading

from tailcore.scanner.session import ScanSession


class TestScanSession:
    def test_initial_state(self) -> None:
        session: ScanSession[str] = ScanSession()
        assert session.latest is None
        assert session.generation == 0

    def test_commit_current_ticket(self) -> None:
        session: ScanSession[str] = ScanSession()
        ticket = session.begin()
        assert session.commit(ticket, "result")
        assert session.latest == "result"
        assert session.generation == ticket

    def test_stale_result_discarded(self) -> None:
        session: ScanSession[str] = ScanSession()
        old = session.begin()
        new = session.begin()
        assert not session.commit(old, "stale")
        assert session.latest is None
        assert session.commit(new, "fresh")
        assert session.latest == "fresh"

    def test_stale_result_after_newer_commit(self) -> None:
        session: ScanSession[str] = ScanSession()
        old = session.begin()
        new = session.begin()
        session.commit(new, "fresh")
        assert not session.commit(old, "stale")
        assert session.latest == "fresh"

    def test_is_current(self) -> None:
        session: ScanSession[str] = ScanSession()
        first = session.begin()
        assert session.is_current(first)
        session.begin()
        assert not session.is_current(first)

    def test_tickets_unique_across_threads(self) -> None:
        session: ScanSession[int] = ScanSession()
        tickets: list[int] = []
        lock = threading.Lock()

        def worker() -> None:
            for _ in range(100):
                ticket = session.begin()
                with lock:
                    tickets.append(ticket)

        threads = [threading.Thread(target=worker) for _ in range(4)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()
        assert len(set(tickets)) == 400
        assert session.is_current(max(tickets))
