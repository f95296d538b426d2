"""Tests for RichScanProgress and NullScanProgress."""

from __future__ import annotations

import io

from rich.console import Console

from frontcheck.cli.progress.rich import RichScanProgress
from frontcheck.scan.progress import NullScanProgress, ScanProgress


def _quiet_console() -> Console:
    return Console(file=io.StringIO(), force_terminal=False)


class TestNullScanProgress:
    def test_implements_protocol(self) -> None:
        assert issubclass(NullScanProgress, ScanProgress)

    def test_events_are_ignored(self) -> None:
        progress = NullScanProgress()
        progress.phase_start("Check", total=2)
        progress.item_done("Check")
        progress.phase_error("Check", RuntimeError("boom"))
        progress.phase_done("Check")


class TestRichScanProgress:
    def test_implements_protocol(self) -> None:
        assert issubclass(RichScanProgress, ScanProgress)

    def test_context_manager_returns_self(self) -> None:
        progress = RichScanProgress(console=_quiet_console())
        with progress as entered:
            assert entered is progress

    def test_counts_processed_documents(self) -> None:
        with RichScanProgress(console=_quiet_console()) as progress:
            progress.phase_start("Check", total=3)
            progress.item_done("Check")
            progress.item_done("Check")

            assert progress.completed("Check") == 2

            progress.phase_done("Check")

            assert progress.completed("Check") == 3

    def test_phase_without_total_finishes_at_processed_count(self) -> None:
        with RichScanProgress(console=_quiet_console()) as progress:
            progress.phase_start("Report", total=None)
            progress.item_done("Report")
            progress.phase_done("Report")

            assert progress.completed("Report") == 1

    def test_unknown_phase_is_ignored(self) -> None:
        with RichScanProgress(console=_quiet_console()) as progress:
            progress.item_done("Fix")
            progress.phase_done("Fix")

            assert progress.completed("Fix") == 0

    def test_phase_error_records_exception_type(self) -> None:
        with RichScanProgress(console=_quiet_console()) as progress:
            progress.phase_start("Fix", total=1)
            progress.phase_error("Fix", OSError("disk full"))

        assert progress.failed == {"Fix": "OSError"}
