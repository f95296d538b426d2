"""Rich-based scan progress display."""

from __future__ import annotations

from types import TracebackType
from typing import ClassVar

from rich.console import Console
from rich.progress import BarColumn, MofNCompleteColumn, Progress, SpinnerColumn, TaskID, TextColumn

from frontcheck.scan.progress import ScanProgress


class RichScanProgress(ScanProgress):
    """One transient progress bar per scan phase, drawn on stderr.

    Use as a context manager so the live display is started and stopped::

        with RichScanProgress() as progress:
            report = run_title_check(paths, config=config, progress=progress)
    """

    _PHASE_STYLES: ClassVar[dict[str, str]] = {
        "Check": "cyan",
        "Fix": "green",
        "Report": "blue",
    }

    def __init__(self, console: Console | None = None) -> None:
        self._progress = Progress(
            SpinnerColumn(finished_text="[green]✓[/green]"),
            TextColumn("{task.description}"),
            BarColumn(bar_width=30),
            MofNCompleteColumn(),
            console=console or Console(stderr=True),
            transient=True,
        )
        self._tasks: dict[str, TaskID] = {}
        self.failed: dict[str, str] = {}

    def __enter__(self) -> RichScanProgress:
        self._progress.start()
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        self._progress.stop()

    def _label(self, phase: str) -> str:
        style = self._PHASE_STYLES.get(phase, "white")
        return f"[{style}]{phase:>8}[/]"

    def phase_start(self, phase: str, total: int | None = None) -> None:
        self._tasks[phase] = self._progress.add_task(self._label(phase), total=total)

    def item_done(self, phase: str) -> None:
        if phase in self._tasks:
            self._progress.advance(self._tasks[phase])

    def completed(self, phase: str) -> int:
        """Number of documents processed so far in *phase* (0 if never started)."""
        if phase not in self._tasks:
            return 0
        return int(self._progress.tasks[self._tasks[phase]].completed)

    def phase_done(self, phase: str) -> None:
        if phase not in self._tasks:
            return
        task_id = self._tasks[phase]
        task = self._progress.tasks[task_id]
        total = task.total if task.total is not None else task.completed
        self._progress.update(task_id, total=total, completed=total)

    def phase_error(self, phase: str, error: BaseException) -> None:
        self.failed[phase] = type(error).__name__
        if phase in self._tasks:
            self._progress.update(
                self._tasks[phase],
                description=f"[red]{phase:>8} failed ({type(error).__name__})[/red]",
            )
