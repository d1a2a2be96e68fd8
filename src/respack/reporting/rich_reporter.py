from __future__ import annotations

import os
from typing import Any, Dict, List

from rich.console import Console
from rich.markup import escape
from rich.progress import (
    BarColumn,
    Progress,
    SpinnerColumn,
    TextColumn,
    TimeElapsedColumn,
)

from .base import Reporter, TaskRecord, TaskStatus, get_verbosity

_STATUS_ICON = {
    TaskStatus.SUCCESS: "✔",
    TaskStatus.FAILED: "✖",
    TaskStatus.SKIPPED: "→",
}


def _completion_line(rec: TaskRecord) -> str:
    icon = _STATUS_ICON.get(rec.status, "")
    total_part = f" {rec.completed}/{rec.total}" if rec.total is not None else ""
    stats = [f"{k}={rec.meta[k]}" for k in ("entries", "bytes") if k in rec.meta]
    stats_part = f" [{' '.join(stats)}]" if stats else ""
    return f"{icon} {rec.name}{total_part} ({rec.duration:.2f}s){stats_part}"


class RichReporter(Reporter):
    supports_progress = True

    def __init__(self, console: Console | None = None):
        super().__init__()
        self.console = console or Console(
            stderr=True, highlight=False, soft_wrap=False
        )
        self._transient = os.getenv(
            "RESPACK_PROGRESS_TRANSIENT", "0"
        ).lower() in ("1", "true", "yes")
        self.progress: Progress | None = None
        self._task_ids: Dict[str, Any] = {}
        self._transient_completions: List[str] = []

    def _ensure_progress(self) -> Progress:
        if self.progress is None:
            self.progress = Progress(
                SpinnerColumn(spinner_name="dots"),
                TextColumn("{task.description}", justify="left"),
                BarColumn(bar_width=None),
                TextColumn("{task.completed}/{task.total}"),
                TimeElapsedColumn(),
                transient=self._transient,
                console=self.console,
                expand=True,
            )
            self.progress.start()
        return self.progress

    # Tasks --------------------------------------------------------------------
    def _on_start(self, rec: TaskRecord) -> None:
        # Tasks without a known total render as headers, not progress bars.
        if rec.total is None:
            self.console.rule(rec.name)
            return
        progress = self._ensure_progress()
        self._task_ids[rec.task_id] = progress.add_task(
            rec.name, total=rec.total
        )

    def _on_advance(self, rec: TaskRecord, meta: Dict[str, Any]) -> None:
        rid = self._task_ids.get(rec.task_id)
        if rid is not None and self.progress:
            self.progress.update(rid, completed=rec.completed)

    def _on_end(self, rec: TaskRecord) -> None:
        rid = self._task_ids.pop(rec.task_id, None)
        if rid is not None and self.progress:
            self.progress.update(rid, completed=rec.total)
        line = _completion_line(rec)
        if self._transient:
            self._transient_completions.append(line)
        else:
            self.console.print(line, markup=False)
        if not self._task_ids:
            self.flush()

    # Messaging / sections ------------------------------------------------------
    def status(self, message: str, **fields: Any) -> None:
        self.console.print(f"[green]INFO[/]: {escape(message)}")

    def verbose(self, message: str, *, level: int = 1, **fields: Any) -> None:
        if get_verbosity() < level:
            return
        self.console.print(f"[cyan]VERB{level}[/]: {escape(message)}")

    def error(self, message: str, **fields: Any) -> None:
        self.console.print(f"[bold red]ERROR[/]: {escape(message)}")

    def warning(self, message: str, **fields: Any) -> None:
        self.console.print(f"[yellow]WARN[/]: {escape(message)}")

    def section(self, title: str) -> None:
        self.console.rule(title)

    def flush(self) -> None:
        if self.progress is None:
            return
        try:
            self.progress.stop()
        finally:
            self.progress = None
            if self._transient_completions:
                self.console.print(
                    "\n".join(self._transient_completions), markup=False
                )
                self._transient_completions.clear()
