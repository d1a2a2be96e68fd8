from __future__ import annotations

import json
import sys
from typing import Any, Dict
from .base import Reporter, TaskRecord, get_verbosity

# Status messages of the form "<Name> summary: k=v k=v" get an extra
# structured event so tooling does not need to parse the text.
_SUMMARY_PREFIXES: Dict[str, str] = {
    "build summary": "build",
    "manifest summary": "manifest",
}


class JsonLinesReporter(Reporter):
    """Machine-readable JSON lines reporter."""

    def __init__(self, stream=None):
        super().__init__()
        self.stream = stream or sys.stdout

    def _emit(self, obj: dict) -> None:
        self.stream.write(json.dumps(obj, sort_keys=True) + "\n")

    def _on_start(self, rec: TaskRecord) -> None:
        self._emit(
            {
                "event": "task_start",
                "id": rec.task_id,
                "name": rec.name,
                "total": rec.total,
                **rec.meta,
            }
        )

    def _on_advance(self, rec: TaskRecord, meta: Dict[str, Any]) -> None:
        self._emit(
            {
                "event": "task_progress",
                "id": rec.task_id,
                "completed": rec.completed,
                **meta,
            }
        )

    def _on_end(self, rec: TaskRecord) -> None:
        self._emit(
            {
                "event": "task_end",
                "id": rec.task_id,
                "status": rec.status.name.lower(),
                "completed": rec.completed,
                "total": rec.total,
                "duration_seconds": rec.duration,
                **rec.meta,
            }
        )

    def _maybe_summary(self, message: str, **fields: Any) -> None:
        lower = message.lower()
        for prefix, stype in _SUMMARY_PREFIXES.items():
            if not lower.startswith(prefix):
                continue
            kv_text = message.split(":", 1)[1] if ":" in message else ""
            kv_pairs = dict(
                token.split("=", 1) for token in kv_text.split() if "=" in token
            )
            self._emit(
                {
                    "event": "summary",
                    "summary_type": stype,
                    "raw": message,
                    **kv_pairs,
                    **fields,
                }
            )
            break

    def status(self, message: str, **fields: Any) -> None:
        self._maybe_summary(message, **fields)
        self._emit(
            {"event": "status", "message": message, "level": "info", **fields}
        )

    def verbose(self, message: str, *, level: int = 1, **fields: Any) -> None:
        if get_verbosity() < level:
            return
        self._emit(
            {
                "event": "status",
                "message": message,
                "level": f"verbose{level}",
                **fields,
            }
        )

    def error(self, message: str, **fields: Any) -> None:
        self._emit(
            {"event": "status", "message": message, "level": "error", **fields}
        )

    def warning(self, message: str, **fields: Any) -> None:
        self._emit(
            {"event": "status", "message": message, "level": "warning", **fields}
        )

    def section(self, title: str) -> None:
        self._emit({"event": "section", "title": title})
