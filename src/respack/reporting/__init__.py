from .base import (
    Reporter,
    TaskStatus,
    get_reporter,
    set_reporter,
    section,
    task,
)
from .base import (
    set_verbosity,
    get_verbosity,
)
from .plain import PlainReporter
from .jsonl import JsonLinesReporter
from .silent import SilentReporter
from .rich_reporter import RichReporter

__all__ = [
    "Reporter",
    "TaskStatus",
    "get_reporter",
    "set_reporter",
    "section",
    "task",
    "set_verbosity",
    "get_verbosity",
    "PlainReporter",
    "JsonLinesReporter",
    "SilentReporter",
    "RichReporter",
    "make_reporter",
]


def make_reporter(name: str) -> Reporter:
    """Create a reporter backend by name (plain, rich, json, silent)."""
    if name == "json":
        return JsonLinesReporter()
    if name == "silent":
        return SilentReporter()
    if name == "rich":
        return RichReporter()
    if name == "plain":
        return PlainReporter()
    raise ValueError(f"Unknown reporter: {name}")
