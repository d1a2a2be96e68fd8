"""Path utilities (container entry paths, safe filesystem resolution)."""

from __future__ import annotations
from pathlib import Path

from ..errors import E_PATH, InvalidPathError

__all__ = ["validate_entry_path", "safe_file_path"]


def validate_entry_path(path: str) -> str:
    """Check that ``path`` is a relative, '/'-separated container path."""
    if not isinstance(path, str) or not path:
        raise InvalidPathError(E_PATH, "Entry path must not be empty")
    if "\\" in path:
        raise InvalidPathError(
            E_PATH, "Entry path must use '/' as the separator", {"path": path}
        )
    if path.startswith("/"):
        raise InvalidPathError(
            E_PATH, "Entry path must be relative", {"path": path}
        )
    for segment in path.split("/"):
        if segment == "":
            raise InvalidPathError(
                E_PATH, "Entry path must not contain empty segments", {"path": path}
            )
        if segment in (".", ".."):
            raise InvalidPathError(
                E_PATH,
                f"Entry path must not contain '{segment}'",
                {"path": path},
            )
    return path


def safe_file_path(base_dir: Path, file_path: str) -> Path:
    base_dir = base_dir.resolve()
    resolved = (base_dir / file_path).resolve()
    resolved.relative_to(base_dir)  # raises ValueError if escapes
    return resolved
