"""Build manifest for respack.

The manifest is an optional JSON artifact listing every committed entry with
its size and SHA-256. It is written next to the output, never inside it, and
only when explicitly requested.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Sequence

from .output.base import EntryRecord

__all__ = ["build_manifest", "manifest_dict"]


def manifest_dict(
    records: Sequence[EntryRecord], *, complete: bool = True
) -> dict[str, Any]:
    entries = [
        {"path": r.path, "size": r.size, "sha256": r.sha256} for r in records
    ]
    assets = sum(1 for r in records if r.path.startswith("assets/"))
    return {
        "version": 1,
        "complete": complete,
        "entries": entries,
        "counts": {
            "entries": len(entries),
            "assets": assets,
            "bytes": sum(r.size for r in records),
        },
    }


def build_manifest(
    records: Sequence[EntryRecord],
    output_path: Path,
    *,
    complete: bool = True,
) -> Path:
    output_path.parent.mkdir(parents=True, exist_ok=True)
    data = manifest_dict(records, complete=complete)
    with output_path.open("w", encoding="utf-8") as f:
        json.dump(data, f, indent=2, sort_keys=True)
        f.write("\n")
    return output_path
