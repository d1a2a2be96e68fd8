"""High-level API for respack."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from .builder import ResourcePackBuilder
from .logging import get_logger
from .manifest import build_manifest
from .model.pack import ResourcePack
from .output import DirectoryOutput, TreeOutput, ZipOutput
from .reporting import TaskStatus, get_reporter, task

__all__ = [
    "BuildOptions",
    "BuildResult",
    "build_pack",
    "open_output",
    "write_pack",
]


@dataclass(slots=True)
class BuildOptions:
    output_path: Path
    # None infers the container type from the ".zip" suffix
    archive: Optional[bool] = None
    # Cosmetic indentation for JSON documents; None emits compact JSON
    indent: Optional[int] = None
    # Optional path; when provided a manifest JSON is written next to the output
    manifest_path: Optional[Path] = None
    # Overwrite an existing archive / files already present in the directory
    force: bool = False

    @property
    def use_archive(self) -> bool:
        if self.archive is not None:
            return self.archive
        return Path(self.output_path).suffix.lower() == ".zip"


@dataclass(slots=True)
class BuildResult:
    output_path: Path
    entries: int
    bytes_written: int
    complete: bool


def open_output(options: BuildOptions) -> TreeOutput:
    if options.use_archive:
        return ZipOutput(options.output_path, force=options.force)
    return DirectoryOutput(options.output_path, force=options.force)


def write_pack(
    pack: ResourcePack,
    output: TreeOutput,
    *,
    indent: Optional[int] = None,
) -> None:
    """Write every asset of ``pack`` into ``output`` in a fixed order.

    Assets of each kind are sorted by identifier so the same pack always
    produces the same entry sequence. The container is left open.
    """
    builder = ResourcePackBuilder(output, indent=indent)
    rep = get_reporter()

    if pack.meta is not None:
        with task("write.meta", "Pack metadata", total=1):
            builder.meta(pack.meta)
            rep.advance("write.meta", current_item="pack.mcmeta")

    groups = [
        ("files", "Files", sorted(pack.files.items()), builder.file),
        ("lang", "Languages", sorted(pack.languages.items()), builder.language),
        ("font", "Fonts", sorted(pack.fonts.items()), builder.font),
        ("model", "Models", sorted(pack.models.items()), builder.model),
        (
            "blockstate",
            "Block states",
            sorted(pack.block_states.items()),
            builder.block_state,
        ),
        ("sounds", "Sound registries", sorted(pack.sounds.items()), builder.sounds),
        (
            "sound_file",
            "Sound files",
            sorted(pack.sound_files.items()),
            builder.sound_file,
        ),
        ("texture", "Textures", sorted(pack.textures.items()), builder.texture),
    ]
    for task_name, label, items, write in groups:
        if not items:
            continue
        task_id = f"write.{task_name}"
        before = len(output.records)
        rep.start_task(task_id, label, total=len(items))
        try:
            for ident, asset in items:
                write(ident, asset)
                rep.advance(task_id, current_item=str(ident))
        except Exception:
            rep.end_task(task_id, TaskStatus.FAILED)
            raise
        rep.end_task(task_id, entries=len(output.records) - before)


def build_pack(pack: ResourcePack, options: BuildOptions) -> BuildResult:
    """Build ``pack`` into a directory or zip archive.

    On any error the container is aborted (a partial archive is deleted) and
    the exception propagates; the manifest, when requested, is written only
    for complete builds.
    """
    logger = get_logger()
    rep = get_reporter()
    output = open_output(options)
    with output:
        write_pack(pack, output, indent=options.indent)

    if options.manifest_path is not None:
        with task("manifest.emit", "Emit manifest"):
            build_manifest(
                output.records, options.manifest_path, complete=output.complete
            )
        rep.status(
            "Manifest summary: "
            + f"file={options.manifest_path.name} entries={len(output.records)}"
        )

    logger.debug(
        "Built pack: %s (%d entries, %d bytes)",
        Path(options.output_path).name,
        len(output.records),
        output.bytes_written,
    )
    rep.status(
        "Build summary: "
        + f"entries={len(output.records)} bytes={output.bytes_written}"
    )
    return BuildResult(
        output_path=Path(options.output_path),
        entries=len(output.records),
        bytes_written=output.bytes_written,
        complete=output.complete,
    )
