"""Zip archive output.

The archive is written to ``<name>.part`` and only renamed onto the target
path when the container is finished, so an aborted build never leaves a
plausible-looking pack behind. Member metadata is fixed, making archives
byte-identical for identical input.
"""

from __future__ import annotations

import os
from pathlib import Path
from zipfile import ZIP_DEFLATED, ZipFile, ZipInfo

from ..errors import E_WRITE_IO, IOFailure
from .base import TreeOutput

__all__ = ["ZipOutput"]

_ZIP_EPOCH = (1980, 1, 1, 0, 0, 0)


class ZipOutput(TreeOutput):
    def __init__(
        self,
        path: str | Path,
        *,
        force: bool = False,
        compresslevel: int = 9,
    ) -> None:
        super().__init__()
        self.path = Path(path)
        if self.path.exists() and not force:
            raise IOFailure(
                E_WRITE_IO,
                f"Output archive already exists: {self.path}",
                {"path": str(self.path)},
            )
        self.compresslevel = compresslevel
        self.part_path = self.path.with_name(self.path.name + ".part")
        self.path.parent.mkdir(parents=True, exist_ok=True)
        try:
            self._zip = ZipFile(
                self.part_path,
                "w",
                compression=ZIP_DEFLATED,
                compresslevel=compresslevel,
            )
        except OSError as e:
            raise IOFailure(
                E_WRITE_IO,
                f"Cannot create archive: {e}",
                {"path": str(self.part_path)},
            ) from e

    def _commit(self, path: str, data: bytes) -> None:
        info = ZipInfo(path)
        info.date_time = _ZIP_EPOCH
        info.compress_type = ZIP_DEFLATED
        info.external_attr = 0o644 << 16
        self._zip.writestr(info, data, compresslevel=self.compresslevel)

    def _seal(self) -> None:
        self._zip.close()
        os.replace(self.part_path, self.path)

    def _cleanup(self) -> None:
        self._zip.close()
        self.part_path.unlink(missing_ok=True)
