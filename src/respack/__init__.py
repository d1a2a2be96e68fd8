"""Resource pack authoring: canonical JSON writer, entry sinks and encoders.

Public entry points live in :mod:`respack.api`; lower layers are
:mod:`respack.writer` (document writer) and :mod:`respack.output`
(entry-multiplexed containers).
"""

from .api import BuildOptions, BuildResult, build_pack, open_output, write_pack
from .builder import ResourcePackBuilder
from .errors import (
    DuplicatePathError,
    EntryAlreadyOpenError,
    IOFailure,
    PackError,
    StructuralViolation,
    UnsupportedVariantError,
)
from .writer import JsonWriter

__all__ = [
    "BuildOptions",
    "BuildResult",
    "build_pack",
    "open_output",
    "write_pack",
    "ResourcePackBuilder",
    "JsonWriter",
    "PackError",
    "StructuralViolation",
    "DuplicatePathError",
    "EntryAlreadyOpenError",
    "IOFailure",
    "UnsupportedVariantError",
]

__version__ = "0.1.0"
