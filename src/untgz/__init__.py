"""untgz - Read entries and payloads from in-memory tar and .tar.gz archives."""

__version__ = "0.1.0"

from .archive import UntgzResult, untgz, untgz_file, untgz_url
from .core.decompress import GzipInflater, decompress, decompress_stream
from .core.types import UntgzConfig
from .exceptions import ArchiveSourceError, DecompressionError, UntgzError
from .tar import (
    EntryKind,
    TarEntry,
    extract_files,
    filter_macos_metadata,
    get_entries,
    get_entry_data,
    is_macos_metadata,
    scan,
    untar,
)

__all__ = [
    # High-level API
    "untgz",
    "untgz_file",
    "untgz_url",
    "UntgzResult",
    "UntgzConfig",
    # Tar core
    "get_entries",
    "get_entry_data",
    "extract_files",
    "scan",
    "untar",
    "EntryKind",
    "TarEntry",
    "filter_macos_metadata",
    "is_macos_metadata",
    # Decompression
    "GzipInflater",
    "decompress",
    "decompress_stream",
    # Exceptions
    "UntgzError",
    "DecompressionError",
    "ArchiveSourceError",
]
