"""Tar header scanning and payload extraction."""

from .filters import filter_macos_metadata, is_macos_metadata
from .models import TAR_HEADER_SIZE, EntryKind, TarEntry
from .reader import extract_files, get_entries, get_entry_data, scan, untar

__all__ = [
    "TAR_HEADER_SIZE",
    "EntryKind",
    "TarEntry",
    "extract_files",
    "filter_macos_metadata",
    "get_entries",
    "get_entry_data",
    "is_macos_metadata",
    "scan",
    "untar",
]
