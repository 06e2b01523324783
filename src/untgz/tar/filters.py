"""Filters for entries created by macOS archiving tools."""

from typing import Iterable, List

from .models import TarEntry

# AppleDouble resource forks and PAX header directories
MACOS_METADATA_MARKERS = ("._", "PaxHeader")


def is_macos_metadata(name: str) -> bool:
    """Check if an entry name looks like macOS archive metadata."""
    return any(marker in name for marker in MACOS_METADATA_MARKERS)


def filter_macos_metadata(entries: Iterable[TarEntry]) -> List[TarEntry]:
    """Drop macOS metadata entries, keeping the order of the rest."""
    return [entry for entry in entries if not is_macos_metadata(entry.name)]
