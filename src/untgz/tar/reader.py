"""In-memory tar reader."""

import logging
from typing import Dict, Iterable, List

from .header import (
    TAR_TYPE_DIR,
    TAR_TYPE_FILE,
    BufferLike,
    align_to_block,
    parse_name,
    parse_size,
    parse_type,
)
from .models import TAR_HEADER_SIZE, EntryKind, TarEntry

logger = logging.getLogger(__name__)

_ENTRY_KINDS = {
    TAR_TYPE_FILE: EntryKind.FILE,
    TAR_TYPE_DIR: EntryKind.DIRECTORY,
}


def get_entries(buffer: BufferLike) -> List[TarEntry]:
    """Scan a tar buffer and return its file and directory entries.

    Header blocks are walked from the start of the buffer. Scanning stops at
    the first block with an empty name or when less than one block is left.
    Only regular files and directories are returned. Other entry types are
    skipped, but their payload is still stepped over.

    Malformed input never raises: unreadable sizes count as 0 and short or
    empty buffers give an empty list.

    Args:
        buffer: Uncompressed tar data

    Returns:
        Entries in the order their headers appear in the buffer
    """
    view = memoryview(buffer).cast("B")
    length = len(view)
    entries: List[TarEntry] = []
    offset = 0
    skipped = 0

    while offset + TAR_HEADER_SIZE <= length:
        name = parse_name(view, offset)

        # No entry name, so end-of-archive padding
        if not name:
            break

        size = parse_size(view, offset)
        kind = _ENTRY_KINDS.get(parse_type(view, offset))

        if kind is not None:
            entries.append(TarEntry(name=name, size=size, kind=kind, offset=offset))
        else:
            skipped += 1

        offset = align_to_block(offset + TAR_HEADER_SIZE + size)

    logger.debug(
        "Scanned %d bytes: %d entries, %d skipped", length, len(entries), skipped
    )
    return entries


def get_entry_data(entry: TarEntry, buffer: BufferLike) -> bytes:
    """Return the payload bytes of an entry.

    The entry must come from scanning the same buffer; otherwise the result
    is whatever bytes sit at that position.

    Args:
        entry: Entry returned by :func:`get_entries`
        buffer: The tar data the entry was scanned from

    Returns:
        Exactly ``entry.size`` bytes for intact buffers, ``b""`` for directories
    """
    view = memoryview(buffer).cast("B")
    return bytes(view[entry.data_offset : entry.data_end])


def extract_files(entries: Iterable[TarEntry], buffer: BufferLike) -> Dict[str, bytes]:
    """Extract the payload of every file entry, keyed by entry name."""
    return {
        entry.name: get_entry_data(entry, buffer) for entry in entries if entry.is_file
    }


scan = get_entries
untar = get_entry_data
