"""Data models for tar entries."""

from dataclasses import dataclass
from enum import Enum

TAR_HEADER_SIZE = 512


class EntryKind(Enum):
    """Kind of a tar entry, derived from the header type flag."""

    FILE = "file"
    DIRECTORY = "directory"


@dataclass(frozen=True)
class TarEntry:
    """A file or directory entry found in a tar buffer."""

    name: str
    size: int
    kind: EntryKind
    offset: int  # Position of the header block, not the payload

    @property
    def is_file(self) -> bool:
        return self.kind is EntryKind.FILE

    @property
    def is_dir(self) -> bool:
        return self.kind is EntryKind.DIRECTORY

    @property
    def data_offset(self) -> int:
        """Position of the first payload byte."""
        return self.offset + TAR_HEADER_SIZE

    @property
    def data_end(self) -> int:
        """Position just past the last payload byte."""
        return self.data_offset + self.size
