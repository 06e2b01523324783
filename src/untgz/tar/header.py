"""Tar header field decoding.

Only the three fields needed to walk an archive are decoded: the entry name,
the payload size and the type flag. Everything else in the 512-byte header
block (mode, owner, checksum, ustar magic, ...) is ignored.
"""

import re
from typing import Union

from .models import TAR_HEADER_SIZE

BufferLike = Union[bytes, bytearray, memoryview]

TAR_NAME_OFFSET = 0
TAR_NAME_SIZE = 100
TAR_SIZE_OFFSET = 124
TAR_SIZE_SIZE = 12
TAR_TYPE_OFFSET = 156

TAR_TYPE_FILE = 0
TAR_TYPE_DIR = 5

# Optional sign followed by the longest run of octal digits
OCTAL_PREFIX_PATTERN = re.compile(r"^[+-]?[0-7]+")


def read_field(view: memoryview, offset: int, size: int) -> bytes:
    """Copy ``size`` bytes starting at ``offset`` out of the buffer view."""
    return bytes(view[offset : offset + size])


def parse_octal(text: str) -> int:
    """Parse an octal number the lenient way tar readers usually do.

    Leading octal digits are used and anything after them is ignored, so
    ``"0000012 "`` and ``"12abc"`` both give 10. Text without leading digits
    and negative values give 0.

    Args:
        text: Field content with NUL bytes already removed

    Returns:
        Parsed non-negative integer
    """
    match = OCTAL_PREFIX_PATTERN.match(text.strip())
    if not match:
        return 0

    value = int(match.group(0), 8)
    return max(value, 0)


def parse_name(view: memoryview, offset: int) -> str:
    """Decode the name field of the header block at ``offset``."""
    raw = read_field(view, offset + TAR_NAME_OFFSET, TAR_NAME_SIZE)
    return raw.decode("utf-8", errors="replace").replace("\0", "")


def parse_size(view: memoryview, offset: int) -> int:
    """Decode the octal size field of the header block at ``offset``."""
    raw = read_field(view, offset + TAR_SIZE_OFFSET, TAR_SIZE_SIZE)
    text = raw.decode("ascii", errors="replace").replace("\0", "")
    return parse_octal(text)


def parse_type(view: memoryview, offset: int) -> int:
    """Decode the type flag digit of the header block at ``offset``.

    Non-digit flags (``"x"``, ``"L"``, NUL, ...) map to values outside 0-9.
    """
    return view[offset + TAR_TYPE_OFFSET] - ord("0")


def align_to_block(position: int) -> int:
    """Round ``position`` up to the next header block boundary."""
    remainder = position % TAR_HEADER_SIZE
    if remainder:
        position += TAR_HEADER_SIZE - remainder
    return position
