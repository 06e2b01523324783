"""Helpers for building tar archives in tests."""

import io
import tarfile

BLOCK = 512


def build_tar(members) -> bytes:
    """Build a tar archive with the tarfile module.

    Args:
        members: List of (name, content) tuples. ``content`` of None makes a
            directory, a ``("symlink", target)`` tuple makes a symlink.
    """
    stream = io.BytesIO()
    with tarfile.open(fileobj=stream, mode="w") as tar:
        for name, content in members:
            info = tarfile.TarInfo(name)
            if content is None:
                info.type = tarfile.DIRTYPE
                info.size = 0
                tar.addfile(info)
            elif isinstance(content, tuple):
                info.type = tarfile.SYMTYPE
                info.linkname = content[1]
                tar.addfile(info)
            else:
                info.size = len(content)
                tar.addfile(info, fileobj=io.BytesIO(content))
    return stream.getvalue()


def make_header(name: str, size_field: bytes, typeflag: bytes) -> bytes:
    """Build a bare 512-byte header with only name, size and type set."""
    header = bytearray(BLOCK)
    encoded = name.encode("utf-8")[:100]
    header[: len(encoded)] = encoded
    header[124 : 124 + len(size_field)] = size_field
    header[156:157] = typeflag
    return bytes(header)


def make_entry(
    name: str, content: bytes = b"", typeflag: bytes = b"0", size_field=None
) -> bytes:
    """Build a header block followed by its padded payload."""
    if size_field is None:
        size_field = f"{len(content):011o} ".encode("ascii")
    padding = b"\0" * (-len(content) % BLOCK)
    return make_header(name, size_field, typeflag) + content + padding


def make_archive(*entries: bytes) -> bytes:
    """Join raw entries and append the two-block end marker."""
    return b"".join(entries) + b"\0" * (2 * BLOCK)


# Minimal PNG signature followed by filler
PNG_DATA = b"\x89PNG\r\n\x1a\n" + bytes(range(256)) * 64

SAMPLE_MEMBERS = [
    ("sample-data/", None),
    ("sample-data/file1.txt", b"Hello World!\nThis is the first test file.\n"),
    ("sample-data/._file1.txt", b"\x00\x05\x16\x07AppleDouble"),
    ("sample-data/file2.txt", b"Second file content here.\n"),
    ("sample-data/README.md", b"# Test Data\n\n## Files\n"),
    ("sample-data/nested/", None),
    ("sample-data/nested/deep.txt", b"This file is in a nested directory.\n"),
    ("sample-data/PaxHeader/deep.txt", b"17 path=deep.txt\n"),
    ("sample-data/image.png", PNG_DATA),
]
