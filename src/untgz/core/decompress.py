"""Async gzip decompression."""

import asyncio
import logging
import zlib
from typing import AsyncIterable, List, Union

from ..exceptions import DecompressionError

logger = logging.getLogger(__name__)

# zlib window bits for gzip framing
GZIP_WBITS = 16 + zlib.MAX_WBITS


class GzipInflater:
    """Incremental gzip decompressor.

    Chunks can be split anywhere. Concatenated gzip members are inflated one
    after another. NUL padding after a complete member is ignored.
    """

    def __init__(self) -> None:
        self._decompressor = zlib.decompressobj(GZIP_WBITS)
        self._in_member = False
        self.members = 0
        self.total_in = 0
        self.total_out = 0

    def feed(self, chunk: Union[bytes, bytearray, memoryview]) -> bytes:
        """Decompress the next chunk of the stream.

        Args:
            chunk: Next piece of compressed data

        Returns:
            Decompressed bytes available so far (may be empty)

        Raises:
            DecompressionError: If the data is not a valid gzip stream
        """
        data = bytes(chunk)
        self.total_in += len(data)
        output: List[bytes] = []

        while data:
            if not self._in_member:
                # Padding is only allowed once a member has been read
                if self.members:
                    data = data.lstrip(b"\0")
                    if not data:
                        break
                self._in_member = True

            try:
                output.append(self._decompressor.decompress(data))
            except zlib.error as e:
                raise DecompressionError(f"Invalid gzip data: {e}") from e

            if not self._decompressor.eof:
                break

            # Member finished, anything left belongs to the next one
            data = self._decompressor.unused_data
            self._decompressor = zlib.decompressobj(GZIP_WBITS)
            self._in_member = False
            self.members += 1

        result = b"".join(output)
        self.total_out += len(result)
        return result

    def finish(self) -> bytes:
        """Finish the stream.

        Raises:
            DecompressionError: If the stream holds no gzip member or the last
                member is incomplete
        """
        if not self.members and not self._in_member:
            raise DecompressionError(
                f"No gzip data found in {self.total_in} bytes of input"
            )
        if self._in_member:
            raise DecompressionError(
                f"Truncated gzip stream after {self.total_in} compressed bytes"
            )
        return b""


def _inflate_all(data: Union[bytes, bytearray, memoryview]) -> bytes:
    inflater = GzipInflater()
    return inflater.feed(data) + inflater.finish()


async def decompress(data: Union[bytes, bytearray, memoryview]) -> bytes:
    """Decompress a complete gzip byte string.

    Args:
        data: gzip compressed data

    Returns:
        Decompressed bytes

    Raises:
        DecompressionError: If data is invalid or truncated
    """
    loop = asyncio.get_event_loop()
    result = await loop.run_in_executor(None, _inflate_all, data)
    logger.debug("Decompressed %d bytes to %d bytes", len(data), len(result))
    return result


async def decompress_stream(chunks: AsyncIterable[bytes]) -> bytes:
    """Decompress a gzip stream as its chunks arrive.

    Args:
        chunks: Async iterable of compressed chunks

    Returns:
        Decompressed bytes

    Raises:
        DecompressionError: If the stream is invalid or truncated
    """
    loop = asyncio.get_event_loop()
    inflater = GzipInflater()
    output: List[bytes] = []

    async for chunk in chunks:
        output.append(await loop.run_in_executor(None, inflater.feed, chunk))
    output.append(inflater.finish())

    logger.debug(
        "Decompressed stream of %d bytes to %d bytes",
        inflater.total_in,
        inflater.total_out,
    )
    return b"".join(output)
