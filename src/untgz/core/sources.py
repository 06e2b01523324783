"""Async readers for archives stored in files or behind URLs."""

import asyncio
import logging
from pathlib import Path
from typing import AsyncIterator, Optional, Union

import aiofiles
import aiohttp

from ..exceptions import ArchiveSourceError
from .types import UntgzConfig

logger = logging.getLogger(__name__)


async def create_session(config: Optional[UntgzConfig] = None) -> aiohttp.ClientSession:
    """Create an HTTP session using the configured timeout."""
    config = config or UntgzConfig()
    return aiohttp.ClientSession(timeout=aiohttp.ClientTimeout(total=config.timeout))


async def iter_file(
    path: Union[str, Path], chunk_size: int = 65536
) -> AsyncIterator[bytes]:
    """Read a local file as an async stream of chunks.

    Args:
        path: Path to the archive
        chunk_size: Size of chunks to yield

    Yields:
        Chunks of file data

    Raises:
        ArchiveSourceError: If the file is missing or cannot be read
    """
    path = Path(path)
    if not path.is_file():
        raise ArchiveSourceError(f"Archive file not found: {path}")

    logger.debug("Reading archive from %s", path)
    try:
        async with aiofiles.open(path, "rb") as f:
            while True:
                chunk = await f.read(chunk_size)
                if not chunk:
                    break
                yield chunk
    except OSError as e:
        raise ArchiveSourceError(f"Failed to read {path}: {e}") from e


async def iter_url(
    url: str,
    config: Optional[UntgzConfig] = None,
    session: Optional[aiohttp.ClientSession] = None,
) -> AsyncIterator[bytes]:
    """Download a URL as an async stream of chunks.

    A session is created for the download and closed afterwards unless one
    is passed in.

    Args:
        url: HTTP(S) URL of the archive
        config: Timeout and chunk size settings
        session: Existing session to reuse

    Yields:
        Chunks of the response body

    Raises:
        ArchiveSourceError: If the request fails or returns an error status
    """
    config = config or UntgzConfig()
    owns_session = session is None
    if owns_session:
        session = await create_session(config)

    logger.debug("Downloading archive from %s", url)
    try:
        async with session.get(url) as resp:
            if resp.status >= 400:
                raise ArchiveSourceError(
                    f"Failed to fetch {url}: HTTP {resp.status} {resp.reason}"
                )
            async for chunk in resp.content.iter_chunked(config.chunk_size):
                yield chunk
    except aiohttp.ClientError as e:
        raise ArchiveSourceError(f"Failed to fetch {url}: {e}") from e
    except asyncio.TimeoutError as e:
        raise ArchiveSourceError(
            f"Timed out fetching {url} after {config.timeout}s"
        ) from e
    finally:
        if owns_session:
            await session.close()
