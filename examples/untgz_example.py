"""Example usage of the async untgz API."""

import asyncio
import logging
import sys

# Add parent directory to path
sys.path.insert(0, "src")

from untgz import UntgzError, untgz_file, untgz_url

# Set up logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


async def list_archive(path: str):
    """List the entries of a local .tar.gz file."""
    try:
        logger.info(f"Reading {path}...")
        result = await untgz_file(path)
        logger.info(f"Found {len(result.entries)} entries")

        for entry in result.entries:
            kind = "file" if entry.is_file else "dir "
            logger.info(f"  [{kind}] {entry.name} ({entry.size} bytes)")

    except UntgzError as e:
        logger.error(f"Archive error: {e}")


async def concurrent_downloads(urls: list[str]):
    """Download and unpack several archives concurrently."""
    results = await asyncio.gather(
        *(untgz_url(url) for url in urls), return_exceptions=True
    )

    for url, result in zip(urls, results):
        if isinstance(result, Exception):
            logger.error(f"{url}: {result}")
        else:
            files = result.files()
            total = sum(len(data) for data in files.values())
            logger.info(f"{url}: {len(files)} files, {total:,} bytes")


if __name__ == "__main__":
    if len(sys.argv) < 2:
        print("Usage: python examples/untgz_example.py <archive.tar.gz | URL>...")
        sys.exit(1)

    paths = [arg for arg in sys.argv[1:] if not arg.startswith(("http://", "https://"))]
    urls = [arg for arg in sys.argv[1:] if arg.startswith(("http://", "https://"))]

    for path in paths:
        asyncio.run(list_archive(path))
    if urls:
        asyncio.run(concurrent_downloads(urls))
