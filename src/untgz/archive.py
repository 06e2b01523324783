"""Async functional .tar.gz operations."""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, List, Optional, Union

import aiohttp

from .core.decompress import decompress, decompress_stream
from .core.sources import iter_file, iter_url
from .core.types import UntgzConfig
from .tar.filters import filter_macos_metadata
from .tar.models import TarEntry
from .tar.reader import extract_files, get_entries, get_entry_data

logger = logging.getLogger(__name__)


@dataclass
class UntgzResult:
    """Decompressed tar buffer and the entries found in it."""

    buffer: bytes
    entries: List[TarEntry]

    def read(self, entry: TarEntry) -> bytes:
        """Return the payload of one of this result's entries."""
        return get_entry_data(entry, self.buffer)

    def files(self) -> Dict[str, bytes]:
        """Return the payload of every file entry, keyed by name."""
        return extract_files(self.entries, self.buffer)


def _build_result(buffer: bytes, config: UntgzConfig) -> UntgzResult:
    """Scan a decompressed buffer and apply the metadata filter."""
    entries = get_entries(buffer)
    if config.filter_metadata:
        kept = filter_macos_metadata(entries)
        if len(kept) != len(entries):
            logger.debug("Dropped %d macOS metadata entries", len(entries) - len(kept))
        entries = kept
    return UntgzResult(buffer=buffer, entries=entries)


async def untgz(
    data: Union[bytes, bytearray, memoryview], config: Optional[UntgzConfig] = None
) -> UntgzResult:
    """메모리에 있는 .tar.gz 데이터를 압축 해제하고 엔트리 목록을 반환합니다.

    Args:
        data: gzip으로 압축된 tar 데이터
        config: 설정 (선택사항, 기본값: UntgzConfig())
            - filter_metadata: True이면 macOS 메타데이터("._*", PaxHeader) 제외

    Returns:
        UntgzResult: 압축 해제된 tar 버퍼와 파일/디렉토리 엔트리 목록

    Raises:
        DecompressionError: gzip 데이터가 잘못되었거나 잘린 경우

    Examples:
        # .tar.gz 바이트에서 파일 내용 읽기
        result = await untgz(archive_bytes)
        for entry in result.entries:
            if entry.is_file:
                print(entry.name, len(result.read(entry)))
    """
    config = config or UntgzConfig()
    buffer = await decompress(data)
    return _build_result(buffer, config)


async def untgz_file(
    path: Union[str, Path], config: Optional[UntgzConfig] = None
) -> UntgzResult:
    """.tar.gz 파일을 비동기로 읽어 압축 해제하고 엔트리 목록을 반환합니다.

    Args:
        path: .tar.gz 파일 경로
            - 상대경로: "sample.tar.gz", "./fixtures/data.tgz"
            - 절대경로: "/home/user/archives/data.tar.gz"
        config: 설정 (선택사항, chunk_size로 읽기 단위 지정)

    Returns:
        UntgzResult: 압축 해제된 tar 버퍼와 파일/디렉토리 엔트리 목록

    Raises:
        ArchiveSourceError: 파일이 없거나 읽을 수 없는 경우
        DecompressionError: gzip 데이터가 잘못되었거나 잘린 경우

    Examples:
        # 모든 파일 내용을 딕셔너리로 가져오기
        result = await untgz_file("sample.tar.gz")
        files = result.files()
        print(files["sample-data/file1.txt"].decode())
    """
    config = config or UntgzConfig()
    chunks = iter_file(path, config.chunk_size)
    try:
        buffer = await decompress_stream(chunks)
    finally:
        await chunks.aclose()
    return _build_result(buffer, config)


async def untgz_url(
    url: str,
    config: Optional[UntgzConfig] = None,
    session: Optional[aiohttp.ClientSession] = None,
) -> UntgzResult:
    """URL에서 .tar.gz 아카이브를 내려받아 압축 해제하고 엔트리 목록을 반환합니다.

    응답 본문은 청크 단위로 받으면서 바로 압축 해제합니다.

    Args:
        url: 아카이브 URL (예: "https://example.com/release.tar.gz")
        config: 설정 (선택사항, timeout/chunk_size/filter_metadata)
        session: 재사용할 aiohttp 세션 (선택사항, 없으면 새로 생성 후 닫음)

    Returns:
        UntgzResult: 압축 해제된 tar 버퍼와 파일/디렉토리 엔트리 목록

    Raises:
        ArchiveSourceError: 요청 실패, 타임아웃 또는 오류 상태 코드인 경우
        DecompressionError: gzip 데이터가 잘못되었거나 잘린 경우

    Examples:
        # 원격 아카이브의 디렉토리 목록 출력
        result = await untgz_url("https://example.com/release.tar.gz")
        for entry in result.entries:
            if entry.is_dir:
                print(entry.name)
    """
    config = config or UntgzConfig()
    chunks = iter_url(url, config, session)
    try:
        buffer = await decompress_stream(chunks)
    finally:
        await chunks.aclose()
    return _build_result(buffer, config)
