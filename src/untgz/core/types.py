"""Configuration types for untgz."""

from dataclasses import dataclass


@dataclass
class UntgzConfig:
    """Settings for reading and unpacking .tar.gz archives."""

    timeout: int = 30  # HTTP request timeout in seconds
    chunk_size: int = 65536  # Bytes per read from files and responses
    filter_metadata: bool = True  # Drop macOS "._*" and PaxHeader entries
