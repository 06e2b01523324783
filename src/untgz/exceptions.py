"""Custom exceptions for untgz."""


class UntgzError(Exception):
    """Base exception for all untgz errors."""

    pass


class DecompressionError(UntgzError):
    """Raised when gzip data is invalid or truncated."""

    pass


class ArchiveSourceError(UntgzError):
    """Raised when an archive cannot be read from its file or URL."""

    pass
