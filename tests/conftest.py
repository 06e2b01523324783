"""Test configuration and fixtures."""

import gzip

import pytest

from tests.helpers import SAMPLE_MEMBERS, build_tar


@pytest.fixture
def scenario_tar():
    """Archive with file1.txt, dir/ and file2.txt in that order."""
    return build_tar(
        [
            ("file1.txt", b"hello"),
            ("dir/", None),
            ("file2.txt", b"world"),
        ]
    )


@pytest.fixture
def sample_tar():
    """Archive laid out like a real project directory, with macOS leftovers."""
    return build_tar(SAMPLE_MEMBERS)


@pytest.fixture
def sample_tgz(sample_tar):
    """Gzip compressed sample archive."""
    return gzip.compress(sample_tar)


@pytest.fixture
def sample_tgz_path(tmp_path, sample_tgz):
    """Sample archive written to disk."""
    path = tmp_path / "sample.tar.gz"
    path.write_bytes(sample_tgz)
    return path
