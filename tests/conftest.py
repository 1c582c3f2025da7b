"""Shared pytest fixtures for Got tests."""

import pytest
import tempfile
import shutil
from pathlib import Path
from got.core.repository import Repository
from got.core.objects import Blob


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests."""
    tmpdir = tempfile.mkdtemp()
    yield Path(tmpdir).resolve()
    shutil.rmtree(tmpdir, ignore_errors=True)


@pytest.fixture
def repo(temp_dir):
    """Create an initialized repository."""
    return Repository(temp_dir).init()


@pytest.fixture
def store(repo):
    """Object store of the initialized repository."""
    return repo.objects


@pytest.fixture
def sample_blob():
    """Create a sample blob object."""
    return Blob(b"Hello, World!\n")


@pytest.fixture
def payload_corpus():
    """Varied payloads for round-trip and collision checks."""
    return [
        b'',
        b'\n',
        b'hello\n',
        b'hello',
        b'Hello\n',
        b'\x00',
        b'\x00\x00',
        b'blob 6\x00hello\n',
        bytes(range(256)),
        b'a' * 10000,
        'unicode ☃ text'.encode('utf-8'),
        b' \x00 ',
    ]
