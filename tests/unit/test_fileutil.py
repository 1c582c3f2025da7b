"""Unit tests for atomic file writes."""

import os
import pytest
from got.core import fileutil
from got.core.fileutil import atomic_write


def test_atomic_write_bytes(temp_dir):
    """Test writing bytes."""
    path = temp_dir / 'out.bin'
    atomic_write(path, b'\x00\x01data')
    assert path.read_bytes() == b'\x00\x01data'


def test_atomic_write_text(temp_dir):
    """Test str content is UTF-8 encoded."""
    path = temp_dir / 'out.txt'
    atomic_write(path, 'snow ☃\n')
    assert path.read_text(encoding='utf-8') == 'snow ☃\n'


def test_atomic_write_replaces(temp_dir):
    """Test existing content is replaced."""
    path = temp_dir / 'out.txt'
    path.write_text('old')
    atomic_write(path, 'new')
    assert path.read_text() == 'new'
    assert [p.name for p in temp_dir.iterdir()] == ['out.txt']


def test_atomic_write_failure_keeps_original(temp_dir, monkeypatch):
    """Test a failed rename leaves the destination and no temp file."""
    path = temp_dir / 'out.txt'
    path.write_text('original')

    def broken_replace(src, dst):
        raise OSError("disk on fire")

    monkeypatch.setattr(fileutil.os, 'replace', broken_replace)

    with pytest.raises(OSError, match="disk on fire"):
        atomic_write(path, 'replacement')

    assert path.read_text() == 'original'
    assert [p.name for p in temp_dir.iterdir()] == ['out.txt']


def test_atomic_write_missing_parent(temp_dir):
    """Test the parent directory must exist."""
    with pytest.raises(FileNotFoundError):
        atomic_write(temp_dir / 'missing' / 'out.txt', b'x')


def test_atomic_write_mode(temp_dir):
    """Test permission bits of the new file."""
    path = temp_dir / 'out.txt'
    atomic_write(path, b'x', mode=0o600)
    assert os.stat(path).st_mode & 0o777 == 0o600
