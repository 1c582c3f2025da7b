"""Hash utilities tests."""

import pytest
from got.core.hash import hash_object, is_full_hash


def test_hash_object_empty():
    """Test hashing empty bytes."""
    result = hash_object(b'')
    assert result == 'da39a3ee5e6b4b0d3255bfef95601890afd80709'


def test_hash_object_deterministic():
    """Test hash consistency for same input."""
    data = b'hello world'
    assert hash_object(data) == hash_object(data)


def test_hash_object_different_data():
    """Test different data produces different hashes."""
    assert hash_object(b'hello') != hash_object(b'world')


def test_hash_object_is_lowercase_hex():
    """Test digest format."""
    result = hash_object(b'anything')
    assert len(result) == 40
    assert result == result.lower()
    int(result, 16)


@pytest.mark.parametrize('name,expected', [
    ('ce013625030ba8dba906f756967f9e9ca394464a', True),
    ('CE013625030BA8DBA906F756967F9E9CA394464A', True),
    ('ce01362', False),
    ('ce013625030ba8dba906f756967f9e9ca394464a0', False),
    ('ze013625030ba8dba906f756967f9e9ca394464a', False),
    ('master', False),
    ('', False),
])
def test_is_full_hash(name, expected):
    """Test full hash detection."""
    assert is_full_hash(name) is expected
