"""Blob object tests."""

import pytest
from got.core.objects import Blob, GotObject
from got.core.codec import get_kind


def test_blob_creation():
    """Test blob creation with data."""
    blob = Blob(b'hello world')
    assert blob.data == b'hello world'
    assert Blob.kind == 'blob'


def test_blob_default_empty():
    """Test blob without data is empty."""
    assert Blob().data == b''


def test_blob_serialize_is_identity():
    """Test blob serialization returns the bytes unchanged."""
    data = b'\x00\xffbinary\n'
    assert Blob(data).serialize() == data


def test_blob_deserialize_is_identity():
    """Test blob deserialization stores the bytes unchanged."""
    blob = Blob()
    blob.deserialize(b'test content')
    assert blob.data == b'test content'


def test_blob_hash_known_value():
    """Test blob hash matches the hash of its full record."""
    assert Blob(b'hello\n').hash == 'ce013625030ba8dba906f756967f9e9ca394464a'
    assert Blob(b'').hash == 'e69de29bb2d1d6434b8b29ae775ad8c2e48c5391'


def test_blob_encode():
    """Test full record of a blob."""
    assert Blob(b'hello\n').encode() == b'blob 6\x00hello\n'


def test_blob_hash_reset_on_deserialize():
    """Test cached hash is dropped when content changes."""
    blob = Blob(b'one')
    first = blob.hash
    blob.deserialize(b'two')
    assert blob.hash != first


def test_blob_from_file(temp_dir):
    """Test blob creation from a file."""
    path = temp_dir / 'data.bin'
    path.write_bytes(b'file content')
    assert Blob.from_file(str(path)).data == b'file content'


def test_from_file_uses_registered_kind(temp_dir):
    """Test from_file on a kind looked up by tag."""
    path = temp_dir / 'hello.txt'
    path.write_bytes(b'hello\n')
    obj = get_kind('blob').from_file(str(path))
    assert isinstance(obj, Blob)
    assert obj.hash == 'ce013625030ba8dba906f756967f9e9ca394464a'


def test_blob_is_registered():
    """Test blob is the class registered for its kind."""
    assert get_kind('blob') is Blob


def test_got_object_is_abstract():
    """Test the base class cannot be instantiated."""
    with pytest.raises(TypeError):
        GotObject()


def test_blob_repr(sample_blob):
    """Test repr shows short hash and size."""
    assert repr(sample_blob) == f"Blob(hash={sample_blob.hash[:7]}, size=14)"
