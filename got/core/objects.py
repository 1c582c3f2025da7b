"""Object kinds for Got."""

from abc import ABC, abstractmethod
from typing import Optional

from .codec import encode, register_kind
from .hash import hash_object


class GotObject(ABC):
    """
    Base class for all Got objects.

    Subclasses set ``kind`` and are registered with ``@register_kind`` so
    the store can read them back without knowing about them.
    """

    kind: str = ''

    def __init__(self):
        self._hash: Optional[str] = None

    @abstractmethod
    def serialize(self) -> bytes:
        """
        Serialize object to bytes.

        Returns:
            bytes: Serialized object data
        """
        pass

    @abstractmethod
    def deserialize(self, data: bytes) -> None:
        """
        Deserialize object from bytes.

        Args:
            data: Serialized object data
        """
        pass

    @classmethod
    def from_file(cls, filepath: str) -> 'GotObject':
        """
        Create an object of this kind from a file's serialized content.

        Args:
            filepath: Path to file

        Returns:
            GotObject: New object deserialized from the file content
        """
        with open(filepath, 'rb') as f:
            data = f.read()
        obj = cls()
        obj.deserialize(data)
        return obj

    def encode(self) -> bytes:
        """Return the full object record for this object."""
        return encode(self.kind, self.serialize())

    def compute_hash(self) -> str:
        """
        Compute and cache object hash.

        Objects are hashed with a header containing the kind and size.
        Format: <kind> <size>\\0<content>

        Returns:
            str: 40-character SHA-1 hash
        """
        if self._hash is None:
            self._hash = hash_object(self.encode())
        return self._hash

    @property
    def hash(self) -> str:
        """
        Get object hash.

        Returns:
            str: 40-character SHA-1 hash
        """
        return self.compute_hash()


@register_kind
class Blob(GotObject):
    """
    Opaque binary payload.

    A blob stores raw bytes without any metadata; serialization is the
    identity transform.
    """

    kind = 'blob'

    def __init__(self, data: Optional[bytes] = None):
        """
        Initialize a blob.

        Args:
            data: Content as bytes
        """
        super().__init__()
        self.data = data or b''

    def serialize(self) -> bytes:
        return self.data

    def deserialize(self, data: bytes) -> None:
        self.data = data
        self._hash = None

    def __repr__(self) -> str:
        """String representation of blob."""
        size = len(self.data)
        return f"Blob(hash={self.hash[:7]}, size={size})"
