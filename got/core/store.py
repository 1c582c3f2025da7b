"""Content-addressed object storage for Got.

Objects live under .got/objects/<hash[:2]>/<hash[2:]>. Each file holds
the zlib-compressed object record; the hash is the SHA-1 of the
uncompressed record. Objects are write-once: there is no update and no
delete.
"""

import logging
import zlib
from pathlib import Path
from typing import Optional, Union

from . import codec
from .errors import (
    InvalidHashError,
    ObjectNotFoundError,
    CorruptObjectError,
    KindMismatchError,
    FormatError,
    ResolutionNotImplementedError,
)
from .fileutil import atomic_write
from .hash import hash_object, is_full_hash
from .objects import GotObject
from .repository import Repository

logger = logging.getLogger(__name__)

COMPRESSION_LEVEL = zlib.Z_DEFAULT_COMPRESSION


class ObjectStore:
    """
    Reads and writes objects in a repository.

    The store holds no state besides the repository it points at, so
    any number of instances can be used side by side.
    """

    def __init__(self, repo: Repository):
        self.repo = repo

    def object_path(self, hash: str) -> Path:
        """
        Get filesystem path for an object.

        Objects are stored in subdirectories named by the first 2 characters
        of the hash, with the remaining 38 characters as the filename.

        Raises:
            InvalidHashError: If hash is not a full hex hash
        """
        if not is_full_hash(hash):
            raise InvalidHashError(hash)
        hash = hash.lower()
        return self.repo.path_to('objects', hash[:2], hash[2:])

    def exists(self, hash: str) -> bool:
        return self.object_path(hash).is_file()

    def write_dry(self, kind: str, payload: bytes) -> str:
        """Return the hash write() would produce, without touching disk."""
        return hash_object(codec.encode(kind, payload))

    def write(self, kind: str, payload: bytes) -> str:
        """
        Write an object to the repository.

        If a valid object with the same hash is already stored the write is
        a no-op. A stored file that fails verification is replaced.

        Args:
            kind: Registered kind tag
            payload: Serialized object content

        Returns:
            str: 40-character lowercase hex hash
        """
        record = codec.encode(kind, payload)
        hash = hash_object(record)
        path = self.object_path(hash)

        if path.exists():
            if self._verify(hash, path):
                logger.debug("Object %s already stored, skipped", hash[:7])
                return hash
            logger.warning("Object %s failed verification, rewriting %s", hash[:7], path)

        path.parent.mkdir(parents=True, exist_ok=True)
        atomic_write(path, zlib.compress(record, COMPRESSION_LEVEL))
        logger.debug("Stored %s %s (%d bytes)", kind, hash[:7], len(payload))
        return hash

    def read(self, hash: str, expected_kind: str) -> bytes:
        """
        Read an object's payload.

        Args:
            hash: 40-character hex hash
            expected_kind: Kind the caller asks for

        Returns:
            bytes: Payload

        Raises:
            ObjectNotFoundError: No object stored under hash
            CorruptObjectError: Stored file does not decompress
            FormatError: Stored record is malformed
            KindMismatchError: Stored kind differs from expected_kind
        """
        kind, payload = self._read_record(hash)
        if kind != expected_kind:
            raise KindMismatchError(hash, expected_kind, kind)
        logger.debug("Read %s %s (%d bytes)", kind, hash[:7], len(payload))
        return payload

    def write_object(self, obj: GotObject) -> str:
        """Write a GotObject; returns its hash."""
        return self.write(obj.kind, obj.serialize())

    def read_object(self, hash: str, expected_kind: str) -> GotObject:
        """Read an object and deserialize it into its registered class."""
        payload = self.read(hash, expected_kind)
        obj = codec.get_kind(expected_kind)()
        obj.deserialize(payload)
        return obj

    def resolve(self, name: str) -> str:
        """
        Translate a name into a full object hash.

        Only a literal full hash is understood; it resolves to itself in
        lowercase. Short hashes, branches, tags and symbolic refs are not
        resolved.

        Raises:
            ResolutionNotImplementedError: For anything but a full hash
        """
        if is_full_hash(name):
            return name.lower()
        raise ResolutionNotImplementedError(name)

    def _read_record(self, hash: str):
        path = self.object_path(hash)
        try:
            compressed = path.read_bytes()
        except FileNotFoundError:
            raise ObjectNotFoundError(hash, path) from None

        try:
            record = zlib.decompress(compressed)
        except zlib.error as e:
            raise CorruptObjectError(hash, path) from e

        return codec.decode_bytes(record)

    def _verify(self, hash: str, path: Path) -> bool:
        try:
            record = zlib.decompress(path.read_bytes())
        except zlib.error:
            return False
        if hash_object(record) != hash:
            return False
        try:
            codec.decode_bytes(record)
        except FormatError:
            return False
        return True


def locate_repository(starting_path: Union[str, Path] = '.') -> Repository:
    """Find the repository containing starting_path."""
    return Repository.find(starting_path)


def initialize_repository(path: Union[str, Path]) -> Repository:
    """Create a new repository at path."""
    return Repository(path).init()


def store_object(repo: Optional[Repository], kind: str, payload: bytes, persist: bool) -> str:
    """
    Hash an object and optionally persist it.

    Args:
        repo: Target repository; may be None when persist is False
        kind: Registered kind tag
        payload: Serialized object content
        persist: Write the object to the repository

    Returns:
        str: Object hash
    """
    if not persist:
        return hash_object(codec.encode(kind, payload))
    if repo is None:
        raise ValueError("A repository is required to persist objects")
    return repo.objects.write(kind, payload)


def load_object(repo: Repository, hash: str, expected_kind: str) -> bytes:
    """Read the payload of an object of the given kind."""
    return repo.objects.read(hash, expected_kind)
