"""Exception hierarchy for Got.

Every error raised by the core derives from GotError, grouped by what
went wrong:

- PathError: a filesystem path or hash cannot be used as given
- RepositoryStateError: the repository on disk is not in the expected state
- NotFoundError: a repository or object does not exist
- FormatError: an object record is malformed
- KindMismatchError: an object exists but has a different kind
"""

from pathlib import Path
from typing import Optional, Union


class GotError(Exception):
    """Base class for all Got errors."""


class PathError(GotError):
    """A filesystem path is invalid or unreadable."""

    def __init__(self, message: str, path: Optional[Union[str, Path]] = None):
        super().__init__(message)
        self.path = path


class InvalidHashError(PathError):
    """A string cannot be used as an object hash."""

    def __init__(self, hash: str):
        super().__init__(f"Invalid object hash: {hash!r}")
        self.hash = hash


class RepositoryStateError(GotError):
    """The target of a repository operation is in the wrong state."""

    def __init__(self, message: str, path: Optional[Union[str, Path]] = None):
        super().__init__(message)
        self.path = path


class NotEmptyError(RepositoryStateError):
    """Init target exists and already has entries."""

    def __init__(self, path: Union[str, Path]):
        super().__init__(f"{path} is not empty", path)


class TargetNotDirectoryError(RepositoryStateError):
    """Init target exists and is not a directory."""

    def __init__(self, path: Union[str, Path]):
        super().__init__(f"{path} is not a directory", path)


class NotARepositoryError(RepositoryStateError):
    """Storage subtree or metadata file is missing or unparsable."""

    def __init__(self, path: Union[str, Path], reason: str):
        super().__init__(f"Not a got repository: {path} ({reason})", path)
        self.reason = reason


class NotFoundError(GotError):
    """Something that was looked up does not exist."""


class NoRepositoryFoundError(NotFoundError):
    """No repository in the starting directory or any of its parents."""

    def __init__(self, path: Union[str, Path]):
        super().__init__(f"Could not find a got repository in {path} or any parent directory")
        self.path = path


class ObjectNotFoundError(NotFoundError):
    """No object file at the path derived from a hash."""

    def __init__(self, hash: str, path: Optional[Path] = None):
        super().__init__(f"Object {hash} not found")
        self.hash = hash
        self.path = path


class FormatError(GotError):
    """An object record does not follow the wire format."""


class UnknownKindError(FormatError):
    """Kind tag is not registered."""

    def __init__(self, kind: str):
        super().__init__(f"Unknown object kind: {kind!r}")
        self.kind = kind


class MalformedLengthError(FormatError):
    """Length field is missing, non-numeric or not canonical."""

    def __init__(self, raw: bytes):
        super().__init__(f"Malformed object length: {raw!r}")
        self.raw = raw


class LengthMismatchError(FormatError):
    """Declared length does not match the payload bytes available."""

    def __init__(self, expected: int, actual: int, trailing: bool = False):
        detail = " (trailing data after payload)" if trailing else ""
        super().__init__(f"Object size mismatch: expected {expected} bytes, got {actual}{detail}")
        self.expected = expected
        self.actual = actual
        self.trailing = trailing


class CorruptObjectError(FormatError):
    """Stored object file cannot be decompressed."""

    def __init__(self, hash: str, path: Path):
        super().__init__(f"Object {hash} is corrupt: {path}")
        self.hash = hash
        self.path = path


class KindMismatchError(GotError):
    """Decoded object kind differs from the requested kind."""

    def __init__(self, hash: str, expected: str, actual: str):
        super().__init__(f"Object {hash} is a {actual}, expected {expected}")
        self.hash = hash
        self.expected = expected
        self.actual = actual


class ResolutionNotImplementedError(GotError, NotImplementedError):
    """Name is not a full hash and no other resolution strategy exists."""

    def __init__(self, name: str):
        super().__init__(
            f"Cannot resolve {name!r}: only full 40-character hashes are supported"
        )
        self.name = name
