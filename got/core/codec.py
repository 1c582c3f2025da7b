"""Object record codec and kind registry.

An object record is the canonical byte encoding used both for hashing
and for storage:

    <kind> SP <length in decimal> NUL <payload>

The kind must be registered. The length is the exact byte count of the
payload written in canonical decimal, and nothing follows the payload.
"""

import io
from typing import BinaryIO, Dict, Tuple, Type

from .errors import UnknownKindError, MalformedLengthError, LengthMismatchError

# Longest kind tag / length field accepted before giving up on a separator.
MAX_KIND_LENGTH = 32
MAX_LENGTH_DIGITS = 20

_KINDS: Dict[str, Type] = {}


def _valid_tag(kind) -> bool:
    # Printable ASCII without spaces; the decoder reads tags back as ASCII.
    if not isinstance(kind, str) or not kind:
        return False
    if not (kind.isascii() and kind.isprintable()) or ' ' in kind:
        return False
    return len(kind.encode('ascii')) <= MAX_KIND_LENGTH


def register_kind(cls):
    """
    Class decorator registering an object kind.

    The class must define a ``kind`` attribute and implement
    ``serialize()`` / ``deserialize(data)``.
    """
    kind = cls.kind
    if not _valid_tag(kind):
        raise ValueError(f"Invalid kind tag: {kind!r}")
    if kind in _KINDS and _KINDS[kind] is not cls:
        raise ValueError(f"Kind {kind!r} already registered to {_KINDS[kind].__name__}")
    _KINDS[kind] = cls
    return cls


def get_kind(kind: str) -> Type:
    """Return the class registered for kind, or raise UnknownKindError."""
    try:
        return _KINDS[kind]
    except KeyError:
        raise UnknownKindError(kind) from None


def is_registered(kind: str) -> bool:
    return kind in _KINDS


def registered_kinds() -> list:
    return sorted(_KINDS)


def encode(kind: str, payload: bytes) -> bytes:
    """
    Build the object record for a payload.

    Args:
        kind: Registered kind tag
        payload: Serialized object content

    Returns:
        bytes: <kind> <size>\\0<payload>
    """
    if not is_registered(kind):
        raise UnknownKindError(kind)
    header = f"{kind} {len(payload)}\0".encode()
    return header + bytes(payload)


def _read_until(reader: BinaryIO, sep: bytes, limit: int) -> Tuple[bytes, bool]:
    """Read byte by byte up to sep. Returns (data, found)."""
    buf = bytearray()
    while len(buf) <= limit:
        byte = reader.read(1)
        if not byte:
            return bytes(buf), False
        if byte == sep:
            return bytes(buf), True
        buf += byte
    return bytes(buf), False


def _parse_length(raw: bytes) -> int:
    if not raw or not raw.isdigit() or (len(raw) > 1 and raw.startswith(b'0')):
        raise MalformedLengthError(raw)
    return int(raw)


def decode(reader: BinaryIO) -> Tuple[str, bytes]:
    """
    Decode an object record from a binary stream.

    The stream is consumed sequentially and is never seeked.

    Args:
        reader: Readable binary stream positioned at the record start

    Returns:
        (kind, payload)

    Raises:
        UnknownKindError: Tag missing or not registered
        MalformedLengthError: Length field missing or not canonical decimal
        LengthMismatchError: Payload shorter or longer than declared
    """
    raw_kind, found = _read_until(reader, b' ', MAX_KIND_LENGTH)
    kind = raw_kind.decode('ascii', errors='replace')
    if not found or not is_registered(kind):
        raise UnknownKindError(kind)

    raw_length, found = _read_until(reader, b'\0', MAX_LENGTH_DIGITS)
    if not found:
        raise MalformedLengthError(raw_length)
    size = _parse_length(raw_length)

    chunks = []
    remaining = size
    while remaining:
        chunk = reader.read(remaining)
        if not chunk:
            break
        chunks.append(chunk)
        remaining -= len(chunk)
    payload = b''.join(chunks)

    if remaining:
        raise LengthMismatchError(size, len(payload))
    extra = reader.read(1)
    if extra:
        extra += reader.read()
        raise LengthMismatchError(size, size + len(extra), trailing=True)

    return kind, payload


def decode_bytes(data: bytes) -> Tuple[str, bytes]:
    """Decode an object record held in memory."""
    return decode(io.BytesIO(data))
