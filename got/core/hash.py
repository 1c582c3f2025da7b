"""Hash utilities for Got."""

import hashlib
import re

HASH_LENGTH = 40

_HASH_RE = re.compile(r'^[0-9a-fA-F]{40}$')


def hash_object(data: bytes) -> str:
    """
    Compute SHA-1 hash of data.

    Args:
        data: Bytes to hash

    Returns:
        40-character lowercase hex string
    """
    return hashlib.sha1(data).hexdigest()


def is_full_hash(name: str) -> bool:
    """Return True if name is a complete hex object hash (any case)."""
    return bool(_HASH_RE.match(name))
