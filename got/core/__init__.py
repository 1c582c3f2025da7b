"""Core functionality for Got.

This module contains the core data structures:
- Got objects (Blob) and the kind registry
- Object record codec
- Repository management
- Content-addressed object store
- Configuration management
- Hashing utilities
"""

from got.core.objects import GotObject, Blob
from got.core.codec import encode, decode, decode_bytes, register_kind, registered_kinds
from got.core.repository import Repository
from got.core.store import (
    ObjectStore,
    locate_repository,
    initialize_repository,
    store_object,
    load_object,
)
from got.core.hash import hash_object
from got.core.config import Config

__all__ = [
    'GotObject',
    'Blob',
    'encode',
    'decode',
    'decode_bytes',
    'register_kind',
    'registered_kinds',
    'Repository',
    'ObjectStore',
    'locate_repository',
    'initialize_repository',
    'store_object',
    'load_object',
    'Config',
    'hash_object',
]
