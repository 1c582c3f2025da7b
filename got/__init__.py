"""Got - A content-addressable object store with a Git-like layout."""

__version__ = '0.1.0'
__author__ = 'Flambeau Iriho'
__email__ = 'irihoflambeau@gmail.com'

from got.core.repository import Repository
from got.core.objects import GotObject, Blob
from got.core.store import (
    ObjectStore,
    locate_repository,
    initialize_repository,
    store_object,
    load_object,
)

__all__ = [
    'Repository',
    'GotObject',
    'Blob',
    'ObjectStore',
    'locate_repository',
    'initialize_repository',
    'store_object',
    'load_object',
]
