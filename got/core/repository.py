"""Repository management for Got."""

import configparser
import contextlib
import logging
import shutil
import tempfile
from pathlib import Path
from typing import Union

from .config import Config, default_config, render_config
from .errors import (
    PathError,
    NotEmptyError,
    TargetNotDirectoryError,
    NotARepositoryError,
    NoRepositoryFoundError,
)
from .fileutil import atomic_write

logger = logging.getLogger(__name__)

GOT_DIR = '.got'
DEFAULT_BRANCH = 'master'
DEFAULT_DESCRIPTION = "Unnamed repository; edit this file 'description' to name the repository.\n"

SUBDIRS = (
    ('branches',),
    ('objects',),
    ('refs', 'tags'),
    ('refs', 'heads'),
)


class Repository:
    """
    Represents a Got repository.

    A repository is a root directory holding the .got storage subtree.
    It knows where things live on disk; reading and writing objects is
    delegated to ObjectStore (see ``repo.objects``).
    """

    def __init__(self, path: Union[str, Path] = '.'):
        """
        Initialize repository handle.

        Nothing is read or created on disk; use init(), load() or find().

        Args:
            path: Path to repository root (defaults to current directory)
        """
        try:
            self.work_tree = Path(path).resolve()
        except (OSError, RuntimeError) as e:
            raise PathError(f"Invalid path {path}: {e}", path) from e
        self.got_dir = self.work_tree / GOT_DIR
        self.objects_dir = self.got_dir / 'objects'
        self.refs_dir = self.got_dir / 'refs'
        self.heads_dir = self.refs_dir / 'heads'
        self.tags_dir = self.refs_dir / 'tags'
        self.branches_dir = self.got_dir / 'branches'
        self.head_file = self.got_dir / 'HEAD'
        self.description_file = self.got_dir / 'description'
        self.config_file = self.got_dir / 'config'

        self._config = None
        self._object_store = None

    @property
    def config(self) -> Config:
        """Repository metadata (.got/config)."""
        if self._config is None:
            self._config = Config(self.config_file)
        return self._config

    @property
    def objects(self):
        """Get ObjectStore instance."""
        if self._object_store is None:
            from .store import ObjectStore
            self._object_store = ObjectStore(self)
        return self._object_store

    def path_to(self, *segments: str) -> Path:
        """
        Join segments onto the .got directory.

        Example: repo.path_to('objects', 'ab') -> <root>/.got/objects/ab
        """
        return self.got_dir.joinpath(*segments)

    def init(self) -> 'Repository':
        """
        Initialize a new repository.

        Creates the .got directory structure:
        .got/
        ├── objects/       # Object database
        ├── refs/
        │   ├── heads/     # Branch references
        │   └── tags/      # Tag references
        ├── branches/
        ├── HEAD           # ref: refs/heads/master
        ├── description
        └── config         # Repository metadata

        The tree is assembled in a temporary directory next to .got and
        renamed into place, so a failed init never leaves a partial .got.

        Returns:
            Repository: self for method chaining

        Raises:
            TargetNotDirectoryError: If the path exists and is a file
            NotEmptyError: If the path is a directory with entries
            PathError: If the path cannot be read or created
        """
        root = self.work_tree
        created_dirs = []

        if root.exists():
            if not root.is_dir():
                raise TargetNotDirectoryError(root)
            try:
                has_entries = any(root.iterdir())
            except OSError as e:
                raise PathError(f"Could not read repository path {root}: {e}", root) from e
            if has_entries:
                raise NotEmptyError(root)
        else:
            # Deepest first, so cleanup can rmdir in order.
            created_dirs = [p for p in (root, *root.parents) if not p.exists()]
            try:
                root.mkdir(parents=True)
            except OSError as e:
                self._remove_created(created_dirs)
                raise PathError(f"Could not create repository at {root}: {e}", root) from e

        try:
            staging = Path(tempfile.mkdtemp(dir=root, prefix=f'{GOT_DIR}-init-'))
        except OSError as e:
            self._remove_created(created_dirs)
            raise PathError(f"Could not write to {root}: {e}", root) from e

        try:
            staging.chmod(0o755)
            for subdir in SUBDIRS:
                staging.joinpath(*subdir).mkdir(parents=True)

            atomic_write(staging / 'description', DEFAULT_DESCRIPTION)
            atomic_write(staging / 'HEAD', f'ref: refs/heads/{DEFAULT_BRANCH}\n')
            atomic_write(staging / 'config', render_config(default_config()))

            staging.rename(self.got_dir)
        except BaseException:
            shutil.rmtree(staging, ignore_errors=True)
            self._remove_created(created_dirs)
            raise

        logger.debug("Initialized repository at %s", self.got_dir)
        self._config = None
        return self

    @staticmethod
    def _remove_created(created_dirs) -> None:
        for directory in created_dirs:
            with contextlib.suppress(OSError):
                directory.rmdir()

    @classmethod
    def load(cls, path: Union[str, Path] = '.') -> 'Repository':
        """
        Open the repository rooted exactly at path.

        Raises:
            NotARepositoryError: If .got or its config is missing or unparsable
        """
        repo = cls(path)
        if not repo.got_dir.is_dir():
            raise NotARepositoryError(repo.work_tree, f"missing {GOT_DIR} directory")
        if not repo.config_file.is_file():
            raise NotARepositoryError(repo.work_tree, "missing config file")

        try:
            parser = repo.config.parser
        except (configparser.Error, UnicodeDecodeError) as e:
            raise NotARepositoryError(repo.work_tree, f"unparsable config: {e}") from e
        if not parser.has_section('core'):
            raise NotARepositoryError(repo.work_tree, "config has no [core] section")

        return repo

    @classmethod
    def find(cls, path: Union[str, Path] = '.') -> 'Repository':
        """
        Find repository by searching up the directory tree.

        Searches from the given path upwards until it finds a .got directory
        or reaches the filesystem root.

        Args:
            path: Starting path for search

        Returns:
            Repository rooted at the first directory containing .got

        Raises:
            NoRepositoryFoundError: If no ancestor holds a repository
        """
        start = cls(path).work_tree
        current = start

        while True:
            if (current / GOT_DIR).is_dir():
                logger.debug("Found repository at %s", current)
                return cls.load(current)

            # Reached filesystem root
            if current == current.parent:
                raise NoRepositoryFoundError(start)

            current = current.parent

    def __repr__(self) -> str:
        """String representation of repository."""
        return f"Repository(path={self.work_tree})"
