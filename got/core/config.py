"""Configuration management for Got.

The repository metadata file (.got/config) is stored in INI format,
similar to Git. Got itself only seeds and reads the [core] flags; any
other sections are carried along untouched.
"""

import io
import os
import configparser
from pathlib import Path
from typing import Optional, Dict

from .fileutil import atomic_write

DEFAULT_CORE = {
    'repositoryformatversion': '0',
    'filemode': 'false',
    'bare': 'false',
}


def default_config() -> configparser.ConfigParser:
    """Build the configuration written by a fresh init."""
    config = configparser.ConfigParser()
    config.add_section('core')
    for key, value in DEFAULT_CORE.items():
        config.set('core', key, value)
    return config


def render_config(config: configparser.ConfigParser) -> str:
    """Serialize a ConfigParser to INI text."""
    buf = io.StringIO()
    config.write(buf)
    return buf.getvalue()


class Config:
    """
    Manages the repository metadata file.

    Environment variables (GOT_<SECTION>_<KEY>) take precedence over
    values stored in the file.
    """

    def __init__(self, config_path: Path):
        """
        Initialize Config manager.

        Args:
            config_path: Path to the repository config file
        """
        self.config_path = Path(config_path)
        self._config = None

    @property
    def parser(self) -> configparser.ConfigParser:
        """
        Load and return the parsed configuration.

        Raises:
            configparser.Error: If the file is not valid INI
        """
        if self._config is None:
            config = configparser.ConfigParser()
            if self.config_path.exists():
                config.read_string(self.config_path.read_text(), source=str(self.config_path))
            self._config = config
        return self._config

    def get(self, section: str, key: str, fallback: Optional[str] = None) -> Optional[str]:
        """
        Get a configuration value.

        Priority order (highest to lowest):
        1. Environment variables (GOT_<SECTION>_<KEY>)
        2. Repository config
        3. Fallback value

        Args:
            section: Config section (e.g., 'core')
            key: Config key (e.g., 'bare')
            fallback: Default value if not found

        Returns:
            Configuration value or fallback
        """
        env_key = f"GOT_{section.upper()}_{key.upper()}"
        env_value = os.environ.get(env_key)
        if env_value is not None:
            return env_value

        if self.parser.has_option(section, key):
            return self.parser.get(section, key)

        return fallback

    def get_boolean(self, section: str, key: str, fallback: bool = False) -> bool:
        """Get a configuration value interpreted as a boolean."""
        value = self.get(section, key)
        if value is None:
            return fallback
        try:
            return self.parser.BOOLEAN_STATES[value.strip().lower()]
        except KeyError:
            raise ValueError(f"Not a boolean value for {section}.{key}: {value!r}")

    def set(self, section: str, key: str, value: str) -> None:
        """
        Set a configuration value and persist the file atomically.

        Args:
            section: Config section
            key: Config key
            value: Value to set
        """
        config = self.parser
        if not config.has_section(section):
            config.add_section(section)

        config.set(section, key, value)
        self.save()

    def unset(self, section: str, key: str) -> bool:
        """
        Remove a configuration value.

        Returns:
            True if value was removed, False if it didn't exist
        """
        config = self.parser
        if not config.has_option(section, key):
            return False

        config.remove_option(section, key)

        # Remove empty sections
        if not config.options(section):
            config.remove_section(section)

        self.save()
        return True

    def save(self) -> None:
        """Write the current configuration to disk."""
        atomic_write(self.config_path, render_config(self.parser))

    def list_all(self) -> Dict[str, Dict[str, str]]:
        """
        List all configuration values.

        Returns:
            Dict of sections to key-value dicts
        """
        return {
            section: dict(self.parser.items(section))
            for section in self.parser.sections()
        }

    @property
    def format_version(self) -> int:
        """Repository format version from [core]."""
        return int(self.get('core', 'repositoryformatversion', '0'))

    @property
    def is_bare(self) -> bool:
        """Whether the repository is flagged as bare."""
        return self.get_boolean('core', 'bare')
