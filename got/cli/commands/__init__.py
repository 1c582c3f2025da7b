"""CLI commands for Got."""

from got.cli.commands.init import init_cmd
from got.cli.commands.hash_object import hash_object_cmd
from got.cli.commands.cat_file import cat_file_cmd

__all__ = ['init_cmd', 'hash_object_cmd', 'cat_file_cmd']
