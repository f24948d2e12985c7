"""CLI commands for Gitlet."""

from gitlet.cli.commands.init import init_cmd
from gitlet.cli.commands.add import add_cmd
from gitlet.cli.commands.rm import rm_cmd
from gitlet.cli.commands.status import status_cmd
from gitlet.cli.commands.config import config_cmd
from gitlet.cli.commands.unsupported import UNSUPPORTED_COMMANDS, unsupported_cmd

__all__ = ['init_cmd', 'add_cmd', 'rm_cmd', 'status_cmd', 'config_cmd',
           'UNSUPPORTED_COMMANDS', 'unsupported_cmd']
