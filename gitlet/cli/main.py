"""Main CLI entry point for Gitlet."""

import sys

import click
from colorama import init
from loguru import logger

from gitlet import __version__
from gitlet.cli.output import BANNER
from gitlet.cli.commands import (init_cmd, add_cmd, rm_cmd, status_cmd, config_cmd,
                                 UNSUPPORTED_COMMANDS, unsupported_cmd)

# Initialize colorama for cross-platform colored output
init(autoreset=True)


class GitletGroup(click.Group):
    """Custom Group class to display banner before help."""

    def format_help(self, ctx, formatter):
        """Override to add banner before help text."""
        click.echo(BANNER)
        super().format_help(ctx, formatter)


@click.group(cls=GitletGroup)
@click.version_option(version=__version__)
@click.option('-v', '--verbose', is_flag=True, help='Print debug logging to stderr')
def cli(verbose):
    if verbose:
        logger.remove()
        logger.add(sys.stderr, level='DEBUG', format='{time:HH:mm:ss} | {level} | {name} - {message}')
        logger.enable('gitlet')


# Register commands
cli.add_command(init_cmd)
cli.add_command(add_cmd)
cli.add_command(rm_cmd)
cli.add_command(status_cmd)
cli.add_command(config_cmd)

for name in UNSUPPORTED_COMMANDS:
    cli.add_command(unsupported_cmd(name))


def main():
    """Main entry point."""
    cli()


if __name__ == '__main__':
    main()
