"""Commands that are declared but not available yet."""

import click
from gitlet.core.errors import UnsupportedCommandError
from gitlet.cli.output import error


UNSUPPORTED_COMMANDS = ['commit', 'find', 'checkout', 'branch', 'rm-branch', 'reset', 'merge']


def unsupported_cmd(name: str) -> click.Command:
    """Build a command that reports it is not supported and exits 1."""

    @click.command(name, help=f"Not supported yet ('{name}').",
                   context_settings={'ignore_unknown_options': True})
    @click.argument('args', nargs=-1, type=click.UNPROCESSED)
    def command(args):
        click.echo(error(str(UnsupportedCommandError(name))))
        raise click.Abort()

    return command
