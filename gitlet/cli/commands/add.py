"""Add command - stage a file for commit."""

import click
from pathlib import Path
from gitlet.core.repository import Repository
from gitlet.core.errors import GitletError, NotInitializedError
from gitlet.cli.output import success, error


@click.command('add')
@click.argument('path')
def add_cmd(path):
    """
    Stage a file for the next commit.

    Adding a file that is staged for removal takes it off the removal list.

    Examples:
        gitlet add file.txt
        gitlet add src/main.py
    """
    repo = Repository.find_repository()
    if not repo:
        click.echo(error(NotInitializedError.message))
        raise click.Abort()

    file_path = Path(path)
    if not file_path.is_absolute():
        file_path = Path.cwd() / file_path

    try:
        rel_path = repo.add(file_path)
    except GitletError as e:
        click.echo(error(str(e)))
        raise click.Abort()

    click.echo(success(f"Staged {rel_path}"))
