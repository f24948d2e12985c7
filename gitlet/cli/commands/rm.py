"""Rm command - unstage a file or stage it for removal."""

import click
from pathlib import Path
from gitlet.core.repository import Repository
from gitlet.core.errors import GitletError, NotInitializedError
from gitlet.cli.output import success, error, info


@click.command('rm')
@click.argument('path')
def rm_cmd(path):
    """
    Remove a file from the staging area or from tracking.

    A file staged for addition is unstaged. A file tracked by the current
    commit is staged for removal and deleted from the working directory
    (set rm.deletefile to false to keep it).

    Examples:
        gitlet rm file.txt
    """
    repo = Repository.find_repository()
    if not repo:
        click.echo(error(NotInitializedError.message))
        raise click.Abort()

    file_path = Path(path)
    if not file_path.is_absolute():
        file_path = Path.cwd() / file_path

    try:
        deleted = repo.remove(file_path)
    except GitletError as e:
        click.echo(error(str(e)))
        raise click.Abort()

    click.echo(success(f"Removed {path}"))
    if deleted:
        click.echo(info(f"Deleted {path} from the working directory"))
