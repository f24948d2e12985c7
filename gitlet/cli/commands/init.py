"""Initialize a new Gitlet repository."""

import click
from pathlib import Path
from gitlet.core.repository import Repository
from gitlet.core.errors import GitletError
from gitlet.cli.output import success, error, info


@click.command('init')
@click.argument('path', default='.')
def init_cmd(path):
    """
    Initialize a new Gitlet repository.

    Creates a .gitlet directory holding the store, the staging area and
    the configuration, with a root commit on the default branch.

    Examples:
        gitlet init                 # Initialize in current directory
        gitlet init my-project      # Initialize in my-project directory
    """
    repo_path = Path(path).resolve()

    if not repo_path.exists():
        repo_path.mkdir(parents=True)
        click.echo(info(f"Created directory {repo_path}"))

    repo = Repository(str(repo_path))

    try:
        repo.init()
    except GitletError as e:
        click.echo(error(str(e)))
        raise click.Abort()
    except PermissionError:
        click.echo(error(f"Permission denied: Cannot create repository at {path}"))
        raise click.Abort()

    store = repo.load_store()
    click.echo(success(f"Initialized empty Gitlet repository in {repo.gitlet_dir}"))
    click.echo(info(f"On branch {store.head} at {store.tip()[:7]}"))
