"""Config command - manage repository configuration."""

import click
from gitlet.core.repository import Repository
from gitlet.core.config import Config, get_config, split_key
from gitlet.core.errors import GitletError
from gitlet.cli.output import success, error, info


@click.group('config')
def config_cmd():
    """Get and set repository or global options."""
    pass


@config_cmd.command('set')
@click.argument('key')
@click.argument('value')
@click.option('--global', 'is_global', is_flag=True, help='Set global config')
def config_set(key, value, is_global):
    """
    Set a config value.

    Examples:
        gitlet config set rm.deletefile false
        gitlet config set --global core.defaultbranch main
    """
    if is_global:
        config = Config()
    else:
        repo = Repository.find_repository()
        if not repo:
            click.echo(error("Not a gitlet repository (use --global for global config)"))
            raise click.Abort()
        config = repo.config

    section, option = split_key(key)
    try:
        config.set(section, option, value, global_config=is_global)
    except GitletError as e:
        click.echo(error(str(e)))
        raise click.Abort()

    scope = "global" if is_global else "repository"
    click.echo(success(f"Set {scope} config: {key} = {value}"))


@config_cmd.command('get')
@click.argument('key')
def config_get(key):
    """
    Get a config value, falling back to the built-in default.

    Examples:
        gitlet config get core.defaultbranch
    """
    repo = Repository.find_repository()
    config = get_config(repo)

    section, option = split_key(key)
    value = config.get(section, option)

    if value is None:
        click.echo(error(f"Config key not found: {key}"))
        raise click.Abort()

    click.echo(value)


@config_cmd.command('list')
@click.option('--global', 'is_global', is_flag=True, help='List global config only')
def config_list(is_global):
    """
    List all config values.

    Examples:
        gitlet config list
        gitlet config list --global
    """
    repo = None if is_global else Repository.find_repository()
    values = get_config(repo).list_all(global_only=is_global)

    if not values:
        click.echo(info("No configuration set"))
        return

    for section in sorted(values):
        for key, value in values[section].items():
            click.echo(f"  {section}.{key}={value}")
