"""Status command - show branches, staging area and working tree state."""

import click
from colorama import Fore, Style
from gitlet.core.repository import Repository, StatusReport
from gitlet.core.errors import GitletError, NotInitializedError
from gitlet.cli.output import error, section


def render_status(report: StatusReport) -> list:
    """Render a status report as output lines."""
    lines = [section("Branches")]
    for branch in report.branches:
        if branch == report.current_branch:
            lines.append(f"{Fore.GREEN}*{branch}{Style.RESET_ALL}")
        else:
            lines.append(branch)
    lines.append('')

    lines.append(section("Staged Files"))
    lines.extend(f"{Fore.GREEN}{path}{Style.RESET_ALL}" for path in report.staged)
    lines.append('')

    lines.append(section("Removed Files"))
    lines.extend(f"{Fore.RED}{path}{Style.RESET_ALL}" for path in report.removed)
    lines.append('')

    lines.append(section("Modifications Not Staged For Commit"))
    lines.extend(f"{Fore.YELLOW}{path} ({kind}){Style.RESET_ALL}" for path, kind in report.modified)
    lines.append('')

    lines.append(section("Untracked Files"))
    lines.extend(report.untracked)
    lines.append('')

    return lines


@click.command('status')
def status_cmd():
    """
    Show the repository status.

    Displays:
    - Branches (current branch marked with *)
    - Files staged for addition
    - Files staged for removal
    - Modifications not staged for commit
    - Untracked files

    Examples:
        gitlet status
    """
    repo = Repository.find_repository()
    if not repo:
        click.echo(error(NotInitializedError.message))
        raise click.Abort()

    try:
        report = repo.status()
    except GitletError as e:
        click.echo(error(str(e)))
        raise click.Abort()

    for line in render_status(report):
        click.echo(line)
