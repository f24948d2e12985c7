"""Integration tests for the command surface."""

import sys
import pytest
from click.testing import CliRunner
from loguru import logger
from gitlet.cli.main import cli
from gitlet.cli.commands import UNSUPPORTED_COMMANDS


@pytest.fixture
def restore_logging():
    """Put loguru back to its library defaults after a verbose run."""
    yield
    logger.remove()
    logger.add(sys.stderr)
    logger.disable('gitlet')


@pytest.mark.parametrize('name', UNSUPPORTED_COMMANDS)
def test_unsupported_commands(repo, monkeypatch, name):
    """Test declared commands report that they are not supported."""
    monkeypatch.chdir(repo.work_tree)
    result = CliRunner().invoke(cli, [name, 'some', '--arg'])

    assert result.exit_code == 1
    assert f"'{name}' is not supported yet." in result.output


def test_unknown_command():
    """Test unknown commands are rejected by the dispatcher."""
    result = CliRunner().invoke(cli, ['frobnicate'])
    assert result.exit_code != 0
    assert 'No such command' in result.output


def test_help_lists_commands():
    """Test help shows the banner and registered commands."""
    result = CliRunner().invoke(cli, ['--help'])
    assert result.exit_code == 0
    for name in ('init', 'add', 'rm', 'status', 'config', 'commit'):
        assert name in result.output


def test_version():
    """Test version option."""
    result = CliRunner().invoke(cli, ['--version'])
    assert '0.1.0' in result.output


def test_verbose_status(repo, monkeypatch, restore_logging):
    """Test --verbose still runs the command."""
    monkeypatch.chdir(repo.work_tree)
    result = CliRunner().invoke(cli, ['-v', 'status'])
    assert result.exit_code == 0
    assert '*master' in result.output
