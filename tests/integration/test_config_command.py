"""Integration tests for config command."""

import pytest
from click.testing import CliRunner
from gitlet.cli.main import cli


class TestConfigCommand:
    """Tests for gitlet config command."""

    def test_config_set_local(self, repo, monkeypatch):
        """Test setting a local config value."""
        monkeypatch.chdir(repo.work_tree)
        runner = CliRunner()

        result = runner.invoke(cli, ['config', 'set', 'rm.deletefile', 'false'])
        assert result.exit_code == 0
        assert 'repository config' in result.output

        result = runner.invoke(cli, ['config', 'get', 'rm.deletefile'])
        assert result.output.strip() == 'false'

    def test_config_get_default(self, repo, monkeypatch):
        """Test built-in defaults are reported."""
        monkeypatch.chdir(repo.work_tree)
        result = CliRunner().invoke(cli, ['config', 'get', 'core.defaultbranch'])
        assert result.output.strip() == 'master'

    def test_config_get_nonexistent(self, repo, monkeypatch):
        """Test getting a nonexistent config value."""
        monkeypatch.chdir(repo.work_tree)
        result = CliRunner().invoke(cli, ['config', 'get', 'nonexistent.key'])
        assert result.exit_code == 1
        assert 'Config key not found' in result.output

    def test_config_set_local_outside_repo(self, temp_dir, monkeypatch):
        """Test local set needs a repository."""
        monkeypatch.chdir(temp_dir)
        result = CliRunner().invoke(cli, ['config', 'set', 'user.name', 'Ada'])
        assert result.exit_code == 1
        assert 'Not a gitlet repository' in result.output

    def test_config_global(self, temp_dir, monkeypatch, isolated_config):
        """Test global config flag writes the home config."""
        monkeypatch.chdir(temp_dir)
        runner = CliRunner()

        result = runner.invoke(cli, ['config', 'set', '--global', 'user.name', 'Global User'])
        assert result.exit_code == 0
        assert 'Global User' in (isolated_config / '.gitletconfig').read_text()

        result = runner.invoke(cli, ['config', 'list', '--global'])
        assert 'user.name (global)=Global User' in result.output

    def test_config_list_empty(self, temp_dir, monkeypatch):
        """Test listing with nothing configured."""
        monkeypatch.chdir(temp_dir)
        result = CliRunner().invoke(cli, ['config', 'list'])
        assert result.exit_code == 0
        assert 'No configuration set' in result.output

    def test_rm_respects_config(self, repo_with_tracked, monkeypatch):
        """Test rm keeps the working file when rm.deletefile is false."""
        repo = repo_with_tracked
        monkeypatch.chdir(repo.work_tree)
        runner = CliRunner()

        runner.invoke(cli, ['config', 'set', 'rm.deletefile', 'false'])
        result = runner.invoke(cli, ['rm', 'tracked.txt'])

        assert result.exit_code == 0
        assert (repo.work_tree / 'tracked.txt').exists()
        assert repo.load_staging().removed == {'tracked.txt'}

    def test_config_set_rejects_non_boolean(self, repo, monkeypatch):
        """Test boolean options only accept boolean spellings."""
        monkeypatch.chdir(repo.work_tree)
        result = CliRunner().invoke(cli, ['config', 'set', 'rm.deletefile', 'maybe'])

        assert result.exit_code == 1
        assert 'Not a boolean for rm.deletefile: maybe' in result.output
        assert 'deletefile' not in repo.config_file.read_text()

    def test_rm_reports_bad_config(self, repo_with_tracked, monkeypatch):
        """Test a bad rm.deletefile value is reported and nothing changes."""
        repo = repo_with_tracked
        monkeypatch.chdir(repo.work_tree)
        with open(repo.config_file, 'a') as f:
            f.write('[rm]\ndeletefile = maybe\n')

        result = CliRunner().invoke(cli, ['rm', 'tracked.txt'])

        assert result.exit_code == 1
        assert 'Not a boolean for rm.deletefile: maybe' in result.output
        assert (repo.work_tree / 'tracked.txt').exists()
        assert repo.load_staging().removed == set()
