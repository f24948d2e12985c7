"""Configuration tests."""

import pytest
from gitlet.core.config import Config, split_key
from gitlet.core.errors import InvalidConfigError


@pytest.fixture
def config(tmp_path):
    """Config with repo and global files under tmp_path."""
    return Config(tmp_path / 'repo-config', global_config_path=tmp_path / 'global-config')


def test_builtin_defaults(config):
    """Test built-in defaults apply when nothing is configured."""
    assert config.get('core', 'defaultbranch') == 'master'
    assert config.get('core', 'initialmessage') == 'initial commit'
    assert config.get_bool('rm', 'deletefile') is True
    assert config.get('user', 'name') is None


def test_repo_overrides_global(config):
    """Test repository values take precedence over global ones."""
    config.set('core', 'defaultbranch', 'trunk', global_config=True)
    assert config.get('core', 'defaultbranch') == 'trunk'

    config.set('core', 'defaultbranch', 'main')
    assert config.get('core', 'defaultbranch') == 'main'


def test_environment_overrides_files(config, monkeypatch):
    """Test GITLET_<SECTION>_<KEY> wins over files."""
    config.set('rm', 'deletefile', 'true')
    monkeypatch.setenv('GITLET_RM_DELETEFILE', 'no')
    assert config.get_bool('rm', 'deletefile') is False


def test_fallback(config):
    """Test explicit fallback beats built-in defaults."""
    assert config.get('core', 'defaultbranch', fallback='dev') == 'dev'


def test_get_bool_invalid(tmp_path, config):
    """Test non-boolean values already on disk are rejected."""
    (tmp_path / 'repo-config').write_text('[rm]\ndeletefile = sometimes\n')
    with pytest.raises(InvalidConfigError):
        config.get_bool('rm', 'deletefile')


def test_get_bool_invalid_from_environment(config, monkeypatch):
    """Test environment overrides are validated too."""
    monkeypatch.setenv('GITLET_RM_DELETEFILE', 'maybe')
    with pytest.raises(InvalidConfigError):
        config.get_bool('rm', 'deletefile')


def test_set_rejects_non_boolean(tmp_path, config):
    """Test boolean options refuse other values and nothing is written."""
    with pytest.raises(InvalidConfigError):
        config.set('rm', 'deletefile', 'sometimes')
    assert not (tmp_path / 'repo-config').exists()

    config.set('rm', 'deletefile', 'off')
    assert config.get_bool('rm', 'deletefile') is False


def test_set_persists(tmp_path, config):
    """Test values written by one instance are read by another."""
    config.set('user', 'name', 'Ada')
    fresh = Config(tmp_path / 'repo-config', global_config_path=tmp_path / 'global-config')
    assert fresh.get('user', 'name') == 'Ada'


def test_set_without_repo():
    """Test repository writes need a repository config path."""
    with pytest.raises(ValueError):
        Config().set('core', 'x', 'y')


def test_list_all(config):
    """Test listing marks global values."""
    config.set('user', 'name', 'Ada', global_config=True)
    config.set('rm', 'deletefile', 'false')
    values = config.list_all()
    assert values['user'] == {'name (global)': 'Ada'}
    assert values['rm'] == {'deletefile': 'false'}
    assert 'rm' not in config.list_all(global_only=True)


def test_split_key():
    """Test dotted keys split into section and option."""
    assert split_key('rm.deletefile') == ('rm', 'deletefile')
    assert split_key('defaultbranch') == ('core', 'defaultbranch')
