"""Configuration management for Gitlet.

This module provides a clean interface for reading and writing
both repository-local and global configuration files.
"""

import os
import configparser
from pathlib import Path
from typing import Optional, Dict
from gitlet.core.errors import InvalidConfigError


DEFAULTS = {
    ('core', 'defaultbranch'): 'master',
    ('core', 'initialmessage'): 'initial commit',
    ('rm', 'deletefile'): 'true',
}

BOOLEAN_KEYS = {('rm', 'deletefile')}


def parse_bool(section: str, key: str, value: str) -> bool:
    """
    Parse a boolean config value.

    Accepts the same spellings as configparser (yes/no, on/off, true/false, 1/0).

    Raises:
        InvalidConfigError: If the value is not a boolean
    """
    states = configparser.ConfigParser.BOOLEAN_STATES
    if value.lower() not in states:
        raise InvalidConfigError(f"Not a boolean for {section}.{key}: {value}")
    return states[value.lower()]


def split_key(key: str):
    """Split 'section.option' into its parts; bare keys go to [core]."""
    return tuple(key.split('.', 1)) if '.' in key else ('core', key)


class Config:
    """
    Manages Gitlet configuration files.

    Configuration is stored in INI format:
    - Global config: ~/.gitletconfig
    - Repository config: .gitlet/config

    Repository config takes precedence over global config.
    Environment variables take highest precedence.
    """

    def __init__(self, repo_config_path: Optional[Path] = None,
                 global_config_path: Optional[Path] = None):
        """
        Initialize Config manager.

        Args:
            repo_config_path: Path to repository config file, if in a repo
            global_config_path: Path to global config (defaults to ~/.gitletconfig)
        """
        self.repo_config_path = repo_config_path
        self.global_config_path = global_config_path or Path.home() / '.gitletconfig'
        self._global_config = None
        self._repo_config = None

    @property
    def global_config(self) -> configparser.ConfigParser:
        """Load and return global configuration."""
        if self._global_config is None:
            self._global_config = configparser.ConfigParser()
            if self.global_config_path.exists():
                self._global_config.read(self.global_config_path)
        return self._global_config

    @property
    def repo_config(self) -> Optional[configparser.ConfigParser]:
        """Load and return repository configuration."""
        if self._repo_config is None and self.repo_config_path:
            self._repo_config = configparser.ConfigParser()
            if self.repo_config_path.exists():
                self._repo_config.read(self.repo_config_path)
        return self._repo_config

    def get(self, section: str, key: str, fallback: Optional[str] = None) -> Optional[str]:
        """
        Get a configuration value.

        Priority order (highest to lowest):
        1. Environment variables (GITLET_<SECTION>_<KEY>)
        2. Repository config
        3. Global config
        4. Fallback value
        5. Built-in default

        Args:
            section: Config section (e.g., 'core', 'rm')
            key: Config key (e.g., 'defaultbranch')
            fallback: Default value if not found

        Returns:
            Configuration value or fallback
        """
        env_key = f"GITLET_{section.upper()}_{key.upper()}"
        env_value = os.environ.get(env_key)
        if env_value is not None:
            return env_value

        if self.repo_config and self.repo_config.has_option(section, key):
            return self.repo_config.get(section, key)

        if self.global_config.has_option(section, key):
            return self.global_config.get(section, key)

        if fallback is not None:
            return fallback
        return DEFAULTS.get((section, key))

    def get_bool(self, section: str, key: str, fallback: bool = False) -> bool:
        """
        Get a boolean configuration value.

        Raises:
            InvalidConfigError: If the stored value is not a boolean
        """
        value = self.get(section, key)
        if value is None:
            return fallback
        return parse_bool(section, key, value)

    def set(self, section: str, key: str, value: str, global_config: bool = False) -> None:
        """
        Set a configuration value.

        Args:
            section: Config section
            key: Config key
            value: Value to set
            global_config: If True, write to global config; otherwise repo config

        Raises:
            InvalidConfigError: If a boolean option is given a non-boolean value
        """
        if (section, key) in BOOLEAN_KEYS:
            parse_bool(section, key, value)

        if global_config:
            config = self.global_config
            config_path = self.global_config_path
        else:
            if not self.repo_config_path:
                raise ValueError("No repository config path available")
            config = self.repo_config
            config_path = self.repo_config_path

        if not config.has_section(section):
            config.add_section(section)

        config.set(section, key, value)

        with open(config_path, 'w') as f:
            config.write(f)

    def list_all(self, global_only: bool = False, repo_only: bool = False) -> Dict[str, Dict[str, str]]:
        """
        List all configuration values.

        Args:
            global_only: Only show global config
            repo_only: Only show repo config

        Returns:
            Dict of sections to key-value dicts
        """
        result = {}

        if not repo_only:
            for section in self.global_config.sections():
                result.setdefault(section, {})
                for key, value in self.global_config.items(section):
                    result[section][f"{key} (global)"] = value

        if not global_only and self.repo_config:
            for section in self.repo_config.sections():
                result.setdefault(section, {})
                for key, value in self.repo_config.items(section):
                    result[section][key] = value

        return result


def get_config(repo=None) -> Config:
    """
    Get a Config instance.

    Args:
        repo: Repository instance, or None for global-only config

    Returns:
        Config instance
    """
    if repo:
        return Config(repo.config_file)
    return Config()
