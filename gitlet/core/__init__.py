"""Core functionality for Gitlet.

This module contains the core data structures:
- Commit objects and file snapshots
- Branch/commit store
- Staging area
- Repository management
- Configuration management
- Hashing utilities
"""

from gitlet.core.objects import Commit, FileSnapshot
from gitlet.core.repository import Repository, StatusReport
from gitlet.core.hash import hash_object, hash_fields
from gitlet.core.staging import StagingArea
from gitlet.core.store import RepositoryStore
from gitlet.core.config import Config, get_config
from gitlet.core.errors import (GitletError, AlreadyInitializedError, NotInitializedError,
                                FileNotFoundInTreeError, NothingToRemoveError,
                                CorruptStoreError, InvalidConfigError, UnsupportedCommandError)

__all__ = [
    'Commit',
    'FileSnapshot',
    'Repository',
    'StatusReport',
    'StagingArea',
    'RepositoryStore',
    'Config',
    'get_config',
    'hash_object',
    'hash_fields',
    'GitletError',
    'AlreadyInitializedError',
    'NotInitializedError',
    'FileNotFoundInTreeError',
    'NothingToRemoveError',
    'CorruptStoreError',
    'InvalidConfigError',
    'UnsupportedCommandError',
]
