"""Gitlet - a tiny local version control system."""

from loguru import logger

__version__ = '0.1.0'

# Library code stays quiet until the CLI asks for --verbose
logger.disable('gitlet')

from gitlet.core.repository import Repository
from gitlet.core.objects import Commit, FileSnapshot

__all__ = [
    'Repository',
    'Commit',
    'FileSnapshot',
]
