"""Repository management for Gitlet."""

import shutil
import time
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, List, Optional, Tuple
from loguru import logger
from .config import Config, get_config
from .errors import (AlreadyInitializedError, NotInitializedError,
                     FileNotFoundInTreeError, NothingToRemoveError)
from .objects import Commit, FileSnapshot
from .staging import StagingArea
from .store import RepositoryStore
from .worktree import relative_path, get_working_files


GITLET_DIR = '.gitlet'


@dataclass
class StatusReport:
    """Snapshot of repository state as shown by 'gitlet status'."""
    current_branch: Optional[str]
    branches: List[str] = field(default_factory=list)
    staged: List[str] = field(default_factory=list)
    removed: List[str] = field(default_factory=list)
    modified: List[Tuple[str, str]] = field(default_factory=list)
    untracked: List[str] = field(default_factory=list)

    @property
    def is_clean(self) -> bool:
        """True when nothing is staged, modified or untracked."""
        return not (self.staged or self.removed or self.modified or self.untracked)


class Repository:
    """
    Represents a Gitlet repository.

    A repository owns the .gitlet directory and implements the user-facing
    operations. Every operation loads the state it needs from disk, works on
    it in memory and writes it back before returning, so a handle carries no
    state between operations.
    """

    def __init__(self, path: str = '.', clock: Optional[Callable[[], float]] = None):
        """
        Initialize repository.

        Args:
            path: Path to repository root (defaults to current directory)
            clock: Returns the current time in seconds (defaults to time.time)
        """
        self.work_tree = Path(path).resolve()
        self.gitlet_dir = self.work_tree / GITLET_DIR
        self.store_file = self.gitlet_dir / 'store.json'
        self.staging_file = self.gitlet_dir / 'staging.json'
        self.config_file = self.gitlet_dir / 'config'
        self.clock = clock or time.time

    @property
    def is_initialized(self) -> bool:
        """Check whether the .gitlet directory holds a persisted store."""
        return self.store_file.is_file()

    @property
    def config(self) -> Config:
        """Get Config for this repository."""
        return get_config(self)

    def _require_initialized(self) -> None:
        if not self.is_initialized:
            raise NotInitializedError()

    def init(self) -> 'Repository':
        """
        Initialize a new repository.

        Creates the .gitlet directory structure:
        .gitlet/
        ├── objects/       # Commit bodies
        ├── store.json     # Branches and known commits
        ├── staging.json   # Staging area
        └── config         # Repository configuration

        The root commit has no parent, no files and the configured initial
        message; the default branch points at it and is made active.

        Returns:
            Repository: self for method chaining

        Raises:
            AlreadyInitializedError: If repository already exists
        """
        if self.gitlet_dir.exists():
            raise AlreadyInitializedError()

        # Repository config does not exist yet: env and global only
        config = get_config()
        branch = config.get('core', 'defaultbranch')
        message = config.get('core', 'initialmessage')

        self.gitlet_dir.mkdir(parents=True)
        try:
            store = RepositoryStore(self.gitlet_dir)
            root = Commit.create(None, message, timestamp=int(self.clock()))
            digest = store.add_commit(root)
            store.set_branch(branch, digest)
            store.head = branch
            store.save()

            StagingArea().write(str(self.staging_file))
            self.config_file.write_text('[core]\n\trepositoryformatversion = 0\n')
        except BaseException:
            shutil.rmtree(self.gitlet_dir, ignore_errors=True)
            raise

        logger.debug("Initialized repository at {} with root {}", self.gitlet_dir, digest[:7])
        return self

    @classmethod
    def find_repository(cls, path: str = '.', clock: Optional[Callable[[], float]] = None) -> Optional['Repository']:
        """
        Find repository by searching up the directory tree.

        Searches from the given path upwards until it finds an initialized
        .gitlet directory or reaches the filesystem root.

        Args:
            path: Starting path for search
            clock: Passed through to the repository

        Returns:
            Repository if found, None otherwise
        """
        current = Path(path).resolve()

        while True:
            repo = cls(str(current), clock=clock)
            if repo.is_initialized:
                return repo

            # Reached filesystem root
            if current == current.parent:
                return None

            current = current.parent

    def load_store(self) -> RepositoryStore:
        """Load the branch/commit store from disk."""
        self._require_initialized()
        return RepositoryStore(self.gitlet_dir).load()

    def load_staging(self) -> StagingArea:
        """Load the staging area from disk."""
        self._require_initialized()
        staging = StagingArea()
        staging.read(str(self.staging_file))
        return staging

    def _relative(self, filepath) -> str:
        rel_path = relative_path(self.work_tree, filepath)
        if rel_path.split('/')[0] == GITLET_DIR:
            raise ValueError(f"{filepath} is inside {GITLET_DIR}")
        return rel_path

    def add(self, filepath) -> str:
        """
        Stage a file for the next commit.

        Args:
            filepath: Path to file (absolute or relative to the work tree)

        Returns:
            str: Repository-relative path that was staged

        Raises:
            NotInitializedError: Outside a repository
            FileNotFoundInTreeError: If the path is not a file in the work tree
        """
        self._require_initialized()

        try:
            rel_path = self._relative(filepath)
        except ValueError:
            raise FileNotFoundInTreeError()

        if not (self.work_tree / rel_path).is_file():
            raise FileNotFoundInTreeError()

        staging = self.load_staging()
        staging.stage_add(rel_path)
        staging.write(str(self.staging_file))

        logger.debug("Staged {} for addition", rel_path)
        return rel_path

    def remove(self, filepath) -> bool:
        """
        Unstage a file, or stage a tracked file for removal.

        A file staged for addition is unstaged. A file tracked by the active
        branch's tip commit is staged for removal and, unless rm.deletefile is
        false, deleted from the work tree. Tracking is decided by path only.

        Args:
            filepath: Path to file (absolute or relative to the work tree)

        Returns:
            bool: True if the working file was deleted

        Raises:
            NotInitializedError: Outside a repository
            NothingToRemoveError: If the file is neither staged nor tracked
        """
        self._require_initialized()

        try:
            rel_path = self._relative(filepath)
        except ValueError:
            raise NothingToRemoveError()

        staging = self.load_staging()
        tip = self.load_store().tip_commit()

        staged = staging.is_staged(rel_path)
        tracked = tip is not None and tip.tracks(rel_path)

        if not staged and not tracked:
            raise NothingToRemoveError()

        delete_file = tracked and self.config.get_bool('rm', 'deletefile', fallback=True)

        if tracked:
            staging.stage_remove(rel_path)
        else:
            staging.unstage(rel_path)

        # Staging is written only once the working file is gone
        target = self.work_tree / rel_path
        deleted = delete_file and (target.is_file() or target.is_symlink())
        if deleted:
            target.unlink()

        staging.write(str(self.staging_file))

        logger.debug("Updated staging for {} (tracked={}, deleted={})", rel_path, tracked, deleted)
        return deleted

    def status(self) -> StatusReport:
        """
        Compute repository status.

        Compares the staging area and the working tree against the tip commit
        of the active branch.

        Returns:
            StatusReport: Sorted branches, staged, removed, modified and
            untracked entries

        Raises:
            NotInitializedError: Outside a repository
        """
        self._require_initialized()

        staging = self.load_staging()
        store = self.load_store()
        tip = store.tip_commit()
        tracked = {s.path: s for s in tip.snapshots} if tip else {}

        modified = {}

        for path, snapshot in tracked.items():
            if path in staging.added or path in staging.removed:
                continue
            if not (self.work_tree / path).is_file():
                modified[path] = 'deleted'
            elif FileSnapshot.from_file(self.work_tree, path) != snapshot:
                modified[path] = 'modified'

        for path in staging.added:
            if not (self.work_tree / path).is_file():
                modified[path] = 'deleted'

        untracked = [
            path for path in get_working_files(self.work_tree)
            if path not in staging.added and (path not in tracked or path in staging.removed)
        ]

        return StatusReport(
            current_branch=store.head,
            branches=store.list_branches(),
            staged=sorted(staging.added),
            removed=sorted(staging.removed),
            modified=sorted(modified.items()),
            untracked=sorted(untracked),
        )

    def __repr__(self) -> str:
        """String representation of repository."""
        return f"Repository(path={self.work_tree})"
