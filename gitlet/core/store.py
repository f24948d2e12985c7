"""Branch and commit store for Gitlet."""

import json
import os
import tempfile
import zlib
from pathlib import Path
from typing import Dict, Iterator, List, Optional
from loguru import logger
from gitlet.core.errors import CorruptStoreError
from gitlet.core.objects import Commit


STORE_VERSION = 1


def atomic_write(path: Path, data: bytes) -> None:
    """
    Write data to path via a temporary file and rename.

    Readers see either the old file or the new one, never a partial write.
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    fd, tmp_name = tempfile.mkstemp(dir=str(path.parent), prefix=f'.{path.name}.')
    try:
        with os.fdopen(fd, 'wb') as f:
            f.write(data)
        os.replace(tmp_name, path)
    except BaseException:
        if os.path.exists(tmp_name):
            os.unlink(tmp_name)
        raise


class RepositoryStore:
    """
    Persisted branch pointers and the set of known commits.

    Holds:
    - branches: branch name -> tip commit digest
    - commits: digest -> Commit if resident, None if not yet loaded
    - head: name of the active branch

    Branches and commit digests are stored in store.json as two explicit
    collections. Commit bodies live in the objects directory, addressed by
    digest, and are only read when first needed.
    """

    def __init__(self, gitlet_dir: Path):
        """
        Initialize store.

        Args:
            gitlet_dir: Path to the .gitlet directory
        """
        self.gitlet_dir = Path(gitlet_dir)
        self.store_file = self.gitlet_dir / 'store.json'
        self.objects_dir = self.gitlet_dir / 'objects'
        self.branches: Dict[str, str] = {}
        self.commits: Dict[str, Optional[Commit]] = {}
        self.head: Optional[str] = None

    def object_path(self, digest: str) -> Path:
        """
        Get filesystem path for a commit object.

        Objects are stored in subdirectories named by the first 2 characters
        of the digest, with the remaining 38 characters as the filename.
        """
        return self.objects_dir / digest[:2] / digest[2:]

    def load(self) -> 'RepositoryStore':
        """
        Read branches and commit digests from disk.

        A missing store file leaves the store empty. Commits are registered
        as placeholders and loaded on demand by get_commit().

        Returns:
            RepositoryStore: self for method chaining

        Raises:
            CorruptStoreError: If the store file cannot be decoded
        """
        self.branches = {}
        self.commits = {}
        self.head = None

        if not self.store_file.exists():
            logger.debug("No store at {}, starting empty", self.store_file)
            return self

        try:
            data = json.loads(self.store_file.read_text(encoding='utf-8'))
        except (UnicodeDecodeError, ValueError) as e:
            raise CorruptStoreError(f"Cannot decode {self.store_file}: {e}") from e

        if not isinstance(data, dict) or data.get('version') != STORE_VERSION:
            raise CorruptStoreError(f"Unsupported store format in {self.store_file}")

        branches = data.get('branches')
        commits = data.get('commits')
        head = data.get('head')

        if not isinstance(branches, dict) or not isinstance(commits, list):
            raise CorruptStoreError(f"Malformed store in {self.store_file}")
        if not all(isinstance(k, str) and isinstance(v, str) for k, v in branches.items()):
            raise CorruptStoreError("Branch entries must map names to digests")
        if not all(isinstance(d, str) for d in commits):
            raise CorruptStoreError("Commit entries must be digests")
        if head is not None and not isinstance(head, str):
            raise CorruptStoreError("Active branch must be a branch name")
        if head is not None and head not in branches:
            raise CorruptStoreError(f"Active branch '{head}' does not exist")

        known = set(commits)
        for name, digest in branches.items():
            if digest not in known:
                raise CorruptStoreError(f"Branch '{name}' points to unknown commit {digest}")

        self.branches = dict(branches)
        self.commits = {digest: None for digest in commits}
        self.head = head

        logger.debug("Loaded {} branch(es) and {} commit(s)", len(self.branches), len(self.commits))
        return self

    def save(self) -> None:
        """
        Write resident commits and the branch/commit index to disk.

        Raises:
            ValueError: If a branch tip or a parent link is not a known commit
        """
        self.validate()

        for digest, commit in self.commits.items():
            if commit is not None:
                self._write_object(digest, commit)

        data = {
            'version': STORE_VERSION,
            'head': self.head,
            'branches': dict(sorted(self.branches.items())),
            'commits': sorted(self.commits),
        }
        atomic_write(self.store_file, json.dumps(data, indent=2).encode('utf-8'))
        logger.debug("Saved {} branch(es) and {} commit(s)", len(self.branches), len(self.commits))

    def validate(self) -> None:
        """
        Check that no branch or resident commit points outside the store.

        Raises:
            ValueError: On the first dangling reference found
        """
        if self.head is not None and self.head not in self.branches:
            raise ValueError(f"Active branch '{self.head}' does not exist")

        for name, digest in self.branches.items():
            if digest not in self.commits:
                raise ValueError(f"Branch '{name}' points to unknown commit {digest}")

        for digest, commit in self.commits.items():
            if commit is not None and commit.parent is not None and commit.parent not in self.commits:
                raise ValueError(f"Commit {digest[:7]} has unknown parent {commit.parent}")

    def _write_object(self, digest: str, commit: Commit) -> None:
        path = self.object_path(digest)

        # Object already exists
        if path.exists():
            return

        data = commit.serialize()
        header = f"{commit.type} {len(data)}\0".encode()
        atomic_write(path, zlib.compress(header + data))

    def _read_object(self, digest: str) -> Commit:
        path = self.object_path(digest)

        if not path.exists():
            raise CorruptStoreError(f"Commit {digest} is missing from the object store")

        try:
            content = zlib.decompress(path.read_bytes())
            null_idx = content.index(b'\0')
            obj_type, size_str = content[:null_idx].decode().split(' ', 1)
            data = content[null_idx + 1:]
            if obj_type != Commit.type or int(size_str) != len(data):
                raise ValueError(f"bad header {content[:null_idx]!r}")
            commit = Commit.deserialize(data)
        except (zlib.error, ValueError) as e:
            raise CorruptStoreError(f"Cannot decode commit {digest}: {e}") from e

        if commit.digest != digest:
            raise CorruptStoreError(f"Commit {digest} does not match its content")

        return commit

    def get_commit(self, digest: str) -> Commit:
        """
        Get a commit, loading it from disk on first access.

        Args:
            digest: Commit digest

        Returns:
            Commit: The resident commit

        Raises:
            KeyError: If digest is not a known commit
            CorruptStoreError: If the stored object is missing or damaged
        """
        commit = self.commits[digest]
        if commit is None:
            commit = self._read_object(digest)
            self.commits[digest] = commit
            logger.debug("Loaded commit {}", digest[:7])
        return commit

    def add_commit(self, commit: Commit) -> str:
        """
        Register a commit as known and resident.

        Args:
            commit: Commit to register

        Returns:
            str: Digest of the commit

        Raises:
            ValueError: If the commit's parent is not a known commit, or a
                second parentless commit is added
        """
        if commit.parent is None:
            if self.commits and commit.digest not in self.commits:
                raise ValueError("Only the root commit may have no parent")
        elif commit.parent not in self.commits:
            raise ValueError(f"Unknown parent commit {commit.parent}")

        digest = commit.digest
        self.commits[digest] = commit
        return digest

    def set_branch(self, name: str, digest: str) -> None:
        """
        Create a branch or move its tip.

        Raises:
            ValueError: If digest is not a known commit
        """
        if digest not in self.commits:
            raise ValueError(f"Unknown commit {digest}")
        self.branches[name] = digest

    def remove_branch(self, name: str) -> bool:
        """
        Delete a branch pointer. Commits are never deleted.

        Returns:
            True if deleted, False if not found or currently active
        """
        if name == self.head or name not in self.branches:
            return False
        del self.branches[name]
        return True

    def list_branches(self) -> List[str]:
        """Branch names in sorted order."""
        return sorted(self.branches)

    def tip(self, branch: Optional[str] = None) -> Optional[str]:
        """
        Get the tip digest of a branch.

        Args:
            branch: Branch name (defaults to the active branch)

        Returns:
            Commit digest or None if the branch doesn't exist
        """
        name = branch if branch is not None else self.head
        if name is None:
            return None
        return self.branches.get(name)

    def tip_commit(self, branch: Optional[str] = None) -> Optional[Commit]:
        """Get the tip commit of a branch (defaults to the active branch)."""
        digest = self.tip(branch)
        if digest is None:
            return None
        return self.get_commit(digest)

    def history(self, digest: str) -> Iterator[Commit]:
        """
        Walk parent links starting at digest, newest first.

        Yields:
            Commit objects down to and including the root commit
        """
        current: Optional[str] = digest
        while current is not None:
            commit = self.get_commit(current)
            yield commit
            current = commit.parent

    def __repr__(self) -> str:
        """String representation."""
        return f"RepositoryStore(branches={len(self.branches)}, commits={len(self.commits)})"
