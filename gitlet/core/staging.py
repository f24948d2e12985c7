"""Staging area implementation."""

import json
from pathlib import Path
from typing import Set
from loguru import logger
from gitlet.core.errors import CorruptStoreError
from gitlet.core.store import atomic_write


STAGING_VERSION = 1


class StagingArea:
    """
    Gitlet staging area.

    Holds two disjoint path sets describing the delta between the last
    commit and the next one:
    - added: files to include in the next commit
    - removed: files to stop tracking in the next commit

    Staging a path on one side always takes it off the other side.
    """

    def __init__(self):
        """Initialize empty staging area."""
        self.added: Set[str] = set()
        self.removed: Set[str] = set()

    def stage_add(self, path: str) -> None:
        """Mark path for inclusion in the next commit."""
        self.removed.discard(path)
        self.added.add(path)

    def stage_remove(self, path: str) -> None:
        """Mark path for exclusion from the next commit."""
        self.added.discard(path)
        self.removed.add(path)

    def unstage(self, path: str) -> None:
        """Drop a pending addition."""
        self.added.discard(path)

    def is_staged(self, path: str) -> bool:
        """Check if path is staged for addition."""
        return path in self.added

    def clear(self) -> None:
        """Clear both sets."""
        self.added.clear()
        self.removed.clear()

    def write(self, staging_path: str) -> None:
        """
        Write staging area to disk.

        Format (JSON, sorted lists):
        {"version": 1, "added": [...], "removed": [...]}

        Args:
            staging_path: Path to staging file
        """
        data = {
            'version': STAGING_VERSION,
            'added': sorted(self.added),
            'removed': sorted(self.removed),
        }
        atomic_write(Path(staging_path), json.dumps(data, indent=2).encode('utf-8'))
        logger.debug("Saved staging area: {} added, {} removed", len(self.added), len(self.removed))

    def read(self, staging_path: str) -> None:
        """
        Read staging area from disk.

        Args:
            staging_path: Path to staging file

        Raises:
            CorruptStoreError: If the file is malformed or the sets overlap
        """
        path = Path(staging_path)
        if not path.exists():
            self.clear()
            return

        try:
            data = json.loads(path.read_text(encoding='utf-8'))
        except (UnicodeDecodeError, ValueError) as e:
            raise CorruptStoreError(f"Cannot decode {path}: {e}") from e

        if not isinstance(data, dict) or data.get('version') != STAGING_VERSION:
            raise CorruptStoreError(f"Unsupported staging format in {path}")

        added = data.get('added')
        removed = data.get('removed')

        for entries in (added, removed):
            if not isinstance(entries, list) or not all(isinstance(p, str) for p in entries):
                raise CorruptStoreError(f"Malformed staging area in {path}")

        overlap = set(added) & set(removed)
        if overlap:
            raise CorruptStoreError(
                f"Paths staged for both addition and removal: {', '.join(sorted(overlap))}"
            )

        self.added = set(added)
        self.removed = set(removed)
        logger.debug("Loaded staging area: {} added, {} removed", len(self.added), len(self.removed))

    def __len__(self) -> int:
        """Number of staged changes."""
        return len(self.added) + len(self.removed)

    def __repr__(self) -> str:
        """String representation."""
        return f"StagingArea(added={len(self.added)}, removed={len(self.removed)})"
