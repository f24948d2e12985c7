"""Commit objects for Gitlet."""

import json
import time
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Iterable, Optional, Tuple
from .hash import hash_fields


@dataclass(frozen=True)
class FileSnapshot:
    """
    Full contents of one file at the moment a commit was created.

    Paths are relative to the repository root and use '/' separators.
    """
    path: str
    content: str

    def canonical(self) -> str:
        """
        Return the string form this snapshot contributes to a commit digest.

        The path is length-prefixed so no (path, content) pair can be
        mistaken for another.
        """
        return f"{len(self.path)}:{self.path}{self.content}"

    @classmethod
    def from_file(cls, root: Path, rel_path: str) -> 'FileSnapshot':
        """
        Create snapshot from a working-tree file.

        Args:
            root: Repository root
            rel_path: Path relative to root

        Returns:
            FileSnapshot: New snapshot holding the file's text
        """
        content = (root / rel_path).read_text(encoding='utf-8', errors='replace')
        return cls(rel_path, content)

    def __repr__(self) -> str:
        """String representation."""
        return f"FileSnapshot({self.path}, size={len(self.content)})"


@dataclass(frozen=True)
class Commit:
    """
    Represents one immutable commit.

    A commit captures:
    - Parent commit digest (None only for the root commit)
    - Timestamp (seconds since the epoch)
    - Commit message
    - Snapshots of every tracked file, held in path order

    The digest is recomputed from these fields on every access and is
    never stored alongside them.
    """
    parent: Optional[str]
    timestamp: int
    message: str
    snapshots: Tuple[FileSnapshot, ...] = field(default=())

    type = 'commit'

    def __post_init__(self):
        ordered = tuple(sorted(self.snapshots, key=lambda s: s.path))
        paths = [s.path for s in ordered]
        if len(paths) != len(set(paths)):
            raise ValueError("Commit cannot hold two snapshots of the same path")
        object.__setattr__(self, 'snapshots', ordered)

    @property
    def digest(self) -> str:
        """
        Get commit digest.

        Hashes (parent, timestamp, message, snapshot...) in that order.

        Returns:
            str: 40-character SHA-1 hash
        """
        return hash_fields(
            self.parent,
            str(self.timestamp),
            self.message,
            *(snapshot.canonical() for snapshot in self.snapshots)
        )

    @property
    def files(self) -> Dict[str, str]:
        """Map of tracked path to content."""
        return {s.path: s.content for s in self.snapshots}

    def tracks(self, path: str) -> bool:
        """Check whether this commit holds a snapshot of path."""
        return any(s.path == path for s in self.snapshots)

    def snapshot(self, path: str) -> Optional[FileSnapshot]:
        """Get the snapshot of path, or None if untracked."""
        for s in self.snapshots:
            if s.path == path:
                return s
        return None

    def serialize(self) -> bytes:
        """
        Serialize commit to JSON bytes.

        Returns:
            bytes: UTF-8 encoded JSON body
        """
        body = {
            'parent': self.parent,
            'timestamp': self.timestamp,
            'message': self.message,
            'snapshots': [{'path': s.path, 'content': s.content} for s in self.snapshots],
        }
        return json.dumps(body, ensure_ascii=False).encode('utf-8')

    @classmethod
    def deserialize(cls, data: bytes) -> 'Commit':
        """
        Deserialize commit from JSON bytes.

        Args:
            data: Serialized commit data

        Returns:
            Commit: Decoded commit

        Raises:
            ValueError: If the body is not a well-formed commit
        """
        try:
            body = json.loads(data.decode('utf-8'))
            parent = body['parent']
            timestamp = body['timestamp']
            message = body['message']
            snapshots = [FileSnapshot(s['path'], s['content']) for s in body['snapshots']]
        except (UnicodeDecodeError, KeyError, TypeError) as e:
            raise ValueError(f"Invalid commit body: {e}") from e

        if parent is not None and not isinstance(parent, str):
            raise ValueError("Invalid commit parent")
        if not isinstance(timestamp, int) or not isinstance(message, str):
            raise ValueError("Invalid commit header")
        if not all(isinstance(s.path, str) and isinstance(s.content, str) for s in snapshots):
            raise ValueError("Invalid commit snapshot")

        return cls(parent, timestamp, message, tuple(snapshots))

    @classmethod
    def create(
        cls,
        parent: Optional[str],
        message: str,
        snapshots: Iterable[FileSnapshot] = (),
        timestamp: Optional[int] = None
    ) -> 'Commit':
        """
        Create a new commit.

        Args:
            parent: Digest of the parent commit (None for the root)
            message: Commit message
            snapshots: File snapshots in any order
            timestamp: Unix timestamp (defaults to current time)

        Returns:
            Commit: New commit object
        """
        if timestamp is None:
            timestamp = int(time.time())

        return cls(parent, int(timestamp), message, tuple(snapshots))

    def __repr__(self) -> str:
        """String representation."""
        parent_info = f", parent={self.parent[:7]}" if self.parent else ""
        msg_preview = self.message.split('\n')[0][:50]
        return f"Commit(hash={self.digest[:7]}{parent_info}, msg='{msg_preview}')"
