"""Working tree helpers."""

import os
from pathlib import Path
from typing import List


def relative_path(work_tree: Path, filepath) -> str:
    """
    Convert a path to a repository-relative POSIX path.

    Relative paths are taken relative to the work tree. Symlinks in the
    directories leading to the file are resolved, but the final component is
    kept as named so a link is never swapped for its target.

    Raises:
        ValueError: If the path lies outside the work tree
    """
    file_path = Path(filepath)
    if not file_path.is_absolute():
        file_path = work_tree / file_path

    file_path = Path(os.path.normpath(file_path))
    rel = (file_path.parent.resolve() / file_path.name).relative_to(work_tree)
    return rel.as_posix()


def is_hidden(rel_path: str) -> bool:
    """Check whether any component of a relative path starts with a dot."""
    return any(part.startswith('.') for part in rel_path.split('/'))


def get_working_files(work_tree: Path) -> List[str]:
    """
    Get all files in the working directory.

    Hidden files and directories (including .gitlet) are skipped. File
    contents are not read.

    Returns:
        Sorted list of relative POSIX paths
    """
    files = []

    for path in work_tree.rglob('*'):
        if not path.is_file():
            continue

        rel_path = path.relative_to(work_tree).as_posix()
        if is_hidden(rel_path):
            continue

        files.append(rel_path)

    return sorted(files)
