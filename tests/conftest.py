"""Shared pytest fixtures for Gitlet tests."""

import pytest
import tempfile
import shutil
from pathlib import Path
from gitlet.core.repository import Repository
from gitlet.core.objects import Commit, FileSnapshot


FIXED_TIME = 1700000000


@pytest.fixture(autouse=True)
def isolated_config(tmp_path_factory, monkeypatch):
    """Keep the user's global config and GITLET_* variables out of tests."""
    home = tmp_path_factory.mktemp('home')
    monkeypatch.setenv('HOME', str(home))
    for var in ('GITLET_CORE_DEFAULTBRANCH', 'GITLET_CORE_INITIALMESSAGE', 'GITLET_RM_DELETEFILE'):
        monkeypatch.delenv(var, raising=False)
    return home


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests."""
    tmpdir = tempfile.mkdtemp()
    yield Path(tmpdir).resolve()
    shutil.rmtree(tmpdir, ignore_errors=True)


@pytest.fixture
def clock():
    """Clock frozen at FIXED_TIME."""
    return lambda: FIXED_TIME


@pytest.fixture
def repo(temp_dir, clock):
    """Create an initialized repository."""
    repo = Repository(str(temp_dir), clock=clock)
    repo.init()
    return repo


@pytest.fixture
def sample_commit():
    """Root-style commit with two files."""
    return Commit.create(
        parent=None,
        message="initial commit",
        snapshots=[FileSnapshot('b.txt', 'bee'), FileSnapshot('a.txt', 'ay')],
        timestamp=FIXED_TIME
    )


@pytest.fixture
def commit_files():
    """
    Return a helper that records files as tracked on the active branch.

    The helper writes each file to the work tree and stores a commit whose
    snapshots are the tip's snapshots updated with the given files, then
    advances the active branch. Returns the new commit digest.
    """
    def _commit_files(repo, files, message="track files"):
        store = repo.load_store()
        tip = store.tip_commit()
        contents = dict(tip.files)
        for path, content in files.items():
            target = repo.work_tree / path
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_text(content)
            contents[path] = content

        commit = Commit.create(
            parent=tip.digest,
            message=message,
            snapshots=[FileSnapshot(p, c) for p, c in contents.items()],
            timestamp=tip.timestamp + 1
        )
        digest = store.add_commit(commit)
        store.set_branch(store.head, digest)
        store.save()
        return digest

    return _commit_files


@pytest.fixture
def repo_with_tracked(repo, commit_files):
    """Repository whose master tip tracks tracked.txt and docs/guide.md."""
    commit_files(repo, {'tracked.txt': 'tracked\n', 'docs/guide.md': '# guide\n'})
    return repo
