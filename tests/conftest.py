"""
Shared fixtures: an in-memory file system and sample pull request data
"""

import json
import os
import pytest

from ncu.config import ConfigStore
from ncu.models import Author, Commit, Committer, PullRequest

HOME = '/home/tester'
CWD = '/work/project'

GLOBAL_CONFIG = {'username': 'foo', 'token': 'abcdefg'}
LOCAL_CONFIG = {'username': 'local_foo'}


class InMemoryFileSystem:
    """File system kept in a dict, with the same interface as LocalFileSystem."""

    def __init__(self, files=None):
        self.files = dict(files or {})
        self.directories = set()
        self.fail_writes = False

    def exists(self, path):
        return path in self.files

    def read_text(self, path):
        if path not in self.files:
            raise FileNotFoundError(path)
        content = self.files[path]
        if isinstance(content, bytes):
            return content.decode('utf-8')
        return content

    def write_text(self, path, content):
        if self.fail_writes:
            raise OSError(f"Read-only file system: {path}")
        self.files[path] = content

    def ensure_directory(self, path):
        self.directories.add(path)


@pytest.fixture
def mock_fs():
    """File system preloaded with a global and a local config."""
    return InMemoryFileSystem({
        os.path.join(HOME, '.ncurc'): json.dumps(GLOBAL_CONFIG),
        os.path.join(CWD, '.ncu', 'config'): json.dumps(LOCAL_CONFIG),
    })


@pytest.fixture
def home_dir():
    return HOME


@pytest.fixture
def cwd_dir():
    return CWD


@pytest.fixture
def make_store():
    """Build a ConfigStore on the shared fake home and working directories."""
    def factory(fs, environ=None):
        return ConfigStore(fs=fs, environ=environ if environ is not None else {},
                           platform_home=lambda: HOME, cwd=lambda: CWD)
    return factory


@pytest.fixture
def store(mock_fs, make_store):
    """ConfigStore over the in-memory file system with an empty environment."""
    return make_store(mock_fs)


PR_AUTHOR = Committer('Their Github Account email', 'pr_author@example.com')
GITHUB_BOT = Committer('GitHub', 'noreply@github.com')
BAZ = Committer('Baz User', 'baz@example.com')


def make_commit(sha, message, committers):
    return Commit(sha=sha, message=message, author=committers[0] if committers else Committer('', ''),
                  committers=list(committers))


@pytest.fixture
def odd_commits():
    """Six commits by three committers, including fixup and squash commits."""
    return [
        make_commit('a1', 'doc: some changes\n\nLonger description', [PR_AUTHOR]),
        make_commit('a2', 'doc: some changes 2', [PR_AUTHOR, GITHUB_BOT]),
        make_commit('a3', 'test: some changes', [PR_AUTHOR]),
        make_commit('a4', 'test: some changes 2', [BAZ]),
        make_commit('a5', '[squash] fix typo', [Committer('Baz', 'baz@example.com')]),
        make_commit('a6', 'fixup! fix something', [GITHUB_BOT, PR_AUTHOR]),
    ]


@pytest.fixture
def simple_commits():
    return [make_commit('b1', 'doc: some changes', [PR_AUTHOR])]


def make_pr(title, labels):
    return PullRequest(
        number=16348,
        title=title,
        head_owner='pr_author',
        head_branch='awesome-changes',
        base_owner='nodejs',
        base_branch='master',
        author=Author('Their Github Account email', 'pr_author@example.com', 'pr_author'),
        labels=labels
    )


@pytest.fixture
def first_timer_pr():
    return make_pr('test: awesome changes', ['test', 'doc'])


@pytest.fixture
def semver_major_pr():
    return make_pr('lib: awesome changes', ['semver-major'])


@pytest.fixture
def global_config():
    return dict(GLOBAL_CONFIG)


@pytest.fixture
def local_config():
    return dict(LOCAL_CONFIG)


@pytest.fixture
def empty_fs():
    return InMemoryFileSystem()
