"""Data models for pull request summaries."""

import re
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Tuple

SUBSYSTEM_PATTERN = re.compile(r'^([\w.,/ -]+?):\s')


class CommitKind(Enum):
    """How a commit should be treated when the PR lands."""
    REGULAR = 'regular'
    FIXUP = 'fixup'
    SQUASH = 'squash'


@dataclass(frozen=True)
class Committer:
    """A name/email identity attached to a commit. Unique by email."""
    name: str
    email: str


@dataclass(frozen=True)
class Author:
    """The author of a pull request."""
    name: str
    email: str
    login: str


@dataclass
class Commit:
    """A single commit of a pull request."""
    sha: str
    message: str
    author: Committer
    committers: List[Committer] = field(default_factory=list)

    @property
    def title(self) -> str:
        """First line of the commit message."""
        return self.message.split('\n', 1)[0]

    @property
    def kind(self) -> CommitKind:
        title = self.title
        if title.startswith('fixup!'):
            return CommitKind.FIXUP
        if title.startswith('squash!') or '[squash]' in title:
            return CommitKind.SQUASH
        return CommitKind.REGULAR

    @property
    def subsystem(self) -> str:
        """The ``subsystem:`` prefix of the title, or an empty string."""
        match = SUBSYSTEM_PATTERN.match(self.title)
        return match.group(1) if match else ''


@dataclass
class PullRequest:
    """Pull request metadata needed for the summary."""
    number: int
    title: str
    head_owner: str
    head_branch: str
    base_owner: str
    base_branch: str
    author: Author
    labels: List[str] = field(default_factory=list)
    author_association: str = ''


@dataclass(frozen=True)
class ReportRow:
    """A label/value row of the summary table."""
    label: str
    value: str


@dataclass(frozen=True)
class Report:
    """Rendered summary: log lines followed by table rows."""
    log_lines: Tuple[str, ...]
    rows: Tuple[ReportRow, ...]
