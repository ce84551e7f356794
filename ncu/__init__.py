"""ncu - layered configuration and pull request summaries for node core contributors."""

from .models import Author, Commit, CommitKind, Committer, PullRequest, Report, ReportRow
from .filesystem import LocalFileSystem
from .config import ConfigStore, ConfigParseError
from .pr_summary import PRSummary
from .output import ConsoleOutput
from .api_client import GitHubAPIClient
from .pr_data import PRData

__all__ = [
    'Author',
    'Commit',
    'CommitKind',
    'Committer',
    'PullRequest',
    'Report',
    'ReportRow',
    'LocalFileSystem',
    'ConfigStore',
    'ConfigParseError',
    'PRSummary',
    'ConsoleOutput',
    'GitHubAPIClient',
    'PRData',
]
