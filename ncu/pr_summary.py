"""Summary of a pull request, its commits and its committers."""

import logging
from collections import Counter
from typing import Callable, Dict, List

from .models import Commit, CommitKind, Committer, PullRequest, Report, ReportRow


def unique_committers(commits: List[Commit]) -> List[Committer]:
    """Collect committers of all commits, deduplicated by exact email.

    The first identity seen for an email is kept, in commit order.
    """
    seen_emails = set()
    committers = []
    for commit in commits:
        for committer in commit.committers or []:
            if committer.email not in seen_emails:
                seen_emails.add(committer.email)
                committers.append(committer)
    return committers


class PRSummary:
    """Builds and displays the summary of a pull request."""

    def __init__(self, pr: PullRequest, commits: List[Commit], author_is_new: Callable[[], bool], cli):
        """Initialize the summary.

        Args:
            pr: The pull request
            commits: Commits of the pull request, in order
            author_is_new: Returns True if the author is a first-time contributor
            cli: Output with log(line) and table(label, value)
        """
        self.pr = pr
        self.commits = commits
        self.author_is_new = author_is_new
        self.cli = cli

    def commit_kinds(self) -> Dict[CommitKind, int]:
        """Count commits per kind."""
        counts = Counter(commit.kind for commit in self.commits)
        return {kind: counts.get(kind, 0) for kind in CommitKind}

    def subsystems(self) -> List[str]:
        """Subsystem prefixes of the commit titles, in first-seen order."""
        seen = []
        for commit in self.commits:
            subsystem = commit.subsystem
            if subsystem and subsystem not in seen:
                seen.append(subsystem)
        return seen

    def build_report(self) -> Report:
        pr = self.pr
        committers = unique_committers(self.commits)

        log_lines = [f" - {commit.title}" for commit in self.commits]
        log_lines.extend(f" - {c.name} <{c.email}>" for c in committers)

        author = pr.author
        author_hint = ', first-time contributor' if self.author_is_new() else ''
        rows = [
            ReportRow('Title', f"{pr.title} (#{pr.number})"),
            ReportRow('Author', f"{author.name} <{author.email}> (@{author.login}{author_hint})"),
            ReportRow('Branch', f"{pr.head_owner}:{pr.head_branch} -> {pr.base_owner}:{pr.base_branch}"),
            ReportRow('Labels', ', '.join(pr.labels)),
            ReportRow('Commits', str(len(self.commits))),
            ReportRow('Committers', str(len(committers))),
        ]
        return Report(tuple(log_lines), tuple(rows))

    def display(self) -> Report:
        """Send the summary to the output, log lines first and then the table."""
        report = self.build_report()

        kinds = self.commit_kinds()
        pending = kinds[CommitKind.FIXUP] + kinds[CommitKind.SQUASH]
        if pending:
            logging.warning(f"PR #{self.pr.number} has {pending} fixup/squash commit(s) to squash before landing")

        subsystems = self.subsystems()
        if subsystems:
            logging.info(f"PR #{self.pr.number} touches subsystem(s): {', '.join(subsystems)}")

        for line in report.log_lines:
            self.cli.log(line)
        for row in report.rows:
            self.cli.table(row.label, row.value)
        return report
