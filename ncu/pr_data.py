"""Loads pull request data from GitHub for the summary."""

import logging
import re
from typing import Dict, List

from .api_client import GitHubAPIClient
from .models import Author, Commit, Committer, PullRequest

FIRST_TIME_ASSOCIATIONS = ('FIRST_TIME_CONTRIBUTOR', 'FIRST_TIMER')
CO_AUTHOR_PATTERN = re.compile(r'^Co-authored-by:\s*(.+?)\s*<([^>]+)>\s*$', re.MULTILINE | re.IGNORECASE)


def parse_co_authors(message: str) -> List[Committer]:
    """Extract ``Co-authored-by: Name <email>`` trailers from a commit message."""
    return [Committer(name, email) for name, email in CO_AUTHOR_PATTERN.findall(message)]


def commit_from_api(data: Dict) -> Commit:
    """Build a Commit from an entry of the pull request commits endpoint."""
    git_commit = data.get('commit') or {}
    message = git_commit.get('message', '')

    committers = []
    for key in ('author', 'committer'):
        identity = git_commit.get(key)
        if identity and identity.get('email'):
            committers.append(Committer(identity.get('name', ''), identity['email']))
    committers.extend(parse_co_authors(message))

    author = committers[0] if committers else Committer('', '')
    return Commit(sha=data.get('sha', ''), message=message, author=author, committers=committers)


class PRData:
    """Fetches a pull request, its author and its commits."""

    def __init__(self, client: GitHubAPIClient, owner: str, repo: str, prid: int):
        self.client = client
        self.owner = owner
        self.repo = repo
        self.prid = prid
        self.pr: PullRequest = None
        self.commits: List[Commit] = []

    def load(self) -> 'PRData':
        """Fetch everything the summary needs.

        Raises:
            requests.HTTPError: If any request fails
        """
        base = f"repos/{self.owner}/{self.repo}/pulls/{self.prid}"
        logging.info(f"Loading PR {self.owner}/{self.repo}#{self.prid}")

        pr_data = self.client.get_json(base)
        login = pr_data['user']['login']
        user = self.client.get_json(f"users/{login}")

        head = pr_data['head']
        base_ref = pr_data['base']
        self.pr = PullRequest(
            number=pr_data['number'],
            title=pr_data['title'],
            head_owner=(head.get('user') or {}).get('login', ''),
            head_branch=head['ref'],
            base_owner=(base_ref.get('user') or {}).get('login', ''),
            base_branch=base_ref['ref'],
            author=Author(user.get('name') or login, user.get('email') or '', login),
            labels=[label['name'] for label in pr_data.get('labels', [])],
            author_association=pr_data.get('author_association', '')
        )

        self.commits = [commit_from_api(c) for c in self.client.get_paginated(f"{base}/commits")]
        logging.info(f"Loaded {len(self.commits)} commit(s)")
        return self

    def author_is_new(self) -> bool:
        return self.pr is not None and self.pr.author_association in FIRST_TIME_ASSOCIATIONS
