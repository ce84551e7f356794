#!/usr/bin/env python3
"""
ncu-pr-summary
Prints the title, author, branch, labels, commits and committers of a pull request.
"""

import os
import sys
import logging
import requests
from dotenv import load_dotenv

from ncu.config import ConfigStore, ConfigParseError
from ncu.api_client import GitHubAPIClient
from ncu.pr_data import PRData
from ncu.pr_summary import PRSummary
from ncu.output import ConsoleOutput

# Configure logging (can be overridden by LOG_LEVEL environment variable)
log_level = os.environ.get('LOG_LEVEL', 'INFO').upper()
logging.basicConfig(
    level=getattr(logging, log_level, logging.INFO),
    format='%(asctime)s %(levelname)s: %(message)s',
    datefmt='%m/%d/%Y %I:%M:%S %p'
)


def parse_target(repo_arg: str, prid_arg: str):
    """Split ``owner/repo`` and parse the PR number."""
    if repo_arg.count('/') != 1:
        raise ValueError(f"Repository must be in the form owner/repo, got '{repo_arg}'")
    owner, repo = repo_arg.split('/')
    return owner, repo, int(prid_arg)


def main(argv=None) -> int:
    """Main entry point for the script."""
    # Load environment variables from .env file if it exists
    load_dotenv()

    argv = sys.argv[1:] if argv is None else argv
    if len(argv) == 2:
        repo_arg, prid_arg = argv
    else:
        repo_arg = os.environ.get('GITHUB_REPO') or input("Repository (owner/repo): ").strip()
        prid_arg = os.environ.get('PR_ID') or input("Pull request number: ").strip()

    try:
        owner, repo, prid = parse_target(repo_arg, prid_arg)
    except ValueError as e:
        logging.error(f"Invalid pull request: {e}")
        return 1

    try:
        token = os.environ.get('GITHUB_TOKEN') or ConfigStore().get_value('token')
    except ConfigParseError as e:
        logging.error(str(e))
        return 1

    data = PRData(GitHubAPIClient(token), owner, repo, prid)
    try:
        data.load()
    except requests.RequestException as e:
        logging.error(f"Error loading {owner}/{repo}#{prid}: {e}")
        return 1

    cli = ConsoleOutput()
    cli.separator(f"{owner}/{repo}#{prid}")
    PRSummary(data.pr, data.commits, data.author_is_new, cli).display()
    return 0


if __name__ == "__main__":
    sys.exit(main())
