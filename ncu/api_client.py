"""GitHub API client for making requests and handling pagination."""

import os
import logging
from typing import Dict, List
import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

API_ROOT = 'https://api.github.com'


class GitHubAPIClient:
    """Handles GitHub REST requests with retry logic and pagination."""

    def __init__(self, token: str = None, api_root: str = API_ROOT):
        """Initialize the GitHub API client.

        Args:
            token: GitHub personal access token for authentication
            api_root: Base URL of the REST API
        """
        self.token = token or os.environ.get('GITHUB_TOKEN')
        self.api_root = api_root.rstrip('/')
        self.session = requests.Session()

        adapter = HTTPAdapter(
            max_retries=Retry(
                total=3,
                backoff_factor=0.3,
                status_forcelist=[500, 502, 503, 504]
            )
        )
        self.session.mount('https://', adapter)
        self.session.mount('http://', adapter)
        self.session.headers.update({'Accept': 'application/vnd.github.v3+json'})

        if self.token:
            self.session.headers.update({'Authorization': f'token {self.token}'})
            logging.info("Initialized GitHub API client with token")
        else:
            logging.warning("No GitHub token provided. Rate limits will be much lower.")

    def url(self, path: str) -> str:
        return f"{self.api_root}/{path.lstrip('/')}"

    def get_json(self, path: str, params: Dict = None):
        """Fetch a single API resource.

        Raises:
            requests.HTTPError: If the response status is an error
        """
        url = self.url(path)
        logging.debug(f"Fetching {url}")
        response = self.session.get(url, params=params)
        response.raise_for_status()
        return response.json()

    def get_paginated(self, path: str, params: Dict = None) -> List[Dict]:
        """Fetch all pages of a paginated GitHub API endpoint.

        Args:
            path: The API endpoint path
            params: Query parameters

        Returns:
            List of all items from all pages
        """
        results = []
        page = 1
        per_page = 100

        params = dict(params or {})
        params['per_page'] = per_page

        while True:
            data = self.get_json(path, params={**params, 'page': page})

            if not data:
                break

            results.extend(data)

            if len(data) < per_page:
                break

            page += 1

        logging.debug(f"Fetched {len(results)} total items from {path}")
        return results
