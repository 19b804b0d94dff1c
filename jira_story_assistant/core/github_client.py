import logging
from typing import List, Optional

import requests

from ..config.settings import GITHUB_SETTINGS

logger = logging.getLogger(__name__)

class GitHubClient:
    def __init__(self, api_url: str = None, timeout: int = None):
        self.api_url = (api_url or GITHUB_SETTINGS["api_url"]).rstrip("/")
        self.timeout = timeout or GITHUB_SETTINGS["timeout"]

    def _headers(self, token: str) -> dict:
        return {
            "Authorization": f"token {token}",
            "Accept": GITHUB_SETTINGS["accept"],
            "User-Agent": GITHUB_SETTINGS["user_agent"],
        }

    def repository_url(self, owner: str, repo: str) -> str:
        return f"{self.api_url}/repos/{owner}/{repo}"

    def get_repository(self, owner: str, repo: str, token: str) -> requests.Response:
        """Fetch the repository resource to confirm it exists and the token can see it."""
        url = self.repository_url(owner, repo)
        logger.info(f"Checking repository: {url}")
        return requests.get(url, headers=self._headers(token), timeout=self.timeout)

    def create_issue(self, owner: str, repo: str, title: str, body: str,
                     labels: Optional[List[str]], token: str) -> requests.Response:
        url = f"{self.repository_url(owner, repo)}/issues"
        issue_data = {"title": title, "body": body}
        if labels:
            issue_data["labels"] = labels
        logger.info(f"Creating issue at: {url}")
        logger.debug(f"Issue data: {issue_data}")
        response = requests.post(
            url,
            headers={**self._headers(token), "Content-Type": "application/json"},
            json=issue_data,
            timeout=self.timeout,
        )
        logger.info(f"GitHub issue creation response: {response.status_code}")
        return response
