import logging
import requests

from ..config.settings import JIRA_SETTINGS

logger = logging.getLogger(__name__)

class JiraClient:
    def __init__(self, jira_url: str = None, timeout: int = None):
        self.jira_url = (jira_url or JIRA_SETTINGS["url"]).rstrip("/")
        self.timeout = timeout or JIRA_SETTINGS["timeout"]
        self.headers = {"Content-Type": "application/json"}

    def issue_url(self) -> str:
        return f"{self.jira_url}/rest/api/2/issue"

    def create_issue(self, payload: dict, auth_token: str) -> requests.Response:
        """POST an issue payload as-is with a bearer token.

        The raw response is returned whatever its status; network errors
        propagate as requests exceptions.
        """
        headers = {**self.headers, "Authorization": f"Bearer {auth_token or ''}"}
        response = requests.post(self.issue_url(), headers=headers, json=payload, timeout=self.timeout)
        logger.info(f"Jira response: {response.status_code} {response.text}")
        return response
