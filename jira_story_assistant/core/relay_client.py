import logging
from typing import Any, Tuple

import requests

from ..config.settings import RELAY_SETTINGS
from ..utils.exceptions import RelayConnectionError

logger = logging.getLogger(__name__)

class RelayClient:
    """Talks to the relay server on behalf of the submission flow."""

    def __init__(self, base_url: str = None, timeout: int = None):
        self.base_url = (base_url or RELAY_SETTINGS["url"]).rstrip("/")
        self.timeout = timeout or RELAY_SETTINGS["timeout"]

    def _post(self, path: str, payload: dict, headers: dict) -> Tuple[int, Any]:
        url = f"{self.base_url}{path}"
        try:
            response = requests.post(
                url,
                headers={"Content-Type": "application/json", **headers},
                json=payload,
                timeout=self.timeout,
            )
        except requests.exceptions.RequestException as e:
            logger.error(f"Could not connect to relay at {url}: {e}")
            raise RelayConnectionError(f"Could not connect to relay at {self.base_url}") from e
        try:
            return response.status_code, response.json()
        except ValueError:
            return response.status_code, response.text

    def create_jira_issue(self, payload: dict, auth_token: str) -> Tuple[int, Any]:
        return self._post("/api/ticketing/issue", payload, {"x-ticket-auth-token": auth_token})

    def create_github_issue(self, payload: dict, auth_token: str) -> Tuple[int, Any]:
        return self._post("/api/tracker/issue", payload, {"x-tracker-auth-token": auth_token})
