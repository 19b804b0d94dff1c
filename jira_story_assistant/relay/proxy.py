"""
Relay operations: forward issue creation to Jira and GitHub.

Each operation returns a RelayResponse instead of raising, so nothing from
the network layer escapes to the HTTP surface.
"""

import json
import logging
from dataclasses import dataclass
from typing import Any, List, Optional

import requests

from ..core.github_client import GitHubClient
from ..core.jira_client import JiraClient

logger = logging.getLogger(__name__)

SSO_MARKERS = ("SAML enforcement", "organization SAML")


@dataclass
class RelayResponse:
    status: int
    content: Any
    is_json: bool = True


def contains_sso_marker(text: Optional[str]) -> bool:
    return bool(text) and any(marker in text for marker in SSO_MARKERS)


def sso_remediation_message(owner: str) -> str:
    return (
        f'🔒 SAML SSO Issue: Your Personal Access Token needs to be authorized for the organization "{owner}". '
        "Please follow these steps:\n\n"
        "1. Go to GitHub Settings → Developer settings → Personal access tokens\n"
        '2. Find your token and click "Configure SSO"\n'
        f'3. Click "Authorize" next to the "{owner}" organization\n'
        "4. Try creating the issue again"
    )


def classify_repository_error(owner: str, repo: str, status: int, raw_error: str) -> str:
    """Explain why the repository pre-flight check failed."""
    if contains_sso_marker(raw_error):
        return sso_remediation_message(owner)
    if status == 404:
        return (
            f'Repository "{owner}/{repo}" not found. Please check:\n'
            "- Repository name is correct (case-sensitive)\n"
            "- Repository exists and is accessible\n"
            "- Your token has the right permissions"
        )
    if status == 401:
        return (
            "Authentication failed. Please check:\n"
            "- Your GitHub token is valid and not expired\n"
            "- Token has the required permissions (repo scope)"
        )
    return f"Repository {owner}/{repo} is not accessible."


def _json_or_text(response: requests.Response) -> RelayResponse:
    text = response.text
    try:
        return RelayResponse(response.status_code, json.loads(text))
    except ValueError:
        return RelayResponse(response.status_code, text, is_json=False)


def create_ticketing_issue(body: Any, auth_token: Optional[str],
                           client: Optional[JiraClient] = None) -> RelayResponse:
    """Forward a Jira issue payload verbatim and mirror the upstream answer."""
    client = client or JiraClient()
    try:
        response = client.create_issue(body, auth_token)
        return _json_or_text(response)
    except requests.exceptions.RequestException as e:
        logger.error(f"Jira proxy error: {e}")
        return RelayResponse(500, {"error": "Proxy error", "details": str(e)})
    except Exception as e:
        logger.error(f"Unexpected Jira proxy error: {e}", exc_info=True)
        return RelayResponse(500, {"error": "Proxy error", "details": str(e)})


def create_tracker_issue(owner: Optional[str], repo: Optional[str], title: Optional[str],
                         body: Optional[str], labels: Optional[List[str]], auth_token: Optional[str],
                         client: Optional[GitHubClient] = None) -> RelayResponse:
    """Check the repository is reachable, then open an issue in it."""
    client = client or GitHubClient()
    try:
        logger.info(f"GitHub request details: owner={owner} repo={repo} "
                    f"title={str(title or '')[:50]!r} has_token={bool(auth_token)}")
        if not auth_token:
            return RelayResponse(400, {"error": "GitHub token is required"})
        if not owner or not repo:
            return RelayResponse(400, {"error": "Owner and repo are required"})

        check = client.get_repository(owner, repo, auth_token)
        if not check.ok:
            raw_error = check.text
            logger.warning(f"Repository check failed: {check.status_code} {raw_error}")
            return RelayResponse(check.status_code, {
                "error": "Repository not found or no access",
                "details": classify_repository_error(owner, repo, check.status_code, raw_error),
                "status": check.status_code,
                "rawError": raw_error,
            })

        response = client.create_issue(owner, repo, title, body, labels, auth_token)
        text = response.text
        try:
            data = json.loads(text)
        except ValueError:
            logger.warning("Failed to parse GitHub response as JSON")
            if contains_sso_marker(text):
                return RelayResponse(response.status_code, {
                    "error": "SAML SSO Authorization Required",
                    "message": "Resource protected by organization SAML enforcement",
                    "details": (f'🔒 Your Personal Access Token needs SAML SSO authorization for the "{owner}" '
                                "organization. Please authorize your token in GitHub Settings."),
                    "samlError": True,
                })
            return RelayResponse(response.status_code, text, is_json=False)

        if response.ok:
            logger.info(f"Successfully created GitHub issue: {data.get('number') if isinstance(data, dict) else data}")
        elif isinstance(data, dict) and contains_sso_marker(text):
            data["samlError"] = True
        return RelayResponse(response.status_code, data)
    except requests.exceptions.RequestException as e:
        logger.error(f"GitHub proxy error: {e}")
        return RelayResponse(500, {"error": "GitHub proxy error", "details": str(e)})
    except Exception as e:
        logger.error(f"Unexpected GitHub proxy error: {e}", exc_info=True)
        return RelayResponse(500, {"error": "GitHub proxy error", "details": str(e)})
