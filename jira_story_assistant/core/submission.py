"""
Files a finished draft in Jira and/or GitHub through the relay.

Each selected platform is attempted on its own: a failure on one side is
reported next to the other side's result and never undoes it.
"""

import logging
from typing import Any, List, Optional

from ..config.settings import JIRA_SETTINGS
from ..utils.exceptions import RelayConnectionError
from ..utils.validators import is_blank, parse_repository
from .models import (
    DEFAULT_LABEL,
    Credentials,
    GitHubIssueRequest,
    JiraIssueRequest,
    PlatformOutcome,
    PlatformSelection,
    SubmissionOptions,
    SubmissionResult,
    TicketDraft,
)
from .relay_client import RelayClient

logger = logging.getLogger(__name__)

NO_PLATFORM_MESSAGE = "Please select at least one platform to create issues."


def validate_submission(draft: TicketDraft, selection: PlatformSelection,
                        credentials: Credentials, options: SubmissionOptions) -> List[str]:
    """Collect every problem that would stop the submission."""
    if not selection.any:
        return [NO_PLATFORM_MESSAGE]

    errors = []
    if is_blank(draft.title):
        errors.append("Story title is required")
    if is_blank(draft.description):
        errors.append("Story description is required")
    if selection.jira and is_blank(credentials.jira_token):
        errors.append("Jira Auth Token is required to create a Jira ticket")
    if selection.github:
        if is_blank(credentials.github_token):
            errors.append("GitHub Personal Access Token is required to create a GitHub issue")
        if parse_repository(options.repository) is None:
            errors.append('GitHub Repository must be in format "owner/repo"')
    return errors


def _error_message(data: Any) -> Optional[str]:
    """Pick the most useful message out of a relay or Jira error body."""
    if not isinstance(data, dict):
        return None
    if data.get("error"):
        return str(data["error"])
    if data.get("errorMessages"):
        return "; ".join(str(m) for m in data["errorMessages"])
    if isinstance(data.get("errors"), dict) and data["errors"]:
        return "; ".join(f"{k}: {v}" for k, v in data["errors"].items())
    if data.get("message"):
        return str(data["message"])
    return None


def _failure(platform: str, what: str, status: int, data: Any) -> PlatformOutcome:
    message = f"❌ Failed to create {what} ({status})"
    error = _error_message(data)
    if error:
        message += f": {error}"
    details = data.get("details") if isinstance(data, dict) else None
    if details is not None:
        details = str(details)
    return PlatformOutcome(platform=platform, success=False, message=message, details=details)


class SubmissionOrchestrator:
    def __init__(self, relay_client: Optional[RelayClient] = None, jira_url: str = None):
        self.relay_client = relay_client or RelayClient()
        self.jira_url = (jira_url or JIRA_SETTINGS["url"]).rstrip("/")

    def submit(self, draft: TicketDraft, selection: PlatformSelection,
               credentials: Credentials, options: SubmissionOptions) -> SubmissionResult:
        errors = validate_submission(draft, selection, credentials, options)
        if errors:
            logger.info(f"Submission rejected: {errors}")
            return SubmissionResult(errors=errors)

        result = SubmissionResult()
        if selection.jira:
            result.outcomes.append(self._create_jira(draft, credentials, options))
        if selection.github:
            result.outcomes.append(self._create_github(draft, credentials, options))
        return result

    def _create_jira(self, draft: TicketDraft, credentials: Credentials,
                     options: SubmissionOptions) -> PlatformOutcome:
        request = JiraIssueRequest(
            project=options.project,
            issue_type=options.issue_type,
            label=options.label,
            summary=draft.title,
            description=draft.description,
        )
        try:
            status, data = self.relay_client.create_jira_issue(request.to_payload(), credentials.jira_token)
        except RelayConnectionError:
            return PlatformOutcome("jira", False, "❌ Could not connect to relay for Jira")

        if 200 <= status < 300 and isinstance(data, dict) and data.get("key"):
            key = data["key"]
            url = f"{self.jira_url}/browse/{key}"
            return PlatformOutcome("jira", True, f"✅ Jira ticket created: {key} ({url})", url=url)
        logger.error(f"Jira creation failed: {status} {data}")
        return _failure("jira", "Jira ticket", status, data)

    def _create_github(self, draft: TicketDraft, credentials: Credentials,
                       options: SubmissionOptions) -> PlatformOutcome:
        owner, repo = parse_repository(options.repository)
        label = (options.label or "").strip() or DEFAULT_LABEL
        request = GitHubIssueRequest(owner=owner, repo=repo, title=draft.title,
                                     body=draft.description, labels=[label])
        try:
            status, data = self.relay_client.create_github_issue(request.to_payload(), credentials.github_token)
        except RelayConnectionError:
            return PlatformOutcome("github", False, "❌ Could not connect to relay for GitHub")

        if 200 <= status < 300 and isinstance(data, dict) and data.get("number") is not None:
            url = data.get("html_url")
            return PlatformOutcome("github", True,
                                   f"✅ GitHub issue created: #{data['number']} ({url})", url=url)
        logger.error(f"GitHub creation failed: {status} {data}")
        return _failure("github", "GitHub issue", status, data)
