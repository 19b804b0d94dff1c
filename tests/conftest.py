"""
Pytest configuration and fixtures.
"""

import json
from unittest.mock import MagicMock

import pytest

from jira_story_assistant.config.settings import get_settings
from jira_story_assistant.core.models import TicketDraft
from tests.helpers import ASSESSMENT


@pytest.fixture
def settings():
    return get_settings()


@pytest.fixture
def openai_client():
    """Chat client double; set .chat.return_value per test."""
    return MagicMock()


@pytest.fixture
def draft() -> TicketDraft:
    return TicketDraft(
        title="Add CSV export to the reports page",
        description="Users need to download report data.\n\nAcceptance Criteria:\n* Given..., when..., then...",
    )


@pytest.fixture
def assessment_json() -> str:
    return json.dumps(ASSESSMENT)
