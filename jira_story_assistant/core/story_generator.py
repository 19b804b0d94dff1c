"""
Turns a free-text task into a Jira story draft.

The model is asked for labelled Title / Description / Acceptance Criteria
sections. Labels may come back wrapped in markdown bold (``**Title:**``) or
as plain text; the bold form is tried first. When a label appears more than
once the first occurrence wins.
"""

import logging
import re
from typing import Optional

from ..config.settings import OPENAI_SETTINGS
from ..utils.exceptions import ResponseParseError, ValidationError
from .models import TicketDraft

logger = logging.getLogger(__name__)

SYSTEM_PROMPT = "You are a Jira story writing assistant"

USER_PROMPT_TEMPLATE = (
    "Generate a Jira story for : {task}. The ticket must include the following two clearly "
    "labeled sections: 1. Title - A concise summary of the task or issue. 2. Description - A "
    "detailed explanation of the background, objective, and scope of work. Also include "
    "'Acceptance Criteria' - A bullet-point list of specific, testable conditions that must be "
    "met for the ticket to be considered complete in the description section. Format "
    "Acceptance Criteria as : * Given..., when..., then... * Given..., when..., then..."
)

ACCEPTANCE_HEADING = "Acceptance Criteria:"

TITLE_PATTERNS = (
    re.compile(r"\*\*Title:?\*\*:?\s*\n?(.+?)(?:\n|\r|$)", re.IGNORECASE),
    re.compile(r"Title:?\s*\n?(.+?)(?:\n|\r|$)", re.IGNORECASE),
)
DESCRIPTION_PATTERNS = (
    re.compile(r"\*\*Description:?\*\*:?\s*\n?([\s\S]*?)(?=\*\*Acceptance Criteria:?\*\*|$)", re.IGNORECASE),
    re.compile(r"Description:?\s*\n?([\s\S]*?)(?=Acceptance Criteria:?|$)", re.IGNORECASE),
)
ACCEPTANCE_PATTERNS = (
    re.compile(r"\*\*Acceptance Criteria:?\*\*:?\s*\n?([\s\S]*)", re.IGNORECASE),
    re.compile(r"Acceptance Criteria:?\s*\n?([\s\S]*)", re.IGNORECASE),
)


def _first_match(patterns, content: str) -> str:
    for pattern in patterns:
        match = pattern.search(content)
        if match and match.group(1) and match.group(1).strip():
            return match.group(1).strip()
    return ""


def parse_story(content: str) -> TicketDraft:
    """Extract a draft from the model's semi-structured reply.

    Missing sections come back as empty strings; deciding whether that is
    acceptable is up to the caller.
    """
    title = _first_match(TITLE_PATTERNS, content)
    description = _first_match(DESCRIPTION_PATTERNS, content)
    acceptance = _first_match(ACCEPTANCE_PATTERNS, content)
    if acceptance:
        description += f"\n\n{ACCEPTANCE_HEADING}\n{acceptance}"
    return TicketDraft(title=title, description=description)


class StoryGenerator:
    def __init__(self, openai_client, settings: Optional[dict] = None):
        self.openai_client = openai_client
        self.settings = settings or OPENAI_SETTINGS

    def build_messages(self, task_description: str) -> list:
        return [
            {"role": "system", "content": SYSTEM_PROMPT},
            {"role": "user", "content": USER_PROMPT_TEMPLATE.format(task=task_description)},
        ]

    def generate(self, task_description: str) -> TicketDraft:
        """Ask the model for a story and parse it into a draft."""
        if not task_description or not task_description.strip():
            raise ValidationError("Task Description is required.")

        logger.info("Generating story draft")
        content = self.openai_client.chat(
            self.build_messages(task_description),
            max_tokens=self.settings["story_max_tokens"],
        )
        draft = parse_story(content)
        if not draft.title or not draft.description.strip():
            logger.error(f"Story response missing sections. Raw response: {content}")
            missing = [name for name, value in (("Title", draft.title), ("Description", draft.description)) if not value.strip()]
            raise ResponseParseError(f"missing {' and '.join(missing)} section in generated story")
        logger.debug(f"Generated story titled {draft.title!r}")
        return draft
