import json
import logging
from typing import Optional

from ..config.settings import OPENAI_SETTINGS
from ..utils.exceptions import ResponseParseError, ValidationError
from .cache import AssessmentCache, SessionCache, cache_key
from .models import QualityAssessment, TicketDraft

logger = logging.getLogger(__name__)

INCOMPLETE_DRAFT_MESSAGE = "Please ensure both title and description are filled before re-evaluating."

SYSTEM_PROMPT = (
    "You are a software development expert who evaluates user stories for development "
    "readiness. Respond only with valid JSON. Be consistent in your scoring - identical "
    "stories should receive identical scores."
)

VALIDATION_PROMPT_TEMPLATE = """
Analyze the following user story for development readiness. Evaluate each criterion and respond with ONLY a JSON object in this exact format:
{{
  "criteria": [
    {{"id": "title", "name": "Clear and descriptive title", "passed": true/false, "reason": "brief explanation"}},
    {{"id": "description", "name": "Detailed description with background and objective", "passed": true/false, "reason": "brief explanation"}},
    {{"id": "acceptance", "name": "Well-defined acceptance criteria with Given/When/Then format", "passed": true/false, "reason": "brief explanation"}},
    {{"id": "value", "name": "Clear user value or business objective", "passed": true/false, "reason": "brief explanation"}},
    {{"id": "specific", "name": "Specific and actionable requirements (no vague terms)", "passed": true/false, "reason": "brief explanation"}},
    {{"id": "testable", "name": "Testable and measurable outcomes", "passed": true/false, "reason": "brief explanation"}}
  ],
  "overallScore": 0-100,
  "recommendation": "Ready for Development/Good/Needs Improvement"
}}

Story to analyze:
Title: {title}
Description: {description}"""


def extract_json_block(text: str) -> str:
    """Return the first balanced ``{...}`` block in text.

    Braces inside JSON string literals are ignored. Falls back to the whole
    text when no balanced block exists, so json.loads reports the error.
    """
    start = text.find("{")
    if start == -1:
        return text
    depth = 0
    in_string = False
    escaped = False
    for i in range(start, len(text)):
        ch = text[i]
        if in_string:
            if escaped:
                escaped = False
            elif ch == "\\":
                escaped = True
            elif ch == '"':
                in_string = False
            continue
        if ch == '"':
            in_string = True
        elif ch == "{":
            depth += 1
        elif ch == "}":
            depth -= 1
            if depth == 0:
                return text[start:i + 1]
    return text


def parse_assessment(content: str) -> QualityAssessment:
    try:
        return QualityAssessment.from_dict(json.loads(extract_json_block(content)))
    except (ValueError, TypeError, KeyError) as e:
        logger.error(f"Failed to parse validation response: {e}. Raw response: {content}")
        raise ResponseParseError("Invalid validation response format") from e


class QualityAssessor:
    def __init__(self, openai_client, cache: Optional[AssessmentCache] = None,
                 settings: Optional[dict] = None):
        self.openai_client = openai_client
        self.cache = cache if cache is not None else SessionCache()
        self.settings = settings or OPENAI_SETTINGS

    def build_messages(self, draft: TicketDraft) -> list:
        prompt = VALIDATION_PROMPT_TEMPLATE.format(title=draft.title, description=draft.description)
        return [
            {"role": "system", "content": SYSTEM_PROMPT},
            {"role": "user", "content": prompt},
        ]

    def assess(self, draft: TicketDraft) -> QualityAssessment:
        """Score a draft, reusing the session cache for unchanged content."""
        if not draft.is_complete:
            raise ValidationError(INCOMPLETE_DRAFT_MESSAGE)

        key = cache_key(draft.title, draft.description)
        cached = self.cache.get(key)
        if cached is not None:
            logger.debug(f"Assessment cache hit for {key}")
            return cached

        logger.info("Validating story quality")
        content = self.openai_client.chat(
            self.build_messages(draft),
            max_tokens=self.settings["validation_max_tokens"],
            temperature=self.settings["temperature"],
            seed=self.settings["seed"],
        )
        assessment = parse_assessment(content)
        self.cache.put(key, assessment)
        return assessment
