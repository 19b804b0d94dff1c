import logging
from contextlib import contextmanager
from typing import Callable, Optional

from ..config.settings import get_settings
from ..utils.exceptions import ActionInProgressError, ValidationError
from ..utils.validators import is_blank
from .cache import AssessmentCache, SessionCache
from .models import (
    Credentials,
    PlatformSelection,
    QualityAssessment,
    SubmissionOptions,
    SubmissionResult,
    TicketDraft,
)
from .openai_client import OpenAIClient
from .quality_assessor import INCOMPLETE_DRAFT_MESSAGE, QualityAssessor
from .relay_client import RelayClient
from .story_generator import StoryGenerator
from .submission import SubmissionOrchestrator

logger = logging.getLogger(__name__)

class StoryAssistant:
    """Drives one interactive session: draft, review, edit and file a story.

    Holds the current draft and the last successful assessment. A failed
    action leaves both as they were.
    """

    def __init__(self, settings: Optional[dict] = None, cache: Optional[AssessmentCache] = None,
                 relay_client: Optional[RelayClient] = None,
                 openai_client_factory: Optional[Callable[[str], OpenAIClient]] = None):
        self.settings = settings or get_settings()
        self.cache = cache if cache is not None else SessionCache()
        self.openai_client_factory = openai_client_factory or (
            lambda api_key: OpenAIClient(api_key, self.settings["openai"]))
        self.orchestrator = SubmissionOrchestrator(
            relay_client or RelayClient(self.settings["relay"]["url"], self.settings["relay"]["timeout"]),
            jira_url=self.settings["jira"]["url"],
        )
        self.draft: Optional[TicketDraft] = None
        self.assessment: Optional[QualityAssessment] = None
        self._running = set()

    @contextmanager
    def _action(self, name: str):
        if name in self._running:
            raise ActionInProgressError(f"{name} is already running")
        self._running.add(name)
        try:
            yield
        finally:
            self._running.discard(name)

    def is_running(self, name: str) -> bool:
        return name in self._running

    @property
    def can_submit(self) -> bool:
        return self.draft is not None and self.draft.is_complete

    def generate_draft(self, task_description: str, api_key: str) -> TicketDraft:
        with self._action("generate"):
            if is_blank(task_description):
                raise ValidationError("Task Description is required.")
            generator = StoryGenerator(self.openai_client_factory(api_key), self.settings["openai"])
            draft = generator.generate(task_description)
            self.draft = draft
            logger.info("Story generated successfully.")
            return draft

    def update_draft(self, title: Optional[str] = None, description: Optional[str] = None) -> TicketDraft:
        """Apply user edits to the current draft."""
        draft = self.draft or TicketDraft()
        if title is not None:
            draft.title = title
        if description is not None:
            draft.description = description
        self.draft = draft
        return draft

    def assess_quality(self, api_key: str, draft: Optional[TicketDraft] = None) -> QualityAssessment:
        draft = draft or self.draft or TicketDraft()
        with self._action("assess"):
            if not draft.is_complete:
                raise ValidationError(INCOMPLETE_DRAFT_MESSAGE)
            assessor = QualityAssessor(self.openai_client_factory(api_key), self.cache, self.settings["openai"])
            assessment = assessor.assess(draft)
            self.assessment = assessment
            return assessment

    def submit(self, selection: PlatformSelection, credentials: Credentials,
               options: SubmissionOptions, draft: Optional[TicketDraft] = None) -> SubmissionResult:
        draft = draft or self.draft or TicketDraft()
        with self._action("submit"):
            return self.orchestrator.submit(draft, selection, credentials, options)
