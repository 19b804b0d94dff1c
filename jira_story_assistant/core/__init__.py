"""
Core functionality for the Jira Story Assistant.
"""

from .assistant import StoryAssistant
from .cache import AssessmentCache, SessionCache
from .openai_client import OpenAIClient
from .quality_assessor import QualityAssessor
from .story_generator import StoryGenerator, parse_story
from .submission import SubmissionOrchestrator

__all__ = [
    'StoryAssistant',
    'AssessmentCache',
    'SessionCache',
    'OpenAIClient',
    'QualityAssessor',
    'StoryGenerator',
    'parse_story',
    'SubmissionOrchestrator',
]
