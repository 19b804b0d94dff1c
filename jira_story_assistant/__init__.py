"""
Jira Story Assistant - Draft Jira stories with AI, review their quality and
file them in Jira and GitHub.
"""

__version__ = "1.0.0"

from .core.assistant import StoryAssistant
from .core.models import QualityAssessment, TicketDraft

__all__ = ['StoryAssistant', 'QualityAssessment', 'TicketDraft']
