"""
Utility functions for the Jira Story Assistant.
"""

from .validators import is_blank, parse_repository, validate_url

__all__ = [
    'is_blank',
    'parse_repository',
    'validate_url',
]
