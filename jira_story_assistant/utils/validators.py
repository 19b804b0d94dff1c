"""
Validation utilities for the Jira Story Assistant.
"""

from typing import Optional, Tuple
from urllib.parse import urlparse

def validate_url(url: str) -> bool:
    """Validate an http(s) URL."""
    if not url:
        return False
    result = urlparse(url)
    return result.scheme in ['http', 'https'] and bool(result.netloc)

def is_blank(value: Optional[str]) -> bool:
    return value is None or not value.strip()

def parse_repository(repository: Optional[str]) -> Optional[Tuple[str, str]]:
    """Split an ``owner/repo`` identifier.

    Returns None unless there is exactly one separator with a non-empty
    owner and repo name on either side.
    """
    if is_blank(repository):
        return None
    parts = repository.strip().split('/')
    if len(parts) != 2:
        return None
    owner, repo = parts[0].strip(), parts[1].strip()
    if not owner or not repo:
        return None
    return owner, repo
