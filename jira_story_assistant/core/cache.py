"""
Session-scoped cache of quality assessments, keyed by draft content.
"""

import hashlib
import json
import logging
from abc import ABC, abstractmethod
from typing import Dict, Optional

from .models import QualityAssessment

logger = logging.getLogger(__name__)

CACHE_KEY_PREFIX = "validation_"

def content_hash(title: str, description: str) -> str:
    """Hash of ``title|description``; any edit to either field changes it."""
    return hashlib.sha256(f"{title}|{description}".encode("utf-8")).hexdigest()

def cache_key(title: str, description: str) -> str:
    return f"{CACHE_KEY_PREFIX}{content_hash(title, description)}"


class AssessmentCache(ABC):
    """Interface for assessment caches injected into the assessor."""

    @abstractmethod
    def get(self, key: str) -> Optional[QualityAssessment]:
        ...

    @abstractmethod
    def put(self, key: str, assessment: QualityAssessment) -> None:
        ...

    @abstractmethod
    def remove(self, key: str) -> None:
        ...


class SessionCache(AssessmentCache):
    """In-memory store of serialized assessments for one session.

    Values are kept as JSON strings. An entry that no longer deserializes
    is dropped and reported as a miss.
    """

    def __init__(self):
        self._entries: Dict[str, str] = {}

    def get(self, key: str) -> Optional[QualityAssessment]:
        raw = self._entries.get(key)
        if raw is None:
            return None
        try:
            return QualityAssessment.from_dict(json.loads(raw))
        except (ValueError, TypeError, KeyError) as e:
            logger.warning(f"Discarding corrupted cache entry {key}: {e}")
            self.remove(key)
            return None

    def put(self, key: str, assessment: QualityAssessment) -> None:
        self._entries[key] = json.dumps(assessment.to_dict())

    def put_raw(self, key: str, raw: str) -> None:
        self._entries[key] = raw

    def remove(self, key: str) -> None:
        self._entries.pop(key, None)

    def __len__(self) -> int:
        return len(self._entries)
