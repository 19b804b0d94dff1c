"""
Data types passed between the generator, the assessor and the submission flow.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from ..config.settings import JIRA_SETTINGS

DEFAULT_LABEL = JIRA_SETTINGS["default_label"]

@dataclass
class TicketDraft:
    title: str = ""
    description: str = ""

    @property
    def is_complete(self) -> bool:
        return bool(self.title.strip()) and bool(self.description.strip())


@dataclass
class Criterion:
    id: str
    name: str
    passed: bool
    reason: str = ""

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Criterion":
        if not isinstance(data, dict):
            raise TypeError("criterion must be a JSON object")
        passed = data.get("passed", False)
        if not isinstance(passed, bool):
            raise TypeError(f"passed must be true or false, got {passed!r}")
        return cls(
            id=str(data.get("id", "")),
            name=str(data.get("name", "")),
            passed=passed,
            reason=str(data.get("reason", "")),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {"id": self.id, "name": self.name, "passed": self.passed, "reason": self.reason}


@dataclass
class QualityAssessment:
    """AI scoring of a draft against the six readiness criteria."""

    criteria: List[Criterion]
    overall_score: int
    recommendation: str = "Unknown"

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "QualityAssessment":
        """Build from the JSON object the model returns.

        Raises ValueError/TypeError/KeyError when the object does not have
        the expected shape.
        """
        if not isinstance(data, dict):
            raise TypeError("assessment must be a JSON object")
        criteria = data["criteria"]
        if not isinstance(criteria, list):
            raise TypeError("criteria must be a list")
        score = data["overallScore"]
        if isinstance(score, bool):
            raise TypeError("overallScore must be a number")
        score = int(score)
        if score < 0 or score > 100:
            raise ValueError(f"overallScore out of range: {score}")
        return cls(
            criteria=[Criterion.from_dict(c) for c in criteria],
            overall_score=score,
            recommendation=str(data.get("recommendation") or "Unknown"),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "criteria": [c.to_dict() for c in self.criteria],
            "overallScore": self.overall_score,
            "recommendation": self.recommendation,
        }

    @property
    def passed_count(self) -> int:
        return sum(1 for c in self.criteria if c.passed)

    @property
    def total_count(self) -> int:
        return len(self.criteria) if self.criteria else 6

    @property
    def quality_level(self) -> str:
        if self.overall_score >= 85:
            return "excellent"
        if self.overall_score >= 70:
            return "good"
        return "needs_improvement"


@dataclass
class JiraIssueRequest:
    project: str
    issue_type: str
    label: str
    summary: str
    description: str

    def to_payload(self) -> Dict[str, Any]:
        label = (self.label or "").strip() or DEFAULT_LABEL
        return {
            "fields": {
                "project": {"key": self.project},
                "summary": self.summary,
                "description": self.description,
                "issuetype": {"name": self.issue_type},
                "labels": [label],
            }
        }


@dataclass
class GitHubIssueRequest:
    owner: str
    repo: str
    title: str
    body: str
    labels: List[str] = field(default_factory=list)

    def to_payload(self) -> Dict[str, Any]:
        return {
            "owner": self.owner,
            "repo": self.repo,
            "title": self.title,
            "body": self.body,
            "labels": list(self.labels),
        }


@dataclass
class Credentials:
    openai_api_key: str = ""
    jira_token: str = ""
    github_token: str = ""

    def __repr__(self) -> str:
        # Never print token values
        return (f"Credentials(openai_api_key={'set' if self.openai_api_key else 'unset'}, "
                f"jira_token={'set' if self.jira_token else 'unset'}, "
                f"github_token={'set' if self.github_token else 'unset'})")


@dataclass
class PlatformSelection:
    jira: bool = True
    github: bool = False

    @property
    def any(self) -> bool:
        return self.jira or self.github


@dataclass
class SubmissionOptions:
    project: str = ""
    issue_type: str = "Story"
    label: str = DEFAULT_LABEL
    repository: str = ""


@dataclass
class PlatformOutcome:
    platform: str
    success: bool
    message: str
    url: Optional[str] = None
    details: Optional[str] = None


@dataclass
class SubmissionResult:
    outcomes: List[PlatformOutcome] = field(default_factory=list)
    errors: List[str] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.errors

    @property
    def lines(self) -> List[str]:
        if self.errors:
            return [f"❌ {e}" for e in self.errors]
        return [o.message for o in self.outcomes]

    @property
    def text(self) -> str:
        if not self.errors and not self.outcomes:
            return "No issues were created."
        return "\n".join(self.lines)
