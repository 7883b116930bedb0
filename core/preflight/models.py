"""
Preflight data model - severities, issues and the aggregated report.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Iterable, List


class Severity(str, Enum):
    """Layout risk classification, ordered none < minor < major"""
    NONE = "none"
    MINOR = "minor"
    MAJOR = "major"

    @property
    def rank(self) -> int:
        return _SEVERITY_RANK[self]

    @classmethod
    def highest(cls, severities: Iterable["Severity"]) -> "Severity":
        """Maximum-rank severity, NONE for an empty iterable."""
        result = cls.NONE
        for severity in severities:
            if severity.rank > result.rank:
                result = severity
        return result


_SEVERITY_RANK = {
    Severity.NONE: 0,
    Severity.MINOR: 1,
    Severity.MAJOR: 2,
}


# Panel copy shown for each overall severity
STATUS_MESSAGES: Dict[Severity, Dict[str, str]] = {
    Severity.MAJOR: {
        "state": "Major issues",
        "title": "Layout requires attention",
        "subtext": "Resolve overflow or missing assets before exporting.",
    },
    Severity.MINOR: {
        "state": "Minor issues",
        "title": "Export possible with warnings",
        "subtext": "Some sections may not flow cleanly across pages.",
    },
    Severity.NONE: {
        "state": "All good",
        "title": "Layout ready for export",
        "subtext": "No issues detected in page flow or assets.",
    },
}


@dataclass
class PreflightIssue:
    """
    One detected layout problem.

    Attributes:
        id: Stable identifier the UI can key on.
        title: Short human-readable heading.
        text: Longer explanation.
        severity: What this issue contributes to the overall severity.
    """
    id: str
    title: str
    text: str
    severity: Severity = Severity.MINOR

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "title": self.title,
            "text": self.text,
            "severity": self.severity.value,
        }


@dataclass
class PreflightReport:
    """
    Result of a preflight run.

    Issues are listed in detection order and drive the severity. Hints are
    informational and never raise it.
    """
    severity: Severity = Severity.NONE
    issues: List[PreflightIssue] = field(default_factory=list)
    hints: List[PreflightIssue] = field(default_factory=list)

    @property
    def export_safe(self) -> bool:
        return self.severity is not Severity.MAJOR

    @property
    def status(self) -> Dict[str, str]:
        return STATUS_MESSAGES[self.severity]

    def issue_ids(self) -> List[str]:
        return [issue.id for issue in self.issues]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "severity": self.severity.value,
            "issues": [issue.to_dict() for issue in self.issues],
            "hints": [hint.to_dict() for hint in self.hints],
            "export_safe": self.export_safe,
            "status": dict(self.status),
        }
