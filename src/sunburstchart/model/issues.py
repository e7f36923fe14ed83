"""Detected data-quality issues and the sunburst trees built from them."""
from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from enum import StrEnum
import logging
from typing import Any, Iterable, Mapping

from sunburstchart.config import SEVERITY_COLORS
from sunburstchart.exceptions import TreeFormatError
from sunburstchart.model.tree import Node

logger = logging.getLogger(__name__)

GENERAL_TABLE = "General"
UNCATEGORIZED_TYPE = "Uncategorized"


# ------------------------------------------------------------------------------
# Enums
# ------------------------------------------------------------------------------
class Severity(StrEnum):
    HIGH = "High"
    MEDIUM = "Medium"
    LOW = "Low"

    @property
    def rank(self) -> int:
        """0 is the most severe."""
        return list(Severity).index(self)

    @property
    def color(self) -> str:
        return SEVERITY_COLORS[self.value]


class GroupBy(StrEnum):
    SEVERITY = "severity"
    TABLE = "table"
    TYPE = "type"


# ------------------------------------------------------------------------------
# Data Structures
# ------------------------------------------------------------------------------
@dataclass(frozen=True)
class Issue:
    """One issue reported by the quality analysis."""
    table_name: str
    type: str
    severity: Severity
    description: str = ""
    possible_cause: str = ""
    impact: str = ""
    recommendation: str = ""

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Issue:
        if not isinstance(data, Mapping):
            raise TreeFormatError(f"Expected a mapping for an issue, got {type(data).__name__}.")
        try:
            severity = Severity(str(data.get("severity", "")).strip().capitalize())
        except ValueError:
            raise TreeFormatError(f"Unknown severity {data.get('severity')!r}.") from None

        return cls(
            table_name=data.get("table_name") or GENERAL_TABLE,
            type=data.get("type") or UNCATEGORIZED_TYPE,
            severity=severity,
            description=data.get("description", ""),
            possible_cause=data.get("possible_cause", ""),
            impact=data.get("impact", ""),
            recommendation=data.get("recommendation", ""),
        )


# ------------------------------------------------------------------------------
# Tree builders
# ------------------------------------------------------------------------------
def issues_title(count: int) -> str:
    return f"{count} Issue" if count == 1 else f"{count} Issues"


def severity_buckets(issues: Iterable[Issue]) -> tuple[Node, ...]:
    """One node per severity present, most severe first, valued by issue count."""
    counts = Counter(issue.severity for issue in issues)
    return tuple(
        Node(name=severity.value, value=counts[severity], color=severity.color)
        for severity in Severity
        if counts[severity] > 0
    )


def highest_severity(issues: Iterable[Issue]) -> Severity:
    return min((issue.severity for issue in issues), key=lambda s: s.rank, default=Severity.LOW)


def severity_tree(issues: Iterable[Issue]) -> Node:
    """`"N Issues"` -> High / Medium / Low."""
    issues = list(issues)
    return Node(name=issues_title(len(issues)), children=severity_buckets(issues))


def _grouped(issues: list[Issue], key) -> dict[str, list[Issue]]:
    groups: dict[str, list[Issue]] = {}
    for issue in issues:
        groups.setdefault(key(issue), []).append(issue)
    return groups


def table_tree(issues: Iterable[Issue]) -> Node:
    """`"N Issues"` -> table (alphabetical) -> severity."""
    issues = list(issues)
    groups = _grouped(issues, lambda i: i.table_name)
    children = tuple(
        Node(name=table, color=highest_severity(groups[table]).color, children=severity_buckets(groups[table]))
        for table in sorted(groups)
    )
    return Node(name=issues_title(len(issues)), children=children)


def type_tree(issues: Iterable[Issue]) -> Node:
    """`"N Issues"` -> issue type (most severe, then most frequent first) -> severity."""
    issues = list(issues)
    groups = _grouped(issues, lambda i: i.type)
    ordered = sorted(groups, key=lambda t: (highest_severity(groups[t]).rank, -len(groups[t])))
    children = tuple(
        Node(name=issue_type, color=highest_severity(groups[issue_type]).color,
             children=severity_buckets(groups[issue_type]))
        for issue_type in ordered
    )
    return Node(name=issues_title(len(issues)), children=children)


def build_issue_tree(issues: Iterable[Issue], group_by: GroupBy = GroupBy.SEVERITY) -> Node:
    match GroupBy(group_by):
        case GroupBy.SEVERITY:
            return severity_tree(issues)
        case GroupBy.TABLE:
            return table_tree(issues)
        case GroupBy.TYPE:
            return type_tree(issues)
