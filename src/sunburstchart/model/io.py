"""
Input/Output Manager
Reads trees and issue lists from JSON and writes charts as standalone SVG.
"""
import json
import logging
from typing import Any, Optional
from xml.sax.saxutils import escape, quoteattr

from sunburstchart.config import LABEL_COLOR, STROKE_COLOR, STROKE_WIDTH
from sunburstchart.exceptions import TreeFormatError
from sunburstchart.model.chart import ChartGeometry
from sunburstchart.model.geometry_utils import format_number
from sunburstchart.model.issues import Issue
from sunburstchart.model.tree import Node

logger = logging.getLogger(__name__)


def _read_json(filepath: str) -> Any:
    try:
        with open(filepath, "r", encoding="utf-8") as f:
            return json.load(f)
    except json.JSONDecodeError as e:
        logger.error(f"Invalid JSON in '{filepath}': {e}")
        raise TreeFormatError(f"'{filepath}' is not valid JSON: {e}") from e


def load_tree(filepath: str) -> Node:
    """Load a `{name, value?, color?, children?}` hierarchy."""
    logger.info(f"Loading tree from: {filepath}")
    data = _read_json(filepath)
    try:
        return Node.from_dict(data)
    except TreeFormatError as e:
        logger.error(f"'{filepath}' does not describe a tree: {e}")
        raise


def parse_issues(data: Any) -> list[Issue]:
    """Accept either `{"issues_detected": [...]}` or a bare list of issues."""
    if isinstance(data, dict):
        if "issues_detected" not in data:
            raise TreeFormatError("Expected an 'issues_detected' key.")
        data = data["issues_detected"]
    if not isinstance(data, list):
        raise TreeFormatError(f"Expected a list of issues, got {type(data).__name__}.")
    return [Issue.from_dict(item) for item in data]


def load_issues(filepath: str) -> list[Issue]:
    logger.info(f"Loading issues from: {filepath}")
    data = _read_json(filepath)
    try:
        issues = parse_issues(data)
    except TreeFormatError as e:
        logger.error(f"'{filepath}' does not describe an issue list: {e}")
        raise
    logger.debug(f"Loaded {len(issues)} issues.")
    return issues


def render_svg(chart: ChartGeometry, label: Optional[str] = None) -> str:
    """
    Render a chart as a standalone SVG document.

    Args:
        chart: Laid-out chart.
        label: Center text; defaults to the root label.
    """
    f = format_number
    width, height = f(chart.width), f(chart.height)
    text = chart.root_label if label is None else label

    lines = [
        f'<svg xmlns="http://www.w3.org/2000/svg" width="{width}" height="{height}" '
        f'viewBox="0 0 {width} {height}">',
        "  <g>",
    ]
    for segment in chart.visible_segments:
        arc = segment.arc
        lines.append(
            f'    <path d="{segment.path.to_svg()}" fill={quoteattr(arc.color)} '
            f'stroke="{STROKE_COLOR}" stroke-width="{f(STROKE_WIDTH)}">'
            f"<title>{escape(arc.name)}</title></path>"
        )
    lines.append("  </g>")
    lines.append(
        f'  <text x="{f(chart.center.x)}" y="{f(chart.center.y)}" text-anchor="middle" '
        f'dy=".3em" font-size="12" font-weight="600" fill="{LABEL_COLOR}">{escape(text)}</text>'
    )
    lines.append("</svg>")
    return "\n".join(lines) + "\n"


def save_svg(chart: ChartGeometry, filepath: str) -> None:
    logger.info(f"Saving chart to: {filepath}")
    with open(filepath, "w", encoding="utf-8") as f:
        f.write(render_svg(chart))
