"""
Radial Layout Engine
====================
Partitions the full circle among the nodes of a weighted tree.

Every node below the root gets an angular range proportional to its weight
within its parent's range, and a radius band determined by its depth. The
transform is pure: the input tree is never mutated and nothing is retained
between calls.
"""
from __future__ import annotations

from dataclasses import dataclass, field
import logging
from typing import Optional, Tuple, Union

from sunburstchart.exceptions import LayoutError
from sunburstchart.model.tree import Node, NodePath, WeightedNode, normalize

logger = logging.getLogger(__name__)

FULL_CIRCLE: float = 360.0


@dataclass(frozen=True)
class Arc:
    """One annular sector of the chart."""
    inner_radius: float
    outer_radius: float
    start_angle: float
    end_angle: float
    color: str
    node_id: NodePath
    name: str
    value: float
    level: int
    source_node: Optional[Node] = field(default=None, repr=False)

    @property
    def span(self) -> float:
        return self.end_angle - self.start_angle

    @property
    def is_visible(self) -> bool:
        """False for zero-width sectors (they are laid out but cannot be seen or hit)."""
        return self.span > 0.0 and self.outer_radius > self.inner_radius

    def contains(self, radius: float, angle: float) -> bool:
        """Polar containment test, half-open on both the band and the angle range."""
        if not self.is_visible:
            return False
        return (
            self.inner_radius <= radius < self.outer_radius
            and self.start_angle <= angle < self.end_angle
        )


def band(
    level: int,
    max_levels: int,
    radius: float,
    inner_radius: float = 0.0
) -> Tuple[float, float]:
    """
    Radius band (inner, outer) of the ring at `level`.

    Rings split [inner_radius, radius] evenly into `max_levels` bands; level 1 is
    the innermost ring. Levels beyond `max_levels` continue outwards at the same width.
    """
    if level < 1:
        raise LayoutError(f"The root (level 0) has no radius band, got level={level}.")
    if max_levels < 1:
        raise LayoutError(f"max_levels must be >= 1, got {max_levels}.")
    width = (radius - inner_radius) / max_levels
    return inner_radius + (level - 1) * width, inner_radius + level * width


def layout(
    root: Union[Node, WeightedNode],
    max_levels: int,
    radius: float,
    inner_radius: float = 0.0,
) -> list[Arc]:
    """
    Lay out `root` as a list of arcs, in depth-first input order.

    Args:
        root: Tree to lay out. A `Node` is normalized first.
        max_levels: Number of rings, normally the depth of the tree.
        radius: Outer radius of the chart.
        inner_radius: Radius of the empty hole in the middle (0 for a full disc).

    Returns:
        One arc per non-root node with a positive weight. Descendants of a
        zero-weight node are still emitted, with a zero-width angle range.

    Raises:
        LayoutError: If `max_levels` < 1 or the hole is larger than the chart.
    """
    if isinstance(max_levels, bool) or not isinstance(max_levels, int) or max_levels < 1:
        raise LayoutError(f"max_levels must be an integer >= 1, got {max_levels!r}.")
    if inner_radius < 0.0 or inner_radius > radius:
        raise LayoutError(f"inner_radius must lie in [0, {radius}], got {inner_radius}.")

    tree = root if isinstance(root, WeightedNode) else normalize(root)

    arcs: list[Arc] = []
    stack = [(tree, 0, 0.0, FULL_CIRCLE)]
    while stack:
        node, level, start_angle, end_angle = stack.pop()
        if level > 0 and node.weight > 0.0:
            inner, outer = band(level, max_levels, radius, inner_radius)
            arcs.append(Arc(
                inner_radius=inner,
                outer_radius=outer,
                start_angle=start_angle,
                end_angle=end_angle,
                color=node.color,
                node_id=node.path,
                name=node.name,
                value=node.weight,
                level=level,
                source_node=node.source,
            ))

        if not node.children:
            continue

        angle_range = end_angle - start_angle
        # All-zero siblings divide by 1 so that each gets an empty range
        children_total = sum(child.weight for child in node.children) or 1.0

        placed = []
        current_angle = start_angle
        for child in node.children:
            child_angle = child.weight / children_total * angle_range
            placed.append((child, level + 1, current_angle, current_angle + child_angle))
            current_angle += child_angle
        # Reversed so that siblings come off the stack in input order
        stack.extend(reversed(placed))

    logger.debug(f"Laid out {len(arcs)} arcs for '{tree.name}' over {max_levels} ring(s).")
    return arcs
