"""
Chart Geometry
==============
Glue between the pure layout and its consumers (SVG export, Qt view).

`build_chart()` sizes the chart from its width and height, derives the ring
count from the actual depth of the tree, lays it out and attaches an outline
path to every arc.
"""
from __future__ import annotations

from dataclasses import dataclass, field
import logging
from typing import Optional, Union

from sunburstchart.config import DEFAULT_HEIGHT, DEFAULT_WIDTH
from sunburstchart.model.geometry_primitives import Point
from sunburstchart.model.layout import Arc, layout
from sunburstchart.model.paths import PathDescriptor, build_arc_path
from sunburstchart.model.tree import Node, WeightedNode, normalize, tree_depth

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ChartSegment:
    arc: Arc
    path: PathDescriptor = field(compare=False)

    @property
    def is_visible(self) -> bool:
        return self.arc.is_visible and not self.path.is_empty


@dataclass
class ChartGeometry:
    """Everything needed to draw one sunburst."""
    width: float
    height: float
    center: Point
    radius: float
    inner_radius: float
    max_levels: int
    root_label: str
    segments: list[ChartSegment] = field(default_factory=list)

    @property
    def arcs(self) -> list[Arc]:
        return [segment.arc for segment in self.segments]

    @property
    def visible_segments(self) -> list[ChartSegment]:
        return [segment for segment in self.segments if segment.is_visible]


def build_chart(
    root: Union[Node, WeightedNode],
    width: float = DEFAULT_WIDTH,
    height: float = DEFAULT_HEIGHT,
    *,
    max_levels: Optional[int] = None,
    center_hole: bool = True,
    split_full_circle: bool = True,
) -> ChartGeometry:
    """
    Lay out `root` in a `width` x `height` box.

    Args:
        root: Tree to draw.
        width: Box width in pixels.
        height: Box height in pixels.
        max_levels: Ring count; defaults to the depth of the tree (at least 1).
        center_hole: Keep a hole one ring wide in the middle for the center label.
        split_full_circle: Passed on to `build_arc_path`.
    """
    tree = root if isinstance(root, WeightedNode) else normalize(root)

    radius = min(width, height) / 2.0
    center = Point(width / 2.0, height / 2.0)
    if max_levels is None:
        max_levels = max(1, tree_depth(tree))
    inner_radius = radius / (max_levels + 1) if center_hole else 0.0

    segments = [
        ChartSegment(
            arc=arc,
            path=build_arc_path(
                center, arc.outer_radius, arc.inner_radius, arc.start_angle, arc.end_angle,
                split_full_circle=split_full_circle,
            ),
        )
        for arc in layout(tree, max_levels, radius, inner_radius)
    ]

    logger.debug(
        f"Chart '{tree.name}' {width}x{height}: {len(segments)} segments, {max_levels} ring(s)."
    )
    return ChartGeometry(
        width=width,
        height=height,
        center=center,
        radius=radius,
        inner_radius=inner_radius,
        max_levels=max_levels,
        root_label=tree.name,
        segments=segments,
    )
