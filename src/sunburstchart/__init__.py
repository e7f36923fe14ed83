"""Radial hierarchical (sunburst) layout of data-quality issue breakdowns."""
from sunburstchart.exceptions import LayoutError, SunburstError, TreeFormatError
from sunburstchart.model.chart import ChartGeometry, ChartSegment, build_chart
from sunburstchart.model.interaction import Hovered, InteractionLayer, NoHover
from sunburstchart.model.layout import Arc, band, layout
from sunburstchart.model.paths import PathDescriptor, build_arc_path
from sunburstchart.model.tree import Node, WeightedNode, normalize, tree_depth

__all__ = [
    "Arc",
    "ChartGeometry",
    "ChartSegment",
    "Hovered",
    "InteractionLayer",
    "LayoutError",
    "NoHover",
    "Node",
    "PathDescriptor",
    "SunburstError",
    "TreeFormatError",
    "WeightedNode",
    "band",
    "build_arc_path",
    "build_chart",
    "layout",
    "normalize",
    "tree_depth",
]
