"""
Arc Path Builder
================
Turns a (radius band, angle range) pair into the closed outline of an annular sector.

The outline is drawn as:
    1. move to the outer edge at `end_angle`,
    2. outer arc back to `start_angle` (counter-clockwise on screen),
    3. line inwards to the inner edge at `start_angle`,
    4. inner arc forward to `end_angle` (clockwise on screen),
    5. close.

A `PathDescriptor` holds these segments as geometric primitives so it can be
rendered as SVG path data, discretized with numpy, or replayed on a Qt painter path.
"""
from __future__ import annotations

from dataclasses import dataclass, field
import logging
import math
from typing import Optional, Tuple, Union, TYPE_CHECKING

import numpy as np

from sunburstchart.config import ANGLE_EPS
from sunburstchart.model.geometry_primitives import Arc, GeometricEntity, Line, Point
from sunburstchart.model.geometry_utils import format_number

if TYPE_CHECKING:
    import numpy.typing as npt

logger = logging.getLogger(__name__)


@dataclass
class PathDescriptor:
    """
    A single closed outline made of lines and arcs.

    An empty descriptor (no start point, no segments) stands for a sector with
    nothing to draw.
    """
    start: Optional[Point] = None
    segments: list[GeometricEntity] = field(default_factory=list)
    closed: bool = False

    @property
    def is_empty(self) -> bool:
        return self.start is None or not self.segments

    @property
    def arcs(self) -> list[Arc]:
        return [s for s in self.segments if isinstance(s, Arc)]

    def to_svg(self) -> str:
        """SVG path data (`d` attribute); empty string for an empty descriptor."""
        if self.is_empty:
            return ""

        f = format_number
        parts = [f"M {f(self.start.x)} {f(self.start.y)}"]
        for segment in self.segments:
            end = segment.end
            if isinstance(segment, Arc):
                r = f(segment.radius)
                large_arc = 1 if segment.large_arc else 0
                sweep = 1 if segment.clockwise else 0
                parts.append(f"A {r} {r} 0 {large_arc} {sweep} {f(end.x)} {f(end.y)}")
            else:
                parts.append(f"L {f(end.x)} {f(end.y)}")
        if self.closed:
            parts.append("Z")
        return " ".join(parts)

    def to_polyline(self, points_per_arc: int = 32) -> npt.NDArray[np.float64]:
        """
        Discretize the outline into an (N, 2) array of vertices.

        Consecutive duplicates at segment joints are dropped; the ring is closed
        by repeating the first vertex when `closed` is set.
        """
        if self.is_empty:
            return np.empty((0, 2))

        chunks = [self.start.to_array()[np.newaxis, :]]
        for segment in self.segments:
            if isinstance(segment, Arc):
                pts = segment.discretize(points_per_arc)
            else:
                pts = segment.discretize()
            chunks.append(pts[1:])

        pts = np.vstack(chunks)
        if self.closed and not np.allclose(pts[0], pts[-1]):
            pts = np.vstack((pts, pts[0]))
        return pts


def build_arc_path(
    center: Union[Point, Tuple[float, float]],
    outer_radius: float,
    inner_radius: float,
    start_angle: float,
    end_angle: float,
    *,
    split_full_circle: bool = True,
) -> PathDescriptor:
    """
    Build the closed outline of the annular sector [start_angle, end_angle).

    Args:
        center: Chart center in screen coordinates.
        outer_radius: Radius of the outer edge.
        inner_radius: Radius of the inner edge (0 gives a pie wedge).
        start_angle: Clockwise-from-top start angle in degrees.
        end_angle: Clockwise-from-top end angle in degrees.
        split_full_circle: Draw a span of 360° or more as two half arcs per edge.
            A single arc whose endpoints coincide has no drawable extent in
            two-point arc primitives such as SVG's `A` command.

    Returns:
        The outline. Zero-width, negative or non-finite spans give an empty descriptor.
    """
    if not isinstance(center, Point):
        center = Point(*center)

    span = end_angle - start_angle
    if not math.isfinite(span) or span <= 0.0:
        return PathDescriptor()

    full_circle = span >= 360.0 - ANGLE_EPS
    if full_circle and split_full_circle:
        logger.debug(f"Splitting full-circle sector at r={outer_radius} into two half arcs.")
        mid_angle = start_angle + span / 2.0
        outer_arcs = [
            Arc(center, outer_radius, end_angle, mid_angle),
            Arc(center, outer_radius, mid_angle, start_angle),
        ]
        inner_arcs = [
            Arc(center, inner_radius, start_angle, mid_angle),
            Arc(center, inner_radius, mid_angle, end_angle),
        ]
    else:
        if full_circle:
            logger.debug(f"Full-circle sector at r={outer_radius} kept as a single arc.")
        outer_arcs = [Arc(center, outer_radius, end_angle, start_angle)]
        inner_arcs = [Arc(center, inner_radius, start_angle, end_angle)]

    outer_start = Point.polar(center, outer_radius, start_angle)
    inner_start = Point.polar(center, inner_radius, start_angle)

    segments: list[GeometricEntity] = [
        *outer_arcs,
        Line(outer_start, inner_start),
        *inner_arcs,
    ]
    return PathDescriptor(
        start=Point.polar(center, outer_radius, end_angle),
        segments=segments,
        closed=True,
    )
