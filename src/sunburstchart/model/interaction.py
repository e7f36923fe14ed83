"""
Interaction Layer
=================
Hover and click handling on top of a laid-out chart.

The hover selection is the only mutable state of the chart. It is an explicit
two-state value, `NoHover` or `Hovered(node_id, label)`, changed only by
`on_pointer_enter()` and `on_pointer_leave()`. The raw-coordinate helpers
(`pointer_move`, `pointer_press`) resolve a point to an arc first and then
feed those same two events.
"""
from __future__ import annotations

from dataclasses import dataclass
import logging
from typing import Callable, Optional, Sequence, Union

from sunburstchart.model.geometry_primitives import Point
from sunburstchart.model.layout import Arc
from sunburstchart.model.tree import Node, NodePath

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class NoHover:
    pass


@dataclass(frozen=True)
class Hovered:
    node_id: NodePath
    label: str


HoverState = Union[NoHover, Hovered]

NO_HOVER = NoHover()


def format_value(value: Optional[float]) -> str:
    """Integral values print without a decimal point, others as given."""
    if value is None:
        return ""
    if float(value).is_integer():
        return str(int(value))
    return f"{value:g}"


def hover_label(arc: Arc) -> str:
    return f"{arc.name}: {format_value(arc.value)}"


class InteractionLayer:
    """
    Maps pointer events to chart arcs.

    Args:
        root_label: Text shown in the center while nothing is hovered.
        on_click: Called with the source node of a clicked arc.
        on_hover_changed: Called with the new center label whenever the hover state changes.
    """
    def __init__(
        self,
        root_label: str = "",
        on_click: Optional[Callable[[Optional[Node]], None]] = None,
        on_hover_changed: Optional[Callable[[str], None]] = None,
    ) -> None:
        self.root_label = root_label
        self.on_click_callback = on_click
        self.on_hover_changed = on_hover_changed

        self._state: HoverState = NO_HOVER
        self._arcs: list[Arc] = []
        self._center = Point(0.0, 0.0)

    # ------------------------------------------------------------------------------
    # State
    # ------------------------------------------------------------------------------

    @property
    def state(self) -> HoverState:
        return self._state

    @property
    def hovered_id(self) -> Optional[NodePath]:
        return self._state.node_id if isinstance(self._state, Hovered) else None

    @property
    def label(self) -> str:
        """Current center label: the hovered arc's label, else the root label."""
        if isinstance(self._state, Hovered):
            return self._state.label
        return self.root_label

    def set_geometry(self, arcs: Sequence[Arc], center: Point, root_label: Optional[str] = None) -> None:
        """
        Replace the arcs used for hit testing (after a re-layout).

        A hover on a node that no longer exists is dropped. A hover on a node
        whose label changed is re-entered with the new label.
        """
        self._arcs = list(arcs)
        self._center = center
        if root_label is not None:
            self.root_label = root_label

        hovered = self.hovered_id
        if hovered is None:
            return
        match = next((a for a in self._arcs if a.node_id == hovered and a.is_visible), None)
        if match is None:
            self.on_pointer_leave()
        else:
            self.on_pointer_enter(match)

    # ------------------------------------------------------------------------------
    # Events
    # ------------------------------------------------------------------------------

    def on_pointer_enter(self, arc: Arc) -> None:
        new_state = Hovered(node_id=arc.node_id, label=hover_label(arc))
        self._transition(new_state)

    def on_pointer_leave(self) -> None:
        self._transition(NO_HOVER)

    def on_click(self, arc: Arc) -> None:
        """Hand the arc's source node (not the arc) to the click callback, once."""
        logger.debug(f"Click on '{arc.name}' {arc.node_id}.")
        if self.on_click_callback is not None:
            self.on_click_callback(arc.source_node)

    # ------------------------------------------------------------------------------
    # Raw pointer input
    # ------------------------------------------------------------------------------

    def hit_test(self, x: float, y: float) -> Optional[Arc]:
        """Return the visible arc under the screen point (x, y), if any."""
        offset = Point(x, y) - self._center
        radius = offset.magnitude
        angle = offset.bearing
        for arc in self._arcs:
            if arc.contains(radius, angle):
                return arc
        return None

    def pointer_move(self, x: float, y: float) -> Optional[Arc]:
        arc = self.hit_test(x, y)
        if arc is None:
            if isinstance(self._state, Hovered):
                self.on_pointer_leave()
        elif Hovered(node_id=arc.node_id, label=hover_label(arc)) != self._state:
            self.on_pointer_enter(arc)
        return arc

    def pointer_press(self, x: float, y: float) -> Optional[Arc]:
        arc = self.hit_test(x, y)
        if arc is not None:
            self.on_click(arc)
        return arc

    def _transition(self, new_state: HoverState) -> None:
        if new_state == self._state:
            return
        self._state = new_state
        if self.on_hover_changed is not None:
            self.on_hover_changed(self.label)
