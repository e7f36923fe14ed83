"""
Tree Model
==========
Canonical weighted hierarchy consumed by the layout engine.

Why is this file needed?
------------------------
1. Input: `Node` is the caller-facing hierarchy (name, optional value, optional
   color, children). It mirrors the JSON shape `{name, value?, color?, children?}`.
2. Normalization: `normalize()` turns a `Node` into a `WeightedNode` copy where
   every node has a finite, non-negative weight, a color and a structural id.
   Malformed weights are clamped, never rejected.

Classes:
    Node: Caller-owned input node.
    WeightedNode: Normalized node used by the layout engine.
"""
from __future__ import annotations

from dataclasses import dataclass, field
import logging
import math
from typing import Any, Mapping, Optional, Sequence, Tuple, Union

from sunburstchart.config import DEFAULT_COLOR
from sunburstchart.exceptions import TreeFormatError

logger = logging.getLogger(__name__)

NodePath = Tuple[int, ...]


@dataclass(frozen=True)
class Node:
    """A node of the input hierarchy. Containers have children, leaves carry a value."""
    name: str
    value: Optional[float] = None
    color: Optional[str] = None
    children: Tuple[Node, ...] = ()

    @property
    def is_container(self) -> bool:
        return bool(self.children)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Node:
        """Build a node (recursively) from its JSON representation."""
        if not isinstance(data, Mapping):
            raise TreeFormatError(f"Expected a mapping for a tree node, got {type(data).__name__}.")

        raw_children = data.get("children") or []
        if not isinstance(raw_children, Sequence) or isinstance(raw_children, (str, bytes)):
            raise TreeFormatError(f"'children' of node '{data.get('name')}' must be a list.")

        return cls(
            name=str(data.get("name", "")),
            value=data.get("value"),
            color=data.get("color"),
            children=tuple(cls.from_dict(child) for child in raw_children),
        )

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {"name": self.name}
        if self.value is not None:
            out["value"] = self.value
        if self.color is not None:
            out["color"] = self.color
        if self.children:
            out["children"] = [child.to_dict() for child in self.children]
        return out


@dataclass(frozen=True)
class WeightedNode:
    """
    Normalized copy of a `Node`.

    `path` is the structural id: child indices from the root, `()` for the root.
    `source` is the caller's original node, handed back on interaction.
    """
    name: str
    weight: float
    color: str
    path: NodePath = ()
    children: Tuple[WeightedNode, ...] = ()
    source: Optional[Node] = field(default=None, repr=False)

    @property
    def level(self) -> int:
        return len(self.path)


def clean_weight(raw: Any, name: str = "") -> Optional[float]:
    """
    Coerce a raw value into a usable weight.

    Returns None for a missing value, otherwise a finite float >= 0.
    Negative values are clamped to 0; NaN, infinities and non-numeric values become 0.
    """
    if raw is None:
        return None
    try:
        weight = float(raw)
    except (TypeError, ValueError):
        logger.debug(f"Node '{name}': non-numeric value {raw!r} treated as 0.")
        return 0.0
    if not math.isfinite(weight):
        logger.debug(f"Node '{name}': non-finite value {raw!r} treated as 0.")
        return 0.0
    if weight < 0.0:
        logger.debug(f"Node '{name}': negative value {weight} clamped to 0.")
        return 0.0
    return weight


def normalize(node: Node, path: NodePath = ()) -> WeightedNode:
    """
    Return a normalized copy of `node` and its subtree.

    A node without a value takes the sum of its children's effective weights,
    which for a tree of value-less containers is the sum of its descendant leaves.
    A leaf without a value weighs 0. The input tree is never modified.
    """
    # Post-order walk on an explicit stack: children finish before their parent
    finished: dict[NodePath, WeightedNode] = {}
    stack = [(node, path, False)]
    while stack:
        current, current_path, expanded = stack.pop()
        kids = current.children or ()
        if not expanded:
            stack.append((current, current_path, True))
            stack.extend((kids[index], current_path + (index,), False) for index in reversed(range(len(kids))))
            continue

        children = tuple(finished.pop(current_path + (index,)) for index in range(len(kids)))
        weight = clean_weight(current.value, current.name)
        if weight is None:
            weight = math.fsum(child.weight for child in children)

        finished[current_path] = WeightedNode(
            name=current.name,
            weight=weight,
            color=current.color or DEFAULT_COLOR,
            path=current_path,
            children=children,
            source=current,
        )
    return finished[path]


def tree_depth(node: Union[Node, WeightedNode]) -> int:
    """Deepest level present below `node` (a lone root has depth 0)."""
    deepest = 0
    stack = [(node, 0)]
    while stack:
        current, depth = stack.pop()
        deepest = max(deepest, depth)
        stack.extend((child, depth + 1) for child in current.children or ())
    return deepest
