"""
Geometric Primitives for the radial chart.

All coordinates are screen coordinates (y grows downwards). Angles are degrees
measured clockwise from 12 o'clock, so that 0° points up and 90° points right.
"""
from __future__ import annotations
from dataclasses import dataclass
from typing import Union, TYPE_CHECKING
import numpy as np
import math

from sunburstchart.model.geometry_utils import polar_to_cartesian, bearing_deg

if TYPE_CHECKING:
    import numpy.typing as npt


@dataclass(frozen=True)
class Vector:
    """
    A vector in the 2D screen plane representing direction and magnitude.
    """
    x: float
    y: float

    @property
    def magnitude(self) -> float:
        return math.hypot(self.x, self.y)

    @property
    def bearing(self) -> float:
        """Clockwise angle from 12 o'clock in degrees, in [0, 360)."""
        return bearing_deg(self.x, self.y)


@dataclass(frozen=True)
class Point:
    """A simple geometric point in the screen plane."""
    x: float
    y: float

    def __sub__(self, other: Point) -> Vector:
        # Point - Point = Vector (Direction)
        if isinstance(other, Point):
            return Vector(self.x - other.x, self.y - other.y)
        raise TypeError("Can only subtract a Point from a Point.")

    def distance_to(self, other: Point) -> float:
        return math.hypot(self.x - other.x, self.y - other.y)

    def to_array(self) -> npt.NDArray[np.float64]:
        return np.array([self.x, self.y])

    @classmethod
    def polar(cls, center: Point, radius: float, angle_deg: float) -> Point:
        """Point at `radius` from `center`, at a clockwise-from-top angle."""
        x, y = polar_to_cartesian(center.x, center.y, radius, angle_deg)
        return cls(x, y)


@dataclass(frozen=True)
class Line:
    """A straight line between two points."""
    start: Point
    end: Point

    def discretize(self) -> npt.NDArray[np.float64]:
        return np.array([self.start.to_array(), self.end.to_array()])


@dataclass(frozen=True)
class Arc:
    """
    A circular arc around `center`, swept from `from_angle` to `to_angle`.

    A decreasing angle sweeps counter-clockwise on screen, an increasing one
    clockwise. The span is never wrapped, so 0° -> 360° is a full turn.
    """
    center: Point
    radius: float
    from_angle: float
    to_angle: float

    @property
    def start(self) -> Point:
        return Point.polar(self.center, self.radius, self.from_angle)

    @property
    def end(self) -> Point:
        return Point.polar(self.center, self.radius, self.to_angle)

    @property
    def span(self) -> float:
        return abs(self.to_angle - self.from_angle)

    @property
    def large_arc(self) -> bool:
        return self.span > 180.0

    @property
    def clockwise(self) -> bool:
        return self.to_angle > self.from_angle

    def discretize(self, n_points: int = 32) -> npt.NDArray[np.float64]:
        """
        Generates points along the arc, both endpoints included.

        Returns:
            Array of shape (n_points, 2) with the (x, y) coordinates.
        """
        n_points = max(2, n_points)
        angles = np.linspace(self.from_angle, self.to_angle, n_points)
        theta = np.radians(angles - 90.0)
        x = self.center.x + self.radius * np.cos(theta)
        y = self.center.y + self.radius * np.sin(theta)
        return np.column_stack((x, y))


# Union type for list handling
GeometricEntity = Union[Line, Arc]
