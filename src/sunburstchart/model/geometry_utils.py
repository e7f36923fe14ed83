from __future__ import annotations

from math import atan2, cos, degrees, pi, sin


def deg2rad(degrees: float) -> float:
    return degrees * pi / 180


def polar_to_cartesian(
    cx: float,
    cy: float,
    radius: float,
    angle_deg: float
) -> tuple[float, float]:
    """
    Convert a clockwise-from-top polar coordinate into screen coordinates.

    Args:
        cx: X coordinate of the center.
        cy: Y coordinate of the center (screen coordinates, y grows downwards).
        radius: Distance from the center.
        angle_deg: Angle in degrees, 0° at 12 o'clock, increasing clockwise.

    Returns:
        The (x, y) screen coordinates.

    Notes:
        - The -90° offset rotates the trigonometric 0° (3 o'clock) up to 12 o'clock.
    """
    angle_rad = deg2rad(angle_deg - 90.0)
    return cx + radius * cos(angle_rad), cy + radius * sin(angle_rad)


def bearing_deg(dx: float, dy: float) -> float:
    """
    Inverse of `polar_to_cartesian` for the angle: the clockwise angle from
    12 o'clock of the screen vector (dx, dy), normalized to [0, 360).
    """
    angle = degrees(atan2(dx, -dy)) % 360.0
    # -0.0 % 360 and tiny negatives can round up to exactly 360
    return 0.0 if angle >= 360.0 else angle


def format_number(value: float, ndigits: int = 4) -> str:
    """Compact decimal text for path data: no trailing zeros, no '-0'."""
    value = round(value, ndigits) + 0.0
    return f"{value:.10g}"
