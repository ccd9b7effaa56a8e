"""
Bezier curve evaluation for apt.dat path nodes.

Points are ``(x, y)`` tuples; apt.dat callers pass ``(longitude, latitude)``.
Every function is pure.
"""

from typing import List, Tuple

Point = Tuple[float, float]

DEFAULT_BEZIER_RESOLUTION = 60


def quadratic_bezier(t: float, p0: float, p1: float, p2: float) -> float:
    """Evaluate one axis of a quadratic Bezier at parameter t."""
    return (1 - t) * (1 - t) * p0 + 2 * (1 - t) * t * p1 + t * t * p2


def cubic_bezier(t: float, p0: float, p1: float, p2: float, p3: float) -> float:
    """Evaluate one axis of a cubic Bezier at parameter t."""
    u = 1 - t
    return u * u * u * p0 + 3 * u * u * t * p1 + 3 * u * t * t * p2 + t * t * t * p3


def _check_resolution(resolution: int) -> None:
    if resolution < 1:
        raise ValueError(f"Bezier resolution must be at least 1, got {resolution}")


def calculate_bezier(
    p0: Point,
    p1: Point,
    p2: Point,
    resolution: int = DEFAULT_BEZIER_RESOLUTION,
) -> List[Point]:
    """
    Sample a quadratic Bezier.

    Args:
        p0: Start point
        p1: Control point
        p2: End point
        resolution: Number of steps; resolution + 1 points are returned

    Returns:
        Points for t = 0, 1/resolution, ..., 1. The first and last points are
        exactly p0 and p2.
    """
    _check_resolution(resolution)
    points = []
    for i in range(resolution + 1):
        t = i / resolution
        points.append((
            quadratic_bezier(t, p0[0], p1[0], p2[0]),
            quadratic_bezier(t, p0[1], p1[1], p2[1]),
        ))
    # pin the endpoints so equality checks against the nodes hold
    points[0] = (p0[0], p0[1])
    points[-1] = (p2[0], p2[1])
    return points


def calculate_cubic_bezier(
    p0: Point,
    p1: Point,
    p2: Point,
    p3: Point,
    resolution: int = DEFAULT_BEZIER_RESOLUTION,
) -> List[Point]:
    """Sample a cubic Bezier; same contract as calculate_bezier."""
    _check_resolution(resolution)
    points = []
    for i in range(resolution + 1):
        t = i / resolution
        points.append((
            cubic_bezier(t, p0[0], p1[0], p2[0], p3[0]),
            cubic_bezier(t, p0[1], p1[1], p2[1], p3[1]),
        ))
    points[0] = (p0[0], p0[1])
    points[-1] = (p3[0], p3[1])
    return points


def mirror_control_point(vertex: Point, control: Point) -> Point:
    """Reflect a control point through its vertex (2 * vertex - control)."""
    return (2 * vertex[0] - control[0], 2 * vertex[1] - control[1])
