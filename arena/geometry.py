"""
last_stander module: arena/geometry.py

Plane geometry helpers. Headings are radians, 0 pointing along +y.
"""

from __future__ import annotations
from typing import Optional, Sequence
import math

from pygame.math import Vector2


def wrap_angle(a: float) -> float:
    while a > math.pi:
        a -= 2 * math.pi
    while a < -math.pi:
        a += 2 * math.pi
    return a


def heading_vector(heading: float) -> Vector2:
    return Vector2(-math.sin(heading), math.cos(heading))


def heading_of(v: Vector2) -> float:
    return math.atan2(-v.x, v.y)


def angle_from(position: Vector2, heading: float, target: Vector2) -> float:
    """Bearing of ``target`` as seen from ``position`` facing ``heading``, in [-pi, pi]."""
    offset = target - position
    if offset.length_squared() == 0.0:
        return 0.0
    return wrap_angle(heading_of(offset) - heading)


def get_nearest(origin: Vector2, points: Sequence[Vector2]) -> Optional[Vector2]:
    if not points:
        return None
    return min(points, key=lambda p: origin.distance_squared_to(p))


def ray_hits_circle(origin: Vector2, direction: Vector2, center: Vector2, radius: float) -> Optional[float]:
    """
    Distance along a unit ``direction`` to where it first comes within
    ``radius`` of ``center``, or None when it passes by or is behind.
    """
    offset = center - origin
    along = offset.dot(direction)
    if along < 0.0:
        return None
    miss_sq = offset.length_squared() - along * along
    if miss_sq > radius * radius:
        return None
    return along
