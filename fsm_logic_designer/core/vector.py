# fsm_logic_designer/core/vector.py
"""
Floating point 2D vector used for positions and forces of the FSM graph.
"""

import math
from dataclasses import dataclass


@dataclass(frozen=True)
class Vector:
    """An immutable point or direction in the drawing plane."""
    x: float = 0.0
    y: float = 0.0

    def __add__(self, other: 'Vector') -> 'Vector':
        return Vector(self.x + other.x, self.y + other.y)

    def __sub__(self, other: 'Vector') -> 'Vector':
        return Vector(self.x - other.x, self.y - other.y)

    def __mul__(self, factor: float) -> 'Vector':
        return Vector(self.x * factor, self.y * factor)

    __rmul__ = __mul__

    def __truediv__(self, divisor: float) -> 'Vector':
        return Vector(self.x / divisor, self.y / divisor)

    def __neg__(self) -> 'Vector':
        return Vector(-self.x, -self.y)

    def length(self) -> float:
        return math.hypot(self.x, self.y)

    def distance(self, other: 'Vector') -> float:
        return math.hypot(self.x - other.x, self.y - other.y)

    def normalize(self) -> 'Vector':
        """Returns the unit vector; the zero vector is returned unchanged."""
        length = self.length()
        if length == 0:
            return self
        return Vector(self.x / length, self.y / length)

    def perpendicular(self) -> 'Vector':
        """The vector rotated by 90 degrees counter-clockwise."""
        return Vector(-self.y, self.x)

    def dot(self, other: 'Vector') -> float:
        return self.x * other.x + self.y * other.y

    @staticmethod
    def midpoint(a: 'Vector', b: 'Vector') -> 'Vector':
        return Vector((a.x + b.x) / 2, (a.y + b.y) / 2)


ZERO = Vector(0.0, 0.0)


def distance_to_segment(p: Vector, a: Vector, b: Vector) -> float:
    """Shortest distance of point p to the line segment a-b."""
    ab = b - a
    denom = ab.dot(ab)
    if denom == 0:
        return p.distance(a)
    t = max(0.0, min(1.0, (p - a).dot(ab) / denom))
    return p.distance(a + ab * t)
