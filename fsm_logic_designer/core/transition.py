# fsm_logic_designer/core/transition.py
"""
A guarded transition between two states.

The transition owns a movable midpoint which is used as the control point of
the curve drawn between the two states and as the anchor of its label. Self
loops are not moved by the layout; they are always drawn as a small circle on
top of their state.
"""

import logging
import math
from typing import List, Mapping, Optional, Union

from .expression import Expression, as_expression
from .state import State, parse_values
from .vector import Vector, ZERO, distance_to_segment
from ..utils import config

logger = logging.getLogger(__name__)


class Transition:
    """Represents a transition between two states."""

    def __init__(self, from_state: State, to_state: State,
                 condition: Union[str, Expression, None] = None,
                 values: Union[str, Mapping[str, int], None] = None):
        self.from_state = from_state
        self.to_state = to_state
        self.condition = as_expression(condition)
        self.values = parse_values(values)
        self.force = ZERO
        self._position = ZERO
        self.init_pos()

    @property
    def is_loop(self) -> bool:
        return self.from_state is self.to_state

    # ---------- Layout ----------
    @property
    def position(self) -> Vector:
        return self._position

    def set_position(self, position: Vector) -> 'Transition':
        if not self.is_loop:
            self._position = position
        return self

    def chord_midpoint(self) -> Vector:
        return Vector.midpoint(self.from_state.position, self.to_state.position)

    def normal(self) -> Vector:
        """Unit normal of the straight line between the endpoints."""
        chord = self.to_state.position - self.from_state.position
        if chord.length() == 0:
            return Vector(0.0, -1.0)
        return chord.perpendicular().normalize()

    def loop_center(self) -> Vector:
        state = self.from_state
        return state.position + Vector(0.0, -state.radius * config.LOOP_OFFSET_FACTOR)

    def init_pos(self) -> None:
        """Puts the midpoint back on the straight line between the states."""
        self._position = self.loop_center() if self.is_loop else self.chord_midpoint()

    def add_force(self, force: Vector) -> None:
        self.force = self.force + force

    def reset_force(self) -> None:
        self.force = ZERO

    def move(self, dt: float) -> None:
        if self.is_loop:
            self._position = self.loop_center()
        else:
            self._position = self._position + self.force * dt
        self.force = ZERO

    # ---------- Geometry ----------
    def curve_points(self) -> List[Vector]:
        """The polyline the renderer strokes, ending at the border of the target."""
        if self.is_loop:
            return self._loop_points()

        start, end = self.from_state.position, self.to_state.position
        # Control point chosen so the curve passes through the midpoint at t=0.5
        ctrl = self._position * 2 - Vector.midpoint(start, end)
        start = self._border_point(self.from_state, ctrl, end)
        end = self._border_point(self.to_state, ctrl, start)

        n = config.CURVE_SEGMENTS
        points = []
        for i in range(n + 1):
            t = i / n
            u = 1 - t
            points.append(start * (u * u) + ctrl * (2 * u * t) + end * (t * t))
        return points

    @staticmethod
    def _border_point(state: State, towards: Vector, fallback: Vector) -> Vector:
        direction = (towards - state.position).normalize()
        if direction.length() == 0:
            direction = (fallback - state.position).normalize()
        return state.position + direction * state.radius

    def _loop_points(self) -> List[Vector]:
        state = self.from_state
        center = self.loop_center()
        radius = state.radius * config.LOOP_RADIUS_FACTOR
        n = config.CURVE_SEGMENTS
        points = []
        # Start below the loop center so the part hidden by the state is dropped at both ends
        for i in range(n + 1):
            phi = math.pi / 2 + 2 * math.pi * i / n
            p = center + Vector(math.cos(phi), math.sin(phi)) * radius
            if p.distance(state.position) >= state.radius:
                points.append(p)
        return points

    # ---------- Interaction & drawing ----------
    def matches(self, pos: Vector) -> bool:
        if pos.distance(self._position) <= config.TRANSITION_LABEL_HIT_RADIUS:
            return True
        points = self.curve_points()
        return any(distance_to_segment(pos, a, b) <= config.TRANSITION_HIT_TOLERANCE
                   for a, b in zip(points, points[1:]))

    def label(self) -> str:
        text = str(self.condition)
        if self.values:
            assigned = ", ".join(f"{k}={v}" for k, v in self.values.items())
            text = f"{text} / {assigned}" if text else f"/ {assigned}"
        return text

    def arrow_head(self, points: Optional[List[Vector]] = None) -> List[Vector]:
        points = points if points is not None else self.curve_points()
        if len(points) < 2:
            return []
        tip = points[-1]
        direction = (tip - points[-2]).normalize()
        base = tip - direction * config.ARROW_SIZE
        side = direction.perpendicular() * (config.ARROW_SIZE / 2)
        return [tip, base + side, base - side]

    def draw_to(self, graphic) -> None:
        points = self.curve_points()
        graphic.draw_polyline(points, "transition")
        head = self.arrow_head(points)
        if head:
            graphic.draw_polygon(head, "arrow")
        label = self.label()
        if label:
            if self.is_loop:
                anchor = self._position + Vector(0.0, -self.from_state.radius * config.LOOP_RADIUS_FACTOR - 8)
            else:
                anchor = self._position
            graphic.draw_text(anchor, label, "label")

    def __repr__(self):
        return f"Transition({self.from_state.name!r} -> {self.to_state.name!r}, {str(self.condition)!r})"
