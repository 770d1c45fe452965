# fsm_logic_designer/core/movable.py
"""
Capabilities shared by the elements of the FSM graph.

States and transitions implement these protocols independently; there is no
common base class.
"""

from typing import Protocol, Sequence, runtime_checkable

from .vector import Vector


@runtime_checkable
class Movable(Protocol):
    """An element the force layout is allowed to move."""

    @property
    def position(self) -> Vector:
        ...

    def add_force(self, force: Vector) -> None:
        ...

    def reset_force(self) -> None:
        ...

    def move(self, dt: float) -> None:
        """Integrates the accumulated force into the position and clears it."""
        ...


class Graphic(Protocol):
    """
    Drawing surface used by `FSM.draw_to`. Styles are plain names
    ('state', 'transition', 'text', ...) mapped to pens by the implementation.
    """

    def draw_circle(self, center: Vector, radius: float, style: str) -> None:
        ...

    def draw_polyline(self, points: Sequence[Vector], style: str) -> None:
        ...

    def draw_polygon(self, points: Sequence[Vector], style: str) -> None:
        ...

    def draw_text(self, pos: Vector, text: str, style: str) -> None:
        ...
