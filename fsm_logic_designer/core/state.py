# fsm_logic_designer/core/state.py
"""
A state of the finite state machine.

Besides its logical data (name, number and Moore outputs) a state carries the
data needed by the force layout: a position and the force accumulated during
the current layout tick.
"""

import logging
from typing import Dict, Mapping, Optional, Union

from .exceptions import FSMError
from .vector import Vector, ZERO
from ..utils import config

logger = logging.getLogger(__name__)


def parse_values(values: Union[str, Mapping[str, int], None]) -> Dict[str, int]:
    """
    Parses an output assignment like ``"R=1, G=0"`` into ``{'R': 1, 'G': 0}``.
    Mappings are copied, values are normalized to 0 or 1.
    """
    if not values:
        return {}
    if isinstance(values, str):
        result = {}
        for part in values.replace(";", ",").split(","):
            part = part.strip()
            if not part:
                continue
            name, sep, value = part.partition("=")
            name, value = name.strip(), value.strip()
            if not sep or not name or value not in ("0", "1"):
                raise FSMError(f"Invalid output assignment '{part}', expected 'name=0' or 'name=1'.")
            result[name] = int(value)
        return result

    result = {}
    for name, value in values.items():
        if value not in (0, 1, True, False):
            raise FSMError(f"Invalid value {value!r} for output '{name}'.")
        result[str(name)] = int(value)
    return result


class State:
    """A named and numbered node of the FSM."""

    def __init__(self, name: str, number: int = -1,
                 values: Union[str, Mapping[str, int], None] = None,
                 position: Optional[Vector] = None):
        self.name = name
        self.number = number
        self.values = parse_values(values)
        self._position = position if position is not None else ZERO
        self.force = ZERO

    # ---------- Layout ----------
    @property
    def position(self) -> Vector:
        return self._position

    def set_position(self, position: Vector) -> 'State':
        self._position = position
        return self

    @property
    def radius(self) -> float:
        """Visual radius, grows with the length of the name."""
        return max(config.STATE_MIN_RADIUS,
                   len(self.name) * config.STATE_CHAR_WIDTH / 2 + config.STATE_PADDING)

    def add_force(self, force: Vector) -> None:
        self.force = self.force + force

    def reset_force(self) -> None:
        self.force = ZERO

    def move(self, dt: float) -> None:
        self._position = self._position + self.force * dt
        self.force = ZERO

    # ---------- Interaction & drawing ----------
    def matches(self, pos: Vector) -> bool:
        return self._position.distance(pos) <= self.radius

    def values_text(self) -> str:
        return ", ".join(f"{k}={v}" for k, v in self.values.items())

    def draw_to(self, graphic) -> None:
        graphic.draw_circle(self._position, self.radius, "state")
        if self.values:
            graphic.draw_text(self._position + Vector(0, -8), self.name, "text")
            graphic.draw_text(self._position + Vector(0, 10), self.values_text(), "values")
        else:
            graphic.draw_text(self._position, self.name, "text")

    def __repr__(self):
        return f"State({self.name!r}, number={self.number})"
