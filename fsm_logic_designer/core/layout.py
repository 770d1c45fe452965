# fsm_logic_designer/core/layout.py
"""
Force directed layout of the FSM graph.

Every tick all forces are computed from scratch:

- states repel each other, scaled by the product of their radii,
- the two endpoints of a transition are connected by a spring,
- a transition midpoint is pulled towards the middle of its endpoints and is
  pushed away from every state and from every other transition midpoint.

Afterwards every movable element is advanced by ``force * dt``.
"""

import logging
import math
from typing import Optional, Sequence

from .movable import Movable
from .state import State
from .transition import Transition
from .vector import Vector
from ..utils import config

logger = logging.getLogger(__name__)


def repulsive_force(on: Vector, source: Vector, strength: float,
                    fallback: Vector = Vector(1.0, 0.0)) -> Vector:
    """
    Inverse square repulsion acting on the point `on`, pointing away from
    `source`. Coincident points are pushed along `fallback`.
    """
    delta = on - source
    dist = delta.length()
    direction = delta / dist if dist > 0 else fallback.normalize()
    dist = max(dist, config.MIN_REPULSION_DISTANCE)
    return direction * (strength / (dist * dist))


def spring_force(on: Vector, other: Vector, rest_length: float, k: float) -> Vector:
    """Linear spring acting on `on`; pulls if longer than `rest_length`."""
    delta = other - on
    dist = delta.length()
    if dist == 0:
        return Vector()
    return delta * (k * (dist - rest_length) / dist)


def state_expansion_force(a: State, b: State) -> Vector:
    """Force acting on `a` caused by `b`; `b` receives the negated force."""
    return repulsive_force(a.position, b.position, config.STATE_REPULSION * a.radius * b.radius)


def calculate_forces(states: Sequence[State], transitions: Sequence[Transition]) -> None:
    for s in states:
        s.reset_force()
    for t in transitions:
        t.reset_force()

    for i, a in enumerate(states):
        for b in states[i + 1:]:
            f = state_expansion_force(a, b)
            a.add_force(f)
            b.add_force(-f)

    free = [t for t in transitions if not t.is_loop]
    for t in free:
        a, b = t.from_state, t.to_state
        rest = config.SPRING_DISTANCE_FACTOR * max(a.radius, b.radius)
        f = spring_force(a.position, b.position, rest, config.SPRING_CONSTANT)
        a.add_force(f)
        b.add_force(-f)

        t.add_force((t.chord_midpoint() - t.position) * config.TRANSITION_ATTRACTION)
        for s in states:
            t.add_force(repulsive_force(t.position, s.position,
                                        config.TRANSITION_STATE_REPULSION * s.radius,
                                        fallback=t.normal()))

    for i, t1 in enumerate(free):
        for t2 in free[i + 1:]:
            f = repulsive_force(t1.position, t2.position, config.TRANSITION_REPULSION,
                                fallback=t1.normal())
            t1.add_force(f)
            t2.add_force(-f)


def relax(states: Sequence[State], transitions: Sequence[Transition], dt: float,
          move_states: bool = True, fixed: Optional[Movable] = None) -> float:
    """
    Performs one layout tick. The `fixed` element keeps its position, e.g.
    while it is dragged. Returns the summed displacement of all elements.
    """
    calculate_forces(states, transitions)
    total = 0.0
    if move_states:
        for s in states:
            if s is fixed:
                s.reset_force()
                continue
            old = s.position
            s.move(dt)
            total += old.distance(s.position)
    else:
        for s in states:
            s.reset_force()
    for t in transitions:
        if t is fixed:
            t.reset_force()
            continue
        old = t.position
        t.move(dt)
        total += old.distance(t.position)
    return total


def circle_layout(states: Sequence[State], transitions: Sequence[Transition]) -> None:
    """Places the states evenly on a circle with four times the largest radius."""
    if not states:
        return
    delta = 2 * math.pi / len(states)
    rad = 4 * max(s.radius for s in states)
    phi = 0.0
    for s in states:
        s.set_position(Vector(math.sin(phi) * rad, -math.cos(phi) * rad))
        phi += delta
    for t in transitions:
        t.init_pos()
    logger.debug(f"Circle layout: {len(states)} states on radius {rad:.1f}")


def snap_to_grid(states: Sequence[State], grid: int = config.GRID_SIZE) -> None:
    for s in states:
        pos = s.position
        s.set_position(Vector(math.floor(pos.x / grid + 0.5) * grid,
                              math.floor(pos.y / grid + 0.5) * grid))
