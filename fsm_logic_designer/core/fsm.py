# fsm_logic_designer/core/fsm.py
"""
The finite state machine edited by the user.

The FSM owns the states and transitions in insertion order, runs the force
layout on them and creates the truth table implementing the machine.
Mutating methods return the FSM itself so calls can be chained.
"""

import logging
from typing import List, Optional, Union

from . import layout
from .exceptions import StateNotFoundError
from .expression import Expression
from .movable import Graphic, Movable
from .state import State
from .transition import Transition
from .transition_table import TransitionTableCreator
from .truth_table import TruthTable
from .vector import Vector

logger = logging.getLogger(__name__)

StateRef = Union[State, str, int]


class FSM:
    """A simple finite state machine."""

    def __init__(self, *states: State):
        self._states: List[State] = []
        self._transitions: List[Transition] = []
        for s in states:
            self.add_state(s)

    @property
    def states(self) -> List[State]:
        return list(self._states)

    @property
    def transitions(self) -> List[Transition]:
        return list(self._transitions)

    # ---------- Construction ----------
    def add_state(self, state: State) -> 'FSM':
        """
        Adds a state. A state without number gets the lowest number not used
        by another state, which is the insertion index unless states were removed.
        """
        if state.number < 0:
            used = {s.number for s in self._states}
            state.number = next(n for n in range(len(self._states) + 1) if n not in used)
        self._states.append(state)
        logger.debug(f"FSM: Added state '{state.name}' with number {state.number}.")
        return self

    def add_transition(self, transition: Transition) -> 'FSM':
        self._transitions.append(transition)
        logger.debug(f"FSM: Added {transition!r}.")
        return self

    def transition(self, from_state: StateRef, to_state: StateRef,
                   condition: Union[str, Expression, None] = None,
                   values=None) -> 'FSM':
        """
        Adds a transition. States may be given by name, by number or as State
        objects; State objects not yet part of the FSM are added first.
        """
        source = self._resolve(from_state)
        target = self._resolve(to_state)
        for s in (source, target):
            if not self.contains(s):
                self.add_state(s)
        return self.add_transition(Transition(source, target, condition, values))

    def _resolve(self, ref: StateRef) -> State:
        if isinstance(ref, State):
            return ref
        return self.find_state(ref)

    def contains(self, state: State) -> bool:
        return any(s is state for s in self._states)

    def find_state(self, key: Union[str, int]) -> State:
        """Finds a state by its name or, if an int is given, by its number."""
        if isinstance(key, bool) or not isinstance(key, (str, int)):
            raise TypeError(f"States are looked up by name or number, not by {type(key).__name__}.")
        for s in self._states:
            if isinstance(key, str) and s.name == key:
                return s
            if isinstance(key, int) and s.number == key:
                return s
        raise StateNotFoundError(key)

    # ---------- Removal ----------
    def remove_transition(self, transition: Transition) -> 'FSM':
        self._transitions = [t for t in self._transitions if t is not transition]
        logger.debug(f"FSM: Removed {transition!r}.")
        return self

    def remove_state(self, state: State) -> 'FSM':
        """Removes the state together with all transitions connected to it."""
        if not self.contains(state):
            raise StateNotFoundError(state.name)
        self._states = [s for s in self._states if s is not state]
        before = len(self._transitions)
        self._transitions = [t for t in self._transitions
                             if t.from_state is not state and t.to_state is not state]
        logger.debug(f"FSM: Removed state '{state.name}' and {before - len(self._transitions)} transition(s).")
        return self

    # ---------- Layout ----------
    def calculate_forces(self) -> 'FSM':
        layout.calculate_forces(self._states, self._transitions)
        return self

    def relax(self, dt: float, move_states: bool = True, fixed: Optional[Movable] = None) -> float:
        """
        Runs one tick of the force layout. Returns the total displacement,
        which approaches zero once the graph is in equilibrium.
        """
        return layout.relax(self._states, self._transitions, dt, move_states, fixed)

    def circle(self) -> 'FSM':
        layout.circle_layout(self._states, self._transitions)
        return self

    def to_raster(self) -> 'FSM':
        layout.snap_to_grid(self._states)
        return self

    def hit_test(self, pos: Vector) -> Optional[Movable]:
        """Returns the state or transition at the given position, states first."""
        for s in self._states:
            if s.matches(pos):
                return s
        for t in self._transitions:
            if t.matches(pos):
                return t
        return None

    def draw_to(self, graphic: Graphic) -> None:
        for s in self._states:
            s.draw_to(graphic)
        for t in self._transitions:
            t.draw_to(graphic)

    # ---------- Synthesis ----------
    def create_truth_table(self, default_self_loop: bool = False) -> TruthTable:
        """
        Creates the truth table defined by this FSM.

        Raises:
            SynthesisError: if the machine is under-specified or inconsistent.
            ExpressionError: if a guard can not be evaluated.
        """
        return TransitionTableCreator(self._states, self._transitions, default_self_loop).create()

    def __repr__(self):
        return f"FSM(states={len(self._states)}, transitions={len(self._transitions)})"
