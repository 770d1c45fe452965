# fsm_logic_designer/core/transition_table.py
"""
Creates the truth table which implements a finite state machine.

The inputs of the table are the bits of the current state number followed by
all variables used in the transition guards. The results are the bits of the
next state number followed by the outputs of the machine. Rows belonging to
state numbers no state uses are don't care.

For every valid row the outgoing transitions of the current state are tried
in the order they were added to the FSM; the first one whose guard is true
determines the next state. If no guard matches, a `NoTransitionError` is
raised unless `default_self_loop` is set, in which case the machine stays in
its current state.
"""

import logging
from typing import Dict, List, Mapping, Optional, Sequence

from .exceptions import NoTransitionError, SynthesisError
from .state import State
from .transition import Transition
from .truth_table import DONT_CARE, TruthTable

logger = logging.getLogger(__name__)


def state_var(bit: int) -> str:
    return f"Q{bit}_n"


def next_state_var(bit: int) -> str:
    return f"Q{bit}_n+1"


class TransitionTableCreator:

    def __init__(self, states: Sequence[State], transitions: Sequence[Transition],
                 default_self_loop: bool = False):
        self.states = list(states)
        self.transitions = list(transitions)
        self.default_self_loop = default_self_loop

    def create(self) -> TruthTable:
        if not self.states:
            raise SynthesisError("The FSM contains no states.")
        by_number = self._states_by_number()
        outgoing = self._outgoing_transitions()

        state_bits = max(1, max(by_number).bit_length())
        inputs = self._input_variables()
        outputs = self._output_names()
        current_vars = [state_var(b) for b in reversed(range(state_bits))]
        next_vars = [next_state_var(b) for b in reversed(range(state_bits))]

        clashes = set(inputs).intersection(current_vars + next_vars + outputs)
        if clashes:
            raise SynthesisError(f"Input variable '{sorted(clashes)[0]}' clashes with a generated signal name.")
        clashes = set(outputs).intersection(current_vars + next_vars)
        if clashes:
            raise SynthesisError(f"Output '{sorted(clashes)[0]}' clashes with a state signal name.")

        table = TruthTable(current_vars + inputs)
        columns: Dict[str, List[int]] = {name: [DONT_CARE] * table.rows for name in next_vars + outputs}

        n_in = len(inputs)
        for code in range(1 << state_bits):
            state = by_number.get(code)
            if state is None:
                continue
            for combo in range(1 << n_in):
                row = (code << n_in) | combo
                assignment = {name: bool((combo >> (n_in - 1 - i)) & 1) for i, name in enumerate(inputs)}
                transition = self._first_match(outgoing[id(state)], assignment)
                if transition is not None:
                    next_state, mealy = transition.to_state, transition.values
                elif self.default_self_loop:
                    next_state, mealy = state, {}
                else:
                    raise NoTransitionError(state, assignment)

                for i, name in enumerate(next_vars):
                    columns[name][row] = (next_state.number >> (state_bits - 1 - i)) & 1
                for name in outputs:
                    columns[name][row] = mealy.get(name, state.values.get(name, 0))

        for name, values in columns.items():
            table.add_result(name, values)

        logger.info(f"Created truth table: {len(self.states)} states, {state_bits} state bits, "
                    f"{n_in} inputs, {len(outputs)} outputs.")
        return table

    @staticmethod
    def _first_match(transitions: Sequence[Transition], assignment: Mapping[str, bool]) -> Optional[Transition]:
        for t in transitions:
            if t.condition.evaluate(assignment):
                return t
        return None

    def _states_by_number(self) -> Dict[int, State]:
        by_number: Dict[int, State] = {}
        for s in self.states:
            if s.number < 0:
                raise SynthesisError(f"State '{s.name}' has no number.")
            if s.number in by_number:
                raise SynthesisError(f"State number {s.number} is used by '{by_number[s.number].name}' and '{s.name}'.")
            by_number[s.number] = s
        return by_number

    def _outgoing_transitions(self) -> Dict[int, List[Transition]]:
        members = {id(s) for s in self.states}
        outgoing: Dict[int, List[Transition]] = {id(s): [] for s in self.states}
        for t in self.transitions:
            if id(t.from_state) not in members or id(t.to_state) not in members:
                raise SynthesisError(f"{t!r} references a state which is not part of the FSM.")
            outgoing[id(t.from_state)].append(t)
        return outgoing

    def _input_variables(self) -> List[str]:
        names = set()
        for t in self.transitions:
            names.update(t.condition.variables())
        return sorted(names)

    def _output_names(self) -> List[str]:
        names: Dict[str, None] = {}
        for s in self.states:
            names.update(dict.fromkeys(s.values))
        for t in self.transitions:
            names.update(dict.fromkeys(t.values))
        return list(names)
