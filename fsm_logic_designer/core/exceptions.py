# fsm_logic_designer/core/exceptions.py
"""
Structural errors raised by the FSM model and the truth table synthesis.

Errors raised while evaluating a guard are not part of this hierarchy, see
`fsm_logic_designer.core.expression.ExpressionError`.
"""

from typing import Dict, Union


class FSMError(Exception):
    """Custom exception for errors in the structure of a state machine."""
    pass


class StateNotFoundError(FSMError, LookupError):
    """A state was requested by name or number but is not part of the FSM."""

    def __init__(self, key: Union[str, int]):
        self.key = key
        super().__init__(f"State '{key}' not found.")


class SynthesisError(FSMError):
    """The FSM can not be turned into a truth table."""
    pass


class NoTransitionError(SynthesisError):
    """No outgoing transition of a state matches a combination of inputs."""

    def __init__(self, state, assignment: Dict[str, bool]):
        self.state = state
        self.assignment = dict(assignment)
        inputs = ", ".join(f"{k}={int(v)}" for k, v in self.assignment.items())
        super().__init__(f"No transition defined in state '{state.name}' for input {inputs or '(none)'}.")
