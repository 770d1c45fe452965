# fsm_logic_designer/core/__init__.py
"""Initializes the 'core' package and exposes the FSM model."""

from .exceptions import FSMError, NoTransitionError, StateNotFoundError, SynthesisError
from .expression import Expression, ExpressionError, PythonExpression
from .fsm import FSM
from .state import State
from .transition import Transition
from .truth_table import DONT_CARE, TruthTable
from .vector import Vector

__all__ = [
    "FSM",
    "State",
    "Transition",
    "TruthTable",
    "DONT_CARE",
    "Vector",
    "Expression",
    "PythonExpression",
    "ExpressionError",
    "FSMError",
    "StateNotFoundError",
    "SynthesisError",
    "NoTransitionError",
]
