# fsm_logic_designer/__init__.py
"""Graphical finite state machine model with truth table synthesis."""

from .core import FSM, State, Transition, TruthTable
from .utils.config import APP_NAME, APP_VERSION

__version__ = APP_VERSION

__all__ = ["FSM", "State", "Transition", "TruthTable", "APP_NAME", "__version__"]
