# tests/conftest.py
import os

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest

from fsm_logic_designer.core import FSM, State, Vector


class StubExpression:
    """Guard backed by a plain function, counting its evaluations."""

    def __init__(self, func, variables=()):
        self.func = func
        self._variables = set(variables)
        self.calls = 0

    def evaluate(self, assignment):
        self.calls += 1
        return self.func(assignment)

    def variables(self):
        return set(self._variables)

    def __str__(self):
        return "stub"


@pytest.fixture
def stub_expression():
    return StubExpression


@pytest.fixture
def toggle_fsm():
    """S0 -> S1 if a, S1 -> S0 if not a."""
    fsm = FSM(
        State("S0", position=Vector(-100.0, 0.0)),
        State("S1", position=Vector(100.0, 0.0)),
    )
    fsm.transition("S0", "S1", "a")
    fsm.transition("S1", "S0", "not a")
    return fsm
