# fsm_logic_designer/core/expression.py
"""
Boolean guard expressions attached to transitions.

The FSM model only depends on the `Expression` protocol: something that can
be evaluated for an assignment of boolean input variables and that can name
the variables it reads. `PythonExpression` is the implementation used by the
editor; guards are written in Python boolean syntax, e.g. ``a and not b``.
"""

import ast
import logging
from typing import Dict, Mapping, Optional, Protocol, Set, Union, runtime_checkable

logger = logging.getLogger(__name__)


class ExpressionError(Exception):
    """Raised if a guard can not be parsed or evaluated."""
    pass


@runtime_checkable
class Expression(Protocol):
    def evaluate(self, assignment: Mapping[str, bool]) -> bool:
        ...

    def variables(self) -> Set[str]:
        ...


_ALLOWED_NODES = (
    ast.Expression, ast.BoolOp, ast.And, ast.Or, ast.UnaryOp, ast.Not,
    ast.BinOp, ast.BitAnd, ast.BitOr, ast.BitXor,
    ast.Compare, ast.Eq, ast.NotEq,
    ast.Name, ast.Load, ast.Constant,
)


def check_guard_safety(tree: ast.AST, source: str) -> None:
    """
    Makes sure a parsed guard only contains boolean logic.
    No calls, attribute access, subscripts or arbitrary constants get through.
    """
    for node in ast.walk(tree):
        if not isinstance(node, _ALLOWED_NODES):
            raise ExpressionError(f"'{type(node).__name__}' is not allowed in guard '{source}'.")
        if isinstance(node, ast.Constant) and node.value not in (True, False, 0, 1):
            raise ExpressionError(f"Constant {node.value!r} is not allowed in guard '{source}'.")
        if isinstance(node, ast.Name) and node.id.startswith("__"):
            raise ExpressionError(f"Access to the name '{node.id}' is restricted.")


class PythonExpression:
    """A guard written as a Python boolean expression."""

    def __init__(self, source: Optional[str] = ""):
        self.source = (source or "").strip()
        text = self.source or "True"
        try:
            tree = ast.parse(text, mode="eval")
        except SyntaxError as e:
            raise ExpressionError(f"Invalid guard '{self.source}': {e.msg}") from e
        check_guard_safety(tree, self.source)
        self._variables = {node.id for node in ast.walk(tree) if isinstance(node, ast.Name)}
        self._code = compile(tree, "<guard>", "eval")

    def variables(self) -> Set[str]:
        return set(self._variables)

    def evaluate(self, assignment: Mapping[str, bool]) -> bool:
        missing = self._variables.difference(assignment)
        if missing:
            raise ExpressionError(f"Undefined variable '{sorted(missing)[0]}' in guard '{self.source}'.")
        env: Dict[str, bool] = {name: bool(assignment[name]) for name in self._variables}
        try:
            return bool(eval(self._code, {"__builtins__": {}}, env))
        except Exception as e:
            raise ExpressionError(f"Error evaluating guard '{self.source}': {e}") from e

    def __str__(self):
        return self.source

    def __repr__(self):
        return f"PythonExpression({self.source!r})"


def as_expression(value: Union[str, Expression, None]) -> Expression:
    """Accepts a guard source string, None (always true) or an Expression."""
    if value is None or isinstance(value, str):
        return PythonExpression(value)
    if isinstance(value, Expression):
        return value
    raise TypeError(f"Can not use {type(value).__name__} as a transition condition.")
