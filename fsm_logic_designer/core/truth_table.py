# fsm_logic_designer/core/truth_table.py
"""
The truth table produced by the synthesis of an FSM.

The table has one row for every combination of its input variables. The
first variable is the most significant bit of the row index. Each result
column holds one value per row: 0, 1 or DONT_CARE.
"""

from typing import Dict, Iterator, List, Sequence, Tuple

DONT_CARE = 2


class TruthTable:
    """An ordered list of input variables and named result columns."""

    def __init__(self, variables: Sequence[str]):
        self.variables: List[str] = list(variables)
        self._results: Dict[str, List[int]] = {}

    @property
    def rows(self) -> int:
        return 1 << len(self.variables)

    @property
    def result_names(self) -> List[str]:
        return list(self._results)

    def add_result(self, name: str, values: Sequence[int]) -> 'TruthTable':
        if len(values) != self.rows:
            raise ValueError(f"Result '{name}' has {len(values)} values, table has {self.rows} rows.")
        if any(v not in (0, 1, DONT_CARE) for v in values):
            raise ValueError(f"Result '{name}' contains values other than 0, 1 or DONT_CARE.")
        self._results[name] = list(values)
        return self

    def get_result(self, name: str) -> List[int]:
        return list(self._results[name])

    def get_value(self, row: int, name: str) -> int:
        return self._results[name][row]

    def input_bits(self, row: int) -> Tuple[int, ...]:
        n = len(self.variables)
        return tuple((row >> (n - 1 - i)) & 1 for i in range(n))

    def assignment(self, row: int) -> Dict[str, bool]:
        return {name: bool(bit) for name, bit in zip(self.variables, self.input_bits(row))}

    def iter_rows(self) -> Iterator[Tuple[Tuple[int, ...], Tuple[int, ...]]]:
        columns = list(self._results.values())
        for row in range(self.rows):
            yield self.input_bits(row), tuple(col[row] for col in columns)

    def format_table(self) -> str:
        """Plain text rendering, don't cares are shown as 'x'."""
        header = self.variables + self.result_names
        widths = [max(1, len(h)) for h in header]
        lines = [" ".join(h.rjust(w) for h, w in zip(header, widths))]
        for inputs, outputs in self.iter_rows():
            cells = [str(v) if v != DONT_CARE else "x" for v in inputs + outputs]
            lines.append(" ".join(c.rjust(w) for c, w in zip(cells, widths)))
        return "\n".join(lines)

    def __eq__(self, other):
        if not isinstance(other, TruthTable):
            return NotImplemented
        return self.variables == other.variables and self._results == other._results

    def __repr__(self):
        return f"TruthTable(variables={self.variables}, results={self.result_names})"
