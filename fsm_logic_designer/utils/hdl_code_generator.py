# fsm_logic_designer/utils/hdl_code_generator.py
import re
import os
from datetime import datetime
from typing import Dict, List

from jinja2 import Environment, FileSystemLoader

from .config import APP_NAME
from ..core.truth_table import DONT_CARE, TruthTable


def sanitize_verilog_identifier(name: str) -> str:
    """Sanitizes a string to be a valid Verilog identifier."""
    if not name: return "unnamed_fsm"
    s = re.sub(r'[^a-zA-Z0-9_$]', '_', name)
    if not s or not s[0].isalpha():
        s = "fsm_" + s
    return s


def generate_verilog_content(table: TruthTable, module_name: str) -> str:
    """Generates a combinational Verilog module implementing the truth table."""
    templates_dir = os.path.join(os.path.dirname(__file__), '..', 'assets', 'templates')
    env = Environment(loader=FileSystemLoader(templates_dir))
    template = env.get_template("truth_table.v.j2")

    context = _prepare_verilog_context(table, module_name)
    return template.render(context)


def _prepare_verilog_context(table: TruthTable, module_name: str) -> Dict:
    """Prepares the context for the Verilog template."""
    input_ports = [sanitize_verilog_identifier(v) for v in table.variables]
    output_ports = [sanitize_verilog_identifier(r) for r in table.result_names]
    duplicates = {p for p in input_ports + output_ports if (input_ports + output_ports).count(p) > 1}
    if duplicates:
        raise ValueError(f"Signal names collide after sanitizing: {', '.join(sorted(duplicates))}")

    rows: List[Dict[str, str]] = []
    for inputs, outputs in table.iter_rows():
        # Rows that are entirely don't care fall through to the default branch
        if all(v == DONT_CARE for v in outputs):
            continue
        rows.append({
            "inputs": "".join(str(b) for b in inputs),
            "outputs": "".join("x" if v == DONT_CARE else str(v) for v in outputs),
        })

    return {
        "module_name": sanitize_verilog_identifier(module_name),
        "app_name": APP_NAME,
        "timestamp": datetime.now().strftime("%Y-%m-%d %H:%M:%S"),
        "input_ports": input_ports,
        "output_ports": output_ports,
        "input_width": len(input_ports),
        "output_width": len(output_ports),
        "rows": rows,
    }
