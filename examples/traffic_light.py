# examples/traffic_light.py
"""
Builds a traffic light controller, relaxes its layout and prints the truth
table and the Verilog module implementing it.

    python examples/traffic_light.py
"""

import logging

from fsm_logic_designer import FSM, State
from fsm_logic_designer.core import SynthesisError, ExpressionError
from fsm_logic_designer.utils.config import LAYOUT_TIMESTEP
from fsm_logic_designer.utils.hdl_code_generator import generate_verilog_content
from fsm_logic_designer.utils.logging_setup import setup_global_logging

logger = logging.getLogger(__name__)


def build_traffic_light() -> FSM:
    fsm = FSM(
        State("Red", values="R=1, Y=0, G=0"),
        State("RedYellow", values="R=1, Y=1, G=0"),
        State("Green", values="R=0, Y=0, G=1"),
        State("Yellow", values="R=0, Y=1, G=0"),
    )
    fsm.transition("Red", "RedYellow", "go")
    fsm.transition("Red", "Red", "not go")
    fsm.transition("RedYellow", "Green", "")
    fsm.transition("Green", "Yellow", "not go")
    fsm.transition("Green", "Green", "go")
    fsm.transition("Yellow", "Red", "")
    return fsm


if __name__ == "__main__":
    setup_global_logging(logging.INFO)

    fsm = build_traffic_light().circle()
    for tick in range(200):
        moved = fsm.relax(LAYOUT_TIMESTEP)
    fsm.to_raster()
    logger.info(f"Layout after 200 ticks, last displacement {moved:.4f}")
    for state in fsm.states:
        logger.info(f"  {state.name:10} at ({state.position.x:7.1f}, {state.position.y:7.1f})")

    try:
        table = fsm.create_truth_table()
    except (SynthesisError, ExpressionError) as e:
        logger.error(f"Synthesis failed: {e}")
        raise SystemExit(1)

    print(table.format_table())
    print()
    print(generate_verilog_content(table, "traffic_light"))
