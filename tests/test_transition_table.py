# tests/test_transition_table.py
import pytest

from fsm_logic_designer.core import (
    DONT_CARE, FSM, ExpressionError, NoTransitionError, PythonExpression, State, SynthesisError,
    Transition, Vector
)


def test_uncovered_input_is_an_error(toggle_fsm):
    # S0 has no transition for a=0
    with pytest.raises(NoTransitionError) as exc_info:
        toggle_fsm.create_truth_table()
    err = exc_info.value
    assert err.state is toggle_fsm.find_state("S0")
    assert err.assignment == {"a": False}
    assert "S0" in str(err) and "a=0" in str(err)
    assert isinstance(err, SynthesisError)


def test_error_identifies_state_and_input():
    fsm = FSM(State("S0"), State("S1"))
    fsm.transition("S0", "S1", "a")
    fsm.transition("S0", "S0", "not a")
    fsm.transition("S1", "S0", "not a")
    with pytest.raises(NoTransitionError) as exc_info:
        fsm.create_truth_table()
    assert exc_info.value.state.name == "S1"
    assert exc_info.value.assignment == {"a": True}


def test_default_self_loop(toggle_fsm):
    table = toggle_fsm.create_truth_table(default_self_loop=True)
    assert table.variables == ["Q0_n", "a"]
    assert table.result_names == ["Q0_n+1"]
    assert table.rows == 4
    assert table.get_result("Q0_n+1") == [0, 1, 0, 1]


def test_complete_machine():
    fsm = FSM(State("S0"), State("S1"))
    fsm.transition("S0", "S1", "a")
    fsm.transition("S0", "S0", "not a")
    fsm.transition("S1", "S0", "")
    table = fsm.create_truth_table()
    assert table.get_result("Q0_n+1") == [0, 1, 0, 0]


@pytest.mark.parametrize("first, expected", [("S1", 1), ("S0", 0)])
def test_first_matching_transition_wins(first, expected):
    fsm = FSM(State("S0"), State("S1"))
    second = "S0" if first == "S1" else "S1"
    fsm.transition("S0", first, "a")
    fsm.transition("S0", second, "a")
    fsm.transition("S0", "S0", "not a")
    fsm.transition("S1", "S1", "")
    table = fsm.create_truth_table()
    # row 1 is state 0 with a=1
    assert table.get_value(1, "Q0_n+1") == expected


def test_later_transitions_are_not_evaluated_after_a_match(stub_expression):
    always = stub_expression(lambda asg: True)
    never_reached = stub_expression(lambda asg: True)
    s = State("S0")
    fsm = FSM(s).transition(s, s, always).transition(s, s, never_reached)
    fsm.create_truth_table()
    assert always.calls == 1
    assert never_reached.calls == 0


def test_synthesis_is_deterministic(stub_expression):
    fsm = FSM(State("A"), State("B"), State("C"))
    guard = stub_expression(lambda asg: asg["x"] != asg["y"], variables=["x", "y"])
    fsm.transition("A", "B", guard)
    fsm.transition("A", "C", "not (x ^ y)")
    fsm.transition("B", "C", "")
    fsm.transition("C", "A", "x and y")
    fsm.transition("C", "C", "not (x and y)")
    first = fsm.create_truth_table()
    calls = guard.calls
    second = fsm.create_truth_table()
    assert first == second
    assert guard.calls == 2 * calls
    assert list(first.iter_rows()) == list(second.iter_rows())


def test_unused_state_codes_are_dont_care():
    fsm = FSM(State("A"), State("B"), State("C"))
    fsm.transition("A", "B").transition("B", "C").transition("C", "A")
    table = fsm.create_truth_table()
    assert table.variables == ["Q1_n", "Q0_n"]
    assert table.get_result("Q1_n+1") == [0, 1, 0, DONT_CARE]
    assert table.get_result("Q0_n+1") == [1, 0, 0, DONT_CARE]


def test_state_bits_follow_largest_number():
    a, b = State("A", number=0), State("B", number=4)
    fsm = FSM(a, b).transition(a, b).transition(b, a)
    table = fsm.create_truth_table()
    assert table.variables == ["Q2_n", "Q1_n", "Q0_n"]
    assert table.get_result("Q2_n+1") == [1, DONT_CARE, DONT_CARE, DONT_CARE, 0, DONT_CARE, DONT_CARE, DONT_CARE]


def test_single_state_uses_one_bit():
    s = State("Only")
    table = FSM(s).transition(s, s).create_truth_table()
    assert table.variables == ["Q0_n"]
    assert table.get_result("Q0_n+1") == [0, DONT_CARE]


def test_input_variables_are_sorted():
    fsm = FSM(State("A"))
    fsm.transition("A", "A", "b or a")
    table = fsm.create_truth_table()
    assert table.variables == ["Q0_n", "a", "b"]


def test_moore_and_mealy_outputs():
    fsm = FSM(State("S0", values="Y=0"), State("S1", values={"Y": 1}))
    fsm.transition("S0", "S1", "go")
    fsm.transition("S0", "S0", "not go")
    fsm.transition("S1", "S0", "", values="Z=1")
    table = fsm.create_truth_table()
    assert table.result_names == ["Q0_n+1", "Y", "Z"]
    assert table.get_result("Q0_n+1") == [0, 1, 0, 0]
    assert table.get_result("Y") == [0, 0, 1, 1]
    assert table.get_result("Z") == [0, 0, 1, 1]


def test_mealy_output_overrides_moore_output():
    fsm = FSM(State("S0", values="Y=1"))
    fsm.transition("S0", "S0", "a", values="Y=0")
    fsm.transition("S0", "S0", "not a")
    table = fsm.create_truth_table()
    assert table.get_result("Y") == [1, 0, DONT_CARE, DONT_CARE]


def test_expression_errors_propagate_unchanged(stub_expression):
    def broken(assignment):
        raise ExpressionError("boom")

    s = State("S0")
    fsm = FSM(s).transition(s, s, stub_expression(broken))
    with pytest.raises(ExpressionError, match="boom"):
        fsm.create_truth_table()


def test_undefined_variable_in_stub_guard(stub_expression):
    hidden = PythonExpression("secret")
    s = State("S0")
    # the stub does not report the variable its delegate needs
    fsm = FSM(s).transition(s, s, stub_expression(hidden.evaluate))
    with pytest.raises(ExpressionError, match="secret"):
        fsm.create_truth_table()


def test_duplicate_state_numbers():
    fsm = FSM(State("A", number=1), State("B", number=1))
    fsm.transition("A", "B")
    with pytest.raises(SynthesisError, match="used by"):
        fsm.create_truth_table()


def test_transition_to_foreign_state():
    a = State("A")
    fsm = FSM(a).add_transition(Transition(a, State("Elsewhere", number=1)))
    with pytest.raises(SynthesisError, match="not part of the FSM"):
        fsm.create_truth_table()


def test_empty_fsm():
    with pytest.raises(SynthesisError):
        FSM().create_truth_table()


def test_input_name_clashing_with_state_bit():
    fsm = FSM(State("A")).transition("A", "A", "Q0_n or not Q0_n")
    with pytest.raises(SynthesisError, match="Q0_n"):
        fsm.create_truth_table()


@pytest.mark.parametrize("name", ["Q0_n+1", "Q0_n"])
def test_state_output_clashing_with_state_signal(name):
    fsm = FSM(State("S0", values={name: 1}))
    fsm.transition("S0", "S0", "not a")
    fsm.transition("S0", "S0", "a")
    with pytest.raises(SynthesisError, match="Output 'Q0_n"):
        fsm.create_truth_table()


def test_transition_output_clashing_with_state_signal():
    fsm = FSM(State("S0"), State("S1"))
    fsm.transition("S0", "S1", "", values={"Q0_n+1": 0})
    fsm.transition("S1", "S0", "")
    with pytest.raises(SynthesisError, match="Q0_n\\+1"):
        fsm.create_truth_table()


def test_synthesis_does_not_touch_the_graph(toggle_fsm):
    positions = [s.position for s in toggle_fsm.states]
    numbers = [s.number for s in toggle_fsm.states]
    toggle_fsm.transitions[0].set_position(Vector(3.0, 4.0))
    toggle_fsm.create_truth_table(default_self_loop=True)
    assert [s.position for s in toggle_fsm.states] == positions
    assert [s.number for s in toggle_fsm.states] == numbers
    assert toggle_fsm.transitions[0].position == Vector(3.0, 4.0)
    assert len(toggle_fsm.transitions) == 2
