"""Tests del acumulador de operandos y operadores."""

import pytest

from calculator_state import CalculatorState, Operator


def _type(state, text):
    for char in text:
        if char == ".":
            state = state.enter_decimal()
        elif char.isdigit():
            state = state.enter_number(int(char))
        else:
            state = state.enter_operator(Operator(char))
    return state


class TestEnterNumber:
    def test_appends_to_last_operand(self):
        state = _type(CalculatorState(), "12+3")
        assert state.numbers == ("12", "3")

    @pytest.mark.parametrize("presses", [8, 9, 15])
    def test_never_exceeds_max_length(self, presses):
        state = CalculatorState()
        for _ in range(presses):
            state = state.enter_number(7)
        assert CalculatorState.digit_count(state.last_number) <= CalculatorState.MAX_NUM_LENGTH
        assert state.last_number == "7" * min(presses, 8)

    def test_decimal_point_not_counted(self):
        state = _type(CalculatorState(), "1234.56789")
        assert state.last_number == "1234.5678"

    def test_full_operand_is_unchanged(self):
        state = _type(CalculatorState(), "12345678")
        assert state.enter_number(9) is state

    def test_rejects_out_of_range_digit(self):
        with pytest.raises(ValueError):
            CalculatorState().enter_number(10)


class TestEnterDecimal:
    def test_empty_operand_gets_leading_zero(self):
        assert CalculatorState().enter_decimal().last_number == "0."

    def test_appends_point(self):
        assert _type(CalculatorState(), "12").enter_decimal().last_number == "12."

    @pytest.mark.parametrize("number", ["1e-05", "1.5e+20", "∞", "-∞", "NaN"])
    def test_exponent_or_non_finite_result_takes_no_point(self, number):
        state = CalculatorState(numbers=(number,))
        assert state.enter_decimal() is state

    @pytest.mark.parametrize("text", ["", "5", "3.1", "7+"])
    def test_idempotent(self, text):
        once = _type(CalculatorState(), text).enter_decimal()
        assert once.enter_decimal() == once


class TestEnterOperator:
    def test_adds_operator_and_empty_operand(self):
        state = _type(CalculatorState(), "3").enter_operator(Operator.ADD)
        assert state.numbers == ("3", "")
        assert state.operators == (Operator.ADD,)

    def test_ignored_on_blank_operand(self):
        assert CalculatorState().enter_operator(Operator.ADD) == CalculatorState()
        state = _type(CalculatorState(), "3+")
        assert state.enter_operator(Operator.MULTIPLY) == state


class TestDeleteLast:
    @pytest.mark.parametrize("text", ["", "1", "12.5", "3+4", "3x"])
    def test_undoes_enter_number(self, text):
        state = _type(CalculatorState(), text)
        assert state.enter_number(4).delete_last() == state

    def test_removes_operator_and_empty_operand(self):
        state = _type(CalculatorState(), "3+").delete_last()
        assert state == CalculatorState(numbers=("3",))

    def test_empty_state_is_unchanged(self):
        assert CalculatorState().delete_last() == CalculatorState()


class TestInvariant:
    def test_operator_count_follows_operands(self):
        state = CalculatorState()
        for char in "1+x2.3-/4Del".replace("Del", "<"):
            if char == "<":
                state = state.delete_last()
            else:
                state = _type(state, char)
            assert len(state.operators) == len(state.numbers) - 1

    def test_mismatched_lengths_raise(self):
        with pytest.raises(ValueError):
            CalculatorState(numbers=("1", "2"), operators=())

    def test_empty_numbers_raise(self):
        with pytest.raises(ValueError):
            CalculatorState(numbers=())

    def test_lists_become_tuples(self):
        state = CalculatorState(numbers=["1", "2"], operators=[Operator.ADD])
        assert state.numbers == ("1", "2")
        assert state.operators == (Operator.ADD,)


class TestDisplay:
    def test_live_state(self):
        assert str(_type(CalculatorState(), "3+4x2")) == "3+4x2"

    def test_history_entry(self):
        state = _type(CalculatorState(), "3+4x2").with_result("11")
        assert str(state) == "3+4x2 = 11"

    def test_empty_state(self):
        assert str(CalculatorState()) == ""


class TestOperator:
    def test_symbols(self):
        assert [op.symbol for op in Operator] == ["+", "-", "x", "/"]

    def test_division_by_zero_follows_ieee(self):
        assert Operator.DIVIDE.apply(5.0, 0.0) == float("inf")
        assert Operator.DIVIDE.apply(-5.0, 0.0) == float("-inf")
        nan = Operator.DIVIDE.apply(0.0, 0.0)
        assert nan != nan
