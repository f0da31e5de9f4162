"""Tests de la sesión y del modelo de vista."""

import pytest

from calculator_actions import (
    Calculate,
    Clear,
    Decimal,
    Delete,
    Number,
    Operation,
    action_from_key,
)
from calculator_state import CalculatorState, Operator
from calculator_view_model import CalculatorSession, CalculatorViewModel, apply


def _press(keys, session=None):
    session = session if session is not None else CalculatorSession()
    for key in keys:
        session = apply(action_from_key(key), session)
    return session


class TestApply:
    def test_does_not_mutate_input(self):
        session = _press("3+4")
        before = (session.state, session.history, session.clear_clicks)
        apply(Number(5), session)
        apply(Calculate(), session)
        assert (session.state, session.history, session.clear_clicks) == before

    def test_calculate_moves_state_to_history(self):
        session = _press("3+4x2=")
        assert session.state == CalculatorState(numbers=("11",))
        assert len(session.history) == 1
        assert str(session.history[0]) == "3+4x2 = 11"

    def test_history_is_newest_first(self):
        session = _press("1+1=x3=")
        assert [str(entry) for entry in session.history] == ["2x3 = 6", "1+1 = 2"]

    def test_result_can_be_continued(self):
        session = _press("10/4=x2=")
        assert str(session.history[0]) == "2.5x2 = 5"

    def test_history_entry_does_not_share_state(self):
        session = _press("9-3=")
        assert session.history[0].result == "6"
        assert session.state.result == ""

    @pytest.mark.parametrize("keys", ["5", "5+", ""])
    def test_calculate_noop(self, keys):
        session = _press(keys)
        after = apply(Calculate(), session)
        assert after.state == session.state
        assert after.history == session.history

    def test_division_result(self):
        assert str(_press("10/3=").state) == "3.3333333"

    def test_unknown_action_raises(self):
        with pytest.raises(ValueError):
            apply(object(), CalculatorSession())


class TestClear:
    def test_single_clear_keeps_history(self):
        session = _press("1+1=", None)
        session = apply(Clear(), session)
        assert session.state == CalculatorState()
        assert len(session.history) == 1
        assert session.clear_clicks == 1

    def test_double_clear_empties_history(self):
        session = apply(Clear(), apply(Clear(), _press("1+1=")))
        assert session.history == ()
        assert session.clear_clicks == 0

    @pytest.mark.parametrize("action", [
        Number(1), Decimal(), Delete(), Calculate(), Operation(Operator.ADD),
    ])
    def test_other_action_resets_streak(self, action):
        session = apply(Clear(), _press("1+1="))
        session = apply(Clear(), apply(action, session))
        assert len(session.history) == 1


class TestCalculatorViewModel:
    def test_accessors(self):
        view_model = CalculatorViewModel()
        for key in "6x7=":
            view_model.on_action(action_from_key(key))
        assert str(view_model.state) == "42"
        assert [str(entry) for entry in view_model.history] == ["6x7 = 42"]
        assert view_model.session.clear_clicks == 0

    def test_listeners_notified_on_change(self):
        view_model = CalculatorViewModel()
        seen = []
        unsubscribe = view_model.subscribe(seen.append)

        view_model.on_action(Number(4))
        view_model.on_action(Calculate())
        assert len(seen) == 1
        assert seen[0].state.numbers == ("4",)

        unsubscribe()
        view_model.on_action(Number(2))
        assert len(seen) == 1


class TestHistoryResult:
    @pytest.mark.parametrize("keys", ["99999999x99999999=", "10/3=", "3+4x2="])
    def test_history_matches_live_value(self, keys):
        session = _press(keys)
        live = session.state.numbers[0]
        assert session.history[0].result == live
        assert float(session.history[0].result) == float(live)
