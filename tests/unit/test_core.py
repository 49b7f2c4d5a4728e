"""Unit tests for the Calculator session."""

from pocketcalc import INITIAL_STATE, Calculator, InputEvent


class TestCalculator:
    def test_starts_at_initial_state(self, calculator):
        assert calculator.state is INITIAL_STATE
        assert calculator.history == [INITIAL_STATE]

    def test_buttons(self, calculator):
        calculator.press_button(value="5").press_button(action="add")
        calculator.press_button(value="3").press_button(action="calculate")
        assert calculator.state.display_value == "8"
        assert calculator.view.secondary == "5 + 3 ="

    def test_keys(self, calculator):
        calculator.press_keys(["1", "2", "0", "Backspace"])
        assert calculator.state.display_value == "12"

    def test_events(self, calculator):
        calculator.handle(InputEvent.from_key("9")).handle(InputEvent.from_button(action="sqrt"))
        assert calculator.state.display_value == "3"

    def test_render_after_each_accepted_input(self, calculator):
        rendered = []
        calculator.subscribe(rendered.append)
        calculator.press_keys(["4", "+", "4", "="])
        assert [s.display_value for s in rendered] == ["4", "4", "4", "8"]
        assert rendered[-1] is calculator.state

    def test_ignored_input_does_not_render(self, calculator):
        rendered = []
        calculator.subscribe(rendered.append)
        calculator.press_key("Shift").press_button(action="modulo")
        assert rendered == []
        assert len(calculator.history) == 1

    def test_unsubscribe(self, calculator):
        rendered = []
        unsubscribe = calculator.subscribe(rendered.append)
        calculator.press_key("1")
        unsubscribe()
        calculator.press_key("2")
        assert len(rendered) == 1

    def test_history_records_every_state(self, calculator):
        calculator.press_keys(["7", "/", "0", "="])
        history = calculator.history
        assert len(history) == 5
        assert history[-1].is_error

    def test_history_is_a_copy(self, calculator):
        calculator.history.append(None)
        assert len(calculator.history) == 1

    def test_history_keeps_most_recent_states(self):
        calc = Calculator(history_limit=3).press_keys(["1", "2", "3", "4"])
        assert [s.display_value for s in calc.history] == ["12", "123", "1234"]
        assert repr(calc) == "Calculator(display='1234', history_len=3)"

    def test_zero_history_limit_is_unbounded(self):
        calc = Calculator(history_limit=0).press_keys(["1"] * 50)
        assert len(calc.history) == 51

    def test_reset_keeps_history_limit(self):
        calc = Calculator(history_limit=2).press_keys(["1", "2"]).reset()
        calc.press_keys(["3", "4"])
        assert [s.display_value for s in calc.history] == ["3", "34"]

    def test_reset(self, calculator):
        calculator.press_keys(["1", "+"]).reset()
        assert calculator.state is INITIAL_STATE
        assert calculator.history == [INITIAL_STATE]

    def test_starting_state(self):
        calc = Calculator(INITIAL_STATE.evolve(display_value="42"))
        calc.press_key("Backspace")
        assert calc.state.display_value == "4"

    def test_repr(self, calculator):
        calculator.press_key("3")
        assert repr(calculator) == "Calculator(display='3', history_len=2)"
