"""
Calculator engine - the state machine behind the calculator page.

Consumes one semantic event at a time (digit, decimal point, operator,
equals, clear entry, clear all, backspace) and exposes the two display
strings. Operators apply immediately, left to right, like a pocket
calculator. No Flask imports here: the blueprint and the CLI own an engine
instance and feed it events.
"""
import logging
from dataclasses import asdict, dataclass

from app.projects.calculator.core.constants import (
    DECIMAL_POINT,
    DIGITS,
    DIVIDE_BY_ZERO_MESSAGE,
    ERROR_TEXT,
    INITIAL_INPUT,
    NOT_A_NUMBER_MESSAGE,
    OPERATOR_SYMBOLS,
    Operator,
)
from app.projects.calculator.core.numbers import (
    format_number,
    is_numeral,
    number_to_string,
    parse_number,
    round_result,
)

logger = logging.getLogger(__name__)


class CalculatorError(Exception):
    """Evaluation failure shown on the displays instead of a result."""

    code = "error"
    message = ERROR_TEXT

    def __init__(self, message=None):
        if message:
            self.message = message
        super().__init__(self.message)


class DivisionByZeroError(CalculatorError):
    code = "division_by_zero"
    message = DIVIDE_BY_ZERO_MESSAGE


class NotANumberError(CalculatorError):
    code = "not_a_number"
    message = NOT_A_NUMBER_MESSAGE


ERRORS_BY_CODE = {
    DivisionByZeroError.code: DivisionByZeroError,
    NotANumberError.code: NotANumberError,
}


class UnknownEventError(ValueError):
    """Event name outside the calculator's vocabulary."""


@dataclass
class CalculatorState:
    current_input: str = INITIAL_INPUT
    previous_operand: float | None = None
    pending_operator: Operator | None = None
    awaiting_operand: bool = False
    just_completed: bool = False

    def to_dict(self) -> dict:
        data = asdict(self)
        data["pending_operator"] = self.pending_operator.value if self.pending_operator else None
        return data

    @classmethod
    def from_dict(cls, data: dict) -> "CalculatorState":
        operator = data.get("pending_operator")
        previous = data.get("previous_operand")
        state = cls(
            current_input=str(data.get("current_input", INITIAL_INPUT)),
            previous_operand=None if previous is None else float(previous),
            pending_operator=Operator(operator) if operator else None,
            awaiting_operand=bool(data.get("awaiting_operand", False)),
            just_completed=bool(data.get("just_completed", False)),
        )
        if not is_numeral(state.current_input):
            raise ValueError(f"Malformed numeral: {state.current_input!r}")
        return state


class Calculator:
    """
    Calculator engine.

    State is mutated only through the public operations. Evaluation errors
    never escape them: the error is kept on the engine, the primary display
    reads "Error" and the secondary display carries the message until the
    caller clears it (normally via a delayed clear_all).
    """

    def __init__(self, state=None, secondary_text="", error=None):
        self.state = state or CalculatorState()
        self.secondary_text = secondary_text
        self.error = error

    # --- Displays ---

    @property
    def primary_text(self) -> str:
        if self.error:
            return ERROR_TEXT
        return format_number(self.state.current_input)

    @property
    def is_error(self) -> bool:
        return self.error is not None

    @property
    def error_message(self):
        return self.error.message if self.error else None

    def displays(self) -> tuple[str, str]:
        """Return (primary_text, secondary_text)."""
        return self.primary_text, self.secondary_text

    # --- Input events ---

    def submit_digit(self, digit):
        digit = str(digit)
        if len(digit) != 1 or digit not in DIGITS:
            raise ValueError(f"Not a digit: {digit!r}")

        state = self.state
        if not self._start_operand(digit):
            if state.current_input == INITIAL_INPUT:
                state.current_input = digit
            else:
                self._append(digit)
        self._render_primary()

    def submit_decimal_point(self):
        state = self.state
        if not self._start_operand(INITIAL_INPUT + DECIMAL_POINT):
            if DECIMAL_POINT not in state.current_input:
                self._append(DECIMAL_POINT)
        self._render_primary()

    def submit_operator(self, operator):
        operator = operator if isinstance(operator, Operator) else Operator(operator)
        state = self.state

        if state.previous_operand is None:
            input_value = parse_number(state.current_input)
            if input_value is None:
                self._fail(NotANumberError())
                return
            state.previous_operand = input_value
        elif state.pending_operator and not state.awaiting_operand:
            # Chained entry: apply the pending operator before taking the new one
            try:
                result = self._evaluate()
            except CalculatorError as e:
                self._fail(e)
                return
            state.current_input = number_to_string(result)
            state.previous_operand = result

        state.awaiting_operand = True
        state.pending_operator = operator
        state.just_completed = False

        self._render_secondary()
        self._render_primary()

    def submit_equals(self):
        state = self.state
        if not state.pending_operator or state.previous_operand is None or state.awaiting_operand:
            return

        try:
            result = self._evaluate()
        except CalculatorError as e:
            self._fail(e)
            return

        self._render_secondary(show_result=True)
        state.current_input = number_to_string(result)
        state.previous_operand = None
        state.pending_operator = None
        state.awaiting_operand = False
        state.just_completed = True
        self._render_primary()

    def clear_entry(self):
        if self.state.current_input != INITIAL_INPUT:
            self.state.current_input = INITIAL_INPUT
        self._render_primary()

    def clear_all(self):
        self.state = CalculatorState()
        self.secondary_text = ""
        self.error = None

    def backspace(self):
        state = self.state
        if state.just_completed:
            return

        remaining = state.current_input[:-1]
        if not is_numeral(remaining):
            # Empty, sign-only or partial-exponent numerals are not kept
            remaining = INITIAL_INPUT
        state.current_input = remaining
        self._render_primary()

    def apply(self, event, value=None):
        """
        Dispatch a semantic event by name.

        Args:
            event (str): One of digit, decimal_point, operator, equals,
                         clear_entry, clear_all, backspace
            value: The digit for 'digit', the operator for 'operator'

        Raises:
            UnknownEventError: If the event name is not in the vocabulary
        """
        if event == "digit":
            self.submit_digit(value)
        elif event == "operator":
            try:
                self.submit_operator(value)
            except ValueError:
                raise UnknownEventError(f"Unknown operator: {value!r}") from None
        elif event == "decimal_point":
            self.submit_decimal_point()
        elif event == "equals":
            self.submit_equals()
        elif event == "clear_entry":
            self.clear_entry()
        elif event == "clear_all":
            self.clear_all()
        elif event == "backspace":
            self.backspace()
        else:
            raise UnknownEventError(f"Unknown event: {event!r}")

    # --- Serialization ---

    def to_dict(self) -> dict:
        return {
            "state": self.state.to_dict(),
            "secondary_text": self.secondary_text,
            "error": self.error.code if self.error else None,
        }

    @classmethod
    def from_dict(cls, data):
        """Rebuild an engine from to_dict output. Malformed data gives a fresh engine."""
        if not data:
            return cls()
        try:
            state = CalculatorState.from_dict(data["state"])
            error_cls = ERRORS_BY_CODE.get(data.get("error"))
            return cls(
                state=state,
                secondary_text=str(data.get("secondary_text") or ""),
                error=error_cls() if error_cls else None,
            )
        except (KeyError, TypeError, ValueError, AttributeError) as e:
            logger.warning(f"Discarding malformed calculator state: {e}")
            return cls()

    # --- Internals ---

    def _append(self, text):
        # Appends that would not leave a numeral ("1e-8.", "Infinity5") are ignored
        candidate = self.state.current_input + text
        if is_numeral(candidate):
            self.state.current_input = candidate

    def _start_operand(self, value):
        """Begin a fresh operand if one is due. Returns True if value replaced the input."""
        state = self.state
        if state.awaiting_operand:
            state.current_input = value
            state.awaiting_operand = False
            return True
        if state.just_completed:
            state.current_input = value
            state.just_completed = False
            self.secondary_text = ""
            return True
        return False

    def _evaluate(self) -> float:
        state = self.state
        prev = parse_number(state.previous_operand)
        current = parse_number(state.current_input)
        if prev is None or current is None:
            raise NotANumberError()

        operator = state.pending_operator
        if operator is Operator.add:
            result = prev + current
        elif operator is Operator.subtract:
            result = prev - current
        elif operator is Operator.multiply:
            result = prev * current
        elif operator is Operator.divide:
            if current == 0:
                raise DivisionByZeroError()
            result = prev / current
        else:
            raise NotANumberError()

        return round_result(result)

    def _fail(self, error):
        logger.info(f"Calculator error: {error.message}")
        self.error = error
        self.secondary_text = error.message

    def _render_primary(self):
        # The primary display shows the current numeral again
        self.error = None

    def _render_secondary(self, show_result=False):
        state = self.state
        if not state.pending_operator or state.previous_operand is None:
            return
        symbol = OPERATOR_SYMBOLS[state.pending_operator]
        text = f"{format_number(state.previous_operand)} {symbol}"
        if show_result:
            text += f" {format_number(state.current_input)} ="
        self.secondary_text = text
