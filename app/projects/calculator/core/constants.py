"""
Constants for the Calculator: operators, display symbols, messages, limits,
and the button/keyboard vocabularies used by the input adapter.
"""
import enum


class Operator(enum.Enum):
    add = "add"
    subtract = "subtract"
    multiply = "multiply"
    divide = "divide"


OPERATOR_SYMBOLS = {
    Operator.add: "+",
    Operator.subtract: "−",  # minus sign, not hyphen
    Operator.multiply: "×",
    Operator.divide: "÷",
}

INITIAL_INPUT = "0"
DECIMAL_POINT = "."
DIGITS = "0123456789"

ERROR_TEXT = "Error"
DIVIDE_BY_ZERO_MESSAGE = "Cannot divide by zero"
NOT_A_NUMBER_MESSAGE = "Invalid number"

# --- Rounding and display ---
RESULT_SCALE = 100000000  # results keep 8 decimal places
MAX_FRACTION_DIGITS = 8
EXPONENT_DIGITS = 6
LARGE_DISPLAY_THRESHOLD = 1e10
SMALL_DISPLAY_THRESHOLD = 1e-6

# Number-to-string switches to exponent notation outside this range
POSITIONAL_MAX = 1e21
POSITIONAL_MIN = 1e-6

DEFAULT_ERROR_RESET_MS = 2000

# --- Semantic events accepted by Calculator.apply ---
EVENTS = (
    "digit",
    "decimal_point",
    "operator",
    "equals",
    "clear_entry",
    "clear_all",
    "backspace",
)

# Button data-action names -> (event, value)
BUTTON_ACTIONS = {
    "add": ("operator", Operator.add),
    "subtract": ("operator", Operator.subtract),
    "multiply": ("operator", Operator.multiply),
    "divide": ("operator", Operator.divide),
    "equals": ("equals", None),
    "decimal": ("decimal_point", None),
    "clear": ("clear_entry", None),
    "clear-all": ("clear_all", None),
    "backspace": ("backspace", None),
}

# Keyboard keys -> button action
KEY_ACTIONS = {
    "+": "add",
    "-": "subtract",
    "*": "multiply",
    "/": "divide",
    ".": "decimal",
    "=": "equals",
    "Enter": "equals",
    "Escape": "clear-all",
    "Backspace": "backspace",
    "c": "clear",
    "C": "clear",
}
