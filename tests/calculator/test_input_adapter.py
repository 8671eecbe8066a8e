"""
Unit tests for mapping buttons and keys to calculator events.
"""
import unittest

from app.projects.calculator.core.constants import Operator
from app.projects.calculator.core.engine import Calculator
from app.projects.calculator.core.input_adapter import (
    event_for_action,
    event_for_key,
    press_action,
    press_key,
    press_keys,
)


class TestEventMapping(unittest.TestCase):

    def test_digit_keys(self):
        self.assertEqual(event_for_key("7"), ("digit", "7"))
        self.assertEqual(event_for_action("0"), ("digit", "0"))

    def test_operator_keys(self):
        self.assertEqual(event_for_key("+"), ("operator", Operator.add))
        self.assertEqual(event_for_key("-"), ("operator", Operator.subtract))
        self.assertEqual(event_for_key("*"), ("operator", Operator.multiply))
        self.assertEqual(event_for_key("/"), ("operator", Operator.divide))

    def test_named_keys(self):
        self.assertEqual(event_for_key("Enter"), ("equals", None))
        self.assertEqual(event_for_key("="), ("equals", None))
        self.assertEqual(event_for_key("Escape"), ("clear_all", None))
        self.assertEqual(event_for_key("Backspace"), ("backspace", None))
        self.assertEqual(event_for_key("c"), ("clear_entry", None))
        self.assertEqual(event_for_key("C"), ("clear_entry", None))
        self.assertEqual(event_for_key("."), ("decimal_point", None))

    def test_button_actions(self):
        self.assertEqual(event_for_action("clear-all"), ("clear_all", None))
        self.assertEqual(event_for_action("clear"), ("clear_entry", None))
        self.assertEqual(event_for_action("decimal"), ("decimal_point", None))

    def test_unknown_inputs_ignored(self):
        self.assertIsNone(event_for_key("x"))
        self.assertIsNone(event_for_key("Tab"))
        self.assertIsNone(event_for_key(None))
        self.assertIsNone(event_for_action("square-root"))


class TestPressing(unittest.TestCase):

    def setUp(self):
        self.calc = Calculator()

    def test_press_keys_string(self):
        recognized = press_keys(self.calc, "12+3=")
        self.assertEqual(recognized, 5)
        self.assertEqual(self.calc.primary_text, "15")

    def test_press_keys_with_named_keys(self):
        press_keys(self.calc, ["1", "2", "Backspace", "*", "3", "Enter"])
        self.assertEqual(self.calc.primary_text, "3")
        self.assertEqual(self.calc.secondary_text, "1 × 3 =")

    def test_escape_clears_everything(self):
        press_keys(self.calc, ["9", "+", "Escape"])
        self.assertEqual(self.calc.displays(), ("0", ""))

    def test_unknown_key_returns_false(self):
        self.assertFalse(press_key(self.calc, "q"))
        self.assertEqual(press_keys(self.calc, "4q"), 1)
        self.assertEqual(self.calc.primary_text, "4")

    def test_press_action(self):
        self.assertTrue(press_action(self.calc, "8"))
        self.assertTrue(press_action(self.calc, "divide"))
        self.assertTrue(press_action(self.calc, "0"))
        self.assertTrue(press_action(self.calc, "equals"))
        self.assertTrue(self.calc.is_error)
        self.assertTrue(press_action(self.calc, "clear-all"))
        self.assertFalse(self.calc.is_error)


if __name__ == "__main__":
    unittest.main()
