"""
Unit tests for the `flask calculator` CLI commands.
"""
import unittest

from app import create_app


class TestPressCommand(unittest.TestCase):

    def setUp(self):
        self.app = create_app({"TESTING": True, "SECRET_KEY": "test-secret"})
        self.runner = self.app.test_cli_runner()

    def test_prints_both_displays(self):
        result = self.runner.invoke(args=["calculator", "press", "5+3="])
        self.assertEqual(result.exit_code, 0)
        self.assertEqual(result.output.splitlines(), ["5 + 3 =", "8"])

    def test_named_keys(self):
        result = self.runner.invoke(args=["calculator", "press", "12", "Backspace", "+4", "Enter"])
        self.assertEqual(result.exit_code, 0)
        self.assertEqual(result.output.splitlines(), ["1 + 4 =", "5"])

    def test_divide_by_zero_exits_nonzero(self):
        result = self.runner.invoke(args=["calculator", "press", "5/0="])
        self.assertEqual(result.exit_code, 1)
        self.assertIn("Cannot divide by zero", result.output)
        self.assertIn("Error", result.output)

    def test_ignored_key_reported(self):
        result = self.runner.invoke(args=["calculator", "press", "7x"])
        self.assertEqual(result.exit_code, 0)
        self.assertIn("Ignored key: 'x'", result.output)

    def test_keys_required(self):
        result = self.runner.invoke(args=["calculator", "press"])
        self.assertNotEqual(result.exit_code, 0)


class TestCreateApp(unittest.TestCase):

    def test_root_redirects_to_calculator(self):
        app = create_app({"TESTING": True, "SECRET_KEY": "test-secret"})
        r = app.test_client().get("/")
        self.assertEqual(r.status_code, 302)
        self.assertTrue(r.headers["Location"].endswith("/calculator/"))


if __name__ == "__main__":
    unittest.main()
