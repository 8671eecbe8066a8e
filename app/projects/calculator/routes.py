"""
Calculator - page plus a small JSON API.
Each browser session owns one calculator engine, stored in the Flask session
between requests. The page posts button and key presses to /api/event and
renders the two display strings it gets back.
"""
import logging

from flask import Blueprint, current_app, jsonify, render_template, request, session

from app.projects.calculator.core.constants import DEFAULT_ERROR_RESET_MS
from app.projects.calculator.core.engine import Calculator
from app.projects.calculator.core.input_adapter import press_action, press_key
from app.utils.logging import log_project_visit

logger = logging.getLogger(__name__)

SESSION_KEY = "calculator"

calculator_bp = Blueprint(
    "calculator",
    __name__,
    template_folder="templates",
    static_folder="static",
    static_url_path="/projects/calculator/static",
    url_prefix="/calculator",
)


def _load_calculator():
    return Calculator.from_dict(session.get(SESSION_KEY))


def _save_calculator(calculator):
    session[SESSION_KEY] = calculator.to_dict()


def _display_payload(calculator):
    """Display strings for the renderer, plus the reset delay while showing an error."""
    reset_after_ms = None
    if calculator.is_error:
        reset_after_ms = current_app.config.get("CALCULATOR_ERROR_RESET_MS", DEFAULT_ERROR_RESET_MS)
    return {
        "primary": calculator.primary_text,
        "secondary": calculator.secondary_text,
        "error": calculator.is_error,
        "reset_after_ms": reset_after_ms,
    }


@calculator_bp.route("/")
def index():
    """Display the calculator."""
    log_project_visit("calculator", "Calculator")
    calculator = _load_calculator()
    return render_template("calculator.html", display=_display_payload(calculator))


@calculator_bp.route("/api/state", methods=["GET"])
def api_state():
    return jsonify(_display_payload(_load_calculator()))


@calculator_bp.route("/api/event", methods=["POST"])
def api_event():
    """
    Apply one input to the session's calculator. Body is one of
    {"key": "7"}, {"action": "clear-all"} or {"event": "operator", "value": "add"}.
    Returns the display payload or {error}.
    """
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        return jsonify({"error": "Request body must be a JSON object"}), 400

    calculator = _load_calculator()
    try:
        if "key" in data:
            if not press_key(calculator, data["key"]):
                return jsonify({"error": f"Unknown key: {data['key']}"}), 400
        elif "action" in data:
            if not press_action(calculator, data["action"]):
                return jsonify({"error": f"Unknown action: {data['action']}"}), 400
        elif "event" in data:
            calculator.apply(data["event"], data.get("value"))
        else:
            return jsonify({"error": "Provide a key, action, or event"}), 400
    except ValueError as e:
        logger.warning(f"Rejected calculator input {data}: {e}")
        return jsonify({"error": str(e)}), 400

    _save_calculator(calculator)
    return jsonify(_display_payload(calculator))


@calculator_bp.route("/api/reset", methods=["POST"])
def api_reset():
    """Clear everything. The page calls this after showing an error."""
    calculator = _load_calculator()
    calculator.clear_all()
    _save_calculator(calculator)
    return jsonify(_display_payload(calculator))
