"""
Input adapter: maps calculator buttons and keyboard keys to engine events.
The engine itself only sees the semantic vocabulary.
"""
from app.projects.calculator.core.constants import BUTTON_ACTIONS, DIGITS, KEY_ACTIONS


def event_for_action(action):
    """
    Translate a button action name to a semantic event.

    Args:
        action (str): Button data-action (e.g. 'add', 'clear-all') or a digit

    Returns:
        tuple: (event, value), or None if the action is unknown
    """
    if action is None:
        return None
    action = str(action)
    if len(action) == 1 and action in DIGITS:
        return ("digit", action)
    return BUTTON_ACTIONS.get(action)


def event_for_key(key):
    """Translate a keyboard key to a semantic event, or None for keys the calculator ignores."""
    if key is None:
        return None
    key = str(key)
    if len(key) == 1 and key in DIGITS:
        return ("digit", key)
    action = KEY_ACTIONS.get(key)
    return event_for_action(action) if action else None


def press_action(calculator, action):
    """Apply a button press. Returns True if the button was recognized."""
    event = event_for_action(action)
    if not event:
        return False
    calculator.apply(*event)
    return True


def press_key(calculator, key):
    """Apply a key press. Returns True if the key was recognized."""
    event = event_for_key(key)
    if not event:
        return False
    calculator.apply(*event)
    return True


def press_keys(calculator, keys):
    """
    Feed a sequence of keys to the calculator.

    A string is split into single characters ("12+3="); a list may also hold
    named keys such as "Enter", "Escape" or "Backspace".

    Returns:
        int: Number of keys that were recognized
    """
    return sum(1 for key in keys if press_key(calculator, key))
