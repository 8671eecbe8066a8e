import click
from flask.cli import with_appcontext
from app.projects.calculator.core.constants import KEY_ACTIONS
from app.projects.calculator.core.engine import Calculator
from app.projects.calculator.core.input_adapter import press_key
import logging

logger = logging.getLogger(__name__)


def _split_keys(tokens):
    """Named keys (Enter, Escape, Backspace) stay whole; anything else is split into characters."""
    keys = []
    for token in tokens:
        if token in KEY_ACTIONS:
            keys.append(token)
        else:
            keys.extend(token)
    return keys


@click.group(name='calculator')
def calculator_cli():
    """Calculator project commands."""
    pass


@calculator_cli.command('press')
@click.argument('keys', nargs=-1, required=True)
@with_appcontext
def press_command(keys):
    """Press KEYS on a fresh calculator and print both displays.

    Example: flask calculator press "12.5*4=" or flask calculator press 7 Backspace 9 Enter
    """
    calculator = Calculator()
    for key in _split_keys(keys):
        if not press_key(calculator, key):
            click.echo(f"Ignored key: {key!r}", err=True)

    primary, secondary = calculator.displays()
    click.echo(secondary)
    click.echo(primary)

    if calculator.is_error:
        logger.info(f"Key sequence ended in error: {calculator.error_message}")
        click.get_current_context().exit(1)
