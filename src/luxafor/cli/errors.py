"""Error reporting for CLI commands."""

import sys
from typing import NoReturn

import click

from luxafor.exceptions import format_error_for_display


def fail(error: Exception) -> NoReturn:
    """Print an error with its recovery hint and exit with status 1."""
    user_message, recovery_hint = format_error_for_display(error)

    click.echo(f"ERROR: {user_message}", err=True)
    if recovery_hint:
        click.echo(f"\n{recovery_hint}", err=True)

    sys.exit(1)
