"""
Express Starter CLI - Terminal output

Step markers, warnings and the closing summary printed by ``create``.
"""

import click
from contextlib import contextmanager
from typing import Dict, List

from express_starter.core.errors import StarterError

TIP_INDENT = " " * 9


@contextmanager
def progress_step(message: str):
    """Print ``[....] message`` and settle it to ``[ OK ]`` or ``[FAIL]``."""
    click.secho(f"  [....] {message}", fg='blue', nl=False)
    try:
        yield
    except Exception:
        click.secho(f"\r  [FAIL] {message}", fg='red')
        raise
    click.secho(f"\r  [ OK ] {message}", fg='green')


def handle_error(error: Exception, context: str = None):
    """
    Print a fatal error.

    StarterError carries its own code and suggestion; anything else (an
    OSError escaping the filesystem) is printed with ``context`` in front.
    """
    code = getattr(error, "error_code", None)
    click.echo()
    click.secho(f"[ERROR {code}] " if code else "[ERROR] ", fg='red', bold=True, nl=False)

    if isinstance(error, StarterError):
        click.secho(error.message, fg='red')
        if error.suggestion:
            click.secho("[TIP] ", fg='yellow', bold=True, nl=False)
            click.secho(error.suggestion, fg='yellow')
    else:
        click.secho(f"{context}: {error}" if context else str(error), fg='red')
    click.echo()


def warning(message: str, suggestion: str = None):
    """Display a non-fatal warning with an optional follow-up hint."""
    click.secho("  [WARN] ", fg='yellow', bold=True, nl=False)
    click.secho(message, fg='yellow')
    if suggestion:
        click.secho(f"{TIP_INDENT}{suggestion}", fg='cyan')


def success_message(message: str, details: Dict[str, str]):
    """Banner for a finished project followed by its template, database and location."""
    rule = "=" * 50
    click.echo()
    click.secho(f"{rule}\n[SUCCESS] {message}\n{rule}\n", fg='green', bold=True)
    width = max(len(key) for key in details)
    for key, value in details.items():
        click.secho(f"  {key.ljust(width)}  ", fg='blue', nl=False)
        click.secho(value, fg='cyan')


def next_steps(steps: List[str]):
    """Numbered list of commands left for the user to run."""
    click.secho("\nNext Steps:", fg='yellow', bold=True)
    for number, step in enumerate(steps, 1):
        click.secho(f"  {number}. ", fg='yellow', nl=False)
        click.secho(step, fg='cyan')
    click.echo()
