"""
Express Starter CLI Utilities Package

Contains terminal helpers and the shell command runner.
"""

from .common import progress_step, success_message, next_steps, handle_error, warning
from .runner import CommandError, git_init, install_dependencies, provision_database

__all__ = [
    'progress_step',
    'success_message',
    'next_steps',
    'handle_error',
    'warning',
    'CommandError',
    'git_init',
    'install_dependencies',
    'provision_database',
]
