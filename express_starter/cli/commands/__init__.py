"""
Express Starter CLI Commands - Modular Structure
"""

from express_starter.cli.commands.create_command import create
from express_starter.cli.commands.validate_command import validate

__all__ = [
    "create",
    "validate",
]
