"""
Express Starter CLI - Shared Helper Functions

Utility functions used across CLI commands.
"""

import os
from pathlib import Path
from typing import Optional

from express_starter.config import Settings

# Lockfile -> package manager, checked in order
LOCKFILES = (
    ("pnpm-lock.yaml", "pnpm"),
    ("yarn.lock", "yarn"),
    ("bun.lock", "bun"),
)


def detect_package_manager(settings: Settings, cwd: Optional[Path] = None) -> str:
    """
    Work out which package manager to use.

    Order:
        1. EXPRESS_STARTER_PACKAGE_MANAGER setting
        2. npm_config_user_agent (set when launched through npx/pnpm dlx/...)
        3. A lockfile in the working directory
        4. npm
    """
    if settings.package_manager:
        return settings.package_manager

    user_agent = settings.user_agent or ""
    for name in ("pnpm", "yarn", "bun"):
        if name in user_agent:
            return name

    cwd = cwd or Path.cwd()
    for lockfile, name in LOCKFILES:
        if (cwd / lockfile).exists():
            return name
    return "npm"


def validate_target_dir(text: str):
    """
    Validate a target directory answer.

    Args:
        text: Directory path as typed by the user

    Returns:
        True if valid, error message string if invalid
    """
    if not text or not text.strip():
        return "Target directory cannot be empty"

    path = Path(text.strip()).expanduser()
    if path.exists() and not path.is_dir():
        return f"'{text}' exists and is not a directory"
    if path.is_dir() and any(path.iterdir()):
        return f"Directory '{text}' already exists and is not empty"
    return True


def display_path(target_dir: Path, cwd: Optional[Path] = None) -> str:
    """Path to show in 'cd' instructions, relative to the working directory when possible."""
    cwd = cwd or Path.cwd()
    try:
        return os.path.relpath(target_dir, cwd)
    except ValueError:
        # Different drive on Windows
        return str(target_dir)
