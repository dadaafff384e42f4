"""
Express Starter Configuration

Settings are resolved once at startup and passed explicitly to the code that
needs them. Nothing else in the package reads the process environment.

Organized into:
- Env: Environment file configuration
- Defaults: Values used when nothing overrides them

All environment variables must be prefixed with EXPRESS_STARTER_*

Example .env file:
    EXPRESS_STARTER_PACKAGE_MANAGER=pnpm
    EXPRESS_STARTER_LOG_LEVEL=DEBUG
    EXPRESS_STARTER_COMMAND_TIMEOUT=900
"""

import os
import shlex
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional, Tuple

from dotenv import dotenv_values

from .logging import VALID_LOG_LEVELS, get_logger

logger = get_logger(__name__)

PACKAGE_MANAGERS = ("npm", "yarn", "pnpm", "bun")


@dataclass(frozen=True)
class Settings:
    """Resolved, immutable configuration."""
    templates_dir: Path
    package_manager: Optional[str]
    log_level: str
    provision_command: Tuple[str, ...]
    command_timeout: int
    user_agent: str


class Config:
    """Configuration defaults and loader."""

    class Env:
        """Environment file configuration"""
        file = ".env"
        auto_load = True
        prefix = "EXPRESS_STARTER_"

    TEMPLATES_DIR = Path(__file__).parent / "templates"
    PACKAGE_MANAGER = None  # Detected from npm_config_user_agent or lockfiles
    LOG_LEVEL = "WARNING"
    PROVISION_COMMAND = "npx get-db@latest --yes"  # Claims a Neon database and writes DATABASE_URL
    COMMAND_TIMEOUT = 600  # Seconds per git/install/provision command

    @classmethod
    def load_from_env(cls, env_file: Optional[str] = None,
                      environ: Optional[Mapping[str, str]] = None) -> Settings:
        """
        Load settings from a .env file and the environment.

        Process environment values win over the .env file. The .env file is
        read with python-dotenv without touching os.environ.

        Args:
            env_file: Path to .env file (overrides Config.Env.file)
            environ: Environment mapping (defaults to os.environ)

        Returns:
            Settings instance
        """
        if environ is None:
            environ = os.environ

        values = {}
        if cls.Env.auto_load:
            env_path = Path(env_file or cls.Env.file)
            if env_path.is_file():
                values.update({k: v for k, v in dotenv_values(env_path).items() if v is not None})
                logger.debug(f"Loaded environment from: {env_path}")

        values.update(environ)

        def setting(name: str) -> Optional[str]:
            value = values.get(cls.Env.prefix + name)
            if value is None or not value.strip():
                return None
            return value.strip()

        templates_dir = cls.TEMPLATES_DIR
        raw = setting("TEMPLATES_DIR")
        if raw:
            templates_dir = Path(raw).expanduser()

        package_manager = cls.PACKAGE_MANAGER
        raw = setting("PACKAGE_MANAGER")
        if raw:
            if raw.lower() in PACKAGE_MANAGERS:
                package_manager = raw.lower()
            else:
                logger.warning(
                    f"Invalid PACKAGE_MANAGER: {raw}. "
                    f"Must be one of: {', '.join(PACKAGE_MANAGERS)}. Using auto-detection."
                )

        log_level = cls.LOG_LEVEL
        raw = setting("LOG_LEVEL")
        if raw:
            if raw.upper() in VALID_LOG_LEVELS:
                log_level = raw.upper()
            else:
                logger.warning(
                    f"Invalid LOG_LEVEL: {raw}. "
                    f"Must be one of: {', '.join(sorted(VALID_LOG_LEVELS))}. Using default value."
                )

        command_timeout = cls.COMMAND_TIMEOUT
        raw = setting("COMMAND_TIMEOUT")
        if raw:
            if raw.isdigit() and int(raw) > 0:
                command_timeout = int(raw)
            else:
                logger.warning(f"Invalid COMMAND_TIMEOUT: {raw}. Must be a positive integer.")

        provision_command = tuple(shlex.split(setting("PROVISION_COMMAND") or cls.PROVISION_COMMAND))

        return Settings(
            templates_dir=templates_dir,
            package_manager=package_manager,
            log_level=log_level,
            provision_command=provision_command,
            command_timeout=command_timeout,
            user_agent=values.get("npm_config_user_agent", ""),
        )


__all__ = ["Config", "Settings", "PACKAGE_MANAGERS"]
