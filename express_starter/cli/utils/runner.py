"""
Shell command runner for CLI collaborators

Runs git, the package manager and the database provisioning command.
Commands are always passed as argument lists with an absolute executable
path; no shell is ever involved.
"""

import shlex
import shutil
import subprocess
from pathlib import Path
from typing import List, Optional, Sequence

from express_starter.logging import get_logger

logger = get_logger(__name__)


class CommandError(Exception):
    """Raised when an external command cannot be run or fails."""

    def __init__(self, message: str, error_code: str = None, command: Sequence[str] = ()):
        self.message = message
        self.error_code = error_code
        self.command = list(command)
        super().__init__(message)

    @property
    def manual_command(self) -> str:
        """The command line the user can run by hand."""
        return ' '.join(shlex.quote(arg) for arg in self.command)


def get_command_path(command_name: str) -> str:
    """
    Get absolute path to command to prevent PATH manipulation attacks.

    Raises:
        CommandError: If command is not found
    """
    command_path = shutil.which(command_name)
    if not command_path:
        raise CommandError(
            f"Command '{command_name}' not found in PATH",
            "R001",
            [command_name]
        )
    command_path = str(Path(command_path).absolute())
    logger.debug(f"Command resolved: {command_name} -> {command_path}")
    return command_path


def run_command(command_args: Sequence[str],
                cwd: Optional[Path] = None,
                timeout: Optional[int] = 600,
                capture_output: bool = True) -> subprocess.CompletedProcess:
    """
    Execute a command and fail loudly on a non-zero exit.

    Args:
        command_args: Command and arguments; the first item is resolved on PATH
        cwd: Working directory for command execution
        timeout: Command timeout in seconds
        capture_output: Whether to capture stdout/stderr

    Returns:
        CompletedProcess object

    Raises:
        CommandError: If the command is missing, times out or exits non-zero
    """
    if not command_args:
        raise CommandError("Command arguments cannot be empty", "R002")

    args: List[str] = [get_command_path(command_args[0])] + list(command_args[1:])
    command_str = ' '.join(shlex.quote(arg) for arg in command_args)
    logger.info(f"Executing: {command_str} in {cwd or Path.cwd()}")

    try:
        result = subprocess.run(
            args,
            cwd=str(cwd) if cwd else None,
            timeout=timeout,
            capture_output=capture_output,
            text=True,
            check=False
        )
    except subprocess.TimeoutExpired:
        raise CommandError(
            f"Command timed out after {timeout} seconds: {command_str}",
            "R003",
            command_args
        )
    except OSError as e:
        raise CommandError(f"Command execution failed: {e}", "R004", command_args)

    logger.debug(f"Command completed with return code: {result.returncode}")

    if result.returncode != 0:
        output = (result.stderr or result.stdout or "").strip()
        message = f"'{command_str}' exited with code {result.returncode}"
        if output:
            message += f": {output.splitlines()[-1]}"
        raise CommandError(message, "R005", command_args)

    return result


def git_init(target_dir: Path, timeout: int = 600) -> subprocess.CompletedProcess:
    """Initialize a git repository in ``target_dir``."""
    return run_command(["git", "init", str(target_dir)], timeout=timeout)


def install_dependencies(package_manager: str, target_dir: Path,
                         timeout: int = 600) -> subprocess.CompletedProcess:
    """Install project dependencies with ``package_manager``."""
    return run_command([package_manager, "install"], cwd=target_dir, timeout=timeout)


def provision_database(command: Sequence[str], target_dir: Path,
                       timeout: int = 600) -> subprocess.CompletedProcess:
    """
    Run the external database provisioning command inside ``target_dir``.

    The command is expected to write DATABASE_URL into the project's .env.
    """
    return run_command(list(command), cwd=target_dir, timeout=timeout)
