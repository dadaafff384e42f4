"""
Express Starter - Error Taxonomy

Errors raised by the template materialization engine. Each carries a
message, an actionable suggestion and an error code so the CLI can render
it the same way it renders its own errors.
"""

from pathlib import Path
from typing import Optional, Union


class StarterError(Exception):
    """
    Base exception for scaffolding errors.

    Attributes:
        message: Error message
        suggestion: Actionable suggestion for the user
        error_code: Optional error code for documentation reference
    """

    def __init__(self, message: str, suggestion: str = None, error_code: str = None):
        self.message = message
        self.suggestion = suggestion
        self.error_code = error_code
        super().__init__(message)


class TemplateNotFound(StarterError):
    """Raised when the requested template directory does not exist."""

    def __init__(self, template_dir: Path):
        self.template_dir = Path(template_dir)
        super().__init__(
            f"Template directory not found: {self.template_dir}",
            suggestion="Reinstall express-starter or point EXPRESS_STARTER_TEMPLATES_DIR "
                       "at a directory containing 'basic' and 'advance'.",
            error_code="E100"
        )


class MaterializeError(StarterError):
    """
    Raised when a materialization step fails.

    Attributes:
        step: Name of the failing step (prepare, copy, swap, delete,
            rewrite, gitignore, env)
        path: Path the step was working on
        cause: Underlying exception, if any
    """

    def __init__(self, step: str, path: Union[str, Path], cause: Optional[BaseException] = None,
                 message: str = None, suggestion: str = None, error_code: str = "E200"):
        self.step = step
        self.path = Path(path)
        self.cause = cause
        if message is None:
            message = f"Step '{step}' failed for {self.path}"
            if cause is not None:
                message += f": {cause}"
        if suggestion is None:
            suggestion = ("The project directory may be partially written. "
                          "Delete it and run the command again.")
        super().__init__(message, suggestion=suggestion, error_code=error_code)


class DestinationNotEmpty(MaterializeError):
    """Raised before any write when the destination already has entries."""

    def __init__(self, path: Union[str, Path]):
        super().__init__(
            "prepare",
            path,
            message=f"The target directory '{path}' already exists and is not empty",
            suggestion="Choose a different directory or remove the existing one.",
            error_code="E201"
        )


class CopyFailed(MaterializeError):
    """Raised when copying template files into the destination fails."""

    def __init__(self, path: Union[str, Path], cause: Optional[BaseException] = None, step: str = "copy"):
        super().__init__(step, path, cause, error_code="E202")


class RewriteMismatch(MaterializeError):
    """Raised when a token rewrite target exists but its token is not found exactly once."""

    def __init__(self, path: Union[str, Path], pattern: str, matches: int):
        self.pattern = pattern
        self.matches = matches
        super().__init__(
            "rewrite",
            path,
            message=(f"Expected exactly one match for /{pattern}/ in {path}, "
                     f"found {matches}"),
            suggestion="The packaged template no longer contains the expected token. "
                       "Update the template or the rewrite rule.",
            error_code="E203"
        )


__all__ = [
    "StarterError",
    "TemplateNotFound",
    "MaterializeError",
    "DestinationNotEmpty",
    "CopyFailed",
    "RewriteMismatch",
]
