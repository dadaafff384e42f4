"""
Template materialization engine.

    from express_starter.core import TemplateSpec, resolve, materialize, validate

    spec = TemplateSpec.from_choices("advance", "neon")
    plan = resolve(spec, TEMPLATES_DIR)
    materialize(plan, Path("my-api"))
    for violation in validate(Path("my-api"), spec):
        print(violation)
"""

from .errors import (
    CopyFailed,
    DestinationNotEmpty,
    MaterializeError,
    RewriteMismatch,
    StarterError,
    TemplateNotFound,
)
from .materializer import materialize
from .plan import (
    DEFAULT_LAYOUT,
    AdvancedLayout,
    FileSwap,
    MaterializationPlan,
    ReplaceContent,
    TokenRewrite,
)
from .resolver import resolve
from .spec import Database, TemplateKind, TemplateSpec
from .validator import ValidationViolation, validate

__all__ = [
    "TemplateKind",
    "Database",
    "TemplateSpec",
    "AdvancedLayout",
    "DEFAULT_LAYOUT",
    "FileSwap",
    "TokenRewrite",
    "ReplaceContent",
    "MaterializationPlan",
    "resolve",
    "materialize",
    "validate",
    "ValidationViolation",
    "StarterError",
    "TemplateNotFound",
    "MaterializeError",
    "DestinationNotEmpty",
    "CopyFailed",
    "RewriteMismatch",
]
