"""
Express Starter - Express project scaffolding

Copies a packaged Express + TypeScript template into a new directory,
adapts it to the chosen database, then initializes git and installs
dependencies.

Command line:
    create-express-starter my-api
    create-express-starter my-api --template advance --database neon --yes

Library:
    from express_starter import TemplateSpec, resolve, materialize, validate
    from express_starter.config import Config

    settings = Config.load_from_env()
    spec = TemplateSpec.from_choices("advance", "sqlite")
    materialize(resolve(spec, settings.templates_dir), Path("my-api"))
"""

__version__ = "0.1.0"

from express_starter.core import (
    Database,
    TemplateKind,
    TemplateSpec,
    materialize,
    resolve,
    validate,
)

__all__ = [
    "TemplateKind",
    "Database",
    "TemplateSpec",
    "resolve",
    "materialize",
    "validate",
    "__version__",
]
