"""
Private Jinja2 Snippet Loader

Provides the Jinja2 environment used to render whole-file connector
snippets. The output is TypeScript source, so autoescaping is off; all
other settings are locked down.

IMPORTANT: This is a private module (prefixed with underscore) and should
only be imported internally by express_starter.
"""

from pathlib import Path
from jinja2 import Environment, FileSystemLoader, StrictUndefined

SNIPPETS_DIR = Path(__file__).parent / "snippets"

snippet_env = Environment(
    loader=FileSystemLoader(str(SNIPPETS_DIR)),
    autoescape=False,  # Output is source code, not HTML
    auto_reload=False,
    undefined=StrictUndefined,  # Fail loudly on undefined variables
    keep_trailing_newline=True,
    trim_blocks=True,
    lstrip_blocks=True
)


def render_snippet(name: str, **context) -> str:
    """Render a snippet template by file name."""
    return snippet_env.get_template(name).render(**context)


__all__ = ['snippet_env', 'render_snippet', 'SNIPPETS_DIR']
