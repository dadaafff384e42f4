"""
Express Starter - Variant Resolver

Turns a TemplateSpec into a MaterializationPlan. The only filesystem access
is reading the template's example env file; the destination tree is never
touched here.
"""

import re
from pathlib import Path
from typing import List

from .._template_loader import render_snippet
from ..logging import get_logger
from .errors import TemplateNotFound
from .fs_utils import read_text
from .plan import (
    DEFAULT_LAYOUT,
    EXCLUDED_BASENAMES,
    AdvancedLayout,
    FileSwap,
    MaterializationPlan,
    ReplaceContent,
    Rewrite,
    token_rewrite,
)
from .spec import Database, TemplateSpec

logger = get_logger(__name__)

# Substitution points. Each pattern accepts every value the token can hold so
# that applying a rewrite twice is harmless.
DIALECT_PATTERN = r'(dialect:\s*)"(?:sqlite|postgresql)"'
PROVIDER_PATTERN = r'(provider:\s*)"(?:sqlite|pg)"'
DATABASE_URL_LINE = re.compile(r'^DATABASE_URL=.*(?:\r?\n|$)', re.IGNORECASE | re.MULTILINE)


def strip_database_url(content: str) -> str:
    """Drop every DATABASE_URL= line from env file content."""
    return DATABASE_URL_LINE.sub("", content)


def build_env_seed(template_root: Path, spec: TemplateSpec, layout: AdvancedLayout = DEFAULT_LAYOUT):
    """
    Build the content of the generated .env.

    Returns None when the template has no example env file. For Postgres the
    DATABASE_URL line is removed so the provisioning step can write it.
    """
    example = template_root / layout.env_example
    if not example.is_file():
        logger.debug(f"No {layout.env_example} in {template_root}, .env will not be generated")
        return None

    content = read_text(example)
    if spec.database is Database.POSTGRES:
        content = strip_database_url(content)
    return content


def _advanced_rewrites(database: Database, layout: AdvancedLayout) -> List[Rewrite]:
    rewrites: List[Rewrite] = []

    # Template ships with the sqlite dialect
    if database is Database.POSTGRES:
        rewrites.append(token_rewrite(
            layout.dialect_config, DIALECT_PATTERN, rf'\1"{database.dialect}"'
        ))

    rewrites.append(ReplaceContent(
        target=layout.db_connector,
        content=render_snippet(database.connector_template, env_module=layout.env_module)
    ))

    rewrites.append(token_rewrite(
        layout.auth_bootstrap, PROVIDER_PATTERN, rf'\1"{database.auth_provider}"'
    ))
    return rewrites


def resolve(spec: TemplateSpec, templates_root: Path,
            layout: AdvancedLayout = DEFAULT_LAYOUT) -> MaterializationPlan:
    """
    Resolve a TemplateSpec into a MaterializationPlan.

    Args:
        spec: User choices
        templates_root: Directory holding one sub-directory per template kind
        layout: Substitution points of the advanced template

    Returns:
        MaterializationPlan ready for ``materialize``

    Raises:
        TemplateNotFound: If the template directory for ``spec.kind`` is missing
    """
    copy_source_root = Path(templates_root).resolve() / spec.kind.value
    if not copy_source_root.is_dir():
        raise TemplateNotFound(copy_source_root)

    swaps = ()
    deletions = ()
    rewrites = ()

    if spec.is_advanced:
        database = spec.database
        swaps = (FileSwap(source=layout.auth_schema_variant(database),
                          destination=layout.auth_schema),)
        deletions = layout.auth_schema_variants
        rewrites = tuple(_advanced_rewrites(database, layout))

    plan = MaterializationPlan(
        copy_source_root=copy_source_root,
        variant_rewrites=rewrites,
        variant_file_swaps=swaps,
        variant_file_deletions=deletions,
        env_seed=build_env_seed(copy_source_root, spec, layout),
        ignore_seed=layout.ignore_seed,
        excluded_basenames=EXCLUDED_BASENAMES | {layout.ignore_seed},
    )

    logger.debug(
        f"Resolved {spec.kind.value} template"
        f"{' with ' + spec.database.value if spec.database else ''}: "
        f"{len(swaps)} swap(s), {len(deletions)} deletion(s), {len(rewrites)} rewrite(s)"
    )
    return plan
