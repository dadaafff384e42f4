"""
Express Starter - Materialization Plan

The concrete, resolved set of file operations derived from a TemplateSpec.
A plan is built once by the resolver and consumed once by the materializer.
"""

import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import FrozenSet, Optional, Tuple, Union

from .errors import RewriteMismatch
from .spec import Database


# Never copied into a generated project
EXCLUDED_BASENAMES = frozenset({"node_modules", "dist", "gitignore"})
EXCLUDED_SUFFIXES = (".lock", "lock.json", "lock.yaml")


@dataclass(frozen=True)
class AdvancedLayout:
    """
    Relative locations of the substitution points in the advanced template.

    All paths are POSIX-style and relative to the template root.
    """
    dialect_config: str = "drizzle.config.ts"
    db_connector: str = "src/drizzle/index.ts"
    auth_bootstrap: str = "src/utils/auth.ts"
    auth_schema_dir: str = "src/drizzle"
    auth_schema_stem: str = "auth-schema"
    env_example: str = "env.example"
    ignore_seed: str = "gitignore"
    env_module: str = "@/utils/env.js"

    def _in_schema_dir(self, name: str) -> str:
        return f"{self.auth_schema_dir}/{name}" if self.auth_schema_dir else name

    @property
    def auth_schema(self) -> str:
        """Canonical auth-schema path."""
        return self._in_schema_dir(f"{self.auth_schema_stem}.ts")

    def auth_schema_variant(self, database: Database) -> str:
        """Path of the auth-schema variant file for ``database``."""
        return self._in_schema_dir(f"{self.auth_schema_stem}.{database.schema_suffix}.ts")

    @property
    def auth_schema_variants(self) -> Tuple[str, ...]:
        return tuple(self.auth_schema_variant(db) for db in Database)


DEFAULT_LAYOUT = AdvancedLayout()


@dataclass(frozen=True)
class FileSwap:
    """Copy a variant file from the template onto its canonical destination name."""
    source: str
    destination: str


@dataclass(frozen=True)
class TokenRewrite:
    """
    Regex substitution of a single documented token inside a file.

    The pattern must match exactly once; anything else means the template
    and the rule have drifted apart.
    """
    target: str
    pattern: re.Pattern
    replacement: str

    def apply(self, text: str) -> str:
        matches = len(self.pattern.findall(text))
        if matches != 1:
            raise RewriteMismatch(self.target, self.pattern.pattern, matches)
        return self.pattern.sub(self.replacement, text)


@dataclass(frozen=True)
class ReplaceContent:
    """Replace the whole content of a file."""
    target: str
    content: str

    def apply(self, text: str) -> str:
        return self.content


Rewrite = Union[TokenRewrite, ReplaceContent]


def token_rewrite(target: str, pattern: str, replacement: str) -> TokenRewrite:
    """Build a TokenRewrite from a pattern string."""
    return TokenRewrite(target=target, pattern=re.compile(pattern), replacement=replacement)


@dataclass(frozen=True)
class MaterializationPlan:
    """
    Resolved file operations for one materialization run.

    Attributes:
        copy_source_root: Template directory copied wholesale
        variant_rewrites: Text transforms applied after copy, in order
        variant_file_swaps: Variant files collapsed onto canonical names
        variant_file_deletions: Relative paths removed after swaps
        env_seed: Content of the generated .env, or None to skip it
        ignore_seed: Template file copied verbatim to .gitignore, or None
        excluded_basenames: Entries never copied
        excluded_suffixes: Name suffixes never copied
    """
    copy_source_root: Path
    variant_rewrites: Tuple[Rewrite, ...] = ()
    variant_file_swaps: Tuple[FileSwap, ...] = ()
    variant_file_deletions: Tuple[str, ...] = ()
    env_seed: Optional[str] = None
    ignore_seed: Optional[str] = DEFAULT_LAYOUT.ignore_seed
    excluded_basenames: FrozenSet[str] = field(default=EXCLUDED_BASENAMES)
    excluded_suffixes: Tuple[str, ...] = field(default=EXCLUDED_SUFFIXES)

    def is_excluded(self, name: str) -> bool:
        """Return True if an entry with this basename must not be copied."""
        return name in self.excluded_basenames or name.endswith(self.excluded_suffixes)
