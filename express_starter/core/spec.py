"""
Express Starter - Template Specification

The immutable record of user choices that drives template selection.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class TemplateKind(Enum):
    """Template complexity tier. The value is the template directory name."""
    BASIC = "basic"
    ADVANCED = "advance"

    @property
    def label(self) -> str:
        return "Basic Express Setup" if self is TemplateKind.BASIC else "Advance Express Setup"


class Database(Enum):
    """Database engine for the advanced template."""
    SQLITE = "sqlite"
    POSTGRES = "neon"

    @property
    def dialect(self) -> str:
        """Dialect token written to the drizzle config."""
        return "sqlite" if self is Database.SQLITE else "postgresql"

    @property
    def auth_provider(self) -> str:
        """Provider token passed to the Better Auth drizzle adapter."""
        return "sqlite" if self is Database.SQLITE else "pg"

    @property
    def schema_suffix(self) -> str:
        """Suffix used by the auth-schema variant files."""
        return "sqlite" if self is Database.SQLITE else "pg"

    @property
    def connector_template(self) -> str:
        """Snippet template that replaces the DB connector file."""
        return "sqlite_index.ts.j2" if self is Database.SQLITE else "neon_index.ts.j2"

    @property
    def label(self) -> str:
        return "SQLite (local file)" if self is Database.SQLITE else "Postgres (Neon)"


@dataclass(frozen=True)
class TemplateSpec:
    """
    Identifies a template variant to materialize.

    ``database`` only has meaning for ``TemplateKind.ADVANCED`` and is
    always ``None`` for the basic template.
    """
    kind: TemplateKind
    database: Optional[Database] = None

    def __post_init__(self):
        if self.kind is TemplateKind.BASIC and self.database is not None:
            object.__setattr__(self, "database", None)
        elif self.kind is TemplateKind.ADVANCED and self.database is None:
            object.__setattr__(self, "database", Database.SQLITE)

    @property
    def is_advanced(self) -> bool:
        return self.kind is TemplateKind.ADVANCED

    @classmethod
    def from_choices(cls, kind: str, database: Optional[str] = None) -> "TemplateSpec":
        """
        Build a spec from the raw strings the prompts and flags produce.

        Args:
            kind: "basic" or "advance"
            database: "sqlite", "neon" or None

        Raises:
            ValueError: If either value is not a known choice
        """
        try:
            template_kind = TemplateKind(kind.lower())
        except (ValueError, AttributeError):
            choices = ", ".join(k.value for k in TemplateKind)
            raise ValueError(f"Invalid template: '{kind}'. Choose one of: {choices}")

        db = None
        if database:
            try:
                db = Database(database.lower())
            except ValueError:
                choices = ", ".join(d.value for d in Database)
                raise ValueError(f"Invalid database: '{database}'. Choose one of: {choices}")

        return cls(kind=template_kind, database=db)
