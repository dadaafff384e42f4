"""
Express Starter - Post-materialization Validator

Advisory checks on a generated tree. Every violated check is reported, not
just the first one; callers print them and carry on.
"""

import re
from dataclasses import dataclass
from pathlib import Path
from typing import List

from .fs_utils import read_if_exists
from .plan import DEFAULT_LAYOUT, AdvancedLayout
from .spec import TemplateSpec

DIALECT_TOKEN = re.compile(r'dialect:\s*"([^"]*)"')


@dataclass(frozen=True)
class ValidationViolation:
    """A single failed check."""
    check: str
    message: str

    def __str__(self):
        return f"{self.check}: {self.message}"


def validate(destination_root: Path, spec: TemplateSpec,
             layout: AdvancedLayout = DEFAULT_LAYOUT) -> List[ValidationViolation]:
    """
    Check a materialized tree against the choices that produced it.

    Only the advanced template has variant files, so the basic template
    always validates clean.

    Returns:
        List of violations, empty when the tree is consistent
    """
    if not spec.is_advanced:
        return []

    root = Path(destination_root)
    violations: List[ValidationViolation] = []

    if not (root / layout.auth_schema).is_file():
        violations.append(ValidationViolation(
            "auth-schema-missing", f"{layout.auth_schema} does not exist"
        ))

    for variant in layout.auth_schema_variants:
        if (root / variant).exists():
            violations.append(ValidationViolation(
                "auth-schema-variant-left", f"{variant} should have been removed"
            ))

    config = read_if_exists(root / layout.dialect_config)
    if config is None:
        violations.append(ValidationViolation(
            "dialect-config-missing", f"{layout.dialect_config} does not exist"
        ))
    else:
        expected = spec.database.dialect
        found = DIALECT_TOKEN.findall(config)
        if found != [expected]:
            actual = ", ".join(found) if found else "none"
            violations.append(ValidationViolation(
                "dialect-mismatch",
                f"{layout.dialect_config} dialect is {actual}, expected {expected}"
            ))

    if not (root / ".env").is_file():
        violations.append(ValidationViolation(
            "env-missing", ".env does not exist, copy env.example and fill it in"
        ))

    return violations
