"""
Express Starter CLI - Validate Command

Re-runs the post-materialization checks on an existing project.
"""

import click
import sys
from pathlib import Path

from express_starter.core import Database, TemplateKind, TemplateSpec, validate as validate_tree


@click.command()
@click.argument('target_dir', type=click.Path(exists=True, file_okay=False, path_type=Path))
@click.option('--template', '-t', default=TemplateKind.ADVANCED.value,
              type=click.Choice([k.value for k in TemplateKind], case_sensitive=False),
              help='Template the project was created from (default: advance)')
@click.option('--database', '-db', default=Database.SQLITE.value,
              type=click.Choice([d.value for d in Database], case_sensitive=False),
              help='Database the project was created for (default: sqlite)')
def validate(target_dir, template, database):
    """
    Check a generated project for leftover variant files and config drift.

    Examples:
        express-starter validate my-api --database neon
    """
    spec = TemplateSpec.from_choices(template, database)
    violations = validate_tree(target_dir, spec)

    if not violations:
        click.secho(f"[ OK ] {target_dir} is consistent with {spec.kind.value}"
                    f"{'/' + spec.database.value if spec.database else ''}", fg='green')
        return

    click.secho(f"[WARN] {len(violations)} problem(s) found in {target_dir}:", fg='yellow', bold=True)
    for violation in violations:
        click.secho(f"  - {violation.check}: ", fg='yellow', nl=False)
        click.secho(violation.message, fg='cyan')
    sys.exit(1)
