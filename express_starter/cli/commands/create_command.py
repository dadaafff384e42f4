"""
Express Starter CLI - Create Command

Handles project creation with interactive prompts.
"""

import click
import questionary
import sys
from pathlib import Path
from questionary import Style

from express_starter.config import Config, Settings
from express_starter.core import (
    Database,
    StarterError,
    TemplateKind,
    TemplateSpec,
    materialize,
    resolve,
    validate,
)
from express_starter.logging import setup_logging
from .helpers import detect_package_manager, display_path, validate_target_dir
from ..utils import (
    CommandError,
    git_init,
    handle_error,
    install_dependencies,
    next_steps,
    progress_step,
    provision_database,
    success_message,
    warning,
)

# Custom style for questionary prompts
custom_style = Style([
    ('qmark', 'fg:#673ab7 bold'),          # Question mark
    ('question', 'bold'),                   # Question text
    ('answer', 'fg:#2196f3 bold'),         # Selected answer
    ('pointer', 'fg:#673ab7 bold'),        # Selection pointer
    ('highlighted', 'fg:#2196f3 bold'),    # Highlighted choice
    ('selected', 'fg:#4caf50 bold'),       # Selected choice
    ('instruction', ''),                    # Instructions
    ('text', ''),                           # Plain text
])


def _ask(question):
    """Run a questionary prompt; Ctrl+C aborts with exit code 1."""
    answer = question.ask()
    if answer is None:
        click.secho("\n[CANCELLED] Project creation cancelled.\n", fg='yellow')
        sys.exit(1)
    return answer


def _get_settings(ctx) -> Settings:
    """Settings injected by the command group, or loaded here when run standalone."""
    if isinstance(ctx.obj, Settings):
        return ctx.obj
    ctx.obj = Config.load_from_env()
    return ctx.obj


@click.command()
@click.argument('target_dir', required=False)
@click.option('--template', '-t', default=None,
              type=click.Choice([k.value for k in TemplateKind], case_sensitive=False),
              help='Template to use (basic or advance)')
@click.option('--database', '-db', default=None,
              type=click.Choice([d.value for d in Database], case_sensitive=False),
              help='Database for the advance template (sqlite or neon)')
@click.option('--git/--no-git', default=None, help='Initialize a git repository')
@click.option('--install/--no-install', default=None, help='Install dependencies')
@click.option('--provision/--no-provision', default=None,
              help='Provision a Neon database after creating the project (neon only)')
@click.option('--yes', '-y', is_flag=True, help='Use defaults for anything not given as a flag')
@click.option('--verbose', '-v', is_flag=True, help='Show debug logging')
@click.pass_context
def create(ctx, target_dir, template, database, git, install, provision, yes, verbose):
    """
    Create a new Express project.

    Copies the selected template into TARGET_DIR, adapts it to the chosen
    database, then optionally initializes git and installs dependencies.

    Examples:
        create-express-starter
        create-express-starter my-api --template basic
        create-express-starter my-api -t advance -db neon --yes
    """
    settings = _get_settings(ctx)
    setup_logging("DEBUG" if verbose else settings.log_level)

    click.secho("\n" + "="*50, fg='cyan', bold=True)
    click.secho("Create Express Starter", fg='cyan', bold=True)
    click.secho("="*50 + "\n", fg='cyan', bold=True)

    if not target_dir:
        if yes:
            target_dir = "."
        else:
            target_dir = _ask(questionary.text(
                "Where would you like to create your project?",
                default=".",
                style=custom_style
            ))

    validation_result = validate_target_dir(target_dir)
    if validation_result is not True:
        handle_error(StarterError(
            f"Aborting: {validation_result}",
            suggestion="Choose a different directory or remove the existing one.",
            error_code="E201"
        ))
        sys.exit(1)

    project_dir = Path(target_dir).expanduser().resolve()

    if not template:
        if yes:
            template = TemplateKind.BASIC.value
        else:
            template = _ask(questionary.select(
                "Which Express setup would you like?",
                choices=[questionary.Choice(k.label, value=k.value) for k in TemplateKind],
                style=custom_style
            ))

    if template == TemplateKind.ADVANCED.value and not database:
        if yes:
            database = Database.SQLITE.value
        else:
            database = _ask(questionary.select(
                "Which database would you like to use?",
                choices=[questionary.Choice(d.label, value=d.value) for d in Database],
                style=custom_style
            ))

    try:
        spec = TemplateSpec.from_choices(template, database)
    except ValueError as e:
        handle_error(e)
        sys.exit(1)

    if git is None:
        git = True if yes else _ask(questionary.confirm(
            "Would you like to initialize a git repository?", default=True, style=custom_style
        ))

    if install is None:
        install = True if yes else _ask(questionary.confirm(
            "Would you like to install dependencies?", default=True, style=custom_style
        ))

    if spec.database is not Database.POSTGRES:
        provision = False
    elif provision is None:
        provision = False if yes else _ask(questionary.confirm(
            "Would you like to provision a Neon database now?", default=False, style=custom_style
        ))

    package_manager = detect_package_manager(settings)

    # Review section
    click.secho("\n" + "="*50, fg='yellow', bold=True)
    click.secho("Project Configuration Review", fg='yellow', bold=True)
    click.secho("="*50, fg='yellow', bold=True)
    click.secho("  Location: ", fg='blue', nl=False)
    click.secho(str(project_dir), fg='green', bold=True)
    click.secho("  Template: ", fg='blue', nl=False)
    click.secho(spec.kind.label, fg='green', bold=True)
    if spec.database:
        click.secho("  Database: ", fg='blue', nl=False)
        click.secho(spec.database.label, fg='green', bold=True)
    click.secho("  Git: ", fg='blue', nl=False)
    click.secho("Yes" if git else "No", fg='green')
    click.secho("  Install: ", fg='blue', nl=False)
    click.secho(f"Yes ({package_manager})" if install else "No", fg='green')
    click.secho("="*50 + "\n", fg='yellow', bold=True)

    if not yes and not _ask(questionary.confirm("Does this look correct?", default=True, style=custom_style)):
        click.secho("\n[CANCELLED] Project creation cancelled by user.\n", fg='yellow')
        sys.exit(0)

    try:
        with progress_step("Creating project structure"):
            plan = resolve(spec, settings.templates_dir)
            materialize(plan, project_dir)
    except StarterError as e:
        handle_error(e)
        sys.exit(1)
    except OSError as e:
        handle_error(e, context="Failed to create project structure")
        sys.exit(1)

    for violation in validate(project_dir, spec):
        warning(str(violation))

    if git:
        try:
            with progress_step("Initializing git repository"):
                git_init(project_dir, timeout=settings.command_timeout)
        except CommandError as e:
            warning(f"Failed to initialize git repository: {e.message}",
                    f"Run it yourself: git init {display_path(project_dir)}")

    provisioned = False
    if provision:
        try:
            with progress_step("Provisioning Neon database"):
                provision_database(settings.provision_command, project_dir,
                                   timeout=settings.command_timeout)
            provisioned = True
        except CommandError as e:
            warning(f"Failed to provision database: {e.message}",
                    f"Run it yourself inside the project: {e.manual_command}")

    installed = False
    if install:
        try:
            with progress_step(f"Installing dependencies with {package_manager}"):
                install_dependencies(package_manager, project_dir, timeout=settings.command_timeout)
            installed = True
        except CommandError as e:
            warning(f"Failed to install dependencies: {e.message}")

    details = {"Template": spec.kind.label, "Location": str(project_dir)}
    if spec.database:
        details["Database"] = spec.database.label
    success_message("Project created successfully!", details)

    steps = []
    if project_dir != Path.cwd().resolve():
        steps.append(f"cd {display_path(project_dir)}")
    if not installed:
        steps.append(f"{package_manager} install")
    if spec.database is Database.POSTGRES and not provisioned:
        steps.append("Set DATABASE_URL in .env (or run: npx get-db)")
    if spec.is_advanced:
        steps.append(f"{package_manager} run db:push")
    steps.append(f"{package_manager} run dev")
    next_steps(steps)

    click.secho("Happy Coding!", fg='yellow', bold=True)
