"""
Express Starter CLI

Interactive scaffolding for Express + TypeScript projects.
"""

import click

from express_starter.config import Config
from express_starter.cli.commands import create, validate


def _version_callback(ctx, param, value):
    """Display version and exit."""
    if value:
        from express_starter import __version__
        click.echo(f'express-starter v{__version__}')
        ctx.exit()


@click.group()
@click.option('--version', '-V', is_flag=True, callback=_version_callback, expose_value=False,
              is_eager=True, help='Show version and exit')
@click.option('--env-file', default=None, type=click.Path(dir_okay=False),
              help='Read EXPRESS_STARTER_* settings from this file (default: .env)')
@click.pass_context
def cli(ctx, env_file):
    """
    Express Starter CLI - Express project scaffolding

    Create a project with 'express-starter create'.
    """
    ctx.obj = Config.load_from_env(env_file)


cli.add_command(create)
cli.add_command(validate)


def create_app():
    """Entry point for create-express-starter."""
    create(prog_name="create-express-starter")


if __name__ == '__main__':
    cli()
