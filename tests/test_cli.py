"""
Tests for the express-starter command line

Collaborators (git, package manager, provisioning) are patched out; the
materialization itself runs for real against the fixture templates.
"""

from unittest.mock import patch

import pytest
from click.testing import CliRunner

from express_starter import __version__
from express_starter.cli.commands import create
from express_starter.cli.main import cli
from express_starter.cli.utils import CommandError

CREATE = "express_starter.cli.commands.create_command"


@pytest.fixture
def env(templates_root, tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    return {
        "EXPRESS_STARTER_TEMPLATES_DIR": str(templates_root),
        "EXPRESS_STARTER_PACKAGE_MANAGER": "pnpm",
    }


@pytest.fixture
def collaborators():
    with patch(f"{CREATE}.git_init") as git_init, \
            patch(f"{CREATE}.install_dependencies") as install, \
            patch(f"{CREATE}.provision_database") as provision:
        yield {"git": git_init, "install": install, "provision": provision}


def test_version():
    result = CliRunner().invoke(cli, ["--version"])
    assert result.exit_code == 0
    assert f"express-starter v{__version__}" in result.output


def test_create_advanced_neon(env, tmp_path, collaborators):
    target = tmp_path / "my-api"
    result = CliRunner().invoke(
        cli, ["create", str(target), "-t", "advance", "-db", "neon", "--no-provision", "--yes"], env=env
    )

    assert result.exit_code == 0, result.output
    assert "Project created successfully!" in result.output
    assert "Set DATABASE_URL in .env" in result.output
    assert "pnpm run db:push" in result.output
    assert "[WARN]" not in result.output

    assert 'dialect: "postgresql"' in (target / "drizzle.config.ts").read_text()
    assert (target / "src" / "drizzle" / "auth-schema.ts").read_text() == "// pg auth schema\n"
    assert "DATABASE_URL" not in (target / ".env").read_text()

    collaborators["git"].assert_called_once_with(target.resolve(), timeout=600)
    collaborators["install"].assert_called_once_with("pnpm", target.resolve(), timeout=600)
    collaborators["provision"].assert_not_called()


def test_create_with_provisioning(env, tmp_path, collaborators):
    target = tmp_path / "my-api"
    result = CliRunner().invoke(
        cli, ["create", str(target), "-t", "advance", "-db", "neon", "--provision", "--yes"], env=env
    )

    assert result.exit_code == 0, result.output
    collaborators["provision"].assert_called_once()
    assert collaborators["provision"].call_args[0][1] == target.resolve()
    assert "Set DATABASE_URL" not in result.output


def test_create_basic_without_collaborators(env, tmp_path, collaborators):
    target = tmp_path / "site"
    result = CliRunner().invoke(
        cli, ["create", str(target), "--template", "basic", "--no-git", "--no-install", "--yes"], env=env
    )

    assert result.exit_code == 0, result.output
    assert (target / "package.json").is_file()
    assert (target / ".gitignore").is_file()
    collaborators["git"].assert_not_called()
    collaborators["install"].assert_not_called()
    assert "pnpm install" in result.output
    assert "pnpm run dev" in result.output
    assert "db:push" not in result.output


def test_non_empty_target_exits_1(env, tmp_path, collaborators):
    target = tmp_path / "taken"
    target.mkdir()
    (target / "index.js").write_text("mine")

    result = CliRunner().invoke(cli, ["create", str(target), "-t", "basic", "--yes"], env=env)

    assert result.exit_code == 1
    assert "not empty" in result.output
    assert [p.name for p in target.iterdir()] == ["index.js"]
    collaborators["git"].assert_not_called()


def test_missing_templates_exit_1(env, tmp_path, collaborators):
    env["EXPRESS_STARTER_TEMPLATES_DIR"] = str(tmp_path / "nowhere")
    result = CliRunner().invoke(cli, ["create", str(tmp_path / "app"), "-t", "basic", "--yes"], env=env)

    assert result.exit_code == 1
    assert "E100" in result.output
    assert "[FAIL] Creating project structure" in result.output


def test_collaborator_failures_are_warnings(env, tmp_path, collaborators):
    collaborators["git"].side_effect = CommandError("'git' not found", "R001", ["git"])
    collaborators["install"].side_effect = CommandError("exited with code 1", "R005", ["pnpm", "install"])

    target = tmp_path / "app"
    result = CliRunner().invoke(cli, ["create", str(target), "-t", "advance", "--yes"], env=env)

    assert result.exit_code == 0, result.output
    assert "Failed to initialize git repository" in result.output
    assert "Failed to install dependencies" in result.output
    assert "pnpm install" in result.output
    assert "Project created successfully!" in result.output
    # --yes picks sqlite for the advance template
    assert 'dialect: "sqlite"' in (target / "drizzle.config.ts").read_text()


def test_create_command_standalone(env, tmp_path, collaborators):
    """create-express-starter runs the command without the group"""
    target = tmp_path / "solo"
    result = CliRunner().invoke(create, [str(target), "-t", "basic", "--yes"], env=env)

    assert result.exit_code == 0, result.output
    assert (target / "src" / "index.ts").is_file()


class TestValidateCommand:
    def test_consistent_project(self, env, tmp_path, collaborators):
        target = tmp_path / "app"
        CliRunner().invoke(cli, ["create", str(target), "-t", "advance", "-db", "neon", "--yes"], env=env)

        result = CliRunner().invoke(cli, ["validate", str(target), "-db", "neon"], env=env)
        assert result.exit_code == 0, result.output
        assert "[ OK ]" in result.output

    def test_reports_violations(self, env, tmp_path):
        target = tmp_path / "broken"
        target.mkdir()
        (target / "drizzle.config.ts").write_text('dialect: "sqlite",\n')

        result = CliRunner().invoke(cli, ["validate", str(target), "-db", "neon"], env=env)
        assert result.exit_code == 1
        assert "dialect-mismatch" in result.output
        assert "auth-schema-missing" in result.output
        assert "env-missing" in result.output
