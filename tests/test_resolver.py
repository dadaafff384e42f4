"""
Tests for the variant resolver
"""

import pytest

from express_starter.core import (
    FileSwap,
    ReplaceContent,
    TemplateNotFound,
    TemplateSpec,
    TokenRewrite,
    resolve,
)
from express_starter.core.resolver import strip_database_url


def test_basic_plan_has_no_variant_steps(templates_root):
    plan = resolve(TemplateSpec.from_choices("basic"), templates_root)

    assert plan.copy_source_root == (templates_root / "basic").resolve()
    assert plan.variant_file_swaps == ()
    assert plan.variant_file_deletions == ()
    assert plan.variant_rewrites == ()
    assert plan.env_seed == "PORT=3000\nNODE_ENV=development\n"


def test_sqlite_plan(templates_root):
    plan = resolve(TemplateSpec.from_choices("advance", "sqlite"), templates_root)

    assert plan.variant_file_swaps == (
        FileSwap("src/drizzle/auth-schema.sqlite.ts", "src/drizzle/auth-schema.ts"),
    )
    assert set(plan.variant_file_deletions) == {
        "src/drizzle/auth-schema.sqlite.ts",
        "src/drizzle/auth-schema.pg.ts",
    }

    targets = [r.target for r in plan.variant_rewrites]
    # No dialect rewrite for sqlite, the template already says sqlite
    assert "drizzle.config.ts" not in targets
    assert targets == ["src/drizzle/index.ts", "src/utils/auth.ts"]

    connector = plan.variant_rewrites[0]
    assert isinstance(connector, ReplaceContent)
    assert "drizzle-orm/better-sqlite3" in connector.content
    assert "neon" not in connector.content

    assert "DATABASE_URL=./local.db\n" in plan.env_seed


def test_neon_plan(templates_root):
    plan = resolve(TemplateSpec.from_choices("advance", "neon"), templates_root)

    assert plan.variant_file_swaps == (
        FileSwap("src/drizzle/auth-schema.pg.ts", "src/drizzle/auth-schema.ts"),
    )

    dialect, connector, provider = plan.variant_rewrites
    assert isinstance(dialect, TokenRewrite)
    assert dialect.target == "drizzle.config.ts"
    assert dialect.apply('  dialect: "sqlite",\n') == '  dialect: "postgresql",\n'

    assert isinstance(connector, ReplaceContent)
    assert 'from "drizzle-orm/neon-http"' in connector.content
    assert 'from "@neondatabase/serverless"' in connector.content
    assert 'import { env } from "@/utils/env.js";' in connector.content

    assert provider.apply('provider: "sqlite",') == 'provider: "pg",'
    assert "DATABASE_URL" not in plan.env_seed
    assert plan.env_seed.startswith("PORT=3000\n")


def test_token_rewrites_are_idempotent(templates_root):
    plan = resolve(TemplateSpec.from_choices("advance", "neon"), templates_root)
    dialect = plan.variant_rewrites[0]

    once = dialect.apply('dialect: "sqlite"')
    assert dialect.apply(once) == once


def test_excluded_rules(templates_root):
    plan = resolve(TemplateSpec.from_choices("basic"), templates_root)

    for name in ["pnpm-lock.yaml", "yarn.lock", "bun.lock", "package-lock.json",
                 "node_modules", "dist", "gitignore"]:
        assert plan.is_excluded(name), name
    for name in ["package.json", "docker-compose.yaml", "env.example", "index.ts"]:
        assert not plan.is_excluded(name), name


def test_missing_template_raises(tmp_path):
    with pytest.raises(TemplateNotFound) as exc_info:
        resolve(TemplateSpec.from_choices("advance", "neon"), tmp_path)
    assert exc_info.value.error_code == "E100"


def test_missing_env_example_gives_no_seed(templates_root):
    (templates_root / "basic" / "env.example").unlink()
    plan = resolve(TemplateSpec.from_choices("basic"), templates_root)
    assert plan.env_seed is None


def test_missing_rewrite_targets_are_not_a_resolve_error(templates_root):
    (templates_root / "advance" / "src" / "utils" / "auth.ts").unlink()
    plan = resolve(TemplateSpec.from_choices("advance", "neon"), templates_root)
    assert "src/utils/auth.ts" in [r.target for r in plan.variant_rewrites]


class TestStripDatabaseUrl:
    """DATABASE_URL removal from env content"""

    def test_strips_line_and_keeps_others(self):
        content = "PORT=3000\nDATABASE_URL=postgres://x\nSECRET=y\n"
        assert strip_database_url(content) == "PORT=3000\nSECRET=y\n"

    def test_case_insensitive_and_last_line(self):
        content = "PORT=3000\ndatabase_url=file.db"
        assert strip_database_url(content) == "PORT=3000\n"

    def test_leaves_similar_keys(self):
        content = "SHADOW_DATABASE_URL=x\n# DATABASE_URL=commented\n"
        assert strip_database_url(content) == content
