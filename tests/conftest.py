"""
Pytest Configuration for Express Starter Tests

Ensures proper import paths and provides small template trees built in
tmp_path so tests never depend on the packaged payload's exact content.
"""

import logging
import sys
from pathlib import Path

import pytest

# Add the parent directory to sys.path to ensure proper imports
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))


LOCKFILES = ["pnpm-lock.yaml", "yarn.lock", "bun.lock", "package-lock.json"]

DRIZZLE_CONFIG = '''import { defineConfig } from "drizzle-kit";

export default defineConfig({
  schema: "./src/drizzle/schema.ts",
  dialect: "sqlite",
});
'''

AUTH_BOOTSTRAP = '''export const auth = betterAuth({
  database: drizzleAdapter(db, {
    provider: "pg",
  }),
});
'''

ADVANCED_ENV = "PORT=3000\nDATABASE_URL=./local.db\nBETTER_AUTH_SECRET=change-me\n"


def write_tree(root: Path, files: dict) -> Path:
    """Create files under root from a {relative_path: content} mapping."""
    for relative, content in files.items():
        path = root / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
    return root


def snapshot(root: Path) -> dict:
    """Map every file under root to its bytes, keyed by POSIX relative path."""
    return {
        p.relative_to(root).as_posix(): p.read_bytes()
        for p in sorted(root.rglob("*")) if p.is_file()
    }


@pytest.fixture
def templates_root(tmp_path):
    """A templates root with 'basic' and 'advance' trees shaped like the real ones."""
    root = tmp_path / "templates"

    basic = {
        "package.json": '{"name": "basic"}\n',
        "src/index.ts": 'console.log("hello");\n',
        "src/utils/env.ts": "export const env = {};\n",
        "docker-compose.yaml": "services: {}\n",
        "env.example": "PORT=3000\nNODE_ENV=development\n",
        "gitignore": "node_modules\n.env\n",
        "node_modules/left-pad/index.js": "module.exports = 1;\n",
        "dist/index.js": "compiled\n",
    }
    advanced = {
        "package.json": '{"name": "advance"}\n',
        "drizzle.config.ts": DRIZZLE_CONFIG,
        "src/drizzle/index.ts": "// placeholder connector\n",
        "src/drizzle/auth-schema.sqlite.ts": "// sqlite auth schema\n",
        "src/drizzle/auth-schema.pg.ts": "// pg auth schema\n",
        "src/utils/auth.ts": AUTH_BOOTSTRAP,
        "env.example": ADVANCED_ENV,
        "gitignore": "node_modules\n.env\n*.db\n",
        "node_modules/.bin/tsx": "#!/bin/sh\n",
    }
    for name in LOCKFILES:
        basic[name] = "lock\n"
        advanced[name] = "lock\n"

    write_tree(root / "basic", basic)
    write_tree(root / "advance", advanced)
    return root


@pytest.fixture
def packaged_templates():
    """The templates shipped with the package."""
    return project_root / "express_starter" / "templates"


@pytest.fixture(autouse=True)
def reset_package_logger():
    """Drop handlers the CLI installs so they never outlive a test's streams."""
    yield
    logger = logging.getLogger("express_starter")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)
