"""
Filesystem primitives used by the materializer and validator.
"""

import shutil
from pathlib import Path
from typing import Optional


def is_empty_dir(path: Path) -> bool:
    """True if ``path`` is a directory with no entries."""
    return path.is_dir() and not any(path.iterdir())


def copy_if_exists(src: Path, dest: Path) -> bool:
    """Copy a file onto ``dest``, overwriting it. Returns False if ``src`` is absent."""
    if not src.is_file():
        return False
    dest.parent.mkdir(parents=True, exist_ok=True)
    shutil.copy2(src, dest)
    return True


def remove_if_exists(path: Path) -> bool:
    """Remove a file or directory tree. Returns False if nothing was there."""
    if path.is_dir() and not path.is_symlink():
        shutil.rmtree(path)
        return True
    if path.exists() or path.is_symlink():
        path.unlink()
        return True
    return False


def read_text(path: Path) -> str:
    """Read UTF-8 text with line endings left as they are on disk."""
    with open(path, encoding="utf-8", newline="") as f:
        return f.read()


def read_if_exists(path: Path) -> Optional[str]:
    if path.is_file():
        return read_text(path)
    return None


def write_text(path: Path, content: str) -> None:
    """Write UTF-8 text without translating newlines, creating parent directories."""
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8", newline="") as f:
        f.write(content)
