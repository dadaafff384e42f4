"""
Express Starter - Template Materializer

Produces a project directory tree from a MaterializationPlan.

Steps run strictly in order:
    1. copy       bulk copy of the template, minus excluded entries
    2. swap       variant files copied onto their canonical names
    3. delete     unselected variant files removed
    4. rewrite    in-place text transforms (skipped when the file is absent)
    5. gitignore  .gitignore written from the template's seed file
    6. env        .env written from the plan's env seed

A failing step aborts the run. Files written before the failure are left in
place; the destination is always a fresh directory, so the user can delete
it and retry.
"""

import shutil
from pathlib import Path

from ..logging import get_logger
from .errors import CopyFailed, DestinationNotEmpty, MaterializeError
from .fs_utils import copy_if_exists, is_empty_dir, read_text, remove_if_exists, write_text
from .plan import MaterializationPlan

logger = get_logger(__name__)


def _prepare_destination(destination_root: Path) -> None:
    """Ensure the destination is an empty directory, creating it if needed."""
    if destination_root.exists():
        if not destination_root.is_dir():
            raise MaterializeError(
                "prepare",
                destination_root,
                message=f"The target '{destination_root}' exists and is not a directory",
                suggestion="Choose a different target directory."
            )
        if not is_empty_dir(destination_root):
            raise DestinationNotEmpty(destination_root)
        return

    try:
        destination_root.mkdir(parents=True)
    except OSError as e:
        raise MaterializeError("prepare", destination_root, e)


def _copy_template(plan: MaterializationPlan, destination_root: Path) -> None:
    def ignore(_directory, names):
        return {name for name in names if plan.is_excluded(name)}

    try:
        shutil.copytree(
            plan.copy_source_root,
            destination_root,
            ignore=ignore,
            dirs_exist_ok=True
        )
    except OSError as e:
        # shutil.Error is an OSError carrying a list of per-file failures
        path = destination_root
        if isinstance(e, shutil.Error) and e.args and isinstance(e.args[0], list) and e.args[0]:
            path = Path(e.args[0][0][1])
        raise CopyFailed(path, e)


def _apply_swaps(plan: MaterializationPlan, destination_root: Path) -> None:
    for swap in plan.variant_file_swaps:
        source = plan.copy_source_root / swap.source
        destination = destination_root / swap.destination
        try:
            copied = copy_if_exists(source, destination)
        except OSError as e:
            raise CopyFailed(destination, e, step="swap")
        if not copied:
            raise CopyFailed(source, FileNotFoundError(f"Variant file not found: {source}"), step="swap")
        logger.debug(f"Swapped {swap.source} -> {swap.destination}")


def _apply_deletions(plan: MaterializationPlan, destination_root: Path) -> None:
    for relative in plan.variant_file_deletions:
        target = destination_root / relative
        try:
            removed = remove_if_exists(target)
        except OSError as e:
            raise MaterializeError("delete", target, e)
        if removed:
            logger.debug(f"Removed {relative}")
        else:
            logger.debug(f"Deletion skipped, {relative} not present")


def _apply_rewrites(plan: MaterializationPlan, destination_root: Path) -> None:
    for rewrite in plan.variant_rewrites:
        target = destination_root / rewrite.target
        if not target.is_file():
            logger.debug(f"Rewrite skipped, {rewrite.target} not present")
            continue
        try:
            original = read_text(target)
            updated = rewrite.apply(original)
            if updated != original:
                write_text(target, updated)
        except (OSError, UnicodeDecodeError) as e:
            raise MaterializeError("rewrite", target, e)
        logger.debug(f"Rewrote {rewrite.target}")


def _write_gitignore(plan: MaterializationPlan, destination_root: Path) -> None:
    if not plan.ignore_seed:
        return
    seed = plan.copy_source_root / plan.ignore_seed
    target = destination_root / ".gitignore"
    try:
        if not copy_if_exists(seed, target):
            logger.debug(f"No {plan.ignore_seed} seed in template, .gitignore not written")
    except OSError as e:
        raise MaterializeError("gitignore", target, e)


def _write_env(plan: MaterializationPlan, destination_root: Path) -> None:
    if plan.env_seed is None:
        return
    target = destination_root / ".env"
    try:
        write_text(target, plan.env_seed)
    except OSError as e:
        raise MaterializeError("env", target, e)


def materialize(plan: MaterializationPlan, destination_root: Path) -> None:
    """
    Materialize ``plan`` into ``destination_root``.

    Args:
        plan: Resolved plan from ``resolve``
        destination_root: Empty or non-existent directory

    Raises:
        DestinationNotEmpty: Destination has entries; nothing was written
        CopyFailed: Bulk copy or a variant swap failed
        RewriteMismatch: A rewrite token was not found exactly once
        MaterializeError: Any other step failed
    """
    destination_root = Path(destination_root)
    _prepare_destination(destination_root)

    logger.info(f"Materializing {plan.copy_source_root.name} template into {destination_root}")
    _copy_template(plan, destination_root)
    _apply_swaps(plan, destination_root)
    _apply_deletions(plan, destination_root)
    _apply_rewrites(plan, destination_root)
    _write_gitignore(plan, destination_root)
    _write_env(plan, destination_root)
    logger.info(f"Materialized {destination_root}")
