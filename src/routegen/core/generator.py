from __future__ import annotations

"""
Core generation entry point.

Coordinates a full run:
1. Validates options and the shape of the route array (raises).
2. Resolves the output root.
3. Plans every file target from the route tree.
4. Creates the output root, then materializes all targets and waits for them.
5. Returns the aggregated per-target outcomes.
"""

import logging
from typing import Any, Mapping, Optional, Sequence

from routegen.core.materializer import materialize, plan_routes
from routegen.core.validator import validate_options, validate_routes
from routegen.domain.result_models import GenerationResult
from routegen.infra.fs import ensure_directory, resolve_output_root

logger = logging.getLogger(__name__)


def generate(
        output_folder: str,
        nodes: Sequence[Any],
        options: Optional[Mapping[str, Any]] = None,
        *,
        root: Optional[str] = None,
        dry_run: bool = False,
        max_workers: Optional[int] = None,
) -> GenerationResult:
    """
    Generate one component stub per route node under the output folder.

    Existing files are never overwritten. Validation errors are raised
    before anything touches the disk; filesystem errors are reported in the
    result.

    Args:
        output_folder: Target directory, relative folders are anchored at root.
        nodes: Ordered route tree.
        options: Caller overrides of the default options (camelCase keys).
        root: Anchor for a relative output folder (default: working directory).
        dry_run: Plan and report without writing.
        max_workers: Thread pool size used for file creation.

    Returns:
        GenerationResult: Output root and per-target outcomes.

    Raises:
        OptionsValidationError: If an option is invalid.
        RouteDataError: If the route array is empty or unreadable.
    """
    opts = validate_options(options)
    validate_routes(nodes, opts)

    output_root = resolve_output_root(output_folder, root)
    entries = plan_routes(nodes, opts, output_root)
    logger.debug(f"Planned {len(entries)} targets under {output_root}")

    if dry_run:
        logger.info("Dry run: no directories or files will be written.")
    else:
        try:
            ensure_directory(output_root)
        except OSError as e:
            logger.error(f"Failed to create output root {output_root}: {e}")

    outcomes = materialize(entries, dry_run=dry_run, max_workers=max_workers)
    result = GenerationResult(output_root=output_root, outcomes=outcomes, dry_run=dry_run)

    counts = result.summary()
    logger.info(
        f"Generation finished: {counts['created']} created, "
        f"{counts['skipped']} skipped, {counts['failed']} failed."
    )
    return result
