from __future__ import annotations

"""
Tree Materializer.

Turns a route tree into stub files in two phases:
1. Planning: a synchronous, side-effect free walk that derives the path
   segments, target directory, target file and rendered content per node.
2. Execution: every planned file is created on a thread pool and all
   futures are awaited before returning, so the returned outcomes describe
   the final state of the tree.
"""

import logging
import os
from concurrent.futures import ThreadPoolExecutor
from typing import Any, Dict, List, Optional, Sequence, Union

from routegen.core.validator import get_field
from routegen.domain.options import GenerationOptions
from routegen.domain.result_models import FileTask, NodeOutcome, OutcomeStatus
from routegen.domain.templates import render, select_template
from routegen.infra.fs import ensure_directory, ensure_file, join_segments

logger = logging.getLogger(__name__)

PlanEntry = Union[FileTask, NodeOutcome]

DEFAULT_MAX_WORKERS = 4


# -----------------------------------------------------------------------------
# PLANNING
# -----------------------------------------------------------------------------

RELATIVE_SEGMENTS = (".", "..")


def split_path(raw_path: Any) -> List[str]:
    """Split a route path on '/', dropping empty segments."""
    if not isinstance(raw_path, str):
        return []
    return [segment for segment in raw_path.split("/") if segment]


def plan_routes(
        nodes: Sequence[Any],
        options: GenerationOptions,
        output_root: str,
) -> List[PlanEntry]:
    """
    Walk the route tree and plan one file write per emitted target.

    Children are planned before their parent and are rooted under the
    parent's own path segments. A parent emits its own file only when
    'parentFolder' is enabled. In index mode every directory along a node's
    path receives an 'index.<ext>' file with that node's content.

    Args:
        nodes: Ordered route nodes (mappings or objects).
        options: Validated generation options.
        output_root: Absolute output root.

    Returns:
        List[PlanEntry]: FileTasks, plus failed NodeOutcomes for nodes whose
                         path yields no segment or holds '.' / '..'.

    Raises:
        OptionsValidationError: If the file suffix has no template.
    """
    template = select_template(options)
    entries: List[PlanEntry] = []
    _walk(nodes, [], options, template, output_root, entries)
    return entries


def _walk(
        nodes: Sequence[Any],
        parent_segments: List[str],
        options: GenerationOptions,
        template: str,
        output_root: str,
        entries: List[PlanEntry],
) -> None:
    for node in nodes:
        own_segments = split_path(get_field(node, options.path_field))

        children = get_field(node, options.children_field)
        has_children = (
            isinstance(children, Sequence)
            and not isinstance(children, str)
            and len(children) > 0
        )
        if has_children:
            _walk(children, own_segments, options, template, output_root, entries)

        if has_children and not options.parent_folder:
            continue

        segments = parent_segments + own_segments
        name = get_field(node, options.name_field)

        if not own_segments:
            display = str(name) if name else ""
            logger.error(f"Route '{display}' has no usable path, nothing generated.")
            entries.append(NodeOutcome(
                file_path=join_segments(output_root, segments),
                status=OutcomeStatus.FAILED,
                display_name=display,
                reason="route path is empty",
            ))
            continue

        if any(segment in RELATIVE_SEGMENTS for segment in segments):
            display = str(name) if name else own_segments[-1]
            logger.error(f"Route '{display}' uses '.' or '..' segments, nothing generated.")
            entries.append(NodeOutcome(
                file_path=join_segments(output_root, segments),
                status=OutcomeStatus.FAILED,
                display_name=display,
                reason="route path contains '.' or '..' segments",
            ))
            continue

        display = str(name) if name else segments[-1]
        content = render(template, display)

        if options.is_index:
            for depth in range(1, len(segments) + 1):
                directory = join_segments(output_root, segments[:depth])
                entries.append(FileTask(
                    directory=directory,
                    file_path=os.path.join(directory, "index" + options.extension),
                    content=content,
                    display_name=display,
                ))
        else:
            directory = join_segments(output_root, segments[:-1])
            entries.append(FileTask(
                directory=directory,
                file_path=os.path.join(directory, segments[-1] + options.extension),
                content=content,
                display_name=display,
            ))


# -----------------------------------------------------------------------------
# EXECUTION
# -----------------------------------------------------------------------------

def materialize(
        entries: Sequence[PlanEntry],
        *,
        dry_run: bool = False,
        max_workers: Optional[int] = None,
) -> List[NodeOutcome]:
    """
    Execute planned file writes and collect their outcomes in plan order.

    The first task targeting a given file wins; later ones are reported as
    skipped. Filesystem errors never propagate, they become failed outcomes.

    Args:
        entries: Output of plan_routes().
        dry_run: Report every task as planned without touching disk.
        max_workers: Thread pool size.

    Returns:
        List[NodeOutcome]: One outcome per entry.
    """
    outcomes: List[Optional[NodeOutcome]] = [None] * len(entries)
    pending: Dict[int, FileTask] = {}
    seen: set = set()

    for index, entry in enumerate(entries):
        if isinstance(entry, NodeOutcome):
            outcomes[index] = entry
        elif entry.file_path in seen:
            outcomes[index] = NodeOutcome(
                file_path=entry.file_path,
                status=OutcomeStatus.SKIPPED,
                display_name=entry.display_name,
                reason="duplicate target in this run",
            )
        elif dry_run:
            seen.add(entry.file_path)
            outcomes[index] = NodeOutcome(
                file_path=entry.file_path,
                status=OutcomeStatus.PLANNED,
                display_name=entry.display_name,
            )
        else:
            seen.add(entry.file_path)
            pending[index] = entry

    if pending:
        workers = max_workers or DEFAULT_MAX_WORKERS
        with ThreadPoolExecutor(max_workers=workers, thread_name_prefix="RouteGen") as executor:
            futures = {index: executor.submit(_run_task, task) for index, task in pending.items()}
            for index, future in futures.items():
                outcomes[index] = future.result()

    return [outcome for outcome in outcomes if outcome is not None]


def _run_task(task: FileTask) -> NodeOutcome:
    """
    Create the directory, then the file, downgrading errors to an outcome.

    ValueError covers paths with NUL bytes and content that cannot be
    encoded as UTF-8.
    """
    try:
        ensure_directory(task.directory)
    except (OSError, ValueError) as e:
        logger.error(f"Failed to create directory {task.directory}: {e}")
        return NodeOutcome(task.file_path, OutcomeStatus.FAILED, task.display_name, str(e))

    try:
        created = ensure_file(task.file_path, task.content)
    except (OSError, ValueError) as e:
        logger.error(f"Failed to create file {task.file_path}: {e}")
        return NodeOutcome(task.file_path, OutcomeStatus.FAILED, task.display_name, str(e))

    if not created:
        logger.warning(f"File already exists, skipped: {task.file_path}")
        return NodeOutcome(
            task.file_path, OutcomeStatus.SKIPPED, task.display_name, "file already exists"
        )

    logger.info(f"Created {task.file_path}")
    return NodeOutcome(task.file_path, OutcomeStatus.CREATED, task.display_name)
