from __future__ import annotations

"""
Generation Result Data Models.

Defines the per-node outcome records and the aggregated result returned by
the generator, so callers see the true end state of the tree instead of
console notices.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List

# -----------------------------------------------------------------------------
# CORE DATA MODELS
# -----------------------------------------------------------------------------

class OutcomeStatus(str, Enum):
    """Final state of a single file target."""
    CREATED = "created"
    SKIPPED = "skipped"
    FAILED = "failed"
    PLANNED = "planned"


@dataclass(frozen=True)
class FileTask:
    """
    A single planned file write produced by the tree walk.

    Attributes:
        directory: Absolute directory that must exist before writing.
        file_path: Absolute path of the stub file.
        content: Rendered template body.
        display_name: Name substituted into the template.
    """
    directory: str
    file_path: str
    content: str
    display_name: str


@dataclass(frozen=True)
class NodeOutcome:
    """
    Result of materializing one file target.

    Attributes:
        file_path: Absolute path of the target file.
        status: Created, skipped, failed or (dry-run only) planned.
        display_name: Name of the route node the file belongs to.
        reason: Human-readable detail for skipped and failed targets.
    """
    file_path: str
    status: OutcomeStatus
    display_name: str = ""
    reason: str = ""

    def to_dict(self) -> Dict[str, Any]:
        return {
            "file_path": self.file_path,
            "status": self.status.value,
            "display_name": self.display_name,
            "reason": self.reason,
        }


@dataclass(frozen=True)
class GenerationResult:
    """
    Aggregated outcome of a generate() call.

    Attributes:
        output_root: Absolute root directory of the generated tree.
        outcomes: Per-target outcomes, in planning order.
        dry_run: True if nothing was written to disk.
    """
    output_root: str
    outcomes: List[NodeOutcome] = field(default_factory=list)
    dry_run: bool = False

    def _with_status(self, status: OutcomeStatus) -> List[NodeOutcome]:
        return [o for o in self.outcomes if o.status is status]

    @property
    def created(self) -> List[NodeOutcome]:
        return self._with_status(OutcomeStatus.CREATED)

    @property
    def skipped(self) -> List[NodeOutcome]:
        return self._with_status(OutcomeStatus.SKIPPED)

    @property
    def failed(self) -> List[NodeOutcome]:
        return self._with_status(OutcomeStatus.FAILED)

    @property
    def planned(self) -> List[NodeOutcome]:
        return self._with_status(OutcomeStatus.PLANNED)

    @property
    def ok(self) -> bool:
        """True when no target failed."""
        return not self.failed

    def summary(self) -> Dict[str, int]:
        return {
            "created": len(self.created),
            "skipped": len(self.skipped),
            "failed": len(self.failed),
            "planned": len(self.planned),
        }

    def to_dict(self) -> Dict[str, Any]:
        return {
            "ok": self.ok,
            "output_root": self.output_root,
            "dry_run": self.dry_run,
            "summary": self.summary(),
            "outcomes": [o.to_dict() for o in self.outcomes],
        }
