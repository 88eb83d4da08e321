"""routegen: scaffold component stub files from a nested route configuration."""

from routegen.core.generator import generate
from routegen.domain.errors import (
    OptionsValidationError,
    RouteDataError,
    RouteFileError,
    RouteGenError,
)
from routegen.domain.options import GenerationOptions, get_default_options
from routegen.domain.result_models import GenerationResult, NodeOutcome, OutcomeStatus

__version__ = "0.1.0"

__all__ = [
    "generate",
    "GenerationOptions",
    "GenerationResult",
    "NodeOutcome",
    "OutcomeStatus",
    "OptionsValidationError",
    "RouteDataError",
    "RouteFileError",
    "RouteGenError",
    "get_default_options",
]
