from __future__ import annotations

"""
Option and Route-Data Validation.

Gatekeeper for the generator. Both validators fail fast: the first
violation found raises, nothing is aggregated, and no filesystem work has
started when they raise.
"""

import logging
from typing import Any, Mapping, Optional, Sequence

from routegen.domain.errors import OptionsValidationError, RouteDataError
from routegen.domain.options import (
    ALIAS_KEYS,
    BOOL_KEYS,
    CSS_COMPILERS,
    FILE_SUFFIXES,
    GenerationOptions,
    get_default_options,
    is_vue_suffix,
)

logger = logging.getLogger(__name__)

_MISSING = object()


# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def validate_options(raw: Optional[Mapping[str, Any]]) -> GenerationOptions:
    """
    Validate caller-supplied options and merge them over the defaults.

    Keys are checked in mapping iteration order and the first violation
    raises. Keys unknown to the defaults are accepted and carried along.

    Args:
        raw: Caller options (camelCase keys) or None for pure defaults.

    Returns:
        GenerationOptions: Immutable options for a single call.

    Raises:
        OptionsValidationError: On the first invalid key.
    """
    merged = get_default_options()
    if raw is None:
        return GenerationOptions.from_mapping(merged)

    if not isinstance(raw, Mapping):
        raise OptionsValidationError(
            "options",
            f"options type error, mapping required, received {type(raw).__name__}",
        )

    suffix = raw.get("fileSuffix", merged["fileSuffix"])

    for key, value in raw.items():
        _check_option(key, value, suffix)
        merged[key] = value

    logger.debug(f"Options validated: {sorted(raw)}")
    return GenerationOptions.from_mapping(merged)


def validate_routes(nodes: Any, options: GenerationOptions) -> None:
    """
    Check that the route array can be read with the configured aliases.

    Only the first element is sampled, and only aliases that differ from
    the default field names are checked.

    Args:
        nodes: Route array supplied by the caller.
        options: Validated generation options.

    Raises:
        RouteDataError: If the array is empty or an alias cannot be read.
    """
    if not isinstance(nodes, Sequence) or isinstance(nodes, (str, bytes)) or not nodes:
        raise RouteDataError("route array must not be empty")

    sample = nodes[0]
    defaults = get_default_options()
    configured = {
        "name": options.name_field,
        "path": options.path_field,
        "children": options.children_field,
    }

    for key in ALIAS_KEYS:
        alias = configured[key]
        if alias == defaults[key]:
            continue
        if not has_field(sample, alias):
            raise RouteDataError(
                f"cannot read configured {key} alias \"{alias}\" from the route array, "
                f"check that the field exists on the route entries"
            )


def has_field(node: Any, field_name: str) -> bool:
    """True if the node defines the field (mapping key or attribute)."""
    if isinstance(node, Mapping):
        return field_name in node
    return getattr(node, field_name, _MISSING) is not _MISSING


def get_field(node: Any, field_name: str, default: Any = None) -> Any:
    """Read a field from a mapping-shaped or attribute-shaped node."""
    if isinstance(node, Mapping):
        return node.get(field_name, default)
    return getattr(node, field_name, default)


# -----------------------------------------------------------------------------
# PRIVATE HELPERS
# -----------------------------------------------------------------------------

def _check_option(key: str, value: Any, suffix: Any) -> None:
    """Raise for the first rule the key violates."""
    if key in ALIAS_KEYS and not isinstance(value, str):
        raise OptionsValidationError(key, f"field '{key}' type error, string required")

    if key in BOOL_KEYS and not isinstance(value, bool):
        raise OptionsValidationError(key, f"field '{key}' type error, boolean required")

    if key == "isVue3":
        if is_vue_suffix(suffix) and not isinstance(value, bool):
            raise OptionsValidationError(key, f"field '{key}' type error, boolean required")

    elif key == "fileSuffix":
        if not isinstance(value, str) or value not in FILE_SUFFIXES:
            allowed = "|".join(FILE_SUFFIXES)
            raise OptionsValidationError(
                key, f"field '{key}' value error, only ({allowed}) supported"
            )

    elif key == "cssCompiler":
        if is_vue_suffix(suffix) and value not in CSS_COMPILERS:
            allowed = "|".join(CSS_COMPILERS)
            raise OptionsValidationError(
                key, f"field '{key}' value error, only ({allowed}) supported"
            )
