from __future__ import annotations

"""
Route and Option Document Loaders.

Reads the route tree and option overrides consumed by the CLI. Documents are
JSON, or YAML when the file extension is '.yml' / '.yaml'.
"""

import json
import logging
import os
from typing import Any, Dict, List

import yaml

from routegen.domain.errors import RouteFileError

logger = logging.getLogger(__name__)

YAML_EXTENSIONS = (".yml", ".yaml")


def load_document(path: str) -> Any:
    """
    Parse a JSON or YAML document from disk.

    Raises:
        RouteFileError: If the file is missing or cannot be parsed.
    """
    if not os.path.isfile(path):
        raise RouteFileError(f"File not found: {path}")

    try:
        with open(path, "r", encoding="utf-8") as f:
            if path.lower().endswith(YAML_EXTENSIONS):
                data = yaml.safe_load(f)
            else:
                data = json.load(f)
    except (OSError, ValueError, yaml.YAMLError) as e:
        raise RouteFileError(f"Cannot parse {path}: {e}") from e

    logger.debug(f"Loaded document {path}")
    return data


def load_routes(path: str) -> List[Any]:
    """
    Load a route tree: either a top-level list or a mapping with 'routes'.
    """
    data = load_document(path)
    if isinstance(data, list):
        return data
    if isinstance(data, dict) and isinstance(data.get("routes"), list):
        return list(data["routes"])
    raise RouteFileError(f"Routes file must be a list or include 'routes': {path}")


def load_options(path: str) -> Dict[str, Any]:
    """Load option overrides, which must form a mapping."""
    data = load_document(path)
    if data is None:
        return {}
    if isinstance(data, dict):
        return data
    raise RouteFileError(f"Options file must be a mapping: {path}")
