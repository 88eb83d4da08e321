from __future__ import annotations

"""
Global Pytest Configuration and Fixtures.

1. Puts the 'src' directory on sys.path so the package is importable
   without installation.
2. Provides shared route trees used across unit and integration tests.
"""

import os
import sys
from typing import Any, Dict, List

import pytest

# -----------------------------------------------------------------------------
# Path Configuration
# -----------------------------------------------------------------------------
_SRC_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))
if _SRC_PATH not in sys.path:
    sys.path.insert(0, _SRC_PATH)


# -----------------------------------------------------------------------------
# Shared Fixtures
# -----------------------------------------------------------------------------
@pytest.fixture
def flat_routes() -> List[Dict[str, Any]]:
    """Two leaf routes, one without a name."""
    return [
        {"name": "Home", "path": "home"},
        {"path": "about"},
    ]


@pytest.fixture
def nested_routes() -> List[Dict[str, Any]]:
    """
    Return a two-level route tree.

    admin
      users
      settings/profile
    """
    return [
        {
            "name": "Admin",
            "path": "admin",
            "children": [
                {"name": "Users", "path": "users"},
                {"name": "Profile", "path": "settings/profile"},
            ],
        },
    ]
