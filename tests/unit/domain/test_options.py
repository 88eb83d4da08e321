from __future__ import annotations

"""
Unit tests for the GenerationOptions model.
"""

import dataclasses

import pytest

from routegen.domain.options import (
    GenerationOptions,
    get_default_options,
    is_vue_suffix,
    normalize_suffix,
)


def test_default_options_values() -> None:
    defaults = get_default_options()

    assert defaults["name"] == "name"
    assert defaults["path"] == "path"
    assert defaults["children"] == "children"
    assert defaults["parentFolder"] is False
    assert defaults["fileSuffix"] == "vue"
    assert defaults["isVue3"] is False
    assert defaults["cssCompiler"] == "css"
    assert defaults["isTypeScript"] is True
    assert defaults["isIndex"] is False


def test_default_options_are_fresh_copies() -> None:
    """Mutating one copy must not leak into the next call."""
    first = get_default_options()
    first["fileSuffix"] = "tsx"

    assert get_default_options()["fileSuffix"] == "vue"


def test_from_mapping_keeps_unknown_keys_as_extras() -> None:
    merged = get_default_options()
    merged.update({"fileSuffix": ".tsx", "banner": "generated"})

    opts = GenerationOptions.from_mapping(merged)

    assert opts.file_suffix == ".tsx"
    assert opts.extension == ".tsx"
    assert opts.extras == {"banner": "generated"}
    assert opts.to_dict()["banner"] == "generated"


def test_options_are_immutable() -> None:
    opts = GenerationOptions()
    with pytest.raises(dataclasses.FrozenInstanceError):
        opts.file_suffix = "jsx"  # type: ignore[misc]


def test_suffix_helpers() -> None:
    assert normalize_suffix(".vue") == "vue"
    assert normalize_suffix("jsx") == "jsx"
    assert is_vue_suffix(".vue") is True
    assert is_vue_suffix("tsx") is False
    assert is_vue_suffix(None) is False
