from __future__ import annotations

"""
Unit tests for CLI argument parsing and mapping logic.
"""

import pytest

from routegen.interface.cli.args import args_to_overrides, build_parser


def parse_args(arg_list):
    """Helper to simulate CLI argument parsing."""
    return build_parser().parse_args(arg_list)


def test_defaults_are_not_in_overrides() -> None:
    """Flags not given must not shadow the options file or the defaults."""
    args = parse_args(["routes.json", "-o", "views"])

    assert args.routes_file == "routes.json"
    assert args.output_folder == "views"
    assert args_to_overrides(args) == {}


def test_flags_mapping() -> None:
    args = parse_args([
        "routes.json", "-o", "views",
        "--suffix", ".vue",
        "--vue3",
        "--css", "less",
        "--no-typescript",
        "--index",
        "--parent-folder",
    ])

    assert args_to_overrides(args) == {
        "fileSuffix": ".vue",
        "isVue3": True,
        "cssCompiler": "less",
        "isTypeScript": False,
        "isIndex": True,
        "parentFolder": True,
    }


def test_alias_mapping() -> None:
    args = parse_args([
        "routes.json", "-o", "views",
        "--name-field", "title",
        "--path-field", "url",
        "--children-field", "routes",
    ])

    assert args_to_overrides(args) == {"name": "title", "path": "url", "children": "routes"}


def test_invalid_choices_exit() -> None:
    with pytest.raises(SystemExit):
        parse_args(["routes.json", "-o", "views", "--suffix", "svelte"])
    with pytest.raises(SystemExit):
        parse_args(["routes.json", "-o", "views", "--css", "sass"])


def test_output_is_required() -> None:
    with pytest.raises(SystemExit):
        parse_args(["routes.json"])
