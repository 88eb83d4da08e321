from __future__ import annotations

"""
Integration tests for generate().

Runs the full validate -> plan -> materialize flow against a temporary
directory and checks the files on disk.
"""

import os
from pathlib import Path
from unittest.mock import patch

import pytest

from routegen import OptionsValidationError, OutcomeStatus, RouteDataError, generate


def _read(path: Path) -> str:
    return path.read_text(encoding="utf-8")


def test_home_scenario(tmp_path: Path) -> None:
    """A single named leaf produces home.vue at the output root."""
    result = generate("views", [{"name": "Home", "path": "home"}], root=str(tmp_path))

    target = tmp_path / "views" / "home.vue"
    assert target.is_file()
    assert "<h1>Home</h1>" in _read(target)
    assert result.ok is True
    assert result.output_root == str(tmp_path / "views")
    assert [o.status for o in result.outcomes] == [OutcomeStatus.CREATED]


def test_admin_scenario_without_parent_folder(tmp_path: Path) -> None:
    routes = [{"name": "Admin", "path": "admin", "children": [{"name": "Users", "path": "users"}]}]

    generate(str(tmp_path), routes)

    assert (tmp_path / "admin" / "users.vue").is_file()
    assert not (tmp_path / "admin.vue").exists()


def test_admin_scenario_with_parent_folder(tmp_path: Path) -> None:
    routes = [{"name": "Admin", "path": "admin", "children": [{"name": "Users", "path": "users"}]}]

    generate(str(tmp_path), routes, {"parentFolder": True})

    assert (tmp_path / "admin" / "users.vue").is_file()
    assert "<h1>Admin</h1>" in _read(tmp_path / "admin.vue")


def test_nested_path_segments(tmp_path: Path, nested_routes) -> None:
    result = generate(str(tmp_path), nested_routes)

    assert (tmp_path / "admin" / "settings" / "profile.vue").is_file()
    assert len(result.created) == 2


def test_second_run_is_idempotent(tmp_path: Path, nested_routes) -> None:
    opts = {"parentFolder": True, "isVue3": True}
    generate(str(tmp_path), nested_routes, opts)
    before = {p: _read(p) for p in tmp_path.rglob("*.vue")}

    result = generate(str(tmp_path), nested_routes, opts)

    after = {p: _read(p) for p in tmp_path.rglob("*.vue")}
    assert before == after
    assert result.created == []
    assert len(result.skipped) == 3
    assert result.ok is True


def test_existing_file_is_never_overwritten(tmp_path: Path) -> None:
    (tmp_path / "home.vue").write_text("hand written", encoding="utf-8")

    result = generate(str(tmp_path), [{"name": "Home", "path": "home"}])

    assert _read(tmp_path / "home.vue") == "hand written"
    assert result.skipped[0].reason == "file already exists"


def test_index_mode_files(tmp_path: Path, nested_routes) -> None:
    result = generate(str(tmp_path), nested_routes, {"isIndex": True, "fileSuffix": "jsx"})

    for rel in ("admin", "admin/users", "admin/settings", "admin/settings/profile"):
        assert (tmp_path / rel / "index.jsx").is_file()
    # First planned writer of admin/index.jsx is the Users route
    assert "const Users" in _read(tmp_path / "admin" / "index.jsx")
    assert len(result.created) == 4
    assert len(result.skipped) == 1


def test_vue3_typescript_toggle(tmp_path: Path) -> None:
    generate(str(tmp_path / "ts"), [{"path": "a"}], {"isVue3": True})
    generate(str(tmp_path / "js"), [{"path": "a"}], {"isVue3": True, "isTypeScript": False})

    assert _read(tmp_path / "ts" / "a.vue").startswith('<script lang="ts">')
    assert 'lang="ts"' not in _read(tmp_path / "js" / "a.vue")


def test_validation_errors_raise_before_writing(tmp_path: Path) -> None:
    out = tmp_path / "out"

    with pytest.raises(OptionsValidationError):
        generate(str(out), [{"path": "home"}], {"fileSuffix": "html"})
    with pytest.raises(OptionsValidationError, match="css"):
        generate(str(out), [{"path": "home"}], {"fileSuffix": "vue", "cssCompiler": "sass"})
    with pytest.raises(RouteDataError):
        generate(str(out), [])

    assert not out.exists()


def test_options_do_not_leak_between_calls(tmp_path: Path) -> None:
    generate(str(tmp_path / "one"), [{"path": "page"}], {"fileSuffix": "tsx"})
    generate(str(tmp_path / "two"), [{"path": "page"}])

    assert (tmp_path / "one" / "page.tsx").is_file()
    assert (tmp_path / "two" / "page.vue").is_file()


def test_dry_run_writes_nothing(tmp_path: Path, nested_routes) -> None:
    out = tmp_path / "preview"

    result = generate(str(out), nested_routes, dry_run=True)

    assert not out.exists()
    assert result.dry_run is True
    assert len(result.planned) == 2


def test_file_errors_are_reported_not_raised(tmp_path: Path, caplog) -> None:
    with patch("routegen.core.materializer.ensure_file", side_effect=PermissionError("denied")):
        result = generate(str(tmp_path), [{"path": "home"}, {"path": "about"}])

    assert result.ok is False
    assert len(result.failed) == 2
    assert result.failed[0].reason == "denied"
    assert "Failed to create file" in caplog.text


def test_directory_blocked_by_file(tmp_path: Path) -> None:
    """A file where a directory is needed fails that node only."""
    (tmp_path / "admin").write_text("", encoding="utf-8")
    routes = [
        {"path": "admin", "children": [{"path": "users"}]},
        {"path": "home"},
    ]

    result = generate(str(tmp_path), routes)

    assert [os.path.basename(o.file_path) for o in result.failed] == ["users.vue"]
    assert (tmp_path / "home.vue").is_file()


def test_unencodable_name_fails_without_leaving_a_file(tmp_path: Path) -> None:
    routes = [{"name": "Bad\ud800", "path": "bad"}, {"path": "good"}]

    result = generate(str(tmp_path), routes)

    assert result.ok is False
    assert [os.path.basename(o.file_path) for o in result.failed] == ["bad.vue"]
    assert (tmp_path / "good.vue").is_file()
    assert not (tmp_path / "bad.vue").exists()

    rerun = generate(str(tmp_path), [{"name": "Bad", "path": "bad"}])

    assert [o.status for o in rerun.outcomes] == [OutcomeStatus.CREATED]
    assert "<h1>Bad</h1>" in _read(tmp_path / "bad.vue")


def test_nul_byte_in_path_fails_that_node_only(tmp_path: Path) -> None:
    routes = [{"path": "a\x00b/c"}, {"path": "good"}]

    result = generate(str(tmp_path), routes)

    assert len(result.failed) == 1
    assert os.path.basename(result.failed[0].file_path) == "c.vue"
    assert (tmp_path / "good.vue").is_file()


def test_paths_cannot_leave_the_output_root(tmp_path: Path) -> None:
    out = tmp_path / "a" / "b"
    routes = [{"name": "Escaped", "path": "../../escaped"}, {"path": "home"}]

    result = generate(str(out), routes)

    assert [o.display_name for o in result.failed] == ["Escaped"]
    assert (out / "home.vue").is_file()
    assert not (tmp_path / "escaped.vue").exists()
    assert [p.name for p in tmp_path.rglob("*.vue")] == ["home.vue"]
