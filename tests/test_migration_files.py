from pathlib import Path

import pytest

from mongr8.migration_files import migration_var_names, next_suffix


def _project(root: Path, files: dict[str, str]) -> Path:
    (root / "go.mod").write_text("module example\n")
    directory = root / "mongr8" / "migration"
    directory.mkdir(parents=True)
    for name, content in files.items():
        (directory / name).write_text(content)
    return root


def test_var_names_from_versioned_files(tmp_path):
    root = _project(
        tmp_path,
        {
            "20240101_120000.go": "package migration\nvar Migration1 = x\n",
            "20240102_120000.go": "package migration\nvar Migration2 = x\n",
        },
    )
    assert migration_var_names(root) == ["Migration1", "Migration2"]


def test_unversioned_and_unmatched_files_are_skipped(tmp_path):
    root = _project(
        tmp_path,
        {
            "base.go": "var Migration9 = x\n",
            "20240101_120000.go": "package migration\n",
            "20240103_090000.go": "var Migration4 = x\n",
            "20240104_090000.txt": "var Migration5 = x\n",
        },
    )
    assert migration_var_names(root) == ["Migration4"]


def test_missing_directory_gives_no_names(tmp_path):
    (tmp_path / "go.mod").write_text("module example\n")
    assert migration_var_names(tmp_path) == []
    assert next_suffix(tmp_path) == 1


def test_next_suffix_is_past_the_highest(tmp_path):
    root = _project(
        tmp_path,
        {
            "20240101_120000.go": "var Migration3 = x\n",
            "20240102_120000.go": "var Migration7 = x\n",
        },
    )
    names = migration_var_names(root)
    highest = max(int(name[len("Migration"):]) for name in names)
    assert next_suffix(root) == highest + 1
    assert next_suffix(root) > 7


def test_default_root_is_the_project_root(tmp_path, monkeypatch):
    root = _project(tmp_path, {"20240101_120000.go": "var Migration2 = x\n"})
    nested = root / "mongr8" / "migration"
    monkeypatch.chdir(nested)
    assert migration_var_names() == ["Migration2"]
    assert next_suffix() == 3


def test_no_project_root_raises(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    with pytest.raises(FileNotFoundError):
        migration_var_names()