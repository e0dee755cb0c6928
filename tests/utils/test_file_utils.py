from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from utils.file_utils import FileMissingError, FileUtils, UnsupportedFileFormatError

if TYPE_CHECKING:
    from pathlib import Path


def test_resolve_path_expands_environment_variables(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("SB_DIC", str(tmp_path))

    assert FileUtils.resolve_path("$SB_DIC/phrases.json") == (tmp_path / "phrases.json").resolve()


def test_resolve_path_makes_relative_paths_absolute(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.chdir(tmp_path)

    assert FileUtils.resolve_path("dic/phrases.json") == (tmp_path / "dic" / "phrases.json").resolve()


def test_resolve_files_validates_each_file(tmp_path: Path) -> None:
    (tmp_path / "a.json").write_text("{}", encoding="utf-8")
    (tmp_path / "b.JSON").write_text("{}", encoding="utf-8")

    paths: list[Path] = FileUtils.resolve_files(tmp_path, ["a.json", "b.JSON"], ".json")

    assert [path.name for path in paths] == ["a.json", "b.JSON"]


def test_resolve_files_raises_for_missing_file(tmp_path: Path) -> None:
    with pytest.raises(FileMissingError):
        FileUtils.resolve_files(tmp_path, ["missing.json"], ".json")


def test_resolve_files_raises_for_wrong_suffix(tmp_path: Path) -> None:
    (tmp_path / "phrases.txt").write_text("", encoding="utf-8")

    with pytest.raises(UnsupportedFileFormatError):
        FileUtils.resolve_files(tmp_path, ["phrases.txt"], ".json")
