from __future__ import annotations

import os
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable

__all__: list[str] = [
    "FileMissingError",
    "FileUtils",
    "FileUtilsError",
    "UnsupportedFileFormatError",
]


class FileUtils:
    """Path helpers for configuration-supplied files."""

    @staticmethod
    def resolve_path(path: str | Path, *, strict: bool = False) -> Path:
        """Convert a user-input path to an absolute path.

        Expands environment variables (e.g., $HOME, %APPDATA%) and ~, and resolves relative paths
        against the current working directory.

        Args:
            path (str | Path): The input path (e.g., "~/dic/$LANG_PACK/phrases.json").
            strict (bool): Whether to raise an exception if the path does not exist. Defaults to False.

        Returns:
            Path: The absolute path.
        """
        user_expanded: Path = Path(os.path.expandvars(str(path))).expanduser()
        if not user_expanded.is_absolute():
            user_expanded = Path.cwd() / user_expanded
        return user_expanded.resolve(strict=strict)

    @staticmethod
    def validate_file_path(file_path: Path, suffix: list[str] | str) -> None:
        """Validate that a file exists and has an allowed suffix.

        Args:
            file_path (Path): The path to the file to validate.
            suffix (list[str] | str): Allowed file suffix(es), e.g. ".json".

        Raises:
            FileMissingError: If the file does not exist.
            UnsupportedFileFormatError: If the file's suffix is not in the allowed list.
        """
        suffixes: list[str] = [suffix] if isinstance(suffix, str) else suffix
        if not file_path.is_file():
            msg = f"File does not exist: {file_path}"
            raise FileMissingError(msg)
        if file_path.suffix.lower() not in [s.lower() for s in suffixes]:
            msg = f"Unsupported file format: '{file_path.suffix}'. Supported formats are: {', '.join(suffixes)}"
            raise UnsupportedFileFormatError(msg)

    @staticmethod
    def resolve_files(directory: str | Path, names: Iterable[str], suffix: list[str] | str) -> list[Path]:
        """Resolve file names against a directory and validate each of them.

        Args:
            directory (str | Path): Base directory. Empty means the current working directory.
            names (Iterable[str]): File names, relative to directory or absolute.
            suffix (list[str] | str): Allowed file suffix(es).

        Returns:
            list[Path]: Absolute paths in the given order.

        Raises:
            FileMissingError: If a file does not exist.
            UnsupportedFileFormatError: If a file has an unsupported suffix.
        """
        base: Path = FileUtils.resolve_path(directory or ".")
        paths: list[Path] = []
        for name in names:
            path: Path = FileUtils.resolve_path(base / os.path.expandvars(name))
            FileUtils.validate_file_path(path, suffix)
            paths.append(path)
        return paths


class FileUtilsError(Exception):
    """Custom exception for FileUtils-related errors."""


class FileMissingError(FileUtilsError):
    """Custom exception for file missing errors."""


class UnsupportedFileFormatError(FileUtilsError):
    """Custom exception for unsupported file format errors."""
