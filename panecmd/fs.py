"""Filesystem access used by panes and built-in commands.

Every operation raises :class:`OSError` on failure; callers decide how to
degrade (empty pane, one error line). Paths are plain strings resolved
against an explicit base directory, never the process working directory.
"""

from __future__ import annotations

import os
import shutil
from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class Entry:
    """One directory child as listed."""

    name: str
    is_dir: bool
    size: int | None = None

    @property
    def display_name(self) -> str:
        return f"{self.name}/" if self.is_dir else self.name


def join_path(base: str, name: str) -> str:
    """Resolve ``name`` against ``base`` and normalize ``.``/``..`` lexically.

    Absolute ``name`` values ignore ``base``.
    """
    return os.path.normpath(os.path.join(base, name))


def parent_path(path: str) -> str:
    """Return the parent directory; the root is its own parent."""
    return os.path.dirname(os.path.normpath(path)) or path


def list_directory(path: str) -> list[Entry]:
    """List children of ``path`` sorted by name.

    Symlinks to directories count as directories. Entries whose metadata
    cannot be read are still listed, as files without a size.
    """
    entries: list[Entry] = []
    with os.scandir(path) as it:
        for child in it:
            try:
                is_dir = child.is_dir()
            except OSError:
                is_dir = False
            size: int | None = None
            try:
                size = int(child.stat().st_size)
            except OSError:
                pass
            entries.append(Entry(name=child.name, is_dir=is_dir, size=size))
    entries.sort(key=lambda entry: entry.name)
    return entries


def read_file(path: str) -> bytes:
    with open(path, "rb") as handle:
        return handle.read()


def decode_text(data: bytes) -> str:
    """Decode file bytes as UTF-8 (dropping a BOM), falling back to latin-1."""
    try:
        return data.decode("utf-8-sig")
    except UnicodeDecodeError:
        return data.decode("latin-1")


def create_file(path: str) -> None:
    """Create an empty file, or update the timestamp of an existing one."""
    Path(path).touch(exist_ok=True)


def create_directory(path: str) -> None:
    os.mkdir(path)


def remove_file(path: str) -> None:
    """Remove a regular file; directories are refused."""
    if os.path.isdir(path) and not os.path.islink(path):
        raise IsADirectoryError(21, "Is a directory", path)
    os.remove(path)


def rename(source: str, destination: str) -> None:
    """Move ``source`` to ``destination`` (into it when it is a directory)."""
    if not os.path.lexists(source):
        raise FileNotFoundError(2, "No such file or directory", source)
    shutil.move(source, destination)


def copy(source: str, destination: str) -> None:
    """Copy a file to ``destination`` (into it when it is a directory)."""
    if os.path.isdir(source):
        raise IsADirectoryError(21, "Is a directory", source)
    shutil.copy(source, destination)
