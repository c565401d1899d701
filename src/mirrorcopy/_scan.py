"""Directory enumeration and suffix filtering."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Iterable


def scan(directory: str, *, recursive: bool = True) -> list[str]:
    """Return sorted relative paths of the regular files under *directory*.

    Paths use forward slashes.  With ``recursive=False`` only the direct
    children of *directory* are listed.  Directories are never returned.
    A missing or unreadable *directory* yields an empty list.
    """
    base = Path(directory or ".")
    if not base.is_dir():
        return []

    if not recursive:
        try:
            names = os.listdir(base)
        except (FileNotFoundError, NotADirectoryError, PermissionError):
            return []
        return sorted(name for name in names if (base / name).is_file())

    result: list[str] = []
    for dirpath, _dirnames, filenames in os.walk(base):
        dp = Path(dirpath)
        for fname in filenames:
            full = dp / fname
            if not full.is_file():
                continue
            result.append(str(full.relative_to(base)).replace(os.sep, "/"))
    return sorted(result)


def filter_paths(paths: Iterable[str], suffix: str | None) -> list[str]:
    """Keep the paths whose name ends with ``.<suffix>``.

    Matching is case-sensitive.  An empty *suffix* keeps everything.
    """
    if not suffix:
        return list(paths)
    ending = "." + suffix.lstrip(".")
    return [p for p in paths if p.rsplit("/", 1)[-1].endswith(ending)]
