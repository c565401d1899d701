"""File I/O helpers: creating parents and copying file content."""

from __future__ import annotations

import shutil
from pathlib import Path
from typing import Callable, Iterable

from ._types import CopyError, CopyPair


def _copy_file(source: str, destination: str) -> None:
    """Copy content and permission bits of *source* to *destination*.

    Missing parent directories are created.  An existing destination file
    is removed first, so a read-only copy from an earlier run does not block
    the overwrite; there is no atomic replace.
    """
    out = Path(destination)
    out.parent.mkdir(parents=True, exist_ok=True)
    if out.is_file() or out.is_symlink():
        out.unlink()
    shutil.copyfile(source, out)
    shutil.copymode(source, out)


def _copy_files(
    pairs: Iterable[CopyPair],
    *,
    announce: Callable[[CopyPair], None] | None = None,
    ignore_errors: bool = True,
    errors: list[CopyError] | None = None,
    copied: list[CopyPair] | None = None,
) -> None:
    """Copy each pair in order.

    With *ignore_errors* an ``OSError`` is recorded in *errors* and the
    next pair is processed; otherwise it propagates.
    """
    for pair in pairs:
        if announce is not None:
            announce(pair)
        try:
            _copy_file(pair.source, pair.destination)
        except OSError as exc:
            if not ignore_errors:
                raise
            if errors is not None:
                errors.append(CopyError(path=pair.source, error=str(exc)))
            continue
        if copied is not None:
            copied.append(pair)
