"""Source enumeration and destination computation for each copy mode."""

from __future__ import annotations

import os
from typing import TYPE_CHECKING

from .._exclude import ExcludeFilter
from .._scan import filter_paths, scan
from ._types import Classification, CopyMode, CopyPair

if TYPE_CHECKING:
    from ..registry import OutputRegistry


def _ensure_trailing_slash(path: str) -> str:
    """Ensure *path* ends with ``/``; an empty path stays empty (current dir)."""
    if not path or path.endswith("/") or path.endswith(os.sep):
        return path
    return path + "/"


def _join(directory: str, name: str) -> str:
    return os.path.join(directory, name) if directory else name


def strip_extension_folder(destination: str) -> str:
    """Drop the last directory segment of *destination* if it equals the file's extension.

    ``out/css/site.css`` becomes ``out/site.css``.  Only the segment name is
    compared, so any directory called ``css`` is collapsed for a ``.css``
    file.  A segment that merely ends in the extension after a word
    boundary (``out/my-css/site.css``) is left alone on purpose.  Paths
    without an extension are returned unchanged.
    """
    dirname, sep, basename = destination.rpartition("/")
    if not sep:
        return destination
    ext = os.path.splitext(basename)[1][1:]
    if not ext:
        return destination
    parent, _, last = dirname.rpartition("/")
    if last != ext:
        return destination
    if dirname == last:
        return basename
    return f"{parent}/{basename}"


def _source_files(
    directory: str, *, recursive: bool, known: OutputRegistry | None,
) -> list[str]:
    files = scan(directory, recursive=recursive)
    if known is not None:
        files = sorted(set(files) | set(known.files_under(directory, recursive=recursive)))
    return files


def _select(
    c: Classification, files: list[str], exclude: ExcludeFilter | None,
) -> list[str]:
    files = filter_paths(files, c.filter)
    excl = ExcludeFilter.from_option(c.exclude).merged(exclude)
    return excl.apply(files)


def plan_pairs(
    c: Classification,
    *,
    exclude: ExcludeFilter | None = None,
    known: OutputRegistry | None = None,
) -> list[CopyPair]:
    """Build the ``CopyPair`` list for a classification.

    Reads directory listings only.  With *known*, files an earlier task is
    going to produce are enumerated as if they already existed.  ``ERROR``
    classifications plan nothing.
    """
    if c.mode is CopyMode.ALL_RECURSIVE:
        dest = _ensure_trailing_slash(c.destination)
        pairs = []
        for rel in _select(c, _source_files(c.source, recursive=True, known=known), exclude):
            target = dest + rel
            if c.remove_extension_folder:
                target = strip_extension_folder(target)
            pairs.append(CopyPair(_join(c.source, rel), target))
        return pairs

    if c.mode is CopyMode.BASE_ONLY:
        dest = _ensure_trailing_slash(c.destination)
        names = _select(c, _source_files(c.source, recursive=False, known=known), exclude)
        return [CopyPair(_join(c.source, name), dest + name) for name in names]

    if c.mode is CopyMode.SINGLE_FILE:
        name = os.path.basename(c.source)
        if ExcludeFilter.from_option(c.exclude).merged(exclude).is_excluded(name):
            return []
        if c.destination.endswith("/") or c.destination.endswith(os.sep):
            return [CopyPair(c.source, c.destination + name)]
        return [CopyPair(c.source, c.destination)]

    return []
