"""Classify a source expression into a copy mode."""

from __future__ import annotations

import os
from types import MappingProxyType
from typing import Callable

from .._options import parse_options
from ._types import Classification, CopyMode


def classify(
    source_expr: str,
    destination_expr: str,
    *,
    is_file: Callable[[str], bool] = os.path.isfile,
) -> Classification:
    """Classify *source_expr* and normalize both paths.

    A ``*.ext`` anywhere in the source becomes the ``filter`` option and the
    source is cut right after that ``*``, so ``dir/**.css`` and ``dir/*.css``
    keep their recursive/base marker.  Then, first match wins:

    - ``dir/**``       → ``ALL_RECURSIVE`` (``dir/``)
    - ``dir/*``, ``dir/`` → ``BASE_ONLY`` (``dir/``, ``dir``)
    - existing file    → ``SINGLE_FILE``
    - anything else    → ``ERROR`` with empty paths

    Never raises; the caller decides what an ``ERROR`` means.  *is_file*
    lets callers also accept files that do not exist yet.
    """
    src = parse_options(source_expr)
    dst = parse_options(destination_expr)
    source_path = src.path
    source_options = dict(src.options)

    index = source_path.find("*.")
    if index != -1:
        source_options["filter"] = source_path[index + 2:]
        source_path = source_path[:index + 1]

    source_opts = MappingProxyType(source_options)

    def result(mode: CopyMode, source: str, destination: str) -> Classification:
        return Classification(mode, source, destination, source_opts,
                              dst.options, raw_source=source_expr)

    if source_path.endswith("**"):
        return result(CopyMode.ALL_RECURSIVE, source_path[:-2], dst.path)
    if source_path.endswith("*") or source_path.endswith("/"):
        return result(CopyMode.BASE_ONLY, source_path[:-1], dst.path)
    if source_path and is_file(source_path):
        return result(CopyMode.SINGLE_FILE, source_path, dst.path)
    return result(CopyMode.ERROR, "", "")
