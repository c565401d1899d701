"""Data structures for classification and copy operations."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Mapping


class CopyMode(str, Enum):
    """How a source expression is copied.

    Members: ``ALL_RECURSIVE`` (``dir/**``), ``BASE_ONLY`` (``dir/*`` or
    ``dir/``), ``SINGLE_FILE`` (an existing file), ``ERROR`` (unresolvable).
    """
    ALL_RECURSIVE = "all"
    BASE_ONLY = "base"
    SINGLE_FILE = "file"
    ERROR = "error"

    def __str__(self) -> str:          # noqa: D105
        return self.value


@dataclass(frozen=True)
class Classification:
    """Result of classifying a source/destination expression pair.

    Attributes:
        mode: The :class:`CopyMode` that applies.
        source: Source path with its mode marker (``**``, ``*``, ``/``)
            and any ``*.ext`` filter removed.  Empty for ``ERROR``.
        destination: Destination path, options stripped.  Empty for ``ERROR``.
        source_options: Inline options of the source side.
        destination_options: Inline options of the destination side.
        raw_source: The source expression as given.
    """
    mode: CopyMode
    source: str
    destination: str
    source_options: Mapping[str, str] = field(default_factory=lambda: MappingProxyType({}))
    destination_options: Mapping[str, str] = field(default_factory=lambda: MappingProxyType({}))
    raw_source: str = ""

    @property
    def options(self) -> dict[str, str]:
        """Both option maps flattened to dotted keys (``source.filter``)."""
        flat = {f"source.{k}": v for k, v in self.source_options.items()}
        flat.update({f"destination.{k}": v for k, v in self.destination_options.items()})
        return flat

    @property
    def filter(self) -> str:
        return self.source_options.get("filter", "")

    @property
    def exclude(self) -> str:
        return self.source_options.get("exclude", "")

    @property
    def remove_extension_folder(self) -> bool:
        return "remove_extension_folder" in self.destination_options


@dataclass(frozen=True)
class CopyPair:
    """One file to copy.

    Attributes:
        source: Existing regular file.
        destination: Target file path; missing parents are created on copy.
    """
    source: str
    destination: str


@dataclass
class CopyError:
    """A pair that failed during a run.

    Attributes:
        path: The source path that failed.
        error: Human-readable error message.
    """
    path: str
    error: str


@dataclass
class CopyReport:
    """Result of :meth:`CopyTask.run`.

    Attributes:
        mode: The mode the source classified as.
        pairs: Every pair that was planned.
        copied: Pairs actually copied (empty in dry run).
        errors: Pairs that failed, with their messages.
        dry_run: Whether the run was a dry run.
    """
    mode: CopyMode
    pairs: list[CopyPair] = field(default_factory=list)
    copied: list[CopyPair] = field(default_factory=list)
    errors: list[CopyError] = field(default_factory=list)
    dry_run: bool = False

    @property
    def ok(self) -> bool:
        """``True`` if no pair failed."""
        return not self.errors

    @property
    def total(self) -> int:
        """Number of planned pairs."""
        return len(self.pairs)
