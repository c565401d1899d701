"""Exclude patterns for enumerated source files.

Patterns follow gitignore rules (implemented by
``dulwich.ignore.IgnoreFilter``) and are matched against paths relative to
the source directory.
"""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, Sequence

from dulwich.ignore import IgnoreFilter


class ExcludeFilter:
    """Combines ``exclude`` options, ``--exclude`` and ``--exclude-from``."""

    def __init__(
        self,
        *,
        patterns: Sequence[str] | None = None,
        exclude_from: str | None = None,
    ) -> None:
        lines: list[bytes] = []
        for p in patterns or ():
            p = p.strip()
            if p:
                lines.append(p.encode("utf-8"))
        if exclude_from is not None:
            for raw in Path(exclude_from).read_bytes().splitlines():
                line = raw.strip()
                if line and not line.startswith(b"#"):
                    lines.append(line)
        self._lines = lines
        self._filter: IgnoreFilter | None = IgnoreFilter(lines) if lines else None

    @classmethod
    def from_option(cls, value: str | None) -> ExcludeFilter:
        """Build a filter from an inline ``exclude`` option (``|``-separated)."""
        return cls(patterns=value.split("|") if value else None)

    def merged(self, other: ExcludeFilter | None) -> ExcludeFilter:
        """Return a filter excluding what either *self* or *other* excludes."""
        if other is None or not other.active:
            return self
        if not self.active:
            return other
        combined = ExcludeFilter()
        combined._lines = self._lines + other._lines
        combined._filter = IgnoreFilter(combined._lines)
        return combined

    @property
    def active(self) -> bool:
        """True if any pattern is configured."""
        return self._filter is not None

    def is_excluded(self, rel_path: str) -> bool:
        if self._filter is None:
            return False
        return self._filter.is_ignored(rel_path) is True

    def apply(self, paths: Iterable[str]) -> list[str]:
        """Drop the excluded entries of *paths*, keeping order."""
        return [p for p in paths if not self.is_excluded(p)]
