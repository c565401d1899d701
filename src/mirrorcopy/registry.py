"""Known output paths shared by the tasks of one pipeline run."""

from __future__ import annotations

import os
from pathlib import Path


def _key(path: str) -> str:
    """Normalize *path* for registry lookups (forward slashes, no trailing ``/``)."""
    norm = os.path.normpath(path).replace(os.sep, "/")
    return "" if norm == "." else norm


class OutputRegistry:
    """Paths that exist, or will exist once earlier tasks have run.

    Verification stores every source it reads and every destination it
    predicts, along with the source root of each task.  A later task may
    then name a file that only an earlier task produces.  Destinations
    predicted twice are reported by :meth:`collisions`.
    """

    def __init__(self) -> None:
        self._known: set[str] = set()
        self._dirs: set[str] = set()
        self._outputs: dict[str, int] = {}

    def store(self, path: str, *, output: bool = True,
              directory: bool = False) -> bool:
        """Record *path*; return ``True`` if it was not known before.

        A *directory* is only remembered as existing.  It is never an
        output and is not listed by :meth:`files_under`.
        """
        key = _key(path)
        if directory:
            new = key not in self._dirs
            self._dirs.add(key)
            return new
        new = key not in self._known
        self._known.add(key)
        if output:
            self._outputs[key] = self._outputs.get(key, 0) + 1
        return new

    def is_file(self, path: str) -> bool:
        """``True`` if *path* was stored as a file."""
        return _key(path) in self._known

    def __contains__(self, path: object) -> bool:
        if not isinstance(path, str):
            return False
        key = _key(path)
        return key in self._known or key in self._dirs

    def __len__(self) -> int:
        return len(self._known)

    def __iter__(self):
        return iter(sorted(self._known))

    @property
    def outputs(self) -> list[str]:
        """Sorted list of stored output paths."""
        return sorted(self._outputs)

    def collisions(self) -> list[str]:
        """Output paths predicted by more than one task."""
        return sorted(k for k, n in self._outputs.items() if n > 1)

    def files_under(self, directory: str, *, recursive: bool = True) -> list[str]:
        """Known paths under *directory*, relative to it, sorted."""
        base = _key(directory)
        prefix = base + "/" if base else ""
        result = []
        for key in self._known:
            if not key.startswith(prefix) or key == base:
                continue
            rel = key[len(prefix):]
            if not recursive and "/" in rel:
                continue
            result.append(rel)
        return sorted(result)

    def check_path(self, path: str, create: bool = False,
                   allow_stored: bool = False) -> str | None:
        """Resolve *path*, optionally creating it as a directory.

        Returns *path* (with a trailing ``/`` kept when it had one) if it
        exists on disk, is known to the registry (with *allow_stored*), or
        was created (with *create*).  Otherwise returns ``None``.
        """
        if os.path.exists(path or "."):
            return path
        if allow_stored and (path in self or self.files_under(path)):
            return path
        if create:
            Path(path).mkdir(parents=True, exist_ok=True)
            return path
        return None
