"""Run configuration passed explicitly to every copy task."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class CopyConfig:
    """Immutable settings for a run.

    Attributes:
        dry_run: Report what would be copied without touching the filesystem.
        verbose: Print every ``From``/``To`` pair.
        base_path: Prefix stripped from paths in verbose output.
        fail_fast: Re-raise the first per-file ``OSError`` instead of
            recording it and continuing.
    """
    dry_run: bool = False
    verbose: bool = False
    base_path: str | None = None
    fail_fast: bool = False

    def display(self, path: str) -> str:
        """Return *path* with ``base_path`` removed, for messages."""
        if self.base_path:
            return path.replace(self.base_path, "")
        return path
