"""The copy task: run and verify (internal implementation)."""

from __future__ import annotations

import os

from ..config import CopyConfig
from ..console import Console
from ..exceptions import PathResolutionError
from ..registry import OutputRegistry
from .._exclude import ExcludeFilter
from ._classify import classify
from ._io import _copy_files
from ._resolve import plan_pairs
from ._types import Classification, CopyMode, CopyPair, CopyReport


class CopyTask:
    """Copies files described by a source and a destination expression.

    Args:
        config: Run settings; defaults to a plain, non-verbose real run.
        console: Reporting sink; defaults to a :class:`Console`.
        registry: Known output paths, shared with other tasks of the same
            pipeline.  A fresh registry is used when omitted.
        exclude: Extra exclude patterns applied on top of the source's
            inline ``exclude`` option.
    """

    def __init__(
        self,
        config: CopyConfig | None = None,
        console: Console | None = None,
        registry: OutputRegistry | None = None,
        *,
        exclude: ExcludeFilter | None = None,
    ) -> None:
        self.config = config or CopyConfig()
        self.console = console or Console()
        self.registry = registry if registry is not None else OutputRegistry()
        self.exclude = exclude

    def plan(self, c: Classification) -> list[CopyPair]:
        """Enumerate the pairs for *c* without touching the filesystem."""
        return plan_pairs(c, exclude=self.exclude)

    # ------------------------------------------------------------------
    def run(self, source_expr: str, destination_expr: str) -> CopyReport:
        """Copy the files matched by *source_expr* to *destination_expr*.

        Raises :class:`PathResolutionError` before copying anything when
        the source cannot be classified.  Per-file ``OSError``s are
        collected in the report unless ``config.fail_fast`` is set.
        """
        console = self.console
        console.command_info("Executing 'copy' module...")
        console.line()
        console.info("   Copying Files From...")
        console.line(f" - {self.config.display(source_expr)}")
        console.line()
        console.info("   Saving To...")
        console.line(f" - {self.config.display(destination_expr)}")
        console.line()

        c = classify(source_expr, destination_expr)
        if c.mode is CopyMode.ERROR:
            console.error(f"{source_expr} not found.")
            raise PathResolutionError(source_expr)

        dry_run = self.config.dry_run
        pairs = self.plan(c)
        if c.mode is not CopyMode.SINGLE_FILE:
            console.info(f"   Found {len(pairs)} files. Copying...")
            console.line()
        elif c.destination.endswith("/"):
            self.registry.check_path(c.destination, create=not dry_run)

        report = CopyReport(c.mode, pairs=pairs, dry_run=dry_run)
        if dry_run:
            for pair in pairs:
                self._announce(pair)
        else:
            _copy_files(pairs, announce=self._announce,
                        ignore_errors=not self.config.fail_fast,
                        errors=report.errors, copied=report.copied)
        for e in report.errors:
            console.error(f"ERROR: {e.path}: {e.error}")

        if self.config.verbose:
            console.line()
        return report

    def _announce(self, pair: CopyPair) -> None:
        if not self.config.verbose:
            return
        cfg = self.config
        self.console.line(f" - From: {cfg.display(pair.source)}")
        self.console.line(f"   To:   {cfg.display(pair.destination)}")
        self.console.line()

    # ------------------------------------------------------------------
    def verify(self, source_expr: str, destination_expr: str) -> bool:
        """Check that the task can run and register its predicted outputs.

        Files already registered by earlier tasks count as existing.
        Nothing is copied and no directory is created.
        """
        registry = self.registry
        c = classify(source_expr, destination_expr,
                     is_file=lambda p: os.path.isfile(p) or registry.is_file(p))
        if c.mode is CopyMode.ERROR:
            self.console.error(f"{source_expr} not found.")
            return False

        if registry.check_path(c.source, allow_stored=True) is None:
            self.console.error(f"{c.source} not found.")
            return False
        registry.store(c.source, output=False,
                       directory=c.mode is not CopyMode.SINGLE_FILE)

        for pair in plan_pairs(c, exclude=self.exclude, known=registry):
            registry.store(pair.source, output=False)
            registry.store(pair.destination)
        return True
