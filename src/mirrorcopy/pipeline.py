"""Run a list of copy tasks: verify them all first, then copy.

Task files are JSON lists whose items are either ``[source, destination]``
pairs or objects::

    [
        ["assets/img/**", "public/img/"],
        {"source": "assets/**.css", "destination": "public/[remove_extension_folder]",
         "exclude": ["*.map"]}
    ]
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Sequence

from ._exclude import ExcludeFilter
from .config import CopyConfig
from .console import Console
from .copy import CopyError, CopyReport, CopyTask
from .exceptions import PathResolutionError, TaskFileError
from .registry import OutputRegistry


@dataclass(frozen=True)
class TaskSpec:
    """One entry of a task file."""
    source: str
    destination: str
    exclude: tuple[str, ...] = ()


def _parse_task(item, index: int) -> TaskSpec:
    if isinstance(item, (list, tuple)):
        if len(item) != 2 or not all(isinstance(v, str) for v in item):
            raise TaskFileError(f"Task {index}: expected [source, destination]")
        return TaskSpec(item[0], item[1])
    if isinstance(item, dict):
        source = item.get("source")
        destination = item.get("destination")
        if not isinstance(source, str) or not isinstance(destination, str):
            raise TaskFileError(f"Task {index}: 'source' and 'destination' must be strings")
        exclude = item.get("exclude", [])
        if isinstance(exclude, str):
            exclude = [exclude]
        if not isinstance(exclude, list) or not all(isinstance(p, str) for p in exclude):
            raise TaskFileError(f"Task {index}: 'exclude' must be a string or a list of strings")
        return TaskSpec(source, destination, tuple(exclude))
    raise TaskFileError(f"Task {index}: expected a list or an object, got {type(item).__name__}")


def load_tasks(path: str | Path) -> list[TaskSpec]:
    """Read a JSON task file.

    Raises :class:`TaskFileError` for invalid JSON or malformed entries.
    """
    try:
        data = json.loads(Path(path).read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise TaskFileError(f"Invalid task file {path}: {exc}") from exc
    if not isinstance(data, list):
        raise TaskFileError(f"Invalid task file {path}: top level must be a list")
    return [_parse_task(item, i) for i, item in enumerate(data)]


@dataclass
class PipelineReport:
    """Result of :meth:`CopyPipeline.run`.

    Attributes:
        verified: ``False`` if verification failed and nothing ran.
        reports: One :class:`CopyReport` per task that ran.
        failures: Tasks whose source could not be resolved at run time.
    """
    verified: bool = True
    reports: list[CopyReport] = field(default_factory=list)
    failures: list[CopyError] = field(default_factory=list)

    @property
    def errors(self) -> list[CopyError]:
        """Per-file errors of every task."""
        return [e for r in self.reports for e in r.errors]

    @property
    def ok(self) -> bool:
        return self.verified and not self.failures and not self.errors


class CopyPipeline:
    """Verifies and runs copy tasks in order against one shared registry."""

    def __init__(
        self,
        tasks: Sequence[TaskSpec],
        config: CopyConfig | None = None,
        console: Console | None = None,
        *,
        exclude: ExcludeFilter | None = None,
    ) -> None:
        self.tasks = list(tasks)
        self.config = config or CopyConfig()
        self.console = console or Console()
        self.exclude = exclude
        self.registry = OutputRegistry()

    def _task(self, spec: TaskSpec) -> CopyTask:
        excl = ExcludeFilter(patterns=spec.exclude)
        if self.exclude is not None:
            excl = excl.merged(self.exclude)
        return CopyTask(self.config, self.console, self.registry, exclude=excl)

    def verify_all(self) -> bool:
        """Verify every task; later tasks may consume earlier tasks' outputs."""
        self.registry = OutputRegistry()
        ok = True
        for spec in self.tasks:
            if not self._task(spec).verify(spec.source, spec.destination):
                ok = False
        for path in self.registry.collisions():
            self.console.warning(f"{path} is written by more than one task")
        return ok

    def run(self) -> PipelineReport:
        """Verify all tasks, then run them; stop before copying if verification fails."""
        if not self.verify_all():
            return PipelineReport(verified=False)
        result = PipelineReport()
        for spec in self.tasks:
            try:
                result.reports.append(self._task(spec).run(spec.source, spec.destination))
            except PathResolutionError as exc:
                result.failures.append(CopyError(path=exc.path, error=str(exc)))
        return result
