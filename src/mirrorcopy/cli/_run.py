"""The run command: execute a JSON task file."""

from __future__ import annotations

import click

from ..exceptions import TaskFileError
from ..pipeline import CopyPipeline, load_tasks
from ._helpers import main, _build_exclude, _config, _exclude_options, _status


@main.command()
@click.argument("taskfile", type=click.Path(exists=True, dir_okay=False))
@_exclude_options
@click.option("--fail-fast", is_flag=True, default=False,
              help="Stop at the first file that fails to copy.")
@click.pass_context
def run(ctx, taskfile, exclude, exclude_from, fail_fast):
    """Verify every task in TASKFILE, then run them in order.

    Nothing is copied if any task fails verification.
    """
    try:
        tasks = load_tasks(taskfile)
    except TaskFileError as exc:
        raise click.ClickException(str(exc))

    pipeline = CopyPipeline(tasks, _config(ctx, fail_fast=fail_fast),
                            exclude=_build_exclude(exclude, exclude_from))
    try:
        result = pipeline.run()
    except OSError as exc:
        raise click.ClickException(str(exc))

    if not result.verified:
        raise click.ClickException("Verification failed; nothing was copied")
    _status(ctx, f"Ran {len(result.reports)} of {len(tasks)} tasks")
    if not result.ok:
        ctx.exit(1)
