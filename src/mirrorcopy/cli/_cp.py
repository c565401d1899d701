"""The cp and verify commands."""

from __future__ import annotations

import click

from ..copy import CopyTask
from ..exceptions import PathResolutionError
from ._helpers import main, _build_exclude, _config, _exclude_options, _status


@main.command()
@click.argument("source")
@click.argument("dest")
@_exclude_options
@click.option("--fail-fast", is_flag=True, default=False,
              help="Stop at the first file that fails to copy.")
@click.pass_context
def cp(ctx, source, dest, exclude, exclude_from, fail_fast):
    """Copy the files matched by SOURCE to DEST.

    \b
    Examples:
        mirrorcopy cp 'src/**' dist/            # mirror the whole tree
        mirrorcopy cp 'src/*.js' dist/          # top-level .js files only
        mirrorcopy cp src/app.js dist/main.js   # one file, exact name
    """
    task = CopyTask(_config(ctx, fail_fast=fail_fast),
                    exclude=_build_exclude(exclude, exclude_from))
    try:
        report = task.run(source, dest)
    except PathResolutionError as exc:
        raise click.ClickException(str(exc))
    except OSError as exc:
        raise click.ClickException(str(exc))
    _status(ctx, f"Copied {len(report.copied)} of {report.total} files -> {dest}")
    if report.errors:
        ctx.exit(1)


@main.command()
@click.argument("source")
@click.argument("dest")
@_exclude_options
@click.pass_context
def verify(ctx, source, dest, exclude, exclude_from):
    """Check that SOURCE resolves and list the files DEST would receive."""
    task = CopyTask(_config(ctx), exclude=_build_exclude(exclude, exclude_from))
    if not task.verify(source, dest):
        ctx.exit(1)
    for path in task.registry.outputs:
        click.echo(f"+ {path}")
