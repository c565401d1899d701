"""Shared helpers, option decorators, and the main CLI group."""

from __future__ import annotations

import click

from .._exclude import ExcludeFilter
from ..config import CopyConfig


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _status(ctx, msg):
    """Emit a status message to stderr when verbose mode (-v) is on."""
    if ctx.obj.get("verbose"):
        click.echo(msg, err=True)


def _config(ctx, *, fail_fast: bool = False) -> CopyConfig:
    """Build the run configuration from the main group's options."""
    return CopyConfig(
        dry_run=ctx.obj.get("dry_run", False),
        verbose=ctx.obj.get("verbose", False),
        base_path=ctx.obj.get("base_path"),
        fail_fast=fail_fast,
    )


def _exclude_options(f):
    """Shared --exclude / --exclude-from options."""
    f = click.option("--exclude-from", "exclude_from", type=click.Path(exists=True),
                     help="Read exclude patterns from file.")(f)
    f = click.option("--exclude", multiple=True,
                     help="Exclude files matching pattern (gitignore syntax, repeatable).")(f)
    return f


def _build_exclude(exclude, exclude_from) -> ExcludeFilter | None:
    if not exclude and not exclude_from:
        return None
    return ExcludeFilter(patterns=exclude, exclude_from=exclude_from)


# ---------------------------------------------------------------------------
# Main group
# ---------------------------------------------------------------------------

@click.group()
@click.option("-v", "--verbose", is_flag=True, help="Print every copied file.")
@click.option("-n", "--dry-run", is_flag=True, envvar="MIRRORCOPY_DRY_RUN",
              help="Show what would be copied without writing anything.")
@click.option("--base-path", type=click.Path(), envvar="MIRRORCOPY_BASE_PATH",
              help="Prefix removed from paths in verbose output.")
@click.pass_context
def main(ctx, verbose, dry_run, base_path):
    """mirrorcopy: copy files by path pattern, mirroring directories.

    \b
    Source forms:
      dir/**          every file below dir, subdirectories mirrored
      dir/* , dir/    only the files directly inside dir
      dir/**.css      any of the above, limited to one extension
      path/file.txt   a single file

    \b
    Inline options go in a trailing bracket group:
      'assets/**[exclude=*.map]' 'public/[remove_extension_folder]'
    """
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    ctx.obj["dry_run"] = dry_run
    ctx.obj["base_path"] = base_path
