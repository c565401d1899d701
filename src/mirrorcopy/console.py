"""Console output for copy tasks."""

from __future__ import annotations

import click


class Console:
    """Line-oriented reporting sink.

    ``line`` and ``info`` go to stdout, ``error`` and ``warning`` to stderr.
    """

    def __init__(self, *, color: bool | None = None) -> None:
        self._color = color

    def line(self, msg: str = "") -> None:
        click.echo(msg, color=self._color)

    def info(self, msg: str) -> None:
        click.secho(msg, fg="green", color=self._color)

    def command_info(self, msg: str) -> None:
        click.secho(msg, bold=True, color=self._color)

    def warning(self, msg: str) -> None:
        click.secho(f"WARNING: {msg}", fg="yellow", err=True, color=self._color)

    def error(self, msg: str) -> None:
        click.secho(msg, fg="red", err=True, color=self._color)
