"""Inline option annotations on path expressions.

A path expression may end with a bracket group carrying options for that
side of the copy::

    assets/**[filter=css]
    public/[remove_extension_folder]
    src/*[exclude=*.map,filter=js]

Bare flags get the value ``"true"``.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping

_OPTIONS_RE = re.compile(r"^(?P<path>.*?)\[(?P<body>[^\[\]]*)\]$")


@dataclass(frozen=True)
class ParsedPath:
    """A path expression split into its path and its read-only options."""
    path: str
    options: Mapping[str, str] = field(default_factory=lambda: MappingProxyType({}))


def parse_options(raw: str) -> ParsedPath:
    """Split *raw* into ``ParsedPath(path, options)``.

    Expressions without a trailing ``[...]`` group come back unchanged with
    no options.
    """
    m = _OPTIONS_RE.match(raw)
    if m is None:
        return ParsedPath(raw)
    options: dict[str, str] = {}
    for item in m.group("body").split(","):
        item = item.strip()
        if not item:
            continue
        key, sep, value = item.partition("=")
        options[key.strip()] = value.strip() if sep else "true"
    return ParsedPath(m.group("path"), MappingProxyType(options))
