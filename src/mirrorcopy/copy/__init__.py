"""Classify path expressions and copy the files they match.

Three source shapes are understood:

- ``dir/**`` copies every file below ``dir``, mirroring subdirectories;
- ``dir/*`` or ``dir/`` copies only the files directly inside ``dir``;
- ``path/to/file`` copies one file, into the destination when that ends
  with ``/``, or to exactly the destination path otherwise.

``*.ext`` narrows any of the directory forms to one extension.
"""

from ._types import (
    Classification,
    CopyError,
    CopyMode,
    CopyPair,
    CopyReport,
)
from ._classify import classify
from ._resolve import plan_pairs, strip_extension_folder
from ._ops import CopyTask

__all__ = [
    # Public types
    "Classification", "CopyError", "CopyMode", "CopyPair", "CopyReport",
    "CopyTask",
    # Public functions
    "classify", "plan_pairs", "strip_extension_folder",
]
