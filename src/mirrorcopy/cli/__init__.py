"""mirrorcopy CLI: copy files by path pattern."""

from ._helpers import main  # noqa: F401 (entry point)

# Import command modules to register Click commands with the main group.
from . import _cp, _run  # noqa: F401
