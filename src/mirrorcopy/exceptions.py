"""Exceptions for mirrorcopy."""


class MirrorCopyError(Exception):
    """Base class for mirrorcopy errors."""


class PathResolutionError(MirrorCopyError):
    """Raised when a source expression matches no copy mode.

    The source is neither an existing file nor a directory expression
    ending in ``**``, ``*`` or ``/``.  Nothing has been copied when this
    is raised.
    """

    def __init__(self, path: str) -> None:
        super().__init__(f"{path} not found.")
        self.path = path


class TaskFileError(MirrorCopyError):
    """Raised when a pipeline task file cannot be parsed."""
