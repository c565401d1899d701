from .config import CopyConfig
from .console import Console
from .exceptions import MirrorCopyError, PathResolutionError, TaskFileError
from .registry import OutputRegistry
from ._options import ParsedPath, parse_options
from ._scan import filter_paths, scan
from .copy import (
    Classification, CopyError, CopyMode, CopyPair, CopyReport, CopyTask,
    classify, plan_pairs, strip_extension_folder,
)
from .pipeline import CopyPipeline, PipelineReport, load_tasks

__all__ = [
    "CopyConfig", "Console", "OutputRegistry",
    "MirrorCopyError", "PathResolutionError", "TaskFileError",
    "ParsedPath", "parse_options", "filter_paths", "scan",
    "Classification", "CopyError", "CopyMode", "CopyPair", "CopyReport", "CopyTask",
    "classify", "plan_pairs", "strip_extension_folder",
    "CopyPipeline", "PipelineReport", "load_tasks",
]
