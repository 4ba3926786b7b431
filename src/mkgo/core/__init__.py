"""Filesystem, path and process building blocks."""

from mkgo.core.changelog import CHANGELOG, Change, print_changelog
from mkgo.core.config import DATE_FORMAT, DEFAULT_VERSION, ScaffoldConfig
from mkgo.core.files import FILE_MODE, write_file
from mkgo.core.paths import ResolvedPath, resolve, split_identifier
from mkgo.core.tools import ToolResult, ToolRunner, run_tool

__all__ = [
    "CHANGELOG",
    "DATE_FORMAT",
    "DEFAULT_VERSION",
    "FILE_MODE",
    "Change",
    "ResolvedPath",
    "ScaffoldConfig",
    "ToolResult",
    "ToolRunner",
    "print_changelog",
    "resolve",
    "run_tool",
    "split_identifier",
    "write_file",
]
