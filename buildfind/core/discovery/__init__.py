# buildfind/core/discovery/__init__.py
"""
BUILD file discovery for buildfind.

This package reads a workspace's .bazelignore, decides which paths it excludes,
and walks directory trees collecting BUILD files outside the excluded subtrees.
"""
from .ignore_file import clean_ignore_entry, load_ignored_prefixes
from .path_filter import should_ignore_path
from .walker import expand_paths, find_build_files, find_starlark_files, is_starlark_file

__all__ = [
    "clean_ignore_entry",
    "expand_paths",
    "find_build_files",
    "find_starlark_files",
    "is_starlark_file",
    "load_ignored_prefixes",
    "should_ignore_path",
]
