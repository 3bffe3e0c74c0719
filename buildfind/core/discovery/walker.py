# buildfind/core/discovery/walker.py
import os
from pathlib import Path
from typing import Callable, Iterable, List, Optional, Sequence, Set, Union
import structlog

from buildfind.config.settings import (
    BUILD_FILE_NAMES,
    STARLARK_EXTENSIONS,
    STARLARK_FILE_NAMES,
    STARLARK_STRIPPED_EXTENSIONS,
)
from buildfind.core.discovery.ignore_file import load_ignored_prefixes
from buildfind.core.discovery.path_filter import should_ignore_path
from buildfind.core.discovery.path_resolution import resolve_input_paths

log = structlog.get_logger(__name__)

def is_starlark_file(name: str) -> bool:
    # BUILD, WORKSPACE, MODULE.bazel, *.bzl and friends.
    stem, ext = os.path.splitext(name)
    if ext in STARLARK_EXTENSIONS:
        return True
    if ext in STARLARK_STRIPPED_EXTENSIONS:
        name = stem
    return name in STARLARK_FILE_NAMES

def _collect_files(
    root_dir: Union[str, Path],
    ignored_prefixes: Sequence[str],
    name_matches: Callable[[str], bool],
) -> List[Path]:
    root = os.fspath(root_dir)
    matched_files: List[Path] = []
    search_dirs: List[str] = [root]

    while search_dirs:
        current_dir = search_dirs.pop()

        try:
            with os.scandir(current_dir) as it:
                dir_entries = list(it)
        except OSError as e:
            log.debug("directory_listing_failed_skipped", dir=current_dir, error=str(e))
            continue

        for entry in dir_entries:
            full_path = entry.path

            if should_ignore_path(full_path, root, ignored_prefixes):
                log.debug("ignored_path_pruned", path=full_path)
                continue

            try:
                is_dir = entry.is_dir(follow_symlinks=False)
            except OSError:
                is_dir = False

            if is_dir:
                search_dirs.append(full_path)
            elif name_matches(entry.name):
                matched_files.append(Path(full_path))

    log.debug("file_search_finished", root=root, found=len(matched_files))
    return matched_files

def find_build_files(root_dir: Union[str, Path], ignored_prefixes: Sequence[str]) -> List[Path]:
    """
    Returns all BUILD files in the subtree under root_dir.

    Any path matching one of ignored_prefixes (relative to root_dir) is skipped
    along with everything below it, so ignored directories are never listed.
    Directories that cannot be listed are skipped; the walk carries on with the
    rest of the tree. Result order is unspecified.
    """
    return _collect_files(root_dir, ignored_prefixes, lambda name: name in BUILD_FILE_NAMES)

def find_starlark_files(root_dir: Union[str, Path], ignored_prefixes: Sequence[str]) -> List[Path]:
    # same walk as find_build_files, matching every Starlark file name.
    return _collect_files(root_dir, ignored_prefixes, is_starlark_file)

def expand_paths(
    input_paths: Iterable[Path],
    respect_ignore: bool = True,
    workspace_root: Optional[Path] = None,
) -> List[Path]:
    # expands directory arguments into their Starlark files; file arguments pass through.
    resolved_inputs = resolve_input_paths(input_paths)
    fixed_prefixes: Optional[List[str]] = None
    if respect_ignore and workspace_root is not None:
        fixed_prefixes = load_ignored_prefixes(workspace_root)

    collected: Set[Path] = set()
    for input_path in resolved_inputs:
        if not input_path.is_dir():
            collected.add(input_path)
            continue

        if not respect_ignore:
            prefixes: List[str] = []
        elif fixed_prefixes is not None:
            prefixes = fixed_prefixes
        else:
            prefixes = load_ignored_prefixes(input_path)

        if workspace_root is not None:
            found = _find_below(input_path, Path(workspace_root).resolve(), prefixes)
        else:
            found = find_starlark_files(input_path, prefixes)
        log.info("directory_expanded", dir=str(input_path), found=len(found), ignored_prefixes=len(prefixes))
        collected.update(found)

    return sorted(collected)

def _find_below(start_dir: Path, workspace_root: Path, prefixes: Sequence[str]) -> List[Path]:
    # searches start_dir while matching prefixes relative to workspace_root.
    if should_ignore_path(start_dir, workspace_root, prefixes):
        log.info("input_directory_ignored", dir=str(start_dir))
        return []
    try:
        rel_start = Path(os.path.relpath(start_dir, workspace_root)).as_posix()
    except ValueError:
        return find_starlark_files(start_dir, [])
    rel_prefixes: List[str] = []
    for prefix in prefixes:
        if rel_start == ".":
            rel_prefixes.append(prefix)
        elif prefix.startswith(rel_start + "/"):
            rel_prefixes.append(prefix[len(rel_start) + 1:])
    return find_starlark_files(start_dir, rel_prefixes)
