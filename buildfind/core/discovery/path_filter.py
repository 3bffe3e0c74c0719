# buildfind/core/discovery/path_filter.py
import os
from pathlib import Path, PurePath
from typing import Sequence, Union

def should_ignore_path(
    path: Union[str, PurePath],
    root_dir: Union[str, PurePath],
    ignored_prefixes: Sequence[str],
) -> bool:
    # true if path, taken relative to root_dir, equals an ignored prefix or lies below one.
    if not ignored_prefixes:
        return False

    try:
        rel = os.path.relpath(path, root_dir)
    except ValueError:
        # no relative form exists, e.g. a path on another drive.
        return False
    rel_str = Path(rel).as_posix()

    for prefix in ignored_prefixes:
        if rel_str == prefix or rel_str.startswith(prefix + "/"):
            return True
    return False
