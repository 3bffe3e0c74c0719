# buildfind/core/discovery/ignore_file.py
import posixpath
from pathlib import Path
from typing import List, Union
import structlog

from buildfind.config.settings import IGNORE_FILE_NAME

log = structlog.get_logger(__name__)

def clean_ignore_entry(entry: str) -> str:
    # resolves '.'/'..' segments and drops redundant or trailing slashes.
    return posixpath.normpath(entry)

def load_ignored_prefixes(root_dir: Union[str, Path]) -> List[str]:
    """
    Returns the ignored prefixes from the .bazelignore file in root_dir.

    A missing or unreadable file yields an empty list. Blank lines, '#' comments
    and absolute paths are skipped; bazel itself rejects absolute entries, so
    they never reach the result. The remaining entries keep their file order.
    """
    ignore_file_path = Path(root_dir) / IGNORE_FILE_NAME
    ignored_prefixes: List[str] = []

    try:
        # surrogateescape keeps undecodable bytes comparable with os.scandir names.
        content = ignore_file_path.read_text(encoding="utf-8", errors="surrogateescape")
    except OSError as e:
        log.debug("ignore_file_not_loaded", path=str(ignore_file_path), error=str(e))
        return ignored_prefixes

    # only '\n' ends a line; a trailing '\r' goes with strip().
    for line_number, raw_line in enumerate(content.split("\n"), start=1):
        line = raw_line.strip()
        if not line or line.startswith("#"):
            continue
        if posixpath.isabs(line):
            log.debug("absolute_ignore_entry_skipped", path=str(ignore_file_path), line=line_number, entry=line)
            continue
        ignored_prefixes.append(clean_ignore_entry(line))

    log.info("ignored_prefixes_loaded", path=str(ignore_file_path), count=len(ignored_prefixes))
    return ignored_prefixes
