import sys
from pathlib import Path
from typing import Iterable
import structlog
from buildfind.exceptions import OutputError

log = structlog.get_logger(__name__)

def format_paths(paths: Iterable[Path], base_dir: Path, absolute: bool = False, null_separated: bool = False) -> str:
    # renders one path per entry, relative to base_dir unless absolute or outside it.
    rendered = []
    for path in paths:
        if absolute:
            rendered.append(str(path))
            continue
        try:
            rendered.append(path.relative_to(base_dir).as_posix())
        except ValueError:
            rendered.append(str(path))

    if not rendered:
        return ""
    separator = "\0" if null_separated else "\n"
    return separator.join(rendered) + separator

def write_to_stdout(text_content: str):
    # writes text to standard output.
    try:
        sys.stdout.write(text_content)
        sys.stdout.flush()
    except UnicodeEncodeError as e:
        log.warning("stdout_write_failed_trying_binary_fallback", error=str(e))
        sys.stdout.buffer.write(text_content.encode("utf-8", errors="replace"))
        sys.stdout.buffer.flush()

def write_to_file(output_file_path: Path, text_content: str):
    # writes text content to the specified file path.
    log.info("writing_output_to_file", path=str(output_file_path))
    try:
        output_file_path.write_text(text_content, encoding="utf-8")
    except OSError as e:
        raise OutputError(f"failed to write to file '{output_file_path}': {e}")
