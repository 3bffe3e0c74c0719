from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Tuple
import structlog

log = structlog.get_logger(__name__)

# name of the ignore file looked up directly under a workspace root.
IGNORE_FILE_NAME = ".bazelignore"

# possible names for BUILD files.
BUILD_FILE_NAMES: Tuple[str, ...] = ("BUILD.bazel", "BUILD", "BUCK")

# what directory arguments expand to: every Starlark file, not only BUILD files.
STARLARK_EXTENSIONS: Tuple[str, ...] = (".bzl", ".sky", ".star")
STARLARK_STRIPPED_EXTENSIONS: Tuple[str, ...] = (".bazel", ".oss")
STARLARK_FILE_NAMES: Tuple[str, ...] = ("BUILD", "BUCK", "WORKSPACE", "WORKSPACE.bzlmod", "MODULE")

DEFAULT_CONSOLE_SHOW_SUMMARY = False

@dataclass
class FinderConfig:
    # holds all configuration parameters for a single run.
    input_paths: List[Path] = field(default_factory=list)
    workspace_root: Optional[Path] = None
    no_ignore: bool = False
    absolute_paths: bool = False
    null_separated: bool = False
    output_file: Optional[Path] = None
    console_show_summary: bool = DEFAULT_CONSOLE_SHOW_SUMMARY

    # internal state, not set directly by user flags.
    base_dir: Path = field(init=False)

    def __post_init__(self):
        # performs initial setup after dataclass instantiation.
        self.base_dir = Path.cwd().resolve()
        self.input_paths = [Path(p) for p in self.input_paths]
        if self.workspace_root is not None:
            self.workspace_root = Path(self.workspace_root)
        if self.output_file is not None:
            self.output_file = Path(self.output_file)
        log.debug("finder_config_initialized", base_dir=str(self.base_dir), inputs=len(self.input_paths))
