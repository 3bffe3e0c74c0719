from pathlib import Path
from typing import Iterable, List
import structlog

from buildfind.exceptions import DiscoveryError

log = structlog.get_logger(__name__)

def resolve_input_paths(raw_paths: Iterable[Path]) -> List[Path]:
    # resolves user-supplied paths to absolute ones, defaulting to the current directory.
    user_provided_raw_paths = list(raw_paths) or [Path(".")]

    resolved: List[Path] = []
    missing: List[str] = []
    for raw_path in user_provided_raw_paths:
        try:
            abs_path = Path(raw_path).resolve(strict=True)
        except FileNotFoundError:
            missing.append(str(raw_path))
            continue
        except OSError as e:
            raise DiscoveryError(f"cannot resolve input path '{raw_path}': {e}")
        if abs_path not in resolved:
            resolved.append(abs_path)

    if missing:
        log.warning("input_paths_not_found", paths=missing)
        raise DiscoveryError(f"no such file or directory: {', '.join(missing)}")

    log.info("input_paths_resolved", count=len(resolved))
    return resolved
