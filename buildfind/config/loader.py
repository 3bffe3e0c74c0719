# buildfind/config/loader.py
"""
Handles loading and merging of configurations from TOML files.
"""
import toml
from pathlib import Path
from typing import Dict, Any, Optional
import structlog

from buildfind.exceptions import ConfigError

log = structlog.get_logger(__name__)

PROJECT_CONFIG_FILENAMES = [".buildfind.toml", "buildfind.toml", "pyproject.toml"]
USER_CONFIG_DIR = Path.home() / ".config" / "buildfind"
USER_CONFIG_FILE = USER_CONFIG_DIR / "config.toml"

CONFIG_KEY_TO_FINDERCONFIG_ATTR_MAP: Dict[str, str] = {
    "input_paths": "input_paths",
    "workspace_root": "workspace_root",
    "no_ignore": "no_ignore",
    "absolute_paths": "absolute_paths",
    "null_separated": "null_separated",
    "output_file": "output_file",
    "console_show_summary": "console_show_summary",
}

def _load_toml_file_data(file_path: Path) -> Dict[str, Any]:
    if not file_path.is_file():
        return {}
    log.debug("loading_toml_config_file", path=str(file_path))
    try:
        data = toml.load(file_path)
    except (toml.TomlDecodeError, OSError) as e:
        log.error("config_file_load_error", path=str(file_path), error=str(e))
        return {}
    if file_path.name == "pyproject.toml":
        return data.get("tool", {}).get("buildfind", {})
    return data

def load_and_merge_configs(project_dir: Optional[Path] = None) -> Dict[str, Any]:
    # merges the user-global config with the first project config found.
    project_dir = project_dir or Path.cwd()
    merged_toml_data: Dict[str, Any] = {}
    if USER_CONFIG_FILE.is_file():
        log.info("loading_user_global_config", path=str(USER_CONFIG_FILE))
        merged_toml_data.update(_load_toml_file_data(USER_CONFIG_FILE))

    for filename in PROJECT_CONFIG_FILENAMES:
        candidate = project_dir / filename
        if not candidate.is_file():
            continue
        project_settings = _load_toml_file_data(candidate)
        if not project_settings:
            continue
        log.info("loading_project_local_config", path=str(candidate))
        project_profiles = project_settings.pop("profiles", None)
        if project_profiles is not None:
            user_profiles = merged_toml_data.get("profiles")
            if isinstance(user_profiles, dict) and isinstance(project_profiles, dict):
                user_profiles.update(project_profiles)
            else:
                merged_toml_data["profiles"] = project_profiles
        merged_toml_data.update(project_settings)
        break

    if not merged_toml_data:
        log.debug("no_configuration_files_loaded")
    return merged_toml_data

def resolve_config_options(raw_config: Dict[str, Any], profile_name: Optional[str] = None) -> Dict[str, Any]:
    """
    Flattens raw TOML data into FinderConfig keyword arguments.

    Top-level keys apply first, then the keys of the named profile. Unknown keys
    are dropped; a value of the wrong shape raises ConfigError.
    """
    options: Dict[str, Any] = {}
    sources = [raw_config]
    if profile_name:
        profiles = raw_config.get("profiles", {})
        if not isinstance(profiles, dict):
            raise ConfigError(f"'profiles' must be a table, got {profiles!r}")
        profile_values = profiles.get(profile_name)
        if profile_values is not None and not isinstance(profile_values, dict):
            raise ConfigError(f"profile '{profile_name}' must be a table, got {profile_values!r}")
        if profile_values:
            log.info("applying_profile_settings", profile=profile_name)
            sources.append(profile_values)
        else:
            log.warning("profile_not_found_in_config_files", profile_name=profile_name)

    for source in sources:
        for toml_key, attr in CONFIG_KEY_TO_FINDERCONFIG_ATTR_MAP.items():
            if toml_key in source:
                options[attr] = source[toml_key]

    if "input_paths" in options:
        paths = options["input_paths"]
        if not isinstance(paths, list) or not all(isinstance(p, str) for p in paths):
            raise ConfigError(f"'input_paths' must be a list of strings, got {paths!r}")
        options["input_paths"] = [Path(p) for p in paths]
    for attr in ("workspace_root", "output_file"):
        if attr in options:
            value = options[attr]
            if not isinstance(value, str):
                raise ConfigError(f"'{attr}' must be a string path, got {value!r}")
            options[attr] = Path(value) if value else None
    for attr in ("no_ignore", "absolute_paths", "null_separated", "console_show_summary"):
        if attr in options and not isinstance(options[attr], bool):
            raise ConfigError(f"'{attr}' must be true or false, got {options[attr]!r}")
    return options
