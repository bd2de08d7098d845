# sparsetpl/config/loader.py
"""
Loads TemplateSettings from TOML files.

Settings live at the top level of `.sparsetpl.toml` / `sparsetpl.toml`, or
under the `[tool.sparsetpl]` table of `pyproject.toml`. Only the first file
found in the search directory is used.
"""
import toml
from pathlib import Path
from typing import Dict, Any, Optional
import structlog

from sparsetpl.exceptions import ConfigError

from .settings import TemplateSettings, UndefinedPolicy

log = structlog.get_logger(__name__)

PROJECT_CONFIG_FILENAMES = [".sparsetpl.toml", "sparsetpl.toml", "pyproject.toml"]

# expected python type for each recognised key.
CONFIG_KEY_TYPES: Dict[str, type] = {
    "undefined": str,
    "autoescape": bool,
    "encoding": str,
    "strip": bool,
}

def _load_toml_file_data(file_path: Path) -> Dict[str, Any]:
    if not file_path.is_file(): return {}
    log.debug("loading_toml_config_file", path=str(file_path))
    try:
        data = toml.load(file_path)
    except (toml.TomlDecodeError, OSError) as e:
        log.error("config_file_load_error", path=str(file_path), error=str(e))
        raise ConfigError(f"Failed to load config file {file_path}: {e}") from e
    return data.get("tool", {}).get("sparsetpl", {}) if file_path.name == "pyproject.toml" else data

def find_config_file(start_dir: Optional[Path] = None) -> Optional[Path]:
    search_dir = start_dir or Path.cwd()
    for filename in PROJECT_CONFIG_FILENAMES:
        candidate = search_dir / filename
        if candidate.is_file():
            return candidate
    return None

def settings_from_mapping(raw: Dict[str, Any]) -> TemplateSettings:
    """Builds TemplateSettings from raw TOML keys, validating value types."""
    options: Dict[str, Any] = {}
    for key, value in raw.items():
        expected_type = CONFIG_KEY_TYPES.get(key)
        if expected_type is None:
            log.warning("unknown_config_key_ignored", key=key)
            continue
        if not isinstance(value, expected_type):
            raise ConfigError(
                f"Config key '{key}' expects {expected_type.__name__}, got {type(value).__name__}"
            )
        options[key] = value

    if "undefined" in options:
        options["undefined"] = UndefinedPolicy.from_string(options["undefined"])
    return TemplateSettings(**options)

def load_settings(start_dir: Optional[Path] = None) -> TemplateSettings:
    config_path = find_config_file(start_dir)
    if config_path is None:
        log.debug("no_configuration_file_found", search_dir=str(start_dir or Path.cwd()))
        return TemplateSettings()

    log.info("loading_project_local_config", path=str(config_path))
    settings = settings_from_mapping(_load_toml_file_data(config_path))
    log.debug("settings_loaded", source_file=str(config_path), settings=settings)
    return settings
