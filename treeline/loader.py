# loader.py

import os
import json
import tomllib
from pathlib import Path
from dataclasses import fields
from typing import Any, Dict, Mapping, Optional, Union

from .logger import Logger
from .config import PrintConfig, StyleWhen
from .indent import IndentChars
from .style import Style, parse_color

CONFIG_ENV_VAR = "TREELINE_CONFIG"
ENV_PREFIX = "TREELINE_"
CONFIG_FILE_NAME = "treeline.toml"

STYLE_SECTIONS = ('branch', 'leaf')
STYLE_FLAGS = tuple(f.name for f in fields(Style) if f.name not in ('foreground', 'background'))
STYLE_FIELDS = ('foreground', 'background') + STYLE_FLAGS
ENV_KEYS = ('depth', 'indent', 'styled', 'characters')
STYLED_ALIASES = {'interactive': 'tty'}

TRUE_VALUES = {'1', 'true', 'yes', 'on'}
FALSE_VALUES = {'0', 'false', 'no', 'off'}

logger = Logger(__name__)

class ConfigError(ValueError):
    """Raised when a configuration file or value cannot be used."""

def default_config_path(environ: Optional[Mapping[str, str]] = None) -> Path:
    """Return the config file used when no path is given."""
    environ = os.environ if environ is None else environ
    if environ.get(CONFIG_ENV_VAR):
        return Path(environ[CONFIG_ENV_VAR])
    base = environ.get("XDG_CONFIG_HOME") or os.path.join(Path.home(), ".config")
    return Path(base) / CONFIG_FILE_NAME

def read_config_file(path: Union[str, Path]) -> Dict[str, Any]:
    """
    Read a TOML or JSON config file into a dict.

    Raises:
        ConfigError: if the file cannot be read or parsed
    """
    path = Path(path)
    try:
        if path.suffix == ".json":
            with open(path, encoding="utf-8") as f:
                data = json.load(f)
        else:
            with open(path, "rb") as f:
                data = tomllib.load(f)
    except FileNotFoundError as e:
        raise ConfigError(f"Config file '{path}' does not exist") from e
    except (OSError, json.JSONDecodeError, tomllib.TOMLDecodeError) as e:
        raise ConfigError(f"Cannot read config file '{path}': {e}") from e
    if not isinstance(data, dict):
        raise ConfigError(f"Config file '{path}' must contain a table")
    return data

def env_overrides(environ: Mapping[str, str]) -> Dict[str, Any]:
    """
    Collect TREELINE_* variables into a settings dict.

    TREELINE_DEPTH=4 becomes {'depth': '4'} and TREELINE_LEAF_BOLD=true
    becomes {'leaf': {'bold': 'true'}}. Variables that name no setting
    are skipped.
    """
    settings: Dict[str, Any] = {}
    for name, value in environ.items():
        if not name.startswith(ENV_PREFIX) or name == CONFIG_ENV_VAR:
            continue
        key = name[len(ENV_PREFIX):].lower()
        section, _, option = key.partition('_')
        if section in STYLE_SECTIONS and option in STYLE_FIELDS:
            settings.setdefault(section, {})[option] = value
        elif key in ENV_KEYS:
            settings[key] = value
        else:
            logger.debug(f"Skipping unrecognized environment variable {name}")
    return settings

def merge_settings(base: Dict[str, Any], overlay: Mapping[str, Any]) -> Dict[str, Any]:
    merged = dict(base)
    for key, value in overlay.items():
        if isinstance(value, Mapping) and isinstance(merged.get(key), Mapping):
            merged[key] = {**merged[key], **value}
        else:
            merged[key] = value
    return merged

def _to_int(key: str, value: Any, minimum: int = 0) -> int:
    if isinstance(value, bool):
        raise ConfigError(f"'{key}' must be an integer, got {value!r}")
    try:
        number = int(value)
    except (TypeError, ValueError) as e:
        raise ConfigError(f"'{key}' must be an integer, got {value!r}") from e
    if number < minimum:
        raise ConfigError(f"'{key}' must be at least {minimum}, got {number}")
    return number

def _to_bool(key: str, value: Any) -> bool:
    if isinstance(value, bool):
        return value
    text = str(value).strip().lower()
    if text in TRUE_VALUES:
        return True
    if text in FALSE_VALUES:
        return False
    raise ConfigError(f"'{key}' must be a boolean, got {value!r}")

def _to_color(key: str, value: Any):
    # Environment values arrive as strings, "10" means palette index 10
    if isinstance(value, str) and value.strip().isdigit():
        value = int(value)
    try:
        parse_color(value)
    except ValueError as e:
        raise ConfigError(f"'{key}': {e}") from e
    return value

def style_from_mapping(section: str, data: Any) -> Style:
    """Build a Style from a config table, validating every field."""
    if not isinstance(data, Mapping):
        raise ConfigError(f"'{section}' must be a table")
    values: Dict[str, Any] = {}
    for key, value in data.items():
        name = f"{section}.{key}"
        if key in ('foreground', 'background'):
            values[key] = _to_color(name, value)
        elif key in STYLE_FLAGS:
            values[key] = _to_bool(name, value)
        else:
            raise ConfigError(f"Unknown style option '{name}'")
    return Style(**values)

def config_from_mapping(data: Mapping[str, Any]) -> PrintConfig:
    """
    Build a PrintConfig from a settings mapping.

    Keys missing from data keep their defaults.

    Raises:
        ConfigError: on unknown keys or invalid values
    """
    config = PrintConfig()
    for key, value in data.items():
        if key == 'depth':
            config.depth = _to_int(key, value)
        elif key == 'indent':
            config.indent = _to_int(key, value, minimum=1)
        elif key == 'characters':
            try:
                config.characters = IndentChars.from_value(value)
            except ValueError as e:
                raise ConfigError(f"'characters': {e}") from e
        elif key in STYLE_SECTIONS:
            setattr(config, key, style_from_mapping(key, value))
        elif key == 'styled':
            text = str(value).strip().lower()
            try:
                config.styled = StyleWhen(STYLED_ALIASES.get(text, text))
            except ValueError as e:
                raise ConfigError(
                    f"'styled' must be one of never, always, tty, got {value!r}") from e
        else:
            raise ConfigError(f"Unknown config option '{key}'")
    return config

def load_config(path: Optional[Union[str, Path]] = None,
                environ: Optional[Mapping[str, str]] = None) -> PrintConfig:
    """
    Load a PrintConfig from a config file and TREELINE_* variables.

    Args:
        path: Config file to read. When None, TREELINE_CONFIG or the default
              location is used, and a missing default file is skipped.
        environ: Environment to read, os.environ when None

    Returns:
        The loaded PrintConfig, environment values taking precedence
    """
    environ = os.environ if environ is None else environ
    explicit = path is not None or bool(environ.get(CONFIG_ENV_VAR))
    config_path = Path(path) if path is not None else default_config_path(environ)

    settings: Dict[str, Any] = {}
    if explicit or config_path.exists():
        settings = read_config_file(config_path)
        logger.debug(f"Read config file {config_path}")
    else:
        logger.debug(f"No config file at {config_path}, using defaults")

    return config_from_mapping(merge_settings(settings, env_overrides(environ)))

def config_from_env(environ: Optional[Mapping[str, str]] = None) -> PrintConfig:
    """Load the configuration, falling back to defaults if it is invalid."""
    try:
        return load_config(environ=environ)
    except ConfigError as e:
        logger.warning(f"Ignoring configuration: {e}")
        return PrintConfig()
