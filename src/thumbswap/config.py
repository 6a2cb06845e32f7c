"""Configuration for thumbswap.

Values come from built-in defaults, then an optional TOML file, then
``THUMBSWAP_<SECTION>_<FIELD>`` environment variables. Command-line flags
are applied on top by the CLI.
"""
import logging
import os
import tomllib
from pathlib import Path
from typing import Any, Dict, Optional, Tuple

from pydantic import BaseModel, Field

logger = logging.getLogger(__name__)

ENV_PREFIX = "THUMBSWAP"
CONFIG_FILE_ENV = "THUMBSWAP_CONFIG_FILE"

TRUE_VALUES = {"true", "1", "yes", "on"}
FALSE_VALUES = {"false", "0", "no", "off"}


class PickerConfig(BaseModel):
    """Picker executable and the actions run on its selection."""

    binary: str = Field("target/release/thumbs", description="Picker path, relative to --dir unless absolute")
    command: str = Field("tmux set-buffer {}", description="Command run on a normal selection")
    upcase_command: str = Field("tmux set-buffer {} && tmux paste-buffer", description="Command run on an upcase selection")
    osc52: bool = Field(False, description="Also copy via an OSC 52 escape sequence")


class RuntimeConfig(BaseModel):
    """How the orchestration talks to tmux and the picker."""

    result_file: str = Field("/tmp/thumbs-last", description="File the picker writes its selection to")
    window_name: str = Field("[thumbs]", description="Name of the hidden picker window")
    shell: str = Field("bash", description="Shell used to run the selected command")
    osc52_delay: float = Field(0.1, description="Seconds to wait before writing the OSC 52 sequence")
    wait_timeout: Optional[float] = Field(None, description="Give up waiting for the picker after this many seconds")


class LogConfig(BaseModel):
    """Logging settings."""

    level: str = Field("WARNING", description="Log level")
    file: Optional[str] = Field(None, description="Also log to this file")


class Config(BaseModel):
    """Complete thumbswap configuration."""

    picker: PickerConfig = Field(default_factory=PickerConfig)
    runtime: RuntimeConfig = Field(default_factory=RuntimeConfig)
    log: LogConfig = Field(default_factory=LogConfig)


_config: Optional[Config] = None


def generate_env_var_name(section: str, field: str) -> str:
    """Environment variable that overrides ``section.field``."""
    return f"{ENV_PREFIX}_{section.upper()}_{field.upper()}"


def get_all_env_mappings() -> Dict[str, Tuple[str, str]]:
    """Map every environment variable name to its (section, field)."""
    mappings = {}
    for section, section_field in Config.model_fields.items():
        for field in section_field.annotation.model_fields:
            mappings[generate_env_var_name(section, field)] = (section, field)
    return mappings


def _convert_env_value(value: str) -> Any:
    """Convert an environment string to bool, int, float or str."""
    lowered = value.lower()
    if lowered in TRUE_VALUES:
        return True
    if lowered in FALSE_VALUES:
        return False

    try:
        return int(value)
    except ValueError:
        pass

    try:
        return float(value)
    except ValueError:
        pass

    return value


def _field_annotation(section: str, field: str) -> Any:
    section_model = Config.model_fields[section].annotation
    return section_model.model_fields[field].annotation


def load_all_env_overrides() -> Dict[str, Dict[str, Any]]:
    """Collect overrides from every ``THUMBSWAP_*`` variable that is set."""
    overrides: Dict[str, Dict[str, Any]] = {}
    for env_var, (section, field) in get_all_env_mappings().items():
        value = os.environ.get(env_var)
        if value is None or value == "":
            continue

        annotation = _field_annotation(section, field)
        if annotation in (str, Optional[str]):
            converted = value
        elif annotation is bool:
            converted = _convert_env_value(value)
        else:
            # pydantic parses numeric strings itself
            converted = value

        overrides.setdefault(section, {})[field] = converted
        logger.debug(f"{env_var} overrides {section}.{field}")
    return overrides


def default_config_path() -> Path:
    xdg_config_home = os.environ.get("XDG_CONFIG_HOME")
    if xdg_config_home:
        return Path(xdg_config_home).expanduser() / "thumbswap" / "config.toml"
    return Path.home() / ".config" / "thumbswap" / "config.toml"


def _resolve_config_path(config_path: Optional[str]) -> Path:
    if config_path:
        return Path(config_path).expanduser()

    env_path = os.environ.get(CONFIG_FILE_ENV)
    if env_path:
        return Path(env_path).expanduser()

    return default_config_path()


def load_config(config_path: Optional[str] = None) -> Config:
    """Load configuration from file and environment.

    Args:
        config_path: Explicit TOML file, otherwise THUMBSWAP_CONFIG_FILE or
            the XDG config location is used. A missing file means defaults.

    Returns:
        The effective configuration
    """
    path = _resolve_config_path(config_path)

    data: Dict[str, Any] = {}
    if path.is_file():
        logger.debug(f"Loading config from {path}")
        with open(path, "rb") as f:
            data = tomllib.load(f)

    for section, values in load_all_env_overrides().items():
        merged = dict(data.get(section, {}))
        merged.update(values)
        data[section] = merged

    return Config(**data)


def get_config() -> Config:
    """Return the process-wide configuration, loading it on first use."""
    global _config
    if _config is None:
        _config = load_config()
    return _config


def set_config(config: Optional[Config]):
    """Replace the process-wide configuration (None forces a reload)."""
    global _config
    _config = config


def _format_toml_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float)):
        return repr(value)
    escaped = str(value).replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'


def _format_env_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def dump_config_toml(config: Config) -> str:
    """Render ``config`` as TOML, leaving out unset values."""
    lines = []
    for section, values in config.model_dump().items():
        if lines:
            lines.append("")
        lines.append(f"[{section}]")
        for field, value in values.items():
            if value is None:
                continue
            lines.append(f"{field} = {_format_toml_value(value)}")
    return "\n".join(lines) + "\n"


def dump_config_env(config: Config) -> str:
    """Render ``config`` as ``THUMBSWAP_*=value`` lines."""
    lines = []
    for section, values in config.model_dump().items():
        for field, value in values.items():
            if value is None:
                continue
            lines.append(f"{generate_env_var_name(section, field)}={_format_env_value(value)}")
    return "\n".join(lines)
