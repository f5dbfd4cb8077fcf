"""Config loader for property files and flat YAML mappings."""

from pathlib import Path
from typing import Any, Dict

import yaml

from oraclemap.core.exceptions import ConfigLoadError
from oraclemap.models.oracle_config import OracleConfig

YAML_SUFFIXES = (".yaml", ".yml")


def load_properties(path: str) -> Dict[str, str]:
    """
    Read a flat property mapping from a ``.properties`` or YAML file.

    Property files hold one ``key=value`` (or ``key: value``) per line; lines
    starting with ``#`` or ``!`` are comments. YAML files must contain a flat
    mapping; scalar values are turned back into property strings.

    Args:
        path: Path to the configuration file

    Returns:
        Property keys to string values, in file order

    Raises:
        ConfigLoadError: If the file is missing, unreadable or malformed
    """
    config_path = Path(path)
    if not config_path.exists():
        raise ConfigLoadError(f"Config file not found: {path}")

    try:
        text = config_path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigLoadError(
            f"Cannot read config file: {e}", context={"path": str(path)}
        ) from e

    if config_path.suffix.lower() in YAML_SUFFIXES:
        return _parse_yaml(text, path)
    return _parse_properties(text, path)


def load_config(path: str) -> OracleConfig:
    """
    Load and validate an OracleConfig from a file.

    Raises:
        ConfigLoadError: If the file cannot be read
        InvalidInputError: If a property is unknown or malformed
        ConfigurationError: If two properties contradict each other
    """
    return OracleConfig.from_properties(load_properties(path))


def _parse_properties(text: str, path: str) -> Dict[str, str]:
    properties: Dict[str, str] = {}
    for line_number, raw_line in enumerate(text.splitlines(), start=1):
        line = raw_line.strip()
        if not line or line.startswith(("#", "!")):
            continue
        separator = min(
            (index for index in (line.find("="), line.find(":")) if index != -1),
            default=-1,
        )
        if separator == -1:
            raise ConfigLoadError(
                f"Expected key=value on line {line_number}",
                context={"path": str(path), "line": raw_line},
            )
        key = line[:separator].strip()
        properties[key] = line[separator + 1 :].strip()
    return properties


def _parse_yaml(text: str, path: str) -> Dict[str, str]:
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise ConfigLoadError(
            f"Invalid YAML in config file: {e}", context={"path": str(path)}
        ) from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigLoadError(
            "Config file must contain a YAML dictionary", context={"path": str(path)}
        )
    return {str(key): _to_property_string(value) for key, value in data.items()}


def _to_property_string(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, bool):
        return str(value).lower()
    return str(value)
