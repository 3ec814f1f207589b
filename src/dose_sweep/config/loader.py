"""
Configuration loading utilities.
"""
import os
import yaml
from typing import Dict, Any, get_type_hints
from ..errors import ConfigError
from .settings import SweepSettings


def load_yaml_config(path: str) -> Dict[str, Any]:
    """Load configuration from a YAML file.

    Raises:
        ConfigError: The file is not valid YAML or does not hold a mapping
    """
    if not os.path.exists(path):
        return {}

    with open(path, 'r') as f:
        try:
            data = yaml.safe_load(f)
        except yaml.YAMLError as exc:
            raise ConfigError(f"could not parse config file {path}: {exc}") from exc

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(
            f"config file {path} must hold a mapping of settings, not {type(data).__name__}"
        )
    return data


def _coerce(key: str, field_type, value):
    # YAML 1.1 reads exponent-only floats such as 1e-6 as strings
    if field_type is bool and isinstance(value, str):
        return value.lower() == "true"
    if field_type in (int, float, str):
        try:
            return field_type(value)
        except (TypeError, ValueError) as exc:
            raise ConfigError(f"setting {key}={value!r} is not a valid {field_type.__name__}") from exc
    return value


def load_settings_from_yaml(path: str) -> SweepSettings:
    """Load SweepSettings from a YAML file.

    Unknown keys are ignored; keys missing from the file keep their defaults.
    """
    data = load_yaml_config(path)
    field_types = get_type_hints(SweepSettings)
    filtered_data = {
        k: _coerce(k, field_types[k], v) for k, v in data.items() if k in field_types
    }
    return SweepSettings(**filtered_data)
