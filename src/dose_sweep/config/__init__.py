"""Run configuration: defaults, environment overrides, and YAML files."""

from .settings import SweepSettings
from .loader import load_settings_from_yaml

__all__ = ["SweepSettings", "load_settings_from_yaml"]
