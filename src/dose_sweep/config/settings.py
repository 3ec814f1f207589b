"""
Configuration settings using dataclasses.
"""
import os
from dataclasses import dataclass, field
from . import defaults
from ..errors import ConfigError


def _env_bool(name: str, default: bool) -> bool:
    return os.getenv(name, str(default)).lower() == "true"


def _env_value(name: str, default, cast):
    raw = os.getenv(name)
    if raw is None:
        return default
    try:
        return cast(raw)
    except ValueError as exc:
        raise ConfigError(f"environment variable {name}={raw!r} is not a valid {cast.__name__}") from exc


@dataclass
class SweepSettings:
    """Central configuration for a parse-and-sweep run."""

    # Sweep settings
    min_conc: float = field(default=defaults.DEFAULT_MIN_CONC)
    max_conc: float = field(default=defaults.DEFAULT_MAX_CONC)
    steps_per_decade: int = field(default=defaults.DEFAULT_STEPS_PER_DECADE)
    precision: float = field(default=defaults.DEFAULT_PRECISION)

    # Parser settings
    max_samples: int = field(default=defaults.DEFAULT_MAX_SAMPLES)
    max_line_bytes: int = field(default=defaults.DEFAULT_MAX_LINE_BYTES)
    max_field_bytes: int = field(default=defaults.DEFAULT_MAX_FIELD_BYTES)
    strict_numbers: bool = field(default=defaults.DEFAULT_STRICT_NUMBERS)

    # Output settings
    default_out_name: str = field(default=defaults.DEFAULT_OUT_NAME)
    float_format: str = field(default=defaults.DEFAULT_FLOAT_FORMAT)

    def __post_init__(self):
        # A line needs room for at least one byte and its newline
        if self.max_line_bytes < 2:
            raise ConfigError(f"max_line_bytes must be at least 2, got {self.max_line_bytes}")
        if self.max_field_bytes < 1:
            raise ConfigError(f"max_field_bytes must be at least 1, got {self.max_field_bytes}")
        if self.max_samples < 0:
            raise ConfigError(f"max_samples must not be negative, got {self.max_samples}")

    @classmethod
    def load_from_env(cls) -> 'SweepSettings':
        """Load settings from environment variables.

        Raises:
            ConfigError: A variable cannot be converted or is out of range
        """
        return cls(
            min_conc=_env_value("DOSE_SWEEP_MIN_CONC", defaults.DEFAULT_MIN_CONC, float),
            max_conc=_env_value("DOSE_SWEEP_MAX_CONC", defaults.DEFAULT_MAX_CONC, float),
            steps_per_decade=_env_value("DOSE_SWEEP_STEPS_PER_DECADE", defaults.DEFAULT_STEPS_PER_DECADE, int),
            precision=_env_value("DOSE_SWEEP_PRECISION", defaults.DEFAULT_PRECISION, float),
            max_samples=_env_value("DOSE_SWEEP_MAX_SAMPLES", defaults.DEFAULT_MAX_SAMPLES, int),
            max_line_bytes=_env_value("DOSE_SWEEP_MAX_LINE_BYTES", defaults.DEFAULT_MAX_LINE_BYTES, int),
            max_field_bytes=_env_value("DOSE_SWEEP_MAX_FIELD_BYTES", defaults.DEFAULT_MAX_FIELD_BYTES, int),
            strict_numbers=_env_bool("DOSE_SWEEP_STRICT_NUMBERS", defaults.DEFAULT_STRICT_NUMBERS),
            default_out_name=os.getenv("DOSE_SWEEP_OUT_NAME", defaults.DEFAULT_OUT_NAME),
            float_format=os.getenv("DOSE_SWEEP_FLOAT_FORMAT", defaults.DEFAULT_FLOAT_FORMAT),
        )
