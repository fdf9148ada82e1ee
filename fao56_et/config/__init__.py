"""Default coefficients and settings for fao56_et."""

from .settings import (
    ANGSTROM,
    REFERENCE_ALBEDO,
    WIND_MEASUREMENT_HEIGHT,
    REFERENCE_CROPS,
    HARGREAVES,
    VALIDATION_RANGES,
    CLI_DEFAULTS,
    merge_cli_config,
)

__all__ = [
    'ANGSTROM',
    'REFERENCE_ALBEDO',
    'WIND_MEASUREMENT_HEIGHT',
    'REFERENCE_CROPS',
    'HARGREAVES',
    'VALIDATION_RANGES',
    'CLI_DEFAULTS',
    'merge_cli_config',
]
