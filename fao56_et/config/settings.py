"""Configuration settings for the FAO-56 formula library."""

from pathlib import Path

# ============================================================================
# PATHS
# ============================================================================

# Base project directory
BASE_DIR = Path(__file__).resolve().parent.parent

# ============================================================================
# RADIATION PARAMETERS
# ============================================================================

# Angstrom formula coefficients, Rs = (a + b * n/N) * Ra
ANGSTROM = {
    "a": 0.25,
    "b": 0.50,
}

# Elevation term of the clear-sky transmissivity, Rso = (a + b + 2e-5 * z) * Ra
CLEAR_SKY_ELEVATION_FACTOR = 2e-5

# Default scheme for the clear-sky emissivity of incoming longwave radiation
DEFAULT_EMISSIVITY_METHOD = "KON"

# Day-of-year cycle assumed when no dates are given: three common years and
# one leap year, starting on 1 January
DEFAULT_YEAR_LENGTHS = (365, 365, 365, 366)

# ============================================================================
# REFERENCE ET PARAMETERS
# ============================================================================

# Albedo of the hypothetical grass reference crop
REFERENCE_ALBEDO = 0.23

# Height of the wind speed measurement (m)
WIND_MEASUREMENT_HEIGHT = 10.0

# Penman-Monteith numerator (Cn) and denominator (Cd) constants per reference crop
REFERENCE_CROPS = {
    "short": {"cn": 900.0, "cd": 0.34},
    "tall": {"cn": 1600.0, "cd": 0.38},
}

# Hargreaves coefficients, ET0 = coefficient * 0.408 * Ra * sqrt(Tmax - Tmin) * (Tmean + offset)
HARGREAVES = {
    "coefficient": 0.0023,
    "temperature_offset": 17.8,
}

# Soil heat flux coefficients for monthly steps
SOIL_HEAT_FLUX = {
    "next_month": 0.07,
    "current_month": 0.14,
}

# ============================================================================
# LOGGING CONFIGURATION
# ============================================================================

LOGGING = {
    "level": "INFO",
    "format": "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | "
              "<magenta>{extra[step]}</magenta> | <cyan>{message}</cyan>",
    "file_log": False,
    "log_file": BASE_DIR / "logs" / "fao56_et.log",
    "rotation": "10 MB",
    "retention": "10 files",
}

# ============================================================================
# VALIDATION RANGES
# ============================================================================

VALIDATION_RANGES = {
    "air_temperature": (-60.0, 60.0),  # °C
    "relative_humidity": (0.0, 100.0),  # %
    "wind_speed": (0.0, 60.0),  # m/s
    "cloud_fraction": (0.0, 1.0),
    "et0": (0.0, 30.0),  # mm/day
}

# ============================================================================
# CLI OVERRIDES
# ============================================================================

# Keys a CLI configuration file may set, with the default each one overrides
CLI_DEFAULTS = {
    "angstrom_a": ANGSTROM["a"],
    "angstrom_b": ANGSTROM["b"],
    "albedo": REFERENCE_ALBEDO,
    "wind_height": WIND_MEASUREMENT_HEIGHT,
    "emissivity_method": DEFAULT_EMISSIVITY_METHOD,
    "seed": None,
}


def merge_cli_config(overrides: dict = None) -> dict:
    """Return ``CLI_DEFAULTS`` updated with ``overrides``.

    Args:
        overrides: Mapping loaded from a configuration file

    Returns:
        New dictionary of effective settings

    Raises:
        ConfigurationError: If ``overrides`` contains an unknown key
    """
    from ..utils.exceptions import ConfigurationError

    config = dict(CLI_DEFAULTS)
    for key, value in (overrides or {}).items():
        if key not in CLI_DEFAULTS:
            raise ConfigurationError(
                f"Unknown configuration key: {key}. Valid keys: {sorted(CLI_DEFAULTS)}",
                config_param=key
            )
        config[key] = value
    return config
