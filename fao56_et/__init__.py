"""
fao56_et - FAO-56 evapotranspiration formulas and the Pearson Type III
distribution.

This package provides:
- Vapour pressure, psychrometric and soil heat flux relationships
- Extraterrestrial, solar, longwave and net radiation estimators
- Reference ET0 by FAO-56 Penman-Monteith and by Hargreaves
- Density, distribution, quantile and random generation for the
  Pearson Type III distribution used in hydrological frequency analysis

All formulas are pure functions over scalars or array-likes.
"""

__version__ = "0.1.0"
__author__ = "fao56_et Developers"

# Distributions
from fao56_et.distributions import (
    ShapeTransform,
    Pearson3Params,
    Pearson3Distribution,
    dpearson3,
    ppearson3,
    qpearson3,
    rpearson3,
)

# Meteorology
from fao56_et.meteo import (
    AVPMethod,
    PressureSource,
    SoilHeatFluxMethod,
    saturation_vapor_pressure,
    slope_vapor_pressure_curve,
    actual_vapor_pressure,
    atmospheric_pressure,
    psychrometric_constant,
    soil_heat_flux,
)

# Radiation
from fao56_et.radiation import (
    SolarRadiationMethod,
    CloudinessSource,
    EmissivityMethod,
    extraterrestrial_radiation,
    daylight_hours,
    solar_radiation,
    clear_sky_radiation,
    net_longwave_radiation,
    incoming_longwave_radiation,
    net_radiation,
)

# Reference ET
from fao56_et.et import (
    ReferenceCrop,
    wind_speed_2m,
    et0_penman_monteith,
    et0_hargreaves,
)

# Exceptions
from fao56_et.utils.exceptions import (
    FAO56Error,
    DataInputError,
    MissingInputError,
    ComputationError,
    ParameterDomainError,
    RadiationBalanceError,
    ConfigurationError,
)

__all__ = [
    # Version
    '__version__',
    '__author__',

    # Distributions
    'ShapeTransform',
    'Pearson3Params',
    'Pearson3Distribution',
    'dpearson3',
    'ppearson3',
    'qpearson3',
    'rpearson3',

    # Meteorology
    'AVPMethod',
    'PressureSource',
    'SoilHeatFluxMethod',
    'saturation_vapor_pressure',
    'slope_vapor_pressure_curve',
    'actual_vapor_pressure',
    'atmospheric_pressure',
    'psychrometric_constant',
    'soil_heat_flux',

    # Radiation
    'SolarRadiationMethod',
    'CloudinessSource',
    'EmissivityMethod',
    'extraterrestrial_radiation',
    'daylight_hours',
    'solar_radiation',
    'clear_sky_radiation',
    'net_longwave_radiation',
    'incoming_longwave_radiation',
    'net_radiation',

    # Reference ET
    'ReferenceCrop',
    'wind_speed_2m',
    'et0_penman_monteith',
    'et0_hargreaves',

    # Exceptions
    'FAO56Error',
    'DataInputError',
    'MissingInputError',
    'ComputationError',
    'ParameterDomainError',
    'RadiationBalanceError',
    'ConfigurationError',
]
