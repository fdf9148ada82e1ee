"""Meteorological relationships: vapour pressure, psychrometrics, soil heat flux."""

from .vapor_pressure import (
    AVPMethod,
    saturation_vapor_pressure,
    slope_vapor_pressure_curve,
    mean_saturation_vapor_pressure,
    select_avp_method,
    actual_vapor_pressure,
)
from .psychrometrics import (
    PressureSource,
    select_pressure_source,
    atmospheric_pressure,
    psychrometric_constant,
)
from .soil_heat import (
    SoilHeatFluxMethod,
    select_soil_heat_flux_method,
    soil_heat_flux,
)

__all__ = [
    'AVPMethod',
    'saturation_vapor_pressure',
    'slope_vapor_pressure_curve',
    'mean_saturation_vapor_pressure',
    'select_avp_method',
    'actual_vapor_pressure',
    'PressureSource',
    'select_pressure_source',
    'atmospheric_pressure',
    'psychrometric_constant',
    'SoilHeatFluxMethod',
    'select_soil_heat_flux_method',
    'soil_heat_flux',
]
