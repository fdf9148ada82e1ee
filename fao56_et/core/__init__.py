"""Core module for the FAO-56 formula library."""

from .constants import (
    STEFAN_BOLTZMANN,
    STEFAN_BOLTZMANN_DAILY,
    SOLAR_CONSTANT,
    RA_FACTOR,
    STANDARD_PRESSURE_KPA,
    PSYCHROMETRIC_FACTOR,
    LATENT_HEAT_VAPORIZATION,
    MJ_TO_MM,
    FREEZING_POINT,
    CELSIUS_TO_KELVIN,
    DEG_TO_RAD,
    RAD_TO_DEG,
)

__all__ = [
    'STEFAN_BOLTZMANN',
    'STEFAN_BOLTZMANN_DAILY',
    'SOLAR_CONSTANT',
    'RA_FACTOR',
    'STANDARD_PRESSURE_KPA',
    'PSYCHROMETRIC_FACTOR',
    'LATENT_HEAT_VAPORIZATION',
    'MJ_TO_MM',
    'FREEZING_POINT',
    'CELSIUS_TO_KELVIN',
    'DEG_TO_RAD',
    'RAD_TO_DEG',
]
