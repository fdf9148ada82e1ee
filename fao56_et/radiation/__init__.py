"""Radiation balance module for the FAO-56 formula library."""

from .shortwave import (
    SolarRadiationMethod,
    day_of_year,
    default_day_sequence,
    sunset_hour_angle,
    extraterrestrial_radiation,
    daylight_hours,
    select_solar_radiation_method,
    solar_radiation,
    clear_sky_radiation,
)
from .longwave import (
    CloudinessSource,
    EmissivityMethod,
    select_cloudiness_source,
    net_longwave_radiation,
    clear_sky_emissivity,
    incoming_longwave_radiation,
)
from .net_radiation import net_shortwave_radiation, net_radiation

__all__ = [
    'SolarRadiationMethod',
    'day_of_year',
    'default_day_sequence',
    'sunset_hour_angle',
    'extraterrestrial_radiation',
    'daylight_hours',
    'select_solar_radiation_method',
    'solar_radiation',
    'clear_sky_radiation',
    'CloudinessSource',
    'EmissivityMethod',
    'select_cloudiness_source',
    'net_longwave_radiation',
    'clear_sky_emissivity',
    'incoming_longwave_radiation',
    'net_shortwave_radiation',
    'net_radiation',
]
