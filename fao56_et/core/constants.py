"""Physical constants for the FAO-56 formula library."""

import numpy as np

# ============================================================================
# RADIATION CONSTANTS
# ============================================================================

# Stefan-Boltzmann constant (W/m²/K⁴), as used for incoming longwave
STEFAN_BOLTZMANN = 5.67e-8

# Stefan-Boltzmann constant in daily energy units (MJ/K⁴/m²/day), FAO-56 eq. 39
STEFAN_BOLTZMANN_DAILY = 4.903e-9

# Solar constant (MJ/m²/min)
SOLAR_CONSTANT = 0.0820

# 24 * 60 * Gsc, so that Ra = RA_FACTOR * dr / pi * (...)
RA_FACTOR = 118.08

# ============================================================================
# ATMOSPHERIC CONSTANTS
# ============================================================================

# Standard atmospheric pressure at sea level (kPa)
STANDARD_PRESSURE_KPA = 101.3

# Standard temperature used by the barometric formula (K)
STANDARD_TEMPERATURE = 293.0

# Temperature lapse rate used by the barometric formula (K/m)
LAPSE_RATE = 0.0065

# Barometric formula exponent
BAROMETRIC_EXPONENT = 5.26

# cp / (epsilon * lambda) (1/°C), psychrometric constant = PSYCHROMETRIC_FACTOR * P
PSYCHROMETRIC_FACTOR = 0.000665

# Latent heat of vaporization at 20°C (MJ/kg); 1/LAMBDA = 0.408
LATENT_HEAT_VAPORIZATION = 2.45

# MJ/m²/day -> mm/day of evaporated water
MJ_TO_MM = 0.408

# ============================================================================
# VAPOUR PRESSURE (Tetens, FAO-56 eq. 11)
# ============================================================================

TETENS_A = 0.6108
TETENS_B = 17.27
TETENS_C = 237.3

# ============================================================================
# TEMPERATURE CONSTANTS
# ============================================================================

FREEZING_POINT = 273.15
CELSIUS_TO_KELVIN = 273.15

# ============================================================================
# TIME CONSTANTS
# ============================================================================

HOURS_PER_DAY = 24.0
DAYS_PER_HALF_YEAR = 182.5

# ============================================================================
# ANGLE CONVERSIONS
# ============================================================================

DEG_TO_RAD = np.pi / 180.0
RAD_TO_DEG = 180.0 / np.pi

# ============================================================================
# CONVERSION FACTORS
# ============================================================================

KPA_TO_HPA = 10.0

__all__ = [
    'STEFAN_BOLTZMANN', 'STEFAN_BOLTZMANN_DAILY', 'SOLAR_CONSTANT', 'RA_FACTOR',
    'STANDARD_PRESSURE_KPA', 'STANDARD_TEMPERATURE', 'LAPSE_RATE',
    'BAROMETRIC_EXPONENT', 'PSYCHROMETRIC_FACTOR', 'LATENT_HEAT_VAPORIZATION',
    'MJ_TO_MM', 'TETENS_A', 'TETENS_B', 'TETENS_C', 'FREEZING_POINT',
    'CELSIUS_TO_KELVIN', 'HOURS_PER_DAY', 'DAYS_PER_HALF_YEAR', 'DEG_TO_RAD',
    'RAD_TO_DEG', 'KPA_TO_HPA'
]
