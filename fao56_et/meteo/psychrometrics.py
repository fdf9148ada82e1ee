"""Atmospheric pressure and the psychrometric constant (FAO-56 eqs. 7-8)."""

import logging
from enum import Enum
from typing import Optional

from ..core.arrays import ArrayLike, as_float_array, like_input
from ..core.constants import (
    STANDARD_PRESSURE_KPA,
    STANDARD_TEMPERATURE,
    LAPSE_RATE,
    BAROMETRIC_EXPONENT,
    PSYCHROMETRIC_FACTOR,
)
from ..utils.exceptions import MissingInputError

logger = logging.getLogger(__name__)


class PressureSource(Enum):
    """Where the atmospheric pressure comes from."""
    MEASURED = "measured"
    ELEVATION = "elevation"


def select_pressure_source(
    pres: Optional[ArrayLike] = None,
    z: Optional[ArrayLike] = None
) -> PressureSource:
    """
    Prefer a measured pressure, fall back to the elevation estimate.

    Raises:
        MissingInputError: If neither ``pres`` nor ``z`` is given
    """
    if pres is not None:
        return PressureSource.MEASURED
    if z is not None:
        return PressureSource.ELEVATION
    raise MissingInputError(
        "If pres is not provided, z (elevation) must be provided",
        alternatives=["pres", "z"],
        input_type="pressure"
    )


def atmospheric_pressure(z: ArrayLike):
    """
    Atmospheric pressure from elevation with the simplified ideal gas law.

    Args:
        z: Elevation above sea level [m]

    Returns:
        Atmospheric pressure [kPa]
    """
    z_arr = as_float_array(z)
    pres = STANDARD_PRESSURE_KPA * (
        (STANDARD_TEMPERATURE - LAPSE_RATE * z_arr) / STANDARD_TEMPERATURE
    ) ** BAROMETRIC_EXPONENT
    return like_input(pres, z)


def psychrometric_constant(pres: Optional[ArrayLike] = None, z: Optional[ArrayLike] = None):
    """
    Psychrometric constant.

    Args:
        pres: Atmospheric pressure [kPa]
        z: Elevation above sea level [m]; used only when ``pres`` is None

    Returns:
        Psychrometric constant γ [kPa °C-1]

    Raises:
        MissingInputError: If neither ``pres`` nor ``z`` is given
    """
    source = select_pressure_source(pres, z)
    logger.debug(f"Pressure source: {source.value}")

    if source is PressureSource.MEASURED:
        pressure, origin = pres, pres
    elif source is PressureSource.ELEVATION:
        pressure, origin = atmospheric_pressure(z), z
    else:
        raise ValueError(f"Unhandled pressure source: {source}")

    return like_input(PSYCHROMETRIC_FACTOR * as_float_array(pressure), origin)
