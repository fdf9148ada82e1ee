"""
Reference Evapotranspiration (ET0) for the FAO-56 formula library.

FAO-56 Penman-Monteith (Allen et al. 1998, eq. 6; ASCE-EWRI 2005 for the
tall reference):

    ET0 = [0.408 Δ (Rn - G) + γ Cn / (T + 273) u2 (es - ea)]
          / [Δ + γ (1 + Cd u2)]

    - short grass reference: Cn = 900,  Cd = 0.34
    - tall alfalfa reference: Cn = 1600, Cd = 0.38

Hargreaves (eq. 52):

    ET0 = 0.0023 * 0.408 * Ra * (Tmean + 17.8) * sqrt(Tmax - Tmin)

Wind speed measured at height h is reduced to 2 m with the logarithmic
profile (eq. 47):

    u2 = uz * 4.87 / ln(67.8 h - 5.42)
"""

import logging
from enum import Enum
from typing import Optional

import numpy as np

from ..core.arrays import ArrayLike, as_float_array, like_input
from ..core.constants import CELSIUS_TO_KELVIN, MJ_TO_MM
from ..config.settings import (
    REFERENCE_ALBEDO,
    WIND_MEASUREMENT_HEIGHT,
    REFERENCE_CROPS,
    HARGREAVES,
)
from ..meteo.vapor_pressure import (
    AVPMethod,
    actual_vapor_pressure,
    mean_saturation_vapor_pressure,
    slope_vapor_pressure_curve,
)
from ..meteo.psychrometrics import psychrometric_constant
from ..radiation.longwave import net_longwave_radiation
from ..radiation.net_radiation import net_radiation
from ..radiation.shortwave import extraterrestrial_radiation
from ..utils.exceptions import MissingInputError, handle_exception
from ..utils.validation import check_et_range, check_temperature_range, check_wind_speed

logger = logging.getLogger(__name__)


class ReferenceCrop(Enum):
    """Hypothetical reference surface of the Penman-Monteith equation."""
    SHORT = "short"
    TALL = "tall"

    @property
    def cn(self) -> float:
        return REFERENCE_CROPS[self.value]["cn"]

    @property
    def cd(self) -> float:
        return REFERENCE_CROPS[self.value]["cd"]


def wind_speed_2m(ws: ArrayLike, height: float = WIND_MEASUREMENT_HEIGHT):
    """
    Convert wind speed measured at ``height`` to 2 m.

    Args:
        ws: Wind speed at ``height`` [m s-1]
        height: Measurement height [m]

    Returns:
        Wind speed at 2 m [m s-1]
    """
    return like_input(as_float_array(ws) * 4.87 / np.log(67.8 * height - 5.42), ws)


def _resolve_actual_vapor_pressure(tmin, tmax, ea, rhmean):
    if ea is not None:
        logger.debug("Using provided actual vapour pressure")
        return ea
    if rhmean is not None:
        logger.debug(f"Actual vapour pressure method: {AVPMethod.RH_MEAN.value}")
        return actual_vapor_pressure(tmin, tmax, rhmean=rhmean)
    logger.debug(f"Actual vapour pressure method: {AVPMethod.TMIN_ONLY.value}")
    return actual_vapor_pressure(tmin)


@handle_exception
def et0_penman_monteith(
    rs: ArrayLike,
    tmax: ArrayLike,
    tmin: ArrayLike,
    ws: ArrayLike,
    g: ArrayLike = 0.0,
    h_ws: float = WIND_MEASUREMENT_HEIGHT,
    albedo: float = REFERENCE_ALBEDO,
    delta: Optional[ArrayLike] = None,
    gamma: Optional[ArrayLike] = None,
    z: Optional[ArrayLike] = None,
    ea: Optional[ArrayLike] = None,
    es: Optional[ArrayLike] = None,
    rhmean: Optional[ArrayLike] = None,
    pres: Optional[ArrayLike] = None,
    rso: Optional[ArrayLike] = None,
    cld: Optional[ArrayLike] = None,
    crop: ReferenceCrop = ReferenceCrop.SHORT
):
    """
    Estimate ET0 with the FAO-56 Penman-Monteith equation.

    Optional inputs fall back in this order:
        - ea: given, else from ``rhmean`` with Tmax/Tmin, else e°(Tmin)
        - es: given, else mean of e°(Tmax) and e°(Tmin)
        - delta: given, else from the mean of Tmax and Tmin
        - gamma: given, else from ``pres``, else from ``z``
        - cloudiness for Rnl: ``cld`` if given, else Rs/Rso

    Args:
        rs: Incoming shortwave radiation at the crop surface [MJ m-2 day-1]
        tmax: Daily maximum air temperature at 2 m [°C]
        tmin: Daily minimum air temperature at 2 m [°C]
        ws: Wind speed at ``h_ws`` [m s-1]
        g: Soil heat flux [MJ m-2 day-1]; 0 for daily and 10-day steps
        h_ws: Wind measurement height [m]
        albedo: Canopy reflection coefficient
        delta: Slope of the saturation vapour pressure curve [kPa °C-1]
        gamma: Psychrometric constant [kPa °C-1]
        z: Elevation above sea level [m]
        ea: Actual vapour pressure [kPa]
        es: Saturation vapour pressure [kPa]
        rhmean: Daily mean relative humidity [%]
        pres: Atmospheric pressure [kPa]
        rso: Clear-sky shortwave radiation [MJ m-2 day-1]
        cld: Cloud cover [fraction]
        crop: Reference surface

    Returns:
        Reference evapotranspiration ET0 [mm day-1]

    Raises:
        MissingInputError: If neither ``gamma``, ``pres`` nor ``z`` is given,
            or neither ``cld`` nor ``rso`` is given
    """
    tmax_arr = as_float_array(tmax)
    tmin_arr = as_float_array(tmin)
    tmean = (tmax_arr + tmin_arr) / 2.0

    for check, values in ((check_temperature_range, tmax), (check_temperature_range, tmin), (check_wind_speed, ws)):
        is_valid, message = check(values)
        if not is_valid:
            logger.warning(message)

    ea = _resolve_actual_vapor_pressure(tmin, tmax, ea, rhmean)
    if es is None:
        es = mean_saturation_vapor_pressure(tmax, tmin)
    if delta is None:
        delta = slope_vapor_pressure_curve(tmean)
    if gamma is None:
        gamma = psychrometric_constant(pres, z)

    rnl = net_longwave_radiation(tmax, tmin, ea, rs, rso, cld)
    rn = as_float_array(net_radiation(rs, rnl, albedo))

    u2 = as_float_array(wind_speed_2m(ws, h_ws))
    delta = as_float_array(delta)
    gamma = as_float_array(gamma)

    numerator = (
        MJ_TO_MM * delta * (rn - as_float_array(g))
        + gamma * crop.cn / (tmean + CELSIUS_TO_KELVIN) * u2 * (as_float_array(es) - as_float_array(ea))
    )
    denominator = delta + gamma * (1.0 + crop.cd * u2)
    et0 = numerator / denominator

    is_valid, message = check_et_range(et0)
    if not is_valid:
        logger.warning(f"Penman-Monteith ET0: {message}")

    return like_input(et0, rs, tmax, tmin, ws)


@handle_exception
def et0_hargreaves(
    tmax: ArrayLike,
    tmin: ArrayLike,
    tmean: Optional[ArrayLike] = None,
    ra: Optional[ArrayLike] = None,
    lat: Optional[ArrayLike] = None,
    dates=None
):
    """
    Estimate ET0 with the Hargreaves equation.

    Args:
        tmax: Daily maximum air temperature at 2 m [°C]
        tmin: Daily minimum air temperature at 2 m [°C]
        tmean: Daily mean air temperature [°C]; mean of Tmax and Tmin if None
        ra: Extraterrestrial radiation [MJ m-2 day-1]; computed from
            ``lat`` and ``dates`` if None
        lat: Latitude [degrees]
        dates: Day-of-year numbers or dates

    Returns:
        Reference evapotranspiration ET0 [mm day-1]

    Raises:
        MissingInputError: If ``ra`` is None and ``lat`` or ``dates`` is missing
    """
    tmax_arr = as_float_array(tmax)
    tmin_arr = as_float_array(tmin)
    if tmean is None:
        tmean = (tmax_arr + tmin_arr) / 2.0

    if ra is None:
        if lat is None or dates is None:
            raise MissingInputError(
                "If ra is not provided, lat and dates must be provided",
                alternatives=["ra", "lat+dates"],
                input_type="radiation"
            )
        ra = extraterrestrial_radiation(lat, dates)

    et0 = (
        HARGREAVES["coefficient"] * MJ_TO_MM * as_float_array(ra)
        * np.sqrt(tmax_arr - tmin_arr)
        * (as_float_array(tmean) + HARGREAVES["temperature_offset"])
    )
    return like_input(et0, tmax, tmin, ra)


__all__ = [
    'ReferenceCrop',
    'wind_speed_2m',
    'et0_penman_monteith',
    'et0_hargreaves',
]
