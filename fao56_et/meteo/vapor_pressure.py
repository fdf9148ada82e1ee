"""
Vapour pressure relationships (FAO-56, chapter 3).

Formulas:
    e°(T) = 0.6108 * exp(17.27 * T / (T + 237.3))           (eq. 11)
    Δ     = 4098 * e°(T) / (T + 237.3)²                      (eq. 13)

Actual vapour pressure (ea) is estimated from whichever humidity data are
available, in this order of preference:

    RH_MAX_MIN  ea = (e°(Tmax) * RHmin + e°(Tmin) * RHmax) / 200   (eq. 17)
    RH_MEAN     ea = (e°(Tmax) + e°(Tmin)) * RHmean / 200          (eq. 19)
    RH_MAX      ea = e°(Tmin) * RHmax / 100                         (eq. 18)
    TMIN_ONLY   ea = e°(Tmin), dewpoint taken as Tmin               (eq. 48)
"""

import logging
from enum import Enum
from typing import Optional

import numpy as np

from ..core.arrays import ArrayLike, as_float_array, like_input
from ..core.constants import TETENS_A, TETENS_B, TETENS_C
from ..utils.validation import check_relative_humidity

logger = logging.getLogger(__name__)


class AVPMethod(Enum):
    """Humidity data used to estimate actual vapour pressure."""
    TMIN_ONLY = "tmin_only"
    RH_MAX_MIN = "rh_max_min"
    RH_MEAN = "rh_mean"
    RH_MAX = "rh_max"


def saturation_vapor_pressure(t: ArrayLike):
    """
    Saturation vapour pressure at air temperature ``t``.

    Args:
        t: Air temperature [°C]

    Returns:
        Saturation vapour pressure [kPa]
    """
    t_arr = as_float_array(t)
    return like_input(TETENS_A * np.exp(TETENS_B * t_arr / (t_arr + TETENS_C)), t)


def slope_vapor_pressure_curve(t: ArrayLike):
    """
    Slope of the saturation vapour pressure curve at temperature ``t``.

    Args:
        t: Daily mean air temperature at 2 m [°C]

    Returns:
        Slope Δ [kPa °C-1]
    """
    t_arr = as_float_array(t)
    es = TETENS_A * np.exp(TETENS_B * t_arr / (t_arr + TETENS_C))
    return like_input(4098.0 * es / (t_arr + TETENS_C) ** 2, t)


def mean_saturation_vapor_pressure(tmax: ArrayLike, tmin: ArrayLike):
    """Mean saturation vapour pressure es = (e°(Tmax) + e°(Tmin)) / 2 [kPa] (eq. 12)."""
    es = (as_float_array(saturation_vapor_pressure(tmax)) +
          as_float_array(saturation_vapor_pressure(tmin))) / 2.0
    return like_input(es, tmax, tmin)


def select_avp_method(
    tmax: Optional[ArrayLike] = None,
    rhmax: Optional[ArrayLike] = None,
    rhmean: Optional[ArrayLike] = None,
    rhmin: Optional[ArrayLike] = None
) -> AVPMethod:
    """
    Choose the actual vapour pressure estimate for the available inputs.

    Without ``tmax`` only the minimum temperature can be used. With
    ``tmax``, the first complete humidity option wins: RHmax and RHmin,
    then RHmean, then RHmax alone.
    """
    if tmax is None:
        return AVPMethod.TMIN_ONLY
    if rhmax is not None and rhmin is not None:
        return AVPMethod.RH_MAX_MIN
    if rhmean is not None:
        return AVPMethod.RH_MEAN
    if rhmax is not None:
        return AVPMethod.RH_MAX
    return AVPMethod.TMIN_ONLY


def actual_vapor_pressure(
    tmin: ArrayLike,
    tmax: Optional[ArrayLike] = None,
    rhmax: Optional[ArrayLike] = None,
    rhmean: Optional[ArrayLike] = None,
    rhmin: Optional[ArrayLike] = None
):
    """
    Estimate actual vapour pressure.

    ``tmin`` must be provided. The humidity inputs used are chosen by
    :func:`select_avp_method`; unused inputs are ignored.

    Args:
        tmin: Daily minimum air temperature at 2 m [°C]
        tmax: Daily maximum air temperature at 2 m [°C]
        rhmax: Daily maximum relative humidity [%]
        rhmean: Daily mean relative humidity [%]
        rhmin: Daily minimum relative humidity [%]

    Returns:
        Actual vapour pressure ea [kPa]
    """
    method = select_avp_method(tmax, rhmax, rhmean, rhmin)
    logger.debug(f"Actual vapour pressure method: {method.value}")

    es_tmin = as_float_array(saturation_vapor_pressure(tmin))

    if method is AVPMethod.TMIN_ONLY:
        ea = es_tmin
        inputs = (tmin,)
    elif method is AVPMethod.RH_MAX_MIN:
        check_relative_humidity(rhmax)
        check_relative_humidity(rhmin)
        es_tmax = as_float_array(saturation_vapor_pressure(tmax))
        ea = (es_tmax * as_float_array(rhmin) + es_tmin * as_float_array(rhmax)) / 200.0
        inputs = (tmin, tmax, rhmax, rhmin)
    elif method is AVPMethod.RH_MEAN:
        check_relative_humidity(rhmean)
        es_tmax = as_float_array(saturation_vapor_pressure(tmax))
        ea = (es_tmax + es_tmin) * as_float_array(rhmean) / 200.0
        inputs = (tmin, tmax, rhmean)
    elif method is AVPMethod.RH_MAX:
        check_relative_humidity(rhmax)
        ea = es_tmin * as_float_array(rhmax) / 100.0
        inputs = (tmin, rhmax)
    else:
        raise ValueError(f"Unhandled vapour pressure method: {method}")

    return like_input(ea, *inputs)
