"""
Longwave radiation calculations.

Net outgoing longwave radiation follows FAO-56 eq. 39:

    Rnl = σ [(Tmax,K⁴ + Tmin,K⁴) / 2] (0.34 - 0.14 √ea) (1.35 Rs/Rso - 0.35)

with σ = 4.903e-9 MJ K-4 m-2 day-1. The relative shortwave radiation
Rs/Rso is written as (1 - cloud fraction) so that an observed cloud cover
can stand in for the radiation ratio.

Incoming longwave radiation is not part of FAO-56 but is provided for
convenience. The atmosphere is treated as a grey body,

    L↓ = ε σ T⁴,   ε = 1 - s + s ε_clear

where s is the cloudiness weight and ε_clear comes from one of several
published clear-sky emissivity schemes (see :class:`EmissivityMethod`).
"""

import logging
from enum import Enum
from typing import Optional, Union

import numpy as np

from ..core.arrays import ArrayLike, as_float_array, like_input
from ..core.constants import (
    STEFAN_BOLTZMANN,
    STEFAN_BOLTZMANN_DAILY,
    CELSIUS_TO_KELVIN,
    KPA_TO_HPA,
)
from ..config.settings import DEFAULT_EMISSIVITY_METHOD
from ..utils.exceptions import MissingInputError, ConfigurationError

logger = logging.getLogger(__name__)


class CloudinessSource(Enum):
    """Where the cloud fraction of eq. 39 comes from."""
    GIVEN = "given"
    RADIATION_RATIO = "radiation_ratio"


class EmissivityMethod(Enum):
    """
    Clear-sky atmospheric emissivity schemes.

    MAR: Marty and Philipona (2000)
    SWI: Swinbank (1963)
    IJ:  Idso and Jackson (1969)
    BRU: Brutsaert (1975)
    SAT: Satterlund (1979)
    KON: Konzelmann et al. (1994)
    """
    MAR = "MAR"
    SWI = "SWI"
    IJ = "IJ"
    BRU = "BRU"
    SAT = "SAT"
    KON = "KON"


def select_cloudiness_source(
    rs: Optional[ArrayLike] = None,
    rso: Optional[ArrayLike] = None,
    cld: Optional[ArrayLike] = None
) -> CloudinessSource:
    """An observed cloud fraction wins over the Rs/Rso ratio."""
    if cld is not None:
        return CloudinessSource.GIVEN
    if rs is not None and rso is not None:
        return CloudinessSource.RADIATION_RATIO
    raise MissingInputError(
        "Must provide rs and rso, or provide cld",
        alternatives=["rs+rso", "cld"],
        input_type="cloudiness"
    )


def cloud_fraction_from_radiation(rs: ArrayLike, rso: ArrayLike) -> np.ndarray:
    """
    Cloud fraction as 1 - Rs/Rso.

    Rs/Rso is capped at 1. An undefined ratio (e.g. Rso = 0 during polar
    night) is treated as fully overcast.
    """
    with np.errstate(divide="ignore", invalid="ignore"):
        ratio = np.minimum(as_float_array(rs) / as_float_array(rso), 1.0)
    cld = np.atleast_1d(1.0 - ratio)
    cld[np.isnan(cld)] = 1.0
    return cld.reshape(np.shape(ratio))


def net_longwave_radiation(
    tmax: ArrayLike,
    tmin: ArrayLike,
    ea: ArrayLike,
    rs: Optional[ArrayLike] = None,
    rso: Optional[ArrayLike] = None,
    cld: Optional[ArrayLike] = None
):
    """
    Estimate net outgoing longwave radiation.

    Args:
        tmax: Daily maximum air temperature at 2 m [°C]
        tmin: Daily minimum air temperature at 2 m [°C]
        ea: Actual vapour pressure [kPa]
        rs: Incoming shortwave radiation at the crop surface [MJ m-2 day-1]
        rso: Clear-sky shortwave radiation [MJ m-2 day-1]
        cld: Cloud cover [fraction]; used instead of ``rs``/``rso`` when given

    Returns:
        Net outgoing longwave radiation Rnl [MJ m-2 day-1]

    Raises:
        MissingInputError: If neither ``cld`` nor both ``rs`` and ``rso`` are given
    """
    source = select_cloudiness_source(rs, rso, cld)
    logger.debug(f"Cloudiness source: {source.value}")

    if source is CloudinessSource.GIVEN:
        cloud = as_float_array(cld)
        inputs = (tmax, tmin, ea, cld)
    elif source is CloudinessSource.RADIATION_RATIO:
        cloud = cloud_fraction_from_radiation(rs, rso)
        inputs = (tmax, tmin, ea, rs, rso)
    else:
        raise ValueError(f"Unhandled cloudiness source: {source}")

    tmax_k = as_float_array(tmax) + CELSIUS_TO_KELVIN
    tmin_k = as_float_array(tmin) + CELSIUS_TO_KELVIN

    rnl = (
        STEFAN_BOLTZMANN_DAILY * (tmax_k ** 4 + tmin_k ** 4) / 2.0
        * (0.34 - 0.14 * np.sqrt(as_float_array(ea)))
        * (1.35 * (1.0 - cloud) - 0.35)
    )
    return like_input(rnl, *inputs)


def as_emissivity_method(method: Union[str, EmissivityMethod]) -> EmissivityMethod:
    """
    Convert a method name to :class:`EmissivityMethod`.

    Raises:
        ConfigurationError: If the name is not a known scheme
    """
    if isinstance(method, EmissivityMethod):
        return method
    try:
        return EmissivityMethod(str(method).upper())
    except ValueError:
        valid = ", ".join(m.value for m in EmissivityMethod)
        raise ConfigurationError(
            f"method must be one of {valid}, got {method!r}",
            config_param="method"
        ) from None


def clear_sky_emissivity(temp_k: ArrayLike, ea_hpa: ArrayLike, method: EmissivityMethod) -> np.ndarray:
    """
    Clear-sky atmospheric emissivity.

    Args:
        temp_k: Air temperature [K]
        ea_hpa: Actual vapour pressure [hPa]
        method: Emissivity scheme

    Returns:
        Clear-sky emissivity (dimensionless)
    """
    t = as_float_array(temp_k)
    ea = as_float_array(ea_hpa)

    if method is EmissivityMethod.MAR:
        return 0.5893 + 5.351e-2 * np.sqrt(ea)
    elif method is EmissivityMethod.SWI:
        return 9.294e-6 * t * t
    elif method is EmissivityMethod.IJ:
        return 1.0 - 0.26 * np.exp(-7.77e-4 * (273.0 - t) ** 2)
    elif method is EmissivityMethod.BRU:
        return 1.24 * (ea / t) ** (1.0 / 7.0)
    elif method is EmissivityMethod.SAT:
        return 1.08 * (1.0 - np.exp(-ea ** (t / 2016.0)))
    elif method is EmissivityMethod.KON:
        return 0.23 + 0.848 * (ea / t) ** (1.0 / 7.0)
    raise ValueError(f"Unhandled emissivity method: {method}")


def incoming_longwave_radiation(
    temp: ArrayLike,
    ea: ArrayLike,
    s: ArrayLike = 1.0,
    method: Union[str, EmissivityMethod] = DEFAULT_EMISSIVITY_METHOD
):
    """
    Estimate incoming longwave radiation.

    Args:
        temp: Near-surface air temperature [°C]
        ea: Near-surface actual vapour pressure [kPa]
        s: Cloudiness weight, e.g. the ratio between actual and clear-sky
            incoming shortwave radiation
        method: Clear-sky emissivity scheme, an :class:`EmissivityMethod`
            or its name ('MAR', 'SWI', 'IJ', 'BRU', 'SAT', 'KON')

    Returns:
        Incoming longwave radiation [W m-2]

    Raises:
        ConfigurationError: If ``method`` is unknown
    """
    scheme = as_emissivity_method(method)
    t_k = as_float_array(temp) + CELSIUS_TO_KELVIN
    ea_hpa = as_float_array(ea) * KPA_TO_HPA
    weight = as_float_array(s)

    eps_clear = clear_sky_emissivity(t_k, ea_hpa, scheme)
    eps = 1.0 - weight + weight * eps_clear
    return like_input(eps * STEFAN_BOLTZMANN * t_k ** 4, temp, ea, s)
