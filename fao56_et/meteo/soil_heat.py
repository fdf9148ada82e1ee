"""
Monthly soil heat flux beneath a grass reference surface (FAO-56 eqs. 43-44).

For daily and 10-day periods G is small and normally set to 0; for monthly
steps it follows from the change in mean air temperature:

    G = 0.07 * (T_next - T_prev)     when next month's temperature is known
    G = 0.14 * (T_curr - T_prev)     otherwise
"""

import logging
from enum import Enum
from typing import Optional

from ..core.arrays import ArrayLike, as_float_array, like_input
from ..config.settings import SOIL_HEAT_FLUX
from ..utils.exceptions import MissingInputError

logger = logging.getLogger(__name__)


class SoilHeatFluxMethod(Enum):
    NEXT_MONTH = "next_month"
    CURRENT_MONTH = "current_month"


def select_soil_heat_flux_method(
    t_next: Optional[ArrayLike] = None,
    t_curr: Optional[ArrayLike] = None
) -> SoilHeatFluxMethod:
    if t_next is not None:
        return SoilHeatFluxMethod.NEXT_MONTH
    if t_curr is not None:
        return SoilHeatFluxMethod.CURRENT_MONTH
    raise MissingInputError(
        "Temperature of the next or of the current month must be provided",
        alternatives=["t_next", "t_curr"],
        input_type="temperature"
    )


def soil_heat_flux(
    t_prev: ArrayLike,
    t_next: Optional[ArrayLike] = None,
    t_curr: Optional[ArrayLike] = None
):
    """
    Estimate monthly soil heat flux.

    Args:
        t_prev: Mean air temperature of the previous month [°C]
        t_next: Mean air temperature of the next month [°C]
        t_curr: Mean air temperature of the current month [°C]

    Returns:
        Soil heat flux G [MJ m-2 day-1]

    Raises:
        MissingInputError: If neither ``t_next`` nor ``t_curr`` is given
    """
    method = select_soil_heat_flux_method(t_next, t_curr)
    logger.debug(f"Soil heat flux method: {method.value}")

    if method is SoilHeatFluxMethod.NEXT_MONTH:
        later = t_next
    elif method is SoilHeatFluxMethod.CURRENT_MONTH:
        later = t_curr
    else:
        raise ValueError(f"Unhandled soil heat flux method: {method}")

    coefficient = SOIL_HEAT_FLUX[method.value]
    g = coefficient * (as_float_array(later) - as_float_array(t_prev))
    return like_input(g, t_prev, later)
