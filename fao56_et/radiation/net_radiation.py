"""Net radiation at the crop surface (FAO-56 eqs. 38 and 40)."""

import numpy as np

from ..core.arrays import ArrayLike, as_float_array, like_input
from ..config.settings import REFERENCE_ALBEDO
from ..utils.exceptions import RadiationBalanceError


def net_shortwave_radiation(rs: ArrayLike, albedo: float = REFERENCE_ALBEDO):
    """
    Net shortwave radiation Rns = (1 - albedo) Rs [MJ m-2 day-1].

    Args:
        rs: Incoming solar radiation [MJ m-2 day-1]
        albedo: Canopy reflection coefficient, 0.23 for the grass reference

    Raises:
        RadiationBalanceError: If ``albedo`` is outside [0, 1]
    """
    if not 0.0 <= albedo <= 1.0:
        raise RadiationBalanceError(f"Albedo must lie in [0, 1], got {albedo}", component="net_shortwave")
    return like_input((1.0 - albedo) * as_float_array(rs), rs)


def net_radiation(rs: ArrayLike, rnl: ArrayLike, albedo: float = REFERENCE_ALBEDO, clip_negative: bool = True):
    """
    Net radiation Rn = Rns - Rnl.

    Args:
        rs: Incoming solar radiation [MJ m-2 day-1]
        rnl: Net outgoing longwave radiation [MJ m-2 day-1]
        albedo: Canopy reflection coefficient
        clip_negative: Set negative net radiation to zero

    Returns:
        Net radiation [MJ m-2 day-1]
    """
    rn = as_float_array(net_shortwave_radiation(rs, albedo)) - as_float_array(rnl)
    if clip_negative:
        rn = np.where(rn < 0.0, 0.0, rn)
    return like_input(rn, rs, rnl)
