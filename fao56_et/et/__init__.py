"""
Reference Evapotranspiration (ET0) Module.

Functions:
    - et0_penman_monteith: FAO-56 Penman-Monteith ET0 for a short or tall
      reference crop
    - et0_hargreaves: Temperature-based Hargreaves ET0
    - wind_speed_2m: Logarithmic wind profile reduction to 2 m

Fallback chains:
    | Input  | Preferred      | Fallback 1            | Fallback 2        |
    |--------|----------------|-----------------------|-------------------|
    | ea     | ea             | RHmean + Tmax + Tmin  | Tmin (dewpoint)   |
    | es     | es             | e°(Tmax), e°(Tmin)    |                   |
    | delta  | delta          | mean temperature      |                   |
    | gamma  | gamma          | pres                  | z                 |
    | Ra     | ra             | lat + dates           |                   |
"""

from .reference import ReferenceCrop, wind_speed_2m, et0_penman_monteith, et0_hargreaves

__all__ = [
    'ReferenceCrop',
    'wind_speed_2m',
    'et0_penman_monteith',
    'et0_hargreaves',
]
