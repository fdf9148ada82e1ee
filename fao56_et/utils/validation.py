"""
Validation utilities for the FAO-56 formula library.

Provides range checks for meteorological inputs, which report problems as
``(is_valid, message)`` tuples, and strict validators for distribution
parameters, which raise ``ParameterDomainError``.
"""

from typing import Tuple
import numpy as np

from .logger import Logger
from .exceptions import ParameterDomainError
from ..config.settings import VALIDATION_RANGES


def _as_checked_array(values) -> np.ndarray:
    return np.atleast_1d(np.asarray(values, dtype=float))


def check_temperature_range(
    t,
    min_temp: float = VALIDATION_RANGES["air_temperature"][0],
    max_temp: float = VALIDATION_RANGES["air_temperature"][1]
) -> Tuple[bool, str]:
    """
    Check air temperature values are reasonable.

    Args:
        t: Air temperature in degrees Celsius
        min_temp: Minimum plausible temperature (°C)
        max_temp: Maximum plausible temperature (°C)

    Returns:
        Tuple of (is_valid, message)
    """
    if t is None:
        return False, "Temperature is None"

    t = _as_checked_array(t)
    if t.size == 0:
        return False, "Temperature array is empty"

    finite = t[np.isfinite(t)]
    valid_mask = (finite >= min_temp) & (finite <= max_temp)

    if not np.all(valid_mask):
        outliers = finite[~valid_mask]
        Logger.warning(f"Temperature outliers: min={outliers.min():.1f}°C, max={outliers.max():.1f}°C")
        return False, f"Temperature values out of range [{min_temp}, {max_temp}] °C: {outliers.size} values"

    return True, "Temperature values are valid"


def check_relative_humidity(rh) -> Tuple[bool, str]:
    """
    Check relative humidity values lie within [0, 100] %.

    Args:
        rh: Relative humidity in percent

    Returns:
        Tuple of (is_valid, message)
    """
    if rh is None:
        return False, "Relative humidity is None"

    rh = _as_checked_array(rh)
    lo, hi = VALIDATION_RANGES["relative_humidity"]
    finite = rh[np.isfinite(rh)]
    invalid = finite[(finite < lo) | (finite > hi)]

    if invalid.size:
        Logger.warning(f"Relative humidity outside [{lo}, {hi}] %: {invalid.size} values")
        return False, f"Relative humidity out of range [{lo}, {hi}] %: {invalid.size} values"

    return True, "Relative humidity values are valid"


def check_wind_speed(ws) -> Tuple[bool, str]:
    """Check wind speed is non-negative and below the plausible maximum."""
    if ws is None:
        return False, "Wind speed is None"

    ws = _as_checked_array(ws)
    lo, hi = VALIDATION_RANGES["wind_speed"]
    finite = ws[np.isfinite(ws)]
    invalid = finite[(finite < lo) | (finite > hi)]

    if invalid.size:
        Logger.warning(f"Wind speed outside [{lo}, {hi}] m/s: {invalid.size} values")
        return False, f"Wind speed out of range [{lo}, {hi}] m/s: {invalid.size} values"

    return True, "Wind speed values are valid"


def check_et_range(et, max_et: float = VALIDATION_RANGES["et0"][1]) -> Tuple[bool, str]:
    """
    Check ET values are within expected range [0, max_et] mm/day.

    Args:
        et: ET in mm/day
        max_et: Maximum expected ET value

    Returns:
        Tuple of (is_valid, message)
    """
    if et is None:
        return False, "ET is None"

    et = _as_checked_array(et)
    if et.size == 0:
        return False, "ET array is empty"

    finite = et[np.isfinite(et)]
    valid_mask = (finite >= 0) & (finite <= max_et)

    if not np.all(valid_mask):
        outliers = finite[~valid_mask]
        Logger.warning(f"ET outliers: min={outliers.min():.2f} mm/day, max={outliers.max():.2f} mm/day")
        return False, f"ET values out of range [0, {max_et}] mm/day: {outliers.size} values"

    if finite.size == 0:
        return True, "ET values are all missing"

    return True, f"ET values are valid (range: {finite.min():.2f} - {finite.max():.2f} mm/day)"


def validate_finite(value: float, name: str) -> float:
    """Return ``value`` as float, raising if it is NaN or infinite."""
    value = float(value)
    if not np.isfinite(value):
        raise ParameterDomainError(
            f"Parameter '{name}' must be finite",
            parameter=name,
            value=value
        )
    return value


def validate_positive(value: float, name: str) -> float:
    """Return ``value`` as float, raising unless it is finite and > 0."""
    value = validate_finite(value, name)
    if value <= 0:
        raise ParameterDomainError(
            f"Parameter '{name}' must be > 0, got {value}",
            parameter=name,
            value=value
        )
    return value


def validate_probability(p) -> np.ndarray:
    """
    Check probabilities lie in [0, 1].

    NaN values are let through and propagate to the result.

    Args:
        p: Probability or array of probabilities

    Returns:
        ``p`` as a float ndarray

    Raises:
        ParameterDomainError: If any non-NaN value is outside [0, 1]
    """
    p = np.asarray(p, dtype=float)
    outside = (p < 0.0) | (p > 1.0)
    if np.any(outside):
        bad = p[outside] if p.ndim else p
        raise ParameterDomainError(
            "Probabilities must lie in [0, 1]",
            parameter="p",
            value=np.atleast_1d(bad).tolist()
        )
    return p
