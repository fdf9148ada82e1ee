"""
Utility modules for fao56_et.

Provides logging, validation, and exception handling utilities.
"""

from .logger import Logger, log_step
from .validation import (
    check_temperature_range,
    check_relative_humidity,
    check_wind_speed,
    check_et_range,
    validate_finite,
    validate_positive,
    validate_probability
)
from .exceptions import (
    FAO56Error,
    DataInputError,
    MissingInputError,
    ComputationError,
    ParameterDomainError,
    RadiationBalanceError,
    ConfigurationError,
    handle_exception,
    create_error_context
)

__all__ = [
    # Logger
    "Logger",
    "log_step",

    # Validation
    "check_temperature_range",
    "check_relative_humidity",
    "check_wind_speed",
    "check_et_range",
    "validate_finite",
    "validate_positive",
    "validate_probability",

    # Exceptions
    "FAO56Error",
    "DataInputError",
    "MissingInputError",
    "ComputationError",
    "ParameterDomainError",
    "RadiationBalanceError",
    "ConfigurationError",
    "handle_exception",
    "create_error_context"
]
