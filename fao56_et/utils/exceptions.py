"""
Exceptions raised by the FAO-56 formula library.

    FAO56Error
    ├── DataInputError
    │   └── MissingInputError       no input of a fallback chain was given
    ├── ComputationError
    │   ├── ParameterDomainError    parameter outside its mathematical domain
    │   └── RadiationBalanceError
    └── ConfigurationError          unknown method name or settings key

Every exception carries a ``details`` dict, shown after the message.
"""

from functools import wraps


class FAO56Error(Exception):
    """Base exception of fao56_et."""

    def __init__(self, message: str, details: dict = None, *args):
        super().__init__(message, *args)
        self.message = message
        self.details = dict(details or {})

    def __str__(self):
        if not self.details:
            return self.message
        return f"{self.message} | Details: {self.details}"

    def add_detail(self, key: str, value) -> "FAO56Error":
        """Attach one more piece of context; returns the exception."""
        self.details[key] = value
        return self


class DataInputError(FAO56Error):
    """Input data that cannot be used, e.g. unparseable dates."""

    def __init__(self, message: str, input_type: str = None, details: dict = None, *args):
        super().__init__(message, details, *args)
        if input_type:
            self.details["input_type"] = input_type


class MissingInputError(DataInputError):
    """
    None of the inputs a fallback chain accepts was provided.

    ``alternatives`` names the inputs (or input combinations such as
    ``"rs+rso"``) any one of which would have been enough.
    """

    def __init__(self, message: str, alternatives: list = None, input_type: str = None, *args):
        super().__init__(message, input_type, None, *args)
        if alternatives:
            self.details["alternatives"] = list(alternatives)


class ComputationError(FAO56Error):
    """A formula could not be evaluated."""

    def __init__(self, message: str, computation_step: str = None, details: dict = None, *args):
        super().__init__(message, details, *args)
        if computation_step:
            self.details["step"] = computation_step


class ParameterDomainError(ComputationError):
    """
    A parameter lies outside its domain, such as ``cv <= 0`` or a
    probability outside [0, 1].
    """

    def __init__(self, message: str, parameter: str = None, value=None, computation_step: str = None, *args):
        super().__init__(message, computation_step, None, *args)
        if parameter:
            self.details["parameter"] = parameter
        if value is not None:
            self.details["value"] = value


class RadiationBalanceError(ComputationError):
    """A term of the radiation balance is physically impossible."""

    def __init__(self, message: str, component: str = None, *args):
        super().__init__(message, "radiation_balance", None, *args)
        if component:
            self.details["component"] = component


class ConfigurationError(FAO56Error):
    """Unknown method name, unknown settings key or unreadable settings."""

    def __init__(self, message: str, config_param: str = None, *args):
        super().__init__(message, None, *args)
        if config_param:
            self.details["parameter"] = config_param


def handle_exception(func):
    """
    Re-raise errors escaping ``func`` as package errors.

    FAO56Error subclasses pass through unchanged. Numerical errors
    (ValueError, ZeroDivisionError, FloatingPointError) become
    ComputationError tagged with the function name; anything else becomes
    a plain FAO56Error. The original exception is kept as ``__cause__``.
    """
    @wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except FAO56Error:
            raise
        except (ValueError, ZeroDivisionError, FloatingPointError) as e:
            raise ComputationError(f"{func.__name__}: {e}", computation_step=func.__name__) from e
        except Exception as e:
            raise FAO56Error(f"Unexpected error in {func.__name__}: {e}") from e
    return wrapper


def create_error_context(error: Exception, context: dict = None) -> dict:
    """
    Summarise an exception as a dict, e.g. for structured logging.

    Args:
        error: The exception
        context: Extra information about where it happened

    Returns:
        Dict with ``error_type``, ``error_message`` and, where available,
        ``error_details`` and ``additional_context``
    """
    summary = {"error_type": type(error).__name__, "error_message": str(error)}
    details = getattr(error, "details", None)
    if details is not None:
        summary["error_details"] = details
    if context:
        summary["additional_context"] = context
    return summary
