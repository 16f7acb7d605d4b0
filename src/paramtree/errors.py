"""
Contains the exceptions raised for misconfigured validation classes. Invalid data never raises - it is reported
through the error tree of the `Result`.
"""
from typing import Any


class ParamtreeError(Exception):
    """
    Base class of all errors raised by this package.
    """


class ConfigurationError(ParamtreeError):
    """
    Raised if a validation class is set up incorrectly, e.g. an unknown plugin got activated or a type schema is
    not a mapping. These errors are meant to be fixed by the author of the validation class.
    """


class UnknownValidatorError(ConfigurationError):
    """
    Raised by `Param.validate(**options)` if an option refers to a validator which is not registered.
    """

    def __init__(self, validator_name: str):
        super().__init__(f"undefined validation method '{validator_name}'")
        self.validator_name = validator_name


class CoercionError(ParamtreeError):
    """
    Raised by strict coercions (type names prefixed with `strict_`) if a value cannot be converted.
    """

    def __init__(self, message: str, value: Any, type_name: str):
        super().__init__(message)
        self.value = value
        self.type_name = type_name
