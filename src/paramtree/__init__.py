"""
This package enables you to validate arbitrary nested data (mappings, sequences, scalars) with plain Python
functions. The core only traverses the data and collects error messages - everything else (coercion, built-in
validators, dependency injection, ...) is provided by plugins which can be activated per validation class.
"""

from .errors import CoercionError, ConfigurationError, ParamtreeError, UnknownValidatorError
from .param import Param
from .plugins import load_plugin, register_plugin
from .result import Result
from .validation import Validation
