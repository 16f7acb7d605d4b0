"""
The `validate_with` plugin allows you to validate a param with another validation class. Unlike the
`external_validation` plugin, the messages of the other validation replace the errors of the param:
```
@i.param("address")
def _(address):
    address.validate_with(AddressValidation)
```
"""
import sys
from typing import Any

from . import register_plugin
from .external_validation import call_validator


class ParamMethods:
    """Adds `validate_with` to params"""

    def validate_with(self, validator: Any) -> None:
        """Replaces the errors of this param with the messages returned by `validator` (if there are any)"""
        messages = call_validator(validator, self.value)
        if len(messages) > 0:
            self.errors = messages


register_plugin("validate_with", sys.modules[__name__])
