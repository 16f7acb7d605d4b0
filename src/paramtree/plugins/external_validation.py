"""
The `external_validation` plugin allows you to delegate the validation of a param to another validation class or
to any callable which returns error messages (a list of messages or a dict of nested messages):
```
class AddressValidation(Validation):
    ...

@i.param("address")
def _(address):
    address.validate_with(AddressValidation)
    address.validate_with(lambda value: [] if value.get("zip") else ["must have a zip code"])
```
Messages of multiple external validations are merged into the messages already present.
"""
import sys
from typing import Any

from ..result import Result
from ..types import ErrorTree
from . import register_plugin


def call_validator(validator: Any, value: Any) -> ErrorTree:
    """
    Calls `validator` with `value` and returns the resulting messages. `validator` may be a validation class, a
    validation instance or a callable returning either a `Result` or messages.
    """
    call = getattr(validator, "call", None) if isinstance(validator, type) else None
    result = call(value) if call is not None else validator(value)
    if isinstance(result, Result):
        return result.messages
    return result


def _deep_merge_messages(messages: dict, other_messages: dict) -> dict:
    merged = dict(messages)
    for key, new_value in other_messages.items():
        old_value = merged.get(key)
        if isinstance(old_value, dict) and isinstance(new_value, dict):
            merged[key] = _deep_merge_messages(old_value, new_value)
        elif isinstance(old_value, list) and isinstance(new_value, list):
            merged[key] = old_value + new_value
        else:
            merged[key] = new_value
    return merged


class ParamMethods:
    """Adds `validate_with` to params"""

    def validate_with(self, validator: Any) -> None:
        """
        Validates the value with `validator` and merges the returned messages into the errors of this param.
        Nested messages are not merged into a param which already has flat errors.
        """
        messages = call_validator(validator, self.value)

        if isinstance(messages, dict) and self.flat and self.invalid:
            return

        if isinstance(self.errors, dict) and isinstance(messages, dict):
            self.errors = _deep_merge_messages(self.errors, messages)
        elif isinstance(self.errors, list) and isinstance(messages, list):
            self.errors = self.errors + messages
        else:
            self.errors = messages


register_plugin("external_validation", sys.modules[__name__])
