"""
The `full_messages` plugin adds `Result.full_messages` which returns the error messages prefixed with the name of
their param:
```
result = UserValidation.call({"email": "invalid", "address": {}})
result.full_messages  # -> {"email": ["email is in invalid format"], "address": {"city": ["city must be string"]}}
```
Members of lists have no name, so their messages are prefixed with their index (`{"tags": {0: ["0 must be
string"]}}`). Nicer names can be configured per list param:
```
UserValidation.plugin("full_messages", array_member_names={"tags": "tag"})  # -> {"tags": {0: ["tag must be string"]}}
```
The option is inherited and merged, so it can be set globally on `Validation` itself.
"""
import sys
from typing import Any, Hashable, Mapping, Optional

from ..types import ErrorTree
from . import register_plugin


def configure(validation: Any, array_member_names: Optional[Mapping[Hashable, str]] = None) -> None:
    """Merges `array_member_names` into the names configured so far"""
    validation.opts["full_messages_array_member_names"] = {
        **validation.opts.get("full_messages_array_member_names", {}),
        **(array_member_names or {}),
    }


class ResultMethods:
    """Adds `full_messages` to results"""

    @property
    def full_messages(self) -> ErrorTree:
        """
        The messages prefixed with their param names. The value is calculated on first access.
        """
        if not hasattr(self, "_full_messages"):
            self._full_messages = self._generate_full_messages(self.messages)
        return self._full_messages

    def _generate_full_messages(self, errors: ErrorTree, array_param_name: Optional[Hashable] = None) -> ErrorTree:
        if not isinstance(errors, dict):
            return list(errors)
        member_names: Mapping[Hashable, str] = self.validation_class.opts.get("full_messages_array_member_names", {})
        full_messages: dict[Any, ErrorTree] = {}
        for param_name, messages in errors.items():
            if isinstance(messages, dict):
                first_key = next(iter(messages), None)
                param_is_array = isinstance(first_key, int) and not isinstance(first_key, bool)
                full_messages[param_name] = self._generate_full_messages(
                    messages, param_name if param_is_array else None
                )
            else:
                name = member_names.get(array_param_name, param_name) if array_param_name is not None else param_name
                full_messages[param_name] = [f"{name} {message}" for message in messages]
        return full_messages


register_plugin("full_messages", sys.modules[__name__])
