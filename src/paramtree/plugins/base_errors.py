"""
The `base_errors` plugin allows you to add errors which are not related to a specific param but to the input as
a whole:
```
class AuthValidation(Validation):
    def validation_block(self, i):
        @i.params("email", "password")
        def _(email, password):
            ...
            if email.invalid or password.invalid:
                self.add_base_error("Invalid email or password")

AuthValidation.plugin("base_errors")
AuthValidation.call({}).messages  # -> {"base": ["Invalid email or password"], ...}
```
The key can be changed on activation: `plugin("base_errors", key="general")`.
"""
import sys
from typing import Any, Hashable, Optional

from . import register_plugin

DEFAULT_KEY = "base"


def configure(validation: Any, key: Optional[Hashable] = None) -> None:
    """Stores the key under which base errors are nested"""
    validation.opts["base_errors_key"] = key or validation.opts.get("base_errors_key") or DEFAULT_KEY


class InstanceMethods:
    """Adds `add_base_error` to validation instances"""

    def add_base_error(self, message: str) -> None:
        """Adds `message` to the base errors of the current validation run"""
        messages = self._input_param.errors
        key = type(self).opts["base_errors_key"]

        if isinstance(messages, dict) and key in messages:
            messages[key].append(message)
        else:
            self._input_param.param(key, lambda base: base.add_error(message))


register_plugin("base_errors", sys.modules[__name__])
