"""
The `object_validation` plugin adds support for validating attributes of objects. Use `attrs` instead of `params`:
```
class UserModelValidation(Validation):
    def validation_block(self, user):
        @user.attrs("username", "email")
        def _(username, email):
            username.validate(presence=True, max_length=20, type=str)
            email.validate(presence=True, format=EMAIL_REGEX, type=str)

UserModelValidation.plugin("object_validation")
UserModelValidation.plugin("validation_options")
```
Attributes which are dicts can be validated further with `params`. Missing attributes result in params with
the value None. Dotted paths (`"address.city"`) are resolved attribute by attribute.
"""
import sys
from typing import Any, Optional

from ..types import ParamBlock
from ..utils.query_object import attribute
from . import register_plugin


class ParamMethods:
    """Adds `attrs` to params"""

    def fetch_attr_value(self, name: str) -> Optional[Any]:
        """Returns the attribute `name` of the value or None"""
        return attribute(self.value, name)

    def attrs(self, *names: str, block: Optional[ParamBlock] = None):
        """
        Declares a param for every attribute in `names` and executes `block` with them (see `Param.params`).
        """
        if block is None:

            def decorator(function: ParamBlock) -> ParamBlock:
                self.attrs(*names, block=function)
                return function

            return decorator
        if self.flat and self.invalid:
            return None
        children = {name: self._build_param(name, self.fetch_attr_value(name)) for name in names}
        block(*children.values())
        for name, child in children.items():
            if child.invalid:
                self._nest_errors(name, child.errors)
        return None


register_plugin("object_validation", sys.modules[__name__])
