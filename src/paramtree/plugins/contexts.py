"""
The `contexts` plugin adds support for contextual validation, i.e. branching the validation logic depending on a
context which is passed when instantiating the validation:
```
class UserValidation(Validation):
    def validation_block(self, i):
        @i.param("account_type")
        def _(account_type):
            if self.context("admin") and account_type.value != "admin":
                account_type.add_error("must be equal to 'admin'")
            self.context("visitor", "demo", block=lambda: ...)

UserValidation.plugin("contexts")
UserValidation(context="admin")({"account_type": "invalid"})
```
If no context is passed, the context is `"default"`.
Since the context is set in the constructor, always call `super().__init__` when overriding it.
"""
import sys
from typing import Any, Callable, Hashable, Optional

from . import register_plugin

DEFAULT_CONTEXT = "default"


class InstanceMethods:
    """Adds the `context` keyword argument to the constructor and the `context` method"""

    def __init__(self, *args: Any, context: Hashable = DEFAULT_CONTEXT, **kwargs: Any):
        super().__init__(*args, **kwargs)
        self._context = context

    @property
    def current_context(self) -> Hashable:
        """The context this validation instance was created with"""
        return self._context

    def context(self, *values: Hashable, block: Optional[Callable[[], Any]] = None) -> bool:
        """
        Returns True if the current context is one of `values`. If a `block` is given, it gets executed in that case.
        """
        matches = self._context in values
        if matches and block is not None:
            block()
        return matches


register_plugin("contexts", sys.modules[__name__])
