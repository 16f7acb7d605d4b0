"""
The `dependencies` plugin injects configured values into the validation block:
```
class AddressValidation(Validation):
    pass

AddressValidation.plugin("dependencies", address_checker=AddressChecker())

@AddressValidation.validate(inject=["address_checker"])
def rules(validation, i, address_checker):
    ...
```
Dependencies registered on `Validation` itself are available to every validation class.
"""
import sys
from typing import Any, Optional, Sequence

from . import register_plugin


def configure(validation: Any, **dependencies: Any) -> None:
    """Merges `dependencies` into the dependencies configured so far"""
    validation.opts["dependencies"] = {**validation.opts.get("dependencies", {}), **dependencies}


class ClassMethods:
    """Adds the `inject` option to `validate`"""

    specified_dependencies: Optional[list[str]] = None

    @classmethod
    def validate(cls, block: Any = None, inject: Optional[Sequence[str]] = None):
        """
        Stores the validation block. The dependencies named in `inject` are passed to the block after the root param.
        """
        if inject is not None:
            if not isinstance(inject, (list, tuple)):
                raise TypeError("inject option value must be a list")
            cls.specified_dependencies = list(inject)
        return super().validate(block)  # type:ignore[misc]


class InstanceMethods:
    """Passes the injected dependencies to the validation block"""

    @property
    def deps(self) -> dict[str, Any]:
        """A copy of the dependencies configured for this validation class"""
        if getattr(self, "_deps", None) is None:
            self._deps = dict(type(self).opts.get("dependencies", {}))
        return self._deps

    def execute(self, block: Any) -> None:
        specified_dependencies = type(self).specified_dependencies
        if specified_dependencies is None:
            super().execute(block)  # type:ignore[misc]
            return
        if block is not None:
            dependencies = [self.deps.get(name) for name in specified_dependencies]
            block(self, self._input_param, *dependencies)


register_plugin("dependencies", sys.modules[__name__])
