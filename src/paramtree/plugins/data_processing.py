"""
The `data_processing` plugin allows you to declare processing steps for the input and the output data instead of
overriding `process_input` and `process_output`:
```
UserValidation.plugin("data_processing", input=["dup"], output=["freeze"])

@UserValidation.process("input")
def strip_username(validation, data):
    return {**data, "username": data.get("username", "").strip()}
```
Steps are executed in the order in which they are declared. Built-in processings (`BUILT_IN_PROCESSINGS`) are
executed before any user defined ones. Every built-in processing returns new data and supports deeply nested
data:

* `stringify` - converts all mapping keys to strings
* `dup` - copies the data
* `freeze` - converts mappings to frozendicts and lists to tuples

The raw input data is never mutated by the built-ins. If your own steps mutate the data, declare `dup` first:
the input is reused as the result output, so mutations would leak into both.
"""
import sys
from collections.abc import Mapping
from typing import Any, Callable, Iterable, Optional

from frozendict import frozendict

from ..errors import ConfigurationError
from ..types import ProcessingBlock
from . import register_plugin

DATA_KEYS = ("input", "output")


def _is_container(data: Any) -> bool:
    return isinstance(data, (Mapping, list, tuple))


def stringify_keys(data: Any) -> Any:
    """Converts the keys of all (nested) mappings to strings"""
    if isinstance(data, Mapping):
        return {str(key): stringify_keys(value) for key, value in data.items()}
    if isinstance(data, (list, tuple)):
        return [stringify_keys(member) for member in data]
    return data


def duplicate(data: Any) -> Any:
    """Copies all (nested) mappings and lists"""
    if isinstance(data, Mapping):
        return {key: duplicate(value) if _is_container(value) else value for key, value in data.items()}
    if isinstance(data, (list, tuple)):
        return [duplicate(member) if _is_container(member) else member for member in data]
    return data


def frost(data: Any) -> Any:
    """Converts all (nested) mappings into frozendicts and all lists into tuples"""
    if isinstance(data, Mapping):
        return frozendict({key: frost(value) for key, value in data.items()})
    if isinstance(data, (list, tuple)):
        return tuple(frost(member) for member in data)
    return data


BUILT_IN_PROCESSINGS: frozendict[str, Callable[[Any, Any], Any]] = frozendict(
    {
        "stringify": lambda _, data: stringify_keys(data),
        "dup": lambda _, data: duplicate(data),
        "freeze": lambda _, data: frost(data),
    }
)


def configure(validation: Any, **processings: Iterable[str]) -> None:
    """
    Resets the processing steps of `validation` and adds the requested built-in processings, e.g.
    `configure(validation, input=["dup"], output=["stringify"])`.
    """
    validation.opts["data_processing"] = {data_key: [] for data_key in DATA_KEYS}
    for data_key, names in processings.items():
        steps = validation.opts["data_processing"].setdefault(data_key, [])
        for name in names:
            if name not in BUILT_IN_PROCESSINGS:
                raise ConfigurationError(f"Built-in processing not found: '{name}'")
            steps.append(BUILT_IN_PROCESSINGS[name])


class ClassMethods:
    """Adds `process` to validation classes"""

    def __init_subclass__(cls, **kwargs: Any):
        super().__init_subclass__(**kwargs)
        # the option is copied one level deep only, the step lists must not be shared with the parent class
        cls.opts["data_processing"] = {
            data_key: list(steps) for data_key, steps in cls.opts.get("data_processing", {}).items()
        }

    @classmethod
    def process(cls, data_key: str, block: Optional[ProcessingBlock] = None):
        """
        Appends a processing step for `data_key` (`"input"` or `"output"`). The step gets called with the
        validation instance and the data and has to return the processed data. Works as a decorator, too.
        """
        if block is None:

            def decorator(function: ProcessingBlock) -> ProcessingBlock:
                cls.process(data_key, function)
                return function

            return decorator
        cls.opts["data_processing"].setdefault(data_key, []).append(block)
        return block


class InstanceMethods:
    """Runs the processing steps"""

    def process_input(self, data: Any) -> Any:
        processed = super().process_input(data)  # type:ignore[misc]
        return self._process_data("input", data if processed is None else processed)

    def process_output(self, data: Any) -> Any:
        processed = super().process_output(data)  # type:ignore[misc]
        return self._process_data("output", data if processed is None else processed)

    def _process_data(self, data_key: str, data: Any) -> Any:
        result = data
        for step in type(self).opts["data_processing"].get(data_key, []):
            result = step(self, result)
        return result


register_plugin("data_processing", sys.modules[__name__])
