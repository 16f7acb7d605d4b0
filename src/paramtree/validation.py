"""
Contains the `Validation` class, the entry point of every validation. A validation class stores one validation
block and an options bag, and can be extended by plugins:
```
class UserValidation(Validation):
    def validation_block(self, i):
        @i.params("username", "age")
        def _(username, age):
            if not isinstance(username.value, str):
                username.add_error("must be string")
            if not isinstance(age.value, int):
                age.add_error("must be integer")

result = UserValidation.call({"username": "john", "age": "18"})
assert result.messages == {"age": ["must be integer"]}
```
"""
import logging
from typing import Any, Callable, Optional

from frozendict import frozendict

from .param import Param
from .plugins import load_plugin
from .result import Result
from .types import ErrorTree, ValidationBlock

logger = logging.getLogger(__name__)

_MUTABLE_OPTION_TYPES = (list, dict, set)


def _duplicate_option(value: Any) -> Any:
    """
    Copies mutable containers (one level deep) so that subclasses can modify their options without touching the
    options of their parent. Immutable values (e.g. frozendicts or tuples) are shared.
    """
    if isinstance(value, _MUTABLE_OPTION_TYPES) and not isinstance(value, frozendict):
        return value.copy()
    return value


def _include(target: type, mixin: Optional[type]) -> None:
    """
    Inserts `mixin` in front of the bases of `target`. Methods defined in `target` itself still take precedence,
    methods of formerly included mixins can be reached through `super()`.
    Subclasses which included `mixin` themselves inherit it from `target` afterwards.
    """
    if mixin is None or issubclass(target, mixin):
        return
    _exclude_from_subclasses(target, mixin)
    target.__bases__ = (mixin, *target.__bases__)


def _exclude_from_subclasses(target: type, mixin: type) -> None:
    for subclass in target.__subclasses__():
        _exclude_from_subclasses(subclass, mixin)
        if mixin in subclass.__bases__:
            subclass.__bases__ = tuple(base for base in subclass.__bases__ if base is not mixin)


class ClassMethods:
    """
    Core class level behaviour of validation classes.
    """

    opts: dict[str, Any] = {}
    validation_block: Optional[ValidationBlock] = None
    Param: type[Param] = Param
    Result: type[Result] = Result

    def __init_subclass__(cls, **kwargs: Any):
        super().__init_subclass__(**kwargs)
        cls.opts = {key: _duplicate_option(value) for key, value in cls.opts.items()}
        cls.Param = type(
            "Param",
            (cls.Param,),
            {"validation_class": cls, "__module__": cls.__module__, "__qualname__": f"{cls.__qualname__}.Param"},
        )
        cls.Result = type(
            "Result",
            (cls.Result,),
            {"validation_class": cls, "__module__": cls.__module__, "__qualname__": f"{cls.__qualname__}.Result"},
        )

    @classmethod
    def plugin(cls, plugin: Any, *args: Any, **kwargs: Any) -> Any:
        """
        Activates `plugin` (either a plugin object or the name of a registered plugin) on this validation class.
        `args` and `kwargs` are passed to the plugin's `load_dependencies` and `configure` hooks.
        """
        if isinstance(plugin, str):
            plugin = load_plugin(plugin)
        load_dependencies: Optional[Callable[..., Any]] = getattr(plugin, "load_dependencies", None)
        if load_dependencies is not None:
            load_dependencies(cls, *args, **kwargs)

        _include(cls, getattr(plugin, "InstanceMethods", None))
        _include(cls, getattr(plugin, "ClassMethods", None))
        _include(cls.Param, getattr(plugin, "ParamMethods", None))
        _include(cls.Param, getattr(plugin, "ParamClassMethods", None))
        _include(cls.Result, getattr(plugin, "ResultMethods", None))
        _include(cls.Result, getattr(plugin, "ResultClassMethods", None))

        configure: Optional[Callable[..., Any]] = getattr(plugin, "configure", None)
        if configure is not None:
            configure(cls, *args, **kwargs)
        logger.debug("Activated plugin %s on %s", getattr(plugin, "__name__", plugin), cls.__qualname__)
        return plugin

    @classmethod
    def validate(cls, block: Optional[ValidationBlock] = None):
        """
        Stores the validation block. The block gets called with the validation instance and the root param. If
        no block is given a decorator is returned:
        ```
        @UserValidation.validate
        def rules(validation, i):
            ...
        ```
        """
        if block is None:

            def decorator(function: ValidationBlock) -> ValidationBlock:
                cls.validate(function)
                return function

            return decorator
        cls.validation_block = block
        return block

    @classmethod
    def call(cls, raw_data: Any, **kwargs: Any) -> Result:
        """
        Shortcut for `cls(**kwargs)(raw_data)`
        """
        return cls(**kwargs)(raw_data)


class InstanceMethods:
    """
    Core instance level behaviour of validation classes. Calling an instance runs the validation.
    """

    def __call__(self, raw_data: Any) -> Result:
        self.set_data(raw_data)
        self.execute(type(self).validation_block)
        return self.result(input=self._input_data, output=self._output_data, errors=self._input_param.errors)

    def set_data(self, raw_data: Any) -> None:
        """
        Processes the raw data and builds the root param
        """
        self._raw_data = raw_data
        input_data = self.process_input(raw_data)
        self._input_data = raw_data if input_data is None else input_data
        output_data = self.process_output(self._input_data)
        self._output_data = self._input_data if output_data is None else output_data
        self._input_param = self.param_class("input", self._input_data)

    @property
    def param_class(self) -> type[Param]:
        """The `Param` class of this validation class"""
        return type(self).Param

    @property
    def result_class(self) -> type[Result]:
        """The `Result` class of this validation class"""
        return type(self).Result

    def process_input(self, data: Any) -> Any:  # pylint: disable=unused-argument
        """
        Override this method (or use the `data_processing` plugin) to transform the input before validation.
        Returning `None` keeps the data as is.
        """
        return None

    def process_output(self, data: Any) -> Any:  # pylint: disable=unused-argument
        """
        Override this method (or use the `data_processing` plugin) to transform the result output.
        Returning `None` keeps the data as is.
        """
        return None

    def execute(self, block: Optional[ValidationBlock]) -> None:
        """
        Executes the validation block with this instance and the root param
        """
        if block is not None:
            block(self, self._input_param)

    def result(self, input: Any, output: Any, errors: ErrorTree) -> Result:  # pylint: disable=redefined-builtin
        """
        Builds the result of the validation run
        """
        return self.result_class(input=input, output=output, errors=errors)


class Validation(ClassMethods, InstanceMethods):
    """
    The root validation class. Subclass it, store a validation block and activate the plugins you need.
    Plugins activated on `Validation` itself are available to every validation class.
    """


Param.validation_class = Validation
Result.validation_class = Validation
