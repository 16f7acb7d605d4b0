"""
Contains the `Param` class which represents one node of the validated data. Params are created fresh for every
declaration inside a validation block and collect the error messages of the node and of its descendants.
"""
from collections.abc import Mapping, Sequence
from typing import TYPE_CHECKING, Any, Callable, Iterable, Optional

from .types import ErrorTree, ParamBlock, ParamName
from .utils.query_object import fetch

if TYPE_CHECKING:
    from .validation import Validation


def _decorator(run: Callable[[ParamBlock], None]) -> Callable[[ParamBlock], ParamBlock]:
    """
    Turns a declaration into a decorator which executes the decorated function right away, e.g.:
    ```
    @i.params("city", "street")
    def _(city, street):
        ...
    ```
    """

    def decorator(block: ParamBlock) -> ParamBlock:
        run(block)
        return block

    return decorator


class ParamMethods:
    """
    Core behaviour of params. Plugins extend params by contributing their own `ParamMethods` which get inserted
    in front of this class in the method resolution order of a validation class' `Param`.
    """

    validation_class: "Optional[type[Validation]]" = None

    def __init__(self, name: Optional[ParamName], value: Any):
        self.name = name
        self.value = value
        self.errors: ErrorTree = []

    def __getitem__(self, key: Any) -> Optional[Any]:
        return self.fetch(key)

    def fetch(self, key: Any) -> Optional[Any]:
        """
        Returns the nested value stored under `key` or `None` if the value does not support keyed/indexed access.
        """
        return fetch(self.value, key)

    def param(self, name: ParamName, block: Optional[ParamBlock] = None):
        """
        Declares the child param `name` and executes `block` with it. Errors of the child are nested under `name`.
        Nothing happens if this param is already invalid.
        """
        if block is None:
            return _decorator(lambda fn: self.param(name, fn))
        if self.flat and self.invalid:
            return None
        child = self._build_param(name, self[name])
        block(child)
        if child.invalid:
            self._nest_errors(name, child.errors)
        return None

    def params(self, *names: ParamName, block: Optional[ParamBlock] = None):
        """
        Declares multiple child params at once. All params are built before `block` gets executed with them as
        positional arguments, so the validation logic can relate siblings to each other.
        """
        if block is None:
            return _decorator(lambda fn: self.params(*names, block=fn))
        if self.flat and self.invalid:
            return None
        children = {name: self._build_param(name, self[name]) for name in names}
        block(*children.values())
        for name, child in children.items():
            if child.invalid:
                self._nest_errors(name, child.errors)
        return None

    def each(self, block: Optional[ParamBlock] = None, mapping: bool = False, with_index: bool = False):
        """
        Declares a param for every member of a sequence and executes `block` with it. Members are named by their
        position. If `mapping` is True the value has to be a mapping instead and members are named by their key.
        If `with_index` is True the position gets passed to `block` as a second argument.
        If the value does not have the expected shape this is a no-op: validate the type of the value separately.
        """
        if block is None:
            return _decorator(lambda fn: self.each(fn, mapping=mapping, with_index=with_index))
        if self.flat and self.invalid:
            return None
        members: Iterable[tuple[Any, Any]]
        if mapping:
            if not isinstance(self.value, Mapping):
                return None
            members = self.value.items()
        else:
            if not isinstance(self.value, Sequence) or isinstance(self.value, (str, bytes, bytearray)):
                return None
            members = enumerate(self.value)
        for index, (member_name, member_value) in enumerate(members):
            member = self._build_param(member_name, member_value)
            if with_index:
                block(member, index)
            else:
                block(member)
            if member.invalid:
                self._nest_errors(member.name, member.errors)
        return None

    @property
    def valid(self) -> bool:
        """True if no errors are present"""
        return len(self.errors) == 0

    @property
    def invalid(self) -> bool:
        """True if errors are present"""
        return not self.valid

    @property
    def flat(self) -> bool:
        """True as long as no child param reported errors (`errors` is still a list of messages)"""
        return isinstance(self.errors, list)

    def add_error(self, message: str) -> None:
        """
        Appends an error message. Only meaningful while the param is flat.
        """
        assert isinstance(self.errors, list), "can't add flat error messages to a param with nested errors"
        self.errors.append(message)

    def __repr__(self) -> str:
        validation_name = self.validation_class.__name__ if self.validation_class is not None else None
        return f"{validation_name}.Param(name={self.name!r}, value={self.value!r}, errors={self.errors!r})"

    def _nest_errors(self, name: ParamName, messages: ErrorTree) -> None:
        if not isinstance(self.errors, dict):
            self.errors = {}
        self.errors[name] = messages

    def _build_param(self, name: ParamName, value: Any) -> "ParamMethods":
        return type(self)(name, value)


class Param(ParamMethods):
    """
    The root param class. Every validation class owns a subclass of it (`MyValidation.Param`).
    """
