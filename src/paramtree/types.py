"""
Contains the types used in the validation toolkit
"""
from typing import TYPE_CHECKING, Any, Callable, Protocol, TypeAlias

if TYPE_CHECKING:
    from .validation import Validation


class Hashable(Protocol):
    """
    A protocol that defines the __hash__ method.
    """

    def __hash__(self) -> int:
        ...


ParamName: TypeAlias = Hashable
ErrorTree: TypeAlias = "list[str] | dict[Any, ErrorTree]"  # pylint: disable=invalid-name
ParamBlock: TypeAlias = Callable[..., Any]
ValidationBlock: TypeAlias = Callable[..., Any]
ProcessingBlock: TypeAlias = "Callable[[Validation, Any], Any]"  # pylint: disable=invalid-name
