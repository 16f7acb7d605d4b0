"""
Contains the `Result` class which is returned by every validation run.
"""
from typing import TYPE_CHECKING, Any, Optional

from .types import ErrorTree

if TYPE_CHECKING:
    from .validation import Validation


class ResultMethods:
    """
    Core behaviour of results. A result is a read only snapshot of one validation run: the processed input, the
    output and the error tree of the root param. Plugins may add further (lazily calculated) properties.
    """

    validation_class: "Optional[type[Validation]]" = None

    def __init__(self, input: Any, output: Any, errors: ErrorTree):  # pylint: disable=redefined-builtin
        self._input = input
        self._output = output
        self._errors = errors

    @property
    def input(self) -> Any:
        """The input data after input processing"""
        return self._input

    @property
    def output(self) -> Any:
        """The output data after output processing"""
        return self._output

    @property
    def errors(self) -> ErrorTree:
        """The error tree of the root param"""
        return self._errors

    @property
    def messages(self) -> ErrorTree:
        """
        An empty dict if the validation succeeded. Otherwise the error tree, which maps param names onto lists of
        messages or onto further nested error trees.
        """
        if self.success:
            return {}
        return self._errors

    @property
    def success(self) -> bool:
        """True if no errors were reported"""
        return len(self._errors) == 0

    @property
    def failure(self) -> bool:
        """True if errors were reported"""
        return not self.success

    def __repr__(self) -> str:
        validation_name = self.validation_class.__name__ if self.validation_class is not None else None
        return f"{validation_name}.Result(success={self.success})"


class Result(ResultMethods):
    """
    The root result class. Every validation class owns a subclass of it (`MyValidation.Result`).
    """
