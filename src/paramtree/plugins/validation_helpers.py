"""
The `validation_helpers` plugin adds a set of common validation methods to params:
```
UserValidation.plugin("validation_helpers")

@UserValidation.validate
def rules(validation, i):
    @i.params("username", "age")
    def _(username, age):
        username.validate_presence()
        username.validate_max_length(20)
        age.validate_type(int)
        age.validate_greater_than_or_equal_to(18, message="must be adult")
```
Every method accepts a custom `message`. The default messages can be overridden on activation, either with a
string or with a callable which receives the same arguments as the validation method:
```
UserValidation.plugin("validation_helpers", default_messages={"presence": "is required"})
```
The plugin activates the `value_helpers` plugin.
"""
import re
import sys
from collections.abc import Collection, Mapping
from numbers import Real
from typing import Any, Callable, Iterable, Optional, Pattern

from frozendict import frozendict

from . import register_plugin
from .value_helpers import type_name

MessageT = str | Callable[..., str]

DEFAULT_MESSAGES: frozendict[str, Callable[..., str]] = frozendict(
    {
        "absence": lambda: "must be absent",
        "acceptance": lambda: "must be accepted",
        "equality": lambda value: f"must be equal to '{value}'",
        "exact_length": lambda length: f"length must be equal to {length}",
        "exclusion": lambda values: f"cannot be one of: {', '.join(str(value) for value in values)}",
        "format": lambda: "is in invalid format",
        "greater_than": lambda value: f"must be greater than {value}",
        "greater_than_or_equal_to": lambda value: f"must be greater than or equal to {value}",
        "inclusion": lambda values: f"must be one of: {', '.join(str(value) for value in values)}",
        "length_range": lambda values: f"length must be between {min(values)} and {max(values)}",
        "less_than": lambda value: f"must be less than {value}",
        "less_than_or_equal_to": lambda value: f"must be less than or equal to {value}",
        "max_length": lambda length: f"length cannot be greater than {length}",
        "min_length": lambda length: f"length cannot be less than {length}",
        "presence": lambda: "must be present",
        "type": lambda type_ref: f"must be {type_name(type_ref)}",
    }
)

ACCEPTABLE = (1, "1", True, "true", "TRUE", "yes", "YES")


def load_dependencies(validation: Any, *args: Any, **kwargs: Any) -> None:  # pylint: disable=unused-argument
    """Activates the `value_helpers` plugin"""
    validation.plugin("value_helpers")


def configure(validation: Any, default_messages: Optional[Mapping[str, MessageT]] = None) -> None:
    """Merges `default_messages` into the default messages configured so far"""
    validation.opts["validation_default_messages"] = {
        **validation.opts.get("validation_default_messages", {}),
        **(default_messages or {}),
    }


def _length(value: Any) -> Optional[int]:
    return len(value) if hasattr(value, "__len__") else None


def _is_number(value: Any) -> bool:
    return isinstance(value, Real) and not isinstance(value, bool)


def _to_s(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, bool):
        return str(value).lower()
    return str(value)


def _contains(collection: Collection[Any], value: Any) -> bool:
    try:
        return value in collection
    except TypeError:
        # unhashable values are never members of sets or mapping keys
        return False


class ParamClassMethods:
    """Adds the lookup of default messages to the param class"""

    @classmethod
    def default_messages(cls) -> dict[str, MessageT]:
        """The built-in default messages merged with the ones configured for the validation class"""
        return {**DEFAULT_MESSAGES, **cls.validation_class.opts.get("validation_default_messages", {})}


# pylint: disable=too-many-public-methods
class ParamMethods:
    """Adds the `validate_*` methods to params"""

    def validate_absence(self, message: Optional[MessageT] = None) -> None:
        """The value has to be blank"""
        if self.present:
            self.add_error("absence", message)

    def validate_acceptance(self, accepted: Iterable[Any] = ACCEPTABLE, message: Optional[MessageT] = None) -> None:
        """The value has to be one of the `accepted` values"""
        if self.value not in list(accepted):
            self.add_error("acceptance", message)

    def validate_equality(self, rhs: Any, message: Optional[MessageT] = None) -> None:
        """The value has to be equal to `rhs` and of the same type"""
        if type(self.value) is not type(rhs) or self.value != rhs:
            self.add_error("equality", message, rhs)

    def validate_exact_length(self, exact_length: int, message: Optional[MessageT] = None) -> None:
        """The length of the value has to be `exact_length`"""
        if _length(self.value) != exact_length:
            self.add_error("exact_length", message, exact_length)

    def validate_exclusion(self, exclude_from: Collection[Any], message: Optional[MessageT] = None) -> None:
        """The value must not be one of `exclude_from`"""
        if _contains(exclude_from, self.value):
            self.add_error("exclusion", message, exclude_from)

    def validate_format(self, format_: str | Pattern[str], message: Optional[MessageT] = None) -> None:
        """The value (converted to a string, None being empty) has to match the regular expression `format_`"""
        if re.search(format_, _to_s(self.value)) is None:
            self.add_error("format", message)

    def validate_greater_than(self, rhs: Any, message: Optional[MessageT] = None) -> None:
        """The value has to be a number greater than `rhs`"""
        if not (_is_number(self.value) and self.value > rhs):
            self.add_error("greater_than", message, rhs)

    def validate_greater_than_or_equal_to(self, rhs: Any, message: Optional[MessageT] = None) -> None:
        """The value has to be a number greater than or equal to `rhs`"""
        if not (_is_number(self.value) and self.value >= rhs):
            self.add_error("greater_than_or_equal_to", message, rhs)

    validate_gteq = validate_greater_than_or_equal_to

    def validate_inclusion(self, include_in: Collection[Any], message: Optional[MessageT] = None) -> None:
        """The value has to be one of `include_in`"""
        if not _contains(include_in, self.value):
            self.add_error("inclusion", message, include_in)

    def validate_length_range(self, within: range, message: Optional[MessageT] = None) -> None:
        """The length of the value has to be within the range `within`"""
        length = _length(self.value)
        if length is None or length not in within:
            self.add_error("length_range", message, within)

    def validate_less_than(self, rhs: Any, message: Optional[MessageT] = None) -> None:
        """The value has to be a number less than `rhs`"""
        if not (_is_number(self.value) and self.value < rhs):
            self.add_error("less_than", message, rhs)

    def validate_less_than_or_equal_to(self, rhs: Any, message: Optional[MessageT] = None) -> None:
        """The value has to be a number less than or equal to `rhs`"""
        if not (_is_number(self.value) and self.value <= rhs):
            self.add_error("less_than_or_equal_to", message, rhs)

    validate_lteq = validate_less_than_or_equal_to

    def validate_max_length(self, length: int, message: Optional[MessageT] = None) -> None:
        """The length of the value must not exceed `length`"""
        value_length = _length(self.value)
        if value_length is None or value_length > length:
            self.add_error("max_length", message, length)

    def validate_min_length(self, length: int, message: Optional[MessageT] = None) -> None:
        """The length of the value must be at least `length`"""
        value_length = _length(self.value)
        if value_length is None or value_length < length:
            self.add_error("min_length", message, length)

    def validate_presence(self, message: Optional[MessageT] = None) -> None:
        """The value must not be blank"""
        if self.blank:
            self.add_error("presence", message)

    def validate_type(self, type_ref: Any, message: Optional[MessageT] = None) -> None:
        """The value has to be of type `type_ref` (see `Param.type_of`)"""
        if not self.type_of(type_ref):
            self.add_error("type", message, type_ref)

    def add_error(self, *args: Any) -> None:
        """
        Either appends a plain message (`add_error("must be nice")`) or the message of a validation
        (`add_error("presence", custom_message, *message_args)`).
        """
        if len(args) == 1 and isinstance(args[0], str):
            super().add_error(args[0])  # type:ignore[misc]
        else:
            self.errors.append(self.error_message(*args))

    def error_message(self, kind: str, message: Optional[MessageT], *args: Any) -> str:
        """Returns `message` or the default message of the validation `kind`"""
        if message is None:
            message = type(self).default_messages()[kind]
        return message if isinstance(message, str) else message(*args)


register_plugin("validation_helpers", sys.modules[__name__])
