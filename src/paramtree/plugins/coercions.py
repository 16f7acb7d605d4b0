"""
The `coercions` plugin coerces the input data according to a type schema before it gets validated:
```
UserValidation.plugin("coercions")
UserValidation.coerce({"username": "string", "age": "integer", "tags": ["string"], "address": {"zip": "integer"}})

UserValidation.call({"age": "18", "tags": ["a", 1]}).input  # -> {"age": 18, "tags": ["a", "1"]}
```
Nested dicts in the schema describe nested mappings, a list with one member describes the members of a list.
Keys which are not part of the schema are left untouched.

Coercions are lenient: values which cannot be coerced are returned unchanged so that the validation can report
them. Prefix a type with `strict_` (e.g. `"strict_integer"`) to raise a `CoercionError` instead. The message
can be customised with the `strict_error_message` option (a string or a callable receiving the value and the
type name).

Every validation class owns its own `Coerce` class. Custom coercions are registered on it:
```
@UserValidation.Coerce.coerce_to("upcase")
def to_upcase(coerce, value):
    return value.upper()
```
or on activation: `plugin("coercions", block=lambda coerce_class: ...)`.
"""
import datetime
import re
import sys
from collections.abc import Mapping
from decimal import Decimal, InvalidOperation
from typing import Any, Callable, Optional

from frozendict import frozendict

from ..errors import CoercionError, ConfigurationError
from . import register_plugin

CoercionFunction = Callable[["Coerce", Any], Any]

STRICT_PREFIX = "strict_"

TYPE_ALIASES: frozendict[Any, str] = frozendict(
    {
        str: "string",
        int: "integer",
        float: "float",
        Decimal: "decimal",
        bool: "boolean",
        list: "list",
        dict: "dict",
        datetime.date: "date",
        datetime.datetime: "datetime",
        datetime.time: "time",
    }
)

_BLANK_STRING = re.compile(r"\s*")
_TRUE_STRING = re.compile(r"1|t(rue)?|y(es)?|on", re.IGNORECASE)
_FALSE_STRING = re.compile(r"0|f(alse)?|no?|off", re.IGNORECASE)


def _empty_string(value: Any) -> bool:
    return isinstance(value, str) and _BLANK_STRING.fullmatch(value) is not None


def configure(
    validation: Any,
    strict_error_message: Optional[str | Callable[[Any, str], str]] = None,
    block: Optional[Callable[[type["Coerce"]], None]] = None,
) -> None:
    """
    Creates the validation class' own `Coerce` class (if not existent yet) and stores the strict error message.
    `block` gets called with the `Coerce` class to register custom coercions.
    """
    if "Coerce" not in vars(validation):
        validation.Coerce = type("Coerce", (getattr(validation, "Coerce", Coerce),), {"coercions": {}})
    validation.Coerce.validation_class = validation
    if block is not None:
        block(validation.Coerce)
    if strict_error_message is not None or "coercions_strict_error_message" not in validation.opts:
        validation.opts["coercions_strict_error_message"] = strict_error_message


class Coerce:
    """
    A table of coercion functions. Look ups walk up the class hierarchy, so subclasses inherit the coercions of
    their parents and may override them.
    """

    validation_class: Any = None
    coercions: dict[str, CoercionFunction] = {}

    @classmethod
    def coerce_to(cls, type_name: str) -> Callable[[CoercionFunction], CoercionFunction]:
        """Decorator which registers a coercion function for `type_name`"""

        def decorator(function: CoercionFunction) -> CoercionFunction:
            cls.coercions[type_name] = function
            return function

        return decorator

    @classmethod
    def lookup(cls, type_name: str) -> CoercionFunction:
        """Returns the coercion function for `type_name` or raises a `ConfigurationError`"""
        for klass in cls.__mro__:
            coercions = vars(klass).get("coercions", {})
            if type_name in coercions:
                return coercions[type_name]
        raise ConfigurationError(f"unknown coercion type '{type_name}'")

    def to(self, type_ref: Any, value: Any) -> Any:  # pylint: disable=invalid-name
        """
        Coerces `value` to `type_ref`. Values which can't be coerced are returned as they are, unless `type_ref`
        is prefixed with `strict_`.
        """
        type_name = TYPE_ALIASES.get(type_ref, type_ref) if not isinstance(type_ref, str) else type_ref
        if not isinstance(type_name, str):
            raise ConfigurationError(f"unknown coercion type '{type_ref}'")
        is_strict = type_name.startswith(STRICT_PREFIX)
        if is_strict:
            type_name = type_name[len(STRICT_PREFIX) :]
        coercion = self.lookup(type_name)
        try:
            return coercion(self, value)
        except (ValueError, TypeError, ArithmeticError) as error:
            if is_strict:
                raise CoercionError(self._error_message(value, type_name), value, type_name) from error
            return value

    def _error_message(self, value: Any, type_name: str) -> str:
        message = None
        if self.validation_class is not None:
            message = self.validation_class.opts.get("coercions_strict_error_message")
        if message is None:
            return f"cannot coerce {value!r} to {type_name}"
        return message if isinstance(message, str) else message(value, type_name)


@Coerce.coerce_to("any")
def _to_any(_: Coerce, value: Any) -> Any:
    return None if _empty_string(value) else value


@Coerce.coerce_to("string")
def _to_string(_: Coerce, value: Any) -> Optional[str]:
    if value is None or _empty_string(value):
        return None
    if isinstance(value, str):
        return value
    if isinstance(value, (int, float, Decimal)) and not isinstance(value, bool):
        return str(value)
    raise TypeError(f"{value!r} is not a string")


@Coerce.coerce_to("integer")
def _to_integer(_: Coerce, value: Any) -> Optional[int]:
    if value is None or _empty_string(value):
        return None
    if isinstance(value, bool):
        raise TypeError("booleans are not coerced to integers")
    if isinstance(value, float) and not value.is_integer():
        raise ValueError(f"{value!r} is not an integer")
    return int(value)


@Coerce.coerce_to("float")
def _to_float(_: Coerce, value: Any) -> Optional[float]:
    if value is None or _empty_string(value):
        return None
    if isinstance(value, bool):
        raise TypeError("booleans are not coerced to floats")
    return float(value)


@Coerce.coerce_to("decimal")
def _to_decimal(_: Coerce, value: Any) -> Optional[Decimal]:
    if value is None or _empty_string(value):
        return None
    if isinstance(value, bool):
        raise TypeError("booleans are not coerced to decimals")
    try:
        return Decimal(str(value) if isinstance(value, float) else value)
    except InvalidOperation as error:
        raise ValueError(f"{value!r} is not a decimal") from error


@Coerce.coerce_to("date")
def _to_date(_: Coerce, value: Any) -> Optional[datetime.date]:
    if value is None or _empty_string(value):
        return None
    if isinstance(value, datetime.datetime):
        return value.date()
    if isinstance(value, datetime.date):
        return value
    return datetime.date.fromisoformat(value)


@Coerce.coerce_to("datetime")
def _to_datetime(_: Coerce, value: Any) -> Optional[datetime.datetime]:
    if value is None or _empty_string(value):
        return None
    if isinstance(value, datetime.datetime):
        return value
    return datetime.datetime.fromisoformat(value)


@Coerce.coerce_to("time")
def _to_time(_: Coerce, value: Any) -> Optional[datetime.time]:
    if value is None or _empty_string(value):
        return None
    if isinstance(value, datetime.time):
        return value
    return datetime.time.fromisoformat(value)


@Coerce.coerce_to("boolean")
def _to_boolean(_: Coerce, value: Any) -> Optional[bool]:
    if value is None or _empty_string(value):
        return None
    if value is True or value is False:
        return value
    if value in (0, 1) and isinstance(value, int):
        return value == 1
    if isinstance(value, str) and _TRUE_STRING.fullmatch(value):
        return True
    if isinstance(value, str) and _FALSE_STRING.fullmatch(value):
        return False
    raise ValueError(f"{value!r} is not a boolean")


@Coerce.coerce_to("list")
def _to_list(_: Coerce, value: Any) -> list:
    if value is None or _empty_string(value):
        return []
    if isinstance(value, list):
        return value
    raise TypeError(f"{value!r} is not a list")


@Coerce.coerce_to("dict")
def _to_dict(_: Coerce, value: Any) -> Mapping:
    if value is None or _empty_string(value):
        return {}
    if isinstance(value, Mapping):
        return value
    raise TypeError(f"{value!r} is not a dict")


class Coercer:
    """
    Walks through the data and the type schema and coerces every value which has a type in the schema.
    """

    def __init__(self, coerce: Coerce):
        self.coerce = coerce

    def __call__(self, data: Any, schema: Mapping[Any, Any]) -> Any:
        if not isinstance(data, Mapping):
            return data
        return {name: self._coerce_value(schema.get(name), value) for name, value in data.items()}

    def _coerce_value(self, type_ref: Any, value: Any) -> Any:
        if type_ref is None:
            return value
        if isinstance(type_ref, Mapping):
            return self._process_dict(value, type_ref)
        if isinstance(type_ref, list):
            return self._process_list(value, type_ref[0] if type_ref else None)
        return self.coerce.to(type_ref, value)

    def _process_dict(self, value: Any, schema: Mapping[Any, Any]) -> Any:
        coerced_value = self.coerce.to("dict", value)
        if not isinstance(coerced_value, Mapping):
            return coerced_value
        return self(coerced_value, schema)

    def _process_list(self, value: Any, member_type: Any) -> Any:
        coerced_value = self.coerce.to("list", value)
        if not isinstance(coerced_value, list):
            return coerced_value
        if isinstance(member_type, list):
            member_type = member_type[0] if member_type else None
        coerced_members = (self._coerce_value(member_type, member) for member in coerced_value)
        return [member for member in coerced_members if member is not None]


class ClassMethods:
    """Adds the type schema to validation classes"""

    type_schema: Any = None

    def __init_subclass__(cls, **kwargs: Any):
        super().__init_subclass__(**kwargs)
        cls.Coerce = type("Coerce", (cls.Coerce,), {"validation_class": cls, "coercions": {}})

    @classmethod
    def coerce(cls, type_schema: Mapping[Any, Any]) -> None:
        """Stores the type schema of the input data"""
        cls.type_schema = type_schema


class InstanceMethods:
    """Coerces the input data"""

    @property
    def coerced_type_schema(self) -> Mapping[Any, Any]:
        """The type schema of the validation class. Raises a `ConfigurationError` if it's not a mapping"""
        schema = type(self).type_schema
        if schema is None:
            return {}
        if not isinstance(schema, Mapping):
            raise ConfigurationError("type schema must be a dict")
        return schema

    def process_input(self, data: Any) -> Any:
        processed = super().process_input(data)  # type:ignore[misc]
        return Coercer(type(self).Coerce())(data if processed is None else processed, self.coerced_type_schema)


register_plugin("coercions", sys.modules[__name__])
