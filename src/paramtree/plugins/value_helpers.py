"""
The `value_helpers` plugin adds some useful methods to params which help to inspect their values:
```
@i.param("email")
def _(email):
    if email.blank:
        email.add_error("must be present")
    elif not email.type_of(str):
        email.add_error("must be string")
```
`type_of` accepts classes (`str`), type names (`"string"`, see `TYPE_REFERENCES`) and typing constructs
(`list[str]`, `Optional[int]`) which are checked with typeguard.
"""
import datetime
import numbers
import re
import sys
from collections.abc import Mapping
from decimal import Decimal
from typing import Any, Optional, get_origin

from frozendict import frozendict
from typeguard import CollectionCheckStrategy, TypeCheckError, check_type

from ..errors import ConfigurationError
from ..utils.query_object import dig
from . import register_plugin

TYPE_REFERENCES: frozendict[str, Any] = frozendict(
    {
        "string": str,
        "integer": int,
        "float": float,
        "decimal": (float, Decimal),
        "numeric": numbers.Number,
        "boolean": bool,
        "none": type(None),
        "list": list,
        "dict": Mapping,
        "date": datetime.date,
        "datetime": datetime.datetime,
        "time": datetime.time,
    }
)

TYPE_NAMES: frozendict[type, str] = frozendict({str: "string", int: "integer", bool: "boolean", type(None): "none"})

_BLANK_STRING = re.compile(r"\s*")


def type_name(type_ref: Any) -> str:
    """Returns a human readable name of `type_ref` which is used in error messages"""
    if isinstance(type_ref, str):
        return type_ref
    if isinstance(type_ref, type):
        return TYPE_NAMES.get(type_ref, type_ref.__name__.lower())
    return str(type_ref)


def _is_instance(value: Any, type_ref: Any) -> bool:
    if isinstance(value, bool) and type_ref is int:
        return False
    return isinstance(value, type_ref)


class ParamMethods:
    """Adds value inspection methods to params"""

    def dig(self, *path: Any) -> Optional[Any]:
        """Returns the value found at `path` inside this param's value or None"""
        return dig(self.value, *path)

    @property
    def present(self) -> bool:
        """True if the value is not blank"""
        return not self.blank

    @property
    def blank(self) -> bool:
        """
        True for None, False, empty strings (or strings consisting of whitespace only) and empty containers.
        Numbers, dates and True are never blank.
        """
        value = self.value
        if value is None or value is False:
            return True
        if value is True or isinstance(value, (numbers.Number, datetime.date, datetime.time)):
            return False
        if isinstance(value, str):
            return self.empty_string
        if hasattr(value, "__len__"):
            return len(value) == 0
        return not value

    @property
    def empty_string(self) -> bool:
        """True if the value is a string consisting of whitespace only"""
        return isinstance(self.value, str) and _BLANK_STRING.fullmatch(self.value) is not None

    def type_of(self, type_ref: Any) -> bool:
        """
        Checks the type of the value. `bool` values are not considered integers.
        """
        if isinstance(type_ref, str):
            if type_ref not in TYPE_REFERENCES:
                raise ConfigurationError(f"unsupported type reference '{type_ref}'")
            type_ref = TYPE_REFERENCES[type_ref]
        if isinstance(type_ref, (type, tuple)) and get_origin(type_ref) is None:
            return _is_instance(self.value, type_ref)
        try:
            check_type(self.value, type_ref, collection_check_strategy=CollectionCheckStrategy.ALL_ITEMS)
        except TypeCheckError:
            return False
        return True


register_plugin("value_helpers", sys.modules[__name__])
