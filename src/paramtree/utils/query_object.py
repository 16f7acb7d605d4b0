"""
Contains the functions used to look up nested values inside the validated data.
"""
from collections.abc import Mapping, Sequence
from typing import Any, Optional


def _is_sequence(value: Any) -> bool:
    return isinstance(value, Sequence) and not isinstance(value, (str, bytes, bytearray))


def fetch(value: Any, key: Any) -> Optional[Any]:
    """
    Returns the value stored under `key` if `value` supports keyed access (a mapping) or indexed access (a sequence
    which is not a string). Missing keys, out of range indices and unsupported containers all result in `None` -
    this function never raises.
    """
    if isinstance(value, Mapping):
        return value.get(key)
    if _is_sequence(value) and isinstance(key, int) and not isinstance(key, bool):
        try:
            return value[key]
        except IndexError:
            return None
    return None


def dig(value: Any, *path: Any) -> Optional[Any]:
    """
    Follows `path` into `value` and returns whatever is found at its end. The lookup stops and returns `None` as
    soon as a point of the path cannot be resolved, e.g.:
    ```
    dig({"address": {"city": "Cologne"}}, "address", "city")  # -> "Cologne"
    dig({"tags": ["a", "b"]}, "tags", "0")  # -> None
    ```
    """
    current_obj: Any = value
    for point in path:
        if current_obj is None:
            break
        current_obj = fetch(current_obj, point)
    return current_obj


def attribute(obj: Any, attribute_path: str) -> Optional[Any]:
    """
    Tries to query the `obj` with the provided dotted `attribute_path`. If any attribute on the way is not
    existent, `None` will be returned.
    """
    current_obj: Any = obj
    for attr_name in attribute_path.split("."):
        try:
            current_obj = getattr(current_obj, attr_name)
        except AttributeError:
            return None
    return current_obj
