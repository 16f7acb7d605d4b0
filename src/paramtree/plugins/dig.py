"""
The `dig` plugin adds `Param.dig` which looks up deeply nested values without declaring params for every level:
```
@i.param("address")
def _(address):
    if address.dig("location", "coordinates", 0) is None:
        address.add_error("must contain coordinates")
```
"""
import sys
from typing import Any, Optional

from ..utils.query_object import dig
from . import register_plugin


class ParamMethods:
    """Adds `dig` to params"""

    def dig(self, *path: Any) -> Optional[Any]:
        """Returns the value found at `path` inside this param's value or None"""
        return dig(self.value, *path)


register_plugin("dig", sys.modules[__name__])
