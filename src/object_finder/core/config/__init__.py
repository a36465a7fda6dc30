"""object_finder settings.

This package holds the small set of options that tune string parsing during
coercion. Settings load from a YAML file and environment variables, are
validated with Pydantic, and are immutable once built.

Example usage:
```python
from object_finder import Finder
from object_finder.core.config import load_settings

# OBJECT_FINDER_ALLOW_HEX_INTEGERS=false in the environment
finder = Finder(load_settings())
finder.find_or_null({"id": "0x1F"}, int, "id")  # None
```
"""

from object_finder.core.exceptions import ConfigError

from .loader import load_settings
from .schema import DEFAULT_SETTINGS, FinderSettings

__all__ = ["FinderSettings", "DEFAULT_SETTINGS", "load_settings", "ConfigError"]
