"""
Configuration subsystem for eosvalidate.

Static configuration loaded from environment variables (.env supported)
at import time. The rule registry reads its defaults from here.

Usage
-----
```python
from eosvalidate.core.config import Config

delimiter = Config.NAMES_LIST_DELIMITER
```
"""

from eosvalidate.core.config.config import RFC3339, RFC3339_MILLI, Config, Environment

__all__ = [
    "Config",
    "Environment",
    "RFC3339",
    "RFC3339_MILLI",
]
