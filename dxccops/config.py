"""Environment based configuration for dxccops.

All values are read once at import time with sensible defaults.
"""

import os

# Logging
LOG_LEVEL: str = os.getenv("DXCCOPS_LOG_LEVEL", "WARNING").upper()

# Query backend used by ``get_clublog_adapter`` when none is given:
# "scan" (linear search), "map" (dict index) or "auto".
QUERY_BACKEND: str = os.getenv("DXCCOPS_QUERY_BACKEND", "auto").lower()

# With "auto", tables holding at least this many prefix records get the
# indexed backend.
INDEX_THRESHOLD: int = int(os.getenv("DXCCOPS_INDEX_THRESHOLD", "500"))
