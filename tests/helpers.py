# tests/helpers.py
from datetime import datetime, UTC

STOREKEEPER = "storekeeper"
FIXED_TIME = datetime(2024, 1, 1, 12, 0, 0, tzinfo=UTC)
