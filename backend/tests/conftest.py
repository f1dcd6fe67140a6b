"""Pytest configuration to ensure local testing defaults."""

from __future__ import annotations

import os
import sys
from pathlib import Path

BACKEND_DIR = Path(__file__).resolve().parents[1]
if str(BACKEND_DIR) not in sys.path:
    sys.path.insert(0, str(BACKEND_DIR))

# Tests build their own apps; the module-level one should start without CSV seeding.
os.environ.pop("SEED_CSV_PATH", None)
os.environ.setdefault("LOG_LEVEL", "WARNING")
