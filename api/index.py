"""Serverless ASGI entry point for the dispatch board API.

Cold starts apply pending migrations at import time when AUTO_MIGRATE is
on, since the platform may not deliver lifespan events.
"""

from __future__ import annotations

import sys
from pathlib import Path

ROOT_DIR = Path(__file__).resolve().parents[1]
if str(ROOT_DIR) not in sys.path:
	sys.path.append(str(ROOT_DIR))

from dispatchboard.config import get_settings  # noqa: E402
from dispatchboard.migration_runner import run_migrations_once  # noqa: E402

if get_settings().auto_migrate:
	run_migrations_once()

from dispatchboard.main import app  # noqa: E402,F401
