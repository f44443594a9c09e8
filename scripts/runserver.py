#!/usr/bin/env python
"""Launch the dispatch board API for container deployments.

With RUN_DB_MIGRATIONS=1 the schema is upgraded before Uvicorn starts and
the server process is told not to migrate again on startup.
"""

from __future__ import annotations

import os
import shlex
import subprocess
import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.append(str(PROJECT_ROOT))


def _migrate_if_requested(env: dict[str, str]) -> None:
    if os.getenv("RUN_DB_MIGRATIONS") != "1":
        return
    from dispatchboard.migration_runner import run_migrations_once

    print("[runserver] RUN_DB_MIGRATIONS=1 detected. Applying migrations...", flush=True)
    run_migrations_once()
    env["AUTO_MIGRATE"] = "false"


def _server_command() -> list[str]:
    configured = os.getenv("RUNSERVER_CMD")
    if configured:
        return shlex.split(configured)
    command = [
        "uvicorn",
        "dispatchboard.main:app",
        "--host",
        os.getenv("HOST", "0.0.0.0"),
        "--port",
        os.getenv("PORT", "8000"),
        "--log-level",
        os.getenv("LOG_LEVEL", "info").lower(),
    ]
    if os.getenv("ENVIRONMENT", "development") == "development":
        command.append("--reload")
    return command


def main() -> int:
    env = dict(os.environ)
    try:
        _migrate_if_requested(env)
        command = _server_command()
        print(f"[runserver] Starting server: {' '.join(command)}", flush=True)
        subprocess.run(command, check=True, cwd=PROJECT_ROOT, env=env)
    except subprocess.CalledProcessError as exc:
        print(f"[runserver] command failed: {exc}", file=sys.stderr)
        return exc.returncode or 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
