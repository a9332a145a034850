"""Append-only debug log shared by the app and the entry point."""

from __future__ import annotations

import os
from datetime import datetime, timezone
from pathlib import Path

from pizzeria.config import DEBUG_LOG_ENV, DEBUG_LOG_PATH

_override_path: Path | None = None


def set_debug_log_path(path: str | Path | None) -> None:
    """Force a log path, taking precedence over the environment."""
    global _override_path
    _override_path = Path(path) if path else None


def resolve_debug_log_path() -> Path:
    """
    Resolve the debug log path.

    Resolution order:
    1. set_debug_log_path() (the --debug-log option)
    2. PIZZERIA_DEBUG_LOG (if set)
    3. DEBUG_LOG_PATH
    """
    if _override_path is not None:
        return _override_path
    env_override = os.environ.get(DEBUG_LOG_ENV, "").strip()
    if env_override:
        return Path(env_override)
    return Path(DEBUG_LOG_PATH)


def log_debug(message: str) -> None:
    path = resolve_debug_log_path()
    try:
        ts = datetime.now(timezone.utc).isoformat()
        path.parent.mkdir(parents=True, exist_ok=True)
        with path.open("a", encoding="utf-8") as fh:
            fh.write(f"{ts} {message}\n")
    except OSError:
        # Logging must never interfere with app flow.
        return
