from __future__ import annotations

"""
Optional append-only event log for menu activity.

Disabled until `init_menu_debug_log` picks a file; every `menu_debug_log` call
before that (or after `close_menu_debug_log`) is dropped.
"""

import datetime as dt
import os
from pathlib import Path
from threading import Lock


_LOG_LOCK = Lock()
_LOG_PATH: Path | None = None


def _format_value(value: object) -> str:
    text = str(value)
    return text.replace("\n", "\\n")


def _format_fields(fields: dict[str, object]) -> str:
    return " ".join(f"{key}={_format_value(fields[key])}" for key in sorted(fields))


def menu_debug_log_path() -> Path | None:
    with _LOG_LOCK:
        return _LOG_PATH


def init_menu_debug_log(*, base_dir: Path) -> Path:
    timestamp = dt.datetime.now(dt.timezone.utc).strftime("%Y%m%dT%H%M%S.%fZ")
    path = base_dir / "logs" / f"slotmenu-pid{os.getpid()}-{timestamp}.log"
    path.parent.mkdir(parents=True, exist_ok=True)

    with _LOG_LOCK:
        global _LOG_PATH
        _LOG_PATH = path

    menu_debug_log("init", pid=int(os.getpid()))
    return path


def close_menu_debug_log() -> None:
    with _LOG_LOCK:
        global _LOG_PATH
        _LOG_PATH = None


def menu_debug_log(event: str, **fields: object) -> None:
    timestamp = dt.datetime.now(dt.timezone.utc).isoformat(timespec="milliseconds")
    payload = _format_fields(fields)
    line = f"{timestamp} event={str(event).strip()}"
    if payload:
        line += f" {payload}"
    line += "\n"

    with _LOG_LOCK:
        path = _LOG_PATH
        if path is None:
            return
        with path.open("a", encoding="utf-8") as handle:
            handle.write(line)


__all__ = [
    "close_menu_debug_log",
    "init_menu_debug_log",
    "menu_debug_log",
    "menu_debug_log_path",
]
