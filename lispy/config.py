from __future__ import annotations
import os
from pathlib import Path


# Defaults
_DEFAULT_PROMPT = "lispy> "
_DEFAULT_HISTORY_FILE = Path.home() / ".lispy_history"
_DEFAULT_LOG_LEVEL = "WARNING"
_DEFAULT_HOST = "127.0.0.1"
_DEFAULT_PORT = 8765


def get_prompt() -> str:
    return os.environ.get('LISPY_PROMPT', _DEFAULT_PROMPT)


def get_history_file() -> Path | None:
    # Set but empty disables history
    raw = os.environ.get('LISPY_HISTORY_FILE')
    if raw is None:
        return _DEFAULT_HISTORY_FILE
    raw = raw.strip()
    return Path(raw).expanduser() if raw else None


def get_log_level() -> str:
    return os.environ.get('LISPY_LOG_LEVEL', _DEFAULT_LOG_LEVEL).strip().upper() or _DEFAULT_LOG_LEVEL


def get_server_address() -> tuple[str, int]:
    host = os.environ.get('LISPY_HOST', _DEFAULT_HOST)
    port = os.environ.get('LISPY_PORT')
    return host, int(port) if port else _DEFAULT_PORT
