from __future__ import annotations
import os
from pathlib import Path
from typing import Iterable, List

# Defaults
_DEFAULT_REPL_HOST = "127.0.0.1"
_DEFAULT_REPL_PORT = 8765
_DEFAULT_LOG_LEVEL = "WARNING"
_DEFAULT_PROMPT = "yall> "


def paths_from_env(var: str, defaults: Iterable[Path]) -> List[Path]:
    raw = os.environ.get(var)
    if not raw:
        return [Path(p) for p in defaults]
    return [Path(p.strip()) for p in raw.split(os.pathsep) if p.strip()]


def get_prelude_paths() -> List[Path]:
    """Source files evaluated into every new Interpreter, in order."""
    return paths_from_env("YALL_PRELUDE_PATH", [])


def get_repl_address() -> tuple[str, int]:
    host = os.environ.get("YALL_REPL_HOST") or _DEFAULT_REPL_HOST
    port = os.environ.get("YALL_REPL_PORT")
    return host, int(port) if port else _DEFAULT_REPL_PORT


def get_log_level() -> str:
    return (os.environ.get("YALL_LOG_LEVEL") or _DEFAULT_LOG_LEVEL).upper()


def get_prompt() -> str:
    return os.environ.get("YALL_PROMPT", _DEFAULT_PROMPT)
