from __future__ import annotations
import logging
import os
from pathlib import Path
from typing import Iterable, List

DEFAULT_PACKAGE = "CL-USER"
DEFAULT_LOG_LEVEL = "WARNING"


def paths_from_env(var: str, defaults: Iterable[Path]) -> List[Path]:
    raw = os.environ.get(var)
    if not raw:
        return [Path(p) for p in defaults]
    return [Path(p.strip()) for p in raw.split(os.pathsep) if p.strip()]


def get_load_path() -> List[Path]:
    """Directories searched by Interpreter.load for relative file names."""
    return paths_from_env("BANGLISP_LOAD_PATH", [Path.cwd()])


def get_default_package_name() -> str:
    return os.environ.get("BANGLISP_PACKAGE") or DEFAULT_PACKAGE


def get_log_level() -> int:
    name = (os.environ.get("BANGLISP_LOG_LEVEL") or DEFAULT_LOG_LEVEL).upper()
    level = logging.getLevelName(name)
    # getLevelName returns a string for unknown names
    return level if isinstance(level, int) else logging.WARNING
