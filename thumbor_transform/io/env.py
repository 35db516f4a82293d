"""
Helpers for resolving environment placeholders in configuration strings.
"""

from __future__ import annotations

import os
import re
from pathlib import Path
from typing import Mapping, Optional

from dotenv import load_dotenv

THUMBOR_ENV_FILENAME = "thumbor.env"

_WHOLE_VAR_RE = re.compile(r"^\$([A-Za-z_][A-Za-z0-9_]*)$")
_INLINE_VAR_RE = re.compile(r"\$\{([A-Za-z_][A-Za-z0-9_]*)\}")


def default_env_path() -> Path:
    return Path.cwd() / THUMBOR_ENV_FILENAME


def load_env(path: Optional[Path] = None, override: bool = False) -> bool:
    """
    Load a dotenv file into the process environment.

    Returns True if at least one variable was set.
    """
    return load_dotenv(dotenv_path=path or default_env_path(), override=override)


def parse_env(value: Optional[str], environ: Optional[Mapping[str, str]] = None) -> Optional[str]:
    """
    Resolve ``$NAME`` (whole value) and ``${NAME}`` (inline) placeholders.

    Unknown names are left untouched so a misconfigured value stays visible.
    """
    if not value:
        return value
    environ = os.environ if environ is None else environ

    match = _WHOLE_VAR_RE.match(value)
    if match:
        return environ.get(match.group(1), value)

    return _INLINE_VAR_RE.sub(lambda m: environ.get(m.group(1), m.group(0)), value)
