from __future__ import annotations

import os
from pathlib import Path

SETTINGS_FILE = "settings.toml"


def workspace_dir() -> Path:
    env = os.environ.get("EXACTSQRT_HOME")
    if env:
        return Path(env).expanduser().resolve()
    return (Path.home() / "Documents" / "ExactSqrt").resolve()


def settings_path() -> Path:
    return workspace_dir() / SETTINGS_FILE


def resolve_output_path(path: str) -> Path:
    """
    Resolve a user-provided output path.

    - '~' expanded to user home
    - Absolute paths unchanged
    - Relative paths are relative to the workspace
    """
    if not path:
        raise ValueError("Output path is empty")
    p = Path(os.path.expanduser(path))
    if p.is_absolute():
        return p
    return workspace_dir() / p
