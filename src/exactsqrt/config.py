from __future__ import annotations

import copy
from dataclasses import dataclass
from pathlib import Path
from typing import Any

try:
    import tomllib as toml
except Exception:
    import tomli as toml  # type: ignore

from exactsqrt.utility import UserInputError
from exactsqrt.workspace import settings_path

DEFAULTS: dict[str, dict[str, Any]] = {
    "BEHAVIOUR": {
        "DEBUG": False,
        "MAX_PRIMES_BOUND": 10_000_000,  # largest N accepted by `exactsqrt primes`
    },
    "OUTPUT": {
        "COLOR": True,
        "PRETTY": False,
        "PRIMES_PER_ROW": 10,
    },
}


@dataclass
class Settings:
    """
    Wrap the merged settings dict (defaults overlaid with the TOML file).
    .as_dict() feeds runtime.apply().
    """
    data: dict[str, Any]
    name: str
    _source: Path | None = None

    def as_dict(self) -> dict[str, Any]:
        return self.data


# --- I/O -------------------------------------------------------------------


def _load_toml(path: Path) -> dict[str, Any]:
    try:
        with path.open("rb") as f:
            return toml.load(f)
    except toml.TOMLDecodeError as e:
        lineno = getattr(e, "lineno", None)
        colno = getattr(e, "colno", None)
        msg = getattr(e, "msg", str(e))
        where = []
        if lineno is not None:
            where.append(f"line {lineno}")
        if colno is not None:
            where.append(f"column {colno}")
        loc = f" (at {', '.join(where)})" if where else ""
        # No traceback chaining
        raise UserInputError(f"reading {path.name}: {msg}{loc}.") from None


def _merge(raw: dict[str, Any], source: str) -> dict[str, Any]:
    """Overlay raw sections onto DEFAULTS, one level deep."""
    data = copy.deepcopy(DEFAULTS)
    for section, values in raw.items():
        if section in DEFAULTS:
            if not isinstance(values, dict):
                raise UserInputError(f"{source}: [{section}] must be a table.")
            data[section].update(values)
        else:
            data[section] = values
    return data


def _validate(data: dict[str, Any], source: str) -> None:
    for key in ("OUTPUT.PRIMES_PER_ROW", "BEHAVIOUR.MAX_PRIMES_BOUND"):
        section, name = key.split(".")
        v = data[section].get(name)
        if isinstance(v, bool) or not isinstance(v, int) or v < 1:
            raise UserInputError(f"{source}: {key} must be a positive integer, got {v!r}.")
    for key in ("BEHAVIOUR.DEBUG", "OUTPUT.COLOR", "OUTPUT.PRETTY"):
        section, name = key.split(".")
        if not isinstance(data[section].get(name), bool):
            raise UserInputError(f"{source}: {key} must be true or false.")


# --- Public API ------------------------------------------------------------


def load_settings(path: Path | str | None = None) -> Settings:
    """
    Load settings from `path`, or from <workspace>/settings.toml when no path
    is given. A missing workspace file yields the defaults; a missing explicit
    file is an error.
    """
    if path is None:
        src = settings_path()
        if not src.exists():
            return Settings(data=copy.deepcopy(DEFAULTS), name="default")
    else:
        src = Path(path).expanduser()
        if not src.exists():
            raise FileNotFoundError(f"Settings file not found: {src}")

    data = _merge(_load_toml(src), src.name)
    _validate(data, src.name)
    return Settings(data=data, name=src.stem, _source=src)
