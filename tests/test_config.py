# tests/test_config.py
from __future__ import annotations

import pytest

from exactsqrt.config import DEFAULTS, load_settings
from exactsqrt.runtime import APPLY, CFG
from exactsqrt.runtime import current as _rt_current
from exactsqrt.utility import UserInputError


def test_defaults_without_settings_file():
    s = load_settings()
    assert s.name == "default"
    assert s._source is None
    assert s.as_dict() == DEFAULTS
    assert s.as_dict() is not DEFAULTS


def test_workspace_file_overlays_defaults(isolated_workspace):
    (isolated_workspace / "settings.toml").write_text(
        "[OUTPUT]\nPRIMES_PER_ROW = 4\n\n[EXTRA]\nNOTE = 'kept'\n", encoding="utf-8"
    )
    s = load_settings()
    assert s.name == "settings"
    assert s.data["OUTPUT"]["PRIMES_PER_ROW"] == 4
    assert s.data["OUTPUT"]["COLOR"] is True
    assert s.data["EXTRA"] == {"NOTE": "kept"}


def test_explicit_path(tmp_path):
    p = tmp_path / "quiet.toml"
    p.write_text("[OUTPUT]\nCOLOR = false\n", encoding="utf-8")
    s = load_settings(p)
    assert s.name == "quiet"
    assert s.data["OUTPUT"]["COLOR"] is False


def test_explicit_path_missing(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_settings(tmp_path / "nope.toml")


@pytest.mark.parametrize(
    "text",
    [
        "[OUTPUT\n",
        "OUTPUT = 3\n",
        "[OUTPUT]\nPRIMES_PER_ROW = 0\n",
        "[OUTPUT]\nPRIMES_PER_ROW = 'ten'\n",
        "[BEHAVIOUR]\nDEBUG = 'yes'\n",
        "[BEHAVIOUR]\nMAX_PRIMES_BOUND = -5\n",
    ],
)
def test_invalid_settings(isolated_workspace, text):
    (isolated_workspace / "settings.toml").write_text(text, encoding="utf-8")
    with pytest.raises(UserInputError):
        load_settings()


def test_apply_and_dotted_lookup():
    APPLY({"OUTPUT": {"PRIMES_PER_ROW": 7}, "BEHAVIOUR": {"DEBUG": True}})
    assert CFG("OUTPUT.PRIMES_PER_ROW") == 7
    assert CFG("OUTPUT.MISSING", "x") == "x"
    assert CFG("NOPE.DEEP", 1) == 1
    assert _rt_current().debug is True


def test_apply_settings_object(tmp_path):
    p = tmp_path / "plain.toml"
    p.write_text("[OUTPUT]\nCOLOR = false\n", encoding="utf-8")
    APPLY(load_settings(p))
    rt = _rt_current()
    assert rt.profile_name == "plain"
    assert rt.color is False
    assert rt.debug is False
    assert CFG("BEHAVIOUR.MAX_PRIMES_BOUND") == 10_000_000
