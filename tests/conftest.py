# tests/conftest.py
from __future__ import annotations

import pytest

from exactsqrt import runtime
from exactsqrt.primes import PrimeTable


@pytest.fixture(autouse=True)
def isolated_workspace(tmp_path, monkeypatch):
    """Point the workspace at a temp dir and start every test with a fresh Runtime."""
    monkeypatch.setenv("EXACTSQRT_HOME", str(tmp_path))
    runtime.reset()
    return tmp_path


@pytest.fixture(scope="session")
def reduced_table():
    """
    Table of the primes <= 25 only. Lets the trial-division paths be
    exercised with small numbers (29 is already outside the table).
    """
    return PrimeTable.up_to(25)
