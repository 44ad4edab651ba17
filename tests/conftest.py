"""Shared pytest fixtures for tcknctl tests."""

from __future__ import annotations

from pathlib import Path

import pytest
from click.testing import CliRunner


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def _isolated_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Run in an empty temp directory with no config env overrides.

    Use via ``@pytest.mark.usefixtures("_isolated_cwd")`` so config discovery
    never picks up a ``tcknctl.toml`` from the developer's checkout.
    """
    monkeypatch.chdir(tmp_path)
    for var in ("TCKNCTL_CONFIG", "TCKNCTL_GENERATOR__SEED", "TCKNCTL_VALIDATOR__STRICT"):
        monkeypatch.delenv(var, raising=False)
