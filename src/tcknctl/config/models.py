"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, tcknctl.toml only contains overrides.
An empty or missing tcknctl.toml is valid.
"""

from __future__ import annotations

from pydantic import BaseModel


class GeneratorConfig(BaseModel):
    """[generator] section."""

    model_config = {"frozen": True}

    seed: int | None = None


class ValidatorConfig(BaseModel):
    """[validator] section."""

    model_config = {"frozen": True}

    strict: bool = False
