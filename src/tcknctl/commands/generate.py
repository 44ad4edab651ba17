"""Command: generate a random, checksum-valid TCKN."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from tcknctl.commands._base import TcknCommand

if TYPE_CHECKING:
    from tcknctl.commands._context import AppContext


@click.command(
    cls=TcknCommand,
    examples="""\
  tcknctl generate
  tcknctl generate --seed 42
  tcknctl -q generate
  tcknctl --json generate""",
)
@click.option("--seed", type=int, default=None, help="Seed for reproducible output.")
@click.pass_obj
def generate(app: AppContext, seed: int | None) -> None:
    """Generate a TCKN and validate it."""
    from tcknctl.services.tckn import TcknService

    if seed is None:
        seed = app.settings.generator.seed
    app.emit(TcknService(seed=seed).generate())
