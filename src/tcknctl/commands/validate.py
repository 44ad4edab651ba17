"""Command: validate a TCKN."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from tcknctl.commands._base import TcknCommand

if TYPE_CHECKING:
    from tcknctl.commands._context import AppContext


@click.command(
    cls=TcknCommand,
    examples="""\
  tcknctl validate 12345678950
  tcknctl validate 12345678951 --strict
  tcknctl --json validate 12345678950""",
)
@click.argument("value")
@click.option("--strict", is_flag=True, help="Exit with status 1 when the value is invalid.")
@click.pass_obj
def validate(app: AppContext, value: str, strict: bool) -> None:
    """Check whether VALUE is a valid TCKN."""
    from tcknctl.services.tckn import TcknService

    strict = strict or app.settings.validator.strict
    app.emit(TcknService().validate(value, strict=strict))
