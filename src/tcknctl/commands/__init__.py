"""Subcommand modules for tcknctl.

Provides register_commands() which uses deferred imports to keep
``tcknctl --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all standalone commands on the root CLI group."""
    from tcknctl.commands.generate import generate
    from tcknctl.commands.validate import validate

    cli.add_command(generate)
    cli.add_command(validate)
