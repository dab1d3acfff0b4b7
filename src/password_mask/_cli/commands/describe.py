from typing import Optional

import click
from rich.console import Console

from ...descriptor import describe_mask
from ..exc import CLIError
from ..render import render_description
from ._common import resolve_special_alphabet, special_option

__all__ = ["describe"]


@click.command()
@click.argument("mask")
@special_option
@click.option(
    "--json", "as_json", is_flag=True, default=False, help="Print the rules as JSON."
)
@click.pass_context
def describe(
    ctx: click.Context, mask: str, special: Optional[str], as_json: bool
) -> None:
    """Explain the rules encoded by a mask."""
    description = describe_mask(mask, resolve_special_alphabet(ctx, special))

    if description.error is not None:
        raise CLIError(description.error)

    if as_json:
        click.echo(description.model_dump_json(indent=2, exclude={"error"}))
    else:
        Console().print(render_description(mask, description))
