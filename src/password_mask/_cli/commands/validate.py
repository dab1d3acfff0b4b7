from logging import getLogger
from typing import Optional

import click
from rich.console import Console

from ...validator import validate_password
from ..exc import CLIError, PasswordRejectedError
from ..render import render_validation
from ._common import resolve_special_alphabet, special_option

__all__ = ["validate"]

logger = getLogger(__name__)


@click.command()
@click.argument("mask")
@click.argument("password", required=False)
@special_option
@click.option(
    "--json", "as_json", is_flag=True, default=False, help="Print the result as JSON."
)
@click.pass_context
def validate(
    ctx: click.Context,
    mask: str,
    password: Optional[str],
    special: Optional[str],
    as_json: bool,
) -> None:
    """
    Check a password against a mask.

    The password is read from a hidden prompt when it is not passed as an argument.
    Exits with status 65 when the password breaks any rule.

    Examples:

    \b
      $ password-mask validate 11111111119 'Abc06!defg'
    """
    if password is None:
        password = click.prompt("Password", hide_input=True)
    assert password is not None

    result = validate_password(password, mask, resolve_special_alphabet(ctx, special))

    if result.details is None:
        raise CLIError(result.errors[0])

    if as_json:
        click.echo(result.model_dump_json(indent=2))
    else:
        Console().print(render_validation(mask, result))

    if not result.is_valid:
        logger.debug("password rejected with %d error(s)", len(result.errors))
        raise PasswordRejectedError("%d rule(s) violated" % len(result.errors))
