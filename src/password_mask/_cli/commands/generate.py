from typing import Optional

import click

from ...exc import ApplicationError
from ...generator import generate_password, make_random_source
from ..exc import CLIError
from ._common import get_settings, resolve_special_alphabet, special_option

__all__ = ["generate"]


@click.command()
@click.argument("mask")
@special_option
@click.option(
    "-l",
    "--length",
    type=click.IntRange(min=0),
    default=None,
    help=(
        "Length of the generated password. Defaults to the minimum length of the "
        "mask, or the number of required characters plus two if that is larger."
    ),
)
@click.option(
    "-n",
    "--count",
    type=click.IntRange(min=1),
    default=None,
    help="Number of passwords to generate.",
)
@click.option(
    "--seed",
    type=int,
    default=None,
    help=(
        "Seed a reproducible, non-cryptographic generator. Only use this for test "
        "fixtures."
    ),
)
@click.pass_context
def generate(
    ctx: click.Context,
    mask: str,
    special: Optional[str],
    length: Optional[int],
    count: Optional[int],
    seed: Optional[int],
) -> None:
    """
    Generate random passwords satisfying a mask, one per line.

    Examples:

    \b
      # Three 12 character passwords
      $ password-mask generate 11111111118 -l 12 -n 3
    """
    settings = get_settings(ctx)
    rng = make_random_source(secure=settings.secure_random, seed=seed)
    alphabet = resolve_special_alphabet(ctx, special)

    try:
        for _ in range(count or settings.default_count):
            click.echo(generate_password(mask, alphabet, length, rng=rng))
    except ApplicationError as ex:
        raise CLIError.from_application_error(ex) from ex
