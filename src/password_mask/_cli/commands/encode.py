import click

from ...dto import PolicyConfig
from ...parser import encode_mask

__all__ = ["encode"]

_Index = click.IntRange(0, 9)


@click.command()
@click.option("--upper/--no-upper", default=False, help="Allow A-Z.")
@click.option("--upper-index", type=_Index, default=0, show_default=True)
@click.option("--lower/--no-lower", default=False, help="Allow a-z.")
@click.option("--lower-index", type=_Index, default=0, show_default=True)
@click.option("--digits-low/--no-digits-low", default=False, help="Allow 0-5.")
@click.option("--digits-low-index", type=_Index, default=0, show_default=True)
@click.option("--digits-high/--no-digits-high", default=False, help="Allow 6-9.")
@click.option("--digits-high-index", type=_Index, default=0, show_default=True)
@click.option("--special/--no-special", default=False, help="Allow special characters.")
@click.option("--special-index", type=_Index, default=0, show_default=True)
@click.option("--min-length", type=click.IntRange(1, 9), default=1, show_default=True)
def encode(
    upper: bool,
    upper_index: int,
    lower: bool,
    lower_index: int,
    digits_low: bool,
    digits_low_index: int,
    digits_high: bool,
    digits_high_index: int,
    special: bool,
    special_index: int,
    min_length: int,
) -> None:
    """
    Build a mask from individual rules.

    An index selects the character of its class a password must contain, counting
    from 1 and wrapping around the end of the class. 0 requires no specific
    character.

    Examples:

    \b
      # Letters only, must contain 'B', at least 6 characters
      $ password-mask encode --upper --upper-index 2 --lower --min-length 6
      12100000006
    """
    config = PolicyConfig(
        uppercase_allowed=upper,
        required_uppercase_index=upper_index,
        lowercase_allowed=lower,
        required_lowercase_index=lower_index,
        digits_low_allowed=digits_low,
        required_digit_low_index=digits_low_index,
        digits_high_allowed=digits_high,
        required_digit_high_index=digits_high_index,
        special_allowed=special,
        required_special_index=special_index,
        min_length=min_length,
    )
    click.echo(encode_mask(config))
