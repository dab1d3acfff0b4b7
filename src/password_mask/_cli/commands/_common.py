from typing import Any, Callable, Optional, TypeVar

import click

from ... import _conf

F = TypeVar("F", bound=Callable[..., Any])


def special_option(fn: F) -> F:
    return click.option(
        "-s",
        "--special",
        "special",
        type=str,
        default=None,
        help=(
            "Characters making up the special character class, in index order. "
            "Overrides the configured alphabet."
        ),
    )(fn)


def get_settings(ctx: click.Context) -> _conf.Settings:
    if not (settings := ctx.find_object(_conf.Settings)):
        raise RuntimeError("Configuration not found")
    return settings


def resolve_special_alphabet(ctx: click.Context, special: Optional[str]) -> str:
    return special if special is not None else get_settings(ctx).special_alphabet
