#!/usr/bin/env python3

import logging
import pathlib
from typing import Any

import click
import lazy_object_proxy
import pydantic

from password_mask._cli.commands.describe import describe
from password_mask._cli.commands.encode import encode
from password_mask._cli.commands.generate import generate
from password_mask._cli.commands.validate import validate
from password_mask._cli.exc import (
    ConfigSyntaxError,
    ConfigValidationError,
    Location,
)
from password_mask._conf import Settings
from password_mask.util.model import convert_errors, format_errors

ConfigOption = pathlib.Path | None


def validate_config(fn: ConfigOption) -> Settings:
    payload: Any = {}

    if fn is not None:
        from ruamel import yaml
        from ruamel.yaml.error import YAMLError

        _loader = yaml.YAML(typ="safe")

        try:
            payload = _loader.load(fn.read_bytes()) or {}
        except YAMLError as ex:
            raise ConfigSyntaxError(
                str(ex),
                ctx=ConfigSyntaxError.Context(loc=Location(filename=fn)),
            ) from ex

        if not isinstance(payload, dict):
            raise ConfigValidationError("  * <root>: Input must be a valid mapping")

    try:
        res = Settings(**payload)
    except pydantic.ValidationError as ex:
        raise ConfigValidationError(format_errors(convert_errors(ex))) from ex

    return res


@click.group()
@click.version_option(package_name="password-mask")
@click.option("-D", "--debug/--no-debug", default=False, help="Enable debug mode.")
@click.option(
    "-c",
    "--config",
    type=click.Path(
        dir_okay=False,
        exists=True,
        readable=True,
        path_type=pathlib.Path,
    ),
    help="Path to a YAML configuration file.",
)
@click.pass_context
def cli(ctx: click.Context, debug: bool, config: ConfigOption) -> None:
    """Validate, generate and describe passwords using 11-digit policy masks."""
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.WARNING,
    )
    ctx.obj = lazy_object_proxy.Proxy(lambda: validate_config(fn=config))


cli.add_command(validate)
cli.add_command(generate)
cli.add_command(describe)
cli.add_command(encode)


def main() -> None:
    cli(auto_envvar_prefix="PASSWORD_MASK")


if __name__ == "__main__":
    main()
