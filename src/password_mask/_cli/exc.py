import pathlib
from dataclasses import dataclass
from typing import NotRequired, TypedDict

import click
from typing_extensions import override

from ..exc import ApplicationError

# exit code of `validate` when the password breaks the mask; 1 and 2 are taken by
# click for usage errors
PASSWORD_REJECTED_EXIT_CODE = 65


class Location(TypedDict):
    filename: pathlib.Path
    line: NotRequired[int]


@dataclass(slots=True)
class CLIError(click.ClickException):
    """
    Base class for errors reported to the terminal user.

    Warning:
        User-defined exit codes are restricted to the range 64 - 113, see
        https://tldp.org/LDP/abs/html/exitcodes.html.
    """

    message: str
    exit_code: int = 1

    def __post_init__(self) -> None:
        click.ClickException.__init__(self, self.message)

    @classmethod
    def from_application_error(cls, ex: ApplicationError) -> "CLIError":
        return cls(str(ex))


@dataclass(slots=True)
class ConfigError(CLIError):
    pass


@dataclass(slots=True, kw_only=True)
class ConfigSyntaxError(ConfigError):
    class Context(TypedDict):
        loc: Location

    ctx: Context

    @override
    def format_message(self) -> str:
        return "Decoding failed for configuration file %r.\n\n%s" % (
            str(self.ctx["loc"]["filename"]),
            self.message,
        )


@dataclass(slots=True, kw_only=True)
class ConfigValidationError(ConfigError):
    @override
    def format_message(self) -> str:
        return "Invalid configuration input.\n\n%s" % self.message


@dataclass(slots=True)
class PasswordRejectedError(CLIError):
    """Raised by ``validate`` after the individual violations have been printed."""

    exit_code: int = PASSWORD_REJECTED_EXIT_CODE

    @override
    def format_message(self) -> str:
        return "Password rejected: %s" % self.message
