from dataclasses import dataclass

from typing_extensions import TypedDict, override

__all__ = (
    "ApplicationError",
    "MaskError",
    "MalformedMaskError",
    "InvalidSpecialAlphabetError",
    "GenerationError",
    "NoAllowedCharactersError",
    "LengthBelowMinimumError",
    "LengthBelowRequiredCountError",
)


@dataclass(slots=True)
class ApplicationError(Exception):
    class Context(TypedDict): ...

    message: str
    ctx: Context | None = None

    def format_message(self) -> str:
        return self.message.format(ctx=self.ctx or {})

    @override
    def __str__(self) -> str:
        return self.format_message()


@dataclass(slots=True)
class MaskError(ApplicationError):
    """Raised when a mask, or the alphabet supplied with it, cannot be parsed."""


@dataclass(slots=True)
class MalformedMaskError(MaskError):
    """
    Raised when a mask is not a string of exactly 11 decimal digits.
    """

    class Context(TypedDict):
        mask: str

    ctx: Context | None = None


@dataclass(slots=True)
class InvalidSpecialAlphabetError(MaskError):
    """
    Raised when the special alphabet holds entries that are not single characters,
    or is empty while the mask allows special characters.
    """

    class Context(TypedDict):
        entry: object

    ctx: Context | None = None


@dataclass(slots=True)
class GenerationError(ApplicationError):
    """Base class for failures that prevent a password from being generated."""


@dataclass(slots=True)
class NoAllowedCharactersError(GenerationError):
    """Raised when every character class of a mask is disabled."""

    class Context(TypedDict):
        mask: str

    ctx: Context | None = None


@dataclass(slots=True, kw_only=True)
class LengthBelowMinimumError(GenerationError):
    class Context(TypedDict):
        target_length: int
        min_length: int

    ctx: Context


@dataclass(slots=True, kw_only=True)
class LengthBelowRequiredCountError(GenerationError):
    """
    Raised when the requested length cannot hold one occurrence of every required
    character.
    """

    class Context(TypedDict):
        target_length: int
        required_count: int

    ctx: Context
