import random
import secrets
from dataclasses import dataclass, field
from logging import getLogger
from typing import Iterable, Optional, Protocol, runtime_checkable

from . import constants
from .charset import allowed_alphabet, required_characters
from .exc import (
    LengthBelowMinimumError,
    LengthBelowRequiredCountError,
    NoAllowedCharactersError,
)
from .parser import parse_mask

__all__ = (
    "RandomSource",
    "SecureRandomSource",
    "SeededRandomSource",
    "make_random_source",
    "generate_password",
)

logger = getLogger(__name__)


@runtime_checkable
class RandomSource(Protocol):
    def randbelow(self, n: int) -> int:
        """Returns a uniformly distributed integer in ``[0, n)``."""
        ...


@dataclass(slots=True)
class SecureRandomSource:
    """Draws from the operating system's cryptographically strong generator."""

    def randbelow(self, n: int) -> int:
        return secrets.randbelow(n)


@dataclass(slots=True)
class SeededRandomSource:
    """
    Reproducible source for tests and fixtures. Not suitable for real credentials.
    """

    seed: Optional[int] = None
    _rng: random.Random = field(init=False)

    def __post_init__(self) -> None:
        self._rng = random.Random(self.seed)

    def randbelow(self, n: int) -> int:
        return self._rng.randrange(n)


def make_random_source(secure: bool = True, seed: Optional[int] = None) -> RandomSource:
    if seed is not None or not secure:
        return SeededRandomSource(seed)
    return SecureRandomSource()


def generate_password(
    mask: str,
    special_alphabet: Iterable[str] = constants.DEFAULT_SPECIAL_ALPHABET,
    target_length: Optional[int] = None,
    *,
    rng: Optional[RandomSource] = None,
) -> str:
    """
    Generates a random password that satisfies ``mask``.

    The password holds exactly one occurrence of each required character, is padded
    with characters drawn uniformly (with replacement) from the allowed alphabet and
    is then shuffled with Fisher-Yates so required characters are not clustered at
    the start.

    Args:
        mask: An 11-digit mask.
        special_alphabet: Characters making up the special class.
        target_length: Length of the password. Defaults to the larger of the
            minimum length and the number of required characters plus two.
        rng: Source of randomness, defaults to :class:`SecureRandomSource`.

    Raises:
        MalformedMaskError: If the mask cannot be parsed.
        NoAllowedCharactersError: If the mask disables every character class.
        LengthBelowMinimumError: If ``target_length`` is below the minimum length.
        LengthBelowRequiredCountError: If ``target_length`` cannot hold every
            required character.
    """
    rng = rng or SecureRandomSource()

    config = parse_mask(mask, special_alphabet)
    allowed, required = allowed_alphabet(config), required_characters(config)

    if not allowed:
        raise NoAllowedCharactersError(
            constants.NO_ALLOWED_CHARACTERS,
            ctx=NoAllowedCharactersError.Context(mask=mask),
        )

    length = (
        target_length
        if target_length is not None
        else max(config.min_length, len(required) + 2)
    )

    if length < config.min_length:
        raise LengthBelowMinimumError(
            "Target length {ctx[target_length]} is less than minimum required "
            "length {ctx[min_length]}",
            ctx=LengthBelowMinimumError.Context(
                target_length=length, min_length=config.min_length
            ),
        )

    if length < len(required):
        raise LengthBelowRequiredCountError(
            "Target length {ctx[target_length]} is less than number of required "
            "characters {ctx[required_count]}",
            ctx=LengthBelowRequiredCountError.Context(
                target_length=length, required_count=len(required)
            ),
        )

    chars = list(required)
    while len(chars) < length:
        chars.append(allowed[rng.randbelow(len(allowed))])

    for i in range(len(chars) - 1, 0, -1):
        j = rng.randbelow(i + 1)
        chars[i], chars[j] = chars[j], chars[i]

    logger.debug(
        "generated password of length %d for mask %r (%d required character(s))",
        length,
        mask,
        len(required),
    )

    return "".join(chars)
