import re
from logging import getLogger
from typing import Iterable

from . import constants
from .dto import PolicyConfig
from .exc import InvalidSpecialAlphabetError, MalformedMaskError

__all__ = ("parse_mask", "encode_mask", "normalize_special_alphabet")

logger = getLogger(__name__)

_MASK_RE = re.compile(constants.MASK_PATTERN, re.ASCII)


def normalize_special_alphabet(special_alphabet: Iterable[str]) -> tuple[str, ...]:
    chars = tuple(special_alphabet)

    for char in chars:
        if not isinstance(char, str) or len(char) != 1:
            raise InvalidSpecialAlphabetError(
                "Special alphabet entries must be single characters, "
                "got {ctx[entry]!r}",
                ctx=InvalidSpecialAlphabetError.Context(entry=char),
            )

    return chars


def parse_mask(
    mask: str,
    special_alphabet: Iterable[str] = constants.DEFAULT_SPECIAL_ALPHABET,
) -> PolicyConfig:
    """
    Decodes an 11-digit mask into a :class:`PolicyConfig`.

    Digit layout (0-based positions)::

        0  uppercase allowed          1  required uppercase index
        2  lowercase allowed          3  required lowercase index
        4  digits 0-5 allowed         5  required digit 0-5 index
        6  digits 6-9 allowed         7  required digit 6-9 index
        8  special allowed            9  required special index
        10 minimum length (0 is read as 1)

    A flag position enables its class only when it holds ``1``.

    Raises:
        MalformedMaskError: If the mask is not exactly 11 ASCII digits.
        InvalidSpecialAlphabetError: If the special alphabet holds entries that are
            not single characters, or is empty while the mask allows special
            characters.
    """
    if not isinstance(mask, str) or not _MASK_RE.fullmatch(mask):
        raise MalformedMaskError(
            constants.MALFORMED_MASK,
            ctx=MalformedMaskError.Context(mask=str(mask)),
        )

    digits = [int(d) for d in mask]
    chars = normalize_special_alphabet(special_alphabet)

    if digits[8] == 1 and not chars:
        raise InvalidSpecialAlphabetError(
            "Special alphabet must not be empty when special characters are allowed"
        )

    config = PolicyConfig(
        uppercase_allowed=digits[0] == 1,
        required_uppercase_index=digits[1],
        lowercase_allowed=digits[2] == 1,
        required_lowercase_index=digits[3],
        digits_low_allowed=digits[4] == 1,
        required_digit_low_index=digits[5],
        digits_high_allowed=digits[6] == 1,
        required_digit_high_index=digits[7],
        special_allowed=digits[8] == 1,
        required_special_index=digits[9],
        min_length=digits[10] or 1,
        special_alphabet=chars,
    )

    logger.debug("parsed mask %r into %r", mask, config)

    return config


def encode_mask(config: PolicyConfig) -> str:
    """Renders ``config`` back to its 11-digit mask."""
    digits: list[int] = []

    for rule in config.rules():
        digits.extend((int(rule.allowed), rule.required_index))

    digits.append(config.min_length)

    return "".join(map(str, digits))
