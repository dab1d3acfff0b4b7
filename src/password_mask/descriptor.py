from logging import getLogger
from typing import Iterable

from . import constants
from .charset import class_charset, class_label, cyclic_char, required_characters
from .constants import CharacterClass
from .dto import MaskDescription
from .exc import MaskError
from .parser import parse_mask

__all__ = ("describe_mask",)

logger = getLogger(__name__)

_RULE_TEMPLATES: dict[CharacterClass, str] = {
    CharacterClass.UPPERCASE: "Must contain uppercase letter: {char}",
    CharacterClass.LOWERCASE: "Must contain lowercase letter: {char}",
    CharacterClass.DIGITS_LOW: "Must contain digit 0-5: {char}",
    CharacterClass.DIGITS_HIGH: "Must contain digit 6-9: {char}",
    CharacterClass.SPECIAL: "Must contain special character: {char}",
}


def describe_mask(
    mask: str,
    special_alphabet: Iterable[str] = constants.DEFAULT_SPECIAL_ALPHABET,
) -> MaskDescription:
    """Renders the rules of ``mask`` as human-readable text."""
    try:
        config = parse_mask(mask, special_alphabet)
    except MaskError as ex:
        logger.debug("unable to describe mask %r: %s", mask, ex)
        return MaskDescription(error=str(ex))

    description = MaskDescription(
        required_characters=list(required_characters(config)),
        min_length=config.min_length,
    )

    for rule in config.rules():
        if not rule.allowed:
            continue

        description.allowed_character_types.append(
            class_label(rule.character_class, config)
        )

        char = cyclic_char(
            class_charset(rule.character_class, config), rule.required_index
        )
        if char is not None:
            description.rules.append(
                _RULE_TEMPLATES[rule.character_class].format(char=char)
            )

    description.rules.append("Minimum length: %d characters" % config.min_length)

    return description
