from typing import Optional, Sequence

from .constants import DIGITS_HIGH, DIGITS_LOW, LOWERCASE, UPPERCASE, CharacterClass
from .dto import PolicyConfig

__all__ = (
    "cyclic_char",
    "class_charset",
    "class_label",
    "allowed_alphabet",
    "required_characters",
)

_FIXED_CHARSETS: dict[CharacterClass, str] = {
    CharacterClass.UPPERCASE: UPPERCASE,
    CharacterClass.LOWERCASE: LOWERCASE,
    CharacterClass.DIGITS_LOW: DIGITS_LOW,
    CharacterClass.DIGITS_HIGH: DIGITS_HIGH,
}

_LABELS: dict[CharacterClass, str] = {
    CharacterClass.UPPERCASE: "Uppercase letters (A-Z)",
    CharacterClass.LOWERCASE: "Lowercase letters (a-z)",
    CharacterClass.DIGITS_LOW: "Digits 0-5",
    CharacterClass.DIGITS_HIGH: "Digits 6-9",
    CharacterClass.SPECIAL: "Special characters ({chars})",
}


def cyclic_char(charset: Sequence[str], index: int) -> Optional[str]:
    """
    Returns the character selected by a 1-based index that wraps around the end of
    ``charset``, or ``None`` when ``index`` is ``0``.

    Example::

        cyclic_char("ABC", 1)  # 'A'
        cyclic_char("ABC", 4)  # 'A'
    """
    if index == 0:
        return None
    if index < 0:
        raise ValueError("Cyclic index must not be negative, got %d" % index)
    if not charset:
        raise ValueError("Cannot select a character from an empty charset")

    return charset[(index - 1) % len(charset)]


def class_charset(
    character_class: CharacterClass, config: PolicyConfig
) -> tuple[str, ...]:
    if character_class is CharacterClass.SPECIAL:
        return config.special_alphabet
    return tuple(_FIXED_CHARSETS[character_class])


def class_label(character_class: CharacterClass, config: PolicyConfig) -> str:
    return _LABELS[character_class].format(chars=", ".join(config.special_alphabet))


def allowed_alphabet(config: PolicyConfig) -> tuple[str, ...]:
    alphabet: list[str] = []

    for rule in config.rules():
        if rule.allowed:
            alphabet.extend(class_charset(rule.character_class, config))

    return tuple(alphabet)


def required_characters(config: PolicyConfig) -> tuple[str, ...]:
    required: list[str] = []

    for rule in config.rules():
        if not rule.allowed:
            continue

        char = cyclic_char(
            class_charset(rule.character_class, config), rule.required_index
        )
        if char is not None:
            required.append(char)

    return tuple(required)
