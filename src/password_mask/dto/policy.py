from typing import Annotated, Iterator, NamedTuple

import annotated_types
from pydantic import BaseModel, ConfigDict

from ..constants import DEFAULT_SPECIAL_ALPHABET, CharacterClass

RequiredIndex = Annotated[int, annotated_types.Ge(0), annotated_types.Le(9)]


class ClassRule(NamedTuple):
    character_class: CharacterClass
    allowed: bool
    required_index: int


class PolicyConfig(BaseModel):
    """
    Password composition policy decoded from an 11-digit mask.

    Each character class is described by a pair of fields: whether the class may
    appear in a password at all, and a 1-based cyclic index selecting one character
    of that class the password must contain (``0`` means no specific character is
    required).
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    uppercase_allowed: bool = False
    required_uppercase_index: RequiredIndex = 0
    lowercase_allowed: bool = False
    required_lowercase_index: RequiredIndex = 0
    digits_low_allowed: bool = False
    required_digit_low_index: RequiredIndex = 0
    digits_high_allowed: bool = False
    required_digit_high_index: RequiredIndex = 0
    special_allowed: bool = False
    required_special_index: RequiredIndex = 0
    min_length: Annotated[int, annotated_types.Ge(1), annotated_types.Le(9)] = 1
    special_alphabet: tuple[str, ...] = DEFAULT_SPECIAL_ALPHABET

    def rules(self) -> Iterator[ClassRule]:
        """Yields the (class, allowed, required index) triples in mask order."""
        yield ClassRule(
            CharacterClass.UPPERCASE,
            self.uppercase_allowed,
            self.required_uppercase_index,
        )
        yield ClassRule(
            CharacterClass.LOWERCASE,
            self.lowercase_allowed,
            self.required_lowercase_index,
        )
        yield ClassRule(
            CharacterClass.DIGITS_LOW,
            self.digits_low_allowed,
            self.required_digit_low_index,
        )
        yield ClassRule(
            CharacterClass.DIGITS_HIGH,
            self.digits_high_allowed,
            self.required_digit_high_index,
        )
        yield ClassRule(
            CharacterClass.SPECIAL, self.special_allowed, self.required_special_index
        )

    def to_mask(self) -> str:
        from ..parser import encode_mask

        return encode_mask(self)
