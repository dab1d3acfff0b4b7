from enum import Enum

MASK_LENGTH = 11
MASK_PATTERN = r"\d{11}"

UPPERCASE = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
LOWERCASE = "abcdefghijklmnopqrstuvwxyz"
DIGITS_LOW = "012345"
DIGITS_HIGH = "6789"

DEFAULT_SPECIAL_ALPHABET = ("!", "@", "#", "$", "%", "^", "&", "*", "(", ")")


class CharacterClass(str, Enum):
    # declaration order is the order of the mask digit pairs
    UPPERCASE = "uppercase"
    LOWERCASE = "lowercase"
    DIGITS_LOW = "digits_low"
    DIGITS_HIGH = "digits_high"
    SPECIAL = "special"


# error messages
MALFORMED_MASK = "Mask must be exactly 11 digits"
NO_ALLOWED_CHARACTERS = "No character types are allowed"
PASSWORD_TOO_SHORT = "Password must be at least {min_length} characters long"
CHARACTER_NOT_ALLOWED = "Character '{char}' is not allowed"
REQUIRED_CHARACTER_MISSING = "Required character '{char}' is missing"
