__all__ = (
    "dto",
    "exc",
    "CharacterClass",
    "DEFAULT_SPECIAL_ALPHABET",
    "MaskDescription",
    "PolicyConfig",
    "ValidationResult",
    "RandomSource",
    "SecureRandomSource",
    "SeededRandomSource",
    "parse_mask",
    "encode_mask",
    "allowed_alphabet",
    "required_characters",
    "validate_password",
    "generate_password",
    "describe_mask",
)
__version__ = "0.1.0"

from . import dto, exc
from .charset import allowed_alphabet, required_characters
from .constants import DEFAULT_SPECIAL_ALPHABET, CharacterClass
from .descriptor import describe_mask
from .dto import MaskDescription, PolicyConfig, ValidationResult
from .generator import (
    RandomSource,
    SecureRandomSource,
    SeededRandomSource,
    generate_password,
)
from .parser import encode_mask, parse_mask
from .validator import validate_password
