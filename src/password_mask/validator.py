from logging import getLogger
from typing import Iterable

from . import constants
from .charset import allowed_alphabet, required_characters
from .dto import ValidationDetails, ValidationResult
from .exc import MaskError
from .parser import parse_mask

__all__ = ("validate_password",)

logger = getLogger(__name__)


def validate_password(
    password: str,
    mask: str,
    special_alphabet: Iterable[str] = constants.DEFAULT_SPECIAL_ALPHABET,
) -> ValidationResult:
    """
    Checks ``password`` against every rule encoded by ``mask``.

    All violations are collected, in this order: the length check, one entry per
    disallowed character occurrence (in password order), then one entry per missing
    required character (in class order). A mask that cannot be parsed yields an
    invalid result carrying only the parse error and no details.
    """
    try:
        config = parse_mask(mask, special_alphabet)
    except MaskError as ex:
        logger.debug("rejecting password, mask %r is unusable: %s", mask, ex)
        return ValidationResult(is_valid=False, errors=[str(ex)], details=None)

    allowed, required = allowed_alphabet(config), required_characters(config)
    allowed_set = frozenset(allowed)

    errors: list[str] = []
    details = ValidationDetails(
        length=len(password),
        min_length=config.min_length,
        allowed_chars=list(allowed),
        required_chars=list(required),
    )

    if len(password) < config.min_length:
        errors.append(constants.PASSWORD_TOO_SHORT.format(min_length=config.min_length))

    for char in password:
        if char not in allowed_set:
            errors.append(constants.CHARACTER_NOT_ALLOWED.format(char=char))

    for char in required:
        if char in password:
            details.found_required_chars.append(char)
        else:
            errors.append(constants.REQUIRED_CHARACTER_MISSING.format(char=char))

    logger.debug(
        "validated password of length %d against mask %r: %d error(s)",
        len(password),
        mask,
        len(errors),
    )

    return ValidationResult(is_valid=not errors, errors=errors, details=details)
