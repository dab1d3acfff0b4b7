import pydantic
import pytest

from password_mask import DEFAULT_SPECIAL_ALPHABET, PolicyConfig, encode_mask, parse_mask
from password_mask.exc import InvalidSpecialAlphabetError, MalformedMaskError


def test_parse_all_classes_allowed() -> None:
    config = parse_mask("10101010108")

    assert config.uppercase_allowed
    assert config.lowercase_allowed
    assert config.digits_low_allowed
    assert config.digits_high_allowed
    assert config.special_allowed
    assert config.min_length == 8
    assert config.special_alphabet == DEFAULT_SPECIAL_ALPHABET
    assert [rule.required_index for rule in config.rules()] == [0, 0, 0, 0, 0]


def test_parse_positional_digits() -> None:
    config = parse_mask("13052719045")

    assert config == PolicyConfig(
        uppercase_allowed=True,
        required_uppercase_index=3,
        lowercase_allowed=False,
        required_lowercase_index=5,
        digits_low_allowed=False,
        required_digit_low_index=7,
        digits_high_allowed=True,
        required_digit_high_index=9,
        special_allowed=False,
        required_special_index=4,
        min_length=5,
    )


def test_zero_min_length_is_coerced_to_one() -> None:
    assert parse_mask("11111111110").min_length == 1


def test_flag_digits_other_than_one_disable_the_class() -> None:
    config = parse_mask("21212121213")

    assert not any(rule.allowed for rule in config.rules())


@pytest.mark.parametrize(
    "mask",
    ["", "1010101010", "101010101080", "1010101010a", " 1010101010", "10101010108\n"],
)
def test_malformed_mask(mask: str) -> None:
    with pytest.raises(MalformedMaskError) as exc_info:
        parse_mask(mask)

    assert str(exc_info.value) == "Mask must be exactly 11 digits"
    assert exc_info.value.ctx == {"mask": mask}


def test_non_ascii_digits_are_rejected() -> None:
    with pytest.raises(MalformedMaskError):
        parse_mask("١٠١٠١٠١٠١٠٨")


def test_parse_is_pure() -> None:
    assert parse_mask("11213141519", "+-") == parse_mask("11213141519", "+-")


def test_custom_special_alphabet_from_string() -> None:
    assert parse_mask("00000000111", "+-_").special_alphabet == ("+", "-", "_")


@pytest.mark.parametrize("alphabet", [["ab"], ["+", ""], ["+", "ab"]])
def test_invalid_special_alphabet(alphabet: list[str] | str) -> None:
    with pytest.raises(InvalidSpecialAlphabetError):
        parse_mask("00000000111", alphabet)


def test_config_is_frozen() -> None:
    config = parse_mask("10101010108")

    with pytest.raises(pydantic.ValidationError):
        config.min_length = 3  # type: ignore[misc]


@pytest.mark.parametrize("mask", ["10101010108", "13050719145", "11111111119"])
def test_encode_restores_canonical_mask(mask: str) -> None:
    assert encode_mask(parse_mask(mask)) == mask
    assert parse_mask(mask).to_mask() == mask


def test_encode_normalizes_flags_and_min_length() -> None:
    assert parse_mask("21212121210").to_mask() == "01010101011"


def test_invalid_special_alphabet_message_names_entry() -> None:
    with pytest.raises(InvalidSpecialAlphabetError) as exc_info:
        parse_mask("00000000111", ["+", "{}"])

    assert str(exc_info.value) == (
        "Special alphabet entries must be single characters, got '{}'"
    )


def test_empty_special_alphabet_accepted_when_special_disabled() -> None:
    config = parse_mask("00100000003", "")

    assert not config.special_allowed
    assert config.special_alphabet == ()


def test_empty_special_alphabet_rejected_when_special_allowed() -> None:
    with pytest.raises(InvalidSpecialAlphabetError) as exc_info:
        parse_mask("00000000103", [])

    assert str(exc_info.value) == (
        "Special alphabet must not be empty when special characters are allowed"
    )
