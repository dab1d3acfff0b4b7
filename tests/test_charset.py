import pytest

from password_mask import allowed_alphabet, parse_mask, required_characters
from password_mask.charset import class_label, cyclic_char
from password_mask.constants import UPPERCASE, CharacterClass


@pytest.mark.parametrize(
    "index, expected",
    [(1, "A"), (2, "B"), (26, "Z"), (27, "A"), (28, "B"), (53, "A")],
)
def test_cyclic_index_wraps_around(index: int, expected: str) -> None:
    assert cyclic_char(UPPERCASE, index) == expected


def test_cyclic_index_zero_selects_nothing() -> None:
    assert cyclic_char(UPPERCASE, 0) is None


def test_cyclic_index_matches_modulo_law() -> None:
    for charset in ("ABC", "0123", "6789", ("!", "@")):
        for index in range(1, 10):
            assert cyclic_char(charset, index) == charset[(index - 1) % len(charset)]


def test_allowed_alphabet_in_class_order() -> None:
    config = parse_mask("10001000101", "+-")

    assert "".join(allowed_alphabet(config)) == UPPERCASE + "012345" + "+-"


def test_allowed_alphabet_empty_when_nothing_allowed() -> None:
    assert allowed_alphabet(parse_mask("00000000003")) == ()


def test_required_characters() -> None:
    # digit classes wrap: 9 -> '2' for 0-5, 9 -> '6' for 6-9
    assert required_characters(parse_mask("11111919199")) == ("A", "a", "2", "6", "(")


def test_required_special_uses_custom_alphabet_size() -> None:
    assert required_characters(parse_mask("00000000131", "+-")) == ("+",)


def test_required_index_ignored_for_disabled_class() -> None:
    assert required_characters(parse_mask("05050505051")) == ()


@pytest.mark.parametrize(
    "mask", ["11111111119", "19293949599", "01010101011", "13000017151", "00000000001"]
)
def test_required_characters_are_allowed(mask: str) -> None:
    config = parse_mask(mask)

    assert set(required_characters(config)) <= set(allowed_alphabet(config))


def test_special_label_lists_alphabet() -> None:
    config = parse_mask("00000000101", "+-")

    assert class_label(CharacterClass.SPECIAL, config) == "Special characters (+, -)"
