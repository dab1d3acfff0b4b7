from password_mask import validate_password


def test_valid_password_for_all_classes() -> None:
    result = validate_password("Ab3$9f!2", "10101010108")

    assert result.is_valid
    assert result.errors == []
    assert result.details is not None
    assert result.details.length == 8
    assert result.details.min_length == 8


def test_missing_required_character_only() -> None:
    result = validate_password("bcdefghij", "11111111119")

    assert not result.is_valid
    assert "Required character 'A' is missing" in result.errors
    assert "Password must be at least 9 characters long" not in result.errors


def test_all_errors_are_accumulated_in_order() -> None:
    # uppercase only, must contain 'B', min length 5
    result = validate_password("ab", "12000000005")

    assert result.errors == [
        "Password must be at least 5 characters long",
        "Character 'a' is not allowed",
        "Character 'b' is not allowed",
        "Required character 'B' is missing",
    ]


def test_duplicate_disallowed_characters_are_reported_per_occurrence() -> None:
    result = validate_password("A!A!", "10000000001")

    assert result.errors == [
        "Character '!' is not allowed",
        "Character '!' is not allowed",
    ]


def test_all_classes_disabled() -> None:
    result = validate_password("ab", "00000000003")

    assert not result.is_valid
    assert result.errors == [
        "Password must be at least 3 characters long",
        "Character 'a' is not allowed",
        "Character 'b' is not allowed",
    ]
    assert result.details is not None
    assert result.details.allowed_chars == []


def test_details_track_found_required_characters() -> None:
    # required: 'A', 'a', '0', '6', '!'
    result = validate_password("xA6y", "11111111111")

    assert result.details is not None
    assert result.details.required_chars == ["A", "a", "0", "6", "!"]
    assert result.details.found_required_chars == ["A", "6"]
    assert result.errors == [
        "Required character 'a' is missing",
        "Required character '0' is missing",
        "Required character '!' is missing",
    ]


def test_required_character_found_anywhere() -> None:
    assert validate_password("zzzzA", "11100000005").is_valid


def test_custom_special_alphabet() -> None:
    assert validate_password("ab+", "00100000103", "+-").is_valid
    assert not validate_password("ab!", "00100000103", "+-").is_valid


def test_malformed_mask_short_circuits() -> None:
    result = validate_password("anything", "123")

    assert not result.is_valid
    assert result.errors == ["Mask must be exactly 11 digits"]
    assert result.details is None


def test_empty_special_alphabet_with_special_disabled() -> None:
    result = validate_password("abc", "00100000003", "")

    assert result.is_valid
    assert result.details is not None
    assert result.details.allowed_chars == list("abcdefghijklmnopqrstuvwxyz")


def test_empty_special_alphabet_with_special_allowed() -> None:
    result = validate_password("abc", "00100000103", "")

    assert not result.is_valid
    assert result.details is None
    assert result.errors == [
        "Special alphabet must not be empty when special characters are allowed"
    ]
