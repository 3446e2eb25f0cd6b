from collections.abc import Callable

import pytest

from whatwg_infra.code_points import (
    is_ascii_alpha,
    is_ascii_alphanumeric,
    is_ascii_code_point,
    is_ascii_digit,
    is_ascii_hex_digit,
    is_ascii_lower_hex_digit,
    is_ascii_tab_newline,
    is_ascii_tab_or_newline,
    is_ascii_upper_hex_digit,
    is_ascii_whitespace,
    is_c0_control,
    is_c0_control_or_space,
    is_c0_control_space,
    is_control,
    is_leading_surrogate,
    is_noncharacter,
    is_noncharacter_ordinal,
    is_scalar_value,
    is_surrogate,
    is_trailing_surrogate,
)

PLANE_END_NONCHARACTERS = (
    0xFFFE, 0xFFFF, 0x1FFFE, 0x1FFFF, 0x2FFFE, 0x2FFFF, 0x3FFFE, 0x3FFFF,
    0x4FFFE, 0x4FFFF, 0x5FFFE, 0x5FFFF, 0x6FFFE, 0x6FFFF, 0x7FFFE, 0x7FFFF,
    0x8FFFE, 0x8FFFF, 0x9FFFE, 0x9FFFF, 0xAFFFE, 0xAFFFF, 0xBFFFE, 0xBFFFF,
    0xCFFFE, 0xCFFFF, 0xDFFFE, 0xDFFFF, 0xEFFFE, 0xEFFFF, 0xFFFFE, 0xFFFFF,
    0x10FFFE, 0x10FFFF,
)


def test_noncharacter_range_is_inclusive() -> None:
    assert all(is_noncharacter(chr(o)) for o in range(0xFDD0, 0xFDEF + 1))
    assert not is_noncharacter("\ufdcf")
    assert not is_noncharacter("\ufdf0")


def test_noncharacter_plane_ends() -> None:
    assert len(PLANE_END_NONCHARACTERS) == 34
    assert all(is_noncharacter(chr(o)) for o in PLANE_END_NONCHARACTERS)


def test_noncharacter_matches_exactly_the_defined_set() -> None:
    expected = set(range(0xFDD0, 0xFDEF + 1)) | set(PLANE_END_NONCHARACTERS)
    actual = {o for o in range(0x110000) if is_noncharacter_ordinal(o)}
    assert actual == expected


@pytest.mark.parametrize("cp", ["\ufffd", "\U0010fffd", "\U0001fffd", "a", "\x00", "\ud800"])
def test_noncharacter_rejects_neighbours(cp: str) -> None:
    assert not is_noncharacter(cp)


def test_c0_control_excludes_delete() -> None:
    assert is_c0_control("\x00")
    assert is_c0_control("\x1e")
    assert is_c0_control("\x1f")
    assert not is_c0_control(" ")
    assert not is_c0_control("\x7f")


def test_c0_control_or_space() -> None:
    assert all(is_c0_control_or_space(chr(o)) for o in range(0x21))
    assert not is_c0_control_or_space("!")
    assert not is_c0_control_or_space("\x7f")
    assert is_c0_control_space is is_c0_control_or_space


def test_control_includes_delete_and_c1() -> None:
    assert is_control("\x7f")
    assert is_control("\x9f")
    assert is_control("\x1f")
    assert not is_control("\xa0")


def test_ascii_tab_or_newline() -> None:
    matched = {chr(o) for o in range(0x80) if is_ascii_tab_or_newline(chr(o))}
    assert matched == {"\t", "\n", "\r"}
    assert is_ascii_tab_newline is is_ascii_tab_or_newline


def test_ascii_whitespace_is_exactly_five_code_points() -> None:
    matched = {chr(o) for o in range(0x3000) if is_ascii_whitespace(chr(o))}
    assert matched == {"\t", "\n", "\f", "\r", " "}


def test_digits_and_hex_digits() -> None:
    assert all(is_ascii_digit(cp) for cp in "0123456789")
    assert not is_ascii_digit("\u0661")  # ARABIC-INDIC DIGIT ONE
    assert not is_ascii_digit("\u00b2")
    assert is_ascii_upper_hex_digit("F") and not is_ascii_upper_hex_digit("f")
    assert is_ascii_lower_hex_digit("f") and not is_ascii_lower_hex_digit("F")
    assert is_ascii_hex_digit("a") and is_ascii_hex_digit("A") and not is_ascii_hex_digit("g")


def test_alpha_and_alphanumeric() -> None:
    assert is_ascii_alpha("a") and is_ascii_alpha("Z")
    assert not is_ascii_alpha("\u00e0")
    assert is_ascii_alphanumeric("7")
    assert not is_ascii_alphanumeric("_")


def test_surrogates_and_scalar_values() -> None:
    assert is_leading_surrogate("\ud800") and not is_trailing_surrogate("\ud800")
    assert is_trailing_surrogate("\udfff") and not is_leading_surrogate("\udfff")
    assert is_surrogate("\udbff")
    assert not is_scalar_value("\udc00")
    assert is_scalar_value("\U0001f600")
    assert is_ascii_code_point("\x7f") and not is_ascii_code_point("\x80")


@pytest.mark.parametrize(
    "predicate",
    [
        is_noncharacter,
        is_c0_control,
        is_c0_control_or_space,
        is_control,
        is_ascii_tab_or_newline,
        is_ascii_whitespace,
        is_ascii_digit,
        is_ascii_hex_digit,
        is_ascii_alpha,
        is_ascii_code_point,
        is_surrogate,
        is_scalar_value,
    ],
)
def test_predicates_reject_end_of_input(predicate: Callable[[str], bool]) -> None:
    assert predicate("") is False
