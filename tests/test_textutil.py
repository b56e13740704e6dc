import pytest

from cubcaster.textutil import (
    count_words,
    parse_int,
    split_in_two,
    split_words,
    trim,
    trim_all,
)


@pytest.mark.parametrize(
    "text, expected",
    [("42", 42), ("0", 0), ("255", 255), ("-7", -7), ("+13", 13)],
)
def test_parse_int_plain_numbers(text, expected):
    assert parse_int(text) == expected


def test_parse_int_skips_leading_whitespace_and_stops_at_non_digit():
    assert parse_int(" \t\n 120abc") == 120
    assert parse_int("99,1") == 99


def test_parse_int_none_gives_minus_one():
    assert parse_int(None) == -1


def test_parse_int_overflow_gives_minus_one():
    assert parse_int("9" * 30) == -1


def test_parse_int_non_numeric_is_zero():
    assert parse_int("abc") == 0
    assert parse_int("") == 0


def test_parse_int_result_fits_in_32_bits():
    value = parse_int("123456789012")
    assert -(2**31) <= value < 2**31


def test_split_words_drops_empty_words():
    assert split_words(",,220,,100,0,", ",") == ["220", "100", "0"]


def test_split_words_multiple_separators():
    assert split_words("a b\tc", " \t") == ["a", "b", "c"]


def test_split_words_only_separators():
    assert split_words(" , ,", ", ") == []


def test_count_words_matches_split():
    text = "  12 , 34,56  "
    assert count_words(text, ",") == len(split_words(text, ","))
    assert count_words("220,100,0", ",") == 3


def test_count_words_empty():
    assert count_words("", ",") == 0


def test_split_words_rejoin_roundtrip():
    words = ["NO", "./path", "x"]
    assert split_words(" ".join(words), " ") == words


def test_trim_both_ends_only():
    assert trim("  a b \n", " \n") == "a b"


def test_trim_none_or_empty_set_keeps_text():
    assert trim("  x ", None) == "  x "
    assert trim("  x ", "") == "  x "


def test_trim_everything():
    assert trim(" \n \n", " \n") == ""


def test_trim_all():
    assert trim_all([" 1", "2 ", " 3 "], " ") == ["1", "2", "3"]


def test_trim_all_idempotent():
    once = trim_all([" a ", "\nb"], " \n")
    assert trim_all(once, " \n") == once


def test_split_in_two_key_and_rest():
    assert split_in_two("NO   ./textures/north.xpm", " ") == [
        "NO",
        "./textures/north.xpm",
    ]


def test_split_in_two_keeps_rest_verbatim():
    assert split_in_two("C 220, 100, 0", " ") == ["C", "220, 100, 0"]


def test_split_in_two_single_word():
    assert split_in_two("NO", " ") == ["NO"]


def test_split_in_two_empty_raises():
    with pytest.raises(ValueError):
        split_in_two("   ", " ")
    with pytest.raises(ValueError):
        split_in_two("", " ")