"""Tests for the four-token text codec."""

import math

import pytest

from vector4.codec import components_equal, format_components, parse_components, split_tokens
from vector4.constants import NanPolicy
from vector4.errors import FormatError, InvalidTokenError, WrongTokenCountError


class TestSplitTokens:
    def test_four_tokens(self) -> None:
        assert split_tokens("1 2 3 4") == ["1", "2", "3", "4"]

    def test_surrounding_whitespace_trimmed(self) -> None:
        assert split_tokens("  1 2 3 4  ") == ["1", "2", "3", "4"]

    def test_whitespace_runs_collapse(self) -> None:
        assert split_tokens("1   2   3   4") == ["1", "2", "3", "4"]

    def test_tabs_and_newlines_are_whitespace(self) -> None:
        assert split_tokens("1\t2\n3\r\n4") == ["1", "2", "3", "4"]

    @pytest.mark.parametrize("text,count", [("", 0), ("   ", 0), ("1 2 3", 3), ("1 2 3 4 5", 5)])
    def test_wrong_count_raises(self, text: str, count: int) -> None:
        with pytest.raises(WrongTokenCountError, match=f"Expected 4 tokens, got {count}") as exc_info:
            split_tokens(text)
        assert exc_info.value.expected == 4
        assert exc_info.value.actual == count


class TestParseComponents:
    def test_returns_four_floats(self) -> None:
        assert parse_components("1 -2 3.5 0") == (1.0, -2.0, 3.5, 0.0)

    def test_first_invalid_token_reported(self) -> None:
        with pytest.raises(InvalidTokenError) as exc_info:
            parse_components("1 2,5 x 4")
        assert exc_info.value.token == "2,5"
        assert exc_info.value.index == 1

    def test_last_token_invalid_fails_whole_parse(self) -> None:
        with pytest.raises(InvalidTokenError) as exc_info:
            parse_components("1 2 3 four")
        assert exc_info.value.index == 3

    def test_count_checked_before_tokens(self) -> None:
        with pytest.raises(WrongTokenCountError):
            parse_components("x y z")

    def test_errors_are_value_errors(self) -> None:
        with pytest.raises(ValueError):
            parse_components("1 2 3")
        with pytest.raises(FormatError):
            parse_components("a b c d")


class TestFormatComponents:
    def test_single_space_separated(self) -> None:
        assert format_components((1.0, 2.0, 3.0, 4.0)) == "1 2 3 4"

    def test_specials(self) -> None:
        text = format_components((math.nan, math.inf, -math.inf, -0.0))
        assert text == "NaN Infinity -Infinity -0"


class TestComponentsEqual:
    def test_ieee_is_default(self) -> None:
        assert components_equal((1.0, 2.0, 3.0, 4.0), (1.0, 2.0, 3.0, 4.0))
        assert not components_equal((1.0, 2.0, 3.0, 4.0), (1.0, 2.0, 3.0, 4.5))

    def test_ieee_nan_never_equal(self) -> None:
        nan = (math.nan, 0.0, 0.0, 0.0)
        assert not components_equal(nan, nan, NanPolicy.IEEE)

    def test_ieee_signed_zero_equal(self) -> None:
        assert components_equal((0.0,) * 4, (-0.0,) * 4, NanPolicy.IEEE)

    def test_nan_equal_policy(self) -> None:
        assert components_equal((math.nan, 1.0, 2.0, 3.0), (math.nan, 1.0, 2.0, 3.0), NanPolicy.NAN_EQUAL)
        assert not components_equal((math.nan, 1.0, 2.0, 3.0), (0.0, 1.0, 2.0, 3.0), NanPolicy.NAN_EQUAL)

    def test_bitwise_policy(self) -> None:
        assert not components_equal((0.0,) * 4, (-0.0,) * 4, NanPolicy.BITWISE)
        assert components_equal((math.nan, 1.0, 2.0, 3.0), (math.nan, 1.0, 2.0, 3.0), NanPolicy.BITWISE)

    def test_no_tolerance(self) -> None:
        assert not components_equal((1.0, 0.0, 0.0, 0.0), (1.0000001, 0.0, 0.0, 0.0))

    def test_length_mismatch(self) -> None:
        assert not components_equal((1.0, 2.0, 3.0, 4.0), (1.0, 2.0, 3.0))

    def test_policy_accepts_plain_string(self) -> None:
        assert components_equal((math.nan,) * 4, (math.nan,) * 4, "nan_equal")  # type: ignore[arg-type]
