"""Tests for literal validation, normalization and period segmentation."""

from __future__ import annotations

import pytest

from number_reader.exceptions import (
    MagnitudeOutOfRangeError,
    MalformedLiteralError,
    UnsupportedInputKindError,
)
from number_reader.models import DEFAULT_CONFIG, ReadingConfig
from number_reader.parser import (
    add_leading_zeros_to_fit_period,
    parse_number_data,
    remove_thousands_separators,
    trim_redundant_zeros,
    validate_number,
    zip_integral_periods,
)

CFG = DEFAULT_CONFIG


class TestValidateNumber:
    def test_string_passes_through(self):
        assert validate_number("1,234.50") == "1,234.50"

    def test_int_is_exact(self):
        big = 123456789012345678901
        assert validate_number(big) == "123456789012345678901"

    def test_int_past_magnitude_table(self):
        with pytest.raises(MagnitudeOutOfRangeError) as exc_info:
            validate_number(-(10**21))
        assert exc_info.value.details == {"max_digits": 21}

    def test_int_past_str_digit_limit(self):
        # Longer than the interpreter's int-to-str limit
        with pytest.raises(MagnitudeOutOfRangeError):
            validate_number(10**5000)

    def test_negative_int(self):
        assert validate_number(-15) == "-15"

    def test_float_rejected(self):
        with pytest.raises(UnsupportedInputKindError, match="float"):
            validate_number(1.0)

    def test_bool_rejected(self):
        with pytest.raises(UnsupportedInputKindError):
            validate_number(False)


class TestNormalizer:
    def test_remove_separators(self):
        assert remove_thousands_separators(CFG, "1,234,567") == "1234567"

    def test_trim_leading_zeros_only_without_point(self):
        assert trim_redundant_zeros(CFG, "00100") == "100"

    def test_trim_both_ends_with_point(self):
        assert trim_redundant_zeros(CFG, "0010.500") == "10.5"

    def test_trim_stops_at_point(self):
        assert trim_redundant_zeros(CFG, "0.0") == "."

    def test_trim_zero(self):
        assert trim_redundant_zeros(CFG, "0") == ""


class TestSegmenter:
    def test_pad_to_period(self):
        assert add_leading_zeros_to_fit_period(CFG, "1234") == "001234"

    def test_pad_exact_multiple(self):
        assert add_leading_zeros_to_fit_period(CFG, "123456") == "123456"

    def test_pad_empty(self):
        assert add_leading_zeros_to_fit_period(CFG, "") == ""

    def test_zip_periods(self):
        assert zip_integral_periods(CFG, [0, 0, 1, 2, 3, 4]) == [(0, 0, 1), (2, 3, 4)]


class TestParseNumberData:
    def test_full_literal(self):
        data = parse_number_data(CFG, "-1,234.50")
        assert data.is_negative is True
        assert data.integral_part == ((0, 0, 1), (2, 3, 4))
        assert data.fractional_part == (5,)

    def test_zero_is_one_zero_period(self):
        data = parse_number_data(CFG, "0")
        assert data.integral_part == ((0, 0, 0),)
        assert data.fractional_part == ()

    def test_zero_point_five(self):
        data = parse_number_data(CFG, "0.5")
        assert data.integral_part == ((0, 0, 0),)
        assert data.fractional_part == (5,)

    def test_fraction_order_is_kept(self):
        assert parse_number_data(CFG, "1.0203").fractional_part == (0, 2, 0, 3)

    def test_equivalent_literals_parse_equal(self):
        assert parse_number_data(CFG, "0001,000.10") == parse_number_data(CFG, "1000.1")

    def test_period_size_two(self):
        config = ReadingConfig(period_size=2)
        assert parse_number_data(config, "12345").integral_part == ((0, 1), (2, 3), (4, 5))

    def test_separator_only_is_malformed(self):
        with pytest.raises(MalformedLiteralError):
            parse_number_data(CFG, ",,,")

    def test_sign_after_separator_removal(self):
        # "-1,000" is fine; a sign in the middle is not
        assert parse_number_data(CFG, "-1,000").is_negative is True
        with pytest.raises(MalformedLiteralError):
            parse_number_data(CFG, "1,-000")

    def test_too_many_periods(self):
        with pytest.raises(MagnitudeOutOfRangeError) as exc_info:
            parse_number_data(CFG, "1" + "0" * 21)
        assert exc_info.value.details["max_groups"] == 7
