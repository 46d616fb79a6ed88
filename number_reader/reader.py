"""
Read a parsed number aloud in words.

Supported patterns (default Vietnamese config):
    "15"        → "Mười lăm đồng"             (teen: only 5 mutates)
    "21"        → "Hai mươi mốt đồng"         (tens ≥ 2: 1/4/5 mutate)
    "101"       → "Một trăm lẻ một đồng"      (odd filler)
    "3000001"   → "Ba triệu không trăm lẻ một đồng"
    "-1.25"     → "Âm một chấm hai mươi lăm đồng"

Every function here is pure: same config and digits in, same words out.
"""

from __future__ import annotations

import logging

from .models import DEFAULT_CONFIG, NumberData, ReadingConfig
from .parser import parse_number_data, validate_number

logger = logging.getLogger(__name__)


# ─── Tone Mutation Tables ───────────────────────────────────────────
# Ones digit → config field holding its mutated form, keyed by the tens
# context. A digit missing from the table is read plainly.

_TEENS_TONES: dict[int, str] = {5: "five_tone_text"}

_TENS_TONES: dict[int, str] = {
    1: "one_tone_text",
    4: "four_tone_text",
    5: "five_tone_text",
}


def _read_trailing_digit(config: ReadingConfig, c: int, tones: dict[int, str]) -> list[str]:
    if c in tones:
        return [getattr(config, tones[c])]
    if c != 0:
        return [config.digits[c]]
    return []


# ─── Group Renderer ─────────────────────────────────────────────────


def read_last_two_digits(config: ReadingConfig, b: int, c: int) -> list[str]:
    """Read a tens digit `b` and ones digit `c`."""
    if b == 0:
        return [config.digits[c]]
    if b == 1:
        return [config.ten_text, *_read_trailing_digit(config, c, _TEENS_TONES)]
    return [config.digits[b], config.ten_tone_text, *_read_trailing_digit(config, c, _TENS_TONES)]


def read_three_digits(
    config: ReadingConfig, a: int, b: int, c: int, read_zero_hundred: bool = False
) -> list[str]:
    """Read one hundreds/tens/ones group.

    Args:
        read_zero_hundred: Say "không trăm" even when `a` is 0. Set for every
            group after the most significant one.
    """
    output: list[str] = []
    has_hundred = a != 0 or read_zero_hundred
    if has_hundred:
        output.extend((config.digits[a], config.hundred_text))
        if b == 0:
            if c == 0:
                return output
            output.append(config.odd_text)
    output.extend(read_last_two_digits(config, b, c))
    return output


def _read_period(config: ReadingConfig, period: tuple[int, ...], read_zero_hundred: bool) -> list[str]:
    # Periods shorter than three digits have no hundreds place to force
    if len(period) < 3:
        read_zero_hundred = False
    a, b, c = (0,) * (3 - len(period)) + tuple(period)
    return read_three_digits(config, a, b, c, read_zero_hundred)


# ─── Assemblers ─────────────────────────────────────────────────────


def read_integral_part(config: ReadingConfig, periods: tuple[tuple[int, ...], ...]) -> list[str]:
    """Read every non-zero period followed by its magnitude words.

    An all-zero period is dropped together with its magnitude word, unless it
    is the only period (the number zero).
    """
    output: list[str] = []
    is_single_period = len(periods) == 1
    for index, period in enumerate(periods):
        if not any(period) and not is_single_period:
            continue
        output.extend(_read_period(config, period, read_zero_hundred=index != 0))
        output.extend(config.magnitude_words(len(periods) - 1 - index))
    return output


def read_fractional_part(config: ReadingConfig, digits: tuple[int, ...]) -> list[str]:
    """Read the digits after the point.

    Two digits read like cents, three like mils; any other count is read
    digit by digit.
    """
    if len(digits) == 2:
        b, c = digits
        return read_last_two_digits(config, b, c)
    if len(digits) == 3:
        a, b, c = digits
        return read_three_digits(config, a, b, c, read_zero_hundred=True)
    return [config.digits[d] for d in digits]


def capitalize_first_letter(text: str) -> str:
    return text[:1].upper() + text[1:]


def read_number(config: ReadingConfig, number_data: NumberData) -> str:
    """Assemble the full reading: sign, integral, point, fraction, unit."""
    output = read_integral_part(config, number_data.integral_part)
    if number_data.fractional_part:
        output.append(config.point_text)
        output.extend(read_fractional_part(config, number_data.fractional_part))
    if number_data.is_negative:
        output.insert(0, config.negative_text)
    output.extend(config.unit)
    return capitalize_first_letter(config.separator.join(output))


# ─── Main Converter ─────────────────────────────────────────────────


def convert_number_to_words(value: str | int, config: ReadingConfig = DEFAULT_CONFIG) -> str:
    """Convert a numeric literal to words.

    Args:
        value: A decimal string such as "-1,234.5", or an int of any size.
        config: Word tables and input syntax. Defaults to Vietnamese đồng.

    Returns:
        The capitalized reading, e.g. "Một nghìn hai trăm ba mươi tư đồng".

    Raises:
        UnsupportedInputKindError: If `value` is not a str or int.
        MalformedLiteralError: If the string is not a numeric literal.
        MagnitudeOutOfRangeError: If the number is too large for the
            magnitude table.
    """
    literal = validate_number(value, config)
    number_data = parse_number_data(config, literal)
    logger.debug(
        "Parsed %r: negative=%s, %d period(s), %d fractional digit(s)",
        literal,
        number_data.is_negative,
        len(number_data.integral_part),
        len(number_data.fractional_part),
    )
    return read_number(config, number_data)
